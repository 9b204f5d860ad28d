from .utils import chunked, to_int, unique

__all__ = ['chunked', 'to_int', 'unique']
