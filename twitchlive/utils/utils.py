import logging
from typing import Any, Hashable, Iterable, Iterator, List, Sequence, TypeVar

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)

log = logging.getLogger(__name__)


def chunked(l: Sequence[T], chunk_size: int) -> Iterator[Sequence[T]]:
    for i in range(0, len(l), chunk_size):
        yield l[i:i + chunk_size]


def unique(items: Iterable[H]) -> List[H]:
    # First occurrence wins, order preserved
    return list(dict.fromkeys(items))


def to_int(value: Any, name: str = 'value', default: int = 0) -> int:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        log.warning('Invalid %s %r, using %d', name, value, default)
        return default
