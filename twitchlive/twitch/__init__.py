from .adapters import TwitchLiveAdapter
from .base import (ClientConfig, PaginationError, TwitchAPIError, TwitchResponseError, TwitchTransportError,
                   UserNotFound)
from .data import LiveChannel
from .helix import HelixData, TwitchAPIHelix

__all__ = ['TwitchLiveAdapter', 'ClientConfig', 'PaginationError', 'TwitchAPIError', 'TwitchResponseError',
           'TwitchTransportError', 'UserNotFound', 'LiveChannel', 'HelixData', 'TwitchAPIHelix']

