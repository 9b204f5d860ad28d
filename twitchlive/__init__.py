import logging

from .twitch import (ClientConfig, HelixData, LiveChannel, PaginationError, TwitchAPIError, TwitchAPIHelix,
                     TwitchLiveAdapter, TwitchResponseError, TwitchTransportError, UserNotFound)
from .view import ConsoleView, OutputFormat, TimeMode

__all__ = ['ClientConfig', 'HelixData', 'LiveChannel', 'PaginationError', 'TwitchAPIError', 'TwitchAPIHelix',
           'TwitchLiveAdapter', 'TwitchResponseError', 'TwitchTransportError', 'UserNotFound', 'ConsoleView',
           'OutputFormat', 'TimeMode']

logging.getLogger(__name__).addHandler(logging.NullHandler())
