import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Set

from iso8601 import ParseError, parse_date

from ..utils import chunked, to_int, unique
from .base import JSONT, PaginationError, UserNotFound
from .data import LiveChannel
from .helix import TwitchAPIHelix

log = logging.getLogger(__name__)

# Extra pages allowed on top of the number announced by `total`
PAGINATION_SLACK = 2
EPOCH = datetime.fromtimestamp(0, timezone.utc)


class TwitchLiveAdapter:
    """Turns raw Helix responses into the list of live channels a user follows."""

    def __init__(self, api: TwitchAPIHelix) -> None:
        self.api = api

    def get_user_id(self, login: str) -> str:
        users = self.api.get_users(login=[login])
        if not users:
            raise UserNotFound(login)
        return str(users[0].get('id', ''))

    def get_followed_ids(self, user_id: str, *, page_size: int = TwitchAPIHelix.MAX_IDS) -> List[str]:
        """returns IDs of the channels followed by user_id, without duplicates
        :param user_id: Twitch user ID
        :param page_size: number of follows requested per page
        """
        followed: List[str] = []
        seen: Set[str] = set()
        cursor: Optional[str] = None
        max_pages: Optional[int] = None
        pages = 0
        while True:
            if max_pages is not None and pages >= max_pages:
                raise PaginationError(f'Follows of {user_id} were not exhausted after {pages} pages '
                                      f'({len(followed)} of {total} collected)')
            page = self.api.get_users_follows(from_id=user_id, first=page_size, after=cursor)
            pages += 1
            total = page.total or 0
            page_ids = [str(follow.get('to_id', '')) for follow in page.data]
            new_ids = set(page_ids) - seen
            followed.extend(page_ids)
            seen.update(new_ids)

            if len(followed) >= total or not page.data or not page.cursor:
                break
            if not new_ids:
                raise PaginationError(f'Page {pages} of follows of {user_id} repeats already collected IDs '
                                      f'({len(seen)} of {total} collected)')
            if max_pages is None:
                max_pages = math.ceil(total / page_size) + PAGINATION_SLACK
            cursor = page.cursor

        log.debug('Got %d follows of %s in %d pages', len(followed), user_id, pages)
        # Twitch may return the same channel twice (e.g. banned and reinstated accounts)
        return unique(followed)

    def get_live_channels(self, channel_ids: List[str]) -> List[LiveChannel]:
        """returns currently live channels among channel_ids in response order
        :param channel_ids: deduplicated list of channel IDs
        """
        live_channels: List[LiveChannel] = []
        for chunk in chunked(channel_ids, TwitchAPIHelix.MAX_IDS):
            # `first` equal to the chunk limit so the response never needs pagination
            page = self.api.get_streams(user_id=chunk, first=TwitchAPIHelix.MAX_IDS)
            live_channels.extend(to_live_channel(stream) for stream in page.data)
        log.debug('%d of %d channels are live', len(live_channels), len(channel_ids))
        return live_channels

    def get_followed_live_channels(self, login: str) -> List[LiveChannel]:
        user_id = self.get_user_id(login)
        return self.get_live_channels(self.get_followed_ids(user_id))


def to_live_channel(stream: JSONT) -> LiveChannel:
    return LiveChannel(user_name=stream.get('user_name') or '',
                       title=stream.get('title') or '',
                       viewer_count=to_int(stream.get('viewer_count'), 'viewer_count'),
                       started_at=parse_started_at(stream.get('started_at')),
                       data=stream)


def parse_started_at(value: Optional[str]) -> datetime:
    try:
        return parse_date(value)
    except (ParseError, TypeError):
        log.warning('Invalid started_at value %r, using Unix epoch', value)
        return EPOCH
