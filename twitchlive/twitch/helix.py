from typing import List, NamedTuple, Optional, Tuple

from ..utils import to_int
from .base import BaseAPI, JSONT


class HelixData(NamedTuple):
    data: List[JSONT]
    cursor: Optional[str]
    total: Optional[int] = None

    @classmethod
    def from_json(cls, data: JSONT):
        pagination = data.get('pagination') or {}
        total = data.get('total')
        return cls(data.get('data') or [],
                   pagination.get('cursor') or None,
                   to_int(total, 'total') if total is not None else None)

    def __bool__(self):
        return bool(self.data) or bool(self.cursor)


class TwitchAPIHelix(BaseAPI):
    """Class implementing the part of Twitch API Helix needed to list live followed channels."""

    MAX_IDS: int = 100

    def get_users(self, *, login: List[str]) -> List[JSONT]:
        if not login:
            raise ValueError('Specify a list of logins')
        if len(login) > TwitchAPIHelix.MAX_IDS:
            raise ValueError(f'You can specify up to {TwitchAPIHelix.MAX_IDS} logins')

        params = [('login', login_) for login_ in login]

        response = self._request('users', params=params)
        return HelixData.from_json(response).data

    def get_users_follows(self, *,
                          from_id: str,
                          after: Optional[str] = None,
                          first: int = 20) -> HelixData:
        if not from_id:
            raise ValueError('from_id must be provided')
        if first > TwitchAPIHelix.MAX_IDS:
            raise ValueError(f'The value of the first must be less than or equal to {TwitchAPIHelix.MAX_IDS}')

        params = {
            'from_id': from_id,
            'first':   str(first),
            'after':   after,
        }

        response = self._request('users/follows', params=params)
        return HelixData.from_json(response)

    def get_streams(self, *,
                    user_id: List[str],
                    after: Optional[str] = None,
                    first: int = 20) -> HelixData:
        if len(user_id) > TwitchAPIHelix.MAX_IDS:
            raise ValueError(f'You can specify up to {TwitchAPIHelix.MAX_IDS} IDs for user_id')
        if first > TwitchAPIHelix.MAX_IDS:
            raise ValueError(f'The value of the first must be less than or equal to {TwitchAPIHelix.MAX_IDS}')

        params: List[Tuple[str, Optional[str]]] = [
            ('first', str(first)),
            ('after', after),
        ]
        params += [('user_id', user_id_) for user_id_ in user_id]

        response = self._request('streams', params=params)
        return HelixData.from_json(response)
