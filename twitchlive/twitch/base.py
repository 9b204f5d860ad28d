import logging
from typing import Any, Callable, Collection, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union
from urllib.parse import urljoin

import requests

JSONT = Dict[str, Any]
URLParameterT = Union[
    Collection[Tuple[str, Optional[str]]],
    Mapping[str, Optional[str]],
]
GetT = Callable[..., requests.Response]

log = logging.getLogger(__name__)


class ClientConfig(NamedTuple):
    client_id: str
    token: Optional[str] = None
    base_url: str = 'https://api.twitch.tv/helix/'
    timeout: float = 30

    @property
    def headers(self) -> Dict[str, str]:
        headers = {'Client-ID': self.client_id}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers


class BaseAPI:
    def __init__(self, config: ClientConfig, *, get: Optional[GetT] = None) -> None:
        self.config = config
        self._get = get or requests.get

    def _request(self, path: str, *, params: Optional[URLParameterT] = None) -> JSONT:
        url = urljoin(self.config.base_url, path)
        filtered_params = filter_params(params)
        log.debug('GET %s %s', url, filtered_params)
        try:
            response = self._get(url, params=filtered_params, headers=self.config.headers,
                                 timeout=self.config.timeout)
        except requests.RequestException as e:
            raise TwitchTransportError(f'Error making HTTP request to {url}: {e}') from e

        if response.status_code >= 400:
            log.error('Requesting %s failed with status code %d', response.url or url, response.status_code)
            log.error('%s', response.text)
            raise TwitchResponseError(response.url or url, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise TwitchResponseError(response.url or url, response.status_code, response.text) from e


def filter_params(params: Optional[URLParameterT]) -> List[Tuple[str, str]]:
    if not params:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    # Remove empty and None values
    return [(key, value) for key, value in items if value]


class TwitchAPIError(Exception):
    pass


class TwitchTransportError(TwitchAPIError):
    pass


class TwitchResponseError(TwitchAPIError):
    def __init__(self, url: str, status: int, body: str) -> None:
        super().__init__(f'Requesting {url} failed with status code {status}')
        self.url = url
        self.status = status
        self.body = body


class UserNotFound(TwitchAPIError):
    def __init__(self, login: str) -> None:
        super().__init__(f'Could not find Twitch user {login!r}')
        self.login = login


class PaginationError(TwitchAPIError):
    pass
