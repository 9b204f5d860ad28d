import json
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

import pytest
import requests

from twitchlive.twitch import ClientConfig, TwitchAPIHelix, TwitchLiveAdapter

BASE_URL = 'https://api.twitch.tv/helix/'


def pytest_runtest_setup(item):
    if 'client_id' in item.keywords and not item.config.getoption('--client-id'):
        pytest.skip('need --client-id to run')


class Call(NamedTuple):
    url: str
    params: List[Tuple[str, str]]
    headers: Dict[str, str]

    @property
    def path(self) -> str:
        return self.url[len(BASE_URL):]

    def values(self, key: str) -> List[str]:
        return [value for key_, value in self.params if key_ == key]


def make_response(payload: Any, status: int = 200, url: str = BASE_URL) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = payload.encode() if isinstance(payload, str) else json.dumps(payload).encode()
    response.encoding = 'utf-8'
    response.url = url
    return response


class FakeGet:
    """Stands in for `requests.get`, recording every call."""

    def __init__(self, handler: Callable[[Call], requests.Response]) -> None:
        self.handler = handler
        self.calls: List[Call] = []

    def __call__(self, url, *, params=None, headers=None, timeout=None) -> requests.Response:
        call = Call(url, list(params or []), dict(headers or {}))
        self.calls.append(call)
        return self.handler(call)

    def calls_to(self, path: str) -> List[Call]:
        return [call for call in self.calls if call.path == path]


def stream(user_id: str, *, started_at: str = '2020-05-01T10:00:00Z', viewer_count: int = 10) -> Dict[str, Any]:
    return {
        'id':           f'stream-{user_id}',
        'user_id':      user_id,
        'user_name':    f'user{user_id}',
        'type':         'live',
        'title':        f'title of {user_id}',
        'viewer_count': viewer_count,
        'started_at':   started_at,
    }


class FakeTwitch:
    """Minimal Helix server: users, cursor-paginated follows and streams."""

    def __init__(self, *, users: Optional[Dict[str, str]] = None,
                 follows: Optional[List[str]] = None,
                 live: Optional[List[str]] = None,
                 page_size: int = 100) -> None:
        self.users = users if users is not None else {'viewer': '1'}
        self.follows = follows or []
        self.live = set(live or [])
        self.page_size = page_size

    def __call__(self, call: Call) -> requests.Response:
        if call.path == 'users':
            logins = call.values('login')
            return make_response({'data': [{'id': self.users[login], 'login': login}
                                            for login in logins if login in self.users]})
        if call.path == 'users/follows':
            offset = int(call.values('after')[0]) if call.values('after') else 0
            first = int(call.values('first')[0]) if call.values('first') else 20
            end = offset + min(self.page_size, first)
            page = self.follows[offset:end]
            return make_response({
                'total':      len(self.follows),
                'data':       [{'from_id': call.values('from_id')[0], 'to_id': to_id} for to_id in page],
                'pagination': {'cursor': str(end)} if end < len(self.follows) else {},
            })
        if call.path == 'streams':
            return make_response({'data': [stream(user_id) for user_id in call.values('user_id')
                                           if user_id in self.live],
                                  'pagination': {}})
        return make_response({'error': 'Not Found', 'status': 404, 'message': ''}, status=404, url=call.url)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig('client-id', token='token')


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    return FakeTwitch()


@pytest.fixture
def fake_get(fake_twitch) -> FakeGet:
    return FakeGet(fake_twitch)


@pytest.fixture
def helix_api(config, fake_get) -> TwitchAPIHelix:
    return TwitchAPIHelix(config, get=fake_get)


@pytest.fixture
def adapter(helix_api) -> TwitchLiveAdapter:
    return TwitchLiveAdapter(helix_api)


def bad_calls_list(bad_calls):
    return [(method, args) for method, cases in bad_calls.items() for args in cases]


def bad_calls_ids(bad_calls):
    return [f'{method.__name__}: args={args}, kwargs={list(kwargs.keys())}' for method, cases in bad_calls.items() for
            args, kwargs in cases]
