def pytest_addoption(parser):
    parser.addoption('--client-id', action='store', default=None, help='Twitch API client id')
    parser.addoption('--token', action='store', default=None, help='Twitch API bearer token for the client id')
    parser.addoption('--username', action='store', default=None, help='Twitch user whose follows are checked')


def pytest_configure(config):
    config.addinivalue_line('markers', 'client_id: test talks to the real Twitch API')
