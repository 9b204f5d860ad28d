import os
from typing import Any, Dict, List, Tuple

from ..view import OutputFormat

CArg = Tuple[List[str], Dict[str, Any]]

CONFIG_DIR = 'twitchlive'
CONFIG_FILE = 'config.yaml'


def default_config_files() -> List[str]:
    files = []
    xdg_config_home = os.environ.get('XDG_CONFIG_HOME')
    if xdg_config_home:
        files.append(os.path.join(xdg_config_home, CONFIG_DIR, CONFIG_FILE))
    files.append(os.path.join('~', '.config', CONFIG_DIR, CONFIG_FILE))
    return files


# Short options go first: config file values are passed with the last option string
ARGUMENTS: List[CArg] = [
    (['-c', '--config'], {
        'help':           'path to configuration file',
        'metavar':        'FILE',
        'is_config_file': True,
    }),

    # Twitch API configuration
    (['--client-id', '--client_id'], {
        'help':    'Twitch.TV API client id',
        'metavar': 'ID',
    }),
    (['--token'], {
        'help':    'Twitch.TV API bearer token',
        'metavar': 'TOKEN',
    }),

    # Query configuration
    (['-u', '--username', '--user_name'], {
        'help':    'specify user to get live channels for',
        'metavar': 'NAME',
    }),

    # Output configuration
    (['-d', '--delimiter'], {
        'help':    'string to separate entries when printing, default: " @@@ "',
        'default': ' @@@ ',
    }),
    (['-o', '--output-format', '--output_format'], {
        'help':    'output format, default: basic',
        'choices': [output_format.value for output_format in OutputFormat],
        'default': OutputFormat.BASIC.value,
    }),
    (['--timestamp'], {
        'help':   'print the time the stream went live instead of its duration',
        'action': 'store_true',
    }),
    (['--timestamp-seconds', '--timestamp_seconds'], {
        'help':   'print seconds since epoch instead of the stream duration',
        'action': 'store_true',
    }),

    # Logging configuration
    (['-v', '--verbose'], {
        'help':   'log requests and progress to stderr',
        'action': 'store_true',
    }),
    (['--logging-config'], {
        'help':    'path to a YAML logging.config.dictConfig file',
        'metavar': 'FILE',
    }),
]
