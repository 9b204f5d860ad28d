import logging
import sys
from argparse import Namespace
from typing import List, NamedTuple, Optional

from configargparse import ArgParser as _ArgParser, YAMLConfigFileParser

from ..config_logging import setup_logging
from ..twitch import ClientConfig, TwitchAPIError, TwitchAPIHelix, TwitchLiveAdapter
from ..view import ConsoleView, OutputFormat, TimeMode
from ._common import ARGUMENTS, default_config_files

log = logging.getLogger(__name__)

PACKAGE_NAME = 'twitchlive'
PACKAGE_DESCRIPTION = 'A CLI tool to list which twitch channels you follow are currently live.'
PACKAGE_EPILOG = ('The config file is optional when --client-id and --username are given on the command line. '
                  'Searched: $XDG_CONFIG_HOME/twitchlive/config.yaml, ~/.config/twitchlive/config.yaml')
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ConfigurationError(Exception):
    pass


class Configuration(NamedTuple):
    client_id: str
    username: str
    token: Optional[str] = None
    delimiter: str = ' @@@ '
    output_format: OutputFormat = OutputFormat.BASIC
    time_mode: TimeMode = TimeMode.UPTIME


class ArgParser(_ArgParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f'{self.prog}: error: {message}\n')


def get_parser() -> ArgParser:
    parser = ArgParser(prog=PACKAGE_NAME,
                       description=PACKAGE_DESCRIPTION,
                       epilog=PACKAGE_EPILOG,
                       default_config_files=default_config_files(),
                       config_file_parser_class=YAMLConfigFileParser,
                       ignore_unknown_config_file_keys=True)

    for args, kwargs in ARGUMENTS:
        parser.add_argument(*args, **kwargs)

    return parser


def get_configuration(args: Namespace) -> Configuration:
    if not args.client_id:
        raise ConfigurationError('Twitch client id is not set. Use --client-id or `client_id` in the config file')
    if not args.username:
        raise ConfigurationError('Username is not set. Use --username or `username` in the config file')

    if args.timestamp_seconds:
        time_mode = TimeMode.SECONDS
    elif args.timestamp:
        time_mode = TimeMode.TIMESTAMP
    else:
        time_mode = TimeMode.UPTIME

    return Configuration(client_id=args.client_id,
                         username=args.username,
                         token=args.token or None,
                         delimiter=args.delimiter,
                         output_format=OutputFormat(args.output_format),
                         time_mode=time_mode)


def run(configuration: Configuration, api: TwitchAPIHelix) -> None:
    channels = TwitchLiveAdapter(api).get_followed_live_channels(configuration.username)
    view = ConsoleView(configuration.output_format, configuration.time_mode, delimiter=configuration.delimiter)
    view.show(channels)


def main(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(args.logging_config, logging.DEBUG if args.verbose else logging.WARNING)

    try:
        configuration = get_configuration(args)
    except ConfigurationError as e:
        log.error('%s', e)
        return EXIT_FAILURE

    api = TwitchAPIHelix(ClientConfig(configuration.client_id, token=configuration.token))
    try:
        run(configuration, api)
    except TwitchAPIError as e:
        log.error('%s', e)
        return EXIT_FAILURE
    return EXIT_SUCCESS


def cli() -> None:
    sys.exit(main())
