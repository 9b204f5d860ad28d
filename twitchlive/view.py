import json
from datetime import datetime, timezone
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from wcwidth import wcswidth

from .twitch import LiveChannel

TITLE_TOKEN_LIMIT = 30
TITLE_TOKEN_KEEP = 28
ELLIPSIS = '--'


class OutputFormat(str, Enum):
    BASIC = 'basic'
    TABLE = 'table'
    JSON = 'json'


class TimeMode(str, Enum):
    UPTIME = 'uptime'
    TIMESTAMP = 'timestamp'
    SECONDS = 'seconds'


class ChannelRow(NamedTuple):
    user_name: str
    title: str
    viewer_count: int
    time: str


def format_uptime(started_at: datetime, now: datetime) -> str:
    seconds = max(0, int((now - started_at).total_seconds()))
    hours, seconds = divmod(seconds, 3600)
    return f'{hours:02d}:{seconds // 60:02d}'


def format_timestamp(started_at: datetime) -> str:
    # Mon Jan  2 15:04:05 UTC 2006
    return f'{started_at:%a %b} {started_at.day:>2} {started_at:%H:%M:%S %Z %Y}'


def format_time(started_at: datetime, mode: TimeMode, now: Optional[datetime] = None) -> str:
    if mode is TimeMode.SECONDS:
        return str(int(started_at.timestamp()))
    if mode is TimeMode.TIMESTAMP:
        return format_timestamp(started_at)
    return format_uptime(started_at, now or datetime.now(timezone.utc))


def to_rows(channels: Sequence[LiveChannel], mode: TimeMode, now: Optional[datetime] = None) -> List[ChannelRow]:
    now = now or datetime.now(timezone.utc)
    return [ChannelRow(user_name=channel.user_name,
                       title=channel.title,
                       viewer_count=channel.viewer_count,
                       time=format_time(channel.started_at, mode, now))
            for channel in channels]


def truncate(title: str) -> str:
    """Shortens every word longer than 30 characters so a single word can't stretch the table."""
    return ' '.join(token[:TITLE_TOKEN_KEEP] + ELLIPSIS if len(token) > TITLE_TOKEN_LIMIT else token
                    for token in title.split(' ')).strip()


def display_width(text: str) -> int:
    # Terminal columns: wide CJK characters and emoji take two
    width = wcswidth(text)
    return width if width >= 0 else len(text)


def render_basic(rows: Sequence[ChannelRow], delimiter: str) -> str:
    return '\n'.join(delimiter.join([row.user_name, row.time, str(row.viewer_count), row.title]) for row in rows)


def render_table(rows: Sequence[ChannelRow], mode: TimeMode) -> str:
    header = ['User', 'Uptime' if mode is TimeMode.UPTIME else 'Live Since', 'Viewer Count', 'Stream Title']
    body = [[row.user_name, row.time, str(row.viewer_count), truncate(row.title)] for row in rows]
    widths = [max(display_width(cell) for cell in column) for column in zip(header, *body)]

    border = '+' + '+'.join('-' * (width + 2) for width in widths) + '+'

    def pad(cell: str, width: int) -> str:
        return f' {cell}{" " * (width - display_width(cell))} '

    def line(cells: List[str]) -> str:
        return '|' + '|'.join(pad(cell, width) for cell, width in zip(cells, widths)) + '|'

    lines = [border, line(header), border]
    lines += [line(cells) for cells in body]
    if body:
        lines.append(border)
    return '\n'.join(lines)


def render_json(rows: Sequence[ChannelRow]) -> str:
    return json.dumps({'channels': [row._asdict() for row in rows]}, ensure_ascii=False)


class ConsoleView:
    def __init__(self, output_format: OutputFormat, time_mode: TimeMode = TimeMode.UPTIME, *,
                 delimiter: str = ' @@@ ') -> None:
        self.output_format = output_format
        self.time_mode = time_mode
        self.delimiter = delimiter

    def render(self, channels: Sequence[LiveChannel], now: Optional[datetime] = None) -> str:
        rows = to_rows(channels, self.time_mode, now)
        if self.output_format is OutputFormat.TABLE:
            return render_table(rows, self.time_mode)
        if self.output_format is OutputFormat.JSON:
            return render_json(rows)
        return render_basic(rows, self.delimiter)

    def show(self, channels: Sequence[LiveChannel], now: Optional[datetime] = None) -> None:
        output = self.render(channels, now)
        if output:
            print(output)
