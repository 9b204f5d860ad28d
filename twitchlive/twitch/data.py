from datetime import datetime
from typing import NamedTuple

from .base import JSONT


class LiveChannel(NamedTuple):
    user_name: str
    title: str
    viewer_count: int
    started_at: datetime
    data: JSONT
