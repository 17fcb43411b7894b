"""
MIT License

Copyright (c) 2020-present shay (shayypy)

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""


from __future__ import annotations
from typing import List, Optional, TypedDict, Union
from typing_extensions import NotRequired

from .emoji import Emoji
from .user import User


class TimeStamps(TypedDict, total=False):
    # Milliseconds since the epoch, sent as floats
    start: float
    end: float


class Assets(TypedDict, total=False):
    large_image: str
    small_image: str
    large_text: str
    small_text: str


class Party(TypedDict, total=False):
    id: str
    size: List[int]


class Secrets(TypedDict, total=False):
    join: str
    spectate: str
    match: str


class Activity(TypedDict):
    name: str
    type: int
    url: NotRequired[Optional[str]]
    # Milliseconds since the epoch
    created_at: NotRequired[int]
    application_id: NotRequired[str]
    state: NotRequired[Optional[str]]
    details: NotRequired[Optional[str]]
    timestamps: NotRequired[TimeStamps]
    emoji: NotRequired[Optional[Emoji]]
    party: NotRequired[Party]
    assets: NotRequired[Assets]
    secrets: NotRequired[Secrets]
    instance: NotRequired[bool]
    flags: NotRequired[int]


class Presence(TypedDict):
    user: User
    status: str
    activities: NotRequired[List[Activity]]
    since: NotRequired[Optional[int]]
    guild_id: NotRequired[str]


class GatewayStatusUpdate(TypedDict):
    since: int
    game: Union[Activity, None]
    status: str
    afk: bool
