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
from typing import Tuple, TypedDict
from typing_extensions import NotRequired

from .activity import GatewayStatusUpdate


class SessionStartLimit(TypedDict):
    total: int
    remaining: int
    reset_after: int
    max_concurrency: int


class GatewayBot(TypedDict):
    url: str
    shards: int
    session_start_limit: SessionStartLimit


# Keys that are Python keywords or start with "$" need the functional syntax

RateLimited = TypedDict(
    'RateLimited',
    {
        'message': str,
        # Seconds, sent as a float
        'retry_after': float,
        'bucket': NotRequired[str],
        'global': NotRequired[bool],
    },
)


class APIError(TypedDict):
    code: int
    message: str


IdentifyProperties = TypedDict(
    'IdentifyProperties',
    {
        '$os': str,
        '$browser': str,
        '$device': str,
        '$referer': str,
        '$referring_domain': str,
    },
)


class Identify(TypedDict):
    token: str
    properties: IdentifyProperties
    compress: bool
    large_threshold: int
    shard: NotRequired[Tuple[int, int]]
    presence: NotRequired[GatewayStatusUpdate]
    guild_subscriptions: bool
    intents: int
