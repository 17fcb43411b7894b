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
from typing import Optional, TypedDict
from typing_extensions import NotRequired

from .user import Member, User


class GuildScheduledEventEntityMetadata(TypedDict, total=False):
    location: str


class GuildScheduledEvent(TypedDict):
    id: str
    guild_id: str
    channel_id: Optional[str]
    creator_id: NotRequired[Optional[str]]
    name: str
    description: NotRequired[Optional[str]]
    scheduled_start_time: str
    scheduled_end_time: Optional[str]
    privacy_level: int
    status: int
    entity_type: int
    entity_id: Optional[str]
    entity_metadata: Optional[GuildScheduledEventEntityMetadata]
    creator: NotRequired[User]
    user_count: NotRequired[int]


class GuildScheduledEventUser(TypedDict):
    guild_scheduled_event_id: str
    user: User
    member: NotRequired[Member]
