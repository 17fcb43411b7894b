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
from typing import List, Optional, TypedDict
from typing_extensions import NotRequired

from .activity import Presence
from .channel import Channel
from .emoji import Emoji
from .role import Role
from .user import Member, User
from .voice import VoiceState


class _BaseGuild(TypedDict):
    id: str
    name: str
    icon: Optional[str]


class UserGuild(_BaseGuild):
    owner: bool
    permissions: str


class GuildPreview(_BaseGuild):
    splash: Optional[str]
    discovery_splash: Optional[str]
    emojis: List[Emoji]
    features: List[str]
    approximate_member_count: int
    approximate_presence_count: int
    description: Optional[str]


class Guild(_BaseGuild):
    region: NotRequired[str]
    afk_channel_id: NotRequired[Optional[str]]
    owner_id: str
    owner: NotRequired[bool]
    joined_at: NotRequired[str]
    discovery_splash: NotRequired[Optional[str]]
    splash: NotRequired[Optional[str]]
    afk_timeout: NotRequired[int]
    member_count: NotRequired[int]
    verification_level: NotRequired[int]
    large: NotRequired[bool]
    default_message_notifications: NotRequired[int]
    roles: NotRequired[List[Role]]
    emojis: NotRequired[List[Emoji]]
    members: NotRequired[List[Member]]
    presences: NotRequired[List[Presence]]
    max_presences: NotRequired[Optional[int]]
    max_members: NotRequired[int]
    channels: NotRequired[List[Channel]]
    voice_states: NotRequired[List[VoiceState]]
    unavailable: NotRequired[bool]
    explicit_content_filter: NotRequired[int]
    features: NotRequired[List[str]]
    mfa_level: NotRequired[int]
    application_id: NotRequired[Optional[str]]
    widget_enabled: NotRequired[bool]
    widget_channel_id: NotRequired[Optional[str]]
    system_channel_id: NotRequired[Optional[str]]
    system_channel_flags: NotRequired[int]
    rules_channel_id: NotRequired[Optional[str]]
    vanity_url_code: NotRequired[Optional[str]]
    description: NotRequired[Optional[str]]
    banner: NotRequired[Optional[str]]
    premium_tier: NotRequired[int]
    premium_subscription_count: NotRequired[int]
    preferred_locale: NotRequired[str]
    public_updates_channel_id: NotRequired[Optional[str]]
    max_video_channel_users: NotRequired[int]
    approximate_member_count: NotRequired[int]
    approximate_presence_count: NotRequired[int]
    permissions: NotRequired[str]


class GuildBan(TypedDict):
    reason: Optional[str]
    user: User


class GuildEmbed(TypedDict):
    enabled: bool
    channel_id: Optional[str]
