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


class User(TypedDict):
    id: str
    username: str
    discriminator: str
    avatar: Optional[str]
    email: NotRequired[Optional[str]]
    locale: NotRequired[str]
    verified: NotRequired[bool]
    mfa_enabled: NotRequired[bool]
    bot: NotRequired[bool]
    public_flags: NotRequired[int]
    premium_type: NotRequired[int]
    system: NotRequired[bool]
    flags: NotRequired[int]
    banner: NotRequired[Optional[str]]
    accent_color: NotRequired[Optional[int]]


class Member(TypedDict):
    guild_id: NotRequired[str]
    joined_at: str
    nick: NotRequired[Optional[str]]
    deaf: bool
    mute: bool
    user: NotRequired[User]
    roles: List[str]
    premium_since: NotRequired[Optional[str]]
    pending: NotRequired[bool]
    permissions: NotRequired[str]


class Relationship(TypedDict):
    id: str
    type: int
    user: User


class FriendSourceFlags(TypedDict):
    all: bool
    mutual_guilds: bool
    mutual_friends: bool


class Settings(TypedDict):
    render_embeds: bool
    inline_embed_media: bool
    inline_attachment_media: bool
    enable_tts_command: bool
    message_display_compact: bool
    show_current_game: bool
    convert_emoticons: bool
    locale: str
    theme: str
    guild_positions: List[str]
    restricted_guilds: List[str]
    friend_source_flags: NotRequired[Optional[FriendSourceFlags]]
    status: str
    detect_platform_accounts: bool
    developer_mode: bool


class ReadState(TypedDict):
    mention_count: int
    last_message_id: str
    id: str


class Ack(TypedDict):
    token: NotRequired[Optional[str]]


class UserGuildSettingsChannelOverride(TypedDict):
    muted: bool
    message_notifications: int
    channel_id: str


class UserGuildSettings(TypedDict):
    suppress_everyone: bool
    muted: bool
    mobile_push: bool
    message_notifications: int
    guild_id: str
    channel_overrides: List[UserGuildSettingsChannelOverride]
