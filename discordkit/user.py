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

------------------------------------------------------------------------------

This project includes code from https://github.com/Rapptz/discord.py, which is
available under the MIT license:

The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .enums import MessageNotifications, RelationshipType, Status, try_enum
from .permissions import Permissions
from .utils import ISO8601, member_mention, user_mention

if TYPE_CHECKING:
    from .types.user import (
        Ack as AckPayload,
        FriendSourceFlags as FriendSourceFlagsPayload,
        Member as MemberPayload,
        ReadState as ReadStatePayload,
        Relationship as RelationshipPayload,
        Settings as SettingsPayload,
        User as UserPayload,
        UserGuildSettings as UserGuildSettingsPayload,
        UserGuildSettingsChannelOverride as UserGuildSettingsChannelOverridePayload,
    )

__all__ = (
    'User',
    'Member',
    'Relationship',
    'FriendSourceFlags',
    'Settings',
    'ReadState',
    'Ack',
    'UserGuildSettingsChannelOverride',
    'UserGuildSettings',
    'UserGuildSettingsEdit',
)


class User:
    """Represents a Discord user.

    .. container:: operations

        .. describe:: x == y

            Checks if two users are equal.

        .. describe:: x != y

            Checks if two users are not equal.

        .. describe:: hash(x)

            Returns the user's hash.

        .. describe:: str(x)

            Returns the user's name with discriminator.

    Attributes
    -----------
    id: :class:`str`
        The user's ID.
    name: :class:`str`
        The user's username.
    discriminator: :class:`str`
        The user's four-digit discriminator.
    avatar: Optional[:class:`str`]
        The user's avatar hash, if any.
    bot: :class:`bool`
        Whether the user is a bot account.
    email: Optional[:class:`str`]
        The user's email. Only present for the current user with the
        ``email`` OAuth2 scope.
    locale: Optional[:class:`str`]
        The user's chosen language.
    verified: :class:`bool`
        Whether the user's email is verified.
    mfa_enabled: :class:`bool`
        Whether the user has two-factor authentication enabled.
    public_flags: :class:`int`
        The public flags on the user's account.
    """

    __slots__: Tuple[str, ...] = (
        'id',
        'name',
        'discriminator',
        'avatar',
        'bot',
        'system',
        'email',
        'locale',
        'verified',
        'mfa_enabled',
        'public_flags',
        'premium_type',
        'banner',
    )

    def __init__(self, *, data: UserPayload):
        self.id: str = data['id']
        self.name: str = data.get('username') or ''
        self.discriminator: str = data.get('discriminator') or '0'
        self.avatar: Optional[str] = data.get('avatar')
        self.bot: bool = data.get('bot', False)
        self.system: bool = data.get('system', False)
        self.email: Optional[str] = data.get('email')
        self.locale: Optional[str] = data.get('locale')
        self.verified: bool = data.get('verified', False)
        self.mfa_enabled: bool = data.get('mfa_enabled', False)
        self.public_flags: int = data.get('public_flags', 0)
        self.premium_type: int = data.get('premium_type', 0)
        self.banner: Optional[str] = data.get('banner')

    def __str__(self) -> str:
        return f'{self.name}#{self.discriminator}'

    def __repr__(self) -> str:
        return f'<User id={self.id!r} name={self.name!r} discriminator={self.discriminator!r} bot={self.bot}>'

    def __eq__(self, other) -> bool:
        return isinstance(other, User) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def mention(self) -> str:
        """:class:`str`: The mention string for this user."""
        return user_mention(self.id)

    @property
    def display_name(self) -> str:
        """:class:`str`: The user's display name. For users, this is their username."""
        return self.name


class Member:
    """Represents a user's membership in a guild.

    .. container:: operations

        .. describe:: x == y

            Checks if two members are equal.

        .. describe:: x != y

            Checks if two members are not equal.

        .. describe:: str(x)

            Returns the underlying user's name with discriminator.

    Attributes
    -----------
    guild_id: Optional[:class:`str`]
        The ID of the guild the member is in. Discord omits this in many
        payloads where it is implied.
    user: Optional[:class:`User`]
        The underlying user. Discord omits this in message payloads.
    nick: Optional[:class:`str`]
        The member's nickname, if they have one.
    joined_at: Optional[:class:`datetime.datetime`]
        When the member joined the guild.
    premium_since: Optional[:class:`datetime.datetime`]
        When the member started boosting the guild, if they are.
    deaf: :class:`bool`
        Whether the member is deafened at a guild level.
    mute: :class:`bool`
        Whether the member is muted at a guild level.
    pending: :class:`bool`
        Whether the member has not yet passed membership screening.
    permissions: :class:`Permissions`
        The member's total permissions in a channel, including overwrites.
        This is only sent in interaction payloads and is empty otherwise.
    """

    __slots__: Tuple[str, ...] = (
        'guild_id',
        'user',
        'nick',
        'joined_at',
        'premium_since',
        'deaf',
        'mute',
        'pending',
        'permissions',
        '_role_ids',
    )

    def __init__(self, *, data: MemberPayload, guild_id: Optional[str] = None):
        self.guild_id: Optional[str] = data.get('guild_id', guild_id)
        self.user: Optional[User] = User(data=data['user']) if data.get('user') else None
        self.nick: Optional[str] = data.get('nick')
        self.joined_at: Optional[datetime.datetime] = ISO8601(data.get('joined_at'))
        self.premium_since: Optional[datetime.datetime] = ISO8601(data.get('premium_since'))
        self.deaf: bool = data.get('deaf', False)
        self.mute: bool = data.get('mute', False)
        self.pending: bool = data.get('pending', False)
        self.permissions: Permissions = Permissions.from_str(data.get('permissions'))
        self._role_ids: List[str] = list(data.get('roles') or [])

    def __str__(self) -> str:
        return str(self.user) if self.user else ''

    def __repr__(self) -> str:
        return f'<Member id={self.id!r} guild_id={self.guild_id!r} nick={self.nick!r}>'

    def __eq__(self, other) -> bool:
        return isinstance(other, Member) and self.id == other.id and self.guild_id == other.guild_id

    @property
    def id(self) -> Optional[str]:
        """Optional[:class:`str`]: The underlying user's ID."""
        return self.user.id if self.user else None

    @property
    def role_ids(self) -> List[str]:
        """List[:class:`str`]: The IDs of the roles this member has."""
        return list(self._role_ids)

    @property
    def mention(self) -> str:
        """:class:`str`: The nickname-style mention string for this member.
        This is an empty string when the payload carried no user."""
        if self.id is None:
            return ''
        return member_mention(self.id)

    @property
    def display_name(self) -> str:
        """:class:`str`: The member's nickname, or their username if they
        have none."""
        if self.nick:
            return self.nick
        return self.user.name if self.user else ''


class Relationship:
    """Represents the current user's relationship with another user."""

    __slots__ = ('id', 'type', 'user')

    def __init__(self, *, data: RelationshipPayload):
        self.id: str = data['id']
        self.type: RelationshipType = try_enum(RelationshipType, data.get('type'))
        self.user: User = User(data=data['user'])

    def __repr__(self) -> str:
        return f'<Relationship id={self.id!r} type={self.type!r}>'


class FriendSourceFlags:
    __slots__ = ('all', 'mutual_guilds', 'mutual_friends')

    def __init__(self, *, data: FriendSourceFlagsPayload):
        self.all: bool = data.get('all', False)
        self.mutual_guilds: bool = data.get('mutual_guilds', False)
        self.mutual_friends: bool = data.get('mutual_friends', False)

    def __repr__(self) -> str:
        return f'<FriendSourceFlags all={self.all} mutual_guilds={self.mutual_guilds} mutual_friends={self.mutual_friends}>'


class Settings:
    """Represents a user's client settings.

    Attributes
    -----------
    status: :class:`Status`
        The user's chosen status.
    friend_source_flags: Optional[:class:`FriendSourceFlags`]
        Who may send the user friend requests.
    guild_positions: List[:class:`str`]
        Guild IDs in the order the user has arranged them.
    restricted_guilds: List[:class:`str`]
        Guild IDs in which the user does not accept direct messages.
    """

    __slots__ = (
        'render_embeds',
        'inline_embed_media',
        'inline_attachment_media',
        'enable_tts_command',
        'message_display_compact',
        'show_current_game',
        'convert_emoticons',
        'locale',
        'theme',
        'guild_positions',
        'restricted_guilds',
        'friend_source_flags',
        'status',
        'detect_platform_accounts',
        'developer_mode',
    )

    def __init__(self, *, data: SettingsPayload):
        self.render_embeds: bool = data.get('render_embeds', False)
        self.inline_embed_media: bool = data.get('inline_embed_media', False)
        self.inline_attachment_media: bool = data.get('inline_attachment_media', False)
        self.enable_tts_command: bool = data.get('enable_tts_command', False)
        self.message_display_compact: bool = data.get('message_display_compact', False)
        self.show_current_game: bool = data.get('show_current_game', False)
        self.convert_emoticons: bool = data.get('convert_emoticons', False)
        self.locale: str = data.get('locale') or ''
        self.theme: str = data.get('theme') or ''
        self.guild_positions: List[str] = data.get('guild_positions') or []
        self.restricted_guilds: List[str] = data.get('restricted_guilds') or []

        friend_source_flags = data.get('friend_source_flags')
        self.friend_source_flags: Optional[FriendSourceFlags] = (
            FriendSourceFlags(data=friend_source_flags) if friend_source_flags else None
        )

        self.status: Status = try_enum(Status, data.get('status'))
        self.detect_platform_accounts: bool = data.get('detect_platform_accounts', False)
        self.developer_mode: bool = data.get('developer_mode', False)

    def __repr__(self) -> str:
        return f'<Settings status={self.status!r} locale={self.locale!r}>'


class ReadState:
    __slots__ = ('id', 'mention_count', 'last_message_id')

    def __init__(self, *, data: ReadStatePayload):
        self.id: str = data['id']
        self.mention_count: int = data.get('mention_count', 0)
        self.last_message_id: Optional[str] = data.get('last_message_id')

    def __repr__(self) -> str:
        return f'<ReadState id={self.id!r} mention_count={self.mention_count}>'


class Ack:
    """The response to acknowledging a message as read.

    Attributes
    -----------
    token: Optional[:class:`str`]
        The token to send with the next acknowledgement, if any.
    """

    __slots__ = ('token',)

    def __init__(self, *, data: AckPayload):
        self.token: Optional[str] = data.get('token')

    def to_dict(self) -> Dict[str, Any]:
        return {'token': self.token}

    def __repr__(self) -> str:
        return f'<Ack token={self.token!r}>'


class UserGuildSettingsChannelOverride:
    """A per-channel notification override inside :class:`UserGuildSettings`."""

    __slots__ = ('channel_id', 'muted', 'message_notifications')

    def __init__(self, *, data: UserGuildSettingsChannelOverridePayload):
        self.channel_id: str = data['channel_id']
        self.muted: bool = data.get('muted', False)
        self.message_notifications: MessageNotifications = try_enum(MessageNotifications, data.get('message_notifications'))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'channel_id': self.channel_id,
            'muted': self.muted,
            'message_notifications': self.message_notifications.value,
        }


class UserGuildSettings:
    """Represents a user's notification settings for a single guild."""

    __slots__ = (
        'guild_id',
        'suppress_everyone',
        'muted',
        'mobile_push',
        'message_notifications',
        'channel_overrides',
    )

    def __init__(self, *, data: UserGuildSettingsPayload):
        self.guild_id: str = data['guild_id']
        self.suppress_everyone: bool = data.get('suppress_everyone', False)
        self.muted: bool = data.get('muted', False)
        self.mobile_push: bool = data.get('mobile_push', False)
        self.message_notifications: MessageNotifications = try_enum(MessageNotifications, data.get('message_notifications'))
        self.channel_overrides: List[UserGuildSettingsChannelOverride] = [
            UserGuildSettingsChannelOverride(data=override_data)
            for override_data in data.get('channel_overrides') or []
        ]

    def __repr__(self) -> str:
        return f'<UserGuildSettings guild_id={self.guild_id!r} muted={self.muted}>'


class UserGuildSettingsEdit:
    """Holds the data for editing a :class:`UserGuildSettings`.

    Unlike the settings themselves, channel overrides are keyed by channel ID.

    Parameters
    -----------
    suppress_everyone: :class:`bool`
    muted: :class:`bool`
    mobile_push: :class:`bool`
    message_notifications: :class:`MessageNotifications`
    channel_overrides: Dict[:class:`str`, :class:`UserGuildSettingsChannelOverride`]
    """

    def __init__(
        self,
        *,
        suppress_everyone: bool = False,
        muted: bool = False,
        mobile_push: bool = False,
        message_notifications: MessageNotifications = MessageNotifications.all_messages,
        channel_overrides: Optional[Dict[str, UserGuildSettingsChannelOverride]] = None,
    ):
        self.suppress_everyone = suppress_everyone
        self.muted = muted
        self.mobile_push = mobile_push
        self.message_notifications = message_notifications
        self.channel_overrides = channel_overrides or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'suppress_everyone': self.suppress_everyone,
            'muted': self.muted,
            'mobile_push': self.mobile_push,
            'message_notifications': self.message_notifications.value,
            'channel_overrides': {
                channel_id: override.to_dict()
                for channel_id, override in self.channel_overrides.items()
            },
        }
