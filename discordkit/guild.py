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

from .channel import Channel
from .emoji import Emoji
from .enums import (
    ExplicitContentFilterLevel,
    MessageNotifications,
    MfaLevel,
    PremiumTier,
    VerificationLevel,
    try_enum,
)
from .flags import SystemChannelFlags
from .http import Route
from .permissions import Permissions
from .presence import Presence
from .role import Role
from .user import Member, User
from .utils import ISO8601, MISSING, get
from .voice import VoiceState

if TYPE_CHECKING:
    from .types.guild import (
        Guild as GuildPayload,
        GuildBan as GuildBanPayload,
        GuildEmbed as GuildEmbedPayload,
        GuildPreview as GuildPreviewPayload,
        UserGuild as UserGuildPayload,
    )


__all__ = (
    'Guild',
    'GuildPreview',
    'UserGuild',
    'GuildParams',
    'GuildBan',
    'GuildEmbed',
)


def _icon_url(guild_id: str, icon: Optional[str]) -> Optional[str]:
    if not icon:
        return None
    # Animated icon hashes are prefixed with a_
    extension = 'gif' if icon.startswith('a_') else 'png'
    return f'{Route.CDN_BASE}/icons/{guild_id}/{icon}.{extension}'


class Guild:
    """Represents a Discord guild, also called a server.

    Guilds that are unavailable due to an outage only carry their
    :attr:`id` and :attr:`unavailable`.

    .. container:: operations

        .. describe:: x == y

            Checks if two guilds are equal.

        .. describe:: x != y

            Checks if two guilds are not equal.

        .. describe:: hash(x)

            Returns the guild's hash.

        .. describe:: str(x)

            Returns the name of the guild.

    Attributes
    -----------
    id: :class:`str`
        The guild's ID.
    name: :class:`str`
        The guild's name.
    icon: Optional[:class:`str`]
        The guild's icon hash.
    region: Optional[:class:`str`]
        The guild's voice region.
    afk_channel_id: Optional[:class:`str`]
        The ID of the AFK voice channel.
    owner_id: Optional[:class:`str`]
        The ID of the guild owner.
    owner: :class:`bool`
        Whether the current user owns the guild.
    joined_at: Optional[:class:`datetime.datetime`]
        When the current user joined the guild.
    splash: Optional[:class:`str`]
        The guild's invite splash hash.
    afk_timeout: :class:`int`
        The AFK timeout in seconds.
    member_count: :class:`int`
        The number of members. Only sent in the gateway's guild create
        event.
    verification_level: :class:`VerificationLevel`
        The verification level members need to meet.
    large: :class:`bool`
        Whether the guild exceeds the identify large threshold.
    default_message_notifications: :class:`MessageNotifications`
        The default notification setting for members.
    roles: List[:class:`Role`]
        The guild's roles.
    emojis: List[:class:`Emoji`]
        The guild's custom emojis.
    members: List[:class:`Member`]
        The guild's cached members.
    presences: List[:class:`Presence`]
        The presences of the cached members.
    channels: List[:class:`Channel`]
        The guild's channels.
    voice_states: List[:class:`VoiceState`]
        The voice states of members in voice channels.
    unavailable: :class:`bool`
        Whether the guild is unavailable due to an outage.
    explicit_content_filter: :class:`ExplicitContentFilterLevel`
        Which members have their media scanned.
    features: List[:class:`str`]
        The guild's enabled features.
    mfa_level: :class:`MfaLevel`
        The two-factor authentication requirement for moderators.
    system_channel_id: Optional[:class:`str`]
        The ID of the channel that join and boost messages are sent to.
    system_channel_flags: :class:`SystemChannelFlags`
        Which system messages are suppressed.
    banner: Optional[:class:`str`]
        The guild's banner hash.
    premium_tier: :class:`PremiumTier`
        The guild's boost level.
    premium_subscription_count: :class:`int`
        The number of boosts the guild has.
    permissions: :class:`Permissions`
        The current user's permissions in the guild, when sent.
    """

    __slots__: Tuple[str, ...] = (
        'id',
        'name',
        'icon',
        'region',
        'afk_channel_id',
        'owner_id',
        'owner',
        'joined_at',
        'discovery_splash',
        'splash',
        'afk_timeout',
        'member_count',
        'verification_level',
        'large',
        'default_message_notifications',
        'roles',
        'emojis',
        'members',
        'presences',
        'max_presences',
        'max_members',
        'channels',
        'voice_states',
        'unavailable',
        'explicit_content_filter',
        'features',
        'mfa_level',
        'application_id',
        'widget_enabled',
        'widget_channel_id',
        'system_channel_id',
        'system_channel_flags',
        'rules_channel_id',
        'vanity_url_code',
        'description',
        'banner',
        'premium_tier',
        'premium_subscription_count',
        'preferred_locale',
        'public_updates_channel_id',
        'max_video_channel_users',
        'approximate_member_count',
        'approximate_presence_count',
        'permissions',
    )

    def __init__(self, *, data: GuildPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.icon: Optional[str] = data.get('icon')
        self.region: Optional[str] = data.get('region')
        self.afk_channel_id: Optional[str] = data.get('afk_channel_id')
        self.owner_id: Optional[str] = data.get('owner_id')
        self.owner: bool = data.get('owner', False)
        self.joined_at: Optional[datetime.datetime] = ISO8601(data.get('joined_at'))
        self.discovery_splash: Optional[str] = data.get('discovery_splash')
        self.splash: Optional[str] = data.get('splash')
        self.afk_timeout: int = data.get('afk_timeout', 0)
        self.member_count: int = data.get('member_count', 0)
        self.verification_level: VerificationLevel = try_enum(VerificationLevel, data.get('verification_level', 0))
        self.large: bool = data.get('large', False)
        self.default_message_notifications: MessageNotifications = try_enum(
            MessageNotifications, data.get('default_message_notifications', 0)
        )

        self.roles: List[Role] = [Role(data=role) for role in data.get('roles') or []]
        self.emojis: List[Emoji] = [Emoji(data=emoji) for emoji in data.get('emojis') or []]
        self.members: List[Member] = [Member(data=member, guild_id=self.id) for member in data.get('members') or []]
        self.presences: List[Presence] = [Presence(data=presence) for presence in data.get('presences') or []]
        self.channels: List[Channel] = [Channel(data=channel, guild_id=self.id) for channel in data.get('channels') or []]
        self.voice_states: List[VoiceState] = [VoiceState(data=state) for state in data.get('voice_states') or []]

        self.max_presences: Optional[int] = data.get('max_presences')
        self.max_members: int = data.get('max_members', 0)
        self.unavailable: bool = data.get('unavailable', False)
        self.explicit_content_filter: ExplicitContentFilterLevel = try_enum(
            ExplicitContentFilterLevel, data.get('explicit_content_filter', 0)
        )
        self.features: List[str] = data.get('features') or []
        self.mfa_level: MfaLevel = try_enum(MfaLevel, data.get('mfa_level', 0))
        self.application_id: Optional[str] = data.get('application_id')
        self.widget_enabled: bool = data.get('widget_enabled', False)
        self.widget_channel_id: Optional[str] = data.get('widget_channel_id')
        self.system_channel_id: Optional[str] = data.get('system_channel_id')
        self.system_channel_flags: SystemChannelFlags = SystemChannelFlags._from_payload(
            data.get('system_channel_flags'), 'system_channel_flags'
        )
        self.rules_channel_id: Optional[str] = data.get('rules_channel_id')
        self.vanity_url_code: Optional[str] = data.get('vanity_url_code')
        self.description: Optional[str] = data.get('description')
        self.banner: Optional[str] = data.get('banner')
        self.premium_tier: PremiumTier = try_enum(PremiumTier, data.get('premium_tier', 0))
        self.premium_subscription_count: int = data.get('premium_subscription_count', 0)
        self.preferred_locale: Optional[str] = data.get('preferred_locale')
        self.public_updates_channel_id: Optional[str] = data.get('public_updates_channel_id')
        self.max_video_channel_users: int = data.get('max_video_channel_users', 0)
        self.approximate_member_count: int = data.get('approximate_member_count', 0)
        self.approximate_presence_count: int = data.get('approximate_presence_count', 0)
        self.permissions: Permissions = Permissions.from_str(data.get('permissions'))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'<Guild id={self.id!r} name={self.name!r} unavailable={self.unavailable}>'

    def __eq__(self, other) -> bool:
        return isinstance(other, Guild) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def icon_url(self) -> Optional[str]:
        """Optional[:class:`str`]: The URL of the guild's icon. Animated
        icons link to a GIF."""
        return _icon_url(self.id, self.icon)

    @property
    def banner_url(self) -> Optional[str]:
        """Optional[:class:`str`]: The URL of the guild's banner."""
        if not self.banner:
            return None
        return f'{Route.CDN_BASE}/banners/{self.id}/{self.banner}.png'

    @property
    def default_role(self) -> Optional[Role]:
        """Optional[:class:`Role`]: The ``@everyone`` role, which shares the
        guild's ID."""
        return self.get_role(self.id)

    @property
    def system_channel(self) -> Optional[Channel]:
        return self.get_channel(self.system_channel_id) if self.system_channel_id else None

    def get_role(self, role_id: str, /) -> Optional[Role]:
        """Optional[:class:`Role`]: Get a role in this guild by its ID."""
        return get(self.roles, id=role_id)

    def get_channel(self, channel_id: str, /) -> Optional[Channel]:
        """Optional[:class:`Channel`]: Get a channel in this guild by its ID."""
        return get(self.channels, id=channel_id)

    def get_member(self, user_id: str, /) -> Optional[Member]:
        """Optional[:class:`Member`]: Get a cached member of this guild by
        their user ID."""
        return get(self.members, id=user_id)

    def get_emoji(self, emoji_id: str, /) -> Optional[Emoji]:
        return get(self.emojis, id=emoji_id)


class GuildPreview:
    """A preview of a discoverable guild, viewable without joining it."""

    __slots__ = (
        'id',
        'name',
        'icon',
        'splash',
        'discovery_splash',
        'emojis',
        'features',
        'approximate_member_count',
        'approximate_presence_count',
        'description',
    )

    def __init__(self, *, data: GuildPreviewPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.icon: Optional[str] = data.get('icon')
        self.splash: Optional[str] = data.get('splash')
        self.discovery_splash: Optional[str] = data.get('discovery_splash')
        self.emojis: List[Emoji] = [Emoji(data=emoji) for emoji in data.get('emojis') or []]
        self.features: List[str] = data.get('features') or []
        self.approximate_member_count: int = data.get('approximate_member_count', 0)
        self.approximate_presence_count: int = data.get('approximate_presence_count', 0)
        self.description: Optional[str] = data.get('description')

    def __repr__(self) -> str:
        return f'<GuildPreview id={self.id!r} name={self.name!r}>'

    @property
    def icon_url(self) -> Optional[str]:
        return _icon_url(self.id, self.icon)


class UserGuild:
    """A partial guild, as listed in the current user's guilds.

    Attributes
    -----------
    id: :class:`str`
        The guild's ID.
    name: :class:`str`
        The guild's name.
    icon: Optional[:class:`str`]
        The guild's icon hash.
    owner: :class:`bool`
        Whether the current user owns the guild.
    permissions: :class:`Permissions`
        The current user's permissions in the guild.
    """

    __slots__ = ('id', 'name', 'icon', 'owner', 'permissions')

    def __init__(self, *, data: UserGuildPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.icon: Optional[str] = data.get('icon')
        self.owner: bool = data.get('owner', False)
        self.permissions: Permissions = Permissions.from_str(data.get('permissions'))

    def __repr__(self) -> str:
        return f'<UserGuild id={self.id!r} name={self.name!r} owner={self.owner}>'

    @property
    def icon_url(self) -> Optional[str]:
        return _icon_url(self.id, self.icon)


class GuildParams:
    """Holds the fields to change when creating or editing a guild.

    Only the fields that were passed are sent.
    """

    def __init__(
        self,
        *,
        name: str = MISSING,
        region: str = MISSING,
        verification_level: VerificationLevel = MISSING,
        default_message_notifications: MessageNotifications = MISSING,
        afk_channel_id: str = MISSING,
        afk_timeout: int = MISSING,
        icon: str = MISSING,
        owner_id: str = MISSING,
        splash: str = MISSING,
        banner: str = MISSING,
    ):
        self.name = name
        self.region = region
        self.verification_level = verification_level
        self.default_message_notifications = default_message_notifications
        self.afk_channel_id = afk_channel_id
        self.afk_timeout = afk_timeout
        self.icon = icon
        self.owner_id = owner_id
        self.splash = splash
        self.banner = banner

    def __repr__(self) -> str:
        return f'<GuildParams {self.to_dict()!r}>'

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for key in ('name', 'region', 'afk_channel_id', 'afk_timeout', 'icon', 'owner_id', 'splash', 'banner'):
            value = getattr(self, key)
            if value is not MISSING:
                payload[key] = value

        if self.verification_level is not MISSING:
            payload['verification_level'] = self.verification_level.value
        if self.default_message_notifications is not MISSING:
            payload['default_message_notifications'] = self.default_message_notifications.value
        return payload


class GuildBan:
    """Represents a ban in a guild.

    Attributes
    -----------
    user: :class:`User`
        The user that was banned.
    reason: Optional[:class:`str`]
        The reason for the ban.
    """

    __slots__ = ('reason', 'user')

    def __init__(self, *, data: GuildBanPayload):
        self.reason: Optional[str] = data.get('reason')
        self.user: User = User(data=data['user'])

    def __repr__(self) -> str:
        return f'<GuildBan user={self.user!r} reason={self.reason!r}>'


class GuildEmbed:
    __slots__ = ('enabled', 'channel_id')

    def __init__(self, *, data: GuildEmbedPayload):
        self.enabled: bool = data.get('enabled', False)
        self.channel_id: Optional[str] = data.get('channel_id')

    def __repr__(self) -> str:
        return f'<GuildEmbed enabled={self.enabled} channel_id={self.channel_id!r}>'

    def to_dict(self) -> GuildEmbedPayload:
        return {
            'enabled': self.enabled,
            'channel_id': self.channel_id,
        }
