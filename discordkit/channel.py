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

from .enums import ChannelType, try_enum
from .permissions import PermissionOverwrite
from .user import User
from .utils import ISO8601, MISSING, channel_mention

if TYPE_CHECKING:
    from .types.channel import Channel as ChannelPayload, ChannelFollow as ChannelFollowPayload


__all__ = (
    'Channel',
    'ChannelEdit',
    'ChannelFollow',
)


class Channel:
    """Represents a channel of any type: a guild text, voice, category,
    news or store channel, a DM, or a group DM.

    .. container:: operations

        .. describe:: x == y

            Checks if two channels are equal.

        .. describe:: x != y

            Checks if two channels are not equal.

        .. describe:: hash(x)

            Returns the channel's hash.

        .. describe:: str(x)

            Returns the name of the channel.

    Attributes
    -----------
    id: :class:`str`
        The channel's ID.
    type: :class:`ChannelType`
        The type of channel.
    guild_id: Optional[:class:`str`]
        The ID of the guild the channel is in. ``None`` for DMs.
    name: :class:`str`
        The channel's name. DMs have no name.
    topic: Optional[:class:`str`]
        The channel's topic.
    nsfw: :class:`bool`
        Whether the channel is marked as NSFW.
    position: :class:`int`
        The channel's position in the channel list.
    bitrate: :class:`int`
        The bitrate of a voice channel.
    user_limit: :class:`int`
        The maximum number of users in a voice channel. ``0`` means no limit.
    parent_id: Optional[:class:`str`]
        The ID of the category the channel is in.
    rate_limit_per_user: :class:`int`
        The slowmode delay in seconds.
    last_message_id: Optional[:class:`str`]
        The ID of the last message sent in the channel. It may not point to
        an existing message.
    last_pin_timestamp: Optional[:class:`datetime.datetime`]
        When a message was last pinned.
    recipients: List[:class:`User`]
        The recipients of a DM or group DM.
    overwrites: List[:class:`PermissionOverwrite`]
        The channel's permission overwrites.
    """

    __slots__: Tuple[str, ...] = (
        'id',
        'type',
        'guild_id',
        'name',
        'topic',
        'nsfw',
        'icon',
        'position',
        'bitrate',
        'user_limit',
        'parent_id',
        'rate_limit_per_user',
        'owner_id',
        'application_id',
        'last_message_id',
        'last_pin_timestamp',
        'recipients',
        'overwrites',
    )

    def __init__(self, *, data: ChannelPayload, guild_id: Optional[str] = None):
        self.id: str = data['id']
        self.type: ChannelType = try_enum(ChannelType, data.get('type'))
        self.guild_id: Optional[str] = data.get('guild_id', guild_id)
        self.name: str = data.get('name') or ''
        self.topic: Optional[str] = data.get('topic')
        self.nsfw: bool = data.get('nsfw', False)
        self.icon: Optional[str] = data.get('icon')
        self.position: int = data.get('position', 0)
        self.bitrate: int = data.get('bitrate', 0)
        self.user_limit: int = data.get('user_limit', 0)
        self.parent_id: Optional[str] = data.get('parent_id')
        self.rate_limit_per_user: int = data.get('rate_limit_per_user', 0)
        self.owner_id: Optional[str] = data.get('owner_id')
        self.application_id: Optional[str] = data.get('application_id')
        self.last_message_id: Optional[str] = data.get('last_message_id')
        self.last_pin_timestamp: Optional[datetime.datetime] = ISO8601(data.get('last_pin_timestamp'))

        self.recipients: List[User] = [User(data=user_data) for user_data in data.get('recipients') or []]
        self.overwrites: List[PermissionOverwrite] = [
            PermissionOverwrite.from_dict(overwrite_data)
            for overwrite_data in data.get('permission_overwrites') or []
        ]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'<Channel id={self.id!r} name={self.name!r} type={self.type!r}>'

    def __eq__(self, other) -> bool:
        return isinstance(other, Channel) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def mention(self) -> str:
        """:class:`str`: The mention string for this channel."""
        return channel_mention(self.id)

    def overwrites_for(self, id: str) -> Optional[PermissionOverwrite]:
        """Returns the permission overwrite targeting the role or member with
        the given ID, or ``None`` if there is none."""
        for overwrite in self.overwrites:
            if overwrite.id == id:
                return overwrite
        return None


class ChannelEdit:
    """Holds the fields to change when editing a channel.

    Only the fields that were passed are sent, except ``position`` which is
    always included.
    """

    def __init__(
        self,
        *,
        name: str = MISSING,
        topic: str = MISSING,
        nsfw: bool = MISSING,
        position: int = 0,
        bitrate: int = MISSING,
        user_limit: int = MISSING,
        overwrites: List[PermissionOverwrite] = MISSING,
        parent_id: Optional[str] = MISSING,
        rate_limit_per_user: int = MISSING,
    ):
        self.name = name
        self.topic = topic
        self.nsfw = nsfw
        self.position = position
        self.bitrate = bitrate
        self.user_limit = user_limit
        self.overwrites = overwrites
        self.parent_id = parent_id
        self.rate_limit_per_user = rate_limit_per_user

    def __repr__(self) -> str:
        return f'<ChannelEdit {self.to_dict()!r}>'

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {'position': self.position}
        if self.name is not MISSING:
            payload['name'] = self.name
        if self.topic is not MISSING:
            payload['topic'] = self.topic
        if self.nsfw is not MISSING:
            payload['nsfw'] = self.nsfw
        if self.bitrate is not MISSING:
            payload['bitrate'] = self.bitrate
        if self.user_limit is not MISSING:
            payload['user_limit'] = self.user_limit
        if self.overwrites is not MISSING:
            payload['permission_overwrites'] = [overwrite.to_dict() for overwrite in self.overwrites]
        if self.parent_id is not MISSING:
            payload['parent_id'] = self.parent_id
        if self.rate_limit_per_user is not MISSING:
            payload['rate_limit_per_user'] = self.rate_limit_per_user
        return payload


class ChannelFollow:
    """The result of following a news channel."""

    __slots__ = ('channel_id', 'webhook_id')

    def __init__(self, *, data: ChannelFollowPayload):
        self.channel_id: str = data['channel_id']
        self.webhook_id: str = data['webhook_id']

    def __repr__(self) -> str:
        return f'<ChannelFollow channel_id={self.channel_id!r} webhook_id={self.webhook_id!r}>'
