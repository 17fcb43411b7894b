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
from typing import TYPE_CHECKING, Optional

from .enums import (
    GuildScheduledEventEntityType,
    GuildScheduledEventPrivacyLevel,
    GuildScheduledEventStatus,
    try_enum,
)
from .user import Member, User
from .utils import ISO8601

if TYPE_CHECKING:
    from .types.scheduled_event import (
        GuildScheduledEvent as GuildScheduledEventPayload,
        GuildScheduledEventEntityMetadata as GuildScheduledEventEntityMetadataPayload,
        GuildScheduledEventUser as GuildScheduledEventUserPayload,
    )

__all__ = (
    'GuildScheduledEventEntityMetadata',
    'GuildScheduledEvent',
    'GuildScheduledEventUser',
)


class GuildScheduledEventEntityMetadata:
    __slots__ = ('location',)

    def __init__(self, *, data: GuildScheduledEventEntityMetadataPayload):
        self.location: Optional[str] = data.get('location')

    def __repr__(self) -> str:
        return f'<GuildScheduledEventEntityMetadata location={self.location!r}>'


class GuildScheduledEvent:
    """Represents a scheduled event in a guild.

    .. container:: operations

        .. describe:: x == y

            Checks if two events are equal.

        .. describe:: str(x)

            Returns the name of the event.

    Attributes
    -----------
    id: :class:`str`
        The event's ID.
    guild_id: :class:`str`
        The ID of the guild the event belongs to.
    channel_id: Optional[:class:`str`]
        The ID of the channel the event will be hosted in. ``None`` for
        external events.
    creator_id: Optional[:class:`str`]
        The ID of the user that created the event.
    name: :class:`str`
        The event's name.
    description: Optional[:class:`str`]
        The event's description.
    scheduled_start_time: Optional[:class:`datetime.datetime`]
        When the event will start.
    scheduled_end_time: Optional[:class:`datetime.datetime`]
        When the event will end. Required for external events.
    privacy_level: :class:`GuildScheduledEventPrivacyLevel`
        Who can see the event.
    status: :class:`GuildScheduledEventStatus`
        The event's status.
    entity_type: :class:`GuildScheduledEventEntityType`
        Where the event takes place.
    entity_id: Optional[:class:`str`]
        The ID of the entity hosting the event.
    entity_metadata: Optional[:class:`GuildScheduledEventEntityMetadata`]
        Extra data for external events.
    creator: Optional[:class:`User`]
        The user that created the event.
    user_count: :class:`int`
        The number of users subscribed to the event, when requested.
    """

    __slots__ = (
        'id',
        'guild_id',
        'channel_id',
        'creator_id',
        'name',
        'description',
        'scheduled_start_time',
        'scheduled_end_time',
        'privacy_level',
        'status',
        'entity_type',
        'entity_id',
        'entity_metadata',
        'creator',
        'user_count',
    )

    def __init__(self, *, data: GuildScheduledEventPayload):
        self.id: str = data['id']
        self.guild_id: str = data['guild_id']
        self.channel_id: Optional[str] = data.get('channel_id')
        self.creator_id: Optional[str] = data.get('creator_id')
        self.name: str = data.get('name') or ''
        self.description: Optional[str] = data.get('description')
        self.scheduled_start_time: Optional[datetime.datetime] = ISO8601(data.get('scheduled_start_time'))
        self.scheduled_end_time: Optional[datetime.datetime] = ISO8601(data.get('scheduled_end_time'))
        self.privacy_level: GuildScheduledEventPrivacyLevel = try_enum(
            GuildScheduledEventPrivacyLevel, data.get('privacy_level', 2)
        )
        self.status: GuildScheduledEventStatus = try_enum(GuildScheduledEventStatus, data.get('status', 1))
        self.entity_type: GuildScheduledEventEntityType = try_enum(GuildScheduledEventEntityType, data.get('entity_type'))
        self.entity_id: Optional[str] = data.get('entity_id')

        entity_metadata = data.get('entity_metadata')
        self.entity_metadata: Optional[GuildScheduledEventEntityMetadata] = (
            GuildScheduledEventEntityMetadata(data=entity_metadata) if entity_metadata else None
        )
        self.creator: Optional[User] = User(data=data['creator']) if data.get('creator') else None
        self.user_count: int = data.get('user_count', 0)

    def __eq__(self, other) -> bool:
        return isinstance(other, GuildScheduledEvent) and self.id == other.id

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'<GuildScheduledEvent id={self.id!r} name={self.name!r} status={self.status!r}>'

    @property
    def location(self) -> Optional[str]:
        """Optional[:class:`str`]: The location of an external event."""
        return self.entity_metadata.location if self.entity_metadata else None


class GuildScheduledEventUser:
    """A user subscribed to a scheduled event."""

    __slots__ = ('event_id', 'user', 'member')

    def __init__(self, *, data: GuildScheduledEventUserPayload):
        self.event_id: str = data['guild_scheduled_event_id']
        self.user: User = User(data=data['user'])
        self.member: Optional[Member] = Member(data=data['member']) if data.get('member') else None

    def __repr__(self) -> str:
        return f'<GuildScheduledEventUser event_id={self.event_id!r} user={self.user!r}>'
