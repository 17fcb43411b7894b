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
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .emoji import Emoji
from .enums import ActivityType, Status, try_enum
from .flags import ActivityFlags
from .utils import millis_to_datetime, truncate_millis

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.activity import (
        Activity as ActivityPayload,
        Assets as AssetsPayload,
        GatewayStatusUpdate as GatewayStatusUpdatePayload,
        Party as PartyPayload,
        Secrets as SecretsPayload,
        TimeStamps as TimeStampsPayload,
    )

__all__ = (
    'TimeStamps',
    'Assets',
    'Party',
    'Secrets',
    'Activity',
    'GatewayStatusUpdate',
)


class TimeStamps:
    """The start and end times of a rich presence activity.

    Discord sends these as floating-point milliseconds since the Unix epoch.
    They are kept as integer milliseconds, truncated rather than rounded, so
    ``1609459200500.7`` becomes ``1609459200500``.

    Attributes
    -----------
    start: :class:`int`
        When the activity started, in milliseconds since the epoch. ``0`` if
        not sent.
    end: :class:`int`
        When the activity will end, in milliseconds since the epoch. ``0`` if
        not sent.
    """

    __slots__ = ('start', 'end')

    def __init__(self, *, start: int = 0, end: int = 0):
        self.start: int = start
        self.end: int = end

    @classmethod
    def from_dict(cls, data: TimeStampsPayload) -> Self:
        start = data.get('start')
        end = data.get('end')
        return cls(
            start=truncate_millis(start) if start is not None else 0,
            end=truncate_millis(end) if end is not None else 0,
        )

    def __eq__(self, other) -> bool:
        return isinstance(other, TimeStamps) and self.start == other.start and self.end == other.end

    def __repr__(self) -> str:
        return f'<TimeStamps start={self.start} end={self.end}>'

    @property
    def started_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: :attr:`start` as an aware
        datetime, or ``None`` if it was not sent."""
        return millis_to_datetime(self.start) if self.start else None

    @property
    def ends_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: :attr:`end` as an aware
        datetime, or ``None`` if it was not sent."""
        return millis_to_datetime(self.end) if self.end else None

    def to_dict(self) -> TimeStampsPayload:
        payload: TimeStampsPayload = {}
        if self.start:
            payload['start'] = self.start
        if self.end:
            payload['end'] = self.end
        return payload


class Assets:
    __slots__ = ('large_image', 'small_image', 'large_text', 'small_text')

    def __init__(self, *, data: AssetsPayload):
        self.large_image: Optional[str] = data.get('large_image')
        self.small_image: Optional[str] = data.get('small_image')
        self.large_text: Optional[str] = data.get('large_text')
        self.small_text: Optional[str] = data.get('small_text')

    def __repr__(self) -> str:
        return f'<Assets large_image={self.large_image!r} small_image={self.small_image!r}>'

    def to_dict(self) -> AssetsPayload:
        return {key: getattr(self, key) for key in self.__slots__ if getattr(self, key)}


class Party:
    """The party of a rich presence activity.

    Attributes
    -----------
    id: Optional[:class:`str`]
        The party's ID.
    size: List[:class:`int`]
        The party's current and maximum size, when sent.
    """

    __slots__ = ('id', 'size')

    def __init__(self, *, data: PartyPayload):
        self.id: Optional[str] = data.get('id')
        self.size: List[int] = data.get('size') or []

    def __repr__(self) -> str:
        return f'<Party id={self.id!r} size={self.size!r}>'

    @property
    def current_size(self) -> Optional[int]:
        return self.size[0] if len(self.size) == 2 else None

    @property
    def max_size(self) -> Optional[int]:
        return self.size[1] if len(self.size) == 2 else None

    def to_dict(self) -> PartyPayload:
        payload: PartyPayload = {}
        if self.id:
            payload['id'] = self.id
        if self.size:
            payload['size'] = self.size
        return payload


class Secrets:
    __slots__ = ('join', 'spectate', 'match')

    def __init__(self, *, data: SecretsPayload):
        self.join: Optional[str] = data.get('join')
        self.spectate: Optional[str] = data.get('spectate')
        self.match: Optional[str] = data.get('match')

    def __repr__(self) -> str:
        return '<Secrets>'

    def to_dict(self) -> SecretsPayload:
        return {key: getattr(self, key) for key in self.__slots__ if getattr(self, key)}


class Activity:
    """Represents a rich presence activity, such as a game being played or a
    stream.

    Received activities are decoded from their payload with
    ``Activity(data=...)``. To set the client's own activity, construct one
    with :meth:`Activity.create` and pass it to :class:`GatewayStatusUpdate`.

    Attributes
    -----------
    name: :class:`str`
        The activity's name.
    type: :class:`ActivityType`
        The type of activity.
    url: Optional[:class:`str`]
        The stream URL, for :attr:`ActivityType.streaming` activities.
    created_at: Optional[:class:`datetime.datetime`]
        When the activity was added to the user's session.
    application_id: Optional[:class:`str`]
        The ID of the application the activity belongs to.
    state: Optional[:class:`str`]
        The user's current party status.
    details: Optional[:class:`str`]
        What the user is currently doing.
    timestamps: :class:`TimeStamps`
        The activity's start and end times.
    emoji: Optional[:class:`Emoji`]
        The emoji of a custom status.
    party: Optional[:class:`Party`]
        The activity's party.
    assets: Optional[:class:`Assets`]
        The activity's images and their hover texts.
    secrets: Optional[:class:`Secrets`]
        Secrets for joining and spectating.
    instance: :class:`bool`
        Whether the activity is an instanced game session.
    flags: :class:`ActivityFlags`
        The activity's flags.
    """

    __slots__ = (
        'name',
        'type',
        'url',
        'created_at',
        'application_id',
        'state',
        'details',
        'timestamps',
        'emoji',
        'party',
        'assets',
        'secrets',
        'instance',
        'flags',
    )

    def __init__(self, *, data: ActivityPayload):
        self.name: str = data.get('name') or ''
        self.type: ActivityType = try_enum(ActivityType, data.get('type', 0))
        self.url: Optional[str] = data.get('url')
        self.created_at: Optional[datetime.datetime] = millis_to_datetime(data.get('created_at'))
        self.application_id: Optional[str] = data.get('application_id')
        self.state: Optional[str] = data.get('state')
        self.details: Optional[str] = data.get('details')
        self.timestamps: TimeStamps = TimeStamps.from_dict(data.get('timestamps') or {})

        emoji = data.get('emoji')
        self.emoji: Optional[Emoji] = Emoji(data=emoji) if emoji else None
        party = data.get('party')
        self.party: Optional[Party] = Party(data=party) if party else None
        assets = data.get('assets')
        self.assets: Optional[Assets] = Assets(data=assets) if assets else None
        secrets = data.get('secrets')
        self.secrets: Optional[Secrets] = Secrets(data=secrets) if secrets else None

        self.instance: bool = data.get('instance', False)
        self.flags: ActivityFlags = ActivityFlags._from_payload(data.get('flags'))

    @classmethod
    def create(cls, name: str, *, type: ActivityType = ActivityType.game, url: Optional[str] = None) -> Self:
        """Creates an activity to send with a status update.

        Parameters
        -----------
        name: :class:`str`
            The activity's name.
        type: :class:`ActivityType`
            The type of activity. Defaults to :attr:`ActivityType.game`.
        url: Optional[:class:`str`]
            The stream URL. Discord ignores this for non-streaming
            activities.
        """
        data: ActivityPayload = {'name': name, 'type': type.value}
        if url is not None:
            data['url'] = url
        return cls(data=data)

    def __repr__(self) -> str:
        return f'<Activity name={self.name!r} type={self.type!r}>'

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'name': self.name,
            'type': self.type.value,
        }
        if self.url:
            payload['url'] = self.url
        if self.created_at is not None:
            payload['created_at'] = round(self.created_at.timestamp() * 1000)
        if self.application_id:
            payload['application_id'] = self.application_id
        if self.state:
            payload['state'] = self.state
        if self.details:
            payload['details'] = self.details

        timestamps = self.timestamps.to_dict()
        if timestamps:
            payload['timestamps'] = timestamps
        if self.emoji is not None:
            payload['emoji'] = self.emoji.to_dict()
        if self.party is not None:
            payload['party'] = self.party.to_dict()
        if self.assets is not None:
            payload['assets'] = self.assets.to_dict()
        if self.secrets is not None:
            payload['secrets'] = self.secrets.to_dict()
        if self.instance:
            payload['instance'] = True
        if self.flags.value:
            payload['flags'] = self.flags.value
        return payload


class GatewayStatusUpdate:
    """The presence the client sends when identifying or updating its status.

    Parameters
    -----------
    status: :class:`Status`
        The client's status. Defaults to :attr:`Status.online`.
    activity: Optional[:class:`Activity`]
        The activity to display.
    since: :class:`int`
        When the client went idle, in milliseconds since the epoch. ``0``
        if it is not idle.
    afk: :class:`bool`
        Whether the client is AFK.
    """

    __slots__ = ('since', 'activity', 'status', 'afk')

    def __init__(
        self,
        *,
        status: Status = Status.online,
        activity: Optional[Activity] = None,
        since: int = 0,
        afk: bool = False,
    ):
        self.status: Status = status
        self.activity: Optional[Activity] = activity
        self.since: int = since
        self.afk: bool = afk

    @classmethod
    def from_dict(cls, data: GatewayStatusUpdatePayload) -> Self:
        game = data.get('game')
        return cls(
            status=try_enum(Status, data.get('status')),
            activity=Activity(data=game) if game else None,
            since=data.get('since') or 0,
            afk=data.get('afk', False),
        )

    def __repr__(self) -> str:
        return f'<GatewayStatusUpdate status={self.status!r} activity={self.activity!r} afk={self.afk}>'

    def to_dict(self) -> GatewayStatusUpdatePayload:
        return {
            'since': self.since,
            'game': self.activity.to_dict() if self.activity is not None else None,
            'status': self.status.value,
            'afk': self.afk,
        }
