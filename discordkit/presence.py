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

from typing import TYPE_CHECKING, List, Optional

from .activity import Activity
from .enums import Status, try_enum
from .user import User

if TYPE_CHECKING:
    from .types.activity import Presence as PresencePayload

__all__ = (
    'Presence',
)


class Presence:
    """Represents a user's presence in a guild.

    Attributes
    -----------
    user: :class:`User`
        The user whose presence this is. Presence updates may only include
        the user's ID.
    status: :class:`Status`
        The user's status.
    activities: List[:class:`Activity`]
        The user's current activities.
    since: Optional[:class:`int`]
        When the user went idle, in milliseconds since the epoch.
    guild_id: Optional[:class:`str`]
        The ID of the guild the presence is for.
    """

    __slots__ = ('user', 'status', 'activities', 'since', 'guild_id')

    def __init__(self, *, data: PresencePayload):
        self.user: User = User(data=data['user'])
        self.status: Status = try_enum(Status, data.get('status', 'offline'))
        self.activities: List[Activity] = [Activity(data=activity) for activity in data.get('activities') or []]
        self.since: Optional[int] = data.get('since')
        self.guild_id: Optional[str] = data.get('guild_id')

    def __repr__(self) -> str:
        return f'<Presence user={self.user!r} status={self.status!r}>'

    @property
    def activity(self) -> Optional[Activity]:
        """Optional[:class:`Activity`]: The user's primary activity, if any."""
        return self.activities[0] if self.activities else None
