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

from .channel import Channel
from .enums import TargetUserType, try_enum
from .guild import Guild
from .user import User
from .utils import ISO8601

if TYPE_CHECKING:
    from .types.invite import Invite as InvitePayload

__all__ = (
    'Invite',
)


class Invite:
    """Represents an invite to a guild or group DM.

    .. container:: operations

        .. describe:: x == y

            Checks if two invites are equal.

        .. describe:: str(x)

            Returns the invite's URL.

    Attributes
    -----------
    code: :class:`str`
        The invite's code.
    guild: Optional[:class:`Guild`]
        The partial guild the invite is for.
    channel: Optional[:class:`Channel`]
        The partial channel the invite is for.
    inviter: Optional[:class:`User`]
        The user that created the invite.
    created_at: Optional[:class:`datetime.datetime`]
        When the invite was created.
    max_age: :class:`int`
        How long the invite is valid for, in seconds. ``0`` means forever.
    uses: :class:`int`
        How many times the invite has been used.
    max_uses: :class:`int`
        How many times the invite can be used. ``0`` means unlimited.
    revoked: :class:`bool`
        Whether the invite has been revoked.
    temporary: :class:`bool`
        Whether the invite only grants temporary membership.
    unique: :class:`bool`
        Whether the invite was created as a one-off.
    target_user: Optional[:class:`User`]
        The user whose stream the invite targets.
    target_user_type: Optional[:class:`TargetUserType`]
        The kind of target, when :attr:`target_user` is set.
    approximate_presence_count: :class:`int`
        The approximate number of online members, when requested.
    approximate_member_count: :class:`int`
        The approximate number of members, when requested.
    """

    __slots__ = (
        'code',
        'guild',
        'channel',
        'inviter',
        'created_at',
        'max_age',
        'uses',
        'max_uses',
        'revoked',
        'temporary',
        'unique',
        'target_user',
        'target_user_type',
        'approximate_presence_count',
        'approximate_member_count',
    )

    BASE = 'https://discord.gg'

    def __init__(self, *, data: InvitePayload):
        self.code: str = data['code']

        guild = data.get('guild')
        self.guild: Optional[Guild] = Guild(data=guild) if guild else None
        channel = data.get('channel')
        self.channel: Optional[Channel] = (
            Channel(data=channel, guild_id=self.guild.id if self.guild else None) if channel else None
        )
        self.inviter: Optional[User] = User(data=data['inviter']) if data.get('inviter') else None

        self.created_at: Optional[datetime.datetime] = ISO8601(data.get('created_at'))
        self.max_age: int = data.get('max_age', 0)
        self.uses: int = data.get('uses', 0)
        self.max_uses: int = data.get('max_uses', 0)
        self.revoked: bool = data.get('revoked', False)
        self.temporary: bool = data.get('temporary', False)
        self.unique: bool = data.get('unique', False)

        self.target_user: Optional[User] = User(data=data['target_user']) if data.get('target_user') else None
        target_user_type = data.get('target_user_type')
        self.target_user_type: Optional[TargetUserType] = (
            try_enum(TargetUserType, target_user_type) if target_user_type is not None else None
        )
        self.approximate_presence_count: int = data.get('approximate_presence_count', 0)
        self.approximate_member_count: int = data.get('approximate_member_count', 0)

    def __eq__(self, other) -> bool:
        return isinstance(other, Invite) and self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f'<Invite code={self.code!r} guild={self.guild!r}>'

    @property
    def url(self) -> str:
        """:class:`str`: The full URL of the invite."""
        return f'{self.BASE}/{self.code}'

    @property
    def expires_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the invite expires, or
        ``None`` if it never does or its creation time is unknown."""
        if not self.max_age or self.created_at is None:
            return None
        return self.created_at + datetime.timedelta(seconds=self.max_age)
