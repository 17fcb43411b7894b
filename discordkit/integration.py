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
from typing import TYPE_CHECKING, List, Optional

from .enums import ExpireBehavior, try_enum
from .user import User
from .utils import ISO8601

if TYPE_CHECKING:
    from .types.integration import (
        Integration as IntegrationPayload,
        IntegrationAccount as IntegrationAccountPayload,
        UserConnection as UserConnectionPayload,
    )

__all__ = (
    'IntegrationAccount',
    'Integration',
    'UserConnection',
)


class IntegrationAccount:
    __slots__ = ('id', 'name')

    def __init__(self, *, data: IntegrationAccountPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''

    def __repr__(self) -> str:
        return f'<IntegrationAccount id={self.id!r} name={self.name!r}>'


class Integration:
    """Represents a guild integration, such as a Twitch or YouTube
    subscription.

    Attributes
    -----------
    id: :class:`str`
        The integration's ID.
    name: :class:`str`
        The integration's name.
    type: :class:`str`
        The integration's service, e.g. ``twitch``.
    enabled: :class:`bool`
        Whether the integration is enabled.
    syncing: :class:`bool`
        Whether the integration is currently syncing.
    role_id: Optional[:class:`str`]
        The ID of the role given to subscribers.
    enable_emoticons: :class:`bool`
        Whether emoticons should be synced.
    expire_behavior: :class:`ExpireBehavior`
        What happens to a subscriber when their subscription expires.
    expire_grace_period: :class:`int`
        How many days to wait before applying :attr:`expire_behavior`.
    user: Optional[:class:`User`]
        The user that set up the integration.
    account: :class:`IntegrationAccount`
        The integration's account on the external service.
    synced_at: Optional[:class:`datetime.datetime`]
        When the integration last synced.
    """

    __slots__ = (
        'id',
        'name',
        'type',
        'enabled',
        'syncing',
        'role_id',
        'enable_emoticons',
        'expire_behavior',
        'expire_grace_period',
        'user',
        'account',
        'synced_at',
    )

    def __init__(self, *, data: IntegrationPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.type: str = data.get('type') or ''
        self.enabled: bool = data.get('enabled', False)
        self.syncing: bool = data.get('syncing', False)
        self.role_id: Optional[str] = data.get('role_id')
        self.enable_emoticons: bool = data.get('enable_emoticons', False)
        self.expire_behavior: ExpireBehavior = try_enum(ExpireBehavior, data.get('expire_behavior', 0))
        self.expire_grace_period: int = data.get('expire_grace_period', 0)
        self.user: Optional[User] = User(data=data['user']) if data.get('user') else None
        self.account: IntegrationAccount = IntegrationAccount(data=data['account'])
        self.synced_at: Optional[datetime.datetime] = ISO8601(data.get('synced_at'))

    def __eq__(self, other) -> bool:
        return isinstance(other, Integration) and self.id == other.id

    def __repr__(self) -> str:
        return f'<Integration id={self.id!r} name={self.name!r} type={self.type!r}>'


class UserConnection:
    """Represents an external account connected to a user's profile."""

    __slots__ = ('id', 'name', 'type', 'revoked', 'integrations')

    def __init__(self, *, data: UserConnectionPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.type: str = data.get('type') or ''
        self.revoked: bool = data.get('revoked', False)
        self.integrations: List[Integration] = [
            Integration(data=integration) for integration in data.get('integrations') or []
        ]

    def __repr__(self) -> str:
        return f'<UserConnection id={self.id!r} type={self.type!r}>'
