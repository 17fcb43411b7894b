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

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .enums import AuditLogAction, AuditLogChangeKey, AuditLogOptionsType, try_enum
from .integration import Integration
from .user import User
from .utils import get

if TYPE_CHECKING:
    from .types.audit_log import (
        AuditLogChange as AuditLogChangePayload,
        AuditLogEntry as AuditLogEntryPayload,
        AuditLogOptions as AuditLogOptionsPayload,
        GuildAuditLog as GuildAuditLogPayload,
    )

__all__ = (
    'AuditLogChange',
    'AuditLogOptions',
    'AuditLogEntry',
    'GuildAuditLog',
)


class AuditLogChange:
    """A single changed key in an audit log entry.

    The old and new values are kept exactly as Discord sent them, since
    their type depends on :attr:`key`.

    Attributes
    -----------
    key: :class:`AuditLogChangeKey`
        The name of the changed field.
    old_value: Any
        The value before the change, or ``None``.
    new_value: Any
        The value after the change, or ``None``.
    """

    __slots__ = ('key', 'old_value', 'new_value')

    def __init__(self, *, data: AuditLogChangePayload):
        self.key: AuditLogChangeKey = try_enum(AuditLogChangeKey, data['key'])
        self.old_value: Any = data.get('old_value')
        self.new_value: Any = data.get('new_value')

    def __repr__(self) -> str:
        return f'<AuditLogChange key={self.key!r} old_value={self.old_value!r} new_value={self.new_value!r}>'


class AuditLogOptions:
    """Extra information attached to certain audit log actions.

    Counts and IDs are strings, as Discord sends them.
    """

    __slots__ = (
        'delete_member_days',
        'members_removed',
        'channel_id',
        'message_id',
        'count',
        'id',
        'type',
        'role_name',
    )

    def __init__(self, *, data: AuditLogOptionsPayload):
        self.delete_member_days: Optional[str] = data.get('delete_member_days')
        self.members_removed: Optional[str] = data.get('members_removed')
        self.channel_id: Optional[str] = data.get('channel_id')
        self.message_id: Optional[str] = data.get('message_id')
        self.count: Optional[str] = data.get('count')
        self.id: Optional[str] = data.get('id')
        type = data.get('type')
        self.type: Optional[AuditLogOptionsType] = try_enum(AuditLogOptionsType, type) if type is not None else None
        self.role_name: Optional[str] = data.get('role_name')

    def __repr__(self) -> str:
        return f'<AuditLogOptions id={self.id!r} type={self.type!r}>'


class AuditLogEntry:
    """Represents a single action in a guild's audit log.

    Attributes
    -----------
    id: :class:`str`
        The entry's ID.
    target_id: Optional[:class:`str`]
        The ID of the affected entity.
    user_id: Optional[:class:`str`]
        The ID of the user that performed the action.
    action: :class:`AuditLogAction`
        The type of action.
    changes: List[:class:`AuditLogChange`]
        The changes made to the target.
    options: Optional[:class:`AuditLogOptions`]
        Extra information for certain action types.
    reason: Optional[:class:`str`]
        The reason given for the action.
    """

    __slots__ = ('id', 'target_id', 'user_id', 'action', 'changes', 'options', 'reason')

    def __init__(self, *, data: AuditLogEntryPayload):
        self.id: str = data['id']
        self.target_id: Optional[str] = data.get('target_id')
        self.user_id: Optional[str] = data.get('user_id')
        self.action: AuditLogAction = try_enum(AuditLogAction, data.get('action_type'))
        self.changes: List[AuditLogChange] = [AuditLogChange(data=change) for change in data.get('changes') or []]
        options = data.get('options')
        self.options: Optional[AuditLogOptions] = AuditLogOptions(data=options) if options else None
        self.reason: Optional[str] = data.get('reason')

    def __repr__(self) -> str:
        return f'<AuditLogEntry id={self.id!r} action={self.action!r} user_id={self.user_id!r}>'


class GuildAuditLog:
    """Represents a page of a guild's audit log, with the users, webhooks
    and integrations referenced by its entries.

    Webhooks are kept as raw payloads.
    """

    __slots__ = ('webhooks', 'users', 'entries', 'integrations')

    def __init__(self, *, data: GuildAuditLogPayload):
        self.webhooks: List[Dict[str, Any]] = data.get('webhooks') or []
        self.users: List[User] = [User(data=user) for user in data.get('users') or []]
        self.entries: List[AuditLogEntry] = [AuditLogEntry(data=entry) for entry in data.get('audit_log_entries') or []]
        self.integrations: List[Integration] = [Integration(data=integration) for integration in data.get('integrations') or []]

    def __repr__(self) -> str:
        return f'<GuildAuditLog entries={len(self.entries)} users={len(self.users)}>'

    def get_user(self, user_id: str, /) -> Optional[User]:
        """Optional[:class:`User`]: The user referenced by this page with the
        given ID."""
        return get(self.users, id=user_id)
