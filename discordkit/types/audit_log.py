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
from typing import Any, Dict, List, Optional, TypedDict
from typing_extensions import NotRequired

from .integration import Integration
from .user import User


class AuditLogChange(TypedDict):
    key: str
    new_value: NotRequired[Any]
    old_value: NotRequired[Any]


class AuditLogOptions(TypedDict, total=False):
    # Discord sends these counts as strings
    delete_member_days: str
    members_removed: str
    channel_id: str
    message_id: str
    count: str
    id: str
    type: str
    role_name: str


class AuditLogEntry(TypedDict):
    id: str
    target_id: Optional[str]
    changes: NotRequired[List[AuditLogChange]]
    user_id: str
    action_type: int
    options: NotRequired[AuditLogOptions]
    reason: NotRequired[str]


class GuildAuditLog(TypedDict):
    webhooks: List[Dict[str, Any]]
    users: List[User]
    audit_log_entries: List[AuditLogEntry]
    integrations: List[Integration]
