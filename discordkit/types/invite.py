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
from typing import Optional, TypedDict
from typing_extensions import NotRequired

from .channel import Channel
from .guild import Guild
from .user import User


class Invite(TypedDict):
    code: str
    guild: NotRequired[Guild]
    channel: Optional[Channel]
    inviter: NotRequired[User]
    created_at: NotRequired[str]
    max_age: NotRequired[int]
    uses: NotRequired[int]
    max_uses: NotRequired[int]
    revoked: NotRequired[bool]
    temporary: NotRequired[bool]
    unique: NotRequired[bool]
    target_user: NotRequired[User]
    target_user_type: NotRequired[int]
    approximate_presence_count: NotRequired[int]
    approximate_member_count: NotRequired[int]
