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
from typing import List, Optional, TypedDict
from typing_extensions import NotRequired


class VoiceState(TypedDict):
    user_id: str
    session_id: str
    channel_id: Optional[str]
    guild_id: NotRequired[str]
    suppress: bool
    self_mute: bool
    self_deaf: bool
    mute: bool
    deaf: bool


class VoiceRegion(TypedDict):
    id: str
    name: str
    sample_hostname: NotRequired[str]
    sample_port: NotRequired[int]


class ICEServer(TypedDict):
    url: str
    username: str
    credential: str


class VoiceICE(TypedDict):
    ttl: str
    servers: List[ICEServer]
