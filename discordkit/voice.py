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

if TYPE_CHECKING:
    from .types.voice import (
        ICEServer as ICEServerPayload,
        VoiceICE as VoiceICEPayload,
        VoiceRegion as VoiceRegionPayload,
        VoiceState as VoiceStatePayload,
    )

__all__ = (
    'VoiceState',
    'VoiceRegion',
    'ICEServer',
    'VoiceICE',
)


class VoiceState:
    """Represents a user's connection state in a voice channel.

    Attributes
    -----------
    user_id: :class:`str`
        The ID of the user this state is for.
    session_id: :class:`str`
        The voice session ID.
    channel_id: Optional[:class:`str`]
        The ID of the channel the user is connected to. ``None`` when the
        user has disconnected.
    guild_id: Optional[:class:`str`]
        The ID of the guild the channel is in.
    suppress: :class:`bool`
        Whether the user is suppressed by the current user.
    self_mute: :class:`bool`
        Whether the user has muted themselves.
    self_deaf: :class:`bool`
        Whether the user has deafened themselves.
    mute: :class:`bool`
        Whether the user is muted by the guild.
    deaf: :class:`bool`
        Whether the user is deafened by the guild.
    """

    __slots__ = (
        'user_id',
        'session_id',
        'channel_id',
        'guild_id',
        'suppress',
        'self_mute',
        'self_deaf',
        'mute',
        'deaf',
    )

    def __init__(self, *, data: VoiceStatePayload):
        self.user_id: str = data['user_id']
        self.session_id: str = data.get('session_id') or ''
        self.channel_id: Optional[str] = data.get('channel_id')
        self.guild_id: Optional[str] = data.get('guild_id')
        self.suppress: bool = data.get('suppress', False)
        self.self_mute: bool = data.get('self_mute', False)
        self.self_deaf: bool = data.get('self_deaf', False)
        self.mute: bool = data.get('mute', False)
        self.deaf: bool = data.get('deaf', False)

    def __repr__(self) -> str:
        return f'<VoiceState user_id={self.user_id!r} channel_id={self.channel_id!r}>'

    @property
    def connected(self) -> bool:
        """:class:`bool`: Whether the user is currently in a voice channel."""
        return self.channel_id is not None


class VoiceRegion:
    __slots__ = ('id', 'name', 'hostname', 'port')

    def __init__(self, *, data: VoiceRegionPayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.hostname: Optional[str] = data.get('sample_hostname')
        self.port: Optional[int] = data.get('sample_port')

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'<VoiceRegion id={self.id!r} name={self.name!r}>'


class ICEServer:
    __slots__ = ('url', 'username', 'credential')

    def __init__(self, *, data: ICEServerPayload):
        self.url: str = data['url']
        self.username: str = data.get('username') or ''
        self.credential: str = data.get('credential') or ''

    def __repr__(self) -> str:
        return f'<ICEServer url={self.url!r}>'


class VoiceICE:
    """A set of ICE servers to use for a voice connection, valid for
    :attr:`ttl` seconds."""

    __slots__ = ('ttl', 'servers')

    def __init__(self, *, data: VoiceICEPayload):
        self.ttl: str = data.get('ttl') or ''
        self.servers: List[ICEServer] = [ICEServer(data=server) for server in data.get('servers') or []]

    def __repr__(self) -> str:
        return f'<VoiceICE ttl={self.ttl!r} servers={len(self.servers)}>'
