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

import sys
from typing import TYPE_CHECKING, Optional, Tuple

from .activity import GatewayStatusUpdate
from .intents import Intents, make_intent

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.gateway import (
        GatewayBot as GatewayBotPayload,
        Identify as IdentifyPayload,
        IdentifyProperties as IdentifyPropertiesPayload,
        SessionStartLimit as SessionStartLimitPayload,
    )

__all__ = (
    'IdentifyProperties',
    'Identify',
    'SessionInformation',
    'GatewayBotResponse',
)


class IdentifyProperties:
    """The connection properties sent when identifying with the gateway.

    All values default to describing this library on the current platform.
    """

    __slots__ = ('os', 'browser', 'device', 'referer', 'referring_domain')

    def __init__(
        self,
        *,
        os: str = sys.platform,
        browser: str = 'discordkit.py',
        device: str = 'discordkit.py',
        referer: str = '',
        referring_domain: str = '',
    ):
        self.os = os
        self.browser = browser
        self.device = device
        self.referer = referer
        self.referring_domain = referring_domain

    @classmethod
    def from_dict(cls, data: IdentifyPropertiesPayload) -> Self:
        return cls(
            os=data.get('$os', ''),
            browser=data.get('$browser', ''),
            device=data.get('$device', ''),
            referer=data.get('$referer', ''),
            referring_domain=data.get('$referring_domain', ''),
        )

    def __repr__(self) -> str:
        return f'<IdentifyProperties os={self.os!r} browser={self.browser!r}>'

    def to_dict(self) -> IdentifyPropertiesPayload:
        return {
            '$os': self.os,
            '$browser': self.browser,
            '$device': self.device,
            '$referer': self.referer,
            '$referring_domain': self.referring_domain,
        }


class Identify:
    """The payload sent during the initial handshake with the gateway.

    Parameters
    -----------
    token: :class:`str`
        The bot token, including its ``Bot`` prefix where required.
    intents: :class:`Intents`
        The gateway intents to subscribe to.
    properties: Optional[:class:`IdentifyProperties`]
        The connection properties. Defaults are used if not passed.
    compress: :class:`bool`
        Whether the gateway should compress its payloads.
    large_threshold: :class:`int`
        The member count above which offline members are not sent.
    shard: Optional[Tuple[:class:`int`, :class:`int`]]
        ``(shard_id, shard_count)`` when sharding.
    presence: Optional[:class:`GatewayStatusUpdate`]
        The initial presence.
    guild_subscriptions: :class:`bool`
        Whether to receive presence and typing events.
    """

    __slots__ = (
        'token',
        'properties',
        'compress',
        'large_threshold',
        'shard',
        'presence',
        'guild_subscriptions',
        'intents',
    )

    def __init__(
        self,
        token: str,
        *,
        intents: Intents,
        properties: Optional[IdentifyProperties] = None,
        compress: bool = False,
        large_threshold: int = 250,
        shard: Optional[Tuple[int, int]] = None,
        presence: Optional[GatewayStatusUpdate] = None,
        guild_subscriptions: bool = True,
    ):
        self.token: str = token
        self.intents: Intents = intents
        self.properties: IdentifyProperties = properties or IdentifyProperties()
        self.compress: bool = compress
        self.large_threshold: int = large_threshold
        self.shard: Optional[Tuple[int, int]] = shard
        self.presence: Optional[GatewayStatusUpdate] = presence
        self.guild_subscriptions: bool = guild_subscriptions

    def __repr__(self) -> str:
        return f'<Identify intents={self.intents!r} shard={self.shard!r} compress={self.compress}>'

    def to_dict(self) -> IdentifyPayload:
        payload: IdentifyPayload = {
            'token': self.token,
            'properties': self.properties.to_dict(),
            'compress': self.compress,
            'large_threshold': self.large_threshold,
            'guild_subscriptions': self.guild_subscriptions,
            'intents': make_intent(self.intents),
        }
        if self.shard is not None:
            payload['shard'] = [self.shard[0], self.shard[1]]
        if self.presence is not None:
            payload['presence'] = self.presence.to_dict()
        return payload


class SessionInformation:
    """How many more sessions the bot may start, and how quickly.

    Attributes
    -----------
    total: :class:`int`
        The total number of session starts allowed per reset period.
    remaining: :class:`int`
        The number of session starts remaining.
    reset_after: :class:`int`
        Milliseconds until the limit resets.
    max_concurrency: :class:`int`
        The number of identify requests allowed per five seconds.
    """

    __slots__ = ('total', 'remaining', 'reset_after', 'max_concurrency')

    def __init__(self, *, data: SessionStartLimitPayload):
        self.total: int = data.get('total', 0)
        self.remaining: int = data.get('remaining', 0)
        self.reset_after: int = data.get('reset_after', 0)
        self.max_concurrency: int = data.get('max_concurrency', 0)

    def __repr__(self) -> str:
        return f'<SessionInformation remaining={self.remaining}/{self.total} max_concurrency={self.max_concurrency}>'


class GatewayBotResponse:
    """The response of the ``GET /gateway/bot`` endpoint."""

    __slots__ = ('url', 'shards', 'session_start_limit')

    def __init__(self, *, data: GatewayBotPayload):
        self.url: str = data['url']
        self.shards: int = data.get('shards', 1)
        self.session_start_limit: SessionInformation = SessionInformation(data=data.get('session_start_limit') or {})

    def __repr__(self) -> str:
        return f'<GatewayBotResponse url={self.url!r} shards={self.shards}>'
