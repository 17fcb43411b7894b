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

import logging
from typing import TYPE_CHECKING, Optional, Tuple, Type

from .activity import GatewayStatusUpdate
from .errors import InvalidArgument
from .gateway import GatewayBotResponse, Identify, IdentifyProperties
from .http import HTTPClient
from .intents import Intents

if TYPE_CHECKING:
    from typing_extensions import Self
    from types import TracebackType

log = logging.getLogger(__name__)

__all__ = (
    'Session',
)


class Session:
    """Holds the configuration of a bot's connection to Discord.

    This class only carries configuration and the REST client. It describes
    the gateway connection through :attr:`identify` but does not open one.

    Parameters
    -----------
    token: :class:`str`
        The bot's token. A leading ``Bot`` prefix is accepted and removed.
    intents: :class:`Intents`
        The gateway intents to subscribe to. Defaults to every
        non-privileged intent.
    shard_id: Optional[:class:`int`]
        The shard this session connects as. Must be passed together with
        ``shard_count``.
    shard_count: Optional[:class:`int`]
        The total number of shards.
    max_rest_retries: :class:`int`
        How many times a failed REST request is retried.
    compress: :class:`bool`
        Whether the gateway should compress its payloads.
    large_threshold: :class:`int`
        The member count, between 50 and 250, above which offline members
        are not sent in guild payloads.
    user_agent: Optional[:class:`str`]
        A custom User-Agent for REST requests.
    should_reconnect_on_error: :class:`bool`
        Whether the gateway connection should be re-established after an
        error.
    sync_events: :class:`bool`
        Whether event handlers should be called synchronously, in the order
        events arrive.
    state_enabled: :class:`bool`
        Whether received guilds, channels and members should be cached.
    presence: Optional[:class:`GatewayStatusUpdate`]
        The presence to identify with.

    Raises
    -------
    InvalidArgument
        Only one of ``shard_id`` and ``shard_count`` was passed, the shard
        ID is out of range, or ``large_threshold`` is out of range.
    """

    def __init__(
        self,
        token: str,
        *,
        intents: Optional[Intents] = None,
        shard_id: Optional[int] = None,
        shard_count: Optional[int] = None,
        max_rest_retries: int = 3,
        compress: bool = False,
        large_threshold: int = 250,
        user_agent: Optional[str] = None,
        should_reconnect_on_error: bool = True,
        sync_events: bool = False,
        state_enabled: bool = True,
        presence: Optional[GatewayStatusUpdate] = None,
    ):
        if token.startswith('Bot '):
            token = token[4:]
        self.token: str = token.strip()

        if (shard_id is None) != (shard_count is None):
            raise InvalidArgument('shard_id and shard_count must be passed together.')
        if shard_id is not None and not 0 <= shard_id < shard_count:
            raise InvalidArgument(f'shard_id must be between 0 and {shard_count - 1}, not {shard_id}.')
        if not 50 <= large_threshold <= 250:
            raise InvalidArgument(f'large_threshold must be between 50 and 250, not {large_threshold}.')

        self.intents: Intents = intents if intents is not None else Intents.all_without_privileged()
        if self.intents.is_privileged:
            log.info('Privileged intents are enabled. These must also be enabled in the developer portal.')

        self.shard_id: Optional[int] = shard_id
        self.shard_count: Optional[int] = shard_count
        self.max_rest_retries: int = max_rest_retries
        self.compress: bool = compress
        self.large_threshold: int = large_threshold
        self.should_reconnect_on_error: bool = should_reconnect_on_error
        self.sync_events: bool = sync_events
        self.state_enabled: bool = state_enabled
        self.presence: Optional[GatewayStatusUpdate] = presence

        self.http: HTTPClient = HTTPClient(max_retries=max_rest_retries, user_agent=user_agent)
        self.http.token = self.token

    def __repr__(self) -> str:
        return f'<Session intents={self.intents!r} shard={self.shard!r}>'

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.close()

    @property
    def user_agent(self) -> str:
        """:class:`str`: The User-Agent sent with REST requests."""
        return self.http.user_agent

    @property
    def shard(self) -> Optional[Tuple[int, int]]:
        """Optional[Tuple[:class:`int`, :class:`int`]]: ``(shard_id, shard_count)``
        if this session is sharded."""
        if self.shard_id is None or self.shard_count is None:
            return None
        return (self.shard_id, self.shard_count)

    @property
    def identify(self) -> Identify:
        """:class:`Identify`: The identify payload this session would send
        to the gateway."""
        return Identify(
            self.token,
            intents=self.intents,
            properties=IdentifyProperties(),
            compress=self.compress,
            large_threshold=self.large_threshold,
            shard=self.shard,
            presence=self.presence,
        )

    async def get_gateway_bot(self) -> GatewayBotResponse:
        """|coro|

        Fetches the recommended gateway URL and shard count for this bot.
        """
        return await self.http.get_gateway_bot()

    async def close(self) -> None:
        await self.http.close()
