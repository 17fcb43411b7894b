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

import aiohttp
import asyncio
import datetime
import json
import logging
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Dict, Optional, Type, Union

from . import __version__
from .errors import (
    BadRequest,
    DiscordServerError,
    Forbidden,
    HTTPException,
    NotFound,
    TooManyRequests,
    Unauthorized,
)
from .gateway import GatewayBotResponse
from .utils import decode_retry_after

log = logging.getLogger(__name__)


if TYPE_CHECKING:
    from typing_extensions import Self
    from types import TracebackType

    from .types.gateway import APIError as APIErrorPayload, RateLimited as RateLimitedPayload

__all__ = (
    'Route',
    'RateLimitPayload',
    'APIErrorMessage',
    'HTTPClient',
)


async def json_or_text(response: aiohttp.ClientResponse) -> Union[Dict[str, Any], str]:
    text = await response.text(encoding='utf-8')
    try:
        if response.headers['content-type'] == 'application/json':
            return json.loads(text)
    except KeyError:
        # Thanks Cloudflare
        pass

    return text


class Route:
    BASE = 'https://discord.com/api/v8'
    CDN_BASE = 'https://cdn.discordapp.com'

    def __init__(self, method: str, path: str, *, override_base: Optional[str] = None):
        self.method = method
        self.path = path

        if override_base is not None:
            self.BASE = override_base

        self.url = self.BASE + path

    def __repr__(self) -> str:
        return f'<Route method={self.method!r} path={self.path!r}>'


class RateLimitPayload:
    """The body of a 429 response.

    Attributes
    -----------
    message: :class:`str`
        Discord's description of the rate limit.
    retry_after: :class:`datetime.timedelta`
        How long to wait before retrying. Discord sends this as floating-point
        seconds, which are split into whole seconds and milliseconds.
    bucket: Optional[:class:`str`]
        The rate limit bucket, when sent.
    global_: :class:`bool`
        Whether the rate limit applies to every route.
    """

    __slots__ = ('message', 'retry_after', 'bucket', 'global_')

    def __init__(self, *, data: RateLimitedPayload):
        self.message: str = data.get('message') or ''
        self.retry_after: datetime.timedelta = decode_retry_after(data['retry_after'])
        self.bucket: Optional[str] = data.get('bucket')
        self.global_: bool = data.get('global', False)

    def __repr__(self) -> str:
        return f'<RateLimitPayload retry_after={self.retry_after!r} bucket={self.bucket!r} global_={self.global_}>'


class APIErrorMessage:
    """The ``{code, message}`` body Discord sends with most failed requests."""

    __slots__ = ('code', 'message')

    def __init__(self, *, data: APIErrorPayload):
        self.code: int = data.get('code', 0)
        self.message: str = data.get('message') or ''

    def __repr__(self) -> str:
        return f'<APIErrorMessage code={self.code} message={self.message!r}>'


_ERRORS_BY_STATUS: Dict[int, Type[HTTPException]] = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
}


class HTTPClient:
    """Performs authenticated requests against Discord's REST API.

    Parameters
    -----------
    max_retries: :class:`int`
        How many times a rate limited or failed request is retried before
        giving up.
    user_agent: Optional[:class:`str`]
        A custom User-Agent header. Defaults to one describing this library.
    session: Optional[:class:`aiohttp.ClientSession`]
        The session to make requests with. One is created on first use if
        not passed.
    """

    def __init__(
        self,
        *,
        max_retries: int = 3,
        user_agent: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.session: Optional[aiohttp.ClientSession] = session
        self.token: Optional[str] = None
        self.max_retries: int = max_retries

        if user_agent is None:
            user_agent = 'DiscordBot (https://pypi.org/project/discordkit.py, {0}) Python/{1[0]}.{1[1]} aiohttp/{2}'
            user_agent = user_agent.format(__version__, sys.version_info, aiohttp.__version__)
        self.user_agent: str = user_agent

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
        return self.session

    def _rate_limit_from(self, response: aiohttp.ClientResponse, data: Any, tries: int) -> RateLimitPayload:
        if isinstance(data, dict) and 'retry_after' in data:
            return RateLimitPayload(data=data)

        retry_after = response.headers.get('retry-after')
        return RateLimitPayload(
            data={
                'message': data if isinstance(data, str) else '',
                'retry_after': float(retry_after) if retry_after is not None else float(1 + tries * 2),
                'bucket': response.headers.get('x-ratelimit-bucket'),
                'global': response.headers.get('x-ratelimit-global') == 'true',
            }
        )

    async def request(self, route: Route, **kwargs) -> Any:
        url = route.url
        method = route.method

        # create headers
        headers: Dict[str, str] = {
            'User-Agent': self.user_agent,
        }

        if self.token:
            headers['Authorization'] = f'Bot {self.token}'

        if 'json' in kwargs:
            headers['Content-Type'] = 'application/json'
            kwargs['data'] = json.dumps(kwargs.pop('json'))

        reason = kwargs.pop('reason', None)
        if reason:
            headers['X-Audit-Log-Reason'] = reason

        kwargs['headers'] = headers

        # route.url doesn't include params since we don't pass them to the Route
        log_url = url
        if kwargs.get('params'):
            if isinstance(kwargs['params'], dict):
                log_url += '?' + '&'.join([f'{key}={val}' for key, val in kwargs['params'].items()])
            elif isinstance(kwargs['params'], Iterable):
                log_url += '?' + '&'.join([f'{param[0]}={param[1]}' for param in kwargs['params']])

        log_headers = headers.copy()
        if 'Authorization' in log_headers:
            log_headers['Authorization'] = 'Bot [removed]'

        session = self._get_session()
        response: Optional[aiohttp.ClientResponse] = None
        data: Optional[Union[Dict[str, Any], str]] = None
        for tries in range(self.max_retries + 1):
            try:
                response = await session.request(method, url, **kwargs)
            except OSError as exc:
                # Connection reset by peer
                if tries < self.max_retries and exc.errno in (54, 10054):
                    await asyncio.sleep(1 + tries * 2)
                    continue
                raise

            log.debug('%s %s with data %s, headers %s, has returned %s', method, log_url, kwargs.get('data'), log_headers, response.status)

            data = await json_or_text(response)
            log.debug('%s %s has received %s', method, url, data)

            # The request was successful so just return the text/json
            if 300 > response.status >= 200:
                return data

            if response.status == 429:
                rate_limit = self._rate_limit_from(response, data, tries)
                if tries >= self.max_retries:
                    raise TooManyRequests(
                        response,
                        data,
                        retry_after=rate_limit.retry_after,
                        bucket=rate_limit.bucket,
                        global_=rate_limit.global_,
                    )

                log.warning(
                    'Rate limited on %s (bucket: %s, global: %s). Retrying in %s seconds',
                    route.path,
                    rate_limit.bucket,
                    rate_limit.global_,
                    rate_limit.retry_after.total_seconds(),
                )
                await asyncio.sleep(rate_limit.retry_after.total_seconds())
                log.debug('Done sleeping for the rate limit. Retrying...')

                continue

            # We've received a 500, 502, or 504, unconditional retry
            if response.status in {500, 502, 504} and tries < self.max_retries:
                await asyncio.sleep(1 + tries * 2)
                continue

            if response.status >= 500:
                raise DiscordServerError(response, data)

            raise _ERRORS_BY_STATUS.get(response.status, HTTPException)(response, data)

        raise RuntimeError('Unreachable code in HTTP handling')

    # gateway

    async def get_gateway_bot(self) -> GatewayBotResponse:
        data = await self.request(Route('GET', '/gateway/bot'))
        return GatewayBotResponse(data=data)
