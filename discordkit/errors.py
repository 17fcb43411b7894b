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
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    import datetime

    import aiohttp

__all__ = (
    'DiscordException',
    'ClientException',
    'HTTPException',
    'BadRequest',
    'Unauthorized',
    'Forbidden',
    'NotFound',
    'TooManyRequests',
    'DiscordServerError',
    'InvalidData',
    'InvalidArgument',
)


class DiscordException(Exception):
    """Base class for all discordkit.py exceptions."""
    pass


class ClientException(DiscordException):
    """Thrown when an operation in the :class:`Session` fails."""
    pass


class HTTPException(DiscordException):
    """A non-ok response from Discord was returned whilst performing an HTTP
    request.

    Attributes
    -----------
    response: :class:`aiohttp.ClientResponse`
        The :class:`aiohttp.ClientResponse` of the failed request.
    status: :class:`int`
        The HTTP status code of the request.
    code: Union[:class:`.ErrorCode`, :class:`int`]
        The Discord-specific JSON error code. This is ``0`` if the response
        did not include one.
    message: :class:`str`
        The message that came with the error.
    """
    def __init__(self, response: aiohttp.ClientResponse, data: Any):
        from .enums import ErrorCode, try_enum

        self.response = response
        self.status: int = response.status
        code = 0
        if isinstance(data, dict):
            self.message: str = data.get('message', '')
            code = data.get('code', 0)
            self.code = try_enum(ErrorCode, code) if code else 0
        else:
            self.message = data or ''
            self.code = 0

        super().__init__(f'{self.status} (error code: {code}): {self.message}')


class BadRequest(HTTPException):
    """Thrown on status code 400"""
    pass


class Unauthorized(HTTPException):
    """Thrown on status code 401"""
    pass


class Forbidden(HTTPException):
    """Thrown on status code 403"""
    pass


class NotFound(HTTPException):
    """Thrown on status code 404"""
    pass


class TooManyRequests(HTTPException):
    """Thrown on status code 429 once the request has run out of retries.

    Attributes
    -----------
    retry_after: :class:`datetime.timedelta`
        How long Discord asked to wait before retrying.
    bucket: Optional[:class:`str`]
        The rate limit bucket the request was counted against.
    global_: :class:`bool`
        Whether the rate limit is global rather than per-route.
    """
    def __init__(
        self,
        response: aiohttp.ClientResponse,
        data: Any,
        *,
        retry_after: datetime.timedelta,
        bucket: Optional[str] = None,
        global_: bool = False,
    ):
        self.retry_after = retry_after
        self.bucket = bucket
        self.global_ = global_
        super().__init__(response, data)


class DiscordServerError(HTTPException):
    """Thrown on status code 500 and above"""
    pass


class InvalidData(ClientException):
    """Exception that's raised when the library encounters unknown or invalid
    data from Discord.

    This is raised at the decoding boundary, e.g. when a field that should be
    a JSON number is a string, and is never silently replaced by a default.
    """
    pass


class InvalidArgument(ClientException):
    """Thrown when an argument to a function is invalid some way (e.g. wrong
    value or wrong type).

    This could be considered the analogous of ``ValueError`` and
    ``TypeError`` except inherited from :exc:`ClientException` and thus
    :exc:`DiscordException`.
    """
    pass
