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
import math
from operator import attrgetter
import re
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from .errors import InvalidData


__all__ = (
    'ISO8601',
    'channel_mention',
    'role_mention',
    'member_mention',
    'user_mention',
    'decode_retry_after',
    'truncate_millis',
    'find',
    'get',
)


T = TypeVar('T')
Snowflake = Union[str, int]


class _MissingSentinel:
    def __eq__(self, _) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return '...'

MISSING: Any = _MissingSentinel()


def ISO8601(string: Optional[str]) -> Optional[datetime.datetime]:
    # Discord sends an empty string for timestamps that were never set
    if not string:
        return None

    try:
        return datetime.datetime.fromisoformat(string)
    except ValueError:
        pass

    try:
        return datetime.datetime.strptime(string, '%Y-%m-%dT%H:%M:%S.%fZ').replace(tzinfo=datetime.timezone.utc)
    except ValueError:
        pass

    try:
        return datetime.datetime.strptime(string, '%Y-%m-%dT%H:%M:%SZ').replace(tzinfo=datetime.timezone.utc)
    except ValueError:
        # get rid of fractional seconds entirely since Discord may sometimes
        # send a number of digits that datetime.fromisoformat does not accept
        stripped = re.sub(r'\.\d+', '', string).replace('Z', '+00:00')
        try:
            return datetime.datetime.fromisoformat(stripped)
        except ValueError:
            pass

    raise InvalidData(f'{string!r} is not a valid ISO8601 datetime.')


def _number(value: Any, field: str) -> float:
    # bool is an int subclass but never a valid JSON number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidData(f'Expected a number for {field!r}, received {value.__class__.__name__}')
    return value


def decode_retry_after(seconds: float) -> datetime.timedelta:
    """Converts a rate limit's floating-point ``retry_after`` into a
    :class:`datetime.timedelta`.

    The value is split into whole seconds and a fractional part, and the
    fractional part is converted to whole milliseconds, so ``1.5`` becomes
    exactly one second and 500 milliseconds.

    Parameters
    -----------
    seconds: :class:`float`
        The wire value, in seconds.

    Raises
    -------
    InvalidData
        The value is not a number.
    """
    seconds = _number(seconds, 'retry_after')
    frac, whole = math.modf(seconds)
    return datetime.timedelta(seconds=int(whole), milliseconds=int(frac * 1000))


def truncate_millis(value: float) -> int:
    """Truncates a floating-point millisecond value to an integer.

    The fractional millisecond is discarded rather than rounded, matching
    how Discord's clients interpret rich presence timestamps.

    Raises
    -------
    InvalidData
        The value is not a number.
    """
    return int(_number(value, 'timestamp'))


def millis_to_datetime(value: Optional[int]) -> Optional[datetime.datetime]:
    if value is None:
        return None
    value = _number(value, 'created_at')
    return datetime.datetime.fromtimestamp(value / 1000, tz=datetime.timezone.utc)


def parse_permission_mask(value: Any) -> int:
    """Parses a string-encoded 64-bit permission mask.

    ``None`` is treated as an empty mask.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidData(f'Expected a permission mask, received {value!r}')
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise InvalidData(f'{value!r} is not a valid permission mask') from None

    raise InvalidData(f'Expected a permission mask, received {value.__class__.__name__}')


def channel_mention(id: Snowflake) -> str:
    """Returns the inline mention for a channel, e.g. ``<#123>``."""
    return f'<#{id}>'


def role_mention(id: Snowflake) -> str:
    """Returns the inline mention for a role, e.g. ``<@&456>``."""
    return f'<@&{id}>'


def member_mention(id: Snowflake) -> str:
    """Returns the nickname-style inline mention for a member, e.g. ``<@!789>``."""
    return f'<@!{id}>'


def user_mention(id: Snowflake) -> str:
    return f'<@{id}>'


def find(predicate: Callable[[T], Any], sequence: Iterable[T]) -> Optional[T]:
    """Iterate through ``sequence`` to find a matching object for ``predicate``.

    If nothing is found, ``None`` is returned.

    Parameters
    -----------
    predicate: Callable
        A function that returns a boolean or boolean-like result.
    sequence
        An iterable to search through.
    """
    for element in sequence:
        if predicate(element):
            return element
    return None


def get(sequence, **attributes):
    """Return an object from ``sequence`` that matches the ``attributes``.

    If nothing is found, ``None`` is returned.

    Parameters
    -----------
    sequence
        An iterable to search through.
    **attrs
        Keyword arguments representing attributes of each item to match with.
    """
    # global -> local
    _all = all
    attrget = attrgetter

    # Special case the single element call
    if len(attributes) == 1:
        k, v = attributes.popitem()
        pred = attrget(k.replace('__', '.'))
        for elem in sequence:
            if pred(elem) == v:
                return elem
        return None

    converted = [
        (attrget(attr.replace('__', '.')), value)
        for attr, value in attributes.items()
    ]

    for elem in sequence:
        if _all(pred(elem) == value for pred, value in converted):
            return elem
    return None
