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

from functools import reduce
import operator
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from .errors import InvalidData

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = (
    'compose',
    'has_permission',
    'BaseFlags',
    'SystemChannelFlags',
    'ActivityFlags',
)

BF = TypeVar('BF', bound='BaseFlags')


def compose(*bits: int) -> int:
    """Returns the bitwise OR of every value in ``bits``.

    ``compose()`` with no arguments is ``0``.
    """
    return reduce(operator.or_, bits, 0)


def has_permission(mask: int, bit: int) -> bool:
    """Checks whether every bit set in ``bit`` is also set in ``mask``.

    A partial overlap, where ``bit`` has more than one bit set and ``mask``
    only has some of them, is ``False``.
    """
    return (mask & bit) == bit


class flag_value:
    def __init__(self, func: Callable[[Any], int]):
        self.flag: int = func(None)
        self.__doc__ = func.__doc__

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance._has_flag(self.flag)

    def __set__(self, instance: BaseFlags, value: bool) -> None:
        instance._set_flag(self.flag, value)

    def __repr__(self) -> str:
        return f'<flag_value flag={self.flag!r}>'


class alias_flag_value(flag_value):
    pass


def resolve_composites(valid_flags: Mapping[str, int], composites: Mapping[str, Sequence[str]]) -> Dict[str, int]:
    """Computes the value of each composite from its declared members.

    Members may name primitive flags or other composites. An unknown member
    name is a programming error and raises :exc:`KeyError`.
    """
    resolved: Dict[str, int] = {}

    def resolve(name: str, seen: Tuple[str, ...]) -> int:
        if name in valid_flags:
            return valid_flags[name]
        if name in resolved:
            return resolved[name]
        if name in seen:
            raise ValueError(f'Composite {name!r} refers to itself')

        members = composites[name]
        value = compose(*(resolve(member, seen + (name,)) for member in members))
        resolved[name] = value
        return value

    for name in composites:
        resolve(name, ())
    return resolved


def fill_with_flags(*, composites: Optional[Mapping[str, Sequence[str]]] = None):
    """Collects the ``flag_value`` descriptors of a class and computes its
    composite unions.

    Every primitive flag and every composite is also exposed as an upper-case
    integer constant on the class, e.g. ``Permissions.SEND_MESSAGES`` and
    ``Permissions.ALL_TEXT``.
    """
    def decorator(cls: Type[BF]) -> Type[BF]:
        cls.VALID_FLAGS = {
            name: value.flag
            for name, value in cls.__dict__.items()
            if isinstance(value, flag_value)
        }
        cls.PURE_FLAGS = [
            name
            for name, value in cls.__dict__.items()
            if isinstance(value, flag_value) and not isinstance(value, alias_flag_value)
        ]
        cls.ALL_FLAGS = compose(*cls.VALID_FLAGS.values())
        cls.COMPOSITES = {name: tuple(members) for name, members in (composites or {}).items()}
        cls.COMPOSITE_VALUES = resolve_composites(cls.VALID_FLAGS, cls.COMPOSITES)

        for name, value in cls.VALID_FLAGS.items():
            setattr(cls, name.upper(), value)
        for name, value in cls.COMPOSITE_VALUES.items():
            setattr(cls, name.upper(), value)

        return cls

    return decorator


class BaseFlags:
    r"""Wraps up an integer bit-flag value.

    Subclasses declare their flags with ``flag_value`` descriptors and are
    finalised with ``fill_with_flags``. Instances can be constructed from a
    raw integer, from keyword arguments, or both: ::

        # The ability to view a channel and send messages in it
        discordkit.Permissions(view_channel=True, send_messages=True)

    .. container:: operations

        .. describe:: x == y

            Checks if two flag sets are equal.

        .. describe:: x != y

            Checks if two flag sets are not equal.

        .. describe:: x <= y

            Checks if a flag set is a subset of another.

        .. describe:: x >= y

            Checks if a flag set is a superset of another.

        .. describe:: x | y, x & y, x ^ y, ~x

            Returns a new flag set of the same type.

        .. describe:: hash(x)

            Returns the flag set's hash.

        .. describe:: iter(x)

            Returns an iterator of ``(name, value)`` pairs. Aliases are
            not shown.

    Parameters
    -----------
    value: :class:`int`
        The raw value to start from. Defaults to ``0``.
    \*\*kwargs
        Set the value of flags by their name.

    Attributes
    -----------
    value: :class:`int`
        The raw integer value of the flags.
    """

    VALID_FLAGS: ClassVar[Dict[str, int]]
    PURE_FLAGS: ClassVar[List[str]]
    ALL_FLAGS: ClassVar[int]
    COMPOSITES: ClassVar[Dict[str, Tuple[str, ...]]]
    COMPOSITE_VALUES: ClassVar[Dict[str, int]]

    __slots__ = ('value',)

    def __init__(self, value: int = 0, **kwargs: bool):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'Expected int parameter, received {value.__class__.__name__} instead.')

        self.value: int = value
        for key, toggle in kwargs.items():
            if key not in self.VALID_FLAGS:
                raise TypeError(f'{key!r} is not a valid flag name.')
            setattr(self, key, toggle)

    @classmethod
    def _from_value(cls, value: int) -> Self:
        self = cls.__new__(cls)
        self.value = value
        return self

    @classmethod
    def _from_payload(cls, value: Any, field: str = 'flags') -> Self:
        if value is None:
            return cls._from_value(0)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidData(f'Expected an integer for {field!r}, received {value.__class__.__name__}')
        return cls._from_value(value)

    @classmethod
    def _from_composite(cls, name: str) -> Self:
        return cls._from_value(cls.COMPOSITE_VALUES[name])

    def _has_flag(self, flag: int) -> bool:
        return has_permission(self.value, flag)

    def _set_flag(self, flag: int, toggle: bool) -> None:
        if toggle is True:
            self.value |= flag
        elif toggle is False:
            self.value &= ~flag
        else:
            raise TypeError(f'Value to set for {self.__class__.__name__} must be a bool.')

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} value={self.value}>'

    def __iter__(self) -> Iterator[Tuple[str, bool]]:
        for name in self.PURE_FLAGS:
            yield name, getattr(self, name)

    def _check(self, other: Any) -> int:
        if isinstance(other, self.__class__):
            return other.value
        raise TypeError(f'cannot combine {self.__class__.__name__} with {other.__class__.__name__}')

    def __or__(self, other: Self) -> Self:
        return self._from_value(self.value | self._check(other))

    def __and__(self, other: Self) -> Self:
        return self._from_value(self.value & self._check(other))

    def __xor__(self, other: Self) -> Self:
        return self._from_value(self.value ^ self._check(other))

    def __invert__(self) -> Self:
        return self._from_value(~self.value & self.ALL_FLAGS)

    def is_subset(self, other: Self) -> bool:
        """Returns ``True`` if this flag set has the same or fewer flags as ``other``."""
        return (self.value & self._check(other)) == self.value

    def is_superset(self, other: Self) -> bool:
        """Returns ``True`` if this flag set has the same or more flags as ``other``."""
        return (self.value | self._check(other)) == self.value

    def is_strict_subset(self, other: Self) -> bool:
        return self.is_subset(other) and self != other

    def is_strict_superset(self, other: Self) -> bool:
        return self.is_superset(other) and self != other

    __le__ = is_subset
    __ge__ = is_superset
    __lt__ = is_strict_subset
    __gt__ = is_strict_superset

    def update(self, **kwargs: bool) -> None:
        r"""Bulk updates this flag set.

        Allows you to set multiple attributes by using keyword
        arguments. The names must be equivalent to the properties
        listed. Extraneous key/value pairs will be silently ignored.

        Parameters
        ------------
        \*\*kwargs
            A list of key/value pairs to bulk update with.
        """
        for key, toggle in kwargs.items():
            if key not in self.VALID_FLAGS:
                continue

            setattr(self, key, toggle)


@fill_with_flags()
class SystemChannelFlags(BaseFlags):
    """Wraps up a guild's system channel flags.

    Note that a set flag *suppresses* the corresponding system message.
    """

    __slots__ = ()

    @flag_value
    def suppress_join_notifications(self):
        """:class:`bool`: Returns ``True`` if member join messages are suppressed."""
        return 1 << 0

    @flag_value
    def suppress_premium_subscriptions(self):
        """:class:`bool`: Returns ``True`` if server boost messages are suppressed."""
        return 1 << 1


@fill_with_flags()
class ActivityFlags(BaseFlags):
    """Wraps up the flags of a rich presence :class:`Activity`."""

    __slots__ = ()

    @flag_value
    def instance(self):
        return 1 << 0

    @flag_value
    def join(self):
        return 1 << 1

    @flag_value
    def spectate(self):
        return 1 << 2

    @flag_value
    def join_request(self):
        return 1 << 3

    @flag_value
    def sync(self):
        return 1 << 4

    @flag_value
    def play(self):
        return 1 << 5
