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
from typing import TYPE_CHECKING, Union

from .flags import BaseFlags, fill_with_flags, flag_value

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = (
    'Intents',
    'make_intent',
)


# Discord requires these to be enabled for the application before they can
# be requested.
PRIVILEGED_INTENTS = (
    'guild_members',
    'guild_presences',
)

INTENTS_BY_COMPOSITE = {
    'all_without_privileged': (
        'guilds',
        'guild_bans',
        'guild_emojis',
        'guild_integrations',
        'guild_webhooks',
        'guild_invites',
        'guild_voice_states',
        'guild_messages',
        'guild_message_reactions',
        'guild_message_typing',
        'direct_messages',
        'direct_message_reactions',
        'direct_message_typing',
        'guild_scheduled_events',
    ),
    'privileged': PRIVILEGED_INTENTS,
    'all': (
        'all_without_privileged',
        'guild_members',
        'guild_presences',
    ),
}


@fill_with_flags(composites=INTENTS_BY_COMPOSITE)
class Intents(BaseFlags):
    """Wraps up the gateway intents sent when identifying.

    Intents decide which categories of gateway events a connection receives.
    The default used by :class:`Session` is :meth:`all_without_privileged`,
    since the privileged intents must also be enabled for the application
    in the developer portal.

    Attributes
    -----------
    value: :class:`int`
        The raw intents value.
    """

    __slots__ = ()

    @classmethod
    def none(cls) -> Self:
        """A factory method that creates an :class:`Intents` with nothing
        enabled."""
        return cls(0)

    @classmethod
    def all(cls) -> Self:
        """A factory method that creates an :class:`Intents` with every
        intent enabled, including the privileged ones."""
        return cls._from_composite('all')

    @classmethod
    def all_without_privileged(cls) -> Self:
        """A factory method that creates an :class:`Intents` with every
        intent except :attr:`guild_members` and :attr:`guild_presences`."""
        return cls._from_composite('all_without_privileged')

    @classmethod
    def privileged(cls) -> Self:
        """A factory method that creates an :class:`Intents` with only the
        privileged intents enabled."""
        return cls._from_composite('privileged')

    @property
    def is_privileged(self) -> bool:
        """:class:`bool`: Returns ``True`` if any privileged intent is enabled."""
        return (self.value & self.PRIVILEGED) != 0

    @flag_value
    def guilds(self):
        """:class:`bool`: Guild create, update and delete events, as well as
        role and channel events."""
        return 1 << 0

    @flag_value
    def guild_members(self):
        """:class:`bool`: Member add, update and remove events.

        This is a privileged intent.
        """
        return 1 << 1

    @flag_value
    def guild_bans(self):
        return 1 << 2

    @flag_value
    def guild_emojis(self):
        return 1 << 3

    @flag_value
    def guild_integrations(self):
        return 1 << 4

    @flag_value
    def guild_webhooks(self):
        return 1 << 5

    @flag_value
    def guild_invites(self):
        return 1 << 6

    @flag_value
    def guild_voice_states(self):
        return 1 << 7

    @flag_value
    def guild_presences(self):
        """:class:`bool`: Presence update events.

        This is a privileged intent.
        """
        return 1 << 8

    @flag_value
    def guild_messages(self):
        return 1 << 9

    @flag_value
    def guild_message_reactions(self):
        return 1 << 10

    @flag_value
    def guild_message_typing(self):
        return 1 << 11

    @flag_value
    def direct_messages(self):
        return 1 << 12

    @flag_value
    def direct_message_reactions(self):
        return 1 << 13

    @flag_value
    def direct_message_typing(self):
        return 1 << 14

    @flag_value
    def guild_scheduled_events(self):
        return 1 << 16


def make_intent(intents: Union[int, Intents]) -> int:
    """Returns the raw integer value of ``intents``."""
    return int(intents)
