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

import re
from typing import TYPE_CHECKING, List, Optional

from .user import User

if TYPE_CHECKING:
    from .types.emoji import Emoji as EmojiPayload, MessageReaction as MessageReactionPayload


__all__ = (
    'EMOJI_REGEX',
    'Emoji',
    'MessageReaction',
)


EMOJI_REGEX = re.compile(r'<(a|):[A-z0-9_~]+:[0-9]{18}>')


class Emoji:
    """Represents a custom or Unicode emoji.

    Unicode emojis have no ID and use the emoji itself as their name. Emojis
    in reactions to deleted custom emojis may have no name.

    .. container:: operations

        .. describe:: x == y

            Checks if two emojis are equal.

        .. describe:: x != y

            Checks if two emojis are not equal.

        .. describe:: str(x)

            Returns the emoji in message format.

    Attributes
    -----------
    id: Optional[:class:`str`]
        The emoji's ID. ``None`` for Unicode emojis.
    name: Optional[:class:`str`]
        The emoji's name.
    roles: List[:class:`str`]
        The IDs of the roles allowed to use this emoji. An empty list means
        everyone may use it.
    user: Optional[:class:`User`]
        The user that uploaded the emoji.
    require_colons: :class:`bool`
        Whether the emoji must be wrapped in colons to be used.
    managed: :class:`bool`
        Whether the emoji is managed by an integration.
    animated: :class:`bool`
        Whether the emoji is animated.
    available: :class:`bool`
        Whether the emoji can currently be used. This may be ``False`` when
        the guild loses boosts.
    """

    __slots__ = (
        'id',
        'name',
        'roles',
        'user',
        'require_colons',
        'managed',
        'animated',
        'available',
    )

    def __init__(self, *, data: EmojiPayload):
        self.id: Optional[str] = data.get('id')
        self.name: Optional[str] = data.get('name')
        self.roles: List[str] = data.get('roles') or []
        self.user: Optional[User] = User(data=data['user']) if data.get('user') else None
        self.require_colons: bool = data.get('require_colons', False)
        self.managed: bool = data.get('managed', False)
        self.animated: bool = data.get('animated', False)
        self.available: bool = data.get('available', True)

    def __eq__(self, other) -> bool:
        return isinstance(other, Emoji) and self.id == other.id and self.name == other.name

    def __str__(self) -> str:
        return self.message_format

    def __repr__(self) -> str:
        return f'<Emoji id={self.id!r} name={self.name!r} animated={self.animated}>'

    @property
    def api_name(self) -> str:
        """:class:`str`: The name used to refer to this emoji in reaction
        endpoints: ``name:id`` for custom emojis, otherwise whichever of the
        name or ID is present."""
        if self.id and self.name:
            return f'{self.name}:{self.id}'
        if self.name:
            return self.name
        return self.id or ''

    @property
    def message_format(self) -> str:
        """:class:`str`: The emoji formatted for use inside message content."""
        if self.id and self.name:
            if self.animated:
                return f'<a:{self.api_name}>'
            return f'<:{self.api_name}>'
        return self.api_name

    def to_dict(self) -> EmojiPayload:
        payload: EmojiPayload = {
            'id': self.id,
            'name': self.name,
        }
        if self.roles:
            payload['roles'] = self.roles
        if self.animated:
            payload['animated'] = True
        return payload


class MessageReaction:
    """Represents a single user's reaction to a message, as sent in reaction
    gateway events.

    Attributes
    -----------
    user_id: :class:`str`
        The ID of the user that reacted.
    message_id: :class:`str`
        The ID of the message that was reacted to.
    channel_id: :class:`str`
        The ID of the channel that the message is in.
    guild_id: Optional[:class:`str`]
        The ID of the guild that the message is in, if any.
    emoji: :class:`Emoji`
        The emoji that was used.
    """

    __slots__ = ('user_id', 'message_id', 'channel_id', 'guild_id', 'emoji')

    def __init__(self, *, data: MessageReactionPayload):
        self.user_id: str = data['user_id']
        self.message_id: str = data['message_id']
        self.channel_id: str = data['channel_id']
        self.guild_id: Optional[str] = data.get('guild_id')
        self.emoji: Emoji = Emoji(data=data['emoji'])

    def __repr__(self) -> str:
        return f'<MessageReaction user_id={self.user_id!r} message_id={self.message_id!r} emoji={self.emoji!r}>'
