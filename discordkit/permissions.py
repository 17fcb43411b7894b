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
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Tuple, Union

from .enums import PermissionOverwriteType, try_enum
from .flags import BaseFlags, alias_flag_value, fill_with_flags, flag_value, has_permission
from .utils import parse_permission_mask

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.channel import PermissionOverwrite as PermissionOverwritePayload

__all__ = (
    'Permissions',
    'PermissionOverwrite',
)


# Composite unions are always computed from these member lists, never
# written out as literals. Members may name other composites.
PERMISSIONS_BY_COMPOSITE = {
    'all_text': (
        'view_channel',
        'send_messages',
        'send_tts_messages',
        'manage_messages',
        'embed_links',
        'attach_files',
        'read_message_history',
        'mention_everyone',
    ),
    'all_voice': (
        'view_channel',
        'voice_connect',
        'voice_speak',
        'voice_mute_members',
        'voice_deafen_members',
        'voice_move_members',
        'voice_use_vad',
        'voice_priority_speaker',
    ),
    'all_channel': (
        'all_text',
        'all_voice',
        'create_instant_invite',
        'manage_roles',
        'manage_channels',
        'add_reactions',
        'view_audit_logs',
    ),
    'all': (
        'all_channel',
        'kick_members',
        'ban_members',
        'manage_server',
        'administrator',
        'manage_webhooks',
        'manage_emojis',
    ),
}


@fill_with_flags(composites=PERMISSIONS_BY_COMPOSITE)
class Permissions(BaseFlags):
    """Wraps up a Discord permission bitmask.

    Each primitive permission is one bit of a 64-bit integer. Discord sends
    these masks as strings to avoid precision loss in JSON numbers; use
    :meth:`from_str` or pass the parsed integer directly: ::

        # A `Permissions` instance representing the ability
        # to view a channel and send messages in it.
        discordkit.Permissions(view_channel=True, send_messages=True)

    Every permission is also available as an integer constant on the class,
    e.g. ``Permissions.SEND_MESSAGES``, as are the composite unions
    ``ALL_TEXT``, ``ALL_VOICE``, ``ALL_CHANNEL`` and ``ALL``. The members of
    each composite are listed in :attr:`COMPOSITES`.

    Attributes
    -----------
    value: :class:`int`
        The raw permission mask.
    """

    __slots__ = ()

    @classmethod
    def from_str(cls, value: Optional[str]) -> Self:
        """Creates a :class:`Permissions` from Discord's string-encoded mask.

        Raises
        -------
        InvalidData
            The string is not an integer.
        """
        return cls(parse_permission_mask(value))

    @classmethod
    def none(cls) -> Self:
        """A factory method that creates a :class:`Permissions` with all
        permissions set to ``False``."""
        return cls(0)

    @classmethod
    def all(cls) -> Self:
        """A factory method that creates a :class:`Permissions` with every
        permission in the ``all`` composite set to ``True``."""
        return cls._from_composite('all')

    @classmethod
    def all_text(cls) -> Self:
        """A factory method that creates a :class:`Permissions` with all
        text channel permissions set to ``True``."""
        return cls._from_composite('all_text')

    @classmethod
    def all_voice(cls) -> Self:
        """A factory method that creates a :class:`Permissions` with all
        voice channel permissions set to ``True``."""
        return cls._from_composite('all_voice')

    @classmethod
    def all_channel(cls) -> Self:
        """A factory method that creates a :class:`Permissions` with all
        channel-specific permissions set to ``True``."""
        return cls._from_composite('all_channel')

    def has(self, permission: Union[int, Permissions]) -> bool:
        """Checks whether every bit of ``permission`` is set.

        Parameters
        -----------
        permission: Union[:class:`int`, :class:`Permissions`]
            A single permission constant, a combination of constants, or
            another :class:`Permissions`.
        """
        bit = permission.value if isinstance(permission, Permissions) else permission
        return has_permission(self.value, bit)

    @property
    def is_administrator(self) -> bool:
        """:class:`bool`: Returns ``True`` if the administrator bit is set.

        Discord treats administrators as having every permission, but this
        property only reports the bit itself.
        """
        return self.administrator

    def to_str(self) -> str:
        """:class:`str`: Returns the mask in the string form Discord expects."""
        return str(self.value)

    @flag_value
    def create_instant_invite(self):
        """:class:`bool`: Returns ``True`` if a user can create invites."""
        return 1 << 0

    @flag_value
    def kick_members(self):
        """:class:`bool`: Returns ``True`` if a user can kick members from
        the guild."""
        return 1 << 1

    @flag_value
    def ban_members(self):
        """:class:`bool`: Returns ``True`` if a user can ban members from the
        guild."""
        return 1 << 2

    @flag_value
    def administrator(self):
        """:class:`bool`: Returns ``True`` if a user is an administrator."""
        return 1 << 3

    @flag_value
    def manage_channels(self):
        """:class:`bool`: Returns ``True`` if a user can create, edit, or
        delete channels."""
        return 1 << 4

    @flag_value
    def manage_server(self):
        """:class:`bool`: Returns ``True`` if a user can edit the guild's
        settings."""
        return 1 << 5

    @alias_flag_value
    def manage_guild(self):
        """:class:`bool`: This is an alias of :attr:`.manage_server`."""
        return 1 << 5

    @flag_value
    def add_reactions(self):
        """:class:`bool`: Returns ``True`` if a user can add reactions."""
        return 1 << 6

    @flag_value
    def view_audit_logs(self):
        """:class:`bool`: Returns ``True`` if a user can view the guild's
        audit log."""
        return 1 << 7

    @flag_value
    def voice_priority_speaker(self):
        """:class:`bool`: Returns ``True`` if a user is heard over other
        speakers in voice channels."""
        return 1 << 8

    @alias_flag_value
    def priority_speaker(self):
        """:class:`bool`: This is an alias of :attr:`.voice_priority_speaker`."""
        return 1 << 8

    @flag_value
    def voice_stream_video(self):
        """:class:`bool`: Returns ``True`` if a user can stream video in
        voice channels."""
        return 1 << 9

    @flag_value
    def view_channel(self):
        """:class:`bool`: Returns ``True`` if a user can see a channel and
        read its messages."""
        return 1 << 10

    @alias_flag_value
    def read_messages(self):
        """:class:`bool`: This is an alias of :attr:`.view_channel`.

        Discord replaced this permission with :attr:`.view_channel` for both
        text and voice channels.
        """
        return 1 << 10

    @flag_value
    def send_messages(self):
        """:class:`bool`: Returns ``True`` if a user can send messages."""
        return 1 << 11

    @flag_value
    def send_tts_messages(self):
        return 1 << 12

    @flag_value
    def manage_messages(self):
        """:class:`bool`: Returns ``True`` if a user can delete or pin
        messages by other members."""
        return 1 << 13

    @flag_value
    def embed_links(self):
        return 1 << 14

    @flag_value
    def attach_files(self):
        return 1 << 15

    @flag_value
    def read_message_history(self):
        return 1 << 16

    @flag_value
    def mention_everyone(self):
        """:class:`bool`: Returns ``True`` if a user can use ``@everyone`` and
        ``@here`` mentions."""
        return 1 << 17

    @flag_value
    def use_external_emojis(self):
        return 1 << 18

    @flag_value
    def view_guild_insights(self):
        return 1 << 19

    @flag_value
    def voice_connect(self):
        """:class:`bool`: Returns ``True`` if a user can join voice channels."""
        return 1 << 20

    @alias_flag_value
    def connect(self):
        """:class:`bool`: This is an alias of :attr:`.voice_connect`."""
        return 1 << 20

    @flag_value
    def voice_speak(self):
        """:class:`bool`: Returns ``True`` if a user can talk in voice
        channels."""
        return 1 << 21

    @alias_flag_value
    def speak(self):
        """:class:`bool`: This is an alias of :attr:`.voice_speak`."""
        return 1 << 21

    @flag_value
    def voice_mute_members(self):
        return 1 << 22

    @flag_value
    def voice_deafen_members(self):
        return 1 << 23

    @flag_value
    def voice_move_members(self):
        """:class:`bool`: Returns ``True`` if a user can move members between
        voice channels."""
        return 1 << 24

    @flag_value
    def voice_use_vad(self):
        """:class:`bool`: Returns ``True`` if a user can use voice activity
        detection instead of push-to-talk."""
        return 1 << 25

    @flag_value
    def change_nickname(self):
        return 1 << 26

    @flag_value
    def manage_nicknames(self):
        return 1 << 27

    @flag_value
    def manage_roles(self):
        """:class:`bool`: Returns ``True`` if a user can create, edit, or
        assign roles below their highest role."""
        return 1 << 28

    @flag_value
    def manage_webhooks(self):
        return 1 << 29

    @flag_value
    def manage_emojis(self):
        return 1 << 30

    @flag_value
    def use_slash_commands(self):
        return 1 << 31

    @flag_value
    def voice_request_to_speak(self):
        """:class:`bool`: Returns ``True`` if a user can request to speak in
        stage channels."""
        return 1 << 32


class PermissionOverwrite:
    r"""Represents a channel permission overwrite for a role or member.

    An overwrite is an (allow, deny) pair of :class:`Permissions`. When it is
    applied, denied bits are removed first and allowed bits are added after,
    so a bit present in both is allowed.

    .. container:: operations

        .. describe:: x == y

            Checks if two overwrites are equal.

        .. describe:: x != y

            Checks if two overwrites are not equal.

        .. describe:: iter(x)

           Returns an iterator of ``(perm, value)`` pairs where the value is
           ``True`` if explicitly allowed, ``False`` if explicitly denied and
           ``None`` otherwise. Aliases are not shown.

    Parameters
    -----------
    id: :class:`str`
        The ID of the role or member this overwrite targets.
    type: :class:`PermissionOverwriteType`
        Whether ``id`` is a role or a member.
    allow: Optional[:class:`Permissions`]
        The explicitly allowed permissions.
    deny: Optional[:class:`Permissions`]
        The explicitly denied permissions.
    """

    __slots__: Tuple[str, ...] = ('id', 'type', 'allow', 'deny')

    def __init__(
        self,
        id: str,
        type: PermissionOverwriteType = PermissionOverwriteType.role,
        *,
        allow: Optional[Permissions] = None,
        deny: Optional[Permissions] = None,
    ):
        self.id: str = id
        self.type: PermissionOverwriteType = type
        self.allow: Permissions = Permissions._from_value(allow.value) if allow is not None else Permissions.none()
        self.deny: Permissions = Permissions._from_value(deny.value) if deny is not None else Permissions.none()

    @classmethod
    def from_dict(cls, data: PermissionOverwritePayload) -> Self:
        return cls(
            data['id'],
            try_enum(PermissionOverwriteType, data.get('type')),
            allow=Permissions.from_str(data.get('allow')),
            deny=Permissions.from_str(data.get('deny')),
        )

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, PermissionOverwrite)
            and self.id == other.id
            and self.type == other.type
            and self.allow == other.allow
            and self.deny == other.deny
        )

    def __repr__(self) -> str:
        return f'<PermissionOverwrite id={self.id!r} type={self.type!r} allow={self.allow.value} deny={self.deny.value}>'

    def pair(self) -> Tuple[Permissions, Permissions]:
        """Tuple[:class:`Permissions`, :class:`Permissions`]: Returns the (allow, deny) pair from this overwrite."""
        return self.allow, self.deny

    @classmethod
    def from_pair(
        cls,
        id: str,
        allow: Permissions,
        deny: Permissions,
        *,
        type: PermissionOverwriteType = PermissionOverwriteType.role,
    ) -> Self:
        """Creates an overwrite from an allow/deny pair of :class:`Permissions`."""
        return cls(id, type, allow=allow, deny=deny)

    def is_empty(self) -> bool:
        """Checks if the permission overwrite is currently empty.

        An empty permission overwrite is one that neither allows nor denies
        anything.

        Returns
        -------
        :class:`bool`
            Indicates if the overwrite is empty.
        """
        return self.allow.value == 0 and self.deny.value == 0

    def apply(self, base: Permissions) -> Permissions:
        """Applies this overwrite on top of ``base``.

        Parameters
        -----------
        base: :class:`Permissions`
            The permissions before the overwrite, usually those computed
            from a member's roles.

        Returns
        --------
        :class:`Permissions`
            ``(base & ~deny) | allow``
        """
        return Permissions((base.value & ~self.deny.value) | self.allow.value)

    def update(self, **kwargs: Optional[bool]) -> None:
        r"""Bulk updates this permission overwrite.

        ``True`` allows a permission, ``False`` denies it and ``None``
        clears it from both sides. Names that are not permissions are
        silently ignored.

        Parameters
        ------------
        \*\*kwargs
            A list of key/value pairs to bulk update with.
        """
        for key, value in kwargs.items():
            flag = Permissions.VALID_FLAGS.get(key)
            if flag is None:
                continue

            if value not in (True, None, False):
                raise TypeError(f'Expected bool or NoneType, received {value.__class__.__name__}')

            self.allow.value &= ~flag
            self.deny.value &= ~flag
            if value is True:
                self.allow.value |= flag
            elif value is False:
                self.deny.value |= flag

    def to_dict(self) -> Dict[str, Any]:
        """Dict[:class:`str`, Any]: Converts this overwrite into the payload Discord expects."""
        return {
            'id': self.id,
            'type': self.type.value,
            'allow': self.allow.to_str(),
            'deny': self.deny.to_str(),
        }

    def __iter__(self) -> Iterator[Tuple[str, Optional[bool]]]:
        for key in Permissions.PURE_FLAGS:
            flag = Permissions.VALID_FLAGS[key]
            if has_permission(self.allow.value, flag):
                yield key, True
            elif has_permission(self.deny.value, flag):
                yield key, False
            else:
                yield key, None
