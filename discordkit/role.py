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

from typing import TYPE_CHECKING, Iterable, List, Tuple

from .permissions import Permissions
from .utils import role_mention

if TYPE_CHECKING:
    from .types.role import GuildRole as GuildRolePayload, Role as RolePayload


__all__ = (
    'Role',
    'GuildRole',
    'sort_roles',
)


class Role:
    """Represents a role in a guild.

    .. container:: operations

        .. describe:: x == y

            Checks if two roles are equal.

        .. describe:: x != y

            Checks if two roles are not equal.

        .. describe:: hash(x)

            Returns the role's hash.

        .. describe:: str(x)

            Returns the name of the role.

    Attributes
    -----------
    id: :class:`str`
        The role's ID.
    name: :class:`str`
        The role's name.
    managed: :class:`bool`
        Whether the role is managed by an integration and cannot be assigned
        manually.
    mentionable: :class:`bool`
        Whether members may mention this role.
    hoist: :class:`bool`
        Whether the role is displayed separately in the member list.
    colour: :class:`int`
        The role's colour as an RGB integer. ``0`` means no colour.
    position: :class:`int`
        The role's position in the role hierarchy. Higher is more important.
    permissions: :class:`Permissions`
        The permissions the role grants.
    """

    __slots__: Tuple[str, ...] = (
        'id',
        'name',
        'managed',
        'mentionable',
        'hoist',
        'colour',
        'position',
        'permissions',
    )

    def __init__(self, *, data: RolePayload):
        self.id: str = data['id']
        self.name: str = data.get('name') or ''
        self.managed: bool = data.get('managed', False)
        self.mentionable: bool = data.get('mentionable', False)
        self.hoist: bool = data.get('hoist', False)
        self.colour: int = data.get('color', 0)
        self.position: int = data.get('position', 0)
        self.permissions: Permissions = Permissions.from_str(data.get('permissions'))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'<Role id={self.id!r} name={self.name!r} position={self.position}>'

    def __eq__(self, other) -> bool:
        return isinstance(other, Role) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def color(self) -> int:
        """:class:`int`: Alias of :attr:`colour`."""
        return self.colour

    @property
    def mention(self) -> str:
        """:class:`str`: The mention string for this role."""
        return role_mention(self.id)

    def to_dict(self) -> RolePayload:
        return {
            'id': self.id,
            'name': self.name,
            'managed': self.managed,
            'mentionable': self.mentionable,
            'hoist': self.hoist,
            'color': self.colour,
            'position': self.position,
            'permissions': self.permissions.to_str(),
        }


class GuildRole:
    """A role paired with the ID of the guild it belongs to, as sent in role
    gateway events."""

    __slots__ = ('role', 'guild_id')

    def __init__(self, *, data: GuildRolePayload):
        self.role: Role = Role(data=data['role'])
        self.guild_id: str = data['guild_id']

    def __repr__(self) -> str:
        return f'<GuildRole role={self.role!r} guild_id={self.guild_id!r}>'


def sort_roles(roles: Iterable[Role]) -> List[Role]:
    """Returns ``roles`` ordered by position, highest first.

    The sort is stable, so roles sharing a position keep their relative order.
    """
    return sorted(roles, key=lambda role: role.position, reverse=True)
