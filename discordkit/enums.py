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

import logging
import types
from collections import namedtuple
from typing import Any, ClassVar, Dict, List, TYPE_CHECKING, Type, TypeVar


log = logging.getLogger(__name__)

__all__ = (
    'ChannelType',
    'VerificationLevel',
    'ExplicitContentFilterLevel',
    'MfaLevel',
    'PremiumTier',
    'MessageNotifications',
    'ExpireBehavior',
    'TargetUserType',
    'PermissionOverwriteType',
    'Status',
    'ActivityType',
    'RelationshipType',
    'AuditLogAction',
    'AuditLogChangeKey',
    'AuditLogOptionsType',
    'GuildScheduledEventPrivacyLevel',
    'GuildScheduledEventStatus',
    'GuildScheduledEventEntityType',
    'ErrorCode',
)


def _create_value_cls(name, comparable):
    cls = namedtuple('_EnumValue_' + name, 'name value')
    cls.__repr__ = lambda self: f'<{name}.{self.name}: {self.value!r}>'
    cls.__str__ = lambda self: f'{name}.{self.name}'
    if comparable:
        cls.__le__ = lambda self, other: isinstance(other, self.__class__) and self.value <= other.value
        cls.__ge__ = lambda self, other: isinstance(other, self.__class__) and self.value >= other.value
        cls.__lt__ = lambda self, other: isinstance(other, self.__class__) and self.value < other.value
        cls.__gt__ = lambda self, other: isinstance(other, self.__class__) and self.value > other.value
    return cls


def _is_descriptor(obj):
    return hasattr(obj, '__get__') or hasattr(obj, '__set__') or hasattr(obj, '__delete__')


class EnumMeta(type):
    if TYPE_CHECKING:
        __name__: ClassVar[str]
        _enum_member_names_: ClassVar[List[str]]
        _enum_member_map_: ClassVar[Dict[str, Any]]
        _enum_value_map_: ClassVar[Dict[Any, Any]]

    def __new__(cls, name, bases, attrs, *, comparable: bool = False):
        value_mapping = {}
        member_mapping = {}
        member_names = []

        value_cls = _create_value_cls(name, comparable)
        for key, value in list(attrs.items()):
            is_descriptor = _is_descriptor(value)
            if key[0] == '_' and not is_descriptor:
                continue

            # Special case classmethod to just pass through
            if isinstance(value, classmethod):
                continue

            if is_descriptor:
                setattr(value_cls, key, value)
                del attrs[key]
                continue

            try:
                new_value = value_mapping[value]
            except KeyError:
                new_value = value_cls(name=key, value=value)
                value_mapping[value] = new_value
                member_names.append(key)

            member_mapping[key] = new_value
            attrs[key] = new_value

        attrs['_enum_value_map_'] = value_mapping
        attrs['_enum_member_map_'] = member_mapping
        attrs['_enum_member_names_'] = member_names
        attrs['_enum_value_cls_'] = value_cls
        actual_cls = super().__new__(cls, name, bases, attrs)
        value_cls._actual_enum_cls_ = actual_cls  # type: ignore
        return actual_cls

    def __iter__(cls):
        return (cls._enum_member_map_[name] for name in cls._enum_member_names_)

    def __reversed__(cls):
        return (cls._enum_member_map_[name] for name in reversed(cls._enum_member_names_))

    def __len__(cls):
        return len(cls._enum_member_names_)

    def __repr__(cls):
        return f'<enum {cls.__name__}>'

    @property
    def __members__(cls):
        return types.MappingProxyType(cls._enum_member_map_)

    def __call__(cls, value):
        try:
            return cls._enum_value_map_[value]
        except (KeyError, TypeError):
            raise ValueError(f"{value!r} is not a valid {cls.__name__}")

    def __getitem__(cls, key):
        return cls._enum_member_map_[key]

    def __setattr__(cls, name, value):
        raise TypeError('Enums are immutable.')

    def __delattr__(cls, attr):
        raise TypeError('Enums are immutable')

    def __instancecheck__(self, instance):
        # isinstance(x, Y)
        # -> __instancecheck__(Y, x)
        try:
            return instance._actual_enum_cls_ is self
        except AttributeError:
            return False


if TYPE_CHECKING:
    from enum import Enum
else:

    class Enum(metaclass=EnumMeta):
        @classmethod
        def try_value(cls, value):
            try:
                return cls._enum_value_map_[value]
            except (KeyError, TypeError):
                return value


class ChannelType(Enum):
    text = 0
    private = 1
    voice = 2
    group = 3
    category = 4
    news = 5
    store = 6

    # aliases
    guild_text = 0
    dm = 1
    guild_voice = 2
    group_dm = 3
    guild_category = 4
    guild_news = 5
    guild_store = 6

    def __int__(self):
        return self.value


class VerificationLevel(Enum, comparable=True):
    none = 0
    low = 1
    medium = 2
    high = 3
    very_high = 4

    def __int__(self):
        return self.value


class ExplicitContentFilterLevel(Enum, comparable=True):
    disabled = 0
    members_without_roles = 1
    all_members = 2

    def __int__(self):
        return self.value


class MfaLevel(Enum, comparable=True):
    none = 0
    elevated = 1

    def __int__(self):
        return self.value


class PremiumTier(Enum, comparable=True):
    none = 0
    tier_1 = 1
    tier_2 = 2
    tier_3 = 3

    def __int__(self):
        return self.value


class MessageNotifications(Enum):
    all_messages = 0
    only_mentions = 1

    def __int__(self):
        return self.value


class ExpireBehavior(Enum):
    remove_role = 0
    kick = 1

    def __int__(self):
        return self.value


class TargetUserType(Enum):
    stream = 1

    def __int__(self):
        return self.value


class PermissionOverwriteType(Enum):
    role = 0
    member = 1

    def __int__(self):
        return self.value


class Status(Enum):
    online = 'online'
    idle = 'idle'
    dnd = 'dnd'
    invisible = 'invisible'
    offline = 'offline'

    # aliases
    do_not_disturb = 'dnd'

    def __str__(self):
        return self.value


class ActivityType(Enum):
    game = 0
    streaming = 1
    listening = 2
    watching = 3
    custom = 4
    competing = 5

    # aliases
    playing = 0

    def __int__(self):
        return self.value


class RelationshipType(Enum):
    friend = 1
    blocked = 2
    incoming_request = 3
    outgoing_request = 4

    def __int__(self):
        return self.value


class AuditLogAction(Enum):
    guild_update = 1

    channel_create = 10
    channel_update = 11
    channel_delete = 12
    overwrite_create = 13
    overwrite_update = 14
    overwrite_delete = 15

    kick = 20
    member_prune = 21
    ban = 22
    unban = 23
    member_update = 24
    member_role_update = 25

    role_create = 30
    role_update = 31
    role_delete = 32

    invite_create = 40
    invite_update = 41
    invite_delete = 42

    webhook_create = 50
    webhook_update = 51
    webhook_delete = 52

    emoji_create = 60
    emoji_update = 61
    emoji_delete = 62

    message_delete = 72
    message_bulk_delete = 73
    message_pin = 74
    message_unpin = 75

    integration_create = 80
    integration_update = 81
    integration_delete = 82

    # aliases
    member_ban_add = 22
    member_ban_remove = 23

    def __int__(self):
        return self.value


class AuditLogChangeKey(Enum):
    name = 'name'
    icon_hash = 'icon_hash'
    splash_hash = 'splash_hash'
    owner_id = 'owner_id'
    region = 'region'
    afk_channel_id = 'afk_channel_id'
    afk_timeout = 'afk_timeout'
    mfa_level = 'mfa_level'
    verification_level = 'verification_level'
    explicit_content_filter = 'explicit_content_filter'
    default_message_notifications = 'default_message_notifications'
    vanity_url_code = 'vanity_url_code'
    role_add = '$add'
    role_remove = '$remove'
    prune_delete_days = 'prune_delete_days'
    widget_enabled = 'widget_enabled'
    widget_channel_id = 'widget_channel_id'
    system_channel_id = 'system_channel_id'
    position = 'position'
    topic = 'topic'
    bitrate = 'bitrate'
    permission_overwrites = 'permission_overwrites'
    nsfw = 'nsfw'
    application_id = 'application_id'
    rate_limit_per_user = 'rate_limit_per_user'
    permissions = 'permissions'
    color = 'color'
    hoist = 'hoist'
    mentionable = 'mentionable'
    allow = 'allow'
    deny = 'deny'
    code = 'code'
    channel_id = 'channel_id'
    inviter_id = 'inviter_id'
    max_uses = 'max_uses'
    uses = 'uses'
    max_age = 'max_age'
    temporary = 'temporary'
    deaf = 'deaf'
    mute = 'mute'
    nick = 'nick'
    avatar_hash = 'avatar_hash'
    id = 'id'
    type = 'type'
    enable_emoticons = 'enable_emoticons'
    expire_behavior = 'expire_behavior'
    expire_grace_period = 'expire_grace_period'

    # aliases
    colour = 'color'

    def __str__(self):
        return self.value


class AuditLogOptionsType(Enum):
    member = 'member'
    role = 'role'

    def __str__(self):
        return self.value


class GuildScheduledEventPrivacyLevel(Enum):
    guild_only = 2

    def __int__(self):
        return self.value


class GuildScheduledEventStatus(Enum):
    scheduled = 1
    active = 2
    completed = 3
    canceled = 4

    # aliases
    cancelled = 4

    def __int__(self):
        return self.value


class GuildScheduledEventEntityType(Enum):
    stage_instance = 1
    voice = 2
    external = 3

    def __int__(self):
        return self.value


class ErrorCode(Enum):
    unknown_account = 10001
    unknown_application = 10002
    unknown_channel = 10003
    unknown_guild = 10004
    unknown_integration = 10005
    unknown_invite = 10006
    unknown_member = 10007
    unknown_message = 10008
    unknown_overwrite = 10009
    unknown_provider = 10010
    unknown_role = 10011
    unknown_token = 10012
    unknown_user = 10013
    unknown_emoji = 10014
    unknown_webhook = 10015
    unknown_ban = 10026

    bots_cannot_use_endpoint = 20001
    only_bots_can_use_endpoint = 20002

    maximum_guilds_reached = 30001
    maximum_friends_reached = 30002
    maximum_pins_reached = 30003
    maximum_guild_roles_reached = 30005
    too_many_reactions = 30010

    unauthorized = 40001

    missing_access = 50001
    invalid_account_type = 50002
    cannot_execute_action_on_dm_channel = 50003
    embed_disabled = 50004
    cannot_edit_from_another_user = 50005
    cannot_send_empty_message = 50006
    cannot_send_messages_to_this_user = 50007
    cannot_send_messages_in_voice_channel = 50008
    channel_verification_level_too_high = 50009
    oauth2_application_does_not_have_bot = 50010
    oauth2_application_limit_reached = 50011
    invalid_oauth_state = 50012
    missing_permissions = 50013
    invalid_authentication_token = 50014
    note_too_long = 50015
    too_few_or_too_many_messages_to_delete = 50016
    can_only_pin_message_to_originating_channel = 50019
    cannot_execute_action_on_system_message = 50021
    message_provided_too_old_for_bulk_delete = 50034
    invalid_form_body = 50035
    invite_accepted_to_guild_applications_bot_not_in = 50036

    reaction_blocked = 90001

    def __int__(self):
        return self.value


T = TypeVar('T')


def create_unknown_value(cls: Type[T], val: Any) -> T:
    value_cls = cls._enum_value_cls_  # type: ignore
    name = f'unknown_{val}'
    return value_cls(name=name, value=val)


def try_enum(cls: Type[T], val: Any) -> T:
    """A function that tries to turn the value into enum ``cls``.
    If it fails it returns a proxy invalid value instead.

    Discord adds new values to its enumerations over time, so an unknown
    value is preserved rather than rejected.
    """
    try:
        return cls._enum_value_map_[val]  # type: ignore
    except (KeyError, TypeError, AttributeError):
        log.debug('Unknown %s value received: %r', getattr(cls, '__name__', cls), val)
        return create_unknown_value(cls, val)
