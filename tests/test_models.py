from __future__ import annotations

import datetime

import pytest

from discordkit.audit_log import GuildAuditLog
from discordkit.channel import Channel, ChannelEdit, ChannelFollow
from discordkit.emoji import EMOJI_REGEX, Emoji, MessageReaction
from discordkit.enums import (
    AuditLogAction,
    AuditLogChangeKey,
    AuditLogOptionsType,
    ChannelType,
    ExpireBehavior,
    GuildScheduledEventEntityType,
    GuildScheduledEventStatus,
    MessageNotifications,
    PermissionOverwriteType,
    PremiumTier,
    RelationshipType,
    Status,
    TargetUserType,
    VerificationLevel,
)
from discordkit.errors import InvalidData
from discordkit.guild import Guild, GuildBan, GuildEmbed, GuildParams, GuildPreview, UserGuild
from discordkit.integration import Integration, UserConnection
from discordkit.invite import Invite
from discordkit.permissions import PermissionOverwrite, Permissions
from discordkit.role import GuildRole, Role, sort_roles
from discordkit.scheduled_event import GuildScheduledEvent, GuildScheduledEventUser
from discordkit.user import (
    Ack,
    Member,
    Relationship,
    Settings,
    User,
    UserGuildSettings,
    UserGuildSettingsChannelOverride,
    UserGuildSettingsEdit,
)
from discordkit.voice import VoiceICE, VoiceRegion, VoiceState

UTC = datetime.timezone.utc


def _user(id: str = "80351110224678912", name: str = "Nelly") -> dict:
    return {"id": id, "username": name, "discriminator": "1337", "avatar": None}


def _role(id: str, position: int, permissions: str = "0") -> dict:
    return {
        "id": id,
        "name": f"role-{id}",
        "managed": False,
        "mentionable": True,
        "hoist": False,
        "color": 0x3498DB,
        "position": position,
        "permissions": permissions,
    }


class TestUser:
    def test_decode(self) -> None:
        user = User(data={**_user(), "bot": True, "public_flags": 64})
        assert user.id == "80351110224678912"
        assert user.name == "Nelly"
        assert user.bot
        assert user.public_flags == 64
        assert str(user) == "Nelly#1337"
        assert user.mention == "<@80351110224678912>"

    def test_missing_id_raises(self) -> None:
        with pytest.raises(KeyError):
            User(data={"username": "nobody"})  # type: ignore[typeddict-item]

    def test_equality_by_id(self) -> None:
        assert User(data=_user()) == User(data=_user(name="Renamed"))


class TestMember:
    def test_decode(self) -> None:
        member = Member(
            data={
                "user": _user(),
                "nick": "nelly",
                "roles": ["1", "2"],
                "joined_at": "2015-04-26T06:26:56.936000+00:00",
                "premium_since": None,
                "deaf": False,
                "mute": True,
            },
            guild_id="41771983423143937",
        )
        assert member.id == "80351110224678912"
        assert member.guild_id == "41771983423143937"
        assert member.display_name == "nelly"
        assert member.role_ids == ["1", "2"]
        assert member.mute
        assert member.joined_at == datetime.datetime(2015, 4, 26, 6, 26, 56, 936000, tzinfo=UTC)
        assert member.premium_since is None
        assert member.permissions.value == 0

    def test_mention_uses_nickname_form(self) -> None:
        assert Member(data={"user": _user("789")}).mention == "<@!789>"

    def test_mention_without_user_is_empty(self) -> None:
        member = Member(data={"roles": []})  # type: ignore[typeddict-item]
        assert member.id is None
        assert member.mention == ""

    def test_interaction_permissions(self) -> None:
        member = Member(data={"user": _user(), "permissions": "8"})
        assert member.permissions.is_administrator


class TestRelationshipsAndSettings:
    def test_relationship(self) -> None:
        relationship = Relationship(data={"id": "1", "type": 1, "user": _user("1")})
        assert relationship.type is RelationshipType.friend

    def test_settings(self) -> None:
        settings = Settings(
            data={
                "status": "dnd",
                "locale": "en-US",
                "guild_positions": ["1", "2"],
                "friend_source_flags": {"all": False, "mutual_guilds": True},
            }
        )
        assert settings.status is Status.dnd
        assert settings.friend_source_flags is not None
        assert settings.friend_source_flags.mutual_guilds
        assert not settings.friend_source_flags.mutual_friends

    def test_ack(self) -> None:
        ack = Ack(data={"token": "abc"})
        assert ack.token == "abc"
        assert ack.to_dict() == {"token": "abc"}
        assert Ack(data={}).token is None

    def test_user_guild_settings(self) -> None:
        settings = UserGuildSettings(
            data={
                "guild_id": "1",
                "muted": True,
                "message_notifications": 1,
                "channel_overrides": [{"channel_id": "2", "muted": True, "message_notifications": 0}],
            }
        )
        assert settings.message_notifications is MessageNotifications.only_mentions
        assert settings.channel_overrides[0].channel_id == "2"

    def test_user_guild_settings_edit_keys_overrides_by_channel(self) -> None:
        override = UserGuildSettingsChannelOverride(data={"channel_id": "2", "muted": True, "message_notifications": 1})
        edit = UserGuildSettingsEdit(muted=True, channel_overrides={"2": override})
        payload = edit.to_dict()
        assert payload["muted"] is True
        assert payload["message_notifications"] == 0
        assert payload["channel_overrides"] == {
            "2": {"channel_id": "2", "muted": True, "message_notifications": 1}
        }


class TestRole:
    def test_decode(self) -> None:
        role = Role(data=_role("456", 3, "2048"))
        assert role.mention == "<@&456>"
        assert role.permissions.send_messages
        assert role.colour == role.color == 0x3498DB
        assert role.to_dict()["permissions"] == "2048"

    def test_invalid_permissions_raise(self) -> None:
        with pytest.raises(InvalidData):
            Role(data=_role("1", 0, "not-a-number"))

    def test_sort_roles_highest_first(self) -> None:
        roles = [Role(data=_role(str(i), position)) for i, position in enumerate([1, 5, 0, 3])]
        assert [role.position for role in sort_roles(roles)] == [5, 3, 1, 0]

    def test_guild_role(self) -> None:
        guild_role = GuildRole(data={"guild_id": "9", "role": _role("1", 0)})
        assert guild_role.guild_id == "9"
        assert guild_role.role.id == "1"


class TestChannel:
    def test_decode(self) -> None:
        channel = Channel(
            data={
                "id": "123",
                "type": 0,
                "guild_id": "9",
                "name": "general",
                "position": 2,
                "nsfw": False,
                "permission_overwrites": [{"id": "9", "type": 0, "allow": "0", "deny": "2048"}],
            }
        )
        assert channel.type is ChannelType.text
        assert channel.mention == "<#123>"
        assert str(channel) == "general"
        overwrite = channel.overwrites_for("9")
        assert overwrite is not None
        assert overwrite.type is PermissionOverwriteType.role
        assert overwrite.deny.send_messages
        assert channel.overwrites_for("10") is None

    def test_dm_channel(self) -> None:
        channel = Channel(data={"id": "5", "type": 1, "recipients": [_user()]})
        assert channel.type is ChannelType.dm
        assert channel.guild_id is None
        assert channel.recipients[0].name == "Nelly"

    def test_unknown_type_is_preserved(self) -> None:
        channel = Channel(data={"id": "5", "type": 15})
        assert channel.type.value == 15

    def test_channel_edit_only_sends_passed_fields(self) -> None:
        overwrite = PermissionOverwrite("9", deny=Permissions(send_messages=True))
        edit = ChannelEdit(name="rules", overwrites=[overwrite])
        assert edit.to_dict() == {
            "position": 0,
            "name": "rules",
            "permission_overwrites": [{"id": "9", "type": 0, "allow": "0", "deny": "2048"}],
        }

    def test_channel_follow(self) -> None:
        follow = ChannelFollow(data={"channel_id": "1", "webhook_id": "2"})
        assert follow.webhook_id == "2"


class TestEmoji:
    def test_custom(self) -> None:
        emoji = Emoji(data={"id": "41771983429993937", "name": "LUL"})
        assert emoji.api_name == "LUL:41771983429993937"
        assert emoji.message_format == "<:LUL:41771983429993937>"

    def test_animated(self) -> None:
        emoji = Emoji(data={"id": "418457438208196609", "name": "dance", "animated": True})
        assert emoji.message_format == "<a:dance:418457438208196609>"
        assert EMOJI_REGEX.fullmatch(emoji.message_format)

    def test_unicode(self) -> None:
        emoji = Emoji(data={"id": None, "name": "🔥"})
        assert emoji.api_name == "🔥"
        assert emoji.message_format == "🔥"

    def test_name_missing(self) -> None:
        emoji = Emoji(data={"id": "41771983429993937", "name": None})
        assert emoji.api_name == "41771983429993937"

    def test_reaction(self) -> None:
        reaction = MessageReaction(
            data={"user_id": "1", "message_id": "2", "channel_id": "3", "emoji": {"id": None, "name": "🔥"}}
        )
        assert reaction.guild_id is None
        assert reaction.emoji.name == "🔥"


class TestGuild:
    def _guild(self, **extra) -> dict:
        return {
            "id": "41771983423143937",
            "name": "Discord Developers",
            "icon": "86e39f7ae3307e811784e2ffd11a7310",
            "owner_id": "80351110224678912",
            "verification_level": 1,
            "premium_tier": 2,
            "system_channel_flags": 1,
            "roles": [_role("41771983423143937", 0, "104324673"), _role("2", 1)],
            "channels": [{"id": "3", "type": 0, "name": "general"}],
            "members": [{"user": _user()}],
            **extra,
        }

    def test_decode(self) -> None:
        guild = Guild(data=self._guild())
        assert guild.verification_level is VerificationLevel.low
        assert guild.premium_tier is PremiumTier.tier_2
        assert guild.system_channel_flags.suppress_join_notifications
        assert not guild.system_channel_flags.suppress_premium_subscriptions
        assert guild.default_role is guild.roles[0]
        assert guild.get_channel("3").guild_id == guild.id
        assert guild.get_member("80351110224678912").guild_id == guild.id

    def test_null_system_channel_flags(self) -> None:
        guild = Guild(data=self._guild(system_channel_flags=None))
        assert guild.system_channel_flags.value == 0
        assert not guild.system_channel_flags.suppress_join_notifications

    def test_non_integer_system_channel_flags_raise(self) -> None:
        with pytest.raises(InvalidData):
            Guild(data=self._guild(system_channel_flags=1.0))

    def test_icon_url(self) -> None:
        guild = Guild(data=self._guild())
        assert guild.icon_url == (
            "https://cdn.discordapp.com/icons/41771983423143937/86e39f7ae3307e811784e2ffd11a7310.png"
        )

    def test_animated_icon_url(self) -> None:
        guild = Guild(data=self._guild(icon="a_1234"))
        assert guild.icon_url == "https://cdn.discordapp.com/icons/41771983423143937/a_1234.gif"

    def test_banner_url(self) -> None:
        assert Guild(data=self._guild()).banner_url is None
        guild = Guild(data=self._guild(banner="abcd"))
        assert guild.banner_url == "https://cdn.discordapp.com/banners/41771983423143937/abcd.png"

    def test_unavailable_guild(self) -> None:
        guild = Guild(data={"id": "1", "unavailable": True})  # type: ignore[typeddict-item]
        assert guild.unavailable
        assert guild.icon_url is None
        assert guild.roles == []

    def test_user_guild(self) -> None:
        guild = UserGuild(data={"id": "1", "name": "a", "icon": None, "owner": True, "permissions": "8"})
        assert guild.permissions.administrator

    def test_preview(self) -> None:
        preview = GuildPreview(
            data={
                "id": "1",
                "name": "a",
                "icon": None,
                "splash": None,
                "discovery_splash": None,
                "emojis": [],
                "features": ["DISCOVERABLE"],
                "approximate_member_count": 10,
                "approximate_presence_count": 2,
                "description": None,
            }
        )
        assert preview.features == ["DISCOVERABLE"]
        assert preview.approximate_member_count == 10

    def test_params(self) -> None:
        params = GuildParams(name="renamed", verification_level=VerificationLevel.high)
        assert params.to_dict() == {"name": "renamed", "verification_level": 3}

    def test_ban_and_embed(self) -> None:
        ban = GuildBan(data={"reason": None, "user": _user()})
        assert ban.user.name == "Nelly"
        embed = GuildEmbed(data={"enabled": True, "channel_id": "2"})
        assert embed.to_dict() == {"enabled": True, "channel_id": "2"}


class TestInvite:
    def test_decode(self) -> None:
        invite = Invite(
            data={
                "code": "0vCdhLbwjZZTWZLD",
                "guild": {"id": "1", "name": "g", "icon": None, "owner_id": "2"},
                "channel": {"id": "3", "type": 0, "name": "general"},
                "created_at": "2021-01-01T00:00:00+00:00",
                "max_age": 86400,
                "target_user_type": 1,
            }
        )
        assert invite.url == "https://discord.gg/0vCdhLbwjZZTWZLD"
        assert invite.channel is not None
        assert invite.channel.guild_id == "1"
        assert invite.target_user_type is TargetUserType.stream
        assert invite.expires_at == datetime.datetime(2021, 1, 2, tzinfo=UTC)

    def test_never_expires(self) -> None:
        invite = Invite(data={"code": "abc", "channel": None, "max_age": 0})
        assert invite.expires_at is None


class TestIntegration:
    def test_decode(self) -> None:
        integration = Integration(
            data={
                "id": "1",
                "name": "twitch",
                "type": "twitch",
                "enabled": True,
                "expire_behavior": 1,
                "expire_grace_period": 7,
                "account": {"id": "a", "name": "streamer"},
                "synced_at": "2021-01-01T00:00:00+00:00",
            }
        )
        assert integration.expire_behavior is ExpireBehavior.kick
        assert integration.account.name == "streamer"

    def test_connection(self) -> None:
        connection = UserConnection(data={"id": "1", "name": "n", "type": "github", "revoked": True})
        assert connection.revoked
        assert connection.integrations == []


class TestVoice:
    def test_voice_state(self) -> None:
        state = VoiceState(
            data={
                "user_id": "1",
                "session_id": "s",
                "channel_id": None,
                "suppress": False,
                "self_mute": True,
                "self_deaf": False,
                "mute": False,
                "deaf": False,
            }
        )
        assert not state.connected
        assert state.self_mute

    def test_region(self) -> None:
        region = VoiceRegion(data={"id": "us-west", "name": "US West", "sample_hostname": "h", "sample_port": 80})
        assert region.hostname == "h"
        assert region.port == 80

    def test_ice(self) -> None:
        ice = VoiceICE(data={"ttl": "86400", "servers": [{"url": "turn:x", "username": "u", "credential": "c"}]})
        assert ice.servers[0].url == "turn:x"


class TestAuditLog:
    def test_decode(self) -> None:
        audit_log = GuildAuditLog(
            data={
                "webhooks": [],
                "users": [_user("1")],
                "integrations": [],
                "audit_log_entries": [
                    {
                        "id": "10",
                        "target_id": "20",
                        "user_id": "1",
                        "action_type": 22,
                        "reason": "spam",
                        "changes": [{"key": "name", "old_value": "a", "new_value": "b"}],
                        "options": {"delete_member_days": "7", "members_removed": "3", "type": "role"},
                    }
                ],
            }
        )
        entry = audit_log.entries[0]
        assert entry.action is AuditLogAction.member_ban_add
        assert entry.changes[0].key is AuditLogChangeKey.name
        assert entry.changes[0].new_value == "b"
        assert entry.options is not None
        assert entry.options.type is AuditLogOptionsType.role
        assert entry.options.delete_member_days == "7"
        assert audit_log.get_user("1") is audit_log.users[0]


class TestScheduledEvent:
    def test_decode(self) -> None:
        event = GuildScheduledEvent(
            data={
                "id": "1",
                "guild_id": "2",
                "channel_id": None,
                "name": "Launch",
                "scheduled_start_time": "2021-01-01T00:00:00+00:00",
                "scheduled_end_time": None,
                "privacy_level": 2,
                "status": 2,
                "entity_type": 3,
                "entity_id": None,
                "entity_metadata": {"location": "Online"},
            }
        )
        assert event.status is GuildScheduledEventStatus.active
        assert event.entity_type is GuildScheduledEventEntityType.external
        assert event.location == "Online"
        assert event.scheduled_end_time is None

    def test_event_user(self) -> None:
        event_user = GuildScheduledEventUser(data={"guild_scheduled_event_id": "1", "user": _user()})
        assert event_user.member is None
