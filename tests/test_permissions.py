from __future__ import annotations

from functools import reduce
import operator

import pytest

from discordkit.enums import PermissionOverwriteType
from discordkit.errors import InvalidData
from discordkit.flags import has_permission
from discordkit.permissions import PermissionOverwrite, Permissions


def _expand(name: str) -> int:
    if name in Permissions.VALID_FLAGS:
        return Permissions.VALID_FLAGS[name]
    return reduce(operator.or_, (_expand(member) for member in Permissions.COMPOSITES[name]), 0)


class TestPrimitiveBits:
    @pytest.mark.parametrize(
        ("name", "bit"),
        [
            ("create_instant_invite", 0),
            ("administrator", 3),
            ("manage_server", 5),
            ("view_audit_logs", 7),
            ("voice_priority_speaker", 8),
            ("view_channel", 10),
            ("send_messages", 11),
            ("mention_everyone", 17),
            ("voice_connect", 20),
            ("voice_use_vad", 25),
            ("manage_emojis", 30),
            ("use_slash_commands", 31),
            ("voice_request_to_speak", 32),
        ],
    )
    def test_bit_positions(self, name: str, bit: int) -> None:
        assert Permissions.VALID_FLAGS[name] == 1 << bit
        assert getattr(Permissions, name.upper()) == 1 << bit

    def test_aliases_share_bits(self) -> None:
        assert Permissions.READ_MESSAGES == Permissions.VIEW_CHANNEL
        assert Permissions.MANAGE_GUILD == Permissions.MANAGE_SERVER
        assert "read_messages" not in Permissions.PURE_FLAGS

    def test_every_bit_is_distinct(self) -> None:
        values = [Permissions.VALID_FLAGS[name] for name in Permissions.PURE_FLAGS]
        assert len(values) == len(set(values)) == 33


class TestComposites:
    @pytest.mark.parametrize("name", ["all_text", "all_voice", "all_channel", "all"])
    def test_composite_is_union_of_members(self, name: str) -> None:
        assert Permissions.COMPOSITE_VALUES[name] == _expand(name)
        assert getattr(Permissions, name.upper()) == _expand(name)

    def test_all_text_members(self) -> None:
        expected = (
            Permissions.VIEW_CHANNEL
            | Permissions.SEND_MESSAGES
            | Permissions.SEND_TTS_MESSAGES
            | Permissions.MANAGE_MESSAGES
            | Permissions.EMBED_LINKS
            | Permissions.ATTACH_FILES
            | Permissions.READ_MESSAGE_HISTORY
            | Permissions.MENTION_EVERYONE
        )
        assert Permissions.ALL_TEXT == expected

    def test_all_voice_members(self) -> None:
        expected = (
            Permissions.VIEW_CHANNEL
            | Permissions.VOICE_CONNECT
            | Permissions.VOICE_SPEAK
            | Permissions.VOICE_MUTE_MEMBERS
            | Permissions.VOICE_DEAFEN_MEMBERS
            | Permissions.VOICE_MOVE_MEMBERS
            | Permissions.VOICE_USE_VAD
            | Permissions.VOICE_PRIORITY_SPEAKER
        )
        assert Permissions.ALL_VOICE == expected

    def test_all_channel_contains_text_and_voice(self) -> None:
        assert has_permission(Permissions.ALL_CHANNEL, Permissions.ALL_TEXT)
        assert has_permission(Permissions.ALL_CHANNEL, Permissions.ALL_VOICE)
        assert not has_permission(Permissions.ALL_CHANNEL, Permissions.ADMINISTRATOR)

    def test_all_excludes_undeclared_bits(self) -> None:
        for name in ("voice_stream_video", "use_external_emojis", "view_guild_insights", "change_nickname",
                     "manage_nicknames", "use_slash_commands", "voice_request_to_speak"):
            assert not has_permission(Permissions.ALL, Permissions.VALID_FLAGS[name]), name

    def test_factories_match_constants(self) -> None:
        assert Permissions.all().value == Permissions.ALL
        assert Permissions.all_text().value == Permissions.ALL_TEXT
        assert Permissions.all_voice().value == Permissions.ALL_VOICE
        assert Permissions.all_channel().value == Permissions.ALL_CHANNEL
        assert Permissions.none().value == 0


class TestPermissions:
    def test_has_accepts_ints_and_permissions(self) -> None:
        perms = Permissions.all_text()
        assert perms.has(Permissions.SEND_MESSAGES)
        assert perms.has(Permissions(send_messages=True, embed_links=True))
        assert not perms.has(Permissions.SEND_MESSAGES | Permissions.VOICE_SPEAK)

    def test_is_administrator(self) -> None:
        assert Permissions(administrator=True).is_administrator
        assert not Permissions.all_channel().is_administrator

    def test_from_str_round_trip(self) -> None:
        perms = Permissions.from_str("2048")
        assert perms.send_messages
        assert perms.to_str() == "2048"

    def test_from_str_handles_64_bit_masks(self) -> None:
        assert Permissions.from_str(str(1 << 32)).voice_request_to_speak

    def test_from_str_missing_is_empty(self) -> None:
        assert Permissions.from_str(None).value == 0

    @pytest.mark.parametrize("value", ["abc", "1.5", True, [2048]])
    def test_from_str_rejects_garbage(self, value: object) -> None:
        with pytest.raises(InvalidData):
            Permissions.from_str(value)  # type: ignore[arg-type]


class TestPermissionOverwrite:
    def test_from_dict(self) -> None:
        overwrite = PermissionOverwrite.from_dict({"id": "42", "type": 1, "allow": "2048", "deny": "1024"})
        assert overwrite.id == "42"
        assert overwrite.type is PermissionOverwriteType.member
        assert overwrite.allow.send_messages
        assert overwrite.deny.view_channel

    def test_apply_removes_denied_then_adds_allowed(self) -> None:
        base = Permissions(view_channel=True, send_messages=True, embed_links=True)
        overwrite = PermissionOverwrite(
            "42",
            allow=Permissions(attach_files=True, embed_links=True),
            deny=Permissions(send_messages=True, embed_links=True),
        )
        result = overwrite.apply(base)
        assert result == Permissions(view_channel=True, embed_links=True, attach_files=True)

    def test_is_empty(self) -> None:
        assert PermissionOverwrite("1").is_empty()
        assert not PermissionOverwrite("1", allow=Permissions(send_messages=True)).is_empty()

    def test_update_and_iter(self) -> None:
        overwrite = PermissionOverwrite("1")
        overwrite.update(send_messages=True, attach_files=False)
        values = dict(overwrite)
        assert values["send_messages"] is True
        assert values["attach_files"] is False
        assert values["embed_links"] is None

    def test_update_leaves_caller_permissions_untouched(self) -> None:
        allow = Permissions.all_text()
        deny = Permissions(attach_files=True)
        overwrite = PermissionOverwrite("1", allow=allow, deny=deny)
        overwrite.update(send_messages=False, attach_files=True)
        assert allow == Permissions.all_text()
        assert deny == Permissions(attach_files=True)
        assert not overwrite.allow.send_messages
        assert overwrite.deny.send_messages

    def test_from_pair_copies_permissions(self) -> None:
        allow = Permissions(send_messages=True)
        deny = Permissions.none()
        overwrite = PermissionOverwrite.from_pair("1", allow, deny)
        overwrite.update(embed_links=False)
        assert deny.value == 0
        assert overwrite.allow is not allow

    def test_to_dict_uses_string_masks(self) -> None:
        overwrite = PermissionOverwrite.from_pair(
            "7",
            Permissions(send_messages=True),
            Permissions(view_channel=True),
            type=PermissionOverwriteType.member,
        )
        assert overwrite.to_dict() == {"id": "7", "type": 1, "allow": "2048", "deny": "1024"}
        assert PermissionOverwrite.from_dict(overwrite.to_dict()) == overwrite
