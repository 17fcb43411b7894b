from __future__ import annotations

from discordkit.enums import (
    ActivityType,
    AuditLogAction,
    AuditLogChangeKey,
    ChannelType,
    ErrorCode,
    Status,
    VerificationLevel,
    try_enum,
)


class TestTryEnum:
    def test_known_value(self) -> None:
        assert try_enum(ChannelType, 0) is ChannelType.text

    def test_aliases_share_members(self) -> None:
        assert ChannelType.guild_text is ChannelType.text
        assert ActivityType.playing is ActivityType.game
        assert Status.do_not_disturb is Status.dnd

    def test_unknown_value_is_preserved(self) -> None:
        unknown = try_enum(ChannelType, 13)
        assert unknown.value == 13
        assert unknown.name == "unknown_13"
        assert isinstance(unknown, ChannelType)

    def test_unknown_string_value(self) -> None:
        unknown = try_enum(AuditLogChangeKey, "new_key")
        assert unknown.value == "new_key"


class TestEnumValues:
    def test_int_conversion(self) -> None:
        assert int(ActivityType.competing) == 5
        assert int(ErrorCode.unknown_channel) == 10003

    def test_string_conversion(self) -> None:
        assert str(Status.idle) == "idle"

    def test_comparable_levels(self) -> None:
        assert VerificationLevel.low < VerificationLevel.high

    def test_audit_log_action_codes(self) -> None:
        assert AuditLogAction(1) is AuditLogAction.guild_update
        assert AuditLogAction.channel_create.value == 10
