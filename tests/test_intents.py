from __future__ import annotations

import pytest

from discordkit.intents import Intents, make_intent


class TestIntents:
    @pytest.mark.parametrize(
        ("name", "bit"),
        [
            ("guilds", 0),
            ("guild_members", 1),
            ("guild_presences", 8),
            ("direct_message_typing", 14),
            ("guild_scheduled_events", 16),
        ],
    )
    def test_bit_positions(self, name: str, bit: int) -> None:
        assert getattr(Intents, name.upper()) == 1 << bit

    def test_bit_fifteen_is_unused(self) -> None:
        assert 1 << 15 not in Intents.VALID_FLAGS.values()

    def test_all_without_privileged_excludes_privileged(self) -> None:
        assert Intents.ALL_WITHOUT_PRIVILEGED & Intents.GUILD_MEMBERS == 0
        assert Intents.ALL_WITHOUT_PRIVILEGED & Intents.GUILD_PRESENCES == 0

    def test_all_includes_privileged(self) -> None:
        assert Intents.ALL & Intents.GUILD_MEMBERS == Intents.GUILD_MEMBERS
        assert Intents.ALL & Intents.GUILD_PRESENCES == Intents.GUILD_PRESENCES

    def test_all_is_every_declared_bit(self) -> None:
        assert Intents.ALL == Intents.ALL_FLAGS
        assert Intents.ALL == Intents.ALL_WITHOUT_PRIVILEGED | Intents.GUILD_MEMBERS | Intents.GUILD_PRESENCES

    def test_none_is_zero(self) -> None:
        assert Intents.none().value == 0

    def test_is_privileged(self) -> None:
        assert not Intents.all_without_privileged().is_privileged
        assert Intents.all().is_privileged
        assert Intents(guild_presences=True).is_privileged
        assert Intents.privileged() == Intents(guild_members=True, guild_presences=True)

    def test_make_intent(self) -> None:
        intents = Intents(guilds=True, guild_messages=True)
        assert make_intent(intents) == (1 << 0) | (1 << 9)
        assert make_intent(513) == 513
