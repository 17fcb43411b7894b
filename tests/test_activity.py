from __future__ import annotations

import datetime

import pytest

from discordkit.activity import Activity, GatewayStatusUpdate, TimeStamps
from discordkit.enums import ActivityType, Status
from discordkit.errors import InvalidData
from discordkit.presence import Presence


class TestTimeStamps:
    def test_truncates_float_millis(self) -> None:
        timestamps = TimeStamps.from_dict({"start": 1609459200000.0, "end": 1609459200500.7})
        assert timestamps.start == 1609459200000
        assert timestamps.end == 1609459200500

    def test_missing_keys_are_zero(self) -> None:
        timestamps = TimeStamps.from_dict({})
        assert timestamps.start == 0
        assert timestamps.end == 0
        assert timestamps.started_at is None

    def test_started_at(self) -> None:
        timestamps = TimeStamps.from_dict({"start": 1609459200000.0})
        assert timestamps.started_at == datetime.datetime(2021, 1, 1, tzinfo=datetime.timezone.utc)

    def test_non_numeric_raises(self) -> None:
        with pytest.raises(InvalidData):
            TimeStamps.from_dict({"start": "1609459200000"})  # type: ignore[typeddict-item]

    def test_to_dict_omits_zeroes(self) -> None:
        assert TimeStamps(start=5).to_dict() == {"start": 5}


class TestActivity:
    def test_decode(self) -> None:
        activity = Activity(
            data={
                "name": "Rocket League",
                "type": 0,
                "created_at": 1609459200000,
                "application_id": "379286085710381999",
                "state": "In a Match",
                "details": "Ranked Duos: 2-1",
                "timestamps": {"start": 1507665886000.25},
                "party": {"id": "9dd6594e-81b3-49f6-a6b5-a679e6a060d3", "size": [2, 2]},
                "assets": {"large_image": "351371005538729000", "large_text": "DFH Stadium"},
                "secrets": {"join": "025ed05c71f639de8bfaa0d679d7c94b2fdce12f"},
                "instance": True,
                "flags": 3,
            }
        )
        assert activity.type is ActivityType.game
        assert activity.created_at == datetime.datetime(2021, 1, 1, tzinfo=datetime.timezone.utc)
        assert activity.timestamps.start == 1507665886000
        assert activity.party is not None
        assert activity.party.current_size == 2
        assert activity.assets is not None
        assert activity.assets.large_text == "DFH Stadium"
        assert activity.flags.instance
        assert activity.flags.join
        assert not activity.flags.spectate

    def test_custom_status_with_emoji(self) -> None:
        activity = Activity(data={"name": "Custom Status", "type": 4, "state": "busy", "emoji": {"id": None, "name": "🔥"}})
        assert activity.type is ActivityType.custom
        assert activity.emoji is not None
        assert activity.emoji.name == "🔥"

    def test_create(self) -> None:
        activity = Activity.create("a stream", type=ActivityType.streaming, url="https://twitch.tv/x")
        assert activity.to_dict() == {"name": "a stream", "type": 1, "url": "https://twitch.tv/x"}

    def test_null_flags_decode_to_zero(self) -> None:
        activity = Activity(data={"name": "x", "type": 0, "flags": None})  # type: ignore[typeddict-item]
        assert activity.flags.value == 0
        assert not activity.flags.instance

    def test_non_integer_flags_raise(self) -> None:
        with pytest.raises(InvalidData):
            Activity(data={"name": "x", "type": 0, "flags": "3"})  # type: ignore[typeddict-item]

    def test_created_at_round_trips(self) -> None:
        activity = Activity(data={"name": "x", "type": 0, "created_at": 1609459200123})
        assert activity.to_dict()["created_at"] == 1609459200123


class TestGatewayStatusUpdate:
    def test_to_dict(self) -> None:
        update = GatewayStatusUpdate(status=Status.idle, activity=Activity.create("chess"), since=10, afk=True)
        assert update.to_dict() == {
            "since": 10,
            "game": {"name": "chess", "type": 0},
            "status": "idle",
            "afk": True,
        }

    def test_without_activity(self) -> None:
        assert GatewayStatusUpdate().to_dict()["game"] is None

    def test_from_dict(self) -> None:
        update = GatewayStatusUpdate.from_dict({"since": 0, "game": None, "status": "dnd", "afk": False})
        assert update.status is Status.dnd
        assert update.activity is None


class TestPresence:
    def test_decode(self) -> None:
        presence = Presence(
            data={
                "user": {"id": "1"},
                "status": "online",
                "activities": [{"name": "chess", "type": 0}],
                "guild_id": "2",
            }
        )
        assert presence.status is Status.online
        assert presence.activity is not None
        assert presence.activity.name == "chess"
        assert presence.user.id == "1"
