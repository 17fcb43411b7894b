from __future__ import annotations

import pytest

from discordkit.activity import Activity, GatewayStatusUpdate
from discordkit.errors import InvalidArgument
from discordkit.intents import Intents
from discordkit.session import Session


class TestSession:
    def test_defaults(self) -> None:
        session = Session("token")
        assert session.intents == Intents.all_without_privileged()
        assert session.shard is None
        assert session.max_rest_retries == 3
        assert session.large_threshold == 250
        assert session.should_reconnect_on_error
        assert session.state_enabled
        assert not session.sync_events
        assert session.http.max_retries == 3
        assert session.http.token == "token"
        assert session.user_agent.startswith("DiscordBot ")

    def test_bot_prefix_is_removed(self) -> None:
        assert Session("Bot abc").token == "abc"

    def test_custom_user_agent(self) -> None:
        assert Session("t", user_agent="custom/1.0").user_agent == "custom/1.0"

    def test_shard_requires_both_values(self) -> None:
        with pytest.raises(InvalidArgument):
            Session("t", shard_id=0)
        with pytest.raises(InvalidArgument):
            Session("t", shard_count=2)

    def test_shard_id_range(self) -> None:
        with pytest.raises(InvalidArgument):
            Session("t", shard_id=2, shard_count=2)

    def test_large_threshold_range(self) -> None:
        with pytest.raises(InvalidArgument):
            Session("t", large_threshold=10)


class TestIdentify:
    def test_unsharded(self) -> None:
        payload = Session("token").identify.to_dict()
        assert payload["token"] == "token"
        assert payload["intents"] == Intents.ALL_WITHOUT_PRIVILEGED
        assert payload["large_threshold"] == 250
        assert payload["compress"] is False
        assert "shard" not in payload
        assert "presence" not in payload
        assert set(payload["properties"]) == {"$os", "$browser", "$device", "$referer", "$referring_domain"}

    def test_sharded_with_presence(self) -> None:
        session = Session(
            "token",
            intents=Intents.all(),
            shard_id=1,
            shard_count=4,
            compress=True,
            presence=GatewayStatusUpdate(activity=Activity.create("chess")),
        )
        payload = session.identify.to_dict()
        assert payload["shard"] == [1, 4]
        assert payload["intents"] == Intents.ALL
        assert payload["compress"] is True
        assert payload["presence"]["game"] == {"name": "chess", "type": 0}

    def test_repr_hides_token(self) -> None:
        assert "secret" not in repr(Session("secret").identify)
