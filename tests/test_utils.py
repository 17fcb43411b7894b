from __future__ import annotations

import datetime

import pytest

from discordkit import utils
from discordkit.errors import InvalidData


class TestDecodeRetryAfter:
    def test_splits_fractional_seconds(self) -> None:
        assert utils.decode_retry_after(1.5) == datetime.timedelta(seconds=1, milliseconds=500)

    def test_zero(self) -> None:
        assert utils.decode_retry_after(0.0) == datetime.timedelta(0)

    def test_sub_millisecond_remainder_is_dropped(self) -> None:
        assert utils.decode_retry_after(2.0004) == datetime.timedelta(seconds=2)

    def test_integer_input(self) -> None:
        assert utils.decode_retry_after(3) == datetime.timedelta(seconds=3)

    def test_negative_passes_through(self) -> None:
        assert utils.decode_retry_after(-1.5) == datetime.timedelta(seconds=-1, milliseconds=-500)

    def test_millisecond_part_is_floored(self) -> None:
        # 2.3 splits into 2 and 0.29999..., so the millisecond part floors to 299.
        assert utils.decode_retry_after(2.3) == datetime.timedelta(seconds=2, milliseconds=299)

    @pytest.mark.parametrize("value", ["1.5", None, [1.5], True])
    def test_non_numbers_raise(self, value: object) -> None:
        with pytest.raises(InvalidData):
            utils.decode_retry_after(value)  # type: ignore[arg-type]


class TestTruncateMillis:
    def test_whole_value(self) -> None:
        assert utils.truncate_millis(1609459200000.0) == 1609459200000

    def test_fraction_is_truncated_not_rounded(self) -> None:
        assert utils.truncate_millis(1609459200500.7) == 1609459200500

    def test_string_raises(self) -> None:
        with pytest.raises(InvalidData):
            utils.truncate_millis("1609459200000")  # type: ignore[arg-type]


class TestMillisToDatetime:
    def test_aware_utc(self) -> None:
        assert utils.millis_to_datetime(1609459200000) == datetime.datetime(2021, 1, 1, tzinfo=datetime.timezone.utc)

    def test_none(self) -> None:
        assert utils.millis_to_datetime(None) is None


class TestMentions:
    def test_channel(self) -> None:
        assert utils.channel_mention("123") == "<#123>"

    def test_role(self) -> None:
        assert utils.role_mention("456") == "<@&456>"

    def test_member(self) -> None:
        assert utils.member_mention("789") == "<@!789>"

    def test_user(self) -> None:
        assert utils.user_mention("789") == "<@789>"

    def test_no_validation(self) -> None:
        assert utils.channel_mention("") == "<#>"


class TestISO8601:
    def test_fractional_z_suffix(self) -> None:
        parsed = utils.ISO8601("2021-01-01T12:30:00.123000Z")
        assert parsed == datetime.datetime(2021, 1, 1, 12, 30, 0, 123000, tzinfo=datetime.timezone.utc)

    def test_offset_suffix(self) -> None:
        parsed = utils.ISO8601("2021-01-01T12:30:00+00:00")
        assert parsed == datetime.datetime(2021, 1, 1, 12, 30, tzinfo=datetime.timezone.utc)

    def test_empty(self) -> None:
        assert utils.ISO8601(None) is None
        assert utils.ISO8601("") is None

    def test_garbage_raises(self) -> None:
        with pytest.raises(InvalidData):
            utils.ISO8601("yesterday")


class TestParsePermissionMask:
    def test_string(self) -> None:
        assert utils.parse_permission_mask("8") == 8

    def test_int(self) -> None:
        assert utils.parse_permission_mask(8) == 8

    def test_none(self) -> None:
        assert utils.parse_permission_mask(None) == 0


class _Item:
    def __init__(self, id: str, name: str) -> None:
        self.id = id
        self.name = name


class TestFindAndGet:
    def test_get_single_attribute(self) -> None:
        items = [_Item("1", "a"), _Item("2", "b")]
        assert utils.get(items, id="2") is items[1]
        assert utils.get(items, id="3") is None

    def test_get_multiple_attributes(self) -> None:
        items = [_Item("1", "a"), _Item("2", "a")]
        assert utils.get(items, id="2", name="a") is items[1]

    def test_find(self) -> None:
        items = [_Item("1", "a"), _Item("2", "b")]
        assert utils.find(lambda item: item.name == "b", items) is items[1]
