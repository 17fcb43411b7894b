from __future__ import annotations

import pytest

from discordkit.flags import (
    ActivityFlags,
    BaseFlags,
    SystemChannelFlags,
    compose,
    fill_with_flags,
    flag_value,
    has_permission,
    resolve_composites,
)


class TestCompose:
    def test_empty_is_zero(self) -> None:
        assert compose() == 0

    def test_ors_every_bit(self) -> None:
        assert compose(1 << 0, 1 << 3, 1 << 32) == (1 | 8 | (1 << 32))

    def test_overlapping_bits_are_idempotent(self) -> None:
        assert compose(0b0110, 0b0011) == 0b0111


class TestHasPermission:
    def test_single_bit(self) -> None:
        assert has_permission(0b1010, 0b0010)
        assert not has_permission(0b1010, 0b0100)

    def test_partial_overlap_is_false(self) -> None:
        assert not has_permission(0b0010, 0b0011)

    def test_zero_bit_is_always_true(self) -> None:
        assert has_permission(0, 0)
        assert has_permission(0b1111, 0)


class TestResolveComposites:
    def test_nested_composites(self) -> None:
        resolved = resolve_composites(
            {"a": 1, "b": 2, "c": 4},
            {"ab": ("a", "b"), "abc": ("ab", "c")},
        )
        assert resolved == {"ab": 3, "abc": 7}

    def test_cycle_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_composites({"a": 1}, {"x": ("y",), "y": ("x",)})

    def test_unknown_member_raises(self) -> None:
        with pytest.raises(KeyError):
            resolve_composites({"a": 1}, {"x": ("a", "missing")})


@fill_with_flags(composites={"both": ("first", "second")})
class _Pair(BaseFlags):
    __slots__ = ()

    @flag_value
    def first(self):
        return 1 << 0

    @flag_value
    def second(self):
        return 1 << 1


class TestBaseFlags:
    def test_constants_are_exposed(self) -> None:
        assert _Pair.FIRST == 1
        assert _Pair.SECOND == 2
        assert _Pair.BOTH == 3
        assert _Pair.COMPOSITES == {"both": ("first", "second")}

    def test_keyword_construction(self) -> None:
        flags = _Pair(second=True)
        assert flags.value == 2
        assert not flags.first
        assert flags.second

    def test_unknown_keyword_raises(self) -> None:
        with pytest.raises(TypeError):
            _Pair(third=True)

    def test_non_int_value_raises(self) -> None:
        with pytest.raises(TypeError):
            _Pair("3")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            _Pair(True)

    def test_setting_non_bool_raises(self) -> None:
        flags = _Pair()
        with pytest.raises(TypeError):
            flags.first = 1  # type: ignore[assignment]

    def test_operators(self) -> None:
        first = _Pair(first=True)
        second = _Pair(second=True)
        assert (first | second).value == 3
        assert (first & second).value == 0
        assert (_Pair(3) ^ first) == second
        assert ~first == second

    def test_invert_stays_within_declared_bits(self) -> None:
        assert (~_Pair(0)).value == _Pair.ALL_FLAGS == 3

    def test_mixing_types_raises(self) -> None:
        with pytest.raises(TypeError):
            _Pair(1) | SystemChannelFlags(1)  # type: ignore[operator]

    def test_subset_and_superset(self) -> None:
        first = _Pair(first=True)
        both = _Pair(3)
        assert first <= both
        assert first < both
        assert both >= first
        assert both > first
        assert not both <= first
        assert both.is_superset(both)
        assert not both.is_strict_superset(both)

    def test_iteration_yields_pairs(self) -> None:
        assert dict(_Pair(first=True)) == {"first": True, "second": False}

    def test_equality_and_hash(self) -> None:
        assert _Pair(1) == _Pair(first=True)
        assert hash(_Pair(1)) == hash(_Pair(first=True))
        assert _Pair(1) != 1
        assert int(_Pair(2)) == 2

    def test_update_ignores_unknown_names(self) -> None:
        flags = _Pair()
        flags.update(first=True, unknown=True)
        assert flags.value == 1


class TestSystemChannelFlags:
    def test_bits(self) -> None:
        assert SystemChannelFlags.SUPPRESS_JOIN_NOTIFICATIONS == 1 << 0
        assert SystemChannelFlags.SUPPRESS_PREMIUM_SUBSCRIPTIONS == 1 << 1

    def test_decode(self) -> None:
        flags = SystemChannelFlags(3)
        assert flags.suppress_join_notifications
        assert flags.suppress_premium_subscriptions


class TestActivityFlags:
    def test_bits(self) -> None:
        flags = ActivityFlags(1 << 1 | 1 << 5)
        assert flags.join
        assert flags.play
        assert not flags.instance
