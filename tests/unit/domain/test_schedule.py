"""Unit tests for the clock-gated business rules."""

import pytest

from drills.domain.schedule import get_discount, is_online
from drills.domain.value_objects import Holiday, OpeningHours


class TestIsOnline:
    """Tests for is_online with a fixed clock."""

    @staticmethod
    @pytest.mark.parametrize("moment", ["2024-07-07 07:59", "2024-07-07 20:00", "2024-07-07 20:01", "2024-07-07 00:00"])
    def test_closed_outside_opening_hours(clock_at, moment):
        """Before 08:00 and from 20:00 on, the shop is offline."""
        assert is_online(clock_at(moment)) is False

    @staticmethod
    @pytest.mark.parametrize("moment", ["2024-07-07 08:00", "2024-07-07 12:30", "2024-07-07 19:59"])
    def test_open_within_opening_hours(clock_at, moment):
        """From 08:00 up to 19:59 the shop is online."""
        assert is_online(clock_at(moment)) is True

    @staticmethod
    def test_follows_clock_changes(clock_at):
        """Moving the clock changes the answer; the clock is read on every call."""
        clock = clock_at("2024-07-07 07:59")
        assert not is_online(clock)
        clock.set(clock.now().replace(hour=8, minute=0))
        assert is_online(clock)

    @staticmethod
    def test_custom_hours(clock_at):
        """A custom window replaces the default one."""
        hours = OpeningHours(open_hour=22, close_hour=24)
        assert is_online(clock_at("2024-07-07 23:59"), hours)
        assert not is_online(clock_at("2024-07-07 21:59"), hours)


class TestGetDiscount:
    """Tests for get_discount with a fixed clock."""

    @staticmethod
    @pytest.mark.parametrize("moment", ["2024-12-24 23:59", "2024-12-26 00:01", "2024-07-25 12:00"])
    def test_no_discount_on_other_days(clock_at, moment):
        """Any day but Christmas gets no discount."""
        assert get_discount(clock_at(moment)) == 0

    @staticmethod
    @pytest.mark.parametrize("moment", ["2024-12-25 00:00", "2024-12-25 00:01", "2024-12-25 23:59"])
    def test_christmas_discount(clock_at, moment):
        """The whole of Christmas day gets 20% off."""
        assert get_discount(clock_at(moment)) == 0.2

    @staticmethod
    def test_custom_holiday(clock_at):
        """Any holiday can be supplied."""
        new_year = Holiday(month=1, day=1, discount=0.1)
        assert get_discount(clock_at("2025-01-01 09:00"), new_year) == 0.1
        assert get_discount(clock_at("2024-12-25 09:00"), new_year) == 0
