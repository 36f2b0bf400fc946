"""Tests for the tick-driven work and rest clocks."""

from dataclasses import replace

import pytest

from pomotui.core.clock import RestClock, WorkClock, format_clock

# ---------------------------------------------------------------------------
# WorkClock
# ---------------------------------------------------------------------------


class TestWorkClockInitialState:
    """A fresh WorkClock is stopped at zero."""

    def test_initial_clock_is_stopped(self) -> None:
        assert WorkClock().running is False

    def test_initial_elapsed_is_zero(self) -> None:
        assert WorkClock().elapsed == 0.0

    def test_each_clock_gets_a_new_id(self) -> None:
        assert WorkClock().clock_id != WorkClock().clock_id


class TestWorkClockTick:
    """tick() adds one interval while running."""

    def test_running_clock_counts_up(self) -> None:
        clock = WorkClock().start()
        for _ in range(3):
            clock = clock.tick()
        assert clock.elapsed == 3.0

    def test_custom_interval(self) -> None:
        clock = WorkClock(interval=0.5).start().tick().tick()
        assert clock.elapsed == 1.0

    def test_stopped_clock_ignores_ticks(self) -> None:
        clock = WorkClock().start().tick().stop().tick()
        assert clock.elapsed == 1.0

    def test_tick_keeps_clock_id(self) -> None:
        clock = WorkClock().start()
        assert clock.tick().clock_id == clock.clock_id


class TestWorkClockReset:
    def test_reset_zeroes_elapsed(self) -> None:
        clock = WorkClock().start().tick().tick().stop().reset()
        assert clock.elapsed == 0.0
        assert clock.running is False

    def test_reset_does_not_stop(self) -> None:
        clock = WorkClock().start().tick().reset()
        assert clock.running is True


class TestWorkClockValidation:
    def test_zero_interval_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            WorkClock(interval=0)

    def test_negative_interval_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            WorkClock(interval=-1.0)

    def test_non_numeric_interval_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            WorkClock(interval="1")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# RestClock
# ---------------------------------------------------------------------------


class TestRestClockInitialState:
    def test_remaining_starts_at_total(self) -> None:
        assert RestClock(total=10.0).remaining == 10.0

    def test_initial_clock_is_stopped_and_not_expired(self) -> None:
        clock = RestClock(total=10.0)
        assert clock.running is False
        assert clock.expired is False


class TestRestClockTick:
    """tick() counts down and expires at zero."""

    def test_running_clock_counts_down(self) -> None:
        clock = RestClock(total=10.0).start().tick().tick()
        assert clock.remaining == 8.0
        assert clock.total == 10.0

    def test_stopped_clock_ignores_ticks(self) -> None:
        clock = RestClock(total=10.0).tick()
        assert clock.remaining == 10.0

    def test_last_tick_expires_and_stops(self) -> None:
        clock = RestClock(total=1.0).start().tick()
        assert clock.remaining == 0.0
        assert clock.expired is True
        assert clock.running is False

    def test_fractional_total_expires_without_going_negative(self) -> None:
        clock = RestClock(total=1.5).start().tick()
        assert clock.expired is False
        clock = clock.tick()
        assert clock.expired is True
        assert clock.remaining == 0.0

    def test_zero_total_expires_on_first_tick(self) -> None:
        clock = RestClock(total=0.0).start()
        assert clock.expired is False
        assert clock.tick().expired is True

    def test_expired_clock_does_not_restart(self) -> None:
        clock = RestClock(total=1.0).start().tick()
        assert clock.start().running is False
        assert clock.start().tick() == clock

    def test_remaining_is_derived_from_total_and_spent(self) -> None:
        clock = RestClock(total=10.0).start().tick().tick().tick()
        assert clock.spent == 3.0
        assert clock.remaining == 7.0
        assert clock.stop().remaining == 7.0

    def test_copy_keeps_countdown_progress(self) -> None:
        clock = RestClock(total=10.0).start().tick()
        assert replace(clock, running=False).remaining == 9.0


class TestRestClockValidation:
    def test_negative_total_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            RestClock(total=-1.0)

    def test_nan_total_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            RestClock(total=float("nan"))

    def test_boolean_total_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            RestClock(total=True)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# format_clock()
# ---------------------------------------------------------------------------


class TestFormatClock:
    def test_seven_minutes_thirty_four_seconds(self) -> None:
        assert format_clock(454) == "7:34"

    def test_five_seconds(self) -> None:
        assert format_clock(5) == "0:05"

    def test_truncates_by_default(self) -> None:
        assert format_clock(10.75) == "0:10"

    def test_round_up(self) -> None:
        assert format_clock(10.25, round_up=True) == "0:11"

    def test_over_an_hour_stays_in_minutes(self) -> None:
        assert format_clock(3725) == "62:05"
