"""Tests for ball_clock.domain.clock: transition, dump rule, invariants."""

from __future__ import annotations

import json

import pytest

from ball_clock.config.constants import (
    FIVE_MINUTE_CAPACITY,
    HOUR_CAPACITY,
    MINUTE_CAPACITY,
)
from ball_clock.domain.clock import BallClock, ClockSnapshot, dump
from ball_clock.domain.errors import OutOfRangeInput
from ball_clock.domain.track import Track

# Reference output for 30 balls after 325 minutes.
SNAPSHOT_30_325 = {
    "Main": [11, 5, 26, 18, 2, 30, 19, 8, 24, 10, 29, 20, 16, 21, 28, 1, 23, 14, 27, 9],
    "Min": [],
    "FiveMin": [22, 13, 25, 3, 7],
    "Hour": [6, 12, 17, 4, 15],
}


class TestBallClockCreate:
    def test_initial_state(self) -> None:
        clock = BallClock(30)
        snap = clock.snapshot()
        assert snap.main == tuple(range(1, 31))
        assert snap.minute == snap.five_minute == snap.hour == ()
        assert snap.minutes_elapsed == 0

    def test_initial_state_counts_as_initial_order(self) -> None:
        assert BallClock(27).is_initial_order()

    @pytest.mark.parametrize("ball_count", [26, 128])
    def test_rejects_out_of_range_ball_count(self, ball_count: int) -> None:
        with pytest.raises(OutOfRangeInput):
            BallClock(ball_count)


class TestDumpRule:
    def test_overflow_goes_to_main_and_carry_to_destination(self) -> None:
        main = Track("Main", [100])
        source = Track("Min", [1, 2, 3, 4, 5])
        destination = Track("FiveMin", [9])
        carry = dump(source, destination, main)
        assert carry == 5
        assert main.to_list() == [100, 4, 3, 2, 1]
        assert destination.to_list() == [9, 5]
        assert len(source) == 0

    def test_dump_into_main_appends_carry_last(self) -> None:
        main = Track("Main", [50])
        hour = Track("Hour", range(1, 13))
        dump(hour, main, main)
        assert main.to_list() == [50, *range(11, 0, -1), 12]

    def test_first_minute_dump(self) -> None:
        clock = BallClock(30)
        for _ in range(MINUTE_CAPACITY - 1):
            clock.advance_one_minute()
        assert clock.minute.to_list() == [1, 2, 3, 4]
        clock.advance_one_minute()
        # The fifth ball carries on; the other four return in reverse order.
        assert clock.five_minute.to_list() == [5]
        assert clock.main.to_list() == [*range(6, 31), 4, 3, 2, 1]
        assert len(clock.minute) == 0

    def test_cascade_reaches_hour_in_one_minute(self) -> None:
        clock = BallClock(30)
        clock.advance(59)
        assert len(clock.five_minute) == FIVE_MINUTE_CAPACITY - 1
        assert len(clock.hour) == 0
        clock.advance_one_minute()
        assert len(clock.minute) == 0
        assert len(clock.five_minute) == 0
        assert clock.hour.to_list() == [6]

    def test_half_day_empties_every_track_but_main(self) -> None:
        clock = BallClock(27)
        clock.advance(720)
        snap = clock.snapshot()
        assert snap.minute == snap.five_minute == snap.hour == ()
        assert snap.main == (
            3, 26, 13, 2, 21, 16, 8, 14, 6, 18, 5, 12, 10, 11, 9, 4, 23, 19, 25, 1, 27, 22,
            17, 7, 15, 24, 20,
        )


class TestInvariants:
    @pytest.mark.parametrize("ball_count", [27, 30, 45, 64, 127])
    def test_conservation_and_capacity_every_minute(self, ball_count: int) -> None:
        clock = BallClock(ball_count)
        expected = list(range(1, ball_count + 1))
        for _ in range(1_500):
            clock.advance_one_minute()
            assert sorted(clock.snapshot().all_balls()) == expected
            assert len(clock.minute) < MINUTE_CAPACITY
            assert len(clock.five_minute) < FIVE_MINUTE_CAPACITY
            assert len(clock.hour) < HOUR_CAPACITY

    def test_determinism(self) -> None:
        first = BallClock(41)
        second = BallClock(41)
        first.advance(5_000)
        second.advance(5_000)
        assert first.snapshot().to_json() == second.snapshot().to_json()

    def test_no_return_to_initial_order_before_ball_count_minutes(self) -> None:
        clock = BallClock(30)
        for _ in range(30):
            clock.advance_one_minute()
            assert not clock.is_initial_order()

    def test_advance_zero_is_noop(self) -> None:
        clock = BallClock(30)
        clock.advance(0)
        assert clock.snapshot() == BallClock(30).snapshot()

    def test_advance_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="minutes"):
            BallClock(30).advance(-1)


class TestSnapshot:
    def test_known_point_in_time_state(self) -> None:
        clock = BallClock(30)
        clock.advance(325)
        assert clock.snapshot().to_dict() == SNAPSHOT_30_325

    def test_json_field_order_and_empty_lists(self) -> None:
        clock = BallClock(30)
        clock.advance(60)
        assert clock.snapshot().to_json() == (
            '{"Main":[7,8,18,19,11,12,22,23,24,16,26,27,28,29,14,4,3,2,1,21,17,13,9,30,25,'
            '20,15,10,5],"Min":[],"FiveMin":[],"Hour":[6]}'
        )

    def test_snapshot_is_detached_from_clock(self) -> None:
        clock = BallClock(30)
        snap = clock.snapshot()
        clock.advance(10)
        assert snap.main == tuple(range(1, 31))
        assert snap.minutes_elapsed == 0

    def test_to_dict_round_trips_through_json(self) -> None:
        snap = ClockSnapshot(
            minutes_elapsed=3, main=(4, 5), minute=(1, 2, 3), five_minute=(), hour=()
        )
        assert json.loads(snap.to_json()) == snap.to_dict()
