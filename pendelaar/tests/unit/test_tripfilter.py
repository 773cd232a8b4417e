# -*- coding: utf-8 -*-

from datetime import date

import pytest
from pendelaar.filtering.stationsets import StationSet
from pendelaar.filtering.tripfilter import (
    ChainState,
    Direction,
    journeys,
    step,
    trip_station_filter
    )  # noqa


@pytest.fixture
def stations(home, work):

    return StationSet.create(home, work)


def test_trip_station_filter_simple(make_leg):

    legs = [
        make_leg('Hilversum', 'Amsterdam Centraal'),  # match
        make_leg('Amsterdam Zuid', 'Hilversum'),  # match
        make_leg('Hilversum', 'Utrecht Centraal'),  # no match
        make_leg('Rotterdam', 'Hilversum')  # no match
        ]

    filtered = trip_station_filter(
        legs, ['Hilversum'], ['Amsterdam Centraal', 'Amsterdam Zuid']
        )

    assert filtered == legs[:2]


def test_trip_filter_multi_leg(multi_leg_day):

    filtered = trip_station_filter(
        multi_leg_day, ['Hilversum'], ['Amsterdam Centraal']
        )

    assert filtered == multi_leg_day[:4]


def test_empty_input(home, work):

    assert trip_station_filter([], home, work) == []


def test_accepts_iterators(multi_leg_day, home, work):

    filtered = trip_station_filter(iter(multi_leg_day), set(home), tuple(work))
    assert filtered == multi_leg_day[:4]


def test_long_chain(make_leg, home, work):

    stops = ['Hilversum', 'Hilversum Noord', 'Baarn', 'Amersfoort Centraal',
             'Utrecht Centraal', 'Duivendrecht', 'Amsterdam Centraal']
    legs = [make_leg(a, b) for a, b in zip(stops, stops[1:])]

    filtered = trip_station_filter(legs, home, work)
    assert filtered == legs
    assert all(a.connects_to(b) for a, b in zip(filtered, filtered[1:]))


def test_zero_fare_is_skipped(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Amsterdam Centraal', 0.0),
        make_leg('Amsterdam Centraal', 'Hilversum', 5.0)
        ]

    assert trip_station_filter(legs, home, work) == legs[1:]


@pytest.mark.parametrize('position', [1, 2])
def test_zero_fare_inside_chain(make_leg, multi_leg_day, home, position):

    legs = list(multi_leg_day[:2])
    legs.insert(position, make_leg('Rotterdam', 'Zaandam', 0.0))

    filtered = trip_station_filter(legs, home, ['Amsterdam Centraal'])
    assert filtered == multi_leg_day[:2]


def test_zero_fare_does_not_start_chain(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Duivendrecht', 0.0),
        make_leg('Duivendrecht', 'Amsterdam Centraal', 4.0)
        ]

    assert trip_station_filter(legs, home, work) == []


def test_broken_chain_reevaluates_leg(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Duivendrecht'),
        make_leg('Amsterdam Centraal', 'Weesp'),  # breaks, starts to home
        make_leg('Weesp', 'Hilversum')
        ]

    assert trip_station_filter(legs, home, work) == legs[1:]


def test_broken_chain_direct_match(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Duivendrecht'),
        make_leg('Hilversum', 'Amsterdam Zuid'),
        ]

    assert trip_station_filter(legs, home, work) == legs[1:]


def test_cross_date_reset(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Duivendrecht', day=date(2025, 6, 24)),
        make_leg('Duivendrecht', 'Amsterdam Centraal', day=date(2025, 6, 25))
        ]

    assert trip_station_filter(legs, home, work) == []


def test_unfinished_chain_dropped(make_leg, home, work):

    legs = [
        make_leg('Amsterdam Centraal', 'Hilversum'),
        make_leg('Hilversum', 'Duivendrecht'),
        make_leg('Duivendrecht', 'Diemen')
        ]

    assert trip_station_filter(legs, home, work) == legs[:1]


def test_chain_passing_home_keeps_going(make_leg, home, work):

    legs = [
        make_leg('Hilversum', 'Duivendrecht'),
        make_leg('Duivendrecht', 'Hilversum'),
        make_leg('Hilversum', 'Amsterdam Centraal')
        ]

    assert trip_station_filter(legs, home, work) == legs


def test_overlapping_station_sets(make_leg):

    legs = [
        make_leg('Weesp', 'Weesp'),
        make_leg('Weesp', 'Diemen'),
        make_leg('Diemen', 'Amsterdam Centraal')
        ]

    filtered = trip_station_filter(
        legs, ['Hilversum', 'Weesp'], ['Weesp', 'Amsterdam Centraal']
        )
    assert filtered == legs


def test_order_and_subsequence(make_leg, multi_leg_day, home, work):

    legs = [make_leg('Rotterdam', 'Zaandam')] + multi_leg_day
    filtered = trip_station_filter(legs, home, work)

    positions = [legs.index(leg) for leg in filtered]
    assert positions == sorted(positions)
    assert all(leg in legs and leg.is_priced for leg in filtered)


def test_refiltering_is_idempotent(multi_leg_day, make_leg, home, work):

    legs = multi_leg_day + [
        make_leg('Hilversum', 'Amsterdam Zuid'),
        make_leg('Amsterdam Zuid', 'Utrecht Centraal'),
        make_leg('Utrecht Centraal', 'Hilversum')
        ]

    once = trip_station_filter(legs, home, work)
    assert trip_station_filter(once, home, work) == once


def test_journeys(multi_leg_day, stations):

    found = list(journeys(multi_leg_day, stations))

    assert found == [tuple(multi_leg_day[:2]), tuple(multi_leg_day[2:4])]


def test_step_zero_fare(make_leg, stations):

    state = ChainState.start(
        Direction.TO_WORK, make_leg('Hilversum', 'Duivendrecht')
        )
    result = step(state, make_leg('Rotterdam', 'Zaandam', 0.0), stations)

    assert result.state == state
    assert result.emitted == ()
    assert result.consumed


def test_step_starts_chain(make_leg, stations, a_date):

    leg = make_leg('Amsterdam Zuid', 'Duivendrecht')
    result = step(ChainState.empty(), leg, stations)

    assert result.state.in_chain
    assert result.state.direction is Direction.TO_HOME
    assert result.state.anchor_date == a_date
    assert result.state.buffer == (leg,)
    assert result.consumed


def test_step_break_is_not_consumed(make_leg, stations):

    state = ChainState.start(
        Direction.TO_WORK, make_leg('Hilversum', 'Duivendrecht')
        )
    result = step(state, make_leg('Diemen', 'Weesp'), stations)

    assert not result.consumed
    assert result.state == ChainState.empty()
    assert result.emitted == ()


def test_step_completes_chain(make_leg, stations):

    first = make_leg('Hilversum', 'Duivendrecht')
    last = make_leg('Duivendrecht', 'Amsterdam Zuid')
    state = ChainState.start(Direction.TO_WORK, first)

    result = step(state, last, stations)

    assert result.emitted == (first, last)
    assert not result.state.in_chain
    assert result.state.direction is Direction.NONE


def test_chainstate_extend(make_leg):

    legs = [make_leg('Hilversum', 'Baarn'), make_leg('Baarn', 'Weesp')]
    state = ChainState.start(Direction.TO_WORK, legs[0]).extend(legs[1])

    assert state.length == 2
    assert state.last_leg == legs[1]
    assert state.buffer == tuple(legs)
    assert ChainState.empty().last_leg is None

