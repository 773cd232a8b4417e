# -*- coding: utf-8 -*-
"""
Reconstruct commute journeys from the legs on an invoice.

The invoice bills every leg separately, so a journey with transfers shows
up as a run of legs where each leg departs from the station the previous
one arrived at. The filter follows these runs (chains) through the legs in
a single pass:

- a leg that goes directly between a home and a work station is kept;
- a leg that departs from a home or a work station opens a chain;
- while a chain is open, a leg on the same day that departs where the
  previous leg arrived extends it;
- a chain that reaches the opposite end is kept as a whole;
- a chain that is broken (another day, or a gap between stations) is
  thrown away and the breaking leg is looked at again as a possible start.

Legs with a zero fare are skipped entirely. Chains that are still open at
the end of the invoice are dropped.

The input legs must be ordered the way the invoice orders them: by date,
and within a day in the order they were travelled. This is not checked.

.. highlight:: python
.. code-block:: python

    commute = trip_station_filter(
        legs, home=['Hilversum'], work=['Amsterdam Centraal']
        )

"""

import logging
from datetime import date
from typing import (Iterable, Iterator, List, NamedTuple,
                    Optional, Tuple)

from pendelaar.common.legs import Leg
from pendelaar.filtering.stationsets import Direction, StationSet

log = logging.getLogger(__name__)

__all__ = [
    'ChainState',
    'Direction',
    'StepResult',
    'journeys',
    'step',
    'trip_station_filter'
    ]


class _Link(NamedTuple):
    leg: Leg
    previous: Optional['_Link']


class ChainState(NamedTuple):
    """
    The state of the filter between two legs.

    The buffered legs are held as a linked list from the last leg back to
    the first so that extending a chain does not copy it.

    :param direction: the direction of the open chain
    :type direction: Direction
    :param anchor_date: the date of the leg that opened the chain
    :type anchor_date: Optional[date]
    :param last: the last buffered leg
    :type last: Optional[_Link]
    :param length: the number of buffered legs
    :type length: int

    """

    direction: Direction
    anchor_date: Optional[date]
    last: Optional[_Link]
    length: int

    @classmethod
    def empty(cls) -> 'ChainState':
        return cls(Direction.NONE, None, None, 0)

    @classmethod
    def start(cls, direction: Direction, leg: Leg) -> 'ChainState':
        return cls(direction, leg.date, _Link(leg, None), 1)

    @property
    def in_chain(self) -> bool:
        return self.last is not None

    @property
    def last_leg(self) -> Optional[Leg]:
        if self.last is None:
            return None
        return self.last.leg

    @property
    def buffer(self) -> Tuple[Leg, ...]:
        """the buffered legs in travel order"""
        out: List[Leg] = []
        link = self.last
        while link is not None:
            out.append(link.leg)
            link = link.previous
        out.reverse()
        return tuple(out)

    def extend(self, leg: Leg) -> 'ChainState':
        return self._replace(last=_Link(leg, self.last), length=self.length + 1)

    def continues_with(self, leg: Leg) -> bool:
        """True if the leg is on the anchor date and departs where the
        chain arrived"""
        if self.last is None:
            return False
        return leg.date == self.anchor_date and self.last.leg.connects_to(leg)


class StepResult(NamedTuple):
    """
    The outcome of feeding one leg to the filter.

    :param state: the state to use for the next leg
    :type state: ChainState
    :param emitted: the legs of a journey completed by this leg, in order
    :type emitted: Tuple[Leg, ...]
    :param consumed: False if the leg broke the chain and must be fed
        again with the returned state
    :type consumed: bool

    """

    state: ChainState
    emitted: Tuple[Leg, ...]
    consumed: bool


def _step_outside_chain(leg: Leg, stations: StationSet) -> StepResult:

    if stations.is_direct(leg):
        return StepResult(ChainState.empty(), (leg,), True)

    direction = stations.anchor_direction(leg)
    if direction is Direction.NONE:
        return StepResult(ChainState.empty(), (), True)

    return StepResult(ChainState.start(direction, leg), (), True)


def _step_inside_chain(
        state: ChainState,
        leg: Leg,
        stations: StationSet
    ) -> StepResult:

    if not state.continues_with(leg):
        return StepResult(ChainState.empty(), (), False)

    extended = state.extend(leg)
    if stations.completes(state.direction, leg):
        return StepResult(ChainState.empty(), extended.buffer, True)

    return StepResult(extended, (), True)


def step(state: ChainState, leg: Leg, stations: StationSet) -> StepResult:
    """
    Feed a single leg to the filter.

    :param state: the current state of the filter
    :type state: ChainState
    :param leg: the next leg on the invoice
    :type leg: Leg
    :param stations: the home and work stations
    :type stations: StationSet
    :return: the new state, the legs of any completed journey and whether
        the leg was consumed
    :rtype: StepResult

    """
    if not leg.is_priced:
        return StepResult(state, (), True)

    if not state.in_chain:
        return _step_outside_chain(leg, stations)

    return _step_inside_chain(state, leg, stations)


def journeys(
        legs: Iterable[Leg],
        stations: StationSet
    ) -> Iterator[Tuple[Leg, ...]]:
    """
    Generate the qualifying journeys in the legs, one tuple of legs per
    direct match or completed chain, in invoice order.

    :param legs: the ordered invoice legs
    :type legs: Iterable[Leg]
    :param stations: the home and work stations
    :type stations: StationSet
    :yield: the legs of each journey
    :rtype: Iterator[Tuple[Leg, ...]]

    """
    state = ChainState.empty()
    for leg in legs:
        consumed = False
        while not consumed:
            previous = state
            state, emitted, consumed = step(state, leg, stations)
            if not consumed:
                log.debug(
                    "discarding chain of %d legs from %s at %r",
                    previous.length, previous.anchor_date, leg
                    )
            if emitted:
                yield emitted

    if state.in_chain:
        log.debug(
            "dropping unfinished chain of %d legs from %s",
            state.length, state.anchor_date
            )


def trip_station_filter(
        legs: Iterable[Leg],
        home: Iterable[str],
        work: Iterable[str]
    ) -> List[Leg]:
    """
    Filter the invoice legs down to the legs of home-work journeys.

    :param legs: the invoice legs, ordered by date and travel order
    :type legs: Iterable[Leg]
    :param home: the home stations
    :type home: Iterable[str]
    :param work: the work stations
    :type work: Iterable[str]
    :return: the legs of all qualifying journeys in their original order
    :rtype: List[Leg]

    """
    stations = StationSet.create(home, work)

    result: List[Leg] = []
    njourneys = 0
    for journey in journeys(legs, stations):
        result.extend(journey)
        njourneys += 1

    log.info("found %d commute journeys with %d legs", njourneys, len(result))
    return result
