"""
The home and work stations that define a commute.

Membership is the only operation on the station sets, names are compared
exactly as they are printed on the invoice.
"""
import ast
from configparser import ConfigParser
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable

from pendelaar.common.legs import Leg


class StationConfigError(Exception):
    "error for a configuration without usable station lists"
    pass


class Direction(Enum):
    """The direction of the chain that is being followed"""

    TO_WORK = 'to_work'
    TO_HOME = 'to_home'
    NONE = 'none'


@dataclass(frozen=True)
class StationSet:
    """
    The stations at the home end and at the work end of a commute.
    A station may be in both sets.

    :param home: the stations on the home side
    :type home: FrozenSet[str]
    :param work: the stations on the work side
    :type work: FrozenSet[str]

    """

    home: FrozenSet[str]
    work: FrozenSet[str]

    @classmethod
    def create(cls, home: Iterable[str], work: Iterable[str]) -> 'StationSet':
        """build a station set from any iterables of station names"""
        if isinstance(home, str) or isinstance(work, str):
            raise TypeError("home and work must be collections of station names")
        return cls(frozenset(home), frozenset(work))

    @classmethod
    def from_config(cls, config: ConfigParser) -> 'StationSet':
        """
        Load the station sets from the [stations] section of a config.
        The values are python list literals, ie

        .. code-block:: ini

            [stations]
            home = ['Hilversum']
            work = ['Amsterdam Centraal', 'Amsterdam Zuid']

        :param config: the loaded configuration
        :type config: ConfigParser
        :raises StationConfigError: if the section or a list is missing or
            is not a list of names
        :return: the configured station sets
        :rtype: StationSet

        """
        try:
            section = config['stations']
            home = ast.literal_eval(section['home'])
            work = ast.literal_eval(section['work'])
        except KeyError as e:
            raise StationConfigError(
                f"configuration is missing {e} in the [stations] section"
                ) from e
        except (ValueError, SyntaxError) as e:
            raise StationConfigError(
                "station lists must be python list literals"
                ) from e

        if not all(isinstance(x, (list, tuple, set)) for x in (home, work)):
            raise StationConfigError(
                "station lists must be python list literals"
                )
        return cls.create(map(str, home), map(str, work))

    def is_direct(self, leg: Leg) -> bool:
        """True if the leg on its own goes from home to work or back"""
        return (
            (leg.origin in self.home and leg.destination in self.work) or
            (leg.destination in self.home and leg.origin in self.work)
            )

    def anchor_direction(self, leg: Leg) -> Direction:
        """
        The direction of a chain started by this leg. Home stations are
        checked first, so a station in both sets starts a chain to work.

        :param leg: the leg that may start a chain
        :type leg: Leg
        :return: the direction, Direction.NONE if the leg cannot start one
        :rtype: Direction

        """
        if leg.origin in self.home:
            return Direction.TO_WORK
        if leg.origin in self.work:
            return Direction.TO_HOME
        return Direction.NONE

    def completes(self, direction: Direction, leg: Leg) -> bool:
        """True if the leg ends a chain travelling in the given direction"""
        if direction is Direction.TO_WORK:
            return leg.destination in self.work
        if direction is Direction.TO_HOME:
            return leg.destination in self.home
        return False
