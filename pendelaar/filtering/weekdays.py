"""
Limit legs to working days
"""
from datetime import date
from typing import Iterable, List

from pendelaar.common.legs import Leg


def is_workday(day: date) -> bool:
    """monday to friday"""
    return day.isoweekday() <= 5


def trip_workday_filter(legs: Iterable[Leg]) -> List[Leg]:
    """
    Keep the legs travelled on a working day, in the given order

    :param legs: the legs to filter
    :type legs: Iterable[Leg]
    :return: the legs from monday to friday
    :rtype: List[Leg]

    """
    return [leg for leg in legs if is_workday(leg.date)]
