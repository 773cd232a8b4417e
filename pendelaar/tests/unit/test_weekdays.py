from datetime import date, timedelta

import pytest
from pendelaar.filtering.weekdays import is_workday, trip_workday_filter


@pytest.mark.parametrize('day,expected',
    [
        (date(2025, 6, 23), True),
        (date(2025, 6, 27), True),
        (date(2025, 6, 28), False),
        (date(2025, 6, 29), False),
        ]
    )
def test_is_workday(day, expected):

    assert is_workday(day) is expected


def test_trip_workday_filter(make_leg):

    monday = date(2025, 6, 23)
    legs = [
        make_leg('Hilversum', 'Amsterdam Centraal', day=monday + timedelta(days=i))
        for i in range(7)
        ]

    assert trip_workday_filter(legs) == legs[:5]
    assert trip_workday_filter([]) == []
