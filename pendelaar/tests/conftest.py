# place for fixtures: ie setup for tests

from datetime import date
from pathlib import Path

import pytest
from pendelaar.common.legs import Leg, Provider


HERE = Path(__file__).parent

@pytest.fixture
def a_date():

    return date(2025, 6, 24) # a tuesday


@pytest.fixture
def make_leg(a_date):

    def _make(origin, destination, price=5.0, day=None, provider=Provider.NS):
        return Leg(day or a_date, provider, origin, destination, price)

    return _make


@pytest.fixture
def home():

    return ['Hilversum']


@pytest.fixture
def work():

    return ['Amsterdam Centraal', 'Amsterdam Zuid']


@pytest.fixture
def multi_leg_day(make_leg):

    return [
        make_leg('Hilversum', 'Duivendrecht', 3.0),
        make_leg('Duivendrecht', 'Amsterdam Centraal', 4.0),
        make_leg('Amsterdam Centraal', 'Duivendrecht', 4.0),
        make_leg('Duivendrecht', 'Hilversum', 3.0),
        make_leg('Utrecht Centraal', 'Rotterdam', 10.0),
        ]


@pytest.fixture
def invoice_path():

    return HERE / 'functional' / 'invoice_june.txt'
