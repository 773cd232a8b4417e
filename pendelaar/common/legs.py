# -*- coding: utf-8 -*-
"""
Classes describing a single billed leg on a travel invoice.

A Leg is one priced movement between two stations with a single provider,
exactly as it is printed on the invoice. Legs are immutable, a filtered
list of legs is always a list of the same values that went in.

.. highlight:: python
.. code-block:: python

    leg = Leg(date(2025, 6, 24), Provider.NS, 'Hilversum', 'Duivendrecht', 3.0)

    leg.pair
    ('Hilversum', 'Duivendrecht')

"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Tuple


class Provider(Enum):
    """The fare providers that appear on an NS invoice"""

    NS = 'NS'
    GVB = 'GVB'

    @classmethod
    def from_tag(cls, tag: str) -> 'Provider':
        """
        Get the provider for the tag printed on an invoice line

        :param tag: the provider tag, ie 'NS' or 'gvb'
        :type tag: str
        :raises ValueError: if the tag is not a known provider
        :return: the matching provider
        :rtype: Provider

        """
        try:
            return cls(tag.strip().upper())
        except ValueError as e:
            raise ValueError(f"unknown provider tag {tag!r}") from e


@dataclass(frozen=True)
class Leg:
    """
    A single billed leg.

    :param date: the travel date
    :type date: date
    :param provider: the provider that billed the leg
    :type provider: Provider
    :param origin: the check-in station
    :type origin: str
    :param destination: the check-out station
    :type destination: str
    :param price: the fare, zero for supplements and settled lines
    :type price: float

    """

    date: date
    provider: Provider
    origin: str
    destination: str
    price: float

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(
                f"leg price must be non-negative, got {self.price}"
                )

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}({self.date.isoformat()}, '
            f'{self.provider.value}, {self.origin!r} -> {self.destination!r}, '
            f'{self.price:.2f})'
            )

    @property
    def is_priced(self) -> bool:
        """False for the zero fare lines that are not journeys"""
        return self.price != 0

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.origin, self.destination)

    def connects_to(self, other: 'Leg') -> bool:
        """
        Determine if the other leg departs where this leg arrives

        :param other: the following leg
        :type other: Leg
        :return: True if other.origin is this leg's destination
        :rtype: bool

        """
        return self.destination == other.origin

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'provider': self.provider.value,
            'origin': self.origin,
            'destination': self.destination,
            'price': self.price
            }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Leg':
        """
        Create a leg from a dictionary as returned by Leg.to_dict.
        The date may be given as a date or an ISO formatted string.

        :param data: the dictionary of leg fields
        :type data: Dict[str, Any]
        :return: a new leg
        :rtype: Leg

        """
        legdate = data['date']
        if isinstance(legdate, str):
            legdate = datetime.strptime(legdate, '%Y-%m-%d').date()
        provider = data['provider']
        if not isinstance(provider, Provider):
            provider = Provider.from_tag(provider)

        return cls(
            legdate,
            provider,
            data['origin'],
            data['destination'],
            float(data['price'])
            )

