# -*- coding: utf-8 -*-
"""
Tables of legs and subtotals per provider
"""
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd  # type: ignore

from pendelaar.common.legs import Leg
from pendelaar.filtering import StationSet, journeys
from pendelaar.resources.config import load_config

CONFIG = load_config()

FLOAT_FORMAT = CONFIG['output']['float_format']

COLUMNS = ['date', 'provider', 'origin', 'destination', 'price']


def legs_frame(legs: Iterable[Leg]) -> pd.DataFrame:
    """
    Put the legs in a dataframe, one row per leg

    :param legs: the legs
    :type legs: Iterable[Leg]
    :return: a dataframe with the columns date, provider,
        origin, destination and price
    :rtype: pd.DataFrame

    """
    return pd.DataFrame([leg.to_dict() for leg in legs], columns=COLUMNS)


def subtotals(legs: Iterable[Leg]) -> pd.DataFrame:
    """
    The number of legs and the price sum for each provider and in total.

    :param legs: the legs
    :type legs: Iterable[Leg]
    :return: a dataframe indexed by provider with the columns
        legs and price, the last row is the total
    :rtype: pd.DataFrame

    """
    df = legs_frame(legs)

    out = df.groupby('provider').agg(
        legs=('price', 'size'),
        price=('price', 'sum')
        )
    out.loc['total'] = [int(out['legs'].sum()), float(out['price'].sum())]
    out['legs'] = out['legs'].astype(int)
    return out


def count_journeys(legs: Iterable[Leg], stations: StationSet) -> int:
    """
    The number of journeys in filtered commute legs. Filtering keeps
    whole journeys, so the legs chain up again into the same journeys.

    :param legs: the commute legs
    :type legs: Iterable[Leg]
    :param stations: the home and work stations used to filter them
    :type stations: StationSet
    :return: the number of journeys
    :rtype: int

    """
    return sum(1 for _ in journeys(legs, stations))


def render_table(
        legs: Iterable[Leg],
        float_format: str = FLOAT_FORMAT,
        stations: Optional[StationSet] = None
    ) -> str:
    """
    The legs and the subtotals as text

    :param legs: the commute legs
    :type legs: Iterable[Leg]
    :param float_format: a format string for the prices, ie '{:.2f}'
    :type float_format: str, optional
    :param stations: if given, the number of journeys is added
    :type stations: Optional[StationSet], optional
    :return: the text table
    :rtype: str

    """
    leglist: List[Leg] = list(legs)
    if not leglist:
        return 'no commute legs found'

    formatter = float_format.format
    table = legs_frame(leglist).to_string(index=False, float_format=formatter)
    totals = subtotals(leglist).to_string(float_format=formatter)

    text = f'{table}\n\n{totals}'
    if stations is not None:
        text += f'\n\njourneys: {count_journeys(leglist, stations)}'
    return text


def write_csv(legs: Iterable[Leg], path: Union[str, Path]) -> None:
    """write the legs to a csv file"""
    legs_frame(legs).to_csv(path, index=False)
