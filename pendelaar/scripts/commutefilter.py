# -*- coding: utf-8 -*-
"""
Filter an NS invoice down to the legs travelled between home and work.

The home and work stations are read from the [stations] section of the
config file:

.. code-block:: ini

    [stations]
    home = ['Hilversum']
    work = ['Amsterdam Centraal', 'Amsterdam Zuid']

Usage:

.. code-block:: text

    pendelaar -i invoice_2025_06.pdf -c mystations.ini -o commute.csv

"""
import logging
import sys
from typing import List, Optional, Sequence

from pendelaar.common.legs import Leg
from pendelaar.filtering import (StationConfigError, StationSet,
                                 trip_station_filter, trip_workday_filter)
from pendelaar.preprocessing import (InvoiceFormat, InvoiceParseError,
                                     TableArgParser, legs_from_lines,
                                     read_invoice_text)
from pendelaar.reporting import render_table, write_csv
from pendelaar.resources.config import load_config
from pendelaar.running import banner, setup_logging

log = logging.getLogger(__name__)


def commute_legs(
        legs: Sequence[Leg],
        stations: StationSet,
        workdays_only: bool = True
    ) -> List[Leg]:
    """
    Run the invoice legs through the trip filter and, if asked, the
    working day filter

    :param legs: the invoice legs in document order
    :type legs: Sequence[Leg]
    :param stations: the home and work stations
    :type stations: StationSet
    :param workdays_only: drop weekend legs, defaults to True
    :type workdays_only: bool, optional
    :return: the commute legs
    :rtype: List[Leg]

    """
    commute = trip_station_filter(legs, stations.home, stations.work)
    if workdays_only:
        commute = trip_workday_filter(commute)
        log.info("%d commute legs on working days", len(commute))
    return commute


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main function to read an invoice, filter the commute legs and print
    them with subtotals per provider
    """
    setup_logging()

    parser = TableArgParser(
        'input', 'config', 'output', 'workdays',
        description=__doc__.strip().splitlines()[0]
        )
    args = parser.parse(argv)

    try:
        config = load_config(args['config'])
        stations = StationSet.from_config(config)
        lines = read_invoice_text(args['input'])
        legs = legs_from_lines(
            lines, invoice_format=InvoiceFormat.from_config(config)
            )
    except (FileNotFoundError, ValueError,
            StationConfigError, InvoiceParseError) as e:
        log.critical(str(e))
        return 1

    workdays = args['workdays']
    if workdays is None:
        workdays_only = config.getboolean('output', 'workdays_only')
    else:
        workdays_only = bool(workdays)

    commute = commute_legs(legs, stations, workdays_only)

    banner('commute legs')
    print(render_table(
        commute,
        float_format=config['output']['float_format'],
        stations=stations
        ))

    if args['output'] is not None:
        write_csv(commute, args['output'])
        log.info("wrote %d legs to %s", len(commute), args['output'])

    return 0


if __name__ == "__main__":
    sys.exit(main())
