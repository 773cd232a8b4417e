"""

PENDELAAR
=========

Pendelaar is a package for reconstructing home-work commute journeys from
the fare lines of an NS (Nederlandse Spoorwegen) travel invoice.

The invoice lists every billed leg individually: one line per check-in and
check-out pair, with a date, the provider (NS for rail, GVB for Amsterdam
tram, bus and metro), the stations and the fare. It does not group those
legs into journeys.

For Example
-----------

A traveller living in Hilversum and working at Amsterdam Centraal who
changes trains at Duivendrecht is billed two legs in the morning and two
in the evening:

+------------+----------+--------------------+--------------------+-------+
| date       | provider | origin             | destination        | price |
+============+==========+====================+====================+=======+
| 24-06-2025 | NS       | Hilversum          | Duivendrecht       |  3.00 |
+------------+----------+--------------------+--------------------+-------+
| 24-06-2025 | NS       | Duivendrecht       | Amsterdam Centraal |  4.00 |
+------------+----------+--------------------+--------------------+-------+
| 24-06-2025 | NS       | Amsterdam Centraal | Duivendrecht       |  4.00 |
+------------+----------+--------------------+--------------------+-------+
| 24-06-2025 | NS       | Duivendrecht       | Hilversum          |  3.00 |
+------------+----------+--------------------+--------------------+-------+

Only the chain as a whole connects home to work. Pendelaar follows such
chains through the invoice in a single pass and keeps every leg of a chain
that starts at a home station and ends at a work station (or the other way
around) on the same day. Trips that go elsewhere, chains that break off,
and zero-fare lines are left out.

The filtered legs can then be limited to working days and summarised per
provider, which is what an employer needs for a travel expense claim.


:Author: Pendelaar developers

"""
from . import common
from . import filtering
from . import preprocessing
from . import reporting

from .filtering import trip_station_filter, trip_workday_filter
from . import running

__version__ = '0.1.0'
