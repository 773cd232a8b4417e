"""
The filtering subpackage reconstructs commute journeys from an ordered
list of invoice legs and limits them to working days.
"""

from .stationsets import Direction, StationSet, StationConfigError
from .tripfilter import (ChainState, StepResult, journeys,
                         step, trip_station_filter)
from .weekdays import is_workday, trip_workday_filter
