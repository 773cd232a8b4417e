"""
The resources subpackage contains the data that pendelaar needs to
function.

The default configuration is stored here, as well as the station names
that can be recognised on invoice lines for each provider.

"""
from . import config
from .config import load_config, load_known_stations
