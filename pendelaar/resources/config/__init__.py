from .config import load_config, load_known_stations
