import configparser
import json
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pendelaar.common.legs import Provider

HERE = Path(__file__).parent
RESOURCES = HERE.parent


def load_config(
        user_config: Optional[Union[str, Path]] = None
    ) -> configparser.ConfigParser:
    """
    Load the packaged config.ini, and the user config file on top of it
    if one is given

    :param user_config: path to an ini file, defaults to None
    :type user_config: Optional[Union[str, Path]], optional
    :raises FileNotFoundError: if the user config file does not exist
    :return: the configuration
    :rtype: configparser.ConfigParser

    """

    config = configparser.ConfigParser()
    ini_file = HERE / 'config.ini'
    config.read(ini_file, encoding='utf8')

    if user_config is not None:
        user_config = Path(user_config)
        if not user_config.is_file():
            raise FileNotFoundError(
                f"config file {user_config} does not exist"
                )
        config.read(user_config, encoding='utf8')

    return config


def load_known_stations() -> Dict[Provider, Tuple[str, ...]]:
    """load the station names that are recognised for each provider"""

    fp = RESOURCES / 'stations.json'
    with open(fp, encoding='utf8') as f:
        stations = json.load(f)

    return {Provider.from_tag(k): tuple(v) for k, v in stations.items()}
