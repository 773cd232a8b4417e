"""
The common subpackage groups classes and functions that are used throughout
the pendelaar package
"""

from .legs import Leg, Provider
from . import legs
