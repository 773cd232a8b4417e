"""
The preprocessing subpackage turns an NS invoice into an ordered list of
legs and provides the argument parser for the pendelaar scripts.
"""

from .invoice import (InvoiceFormat, InvoiceParseError, extract_stations,
                      legs_from_lines, parse_date, parse_line, parse_lines,
                      parse_price, read_invoice_text)
from .parsing import TableArgParser
from . import parsing
