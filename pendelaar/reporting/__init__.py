"""
The reporting subpackage puts the commute legs in a table with
subtotals per provider.
"""

from .summary import (count_journeys, legs_frame, render_table, subtotals,
                      write_csv)
