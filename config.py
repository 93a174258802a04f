"""
Configuration for the constant-term solver.

Plain module constants; other modules import the values they need.
"""

import os

from core.radix import MIN_RADIX, MAX_RADIX

# ---------------------------------------------------------------
# DOCUMENT LAYOUT
# ---------------------------------------------------------------

THRESHOLD_SECTION = "keys"     # reserved top-level key, never an x-coordinate
THRESHOLD_FIELD = "k"          # number of points to interpolate through
BASE_FIELD = "base"
VALUE_FIELD = "value"

RADIX_RANGE = (MIN_RADIX, MAX_RADIX)


# ---------------------------------------------------------------
# PROCESS EXIT CODES
# ---------------------------------------------------------------

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

LOG_LEVEL = os.environ.get("LAGRANGE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
