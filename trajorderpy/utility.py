"""Misc. constants and exceptions for trajectory order parameter analysis."""

import numpy as np

# Reference axis for bond orientations
ZHAT = np.array([0., 0., 1.])

# Origin, used when a neighbouring atom has no recorded coordinates
ORIGIN = np.zeros(3)

# Marker identifying a frame header line
FRAME_MARKER = 't='

# Minimum number of whitespace separated fields in an atom line
MIN_RECORD_FIELDS = 7

# Width of one frame step in trajectory time units; the end of the time range
# is extended by this much
FRAME_TIME_TOLERANCE = 10.0

# Default cutoff (nm) for the distance between the neighbours of a central atom
MAX_BOND_DIST = 0.3


# Exceptions
class ConfigurationError(Exception):
    """Used for malformed run configuration; fatal."""
    pass


class RecordError(Exception):
    """Used for lines that can not be read as atom records."""
    pass


class InsufficientFields(RecordError):
    """Line has too few fields to be an atom record."""
    pass


class MalformedRecord(RecordError):
    """Atom record with a coordinate that could not be parsed."""
    pass
