"""IO classes and line parsers for GRO trajectory files"""

import collections

from trajorderpy import utility

AtomRecord = collections.namedtuple('AtomRecord', ['species', 'x', 'y', 'z'])


def is_frame_header(line):
    """Test if given line starts a new frame."""
    return utility.FRAME_MARKER in line


def parse_frame_time(line):
    """Extract the simulation time from a frame header line.

    Defaults to 0.0 if the time is missing or can not be parsed.
    """
    split_line = line.split(utility.FRAME_MARKER, 1)
    if len(split_line) < 2:
        return 0.0

    fields = split_line[1].split()
    if not fields:
        return 0.0

    try:
        return float(fields[0])
    except ValueError:
        return 0.0


def parse_atom_record(line):
    """Read species and coordinates from an atom line.

    The second field is the species (atom name) and the fourth to sixth
    fields are the x, y and z coordinates.
    """
    split_line = line.split()
    if len(split_line) < utility.MIN_RECORD_FIELDS:
        raise utility.InsufficientFields(
                'Insufficient data in line: {}'.format(line))

    coords = []
    for field in split_line[3:6]:
        try:
            coords.append(float(field))
        except ValueError:
            raise utility.MalformedRecord(
                    'Failed to parse coordinate {}'.format(field))

    return AtomRecord(split_line[1], *coords)


class GroTrajInpFile:
    """Plain text GRO trajectory input file.

    Iterating yields the lines of the file without trailing newlines. The file
    is rewound once exhausted so it can be looped over again.
    """

    def __init__(self, filename):
        self._filename = filename
        self._file = open(filename)

    def __iter__(self):
        return self

    def __next__(self):
        line = self._file.readline()
        if line == '':
            self._file.seek(0)
            raise StopIteration

        return line.rstrip('\r\n')

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    @property
    def filename(self):
        return self._filename

    def close(self):
        self._file.close()
