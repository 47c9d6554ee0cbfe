"""Per-frame orientational order parameters from GRO trajectories

A frame is only complete once the header of the next frame is seen, so each
frame's result is calculated when it is flushed from the buffer at that
point (or by an explicit end of stream flush).
"""

import collections
import logging

import numpy as np

from trajorderpy import files
from trajorderpy import utility
from trajorderpy import vector_process

logger = logging.getLogger(__name__)


Configuration = collections.namedtuple('Configuration', [
    'time_range_start', 'time_range_end', 'central_species', 'max_bond_dist',
    'abort_on_long_bond'])

# Bond length check is off unless a cutoff is given
Configuration.__new__.__defaults__ = (None, False)


FrameResult = collections.namedtuple('FrameResult', [
    'frame_index', 'frame_time', 'average', 'median', 'num_triplets',
    'mean_angle'])


def parse_time_range(text):
    """Parse time range given as two whitespace separated numbers."""
    fields = text.split()
    if len(fields) != 2:
        raise utility.ConfigurationError('Invalid time range format.')

    try:
        start, end = [float(field) for field in fields]
    except ValueError as e:
        raise utility.ConfigurationError(
                'Failed to parse float: {}'.format(e))

    if start > end:
        raise utility.ConfigurationError(
                'Start of time range {} is after end {}'.format(start, end))

    return start, end


def format_frame_result(result, median=False, angle=False):
    """Format result as a line of text; angles reported in degrees."""
    line = 'Frame {}: Average order parameter: {}'.format(
            result.frame_index, result.average)
    if median:
        line += ', Median order parameter: {}'.format(result.median)

    if angle and result.mean_angle is not None:
        line += ', Mean angle: {:.3f} deg'.format(
                np.degrees(result.mean_angle))

    return line


class FrameBuffer:
    """Atom positions of the frame being read, in file order.

    Keys are (species, line index) pairs. Neighbours are defined by position
    in the order list, not by molecule or atom numbers.
    """

    def __init__(self):
        self.order = []
        self.values = {}

    def __len__(self):
        return len(self.order)

    def add(self, key, position):
        self.values.setdefault(key, []).append(position)
        self.order.append(key)

    def first_position(self, key):
        """First recorded position for key; origin if there is none."""
        positions = self.values.get(key)
        if not positions:
            return utility.ORIGIN

        return np.asarray(positions[0], dtype=float)

    def clear(self):
        self.order.clear()
        self.values.clear()


class FrameOrderParamAnalyzer:
    """Calculate the order parameter of a central species frame by frame.

    For each central atom with neighbours on both sides in the frame, the
    bond vector runs from the preceding to the following atom and is compared
    with the z axis. Results are appended to results and passed to report, if
    given, as each frame is flushed.
    """

    def __init__(self, config, report=None):
        self._config = config
        self._report = report
        self._buffer = FrameBuffer()
        self._frame_count = 0
        self._frame_time = 0.0
        self._accumulating = False
        self._next_line_index = 0
        self.results = []

    @property
    def frame_count(self):
        return self._frame_count

    @property
    def accumulating(self):
        return self._accumulating

    @property
    def buffer(self):
        return self._buffer

    def process(self, lines, final_flush=True):
        """Run over all lines and return the frame results."""
        for line_index, line in enumerate(lines):
            self.on_line(line, line_index)

        if final_flush:
            self.finalize()

        return self.results

    def on_line(self, line, line_index=None):
        if line_index is None:
            line_index = self._next_line_index

        self._next_line_index = line_index + 1
        if files.is_frame_header(line):
            self._start_frame(line)
        elif self._accumulating:
            self._add_record(line, line_index)

    def finalize(self):
        """Flush the last frame, which has no following header."""
        result = self._flush()
        self._accumulating = False

        return result

    def _start_frame(self, line):
        self._flush()
        self._frame_time = files.parse_frame_time(line)
        start = self._config.time_range_start
        end = self._config.time_range_end + utility.FRAME_TIME_TOLERANCE
        self._accumulating = start <= self._frame_time < end
        self._frame_count += 1
        logger.debug('Frame %d at t=%s: %s', self._frame_count,
                     self._frame_time,
                     'reading' if self._accumulating else 'skipping')

    def _add_record(self, line, line_index):
        try:
            record = files.parse_atom_record(line)
        except utility.InsufficientFields:
            return
        except utility.MalformedRecord as e:
            logger.warning('Skipping line %d: %s', line_index, e)
            return

        key = (record.species, line_index)
        self._buffer.add(key, (record.x, record.y, record.z))

    def _flush(self):
        if len(self._buffer) == 0:
            return None

        result = self._calc_frame_result()
        self._buffer.clear()
        self.results.append(result)
        if self._report is not None:
            self._report(result)

        return result

    def _calc_frame_result(self):
        order = self._buffer.order
        order_params = []
        angles = []
        total_order_param = 0.0
        for i in range(1, len(order) - 1):
            species, line_index = order[i]
            if self._config.central_species not in species:
                continue

            pos_prev = self._buffer.first_position(order[i - 1])
            pos_next = self._buffer.first_position(order[i + 1])
            if not self._bond_dist_ok(pos_prev, pos_next, line_index):
                if self._config.abort_on_long_bond:
                    break

                continue

            bond = pos_next - pos_prev
            if vector_process.calc_magnitude(bond) == 0:
                logger.warning('Degenerate bond vector for %s on line %d of '
                               'frame %d', species, line_index,
                               self._frame_count)
                order_param = 0.0
            else:
                angle = vector_process.calc_angle(bond, utility.ZHAT)
                angles.append(angle)
                order_param = vector_process.calc_order_param(angle)

            total_order_param += order_param
            order_params.append(order_param)

        if order_params:
            average = total_order_param / len(order_params)
        else:
            logger.warning('No order parameters were calculated for frame %d. '
                           'This might indicate an issue with the input data '
                           'or selected atom %r.', self._frame_count,
                           self._config.central_species)
            average = 0.0

        mean_angle = float(np.mean(angles)) if angles else None

        return FrameResult(self._frame_count, self._frame_time, average,
                           vector_process.calc_median(order_params),
                           len(order_params), mean_angle)

    def _bond_dist_ok(self, pos_prev, pos_next, line_index):
        max_dist = self._config.max_bond_dist
        if max_dist is None:
            return True

        dist = vector_process.calc_dist(pos_prev, pos_next)
        if dist <= max_dist:
            return True

        logger.debug('Neighbours of atom on line %d are %.3f nm apart',
                     line_index, dist)

        return False
