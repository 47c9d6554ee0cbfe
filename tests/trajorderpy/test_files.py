"""Tests for trajorderpy.files"""

import pytest

from trajorderpy import files
from trajorderpy import utility

from conftest import make_atom_line


@pytest.mark.parametrize('line, is_header', [
    ('Generated by trjconv : TTA in water t=   0.00000 step= 0', True),
    ('t=5', True),
    ('    5', False),
    (make_atom_line('CAL', 0.1, 0.2, 0.3), False)])
def test_is_frame_header(line, is_header):
    assert files.is_frame_header(line) == is_header


@pytest.mark.parametrize('line, time', [
    ('Generated by trjconv : TTA t=  10.00000 step= 5000', 10.0),
    ('t=250.5', 250.5),
    ('Protein t= 1e3', 1000.0),
    ('Broken t= abc step= 1', 0.0),
    ('Empty t=   ', 0.0),
    ('No marker here', 0.0)])
def test_parse_frame_time(line, time):
    assert files.parse_frame_time(line) == time


def test_parse_atom_record():
    record = files.parse_atom_record(make_atom_line('CAL', 0.1, -0.2, 1.5))
    assert record == files.AtomRecord('CAL', 0.1, -0.2, 1.5)


def test_parse_atom_record_insufficient_fields():
    with pytest.raises(utility.InsufficientFields):
        files.parse_atom_record('   2.00000   2.00000   2.00000')


def test_parse_atom_record_malformed_coordinate():
    line = '    1TTA    CAL    2   0.000   x.xxx   0.100  0.0  0.0  0.0'
    with pytest.raises(utility.MalformedRecord):
        files.parse_atom_record(line)


def test_record_errors_share_base():
    assert issubclass(utility.InsufficientFields, utility.RecordError)
    assert issubclass(utility.MalformedRecord, utility.RecordError)


def test_iterate_gro_traj_inp_file(chain_gro_file):
    lines = list(chain_gro_file)
    assert len(lines) == 24
    assert lines[0].startswith('Generated by trjconv')
    assert not lines[-1].endswith('\n')


def test_loop_over_gro_traj_inp_file_twice(chain_gro_file):
    first = list(chain_gro_file)
    second = list(chain_gro_file)
    assert first == second


def test_gro_traj_inp_file_missing():
    with pytest.raises(OSError):
        files.GroTrajInpFile('no/such/file.gro')
