"""Shared fixtures for testing trajorderpy"""

import os.path

import pytest

from trajorderpy import files
from trajorderpy import order_process

DATA_DIR = os.path.join(os.path.dirname(__file__), os.pardir, 'data')


def make_atom_line(atom, x, y, z, num=1, residue='1TTA'):
    """Atom line in GRO column layout, with velocities."""
    return '{:>8}{:>7}{:>5}{:8.3f}{:8.3f}{:8.3f}{:8.4f}{:8.4f}{:8.4f}'.format(
            residue, atom, num, x, y, z, 0, 0, 0)


def make_header_line(time):
    return 'Generated by trjconv : TTA in water t= {:10.5f} step= 0'.format(
            time)


@pytest.fixture
def chain_gro_filename():
    return os.path.join(DATA_DIR, 'chain.gro')


@pytest.fixture
def chain_gro_file(chain_gro_filename):
    traj_file = files.GroTrajInpFile(chain_gro_filename)
    yield traj_file
    traj_file.close()


@pytest.fixture
def cal_config():
    return order_process.Configuration(0.0, 10.0, 'CAL')
