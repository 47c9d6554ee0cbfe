"""Functions for processing atomic position vectors

All angles are in radians.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def calc_dot(vector_a, vector_b):
    """Calculate dot product of two vectors"""
    return float(np.dot(vector_a, vector_b))


def calc_magnitude(vector):
    """Calculate Euclidean norm of given vector.

    Vectors with infinite or NaN components are treated as having zero
    magnitude.
    """
    vector = np.asarray(vector, dtype=float)
    if not np.all(np.isfinite(vector)):
        logger.warning('Invalid values: x=%s, y=%s, z=%s', *vector)
        return 0.0

    return float(np.linalg.norm(vector))


def normalize(vector):
    """Return unit vector in the direction of given vector.

    Zero vectors are returned unchanged.
    """
    vector = np.asarray(vector, dtype=float)
    magnitude = calc_magnitude(vector)
    if magnitude == 0:
        logger.warning('Zero magnitude vector encountered. Check your data.')
        return np.zeros(3)

    return vector / magnitude


def calc_angle(vector_1, vector_2):
    """Calculate angle between two vectors

    The cosine is clipped to [-1, 1] as rounding can push the dot product of
    unit vectors slightly outside.
    """
    cos_angle = calc_dot(normalize(vector_1), normalize(vector_2))
    cos_angle = np.clip(cos_angle, -1, 1)

    return float(np.arccos(cos_angle))


def calc_order_param(angle):
    """Second Legendre polynomial of the cosine of given angle"""
    return float(1.5 * np.cos(angle)**2 - 0.5)


def calc_dist(pos_i, pos_j):
    """Calculate distance between given two positions"""
    diff = np.asarray(pos_j, dtype=float) - np.asarray(pos_i, dtype=float)

    return float(np.sqrt(np.sum(diff**2)))


def calc_median(values):
    if len(values) == 0:
        return 0.0

    return float(np.median(values))
