#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" miscellaneous functions for working with numpy vectors and floats

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from numpy.linalg import norm
import transforms3d as t3d


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def frozen_array(a, shape=None):
    """ return a read-only float64 copy of array-like `a`

    If `shape` is given, the array is reshaped to it, e.g. (3,) or (-1, 3).
    """
    arr = np.array(a, dtype=np.float64)
    if shape is not None:
        arr = arr.reshape(shape)
    arr.flags.writeable = False
    return arr


def euler2opt(e):
    """ convert right-handed euler angles to optical design convention,
        i.e. alpha and beta are left-handed
    """
    return np.array([-e[0], -e[1], e[2]])


def euler2rot3d(euler):
    """ convert euler angle vector, in degrees, to a rotation matrix. """
    rot_mat = t3d.euler.euler2mat(*np.deg2rad(euler2opt(euler)))
    return rot_mat


def rot_v1_into_v2(v1, v2):
    """ return the rotation matrix that takes unit vector v1 into v2.

    The rotation is about the axis v1 x v2, computed with transforms3d's
    axis-angle conversion. Antiparallel inputs rotate by pi about any axis
    perpendicular to v1.
    """
    v1 = normalize(np.asarray(v1, dtype=np.float64))
    v2 = normalize(np.asarray(v2, dtype=np.float64))
    axis = np.cross(v1, v2)
    s = norm(axis)
    c = np.dot(v1, v2)
    if s < 1e-12:
        if c > 0.:
            return np.identity(3)
        # pick any axis perpendicular to v1
        trial = np.array([1., 0., 0.]) if abs(v1[0]) < 0.9 else \
            np.array([0., 1., 0.])
        axis = np.cross(v1, trial)
    return t3d.axangles.axangle2mat(axis, np.arctan2(s, c))
