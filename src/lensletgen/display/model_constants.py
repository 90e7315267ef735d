#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" display generation constants

    Lengths are expressed in millimeters throughout lensletgen. Angles are
    converted to radians before any geometry is computed.

.. codeauthor: Michael J. Hayford
"""

# length unit conversions to mm
MM = 1.0
length_units = {
    'um': 1.0e-3*MM,
    'mm': MM,
    'cm': 10.0*MM,
    'm': 1000.0*MM,
    }

# angle units accepted for field of view inputs, when not given
default_angle_units = 'deg'

# angular step, in radians, for sampling the fov boundary on the sphere
angular_step = 0.01

# intersections at s < min_forward_dst are behind the ray origin; a point
#  lying on the surface projects onto itself
min_forward_dst = -1.0e-12

# ratio of singular values below which a point set is considered collinear
collinear_eps = 1.0e-10


def to_mm(value, units='mm'):
    """ convert `value` in `units` to mm """
    try:
        return value*length_units[units]
    except KeyError:
        raise ValueError(f"unknown length units: {units!r}") from None
