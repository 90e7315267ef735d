#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Exceptions for invalid display generation configurations

    These signal caller misuse or an incompatible geometry configuration.
    A single point or polygon failing to project onto a surface is not an
    error; it is reported as a None result.

.. codeauthor: Michael J. Hayford
"""


class DisplayGenerationError(Exception):
    """ Base exception for display generation """


class DegenerateWindowError(DisplayGenerationError):
    """ Exception raised when an angular sampling window has zero extent """
    def __init__(self, theta_rng, phi_rng):
        self.theta_rng = theta_rng
        self.phi_rng = phi_rng
        super().__init__(f"angular window has zero extent: "
                         f"theta={theta_rng}, phi={phi_rng}")


class DegeneratePointSetError(DisplayGenerationError):
    """ Exception raised when no plane can be fit to a point set """
    def __init__(self, num_pts, reason):
        self.num_pts = num_pts
        super().__init__(f"cannot fit a plane to {num_pts} points: {reason}")


class EmptyBoundsError(DisplayGenerationError):
    """ Exception raised when no boundary point projects onto the eyebox """
    def __init__(self, eyebox, direction):
        self.eyebox = eyebox
        self.direction = direction
        super().__init__(f"no fov boundary points project onto {eyebox!r} "
                         f"along {direction}")
