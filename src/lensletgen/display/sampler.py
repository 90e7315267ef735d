#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2020 Michael J. Hayford
""" Sampling of the field of view boundary on a sphere

    The field of view is an angular rectangle on a sphere centered at the
    origin. Its edges are sampled at a fixed angular step; the samples are
    projected onto the eyebox plane to bound the lattice tiles that are
    needed to cover the field of view.

.. codeauthor: Michael J. Hayford
"""
import math

import numpy as np

from lensletgen.display import model_constants as mc
from lensletgen.display.displayerror import DegenerateWindowError


def sphere_point(radius, theta, phi):
    """ point on a sphere of `radius` centered at the origin.

    theta is the elevation out of the xz plane, toward +y; phi is the
    azimuth about the y axis, measured from +z toward +x:

        radius*(cos(theta)*sin(phi), sin(theta), cos(theta)*cos(phi))
    """
    return radius*np.array([math.cos(theta)*math.sin(phi),
                            math.sin(theta),
                            math.cos(theta)*math.cos(phi)])


def angle_samples(ang_min, ang_max, step=mc.angular_step):
    """ samples from ang_min to ang_max at `step`, endpoints included """
    samples = np.arange(ang_min, ang_max, step)
    return np.append(samples, ang_max)


def sample_boundary(radius, theta_min, theta_max, phi_min, phi_max,
                    step=mc.angular_step):
    """ Sample the edges of the spherical rectangle of the theta, phi ranges.

    The theta range spans the horizontal (x) extent and the phi range the
    vertical (y) extent of the field of view, i.e. theta drives the azimuth
    argument of :func:`sphere_point` and phi its elevation argument.

    Returns:
        (N, 3) array of boundary points

    Raises:
        :exc:`~.DegenerateWindowError` if either range has zero extent
    """
    if theta_max == theta_min or phi_max == phi_min:
        raise DegenerateWindowError((theta_min, theta_max),
                                    (phi_min, phi_max))
    theta_min, theta_max = sorted((theta_min, theta_max))
    phi_min, phi_max = sorted((phi_min, phi_max))

    thetas = angle_samples(theta_min, theta_max, step)
    phis = angle_samples(phi_min, phi_max, step)
    theta_edges = [sphere_point(radius, phi, theta)
                   for phi in (phi_min, phi_max) for theta in thetas]
    phi_edges = [sphere_point(radius, phi, theta)
                 for theta in (theta_min, theta_max) for phi in phis]
    return np.array(theta_edges + phi_edges)


def fov_half_angles(eye_relief, radius, fov_theta, fov_phi):
    """ angular half extents, seen from the sphere center, of a fov.

    A full field of view angle seen from the eyebox center, at `eye_relief`
    from the display, subtends a half width of tan(fov/2)*eye_relief on the
    display; seen from the sphere center that half width subtends
    atan(half width/radius).
    """
    h_theta = math.tan(fov_theta/2)*eye_relief
    h_phi = math.tan(fov_phi/2)*eye_relief
    return math.atan(h_theta/radius), math.atan(h_phi/radius)


def sample_fov_boundary(eye_relief, radius, fov_theta, fov_phi,
                        step=mc.angular_step):
    """ sample the boundary of a total fov, in radians, on the sphere """
    n_theta, n_phi = fov_half_angles(eye_relief, radius, fov_theta, fov_phi)
    return sample_boundary(radius, -n_theta, n_theta, -n_phi, n_phi, step)
