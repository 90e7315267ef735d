#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
""" Best fit planes and planar polygons from 3D point sets

    The best fit plane passes through the centroid of the points; its normal
    is the direction of least variance of the centered points, found from
    the singular value decomposition. The fitted local frame has its z axis
    along the plane normal.

    The sign of a fitted normal is arbitrary. :func:`fit_plane` fixes it by
    requiring the normal to point along a desired direction, flipping the
    local y axis along with z so the frame stays right handed.

.. codeauthor: Michael J. Hayford
"""
import logging

import numpy as np
from scipy import linalg

from lensletgen.display import model_constants as mc
from lensletgen.display.displayerror import DegeneratePointSetError
from lensletgen.elem.polygon import ConvexPolygon
from lensletgen.elem.transform import Transform, world2local

logger = logging.getLogger(__name__)


def column_centroid(pts):
    """ return the mean of the rows of the (N, 3) array `pts` """
    return pts.mean(axis=0)


def plane_from_points(points):
    """ Least squares plane through an (N, 3) point set.

    Returns:
        (**center**, **normal**, **rot**)

        - **center** - centroid of the points
        - **normal** - unit plane normal, the same as rot[:, 2]
        - **rot** - right handed rotation whose columns are the principal
          axes of the points, in order of decreasing variance

    Raises:
        :exc:`~.DegeneratePointSetError` for fewer than 3 points, or for
        coincident or collinear points
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    num_pts = pts.shape[0]
    if num_pts < 3:
        raise DegeneratePointSetError(num_pts, "at least 3 points required")

    center = column_centroid(pts)
    _, s, vt = linalg.svd(pts - center)
    if s[0] == 0. or s[1] <= mc.collinear_eps*s[0]:
        raise DegeneratePointSetError(num_pts, "points are collinear")

    x_axis, y_axis = vt[0], vt[1]
    normal = np.cross(x_axis, y_axis)
    rot = np.column_stack((x_axis, y_axis, normal))
    return center, normal, rot


def fit_plane(points, desired_normal):
    """ Fit a plane to `points` with its normal toward `desired_normal`.

    Returns:
        (**center**, **to_world**, **to_local**)

        - **center** - centroid of the points, the local frame origin
        - **to_world** - local to world :class:`~.Transform`
        - **to_local** - world to local :class:`~.Transform`
    """
    center, normal, rot = plane_from_points(points)
    if normal.dot(desired_normal) < 0.:
        # flip z to align with desired_normal, and y to keep det = +1
        rot = np.column_stack((rot[:, 0], -rot[:, 1], -rot[:, 2]))
    to_world = Transform(rot, center)
    return center, to_world, world2local(to_world)


def project_on_best_fit_plane(points, desired_normal):
    """ Express `points` in the local frame of their best fit plane.

    Returns:
        (**local_pts**, **to_world**, **to_local**); the z column of the
        (N, 3) **local_pts** is each point's distance from the plane
    """
    _, to_world, to_local = fit_plane(points, desired_normal)
    local_pts = to_local.apply(np.asarray(points, dtype=np.float64))
    return local_pts, to_world, to_local


def build_planar_polygon(vertices, desired_normal) -> ConvexPolygon:
    """ Flatten the polygon `vertices` onto its best fit plane.

    The input is assumed convex, and to stay approximately convex when
    projected onto the fitted plane. This holds for polygons that are small
    relative to the curvature of the surface they were projected onto; no
    check is made.

    The vertices are returned counter-clockwise about the polygon normal,
    starting from the first input vertex. When the fitted normal was
    flipped toward `desired_normal` the input order is reversed.

    Args:
        vertices: (N, 3) polygon vertices, not necessarily coplanar
        desired_normal: direction the polygon normal should point along

    Returns:
        :class:`~.ConvexPolygon` in the best fit plane
    """
    local_pts, to_world, _ = project_on_best_fit_plane(vertices,
                                                       desired_normal)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("max distance from best fit plane: %g",
                     np.max(np.abs(local_pts[:, 2])))
    verts2d = local_pts[:, :2]
    x, y = verts2d[:, 0], verts2d[:, 1]
    if x.dot(np.roll(y, -1)) - y.dot(np.roll(x, -1)) < 0.:
        verts2d = np.roll(verts2d[::-1], 1, axis=0)
    return ConvexPolygon(to_world, verts2d)
