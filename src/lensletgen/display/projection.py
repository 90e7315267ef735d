#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
""" Projection of points and polygons onto surfaces along a direction

    A point is projected by casting a ray from the point along the
    projection direction and taking the closest intersection that is not
    behind the point. A point set projects only if every point does; the
    projected vertices of a polygon are not guaranteed to be coplanar.

.. codeauthor: Michael J. Hayford
"""
import logging
from typing import Optional

import numpy as np

from lensletgen.coord_geometry_types import Vec3d, Pts3d, V3d, P3d
from lensletgen.display import model_constants as mc
from lensletgen.elem.surfaces import Ray, Surface
from lensletgen.typing import MissPolicy

logger = logging.getLogger(__name__)


def closest_intersection(intscts, min_dst=mc.min_forward_dst):
    """ return the first intersection at or beyond `min_dst`, or None """
    if not intscts:
        return None
    for intsct in intscts:
        if intsct.s >= min_dst:
            return intsct
    return None


def project_point(point: V3d, direction: V3d,
                  surface: Surface) -> Optional[Vec3d]:
    """ project `point` onto `surface` along `direction`.

    Returns:
        the projected point, or None if the ray from `point` along
        `direction` has no intersection with `surface` in front of `point`
    """
    ray = Ray(point, direction)
    intsct = closest_intersection(surface.intersect(ray))
    if intsct is None:
        return None
    return intsct.pt


def project_points(points: P3d, direction: V3d, surface: Surface,
                   on_miss: Optional[MissPolicy] = None) -> Optional[Pts3d]:
    """ project each row of the (N, 3) array `points` onto `surface`.

    Args:
        points: (N, 3) array of points, one per row
        direction: projection direction
        surface: surface to project onto
        on_miss: optional policy called as on_miss(index, point) when a
                 point fails to project. It returns a substitute point, or
                 None to reject the whole point set. The default rejects.

    Returns:
        (N, 3) array of projected points, or None as soon as any point
        fails to project
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    result = np.empty_like(points)
    for i, origin in enumerate(points):
        pt = project_point(origin, direction, surface)
        if pt is None and on_miss is not None:
            pt = on_miss(i, origin)
        if pt is None:
            logger.debug("point %d at %s missed %r", i, origin, surface)
            return None
        result[i] = pt
    return result
