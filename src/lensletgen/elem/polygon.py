#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2017 Michael J. Hayford
""" Convex polygon embedded in 3D by a local to world transform

    The polygon vertices are 2D points in the local frame of the polygon's
    plane; the local z axis is the polygon normal. Vertices are expected in
    counter-clockwise order about the normal. Convexity is not checked.

.. codeauthor: Michael J. Hayford
"""

import attr
import numpy as np

from lensletgen.coord_geometry_types import Pts3d, Vec2d
from lensletgen.elem.transform import Transform
from lensletgen.util.misc_math import frozen_array


def _check_vertices(instance, attribute, value):
    if value.shape[0] < 3:
        raise ValueError(
            f"a polygon needs at least 3 vertices, got {value.shape[0]}")


@attr.s(frozen=True, eq=False, repr=False)
class ConvexPolygon():
    """ Convex polygon, vertices in the local frame of `local_to_world`.

    Attributes:
        local_to_world: :class:`~.Transform` embedding the polygon in 3D
        vertices: (N, 2) array of local vertex coordinates
    """
    local_to_world = attr.ib(
        validator=attr.validators.instance_of(Transform))
    vertices = attr.ib(converter=lambda v: frozen_array(v, (-1, 2)),
                       validator=_check_vertices)

    def __repr__(self):
        return "{!s}(num_vertices={!r}, center={!r}, normal={!r})".format(
            type(self).__name__, self.num_vertices,
            self.local_to_world.t.tolist(), self.normal.tolist())

    def listobj_str(self):
        o_str = f"{type(self).__name__}: {self.num_vertices} vertices\n"
        o_str += self.local_to_world.listobj_str()
        for i, v in enumerate(self.vertices):
            o_str += f"{i:3d}: {v[0]:12.6f} {v[1]:12.6f}\n"
        return o_str

    @property
    def num_vertices(self) -> int:
        return self.vertices.shape[0]

    @property
    def normal(self):
        return self.local_to_world.rot[:, 2]

    def vertices3d(self) -> Pts3d:
        """ return the (N, 3) vertices in world coordinates """
        local = np.column_stack((self.vertices,
                                 np.zeros(self.num_vertices)))
        return self.local_to_world.apply(local)

    def signed_area(self) -> float:
        """ shoelace area; positive for counter-clockwise vertices """
        x, y = self.vertices[:, 0], self.vertices[:, 1]
        return 0.5*float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))

    def area(self) -> float:
        return abs(self.signed_area())

    def centroid(self) -> Vec2d:
        """ return the area centroid in local 2D coordinates """
        x, y = self.vertices[:, 0], self.vertices[:, 1]
        xn, yn = np.roll(x, -1), np.roll(y, -1)
        cross = x*yn - xn*y
        a6 = 3.0*cross.sum()
        if a6 == 0.:
            return self.vertices.mean(axis=0)
        return np.array([((x + xn)*cross).sum()/a6,
                         ((y + yn)*cross).sum()/a6])

    def bounding_box(self):
        """ return (lower left, upper right) in local 2D coordinates """
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def point_inside(self, x: float, y: float, fuzz: float = 1e-9) -> bool:
        """ True if local point (x, y) is inside or on the polygon. """
        edges = np.roll(self.vertices, -1, axis=0) - self.vertices
        to_pt = np.array([x, y]) - self.vertices
        cross = edges[:, 0]*to_pt[:, 1] - edges[:, 1]*to_pt[:, 0]
        if self.signed_area() < 0.:
            cross = -cross
        return bool(np.all(cross >= -fuzz))
