#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2017 Michael J. Hayford
""" Module for rays and the surfaces they are projected onto

    The :class:`~.Surface` base class specifies the api that subclasses
    implement: :meth:`~.Surface.intersect` returns every intersection of a
    ray with the surface, ordered by distance along the ray, or None if the
    ray misses the surface. Intersections behind the ray origin are included;
    callers decide which one they need.

    Surfaces
        - :class:`Sphere`
        - :class:`Plane`
        - :class:`Rectangle`

.. codeauthor: Michael J. Hayford
"""
from math import sqrt
from typing import NamedTuple, Optional

import attr
import numpy as np

from lensletgen.coord_geometry_types import Vec3d
from lensletgen.elem.transform import Transform, transfer_coords
from lensletgen.util.misc_math import (normalize, frozen_array,
                                       rot_v1_into_v2)

# rays closer than this to parallel with a plane are considered to miss it
PARALLEL_EPS = 1e-12


@attr.s(frozen=True, eq=False)
class Ray():
    """ A ray with an origin point and a direction.

    The direction need not be unit length; distances along the ray are
    measured in units of the direction vector's length.
    """
    origin = attr.ib(converter=lambda p: frozen_array(p, (3,)))
    direction = attr.ib(converter=lambda d: frozen_array(d, (3,)))

    @direction.validator
    def _check_direction(self, attribute, value):
        if not np.any(value):
            raise ValueError("ray direction must be non-zero")

    def point_at(self, s: float) -> Vec3d:
        return self.origin + s*self.direction


class Intersection(NamedTuple):
    """ s: distance along the ray, pt: intersection point """
    s: float
    pt: Vec3d


class Surface:
    """ Base class for surfaces. """

    def __repr__(self):
        return "{!s}()".format(type(self).__name__)

    def intersect(self, ray: Ray) -> Optional[list[Intersection]]:
        """ Intersect the surface with `ray`.

        Returns:
            list of :class:`Intersection`, sorted by increasing distance
            along the ray, or None if the ray misses the surface.
        """
        raise NotImplementedError

    def normal(self, pt) -> Vec3d:
        """ Returns the unit normal of the surface at `pt`. """
        raise NotImplementedError


def _check_positive(instance, attribute, value):
    if value <= 0.:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


def _unit_normal(n):
    n = np.asarray(n, dtype=np.float64)
    if not np.any(n):
        raise ValueError("plane normal must be non-zero")
    return frozen_array(normalize(n), (3,))


def _intersect_plane(point, plane_normal, ray):
    denom = ray.direction.dot(plane_normal)
    if abs(denom) < PARALLEL_EPS:
        return None
    s = (point - ray.origin).dot(plane_normal)/denom
    return [Intersection(s, ray.point_at(s))]


@attr.s(frozen=True, eq=False, repr=False)
class Sphere(Surface):
    """ Spherical surface of `radius` centered at `center`. """
    radius = attr.ib(converter=float, validator=_check_positive)
    center = attr.ib(default=(0., 0., 0.),
                     converter=lambda c: frozen_array(c, (3,)))

    def __repr__(self):
        return "{!s}(radius={!r}, center={!r})".format(
            type(self).__name__, self.radius, self.center.tolist())

    @classmethod
    def placed(cls, radius, tfrm: Transform):
        """ Sphere of `radius` centered at the origin of `tfrm`. """
        return cls(radius, tfrm.t)

    def intersect(self, ray):
        # For quadratic equation a*s**2 + 2*b*s + c = 0
        p = ray.origin - self.center
        d = ray.direction
        a = d.dot(d)
        b = d.dot(p)
        c = p.dot(p) - self.radius*self.radius
        try:
            root = sqrt(b*b - a*c)
        except ValueError:
            return None

        s1 = (-b - root)/a
        s2 = (-b + root)/a
        if root == 0.:
            return [Intersection(s1, ray.point_at(s1))]
        return [Intersection(s1, ray.point_at(s1)),
                Intersection(s2, ray.point_at(s2))]

    def normal(self, pt):
        return normalize(np.asarray(pt, dtype=np.float64) - self.center)


@attr.s(frozen=True, eq=False, repr=False)
class Plane(Surface):
    """ Unbounded plane through `point` with unit `normal`. """
    point = attr.ib(converter=lambda p: frozen_array(p, (3,)))
    plane_normal = attr.ib(converter=_unit_normal, alias='normal')

    def __repr__(self):
        return "{!s}(point={!r}, normal={!r})".format(
            type(self).__name__, self.point.tolist(),
            self.plane_normal.tolist())

    def intersect(self, ray):
        return _intersect_plane(self.point, self.plane_normal, ray)

    def normal(self, pt=None):
        return self.plane_normal


@attr.s(frozen=True, eq=False, repr=False)
class Rectangle(Surface):
    """ Bounded plane of half widths `half_width` (u) x `half_height` (v).

    The rectangle lies in the plane through `center` with `normal`. The u
    axis is `u_axis` projected into the plane; by default the world x axis
    is rotated into the plane along with the normal.
    """
    half_width = attr.ib(converter=float, validator=_check_positive)
    half_height = attr.ib(converter=float, validator=_check_positive)
    plane_normal = attr.ib(default=(0., 0., 1.), converter=_unit_normal,
                           alias='normal')
    point = attr.ib(default=(0., 0., 0.),
                    converter=lambda p: frozen_array(p, (3,)),
                    alias='center')
    u_axis = attr.ib(default=None)
    tfrm = attr.ib(init=False)

    @tfrm.default
    def _local_frame(self):
        n = self.plane_normal
        if self.u_axis is None:
            u = rot_v1_into_v2(np.array([0., 0., 1.]), n)[:, 0]
        else:
            u = np.asarray(self.u_axis, dtype=np.float64)
            u = u - u.dot(n)*n
            if not np.any(u):
                raise ValueError("u_axis must not be parallel to the normal")
            u = normalize(u)
        v = np.cross(n, u)
        return Transform(np.column_stack((u, v, n)), self.point)

    def __repr__(self):
        return ("{!s}(half_width={!r}, half_height={!r}, normal={!r}, "
                "center={!r})").format(type(self).__name__,
                                       self.half_width, self.half_height,
                                       self.plane_normal.tolist(),
                                       self.point.tolist())

    def normal(self, pt=None):
        return self.plane_normal

    def point_inside(self, x: float, y: float, fuzz: float = 1e-9) -> bool:
        return (abs(x) <= self.half_width + fuzz
                and abs(y) <= self.half_height + fuzz)

    def intersect(self, ray):
        intscts = _intersect_plane(self.point, self.plane_normal, ray)
        if intscts is None:
            return None
        s, pt = intscts[0]
        local_pt, _ = transfer_coords(self.tfrm.rot, self.tfrm.t,
                                      pt, ray.direction)
        if not self.point_inside(local_pt[0], local_pt[1]):
            return None
        return intscts

    def vertices3d(self):
        """ the 4 corners, counter-clockwise about the normal """
        w, h = self.half_width, self.half_height
        corners = np.array([[-w, -h, 0.], [w, -h, 0.],
                            [w, h, 0.], [-w, h, 0.]])
        return self.tfrm.apply(corners)
