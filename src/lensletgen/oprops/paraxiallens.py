#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Module for the paraxial lens type

    A :class:`ParaxialLens` is an ideal thin lens whose aperture is a
    :class:`~.ConvexPolygon`. The lens lies in the plane of the polygon; its
    optical axis is the polygon normal, passing through the optical center,
    which is offset from the polygon's local origin by `axis_offset`.

.. codeauthor: Michael J. Hayford
"""

import attr
import numpy as np

from lensletgen.elem.polygon import ConvexPolygon
from lensletgen.util.misc_math import normalize, frozen_array


@attr.s(frozen=True, eq=False, repr=False)
class ParaxialLens():
    """ Ideal thin lens with a convex polygon aperture.

    Attributes:
        focal_length: focal length; negative for a diverging lens
        aperture: :class:`~.ConvexPolygon` bounding the lens
        axis_offset: local 2D position of the optical axis on the aperture
    """
    focal_length = attr.ib(converter=float)
    aperture = attr.ib(validator=attr.validators.instance_of(ConvexPolygon))
    axis_offset = attr.ib(default=(0., 0.),
                          converter=lambda o: frozen_array(o, (2,)))

    @focal_length.validator
    def _check_focal_length(self, attribute, value):
        if value == 0.:
            raise ValueError("focal length must be non-zero")

    def __repr__(self):
        return "{!s}(focal_length={!r}, axis_offset={!r}, aperture={!r})" \
               .format(type(self).__name__, self.focal_length,
                       self.axis_offset.tolist(), self.aperture)

    def listobj_str(self):
        o_str = f"paraxial lens: focal_length={self.focal_length}, " \
                f"power={self.optical_power}\n"
        o_str += f"optical center: {self.optical_center}\n"
        o_str += f"axis_offset: {self.axis_offset}\n"
        o_str += self.aperture.listobj_str()
        return o_str

    @property
    def optical_power(self):
        return 1.0/self.focal_length

    @property
    def normal(self):
        return self.aperture.normal

    @property
    def optical_center(self):
        """ world coordinates of the point where the optical axis crosses
        the lens plane """
        ox, oy = self.axis_offset
        return self.aperture.local_to_world.apply(np.array([ox, oy, 0.]))

    def intersect(self, p0, d):
        """ Intersect the ray (p0, d) with the lens.

        Returns:
            (s, p), distance along d and intersection point, or None if the
            ray is parallel to the lens plane or misses the aperture
        """
        p0 = np.asarray(p0, dtype=np.float64)
        d = np.asarray(d, dtype=np.float64)
        n = self.normal
        dn = d.dot(n)
        if abs(dn) < 1e-12:
            return None
        s = (self.optical_center - p0).dot(n)/dn
        p = p0 + s*d
        to_local = self.aperture.local_to_world.inverse()
        local_pt = to_local.apply(p)
        if not self.aperture.point_inside(local_pt[0], local_pt[1]):
            return None
        return s, p

    def refract(self, pt, d):
        """ Return the unit direction of the ray leaving the lens at `pt`.

        All rays arriving with direction `d` converge to (or, for a negative
        focal length, diverge from) the point where the undeviated ray
        through the optical center meets the focal plane.
        """
        d = normalize(np.asarray(d, dtype=np.float64))
        pt = np.asarray(pt, dtype=np.float64)
        dn = d.dot(self.normal)
        if abs(dn) < 1e-12:
            return d
        dist = abs(self.focal_length)/abs(dn)
        if self.focal_length > 0.:
            focal_pt = self.optical_center + dist*d
            return normalize(focal_pt - pt)
        else:
            # virtual focus in front of the lens
            focal_pt = self.optical_center - dist*d
            return normalize(pt - focal_pt)
