#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
""" Hexagonal lattices and tile enumeration

    A lattice coordinate (i, j) names the tile centered at
    i*b1 + j*b2, where b1 and b2 are the lattice basis vectors. Every tile
    has the same shape, given by the lattice's tile template: a regular
    hexagon whose circumradius is the lattice `scale`.

    :class:`HexBasis1` has flat topped hexagons; :class:`HexBasis3` is the
    same lattice rotated by 90 degrees, i.e. pointy topped hexagons.

.. codeauthor: Michael J. Hayford
"""
import logging
from math import sqrt, floor, ceil

import numpy as np

from lensletgen.coord_geometry_types import Pts2d, Vec2d
from lensletgen.util.misc_math import frozen_array

logger = logging.getLogger(__name__)


class LatticeBasis:
    """ 2D lattice with basis vectors b1, b2 and a tile template.

    Attributes:
        basis: 2x2 matrix whose columns are the basis vectors
        template: (N, 2) vertices of the tile centered at the origin,
                  counter-clockwise
    """

    def __init__(self, b1, b2, template):
        self.basis = frozen_array(np.column_stack((b1, b2)), (2, 2))
        if abs(np.linalg.det(self.basis)) < 1e-12:
            raise ValueError("lattice basis vectors are linearly dependent")
        self.template = frozen_array(template, (-1, 2))

    def __repr__(self):
        return "{!s}(b1={!r}, b2={!r})".format(type(self).__name__,
                                               self.basis[:, 0].tolist(),
                                               self.basis[:, 1].tolist())

    def tile_center(self, coords) -> Vec2d:
        i, j = coords
        return self.basis.dot(np.array([i, j], dtype=np.float64))

    def tile_vertices(self, coords) -> Pts2d:
        """ return the (N, 2) vertices of the tile at lattice `coords` """
        return self.template + self.tile_center(coords)

    def lattice_coords(self, xy):
        """ return the real valued lattice coordinates of point(s) `xy` """
        inv_basis = np.linalg.inv(self.basis)
        return np.asarray(xy, dtype=np.float64).dot(inv_basis.T)

    def tiles_in_box(self, xmin, xmax, ymin, ymax):
        """ return the coordinates of every tile overlapping the box

        The result is sorted by (i, j) so it is stable across runs.
        """
        if xmax < xmin or ymax < ymin:
            raise ValueError(f"empty box: x=({xmin}, {xmax}), "
                             f"y=({ymin}, {ymax})")
        # bound the search using the lattice coords of the box corners,
        # padded by the extent of a tile
        pad = np.max(np.abs(self.template))
        corners = np.array([[xmin - pad, ymin - pad], [xmax + pad, ymin - pad],
                            [xmax + pad, ymax + pad], [xmin - pad, ymax + pad]])
        lc = self.lattice_coords(corners)
        imin, jmin = (floor(c) for c in lc.min(axis=0))
        imax, jmax = (ceil(c) for c in lc.max(axis=0))

        box = np.array([[xmin, ymin], [xmax, ymin],
                        [xmax, ymax], [xmin, ymax]])
        tiles = []
        for i in range(imin, imax + 1):
            for j in range(jmin, jmax + 1):
                if convex_polygons_overlap(self.tile_vertices((i, j)), box):
                    tiles.append((i, j))
        logger.debug("%d tiles in box x=(%g, %g), y=(%g, %g)",
                     len(tiles), xmin, xmax, ymin, ymax)
        return tiles


def _hexagon(scale, start_angle):
    angles = start_angle + np.arange(6)*np.pi/3
    return scale*np.column_stack((np.cos(angles), np.sin(angles)))


class HexBasis1(LatticeBasis):
    """ Hexagonal lattice of flat topped hexagons with circumradius `scale`.
    """

    def __init__(self, scale=1.0):
        self.scale = scale
        super().__init__(scale*np.array([1.5, 0.5*sqrt(3)]),
                         scale*np.array([0., sqrt(3)]),
                         _hexagon(scale, -2*np.pi/3))

    def __repr__(self):
        return "{!s}(scale={!r})".format(type(self).__name__, self.scale)


class HexBasis3(LatticeBasis):
    """ HexBasis1 rotated by 90 degrees: pointy topped hexagons. """

    def __init__(self, scale=1.0):
        self.scale = scale
        super().__init__(scale*np.array([-0.5*sqrt(3), 1.5]),
                         scale*np.array([-sqrt(3), 0.]),
                         _hexagon(scale, -np.pi/6))

    def __repr__(self):
        return "{!s}(scale={!r})".format(type(self).__name__, self.scale)


def convex_polygons_overlap(poly1, poly2, fuzz=1e-12):
    """ separating axis test for two convex (N, 2) polygons

    Polygons that only touch along an edge or at a vertex overlap.
    """
    for poly in (poly1, poly2):
        edges = np.roll(poly, -1, axis=0) - poly
        axes = np.column_stack((-edges[:, 1], edges[:, 0]))
        for axis in axes:
            proj1 = poly1.dot(axis)
            proj2 = poly2.dot(axis)
            if (proj1.max() < proj2.min() - fuzz or
                    proj2.max() < proj1.min() - fuzz):
                return False
    return True


def tile_vertices(coords, lattice):
    """ return the (N, 2) vertices of the tile at `coords` in `lattice` """
    return lattice.tile_vertices(coords)


def tiles_in_box(xmin, xmax, ymin, ymax, lattice):
    """ return the sorted coordinates of the tiles overlapping the box """
    return lattice.tiles_in_box(xmin, xmax, ymin, ymax)
