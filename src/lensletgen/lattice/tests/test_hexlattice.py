#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for hexagonal lattices

.. codeauthor: Michael J. Hayford
"""

import unittest
from math import sqrt
import numpy as np
import numpy.testing as npt
import pytest

from lensletgen.lattice import HexBasis1, HexBasis3, tile_vertices, tiles_in_box
from lensletgen.lattice.hexlattice import convex_polygons_overlap


def _signed_area(verts):
    x, y = verts[:, 0], verts[:, 1]
    return 0.5*(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


class HexLatticeTestCase(unittest.TestCase):
    def test_origin_tile(self):
        verts = tile_vertices((0, 0), HexBasis1())
        assert verts.shape == (6, 2)
        npt.assert_allclose(verts[0], [-0.5, -sqrt(3)/2], atol=1e-15)
        npt.assert_allclose(np.linalg.norm(verts, axis=1), 1.)
        assert _signed_area(verts) == pytest.approx(1.5*sqrt(3))

    def test_neighbors_share_edge(self):
        lattice = HexBasis1()
        t00 = tile_vertices((0, 0), lattice)
        for coords in ((1, 0), (0, 1), (-1, 0), (0, -1), (1, -1), (-1, 1)):
            t = tile_vertices(coords, lattice)
            shared = [v for v in t
                      if np.min(np.linalg.norm(t00 - v, axis=1)) < 1e-12]
            assert len(shared) == 2, coords

    def test_scale(self):
        verts = tile_vertices((2, -1), HexBasis1(scale=0.5))
        center = verts.mean(axis=0)
        npt.assert_allclose(center, [1.5, 0.], atol=1e-12)
        npt.assert_allclose(np.linalg.norm(verts - center, axis=1), 0.5)

    def test_hexbasis3_is_rotated(self):
        v1 = tile_vertices((1, 2), HexBasis1())
        v3 = tile_vertices((1, 2), HexBasis3())
        rot90 = np.array([[0., -1.], [1., 0.]])
        npt.assert_allclose(v1.dot(rot90.T), v3, atol=1e-12)

    def test_tiles_in_box(self):
        lattice = HexBasis1()
        tiles = tiles_in_box(-0.1, 0.1, -0.1, 0.1, lattice)
        assert tiles == [(0, 0)]

        tiles = tiles_in_box(-3., 3., -2., 2., lattice)
        assert tiles == sorted(tiles)
        assert len(set(tiles)) == len(tiles)
        box = np.array([[-3., -2.], [3., -2.], [3., 2.], [-3., 2.]])
        for coords in tiles:
            assert convex_polygons_overlap(tile_vertices(coords, lattice), box)
        # tiles just outside the search result don't overlap the box
        for i in range(-6, 7):
            for j in range(-6, 7):
                if (i, j) not in tiles:
                    assert not convex_polygons_overlap(
                        tile_vertices((i, j), lattice), box)

    def test_empty_box(self):
        with pytest.raises(ValueError):
            tiles_in_box(1., -1., 0., 1., HexBasis1())


if __name__ == '__main__':
    unittest.main(verbosity=3)
