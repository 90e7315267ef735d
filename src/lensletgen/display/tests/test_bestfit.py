#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for best fit planes and planar polygons

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy as np
import numpy.testing as npt
import pytest

from lensletgen.display.bestfit import (plane_from_points, fit_plane,
                                        project_on_best_fit_plane,
                                        build_planar_polygon)
from lensletgen.display.displayerror import DegeneratePointSetError
from lensletgen.elem.transform import Transform
from lensletgen.lattice import HexBasis1, tile_vertices


def tilted_hexagon():
    """ unit hexagon in a plane tilted about x and y, offset from origin """
    tfrm = Transform.from_euler(20., -35., 10., t=(1., -2., 7.))
    verts2d = tile_vertices((0, 0), HexBasis1())
    verts = np.column_stack((verts2d, np.zeros(6)))
    return tfrm.apply(verts), tfrm.rot[:, 2]


class FitPlaneTestCase(unittest.TestCase):
    def setUp(self):
        self.verts, self.normal = tilted_hexagon()

    def test_plane_from_points(self):
        center, normal, rot = plane_from_points(self.verts)
        npt.assert_allclose(center, [1., -2., 7.], atol=1e-12)
        assert abs(normal.dot(self.normal)) == pytest.approx(1.)
        assert np.linalg.det(rot) == pytest.approx(1.)

    def test_sign_convention(self):
        for desired in (self.normal, -self.normal):
            center, to_world, to_local = fit_plane(self.verts, desired)
            z_axis = to_world.rot[:, 2]
            assert z_axis.dot(desired) > 0.
            assert np.linalg.det(to_world.rot) == pytest.approx(1.)
            npt.assert_allclose(to_local.rot, to_world.rot.T)

    def test_sign_convention_random(self):
        rng = np.random.default_rng(0)
        for _ in range(50):
            pts = rng.normal(size=(8, 3))*[3., 2., 0.1]
            desired = rng.normal(size=3)
            _, to_world, _ = fit_plane(pts, desired)
            assert to_world.rot[:, 2].dot(desired) >= 0.
            assert np.linalg.det(to_world.rot) == pytest.approx(1.)

    def test_refit_is_idempotent(self):
        rng = np.random.default_rng(1)
        pts = self.verts + 0.05*rng.normal(size=self.verts.shape)
        local_pts, to_world, _ = project_on_best_fit_plane(pts, self.normal)
        flat = np.column_stack((local_pts[:, :2], np.zeros(len(pts))))
        center2, to_world2, _ = fit_plane(to_world.apply(flat), self.normal)
        npt.assert_allclose(center2, to_world.t, atol=1e-12)
        npt.assert_allclose(to_world2.rot[:, 2], to_world.rot[:, 2],
                            atol=1e-12)

    def test_degenerate(self):
        with pytest.raises(DegeneratePointSetError):
            fit_plane(self.verts[:2], self.normal)
        line = np.outer(np.arange(5.), [1., 2., 3.])
        with pytest.raises(DegeneratePointSetError):
            fit_plane(line, self.normal)
        with pytest.raises(DegeneratePointSetError):
            fit_plane(np.ones((4, 3)), self.normal)


class PlanarPolygonTestCase(unittest.TestCase):
    def test_planar_round_trip(self):
        verts, normal = tilted_hexagon()
        poly = build_planar_polygon(verts, normal)
        assert poly.num_vertices == 6
        npt.assert_allclose(poly.vertices3d(), verts, atol=1e-12)
        assert poly.signed_area() > 0.
        npt.assert_allclose(poly.normal, normal, atol=1e-12)

    def test_orientation_flip(self):
        verts, normal = tilted_hexagon()
        poly = build_planar_polygon(verts, -normal)
        npt.assert_allclose(poly.normal, -normal, atol=1e-12)
        # reordered to stay counter-clockwise about the flipped normal
        assert poly.signed_area() > 0.
        reordered = verts[[0, 5, 4, 3, 2, 1]]
        npt.assert_allclose(poly.vertices3d(), reordered, atol=1e-12)

    def test_nonplanar_vertices(self):
        verts, normal = tilted_hexagon()
        bumped = verts + 0.01*np.outer([1., -1., 1., -1., 1., -1.], normal)
        poly = build_planar_polygon(bumped, normal)
        assert poly.area() == pytest.approx(1.5*np.sqrt(3), rel=1e-3)
        dist = (poly.vertices3d() - bumped).dot(normal)
        npt.assert_allclose(np.abs(dist), 0.01, atol=1e-12)


if __name__ == '__main__':
    unittest.main(verbosity=3)
