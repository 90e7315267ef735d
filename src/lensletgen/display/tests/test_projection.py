#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for projection onto surfaces

.. codeauthor: Michael J. Hayford
"""

import unittest
from math import sqrt
import numpy as np
import numpy.testing as npt

from lensletgen.display.projection import project_point, project_points
from lensletgen.elem.surfaces import Plane, Sphere


class ProjectPointTestCase(unittest.TestCase):
    def setUp(self):
        self.sph = Sphere(10., center=(0., 0., 5.))
        self.pln = Plane([0., 0., 0.], [0., 0., 1.])

    def test_closest_forward_hit(self):
        # from inside the sphere only the far side is in front
        pt = project_point([0., 3., 0.], [0., 0., 1.], self.sph)
        npt.assert_allclose(pt, [0., 3., 5. + sqrt(91.)])

    def test_outside_takes_near_side(self):
        pt = project_point([0., 0., -20.], [0., 0., 1.], self.sph)
        npt.assert_allclose(pt, [0., 0., -5.])

    def test_behind_is_rejected(self):
        assert project_point([0., 0., 30.], [0., 0., 1.], self.sph) is None
        assert project_point([0., 0., 1.], [0., 0., 1.], self.pln) is None

    def test_miss(self):
        assert project_point([20., 0., 0.], [0., 0., 1.], self.sph) is None
        assert project_point([0., 0., 1.], [1., 0., 0.], self.pln) is None

    def test_on_surface(self):
        pt = project_point([1., 2., 0.], [0., 0., 1.], self.pln)
        npt.assert_allclose(pt, [1., 2., 0.])


class ProjectPointsTestCase(unittest.TestCase):
    def setUp(self):
        self.sph = Sphere(10., center=(0., 0., 5.))
        self.dir = np.array([0., 0., 1.])

    def test_all_points_project(self):
        pts = np.array([[0., 0., 0.], [1., 0., 0.], [0., 2., 0.]])
        result = project_points(pts, self.dir, self.sph)
        assert result.shape == (3, 3)
        npt.assert_allclose(np.linalg.norm(result - self.sph.center, axis=1),
                            10.)
        npt.assert_allclose(result[:, :2], pts[:, :2])

    def test_all_or_nothing(self):
        pts = np.array([[0., 0., 0.], [20., 0., 0.], [0., 2., 0.]])
        assert project_points(pts, self.dir, self.sph) is None

    def test_miss_policy(self):
        pts = np.array([[0., 0., 0.], [20., 0., 0.]])
        misses = []

        def substitute(i, pt):
            misses.append(i)
            return np.array([10., 0., 5.])

        result = project_points(pts, self.dir, self.sph, on_miss=substitute)
        assert misses == [1]
        npt.assert_allclose(result[1], [10., 0., 5.])

        assert project_points(pts, self.dir, self.sph,
                              on_miss=lambda i, pt: None) is None

    def test_input_unchanged(self):
        pts = np.array([[0., 0., 0.], [1., 0., 0.], [0., 2., 0.]])
        original = pts.copy()
        project_points(pts, self.dir, self.sph)
        npt.assert_array_equal(pts, original)


if __name__ == '__main__':
    unittest.main(verbosity=3)
