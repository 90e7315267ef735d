#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for rigid transforms

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy as np
import numpy.testing as npt
import pytest

from lensletgen.elem.transform import Transform, world2local


class TransformTestCase(unittest.TestCase):
    def setUp(self):
        self.tfrm = Transform.from_euler(10., -20., 30., t=(1., 2., 3.))
        self.pts = np.array([[0., 0., 0.], [1., 0., 0.], [0.5, -2., 7.]])

    def test_rotation_is_proper(self):
        rot = self.tfrm.rot
        npt.assert_allclose(rot.T.dot(rot), np.identity(3), atol=1e-14)
        assert np.linalg.det(rot) == pytest.approx(1.0)

    def test_round_trip(self):
        to_local = world2local(self.tfrm)
        npt.assert_allclose(to_local.apply(self.tfrm.apply(self.pts)),
                            self.pts, atol=1e-12)

    def test_single_point(self):
        pt = self.tfrm.apply(np.array([0., 0., 0.]))
        npt.assert_allclose(pt, [1., 2., 3.])

    def test_apply_dir_ignores_translation(self):
        d = self.tfrm.apply_dir([0., 0., 1.])
        npt.assert_allclose(d, self.tfrm.rot[:, 2])
        npt.assert_allclose(np.linalg.norm(d), 1.0)

    def test_listobj_str(self):
        o_str = self.tfrm.listobj_str()
        assert o_str.startswith("rotation:")
        assert "translation: [1. 2. 3.]" in o_str

    def test_cascade(self):
        t2 = Transform.translation(0., 0., 5.)
        cascaded = self.tfrm.cascade(t2)
        npt.assert_allclose(cascaded.apply(self.pts),
                            self.tfrm.apply(t2.apply(self.pts)), atol=1e-12)

    def test_immutable(self):
        with pytest.raises(ValueError):
            self.tfrm.t[0] = 5.

    def test_rejects_reflection(self):
        with pytest.raises(ValueError):
            Transform(np.diag([1., 1., -1.]), np.zeros(3))

    def test_rejects_non_orthonormal(self):
        with pytest.raises(ValueError):
            Transform(2*np.identity(3), np.zeros(3))


if __name__ == '__main__':
    unittest.main(verbosity=3)
