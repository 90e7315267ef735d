#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for ConvexPolygon

.. codeauthor: Michael J. Hayford
"""

import numpy as np
import numpy.testing as npt
import pytest

from lensletgen.elem.polygon import ConvexPolygon
from lensletgen.elem.transform import Transform


@pytest.fixture
def square():
    verts = [[-1., -1.], [1., -1.], [1., 1.], [-1., 1.]]
    return ConvexPolygon(Transform.translation(0., 0., 3.), verts)


def test_area_and_centroid(square):
    assert square.num_vertices == 4
    assert square.signed_area() == pytest.approx(4.)
    assert square.area() == pytest.approx(4.)
    npt.assert_allclose(square.centroid(), [0., 0.], atol=1e-15)


def test_vertices3d(square):
    verts = square.vertices3d()
    assert verts.shape == (4, 3)
    npt.assert_allclose(verts[:, 2], 3.)
    npt.assert_allclose(square.normal, [0., 0., 1.])


def test_bounding_box(square):
    lower, upper = square.bounding_box()
    npt.assert_allclose(lower, [-1., -1.])
    npt.assert_allclose(upper, [1., 1.])


def test_listobj_str(square):
    o_str = square.listobj_str()
    assert o_str.startswith("ConvexPolygon: 4 vertices")
    assert "translation: [0. 0. 3.]" in o_str


def test_point_inside(square):
    assert square.point_inside(0., 0.)
    assert square.point_inside(1., 0.5)
    assert not square.point_inside(1.1, 0.)


def test_clockwise_point_inside():
    verts = [[-1., 1.], [1., 1.], [1., -1.], [-1., -1.]]
    poly = ConvexPolygon(Transform.identity(), verts)
    assert poly.signed_area() < 0.
    assert poly.point_inside(0.5, 0.5)
    assert not poly.point_inside(0., 2.)


def test_too_few_vertices():
    with pytest.raises(ValueError):
        ConvexPolygon(Transform.identity(), [[0., 0.], [1., 0.]])
