#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for vectors and point sets

These type hints distinguish between numpy arrays and array-like inputs.

Vec2d/Vec3d are used for coordinates
Pts2d/Pts3d are point sets, one point per row, i.e. shape (N, 2) or (N, 3)

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Vec3d = npt.NDArray
Pts2d = npt.NDArray
Pts3d = npt.NDArray

V3d = npt.ArrayLike
P3d = npt.ArrayLike
