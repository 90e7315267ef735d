#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for lensletgen

.. codeauthor: Michael J. Hayford
"""
from typing import Callable, Literal, Optional
from lensletgen.coord_geometry_types import Vec3d

AngleUnits = Literal['deg', 'rad']
LengthUnits = Literal['um', 'mm', 'cm', 'm']

TileCoord = tuple[int, int]
Extent = tuple[float, float]
BBox = tuple[Extent, ...]

# called with (vertex index, vertex) when a vertex misses the surface
MissPolicy = Callable[[int, Vec3d], Optional[Vec3d]]
