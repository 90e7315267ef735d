#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
""" Generation of hexagonal lenslets on a spherical display surface

    A hexagonal lattice is laid out in the eyebox plane and the vertices of
    its tiles are projected onto the spherical display surface. The
    projected vertices are not necessarily coplanar, so each projected
    hexagon is replaced by its projection onto its best fit plane. For
    systems with fields of view less than 90 degrees the error is small.
    Each planar hexagon is the aperture of one paraxial lenslet.

    The eyebox plane is assumed perpendicular to the z axis; the display
    sphere is centered on the z axis, eye relief from the eyebox plane to
    the sphere vertex.

.. codeauthor: Michael J. Hayford
"""
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import attr
import numpy as np

from lensletgen.display import model_constants as mc
from lensletgen.display.bestfit import build_planar_polygon
from lensletgen.display.displayerror import EmptyBoundsError
from lensletgen.display.projection import project_point, project_points
from lensletgen.display.sampler import sample_fov_boundary
from lensletgen.elem.polygon import ConvexPolygon
from lensletgen.elem.surfaces import Plane, Sphere
from lensletgen.elem.transform import Transform
from lensletgen.lattice.hexlattice import tile_vertices, tiles_in_box
from lensletgen.oprops.paraxiallens import ParaxialLens
from lensletgen.typing import (AngleUnits, BBox, LengthUnits, MissPolicy,
                               TileCoord)

logger = logging.getLogger(__name__)


@attr.s(frozen=True)
class SphereTiling():
    """ Result of tiling the display sphere.

    Attributes:
        polygons: tuple of :class:`~.ConvexPolygon`, one per accepted tile
        tile_coords: lattice coordinates of the accepted tiles, in the same
                     order as polygons
        rejected: lattice coordinates of the tiles whose hexagon did not
                  project completely onto the sphere
    """
    polygons = attr.ib(converter=tuple)
    tile_coords = attr.ib(converter=tuple)
    rejected = attr.ib(converter=tuple, factory=tuple)


def to_radians(angle, angle_units: AngleUnits = mc.default_angle_units):
    if angle_units == 'deg':
        return math.radians(angle)
    elif angle_units == 'rad':
        return float(angle)
    raise ValueError(f"unknown angle units: {angle_units!r}")


def bounds(pts):
    """ return the (min, max) extent of each column of `pts` """
    pts = np.asarray(pts)
    return tuple((float(lo), float(hi))
                 for lo, hi in zip(pts.min(axis=0), pts.max(axis=0)))


def eyebox_bounds(eyebox: Plane, eye_relief, direction, radius,
                  fov_theta, fov_phi) -> BBox:
    """ Bound the fov boundary on the sphere projected onto the eyebox.

    The fov boundary is sampled on a sphere of `radius` centered at the
    origin and projected along `direction` onto the `eyebox` plane.
    Angles are in radians.

    Boundary samples that miss the eyebox are skipped.

    Returns:
        ((xmin, xmax), (ymin, ymax), (zmin, zmax)) of the projected points

    Raises:
        :exc:`~.EmptyBoundsError` if no boundary point projects
    """
    pts = sample_fov_boundary(eye_relief, radius, fov_theta, fov_phi)
    hits = [project_point(pt, direction, eyebox) for pt in pts]
    projected_pts = [pt for pt in hits if pt is not None]
    if not projected_pts:
        raise EmptyBoundsError(eyebox, direction)
    if len(projected_pts) < len(pts):
        logger.debug("%d of %d fov boundary points missed the eyebox",
                     len(pts) - len(projected_pts), len(pts))
    return bounds(projected_pts)


def box_tiles(bbox, lattice):
    """ return the lattice tiles overlapping the xy extent of `bbox` """
    (xmin, xmax), (ymin, ymax) = bbox[0], bbox[1]
    return tiles_in_box(xmin, xmax, ymin, ymax, lattice)


def eyebox_tiles(eyebox, eye_relief, direction, radius, fov_theta, fov_phi,
                 lattice):
    bbox = eyebox_bounds(eyebox, eye_relief, direction, radius,
                         fov_theta, fov_phi)
    return box_tiles(bbox, lattice)


def display_sphere(eyebox: Plane, eye_relief, sphere_radius) -> Sphere:
    """ Display sphere whose vertex is `eye_relief` beyond the eyebox. """
    eyebox_z = eyebox.point[2]
    sphere_origin_offset = eyebox_z + (eye_relief - sphere_radius)
    return Sphere.placed(sphere_radius,
                         Transform.translation(0., 0., sphere_origin_offset))


def sphere_polygon(vertices, direction, sphere,
                   on_miss: Optional[MissPolicy] = None):
    """ project `vertices` onto `sphere`, returning the planar polygon.

    The polygon normal is opposite the projection direction, i.e. it points
    from the display back toward the eyebox plane. Returns None if any
    vertex fails to project.
    """
    projected_pts = project_points(vertices, direction, sphere,
                                   on_miss=on_miss)
    if projected_pts is None:
        return None
    return build_planar_polygon(projected_pts, -np.asarray(direction))


def eyebox_tile_vertices(coords, lattice, eyebox_z):
    """ return the (N, 3) vertices of a tile lying in the eyebox plane """
    twod_verts = tile_vertices(coords, lattice)
    z_col = np.full((twod_verts.shape[0], 1), eyebox_z)
    return np.hstack((twod_verts, z_col))


def tile_sphere(eyebox: Plane, eye_relief, sphere_radius, direction,
                fov_theta, fov_phi, lattice,
                angle_units: AngleUnits = mc.default_angle_units,
                length_units: LengthUnits = 'mm',
                on_miss: Optional[MissPolicy] = None,
                max_workers: Optional[int] = None) -> SphereTiling:
    """ Tile the spherical display surface with hexagonal polygons.

    Args:
        eyebox: eyebox :class:`~.Plane`, perpendicular to the z axis
        eye_relief: distance from the eyebox plane to the display vertex
        sphere_radius: radius of the spherical display surface
        direction: 3d direction vector to project points from the eyebox
                   plane to the display surface
        fov_theta, fov_phi: horizontal and vertical field of view of the
                            display as seen from the center of the eyebox
        lattice: the hexagonal lattice to tile the sphere with,
                 :class:`~.HexBasis1` or :class:`~.HexBasis3`
        angle_units: 'deg' or 'rad', the units of fov_theta and fov_phi
        length_units: units of eye_relief and sphere_radius
        on_miss: projection failure policy, see
                 :func:`~.projection.project_points`
        max_workers: if given, project tiles in a thread pool of this size

    Returns:
        :class:`SphereTiling`
    """
    direction = np.asarray(direction, dtype=np.float64)
    eye_relief = mc.to_mm(eye_relief, length_units)
    sphere_radius = mc.to_mm(sphere_radius, length_units)
    sph = display_sphere(eyebox, eye_relief, sphere_radius)
    theta = to_radians(fov_theta, angle_units)
    phi = to_radians(fov_phi, angle_units)

    # the bounds project from the sphere back toward the eyebox
    tiles = eyebox_tiles(eyebox, eye_relief, -direction, sphere_radius,
                         theta, phi, lattice)
    eyebox_z = eyebox.point[2]

    def tile_polygon(coords):
        vertices = eyebox_tile_vertices(coords, lattice, eyebox_z)
        return sphere_polygon(vertices, direction, sph, on_miss=on_miss)

    if max_workers is None:
        results = [tile_polygon(coords) for coords in tiles]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(tile_polygon, tiles))

    polygons, tile_coords, rejected = [], [], []
    for coords, poly in zip(tiles, results):
        if poly is None:
            rejected.append(coords)
        else:
            polygons.append(poly)
            tile_coords.append(coords)

    if rejected:
        logger.info("%d of %d tiles did not project onto the display "
                    "sphere: %s", len(rejected), len(tiles), rejected)
    logger.debug("generated %d polygons on %r", len(polygons), sph)
    return SphereTiling(polygons, tile_coords, rejected)


def generate_sphere_polygons(eyebox: Plane, eye_relief, sphere_radius,
                             direction, fov_theta, fov_phi, lattice,
                             **kwargs
                             ) -> tuple[list[ConvexPolygon],
                                        list[TileCoord]]:
    """ Generate hexagonal polygons on a spherical display surface.

    Tiles whose hexagon doesn't project completely onto the sphere are
    left out; use :func:`tile_sphere` to get them as well. Keyword
    arguments are passed to :func:`tile_sphere`.

    Returns:
        (**polygons**, **tile_coords**)
    """
    tiling = tile_sphere(eyebox, eye_relief, sphere_radius, direction,
                         fov_theta, fov_phi, lattice, **kwargs)
    return list(tiling.polygons), list(tiling.tile_coords)


def generate_sphere_lenslets(eyebox: Plane, eye_relief, focal_length,
                             direction, sphere_radius, fov_theta, fov_phi,
                             lattice, **kwargs
                             ) -> tuple[list[ParaxialLens],
                                        list[TileCoord]]:
    """ Generate a paraxial lenslet for each polygon on the display sphere.

    Each lenslet has `focal_length`, in the same length units as
    eye_relief, and its optical axis through the center of its best fit
    plane. Keyword arguments are passed to :func:`tile_sphere`.

    Returns:
        (**lenses**, **tile_coords**), in corresponding order
    """
    polygons, tile_coords = generate_sphere_polygons(
        eyebox, eye_relief, sphere_radius, direction, fov_theta, fov_phi,
        lattice, **kwargs)
    focal_length = mc.to_mm(focal_length, kwargs.get('length_units', 'mm'))
    lenses = [ParaxialLens(focal_length, poly, (0., 0.))
              for poly in polygons]
    return lenses, tile_coords
