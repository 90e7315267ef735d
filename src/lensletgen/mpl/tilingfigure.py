#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Static plot of a lenslet tiling

    The lenslet apertures are drawn in world x, y coordinates, i.e. as seen
    looking along the optical axis from the eyebox.

.. codeauthor: Michael J. Hayford
"""

from matplotlib.figure import Figure
from matplotlib.patches import Polygon

import numpy as np


class TilingFigure(Figure):
    """ Static lenslet tiling plot

    Attributes:
        polygons: list of :class:`~.ConvexPolygon` or :class:`~.ParaxialLens`
        tile_coords: optional list of tile coordinates used as labels
        do_draw_labels: if True, label each tile with its coordinates
        oversize_factor: what fraction to oversize the tiling bounding box
    """
    def __init__(self, polygons, tile_coords=None,
                 do_draw_labels=False,
                 oversize_factor=0.05,
                 **kwargs):
        self.polygons = [getattr(p, 'aperture', p) for p in polygons]
        self.tile_coords = tile_coords
        self.do_draw_labels = do_draw_labels and tile_coords is not None
        self.oversize_factor = oversize_factor
        self.linewidth = 0.5

        Figure.__init__(self, **kwargs)

        self.update_data()

    def refresh(self):
        self.update_data()
        self.plot()

    def update_data(self):
        self.outlines = [p.vertices3d()[:, :2] for p in self.polygons]
        if len(self.outlines) > 0:
            all_pts = np.vstack(self.outlines)
            self.sys_bbox = all_pts.min(axis=0), all_pts.max(axis=0)
        else:
            self.sys_bbox = np.array([-1., -1.]), np.array([1., 1.])

    def plot(self):
        if hasattr(self, 'ax'):
            self.ax.cla()
        else:
            self.ax = self.add_subplot(1, 1, 1, aspect=1.0)

        for k, outline in enumerate(self.outlines):
            self.ax.add_patch(Polygon(outline, closed=True, fill=False,
                                      linewidth=self.linewidth))
            if self.do_draw_labels:
                i, j = self.tile_coords[k]
                cx, cy = outline.mean(axis=0)
                self.ax.text(cx, cy, f"{i},{j}", fontsize='xx-small',
                             ha='center', va='center')

        lower, upper = self.sys_bbox
        margin = self.oversize_factor*(upper - lower)
        self.ax.set_xlim(lower[0] - margin[0], upper[0] + margin[0])
        self.ax.set_ylim(lower[1] - margin[1], upper[1] + margin[1])
        self.ax.set_xlabel('x')
        self.ax.set_ylabel('y')
        return self
