#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2021 Michael J. Hayford
""" Tabular summaries of generated lenslets

.. codeauthor: Michael J. Hayford
"""

import numpy as np
import pandas as pd

lenslet_columns = ['i', 'j', 'cx', 'cy', 'cz', 'nx', 'ny', 'nz',
                   'area', 'focal_length']


def lenslet_df(lenses, tile_coords):
    """ return a |DataFrame| with one row of lenslet data per lens

    Columns are the tile coordinates (i, j), the optical center
    (cx, cy, cz), the lens normal (nx, ny, nz), the aperture area and the
    focal length.
    """
    if len(lenses) != len(tile_coords):
        raise ValueError(f"{len(lenses)} lenses but "
                         f"{len(tile_coords)} tile coordinates")
    rows = []
    for lens, (i, j) in zip(lenses, tile_coords):
        rows.append([i, j, *lens.optical_center, *lens.normal,
                     lens.aperture.area(), lens.focal_length])
    df = pd.DataFrame(rows, columns=lenslet_columns)
    df = df.astype({'i': np.int64, 'j': np.int64})
    df.index.names = ['lenslet']
    return df


def list_lenslets(lenses, tile_coords):
    """ pretty print the lenslet centers and normals """
    colHeader = "         i     j            X            Y            Z" \
                "           L            M            N"
    print(colHeader)

    colFormats = "{:3d}: {:5d} {:5d} {:12.5f} {:12.5f} {:12.5f} " \
                 "{:12.6f} {:12.6f} {:12.6f}"

    for k, (lens, (i, j)) in enumerate(zip(lenses, tile_coords)):
        c = lens.optical_center
        n = lens.normal
        print(colFormats.format(k, i, j, c[0], c[1], c[2], n[0], n[1], n[2]))
