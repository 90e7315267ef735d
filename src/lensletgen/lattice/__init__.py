""" Package providing hexagonal lattices for tiling the eyebox plane

    The :mod:`~.lattice` subpackage provides lattice bases, the vertices of
    the tile at a lattice coordinate and enumeration of the tiles that
    overlap an axis aligned box, :mod:`~.hexlattice`.
"""

from lensletgen.lattice.hexlattice import (LatticeBasis, HexBasis1,
                                           HexBasis3, tile_vertices,
                                           tiles_in_box)
