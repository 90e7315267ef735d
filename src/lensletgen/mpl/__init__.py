""" package supplying plotting of lenslet tilings using matplotlib

    The :mod:`~lensletgen.mpl` subpackage provides :class:`~.TilingFigure`,
    in :mod:`~.tilingfigure`.
"""
