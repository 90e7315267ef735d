""" package supplying utility functions for math and numpy support

    The :mod:`~lensletgen.util` subpackage provides vector normalization,
    read-only array conversion and rotation matrix support in
    :mod:`~.misc_math`.
"""
