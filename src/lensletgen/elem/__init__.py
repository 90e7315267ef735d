""" Package providing the geometric value objects used by lensletgen

    The :mod:`~.elem` subpackage provides:

        - Coordinate transformation support :mod:`~.transform`
        - Rays, intersection records and the surfaces rays are projected
          onto, :mod:`~.surfaces`
        - Convex polygons embedded in 3D, :mod:`~.polygon`

    All of these are immutable; operations return new objects.
"""
