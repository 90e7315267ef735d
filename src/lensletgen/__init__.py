# -*- coding: utf-8 -*-
""" The **lensletgen** package generates hexagonal lenslet tilings for
    near-eye displays

    A hexagonal lattice laid out on the eyebox plane is projected onto a
    spherical display surface. Each projected hexagon is flattened onto its
    best fit plane and becomes the aperture of a paraxial lenslet.

    The pipeline is contained in the :mod:`~.display` subpackage. It is
    supported by the following subpackages:

        - :mod:`~.elem`: geometric value objects: transforms, rays,
          surfaces and convex polygons
        - :mod:`~.oprops`: the paraxial lens model
        - :mod:`~.lattice`: hexagonal lattice bases and tile enumeration

    The :mod:`~.mpl` subpackage draws lenslet tilings using the
    :doc:`matplotlib <matplotlib:index>` package.

    The :mod:`~.util` subpackage provides vector and rotation helpers.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where
    detailed, textual output is supported. Classes may implement the
    `listobj_str` method that returns a string containing a formatted
    description of the object, e.g. :meth:`.ConvexPolygon.listobj_str` and
    :meth:`.ParaxialLens.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
