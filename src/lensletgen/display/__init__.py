""" Package generating lenslet tilings of a spherical display surface

    The :mod:`~.display` subpackage contains the tiling pipeline:

        - projection of points and polygons onto surfaces,
          :mod:`~.projection`
        - best fit planes and planar polygons, :mod:`~.bestfit`
        - sampling of the field of view boundary on a sphere,
          :mod:`~.sampler`
        - eyebox tile enumeration and lenslet generation, :mod:`~.lenslets`
        - tabular reports of generated lenslets, :mod:`~.analysis`

    Units and tolerances are in :mod:`~.model_constants`; the exceptions
    raised for invalid configurations are in :mod:`~.displayerror`.
"""
