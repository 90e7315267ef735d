""" Package for optical property modeling of lenslets

    The :mod:`~.oprops` subpackage provides the ideal thin lens model used
    for each lenslet, :mod:`~.paraxiallens`.
"""
