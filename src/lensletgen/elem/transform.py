#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Rigid coordinate transforms between local and world frames

    A :class:`Transform` packages a rotation matrix and a translation vector.
    Applied to a point p in the local frame it returns the world coordinates
    rot.dot(p) + t. The columns of rot are the local axes expressed in world
    coordinates.

.. codeauthor: Michael J. Hayford
"""

import attr
import numpy as np

from lensletgen.util.misc_math import euler2rot3d, frozen_array


def _check_rotation(instance, attribute, value):
    if value.shape != (3, 3):
        raise ValueError(f"rotation must be 3x3, got shape {value.shape}")
    if not np.allclose(value.T.dot(value), np.identity(3), atol=1e-9):
        raise ValueError("rotation matrix is not orthonormal")
    if np.linalg.det(value) < 0.:
        raise ValueError("rotation matrix is not right handed (det = -1)")


@attr.s(frozen=True, eq=False, repr=False)
class Transform():
    """ Rigid transform (rot, t) from a local frame to the world frame.

    Attributes:
        rot: 3x3 orthonormal rotation matrix with determinant +1
        t: translation vector, the local origin in world coordinates
    """
    rot = attr.ib(converter=lambda r: frozen_array(r, (3, 3)),
                  validator=_check_rotation)
    t = attr.ib(converter=lambda t: frozen_array(t, (3,)))

    def __repr__(self):
        return "{!s}(rot={!r}, t={!r})".format(type(self).__name__,
                                               self.rot.tolist(),
                                               self.t.tolist())

    def listobj_str(self):
        o_str = f"rotation:\n{self.rot}\n"
        o_str += f"translation: {self.t}\n"
        return o_str

    @classmethod
    def identity(cls):
        return cls(np.identity(3), np.zeros(3))

    @classmethod
    def translation(cls, x, y, z):
        return cls(np.identity(3), np.array([x, y, z]))

    @classmethod
    def from_euler(cls, alpha=0., beta=0., gamma=0., t=(0., 0., 0.)):
        """ Transform from euler angles (degrees) and a translation.

        The angles follow the optical design convention: alpha and beta are
        left-handed rotations about x and y, gamma is a right-handed rotation
        about z.
        """
        return cls(euler2rot3d(np.array([alpha, beta, gamma])), t)

    def apply(self, pts):
        """ map a point, or an (N, 3) array of points, to world coords """
        pts = np.asarray(pts, dtype=np.float64)
        return pts.dot(self.rot.T) + self.t

    def apply_dir(self, d):
        """ rotate a direction vector, or (N, 3) array of them """
        return np.asarray(d, dtype=np.float64).dot(self.rot.T)

    def inverse(self):
        rt = self.rot.transpose()
        return Transform(rt, -rt.dot(self.t))

    def cascade(self, other):
        """ return the transform equivalent to applying `other` then `self` """
        r_new, t_new = cascade_transform(self.rot, self.t, other.rot, other.t)
        return Transform(r_new, t_new)


def world2local(tfrm: Transform) -> Transform:
    """ return the world to local transform for local to world `tfrm` """
    return tfrm.inverse()


def cascade_transform(r_prev, t_prev, r_seg, t_seg):
    """ take the seg transform and cascade it with the prev transform """
    return r_prev.dot(r_seg), r_prev.dot(t_seg) + t_prev


def transfer_coords(r_seg, t_seg, pt_s1, dir_s1):
    """ take p and d in s1 coords of seg and transfer them to s2 coords """
    rt = r_seg.transpose()
    return rt.dot(pt_s1 - t_seg), rt.dot(dir_s1)
