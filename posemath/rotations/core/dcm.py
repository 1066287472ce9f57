# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Direction cosine matrices and the quaternion/matrix conversions.

.. warning::
    A :class:`Dcm` stores the *transpose* of the usual (active, body to world) rotation matrix.  That is,
    :math:`\mathbf{T}=\mathbf{R}^T` where :math:`\mathbf{R}` rotates a vector by the quaternion.  Applying a
    :class:`Dcm` with :func:`dcm_transform_vector` therefore expresses a fixed vector in the rotated frame (a frame
    transformation).  Matrices built elsewhere with the active convention must be transposed before being wrapped in a
    :class:`Dcm`; nothing can detect the mix up at run time.
"""

from dataclasses import dataclass, field
from typing import Self

import numpy as np

from posemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from posemath.rotations.core._helpers import _check_matrix_array_and_shape
from posemath.rotations.core.quaternion_math import Quaternion, quaternion_normalize
from posemath.rotations.core.vector3 import Vector3


__all__ = ["Dcm", "quaternion_to_dcm", "dcm_to_quaternion", "dcm_transform_vector", "quaternion_transform_vector"]


@dataclass(frozen=True, eq=False)
class Dcm:
    """
    An immutable 3x3 rotation matrix in the frame transformation (transposed) convention.

    The matrix is copied on construction and the stored array is read only.  Orthonormality is not checked.
    """

    e: DOUBLE_ARRAY = field(default_factory=lambda: np.eye(3))

    def __post_init__(self):
        matrix = _check_matrix_array_and_shape(self.e)
        matrix.setflags(write=False)
        object.__setattr__(self, 'e', matrix)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dcm):
            return NotImplemented

        return bool(np.array_equal(self.e, other.e))

    __hash__ = None

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns a writeable copy of the matrix.
        """

        return self.e.copy()

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the identity matrix (no rotation).
        """

        return cls(np.eye(3))


def quaternion_to_dcm(quaternion: Quaternion) -> Dcm:
    r"""
    Converts a unit quaternion into a :class:`Dcm`.

    The entries are

    .. math::
        \mathbf{T}=\left[\begin{array}{ccc}1-2(y^2+z^2) & 2(xy+wz) & 2(xz-wy) \\
        2(xy-wz) & 1-2(x^2+z^2) & 2(yz+wx) \\
        2(xz+wy) & 2(yz-wx) & 1-2(x^2+y^2)\end{array}\right]

    which is the transpose of the matrix that rotates vectors by the quaternion.

    :param quaternion: the rotation to convert
    :return: the rotation matrix in the stored convention
    """

    q = quaternion

    xx = q.x * q.x
    yy = q.y * q.y
    zz = q.z * q.z
    xy = q.x * q.y
    xz = q.x * q.z
    yz = q.y * q.z
    wx = q.w * q.x
    wy = q.w * q.y
    wz = q.w * q.z

    return Dcm(np.array([[1.0 - 2.0 * (yy + zz), 2.0 * (xy + wz), 2.0 * (xz - wy)],
                         [2.0 * (xy - wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + wx)],
                         [2.0 * (xz + wy), 2.0 * (yz - wx), 1.0 - 2.0 * (xx + yy)]]))


def dcm_to_quaternion(dcm: Dcm) -> Quaternion:
    r"""
    Converts a :class:`Dcm` into a unit quaternion.

    The squares of all four quaternion components are first computed from the diagonal

    .. math::
        w^2 = \frac{1}{4}(1+t_{00}+t_{11}+t_{22}) \\
        x^2 = \frac{1}{4}(1+t_{00}-t_{11}-t_{22}) \\
        y^2 = \frac{1}{4}(1-t_{00}+t_{11}-t_{22}) \\
        z^2 = \frac{1}{4}(1-t_{00}-t_{11}+t_{22})

    and the largest is used as the pivot.  Its square root gives that component and the remaining three come from the
    sums and differences of the off diagonal terms divided by four times the pivot, so the division is never by a
    small number.  Ties are broken in the order w, x, y, z.  The result is renormalized.

    The input is assumed to be orthonormal.  This is not checked.

    :param dcm: the rotation matrix in the stored convention
    :return: the unit quaternion
    """

    t = dcm.e

    squares = 0.25 * np.array([1.0 + t[0, 0] + t[1, 1] + t[2, 2],
                               1.0 + t[0, 0] - t[1, 1] - t[2, 2],
                               1.0 - t[0, 0] + t[1, 1] - t[2, 2],
                               1.0 - t[0, 0] - t[1, 1] + t[2, 2]])

    # argmax returns the first maximum, giving the w > x > y > z tie break
    pivot_index = int(np.argmax(squares))
    pivot = np.sqrt(squares[pivot_index])
    denominator = 4.0 * pivot

    if pivot_index == 0:
        w = pivot
        x = (t[1, 2] - t[2, 1]) / denominator
        y = (t[2, 0] - t[0, 2]) / denominator
        z = (t[0, 1] - t[1, 0]) / denominator

    elif pivot_index == 1:
        x = pivot
        w = (t[1, 2] - t[2, 1]) / denominator
        y = (t[0, 1] + t[1, 0]) / denominator
        z = (t[2, 0] + t[0, 2]) / denominator

    elif pivot_index == 2:
        y = pivot
        w = (t[2, 0] - t[0, 2]) / denominator
        x = (t[0, 1] + t[1, 0]) / denominator
        z = (t[1, 2] + t[2, 1]) / denominator

    else:
        z = pivot
        w = (t[0, 1] - t[1, 0]) / denominator
        x = (t[2, 0] + t[0, 2]) / denominator
        y = (t[1, 2] + t[2, 1]) / denominator

    return quaternion_normalize(Quaternion(float(x), float(y), float(z), float(w)))


def dcm_transform_vector(dcm: Dcm, vector: Vector3) -> Vector3:
    """
    Multiplies a vector by the matrix as stored (``dcm.e @ vector``).

    :param dcm: the rotation matrix
    :param vector: the vector to transform
    :return: the transformed vector
    """

    return Vector3.from_array(dcm.e @ vector.as_array())


def quaternion_transform_vector(quaternion: Quaternion, vector: Vector3) -> Vector3:
    r"""
    Transforms a vector by a quaternion through its :class:`Dcm`.

    This is the same as the sandwich product :math:`\mathbf{q}^{-1}\otimes\mathbf{v}\otimes\mathbf{q}`.

    :param quaternion: the rotation
    :param vector: the vector to transform
    :return: the transformed vector
    """

    return dcm_transform_vector(quaternion_to_dcm(quaternion), vector)
