# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Free vectors in three dimensions.

The :class:`Vector3` value type is used for positions, translations, and rotation axes throughout the package.
"""

from dataclasses import dataclass
from typing import Self

import numpy as np

from posemath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from posemath.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["Vector3", "vector3_create", "vector3_multiply", "vector3_add"]


@dataclass(frozen=True)
class Vector3:
    """
    An immutable 3 element vector.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the vector as a new length 3 numpy array ``[x, y, z]``.
        """

        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, vector: ARRAY_LIKE) -> Self:
        """
        Builds a vector from a length 3 array like.

        :param vector: the components ``[x, y, z]``
        :return: the vector
        :raises ValueError: if the input is not a length 3, one dimensional array like
        """

        x, y, z = _check_vector_array_and_shape(vector)

        return cls(float(x), float(y), float(z))


def vector3_create(x: float, y: float, z: float) -> Vector3:
    """
    Creates a vector from its components.

    :param x: the x component
    :param y: the y component
    :param z: the z component
    :return: the vector
    """

    return Vector3(float(x), float(y), float(z))


def vector3_multiply(scalar: float, vector: Vector3) -> Vector3:
    """
    Scales a vector by a scalar.

    :param scalar: the value to scale by
    :param vector: the vector to scale
    :return: ``scalar * vector``
    """

    return Vector3(vector.x * scalar, vector.y * scalar, vector.z * scalar)


def vector3_add(vector_1: Vector3, vector_2: Vector3) -> Vector3:
    """
    Adds two vectors.

    :param vector_1: the first vector
    :param vector_2: the second vector
    :return: ``vector_1 + vector_2``
    """

    return Vector3(vector_1.x + vector_2.x, vector_1.y + vector_2.y, vector_1.z + vector_2.z)
