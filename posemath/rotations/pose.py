# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Rigid poses (homogeneous transforms) built from a translation and a unit quaternion.

An :class:`Hmat` named ``h_a2b`` maps coordinates in frame ``a`` to coordinates in frame ``b``:

.. math::
    \mathbf{y}_b = \mathbf{T}(\mathbf{q}_{a2b})\mathbf{y}_a + \mathbf{p}_{a2b}

where :math:`\mathbf{T}` is the :class:`.Dcm` of the quaternion.  Poses chain left to right, so
``hmat_composite(h_a2b, h_b2c)`` is ``h_a2c``.

The averaging routines take the relative pose between the two inputs, scale its translation and its (wrapped) rotation
angle, and apply the scaled offset back onto the first pose.  For example::

    >>> from posemath.rotations import hmat_create, hmat_average, quaternion_create, Vector3
    >>> h_i2a = hmat_create(quaternion_create(0, 0, 0, 1), Vector3(0, 0, 0))
    >>> h_i2b = hmat_create(quaternion_create(0, 0, 1, 0), Vector3(2, 0, 0))
    >>> hmat_average(h_i2b, h_i2a).pos
    Vector3(x=1.0, y=0.0, z=0.0)
"""

from dataclasses import dataclass, field

from posemath.rotations.core._helpers import wrap_angle
from posemath.rotations.core.vector3 import Vector3, vector3_add, vector3_multiply
from posemath.rotations.core.quaternion_math import (Quaternion, RotAxisAngle, DEGENERATE_AXIS_THRESHOLD,
                                                     quaternion_composite, quaternion_inverse, quaternion_identity,
                                                     quaternion_to_axis_angle, axis_angle_to_quaternion)
from posemath.rotations.core.dcm import quaternion_transform_vector
from posemath.utilities.options import UserOptions
from posemath.utilities.mixin_classes import UserOptionConfigured


__all__ = ["Hmat", "hmat_create", "hmat_identity", "hmat_inverse", "hmat_composite", "hmat_relative",
           "hmat_transform_point", "hmat_interpolate", "hmat_average", "PoseAveragerOptions", "PoseAverager"]


@dataclass(frozen=True)
class Hmat:
    """
    An immutable rigid pose made of a translation and a unit quaternion rotation.
    """

    pos: Vector3 = field(default_factory=Vector3)
    quat: Quaternion = field(default_factory=quaternion_identity)


def hmat_create(quat: Quaternion, pos: Vector3) -> Hmat:
    """
    Creates a pose from a rotation and a translation.

    The quaternion is stored as given and should already be unit length.

    :param quat: the rotation of the pose
    :param pos: the translation of the pose
    :return: the pose
    """

    return Hmat(pos=pos, quat=quat)


def hmat_identity() -> Hmat:
    """
    Returns the pose with no rotation and no translation.
    """

    return Hmat(Vector3(0.0, 0.0, 0.0), quaternion_identity())


def hmat_inverse(hmat: Hmat) -> Hmat:
    """
    Inverts a pose, turning ``h_a2b`` into ``h_b2a``.

    :param hmat: the pose to invert
    :return: the inverse pose
    """

    quat = quaternion_inverse(hmat.quat)

    return Hmat(pos=vector3_multiply(-1.0, quaternion_transform_vector(quat, hmat.pos)), quat=quat)


def hmat_composite(h_a2b: Hmat, h_b2c: Hmat) -> Hmat:
    """
    Chains two poses, turning ``h_a2b`` and ``h_b2c`` into ``h_a2c``.

    The operand order matters: the first pose is applied first.

    :param h_a2b: the pose taking frame ``a`` to frame ``b``
    :param h_b2c: the pose taking frame ``b`` to frame ``c``
    :return: the pose taking frame ``a`` to frame ``c``
    """

    return Hmat(pos=vector3_add(quaternion_transform_vector(h_b2c.quat, h_a2b.pos), h_b2c.pos),
                quat=quaternion_composite(h_a2b.quat, h_b2c.quat))


def hmat_relative(h_i2c: Hmat, h_i2a: Hmat) -> Hmat:
    """
    Computes the pose of ``c`` relative to ``a`` when both are known relative to a common frame ``i``.

    :param h_i2c: the end pose
    :param h_i2a: the start pose
    :return: ``h_a2c``
    """

    return hmat_composite(hmat_inverse(h_i2a), h_i2c)


def hmat_transform_point(hmat: Hmat, point: Vector3) -> Vector3:
    """
    Maps a point through a pose, taking coordinates in frame ``a`` to frame ``b`` for ``h_a2b``.

    :param hmat: the pose
    :param point: the point expressed in the source frame
    :return: the point expressed in the destination frame
    """

    return vector3_add(quaternion_transform_vector(hmat.quat, point), hmat.pos)


def hmat_interpolate(h_i2a: Hmat, h_i2b: Hmat, fraction: float,
                     threshold: float = DEGENERATE_AXIS_THRESHOLD) -> Hmat:
    """
    Interpolates between two poses expressed in the same frame.

    The relative pose ``h_a2b`` is computed and scaled: its translation is multiplied by ``fraction`` and its rotation
    angle is wrapped into (-pi, pi] before being multiplied by ``fraction``.  Wrapping first makes the interpolation
    follow the short way around, which matters for relative rotations close to pi.  The scaled offset is then applied
    onto ``h_i2a``.

    When the two poses are equal, or ``fraction`` is 0, ``h_i2a`` is returned unchanged rather than passing through
    the renormalizing arithmetic.

    :param h_i2a: the pose at ``fraction = 0``
    :param h_i2b: the pose at ``fraction = 1``
    :param fraction: how far from ``h_i2a`` towards ``h_i2b`` to go
    :param threshold: the vector part norm below which the relative rotation is treated as zero
    :return: the interpolated pose
    """

    if fraction == 0 or h_i2a == h_i2b:
        return h_i2a

    h_a2b = hmat_relative(h_i2b, h_i2a)

    axis_angle = quaternion_to_axis_angle(h_a2b.quat, threshold=threshold)

    scaled_rotation = RotAxisAngle(axis_angle.axis, wrap_angle(axis_angle.angle) * fraction)

    h_a2c = Hmat(pos=vector3_multiply(fraction, h_a2b.pos), quat=axis_angle_to_quaternion(scaled_rotation))

    return hmat_composite(h_i2a, h_a2c)


def hmat_average(h_i2b: Hmat, h_i2a: Hmat) -> Hmat:
    """
    Computes the pose midway between two poses expressed in the same frame.

    This is :func:`hmat_interpolate` with a fraction of one half.

    :param h_i2b: the second pose
    :param h_i2a: the first pose (the one the midpoint offset is applied to)
    :return: the midpoint pose ``h_i2c``
    """

    return hmat_interpolate(h_i2a, h_i2b, 0.5)


@dataclass
class PoseAveragerOptions(UserOptions):
    """
    Options for the :class:`PoseAverager` class.
    """

    fraction: float = 0.5
    """
    How far from the first pose towards the second pose the average lies (0.5 is the midpoint)
    """

    degenerate_axis_threshold: float = DEGENERATE_AXIS_THRESHOLD
    """
    The quaternion vector part norm below which the relative rotation is treated as no rotation
    """


class PoseAverager(UserOptionConfigured[PoseAveragerOptions], PoseAveragerOptions):
    """
    A configurable pose averager.

    This wraps :func:`hmat_interpolate` so that a weighting and degeneracy threshold can be chosen once and reused::

        >>> from posemath.rotations import PoseAverager, PoseAveragerOptions
        >>> averager = PoseAverager(PoseAveragerOptions(fraction=0.25))
        >>> h_i2c = averager(h_i2b, h_i2a)

    The settings can be changed directly on the instance and restored with :meth:`reset_settings`.
    """

    def __init__(self, options: PoseAveragerOptions | None = None):
        """
        :param options: the options to configure the averager with.  Defaults are used if ``None``
        """

        super().__init__(PoseAveragerOptions, options=options)

    def average(self, h_i2b: Hmat, h_i2a: Hmat) -> Hmat:
        """
        Averages two poses using the current settings.

        :param h_i2b: the second pose
        :param h_i2a: the first pose
        :return: the weighted average pose
        """

        return hmat_interpolate(h_i2a, h_i2b, self.fraction, threshold=self.degenerate_axis_threshold)

    def __call__(self, h_i2b: Hmat, h_i2a: Hmat) -> Hmat:
        return self.average(h_i2b, h_i2a)
