import numpy as np

from posemath._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE,
                           first_axis_length: int | None = None,
                           second_last_axis_length: int | None = None,
                           last_axis_length: int | None = None) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if second_last_axis_length is not None:
        if len(in_shape) < 2 or in_shape[-2] != second_last_axis_length:
            raise ValueError(f'The length of the second to last axis must be {second_last_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    # always hand back a fresh array so callers can never alias the input
    return np.array(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    array = _check_array_and_shape(quaternion, first_axis_length=4)
    if array.ndim != 1:
        raise ValueError('The quaternion must be one dimensional')
    return array


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    array = _check_array_and_shape(vector, first_axis_length=3)
    if array.ndim != 1:
        raise ValueError('The vector must be one dimensional')
    return array


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    array = _check_array_and_shape(matrix, second_last_axis_length=3, last_axis_length=3)
    if array.ndim != 2:
        raise ValueError('The matrix must be two dimensional')
    return array


def wrap_angle(angle: float) -> float:
    """
    Wraps an angle in radians into the half open interval (-pi, pi].

    :param angle: the angle to wrap in radians
    :return: the equivalent angle in (-pi, pi]
    """

    wrapped = float(np.mod(angle + np.pi, 2 * np.pi) - np.pi)

    # mod maps pi onto -pi, keep the upper bound closed instead
    if wrapped <= -np.pi:
        wrapped += 2 * np.pi

    return wrapped
