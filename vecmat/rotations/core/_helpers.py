import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS


_EULER_AXES: dict[str, tuple[int, int, int]] = {'xyz': (0, 1, 2),
                                                'xzy': (0, 2, 1),
                                                'yxz': (1, 0, 2),
                                                'yzx': (1, 2, 0),
                                                'zxy': (2, 0, 1),
                                                'zyx': (2, 1, 0)}
"""
The axis indices for each supported euler order, in the order the elemental rotations appear in the product
"""


def _check_array_and_shape(input: ARRAY_LIKE,
                           dtype: type = np.float64,
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

    # always hand back a fresh array so callers can never mutate the input
    return np.array(input, dtype=dtype)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, dtype: type = np.float64) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, dtype, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, dtype: type = np.float64) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, dtype, first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, dtype: type = np.float64) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, dtype, second_last_axis_length=3, last_axis_length=3)


def _euler_axes(order: EULER_ORDERS | str) -> tuple[int, int, int]:
    # EulerOrder members are str subclasses so their value is the lowercase axis string
    key = str(getattr(order, 'value', order)).lower()

    try:
        return _EULER_AXES[key]
    except KeyError:
        raise ValueError(f'Invalid order {order!r}.  Must be one of {", ".join(_EULER_AXES)}') from None


def _euler_parity(axes: tuple[int, int, int]) -> int:
    # +1 for the cyclic permutations (xyz, yzx, zxy), -1 for the anti-cyclic ones
    return 1 if (axes[1] - axes[0]) % 3 == 1 else -1
