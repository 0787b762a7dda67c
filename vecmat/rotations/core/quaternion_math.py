import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY

from vecmat.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_inverse", "quaternion_multiplication",
           "quaternion_division"]


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion(s) to unit length.

    The sign of the quaternion is left alone.  A zero quaternion normalizes to NaN.

    :param quaternion: the quaternion(s) to normalize
    :returns: The normalized quaternions
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    with np.errstate(divide='ignore', invalid='ignore'):
        work_quaternion /= np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the conjugate of a scalar first quaternion, which negates the vector portion.

    .. math::
        \mathbf{q}^*=\left[\begin{array}{cccc}q_w & -q_x & -q_y & -q_z\end{array}\right]^T

    For unit (rotation) quaternions the conjugate is also the inverse.

    :param quaternion: The quaternion(s) to conjugate
    :return: the conjugate quaternion(s)
    """

    # the check returns a copy so this never touches the caller's data
    quaternion = _check_quaternion_array_and_shape(quaternion)

    quaternion[1:] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of an arbitrary (not necessarily unit) quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}1&0&0&0\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates the Hamilton product.  Mathematically

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    The inverse of a zero quaternion is not guarded against and is full of NaN.

    This function is vectorized, meaning that you can specify multiple quaternions to be inverted by specifying each
    quaternion as a column.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion(s)
    """

    conjugate = quaternion_conjugate(quaternion)

    with np.errstate(divide='ignore', invalid='ignore'):
        return conjugate / (conjugate * conjugate).sum(axis=0)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product of two scalar first quaternions.

    Component wise this is

    .. math::
        w = w_1w_2 - x_1x_2 - y_1y_2 - z_1z_2 \\
        x = w_1x_2 + x_1w_2 + y_1z_2 - z_1y_2 \\
        y = w_1y_2 - x_1z_2 + y_1w_2 + z_1x_2 \\
        z = w_1z_2 + x_1y_2 - y_1x_2 + z_1w_2

    The product is not commutative.  When both inputs represent rotations the result applies
    ``quaternion_2_in`` first and then ``quaternion_1_in``.

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first (left) quaternion to multiply
    :param quaternion_2_in: The second (right) quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    w1, x1, y1, z1 = quaternion_1
    w2, x2, y2, z2 = quaternion_2

    return np.array([w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                     w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                     w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                     w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2])


def quaternion_division(quaternion_1_in: ARRAY_LIKE,
                        quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function divides one quaternion by another from the right.

    The result :math:`\mathbf{r}` solves :math:`\mathbf{q}_1=\mathbf{r}\otimes\mathbf{q}_2`, that is

    .. math::
        \mathbf{r}=\mathbf{q}_1\otimes\mathbf{q}_2^{-1}

    Dividing by a zero quaternion is not guarded against and results in NaN values.

    :param quaternion_1_in: The dividend quaternion(s)
    :param quaternion_2_in: The divisor quaternion(s)
    :return: The quotient quaternion(s)
    """

    return quaternion_multiplication(quaternion_1_in, quaternion_inverse(quaternion_2_in))
