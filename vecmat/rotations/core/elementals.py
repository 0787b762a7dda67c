import numpy as np

from vecmat._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from vecmat.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "rot_axis", "skew", "axis_quaternion"]


def _check_axis(axis: int):
    if axis not in (0, 1, 2):
        raise ValueError(f'axis must be 0, 1, or 2, not {axis}')


def rot_axis(axis: int, theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Forms the right handed elemental rotation matrix(ces) about axis index ``axis`` (0 for x, 1 for y, 2 for z).

    The rotation axis keeps a 1 on the diagonal.  Calling the next two axes (cyclically) :math:`b` and :math:`c`,
    the remaining elements are

    .. math::
        m_{bb}=m_{cc}=\text{cos}(\theta) \qquad m_{cb}=\text{sin}(\theta) \qquad m_{bc}=-\text{sin}(\theta)

    which gives :func:`rot_x`, :func:`rot_y`, and :func:`rot_z` for the three axes.  If theta is an array then each
    angle has a matrix down the first axis of the output, otherwise the output is 3x3.

    :param axis: the index of the axis to rotate about
    :param theta: The angles in radians to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    :raises ValueError: if ``axis`` is not 0, 1, or 2
    """

    _check_axis(axis)

    theta = np.asarray(theta, dtype=np.float64)

    b = (axis + 1) % 3
    c = (axis + 2) % 3

    cosine = np.cos(theta)
    sine = np.sin(theta)

    matrix = np.zeros(theta.shape + (3, 3))
    matrix[..., axis, axis] = 1
    matrix[..., b, b] = cosine
    matrix[..., c, c] = cosine
    matrix[..., c, b] = sine
    matrix[..., b, c] = -sine

    return matrix


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta can be a scalar or an array of angles.  See :func:`rot_axis`.
    """

    return rot_axis(0, theta)


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the y axis by angle theta.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]
    """

    return rot_axis(1, theta)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]
    """

    return rot_axis(2, theta)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Forms the skew symmetric cross product matrix of a vector, defined so that

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \qquad
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    Multiple vectors can be given as the columns of a 3xn array, in which case the output is nx3x3.  A single vector
    (or a 3x1 array) gives a 3x3 matrix.

    :param vector: The vector(s) to form the cross product matrix for
    :return: The skew symmetric cross product matrix(ces)
    """

    vector = _check_vector_array_and_shape(vector)

    matrix = np.zeros(vector.shape[1:] + (3, 3))

    for row, col, element, sign in [(0, 1, 2, -1), (0, 2, 1, 1), (1, 2, 0, -1)]:
        matrix[..., row, col] = sign * vector[element]
        matrix[..., col, row] = -sign * vector[element]

    return matrix.squeeze()


def axis_quaternion(axis: int, theta: SCALAR_OR_ARRAY, dtype: type = np.float64) -> DOUBLE_ARRAY:
    r"""
    Forms the rotation quaternion(s) for a right handed rotation about a single coordinate axis.

    For the x axis this is

    .. math::
        \mathbf{q}_x(\theta)=\left[\begin{array}{cccc}\text{cos}(\frac{\theta}{2}) & \text{sin}(\frac{\theta}{2})
        & 0 & 0\end{array}\right]^T

    and the y and z axes place the sine term in the corresponding vector slot.  Quaternions are scalar first.  If
    theta is an array then the output is 4xn with each quaternion down the first axis.

    :param axis: the index of the axis to rotate about (0 for x, 1 for y, 2 for z)
    :param theta: the rotation angle(s) in radians
    :param dtype: the floating point type to build the quaternion(s) with
    :return: the axis rotation quaternion(s)
    :raises ValueError: if ``axis`` is not 0, 1, or 2
    """

    _check_axis(axis)

    half = np.asarray(theta, dtype=dtype) / 2

    quaternion = np.zeros((4,) + half.shape, dtype=dtype)
    quaternion[0] = np.cos(half)
    quaternion[axis + 1] = np.sin(half)

    return quaternion
