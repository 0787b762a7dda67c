r"""
Core conversion routines for rotation representations

This module contains the core routines for converting between rotation quaternions, rotation matrices, and euler
angles.  All routines are implemented purely on numpy arrays (or array like objects) and are vectorized.

Euler angles are always expressed axis labeled, that is as ``(x, y, z)`` where each element is the rotation about
that axis, regardless of the order the rotations are applied in.  The order is carried separately.  For an order
``ijk`` the rotation matrix is the product :math:`\mathbf{R}=\mathbf{R}_i(\theta_i)\mathbf{R}_j(\theta_j)
\mathbf{R}_k(\theta_k)` and the quaternion is the matching Hamilton product
:math:`\mathbf{q}=\mathbf{q}_i(\theta_i)\otimes\mathbf{q}_j(\theta_j)\otimes\mathbf{q}_k(\theta_k)`.
"""

import logging

from typing import Sequence

import numpy as np

from vecmat._typing import ARRAY_LIKE, DOUBLE_ARRAY, EULER_ORDERS, SCALAR_OR_ARRAY

from vecmat.rotations.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                            _euler_axes, _euler_parity)
from vecmat.rotations.core.elementals import axis_quaternion, rot_axis, skew
from vecmat.rotations.core.quaternion_math import quaternion_multiplication


__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'rotmat_to_euler', 'euler_to_rotmat',
           'euler_to_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a scalar first rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}q_w \\ \mathbf{q}_v\end{array}\right] \\
        \mathbf{T} = (q_w^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_w
        \left[\mathbf{q}_v\times\right]

    where :math:`\mathbf{q}_v` is the vector portion of the quaternion, :math:`q_w` is the scalar portion of the
    quaternion, :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.  The resulting matrix rotates column vectors
    actively, so that ``quaternion_to_rotmat(q) @ v`` is the same as :math:`\mathbf{q}\otimes\mathbf{v}\otimes
    \mathbf{q}^*`.  The quaternion is assumed to be unit length.

    This function is vectorized, meaning that you can specify multiple rotation quaternions to be converted to matrices
    by specifying each quaternion as a column.  Each rotation matrix is stacked along the first axis of the output.

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qs = quaternion[0].reshape(-1, 1, 1)
    qv = quaternion[1:].reshape(3, -1)

    return ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3) + 2 * np.einsum('ij,jk->jik', qv, qv.T) +
            2 * qs * skew(qv)).squeeze()


def rotmat_to_euler(matrix: ARRAY_LIKE,
                    order: EULER_ORDERS = 'xyz',
                    clamp: bool = False) -> DOUBLE_ARRAY:
    r"""
    This function decomposes a rotation matrix into the axis labeled euler angles for the requested order.

    For an order ``ijk`` with parity :math:`s` (+1 for the cyclic orders xyz, yzx, zxy and -1 for the rest) the
    angles are

    .. math::
        \theta_j = \text{sin}^{-1}(s\,m_{ik}) \\
        \theta_i = \text{atan2}(-s\,m_{jk}, m_{kk}) \\
        \theta_k = \text{atan2}(-s\,m_{ij}, m_{ii})

    so that, for instance, the xyz order gives ``x = atan2(-m12, m22)``, ``y = asin(m02)`` and
    ``z = atan2(-m01, m00)``.

    The matrix must be a proper rotation matrix.  This is not checked.  When the middle angle is at :math:`\pm\pi/2`
    (gimbal lock) the outer two angles are not unique and one valid decomposition is returned.  If the argument to the
    arcsine drifts outside of :math:`[-1, 1]` (for instance from a matrix that is only nearly orthonormal) the middle
    angle is NaN unless ``clamp`` is ``True``, in which case the argument is clipped to the domain first.

    .. note::
        A matrix composed from a middle angle of exactly :math:`\pm\pi/2` is usually off by a rounding error or two,
        so its arcsine argument can land just past :math:`\pm 1` and give a NaN middle angle by default.  Pass
        ``clamp=True`` when decomposing rotations that may sit at gimbal lock.

    This function is vectorized, therefore you can input matrix as a nx3x3 stack of rotation matrices down the first
    axis and the result will be 3xn.

    :param matrix: The matrix(ces) to convert to euler angles
    :param order: The order of the rotations
    :param clamp: Whether to clip the arcsine argument to :math:`[-1, 1]`
    :return: The ``(x, y, z)`` euler angles in radians down the first axis
    :raises ValueError: if the order is not recognized or the matrix is not 3x3
    """

    i, j, k = _euler_axes(order)
    parity = _euler_parity((i, j, k))

    matrix = _check_matrix_array_and_shape(matrix)

    sine = parity * matrix[..., i, k]

    if clamp:
        clipped = np.clip(sine, -1, 1)

        if np.any(clipped != sine):
            _LOGGER.debug(f'Clamped the arcsine argument {sine} to {clipped} while decomposing for order {order}')

        sine = clipped

    angles = np.empty((3,) + sine.shape)

    # leave out of domain arguments as NaN
    with np.errstate(invalid='ignore'):
        angles[j] = np.arcsin(sine)

    angles[i] = np.arctan2(-parity * matrix[..., j, k], matrix[..., k, k])
    angles[k] = np.arctan2(-parity * matrix[..., i, j], matrix[..., i, i])

    return angles


def quaternion_to_euler(quaternion: ARRAY_LIKE,
                        order: EULER_ORDERS = 'xyz',
                        clamp: bool = False) -> DOUBLE_ARRAY:
    """
    This function converts a rotation quaternion to the axis labeled euler angles for the requested order.

    This function works by first converting the quaternion to a rotation matrix using :func:`quaternion_to_rotmat` and
    then using the function :func:`rotmat_to_euler` to find the euler angles.  See the documentation for those two
    functions for more information.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :param order: The order of the rotations
    :param clamp: Whether to clip the arcsine argument to :math:`[-1, 1]`
    :return: The euler angles corresponding to the rotation quaternion(s)
    """

    return rotmat_to_euler(quaternion_to_rotmat(quaternion), order=order, clamp=clamp)


def euler_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY,
                        order: EULER_ORDERS = 'xyz') -> DOUBLE_ARRAY:
    """
    This function composes axis labeled euler angles into a scalar first rotation quaternion.

    The three elemental quaternions (see :func:`.axis_quaternion`) are multiplied together in the order given by
    ``order``, left to right.  For instance, the xyz order results in ``qx(x) * qy(y) * qz(z)`` while zyx results in
    ``qz(z) * qy(y) * qx(x)``.  This exactly inverts :func:`rotmat_to_euler` away from gimbal lock.

    :param angles: The ``(x, y, z)`` angles in radians
    :param order: the order of the rotations
    :return: The rotation quaternion(s)
    :raises ValueError: if the order is not recognized or there are not 3 angles
    """

    if len(angles) != 3:
        raise ValueError('Exactly 3 euler angles are required')

    i, j, k = _euler_axes(order)

    result = quaternion_multiplication(axis_quaternion(i, angles[i]), axis_quaternion(j, angles[j]))

    return quaternion_multiplication(result, axis_quaternion(k, angles[k]))


def euler_to_rotmat(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY, order: EULER_ORDERS = 'xyz') -> DOUBLE_ARRAY:
    """
    This function converts axis labeled euler angles into a rotation matrix.

    The matrix is formed from the :func:`.rot_x`, :func:`.rot_y`, and :func:`.rot_z` elemental rotations multiplied
    together in the order given by ``order``, left to right, matching :func:`euler_to_quaternion`.

    :param angles: The ``(x, y, z)`` angles in radians
    :param order: The order of the rotations
    :return: The rotation matrix formed by the euler angles
    :raises ValueError: if the order is not recognized or there are not 3 angles
    """

    if len(angles) != 3:
        raise ValueError('Exactly 3 euler angles are required')

    rotation = np.eye(3)

    for axis in _euler_axes(order):
        rotation = rotation @ rot_axis(axis, angles[axis])

    return rotation
