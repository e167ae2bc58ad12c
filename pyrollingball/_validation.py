# -*- coding: utf-8 -*-
"""Code for validating inputs.

Created on October 17, 2026
@author: Donald Erb

"""

import numpy as np

from .utils import EmptyInputError, InvalidInputError


# boolean, signed integer, unsigned integer, and floating dtypes
_REAL_KINDS = 'biuf'


def _check_scalar_variable(value, allow_zero=False, variable_name='half_window',
                           **asarray_kwargs):
    """
    Ensures the input is a single value within the allowed range.

    Parameters
    ----------
    value : numpy.Number or array-like
        The value to check. Array-likes must contain exactly one item.
    allow_zero : bool, optional
        If False (default), only allows `value` > 0. If True, allows `value` >= 0.
    variable_name : str, optional
        The name displayed if an error occurs. Default is 'half_window'.
    **asarray_kwargs : dict
        Additional keyword arguments to pass to :func:`numpy.asarray`.

    Returns
    -------
    output : numpy.Number
        The verified scalar value.

    Raises
    ------
    ValueError
        Raised if `value` contains more than one item, or if it is less than or
        equal to 0 if `allow_zero` is False or less than 0 if `allow_zero` is True.

    """
    output = np.asarray(value, **asarray_kwargs)
    if output.size != 1:
        raise ValueError(f'{variable_name} must be a single value')
    # index with an empty tuple to get the single scalar while maintaining the numpy dtype
    output = output.reshape(())[()]
    if allow_zero:
        operation = np.less
        text = 'greater than or equal to'
    else:
        operation = np.less_equal
        text = 'greater than'
    if operation(output, 0):
        raise ValueError(f'{variable_name} must be {text} 0')

    return output


def _check_half_window(half_window, allow_zero=True, variable_name='half_window'):
    """
    Ensures the half-window is an integer and has an appropriate value.

    Parameters
    ----------
    half_window : int
        The number of points on each side of the center point within a window.
    allow_zero : bool, optional
        If True (default), allows `half_window` to be 0, which gives windows containing
        just the center point; otherwise, `half_window` must be at least 1.
    variable_name : str, optional
        The name displayed if an error occurs. Default is 'half_window'.

    Returns
    -------
    output_half_window : int
        The verified half-window value.

    Raises
    ------
    TypeError
        Raised if `half_window` is a boolean or string, or if the integer converted
        `half_window` is not equal to the input `half_window`.
    ValueError
        Raised if `half_window` is not a single value, is out of the allowed range,
        or is too large to be used as an index.

    """
    if isinstance(half_window, (str, bytes)) or np.asarray(half_window).dtype.kind == 'b':
        raise TypeError(f'{variable_name} must be an integer')
    try:
        output_half_window = _check_scalar_variable(
            half_window, allow_zero, variable_name=variable_name, dtype=np.intp
        )
    except OverflowError as e:
        raise ValueError(f'{variable_name} is too large') from e
    if output_half_window != np.asarray(half_window).reshape(-1)[0]:
        raise TypeError(f'{variable_name} must be an integer')

    return int(output_half_window)


def _check_array(array, dtype=None, check_finite=False, name='data'):
    """
    Validates the shape and values of the input array and controls the output parameters.

    Parameters
    ----------
    array : array-like
        The input array to check.
    dtype : type or numpy.dtype, optional
        The dtype to cast the output array. Default is None, which uses the typing of `array`.
    check_finite : bool, optional
        If True, will raise an error if any values in `array` are not finite. Default is False,
        which skips the check.
    name : str, optional
        The name for the variable if an exception is raised. Default is 'data'.

    Returns
    -------
    output : numpy.ndarray, shape (N,)
        The array after performing all validations.

    Raises
    ------
    InvalidInputError
        Raised if `array` cannot be converted to a numeric array, if it is a scalar,
        if `array` does not have a shape of (N,) or (N, 1) or (1, N), or if `check_finite`
        is True and `array` contains non-finite values.
    EmptyInputError
        Raised if `array` does not contain any values.

    Notes
    -----
    Arrays with a shape of (N, 1) or (1, N) are reshaped to (N,).

    The dtype check is done before casting to `dtype` so that strings such as ``'1.5'``
    are not silently converted to numbers.

    """
    try:
        output = np.asarray(array)
    except (TypeError, ValueError) as e:  # eg. ragged nested sequences
        raise InvalidInputError(f'{name} must be an array-like of real numbers') from e

    if output.dtype.kind not in _REAL_KINDS:
        raise InvalidInputError(
            f'{name} must be an array-like of real numbers, not {type(array).__name__}'
        )
    elif not output.ndim:
        raise InvalidInputError(f'{name} must be an array-like, not a scalar')
    dimensions = output.ndim
    if dimensions == 2 and 1 in output.shape:
        output = output.reshape(-1)
    elif dimensions != 1:
        raise InvalidInputError(f'{name} must be a one dimensional array')
    if not output.size:
        raise EmptyInputError(f'{name} must not be empty')
    if dtype is not None:
        output = output.astype(dtype, copy=False)
    if check_finite and not np.isfinite(output).all():
        raise InvalidInputError(f'{name} must not contain nan or inf values')

    return output


def _check_sized_array(array, length, check_finite=False, name='data'):
    """
    Validates the input array and ensures its length is correct.

    Parameters
    ----------
    array : array-like
        The input array to check.
    length : int
        The length that the input should have.
    check_finite : bool, optional
        If True, will raise an error if any values if `array` are not finite. Default is False,
        which skips the check.
    name : str, optional
        The name for the variable if an exception is raised. Default is 'data'.

    Returns
    -------
    output : numpy.ndarray, shape (N,)
        The array after performing all validations.

    Raises
    ------
    ValueError
        Raised if `array` does not match `length`.

    """
    output = _check_array(array, check_finite=check_finite, name=name)
    if output.shape[-1] != length:
        raise ValueError(
            f'length mismatch for {name}; expected {length} but got {output.shape[-1]}'
        )
    return output
