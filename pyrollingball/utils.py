# -*- coding: utf-8 -*-
"""Helper functions for pyrollingball.

Created on October 17, 2026
@author: Donald Erb

"""

import inspect
import os
import warnings

import numpy as np
from scipy.ndimage import correlate1d, maximum_filter1d, minimum_filter1d


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


class InvalidInputError(TypeError):
    """
    Error raised when the input data is not a sequence of real numbers.

    Covers inputs such as None, strings, scalars, mappings, ragged or multidimensional
    nestings, non-numeric elements, and non-finite values when finite values are required.
    """


class EmptyInputError(ValueError):
    """Error raised when the input data has no values."""


class ParameterWarning(UserWarning):
    """
    Warning issued when a parameter value is outside of the recommended range.

    For cases where a parameter value is valid and will not cause errors, but is
    outside of the recommended range of values and as a result may give results
    that are not useful, such as a window that covers all of the data.
    """


class SortingWarning(UserWarning):
    """Warning issued when input x-values were marked as sorted but are not."""


def _warn(message, category):
    """
    Issues a warning that points to the first calling code outside of pyrollingball.

    Parameters
    ----------
    message : str
        The warning message.
    category : type[Warning]
        The warning class.

    Notes
    -----
    Public methods reach the code issuing warnings through a varying number of
    wrappers, so a fixed `stacklevel` would point to a different file for the
    functional and object-oriented interfaces.

    """
    frame = inspect.currentframe().f_back
    stacklevel = 2
    try:
        while frame is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
            frame = frame.f_back
            stacklevel += 1
    finally:
        del frame
    warnings.warn(message, category, stacklevel=stacklevel)


# statistic -> (scipy filter, value used outside of the data so that it never wins);
# the mean is handled separately as a sum of each window
_WINDOW_FILTERS = {
    'min': (minimum_filter1d, np.inf),
    'max': (maximum_filter1d, -np.inf),
}


def _round_half_up(value):
    """
    Rounds a non-negative value to the nearest integer, with halves rounding up.

    Parameters
    ----------
    value : float
        The value to round.

    Returns
    -------
    int
        The rounded value.

    Notes
    -----
    Python's builtin :func:`round` rounds halves to the nearest even integer, so
    ``round(2.5)`` is 2, while this function gives 3.

    """
    return int(np.floor(value + 0.5))


def _window_bounds(num_points, half_window):
    """
    Gives the clipped bounds of the centered window for each index.

    Parameters
    ----------
    num_points : int
        The number of points in the data.
    half_window : int
        The number of points on each side of the center point within the window.

    Returns
    -------
    left : numpy.ndarray, shape (`num_points`,)
        The first index within each window, ``max(0, i - half_window)``.
    right : numpy.ndarray, shape (`num_points`,)
        The index one past the last index within each window,
        ``min(i + half_window + 1, num_points)``.

    """
    indices = np.arange(num_points, dtype=np.intp)
    left = np.maximum(indices - half_window, 0)
    right = np.minimum(indices + half_window + 1, num_points)

    return left, right


def _windowed_reduce(data, half_window, statistic):
    """
    Computes a statistic within a moving window that is clipped at the data edges.

    For each index ``i``, the statistic is computed for
    ``data[max(0, i - half_window):min(i + half_window + 1, N)]``, so windows near
    the edges contain fewer points rather than padded values.

    Parameters
    ----------
    data : array-like, shape (N,)
        The values to reduce.
    half_window : int
        The number of points on each side of the center point within the window. A
        value of 0 returns a copy of `data`. Values of N or more give the same output
        as a value of ``N - 1``.
    statistic : {'min', 'max', 'mean'}
        The statistic to compute within each window.

    Returns
    -------
    output : numpy.ndarray, shape (N,)
        The statistic for each window.

    Raises
    ------
    ValueError
        Raised if `statistic` is not one of the allowed values.

    Notes
    -----
    The edges are handled by filling outside of the data with a value that cannot
    change the result: positive infinity for the minimum, negative infinity for the
    maximum, and zero for the sum. Each window's sum is computed separately rather
    than as a running sum, so large values in one region do not lose precision in the
    mean of later windows, and the sum is then divided by the number of points
    actually within each clipped window.

    """
    if statistic != 'mean' and statistic not in _WINDOW_FILTERS:
        raise ValueError(
            f'statistic must be one of {(*_WINDOW_FILTERS, "mean")}, not "{statistic}"'
        )

    y = np.asarray(data, dtype=float)
    # no window can extend past the data, so larger half-windows are equivalent
    half_window = min(half_window, max(y.shape[0] - 1, 0))
    window_size = 2 * half_window + 1
    if statistic == 'mean':
        output = correlate1d(y, np.ones(window_size), mode='constant', cval=0.0)
        left, right = _window_bounds(y.shape[0], half_window)
        output /= right - left
    else:
        window_filter, fill_value = _WINDOW_FILTERS[statistic]
        output = window_filter(y, window_size, mode='constant', cval=fill_value)

    return output


def _inverted_sort(sort_order):
    """
    Finds the indices that invert a sorting.

    Given an array `a`, and the indices that sort the array, `sort_order`, the
    inverted sort is defined such that it gives the original index order of `a`,
    ie. ``a == a[sort_order][inverted_order]``.

    Parameters
    ----------
    sort_order : numpy.ndarray, shape (N,)
        The original index array for sorting.

    Returns
    -------
    inverted_order : numpy.ndarray, shape (N,)
        The array that inverts the sort given by `sort_order`.

    Notes
    -----
    This function is equivalent to doing::

        inverted_order = sort_order.argsort()

    but is faster for large arrays since no additional sorting is performed.

    """
    num_points = len(sort_order)
    inverted_order = np.empty(num_points, dtype=np.intp)
    inverted_order[sort_order] = np.arange(num_points, dtype=np.intp)

    return inverted_order


def _determine_sorts(data):
    """
    Provides the arrays for sorting and inverting sorting, if needed.

    Parameters
    ----------
    data : numpy.ndarray, shape (N,)
        The array to potentially sort.

    Returns
    -------
    output : tuple(numpy.ndarray, numpy.ndarray) or tuple(None, None)
        A tuple of the index array for sorting the input array and the array
        that inverts that sorting. If the input array is already sorted, then
        the output will be (None, None).

    """
    sort_order = data.argsort(kind='mergesort')
    skip_sorting = (sort_order[1:] > sort_order[:-1]).all()
    if skip_sorting:
        output = (None, None)
    else:
        output = (sort_order, _inverted_sort(sort_order))

    return output


def _sort_array(array, sort_order=None):
    """
    Sorts the input array only if given a non-None sorting order.

    Parameters
    ----------
    array : numpy.ndarray, shape (N,)
        The array to sort.
    sort_order : numpy.ndarray, optional
        The array defining the sort order for the input array. Default is None, which
        will not sort the input.

    Returns
    -------
    output : numpy.ndarray, shape (N,)
        The input array after optionally sorting.

    """
    if sort_order is None:
        output = array
    else:
        output = array[sort_order]

    return output
