# -*- coding: utf-8 -*-
"""Setup code for the algorithms in pyrollingball.

Created on October 17, 2026
@author: Donald Erb

"""

from functools import partial, wraps
from inspect import signature

import numpy as np

from . import config
from ._validation import _check_array, _check_half_window, _check_sized_array
from .utils import (
    ParameterWarning, SortingWarning, _determine_sorts, _round_half_up, _sort_array, _warn
)


class WindowSpec:
    """
    The half-windows used for the rolling ball algorithm.

    Each field is optional and independent of the other; fields left as None are
    filled in from the data length by :meth:`~.WindowSpec.resolve`.

    Parameters
    ----------
    window_m : int, optional
        The half-window used for the moving minimum and the subsequent moving
        maximum. Default is None, which will use ``round(N * config.WINDOW_M_FRACTION)``,
        or 4% of the number of data points, N.
    window_s : int, optional
        The half-window used for the moving average. Default is None, which will
        use ``round(N * config.WINDOW_S_FRACTION)``, or 8% of the number of
        data points, N.

    Notes
    -----
    Each half-window defines a centered window with ``2 * half_window + 1`` points that
    is clipped at the edges of the data.

    """

    def __init__(self, window_m=None, window_s=None):
        self.window_m = window_m
        self.window_s = window_s

    def __repr__(self):
        return f'{type(self).__name__}(window_m={self.window_m!r}, window_s={self.window_s!r})'

    def __eq__(self, other):
        if not isinstance(other, WindowSpec):
            return NotImplemented
        return self.window_m == other.window_m and self.window_s == other.window_s

    def resolve(self, num_points):
        """
        Gives a new WindowSpec with all half-windows validated and filled in.

        Parameters
        ----------
        num_points : int
            The number of data points, N.

        Returns
        -------
        WindowSpec
            The new object with integer values for both `window_m` and `window_s`.

        Raises
        ------
        ValueError
            Raised if an input half-window is negative or is not a single value.
        TypeError
            Raised if an input half-window is not an integer.

        Notes
        -----
        Defaults are rounded half up, so that ``0.5`` rounds to ``1``, rather than
        using Python's round half to even.

        """
        if self.window_m is None:
            window_m = _round_half_up(num_points * config.WINDOW_M_FRACTION)
        else:
            window_m = _check_half_window(self.window_m, variable_name='window_m')
        if self.window_s is None:
            window_s = _round_half_up(num_points * config.WINDOW_S_FRACTION)
        else:
            window_s = _check_half_window(self.window_s, variable_name='window_s')

        return WindowSpec(window_m, window_s)


class _Algorithm:
    """
    A base class for all algorithm types.

    Attributes
    ----------
    x : numpy.ndarray or None
        The x-values for the object, sorted in ascending order, or None if no x-values
        were given. Without x-values, the data length is set by the first function call.

    """

    def __init__(self, x_data=None, check_finite=True, assume_sorted=False,
                 output_dtype=None):
        """
        Initializes the algorithm object.

        Parameters
        ----------
        x_data : array-like, shape (N,), optional
            The x-values of the measured data. Default is None, which uses the index
            order of the input data.
        check_finite : bool, optional
            If True (default), will raise an error if any values in input data are not finite.
            Setting to False will skip the check. Note that the output is undefined if
            `check_finite` is False and the input data contains non-finite values.
        assume_sorted : bool, optional
            If False (default), will sort the input `x_data` values. Otherwise, the input
            is assumed to be sorted, although it will still be checked to be in ascending order.
        output_dtype : type or numpy.dtype, optional
            The dtype to cast the output array. Default is None, which uses the typing
            of the input data if it is a floating type, and float otherwise.

        """
        no_x = x_data is None
        if no_x:
            self.x = None
            self._size = None
        else:
            self.x = _check_array(
                x_data, dtype=float, check_finite=check_finite, name='x_data'
            )
            self._size = len(self.x)
            if assume_sorted and np.any(self.x[1:] < self.x[:-1]):
                _warn(
                    ('x-values must be in ascending order for assume_sorted to be True, so '
                     'setting assume_sorted to False'), SortingWarning
                )
                assume_sorted = False

        if no_x or assume_sorted:
            self._sort_order = None
            self._inverted_order = None
        else:
            self._sort_order, self._inverted_order = _determine_sorts(self.x)
            if self._sort_order is not None:
                self.x = self.x[self._sort_order]

        self._check_finite = check_finite
        self._dtype = output_dtype

    def _return_results(self, baseline, params, dtype, sort_keys=()):
        """
        Re-orders the input baseline and parameters based on the x ordering.

        If `self._sort_order` is None, then no reordering is performed.

        Parameters
        ----------
        baseline : numpy.ndarray, shape (N,)
            The baseline output by the baseline function.
        params : dict
            The parameter dictionary output by the baseline function.
        dtype : type or numpy.dtype, optional
            The desired output dtype for the baseline.
        sort_keys : Iterable, optional
            An iterable of keys corresponding to the values in `params` that need
            re-ordering. Default is ().

        Returns
        -------
        baseline : numpy.ndarray, shape (N,)
            The input `baseline` after re-ordering and setting to the desired dtype.
        params : dict
            The input `params` after re-ordering the values for `sort_keys`.

        """
        if self._sort_order is not None:
            for key in sort_keys:
                if key in params:
                    params[key] = params[key][self._inverted_order]
            baseline = _sort_array(baseline, sort_order=self._inverted_order)

        baseline = np.asarray(baseline, dtype=dtype)

        return baseline, params

    @classmethod
    def _register(cls, func=None, *, sort_keys=()):
        """
        Wraps a baseline function to validate inputs and correct outputs.

        The input data is converted to a numpy array, validated to ensure the length is
        consistent, and ordered to match the input x ordering. The outputs are corrected
        to ensure proper inverted sort ordering and dtype.

        Parameters
        ----------
        func : Callable, optional
            The function that is being decorated. Default is None, which returns a partial function.
        sort_keys : tuple, optional
            The keys within the output parameter dictionary that will need sorting to match the
            sort order of :attr:`.x`. Default is ().

        Returns
        -------
        numpy.ndarray
            The calculated baseline.
        dict
            A dictionary of parameters output by the baseline function.

        """
        if func is None:
            return partial(cls._register, sort_keys=sort_keys)

        @wraps(func)
        def inner(self, data, *args, **kwargs):
            if self._size is None:
                y = _check_array(data, check_finite=self._check_finite)
                self._size = y.shape[-1]
            else:
                y = _check_sized_array(
                    data, self._size, check_finite=self._check_finite, name='data'
                )

            y = _sort_array(y, sort_order=self._sort_order)
            if self._dtype is not None:
                output_dtype = self._dtype
            elif y.dtype.kind == 'f':
                output_dtype = y.dtype
            else:
                output_dtype = float
            y = np.asarray(y, dtype=float)

            baseline, params = func(self, y, *args, **kwargs)

            return self._return_results(baseline, params, output_dtype, sort_keys)

        return inner

    def _setup_rolling_ball(self, y, window_m=None, window_s=None):
        """
        Sets the starting parameters for the rolling ball algorithm.

        Parameters
        ----------
        y : numpy.ndarray, shape (N,)
            The y-values of the measured data, already converted to a numpy
            array by :meth:`~._Algorithm._register`.
        window_m : int, optional
            The half-window for the moving minimum and maximum. Default is None,
            which uses the default from :meth:`.WindowSpec.resolve`.
        window_s : int, optional
            The half-window for the moving average. Default is None, which uses
            the default from :meth:`.WindowSpec.resolve`.

        Returns
        -------
        y : numpy.ndarray, shape (N,)
            The y-values of the measured data.
        windows : WindowSpec
            The validated half-windows.

        Warns
        -----
        ParameterWarning
            Issued if either half-window creates windows that always span the entire data,
            which gives a constant output for that step.

        """
        windows = WindowSpec(window_m, window_s).resolve(self._size)
        for name in ('window_m', 'window_s'):
            value = getattr(windows, name)
            if self._size > 1 and value >= self._size - 1:
                _warn(
                    (f'{name} is {value}, so every window covers all {self._size} data '
                     'points and the output of that step will be constant'),
                    ParameterWarning
                )

        return y, windows


def _class_wrapper(klass):
    """
    Wraps a function to call the corresponding class method instead.

    Parameters
    ----------
    klass : _Algorithm
        The class being wrapped.

    """
    def outer(func):
        func_signature = signature(func)
        method = func.__name__

        @wraps(func)
        def inner(*args, **kwargs):
            total_inputs = func_signature.bind(*args, **kwargs)
            x = total_inputs.arguments.pop('x_data', None)
            return getattr(klass(x_data=x), method)(*total_inputs.args, **total_inputs.kwargs)
        return inner

    return outer
