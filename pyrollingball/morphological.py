# -*- coding: utf-8 -*-
"""Morphological techniques for fitting baselines to experimental data.

Created on October 17, 2026
@author: Donald Erb

"""

from ._algorithm_setup import _Algorithm, _class_wrapper
from .utils import _windowed_reduce


class _Morphological(_Algorithm):
    """A base class for all morphological algorithms."""

    @_Algorithm._register(sort_keys=('minima', 'maxima'))
    def rolling_ball(self, data, window_m=None, window_s=None):
        """
        The rolling ball baseline algorithm.

        Applies a moving minimum and then a moving maximum to the minima, and
        subsequently smooths the maxima with a moving average, giving a baseline that
        resembles the path of a ball rolled beneath the data.

        Parameters
        ----------
        data : array-like, shape (N,)
            The y-values of the measured data, with N data points.
        window_m : int, optional
            The half-window used for the moving minimum and moving maximum. Default
            is None, which will use 4% of the number of data points, rounded half up.
        window_s : int, optional
            The half-window used for the moving average. Default is None, which will
            use 8% of the number of data points, rounded half up.

        Returns
        -------
        baseline : numpy.ndarray, shape (N,)
            The calculated baseline.
        dict
            A dictionary with the following items:

            * 'window_m': int
                The half window used for the moving minimum and maximum.
            * 'window_s': int
                The half window used for the moving average.
            * 'minima': numpy.ndarray, shape (N,)
                The minimum of the data within each window.
            * 'maxima': numpy.ndarray, shape (N,)
                The maximum of `minima` within each window.

        Raises
        ------
        InvalidInputError
            Raised if `data` is not a one dimensional sequence of real numbers.
        EmptyInputError
            Raised if `data` is empty.

        Notes
        -----
        Windows are centered on each point and are clipped at the edges of the data, so
        the first and last few points use smaller windows rather than padded values. Each
        half-window can be 0, which makes its step return a copy of its input.

        References
        ----------
        Kneen, M.A., et al. Algorithm for fitting XRF, SEM and PIXE X-ray spectra
        backgrounds. Nuclear Instruments and Methods in Physics Research B, 1996,
        109, 209-213.

        Liland, K., et al. Optimal Choice of Baseline Correction for Multivariate
        Calibration of Spectra. Applied Spectroscopy, 2010, 64(9), 1007-1016.

        """
        y, windows = self._setup_rolling_ball(data, window_m, window_s)
        minima = _windowed_reduce(y, windows.window_m, 'min')
        maxima = _windowed_reduce(minima, windows.window_m, 'max')
        baseline = _windowed_reduce(maxima, windows.window_s, 'mean')

        params = {
            'window_m': windows.window_m, 'window_s': windows.window_s,
            'minima': minima, 'maxima': maxima
        }
        return baseline, params


_morphological_wrapper = _class_wrapper(_Morphological)


@_morphological_wrapper
def rolling_ball(data, window_m=None, window_s=None, x_data=None):
    """
    The rolling ball baseline algorithm.

    Applies a moving minimum and then a moving maximum to the minima, and
    subsequently smooths the maxima with a moving average, giving a baseline that
    resembles the path of a ball rolled beneath the data.

    Parameters
    ----------
    data : array-like, shape (N,)
        The y-values of the measured data, with N data points.
    window_m : int, optional
        The half-window used for the moving minimum and moving maximum. Default
        is None, which will use 4% of the number of data points, rounded half up.
    window_s : int, optional
        The half-window used for the moving average. Default is None, which will
        use 8% of the number of data points, rounded half up.
    x_data : array-like, shape (N,), optional
        The x-values. If given and not in ascending order, the data is sorted by
        `x_data` before fitting and the outputs are returned in the input order.

    Returns
    -------
    baseline : numpy.ndarray, shape (N,)
        The calculated baseline.
    dict
        A dictionary with the following items:

        * 'window_m': int
            The half window used for the moving minimum and maximum.
        * 'window_s': int
            The half window used for the moving average.
        * 'minima': numpy.ndarray, shape (N,)
            The minimum of the data within each window.
        * 'maxima': numpy.ndarray, shape (N,)
            The maximum of `minima` within each window.

    References
    ----------
    Kneen, M.A., et al. Algorithm for fitting XRF, SEM and PIXE X-ray spectra
    backgrounds. Nuclear Instruments and Methods in Physics Research B, 1996,
    109, 209-213.

    Liland, K., et al. Optimal Choice of Baseline Correction for Multivariate
    Calibration of Spectra. Applied Spectroscopy, 2010, 64(9), 1007-1016.

    """


def compute_baseline(signal, window_m=None, window_s=None):
    """
    Computes the rolling ball baseline of a signal.

    Parameters
    ----------
    signal : array-like, shape (N,)
        The values of the signal, with N >= 1 data points.
    window_m : int, optional
        The half-window used for the moving minimum and moving maximum. Default
        is None, which will use ``round(0.04 * N)``.
    window_s : int, optional
        The half-window used for the moving average. Default is None, which will
        use ``round(0.08 * N)``.

    Returns
    -------
    numpy.ndarray, shape (N,)
        The baseline. Subtracting it from `signal` is left to the caller.

    Raises
    ------
    InvalidInputError
        Raised if `signal` is not a sequence of real, finite numbers.
    EmptyInputError
        Raised if `signal` is empty.

    See Also
    --------
    rolling_ball : Also gives the half-windows and intermediate minima and maxima.

    Examples
    --------
    >>> from pyrollingball import compute_baseline
    >>> compute_baseline([5, 1, 5, 1, 5, 1, 5], window_m=1, window_s=1)
    array([1., 1., 1., 1., 1., 1., 1.])

    """
    return _Morphological().rolling_ball(signal, window_m, window_s)[0]
