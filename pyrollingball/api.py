# -*- coding: utf-8 -*-
"""The main entry point for using the object oriented api of pyrollingball."""

from .morphological import _Morphological


class Baseline(_Morphological):
    """
    A class for the rolling ball baseline algorithm.

    Allows reusing the same setup, such as the sorting of `x_data`, for fitting many
    sets of data with the same number of points.

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
        If False (default), will sort the input `x_data` values. Otherwise, the
        input is assumed to be sorted.
    output_dtype : type or numpy.dtype, optional
        The dtype to cast the output array. Default is None, which uses the typing
        of the input data if it is a floating type, and float otherwise.

    Attributes
    ----------
    x : numpy.ndarray or None
        The x-values for the object, sorted in ascending order, or None if no x-values
        were given.

    """

    def _get_method(self, method):
        """
        A helper function to allow accessing methods by their string.

        Parameters
        ----------
        method : str
            The name of the desired method as a string. Capitalization is ignored. For
            example, both 'rolling_ball' and 'Rolling_Ball' would return
            :meth:`~.Baseline.rolling_ball`.

        Returns
        -------
        output : Callable
            The callable method corresponding to the input string.

        Raises
        ------
        AttributeError
            Raised if the input method does not exist.

        """
        method_string = method.lower()
        if hasattr(self, method_string):
            output = getattr(self, method_string)
        else:
            raise AttributeError(f'unknown method "{method}"')

        return output
