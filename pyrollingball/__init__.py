# -*- coding: utf-8 -*-
"""
=========================================================================
pyrollingball - The rolling ball baseline algorithm for experimental data.
=========================================================================

pyrollingball estimates the slowly varying background beneath one dimensional
data, such as spectra, by rolling a ball beneath the data: a moving minimum,
a moving maximum of those minima, and a moving average of those maxima.

@author: Donald Erb
Created on October 17, 2026

"""

__version__ = '0.1.0'

# import utils first since it is imported by the other modules; likewise, import
# api last since it imports the other modules
from . import utils, config, morphological, api

from ._algorithm_setup import WindowSpec
from .api import Baseline
from .morphological import compute_baseline, rolling_ball
from .utils import EmptyInputError, InvalidInputError, ParameterWarning, SortingWarning
