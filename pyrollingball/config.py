# -*- coding: utf-8 -*-
"""Configuration settings for pyrollingball.

Created on October 17, 2026
@author: Donald Erb

"""

# Note: the triple quotes are for including the attributes within the documentation
WINDOW_M_FRACTION = 0.04
"""The fraction of the data length used for the default minimum/maximum half-window.

Used by :meth:`.WindowSpec.resolve` when `window_m` is None, giving a default of
``round(0.04 * N)`` for data with N points. Rounding is done half up.

"""

WINDOW_S_FRACTION = 0.08
"""The fraction of the data length used for the default smoothing half-window.

Used by :meth:`.WindowSpec.resolve` when `window_s` is None, giving a default of
``round(0.08 * N)`` for data with N points. Rounding is done half up.

"""
