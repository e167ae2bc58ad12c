#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""The setup script.

All metadata exists in setup.cfg. setup.py is only needed to allow
for editable installs when using older versions of pip.


Notes on minimum required versions for dependencies:

numpy: >= 1.20 since older versions are no longer supported by scipy >= 1.6
scipy: >= 1.6 for the minimum_filter1d, maximum_filter1d and correlate1d
       filters with float cval values in mode='constant'

"""

from setuptools import setup


if __name__ == '__main__':

    setup()
