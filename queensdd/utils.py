#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
Internal utilities for argument checking.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        is_int
        is_cell
"""

import numpy as np


def is_int(arg):
    """ is it an integer? (incl numpy variants, excl bool)
    """
    return isinstance(arg, (int, np.integer)) and not isinstance(arg, (bool, np.bool_))


def is_cell(arg, size):
    """ is it a valid (column, row) index into a board of `size` x `size`?
    """
    return is_int(arg) and 0 <= arg < size
