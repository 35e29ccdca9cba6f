#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
Internal utilities.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        is_int
"""
import numpy as np


def is_int(arg):
    """ is it an integer? (incl numpy variants, booleans excluded)
    """
    return isinstance(arg, (int, np.integer)) and not isinstance(arg, bool)
