# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

from hypothesis import settings
from numba import config

config.DISABLE_JIT = True

settings.register_profile("freefermions", deadline=None, report_multiple_bugs=True)
settings.load_profile("freefermions")
