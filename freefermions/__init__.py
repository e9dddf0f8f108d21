# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

from .utils import logger, CONFIG

from .errors import (
    GeometryError,
    ConfigurationError,
    MissingDataError,
    HermiticityViolation,
)

from .params import LatticeType, Direction, GeometryParameters

from .io import TableReader, read_hoppings, read_potential

from .matrix import (
    is_hermitian,
    fill_diagonal,
    permute_sites,
    dump,
    dumps,
)

from .fourier import fourier_matrix, fourier_diagonal

from .lattices import (
    chain_hamiltonian,
    ladder_hamiltonian,
    feas_hamiltonian,
    SublatticeBuilder,
)

from .geometry import LatticeBuilder, fit_potential

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"
