# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

from .chain import chain_hamiltonian, ladder_hamiltonian, ladder_neighbors
from .feas import feas_hamiltonian, square_hopping_block, reorder_ladder_x
from .kniffour import (
    SublatticeBuilder,
    SiteType,
    SubType,
    classify_site,
    connected,
    bond_direction,
    matrix_rank,
)
