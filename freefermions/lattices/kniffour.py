# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Chain of alternating oxygen-like (O) and connector (C) sites.

Sites repeat with period four: ``O_x, O_y, O_y, C``. O sites carry two orbitals
and C sites one. Orbital 0 of site ``i`` is stored in row ``i``, orbital 1 of an O
site in row ``N + i - (i + 1) // 4``.

The hopping table contains four ``Connectors`` matrices in the order X, Y, X+Y
and X-Y. The first two are ``(2, 1)`` C-O hoppings, the last two ``(2, 2)`` O-O
hoppings. An optional ``SignChange=`` entry gives the factor applied to bonds
touching an inverted site.
"""

import logging
import numpy as np
from enum import IntEnum
from typing import NamedTuple
from ..errors import ConfigurationError, HermiticityViolation, MissingDataError
from ..params import Direction
from ..io import TableReader
from ..matrix import is_hermitian

logger = logging.getLogger(__name__)

__all__ = [
    "SiteType",
    "SubType",
    "SiteKind",
    "classify_site",
    "is_inverted",
    "connected",
    "bond_direction",
    "matrix_rank",
    "SublatticeBuilder",
]


class SiteType(IntEnum):
    O = 0
    C = 1


class SubType(IntEnum):
    X = 0
    Y = 1


class SiteKind(NamedTuple):
    """Type of a site. The subtype is only meaningful for O sites."""

    type: SiteType
    subtype: SubType = SubType.X


def classify_site(site: int) -> SiteKind:
    r = (site + 1) % 4
    if r == 0:
        return SiteKind(SiteType.C)
    if r == 1:
        return SiteKind(SiteType.O, SubType.X)
    return SiteKind(SiteType.O, SubType.Y)


def is_inverted(site: int) -> bool:
    return (site + 4) % 8 == 0


def _oo_pair(i1, i2, kind1):
    """Returns the indices of an O-O pair ordered as ``(x_site, y_site)``."""
    if kind1.subtype == SubType.X:
        return i1, i2
    return i2, i1


def _co_pair(i1, i2, kind1):
    """Returns the indices of an O-C pair ordered as ``(o_site, c_site)``."""
    if kind1.type == SiteType.O:
        return i1, i2
    return i2, i1


def connected(i1: int, i2: int) -> bool:
    """Checks if two sites share a bond."""
    if i1 == i2:
        return False
    kind1, kind2 = classify_site(i1), classify_site(i2)
    # c-c
    if kind1.type == kind2.type == SiteType.C:
        return False
    # o-o
    if kind1.type == kind2.type:
        if kind1.subtype == kind2.subtype:
            return False
        ix, iy = _oo_pair(i1, i2, kind1)
        if ix > iy:
            return ix - iy in (2, 3)
        return iy - ix in (1, 2)
    # o-c
    io, ic = _co_pair(i1, i2, kind1)
    return ic - io in (1, 2, 3) or io == ic + 1


def bond_direction(i1: int, i2: int) -> Direction:
    """Returns the direction of the bond between two connected sites."""
    kind1, kind2 = classify_site(i1), classify_site(i2)
    if kind1.type == kind2.type == SiteType.O:
        if kind1.subtype == kind2.subtype:
            raise ConfigurationError(f"Sites {i1} and {i2} are not connected")
        ix, iy = _oo_pair(i1, i2, kind1)
        if ix > iy:
            distance = ix - iy
            if distance == 2:
                return Direction.XPY
            if distance == 3:
                return Direction.XMY
        else:
            distance = iy - ix
            if distance == 1:
                return Direction.XPY
            if distance == 2:
                return Direction.XMY
        raise ConfigurationError(f"Sites {i1} and {i2} are not connected")
    if kind1.type == kind2.type:
        raise ConfigurationError(f"Sites {i1} and {i2} are not connected")
    io, _ = _co_pair(i1, i2, kind1)
    return Direction.X if classify_site(io).subtype == SubType.X else Direction.Y


def matrix_rank(num_sites: int) -> int:
    """Returns the number of rows of the hopping matrix: ``2 #O + #C``."""
    num_o, num_c = 0, 0
    for i in range(num_sites):
        if classify_site(i).type == SiteType.C:
            num_c += 1
        else:
            num_o += 1
    return 2 * num_o + num_c


class SublatticeBuilder:
    """Builds the hopping matrix of the two-sublattice chain.

    Parameters
    ----------
    params : GeometryParameters
        The geometry parameters. Uses ``sites``, ``periodic_y`` and ``filename``.
    """

    def __init__(self, params):
        self.params = params
        self.sign_change = 1
        io = TableReader(params.filename)
        try:
            self.sign_change = int(io.read_value("SignChange="))
        except MissingDataError:
            logger.debug("No SignChange= in %s, using 1", params.filename)
            io.rewind()
        self.co_hoppings_x = io.read_matrix("Connectors")
        self.co_hoppings_y = io.read_matrix("Connectors")
        self.oo_hoppings_xpy = io.read_matrix("Connectors")
        self.oo_hoppings_xmy = io.read_matrix("Connectors")

        for name in ("co_hoppings_x", "co_hoppings_y"):
            shape = getattr(self, name).shape
            if shape[0] < 2 or shape[1] < 1:
                raise ConfigurationError(f"C-O connectors must be (2, 1), got {shape}")
        for name in ("oo_hoppings_xpy", "oo_hoppings_xmy"):
            shape = getattr(self, name).shape
            if shape[0] < 2 or shape[1] < 2:
                raise ConfigurationError(f"O-O connectors must be (2, 2), got {shape}")

    @property
    def num_sites(self):
        return self.params.sites

    @property
    def rank(self):
        return matrix_rank(self.num_sites)

    def index(self, site, orb=0):
        """Returns the matrix row of an orbital of a site."""
        if orb == 0:
            return site
        if classify_site(site).type == SiteType.C:
            raise ConfigurationError(f"C site {site} has no orbital {orb}")
        return self.num_sites + site - (site + 1) // 4

    def sign(self, i1, i2):
        return self.sign_change if is_inverted(i1) or is_inverted(i2) else 1

    def oo_orbitals(self, direction, orb1, orb2):
        if direction == Direction.XPY:
            return self.oo_hoppings_xpy[orb1, orb2]
        return self.oo_hoppings_xmy[orb1, orb2]

    def co_orbitals(self, direction, orb):
        if direction == Direction.X:
            return self.co_hoppings_x[orb, 0]
        return self.co_hoppings_y[orb, 0]

    def _hopping_data_oo(self, i1, i2):
        direction = bond_direction(i1, i2)
        sign = self.sign(i1, i2)
        for orb1 in range(2):
            for orb2 in range(2):
                val = self.oo_orbitals(direction, orb1, orb2) * sign
                yield self.index(i1, orb1), self.index(i2, orb2), val

    def _hopping_data_co(self, ic, io):
        direction = bond_direction(ic, io)
        sign = self.sign(ic, io)
        for orb in range(2):
            val = self.co_orbitals(direction, orb) * sign
            yield self.index(io, orb), self.index(ic), val
            yield self.index(ic), self.index(io, orb), val

    def _hopping_data_periodic(self):
        n = self.num_sites
        if n < 4 or n % 4 != 0:
            raise ConfigurationError(
                f"Periodic two-sublattice chain needs a multiple of 4 sites, got {n}"
            )
        # 0 --> N-1 (C-O)
        for orb in range(2):
            val = self.co_orbitals(Direction.X, orb)
            yield self.index(0, orb), n - 1, val
            yield n - 1, self.index(0, orb), val
        # 0 --> N-2 (O-O)
        for orb1 in range(2):
            for orb2 in range(2):
                val = self.oo_orbitals(Direction.XPY, orb1, orb2)
                yield self.index(0, orb1), self.index(n - 2, orb2), val
                yield self.index(n - 2, orb2), self.index(0, orb1), val
        # 0 --> N-3 (O-O)
        for orb1 in range(2):
            for orb2 in range(2):
                val = self.oo_orbitals(Direction.XMY, orb1, orb2)
                yield self.index(0, orb1), self.index(n - 3, orb2), val
                yield self.index(n - 3, orb2), self.index(0, orb1), val

    def hopping_data(self):
        """Yields ``(row, col, value)`` for every bond of the lattice."""
        n = self.num_sites
        for i in range(n):
            type1 = classify_site(i).type
            for j in range(n):
                if not connected(i, j):
                    continue
                type2 = classify_site(j).type
                if type1 == type2 == SiteType.O:
                    yield from self._hopping_data_oo(i, j)
                elif type1 == SiteType.C:
                    yield from self._hopping_data_co(i, j)
                else:
                    yield from self._hopping_data_co(j, i)
        if self.params.periodic_y:
            yield from self._hopping_data_periodic()

    def hamiltonian(self, atol=None):
        """Returns the hopping matrix.

        Entries written later overwrite earlier ones, so the periodic bonds
        replace any open-chain bond between the same orbitals.
        """
        if self.num_sites <= 0:
            raise ConfigurationError(
                f"Two-sublattice chain needs at least one site, got {self.num_sites}"
            )
        rank = self.rank
        ham = np.zeros((rank, rank), dtype=np.float64)
        for i, j, val in self.hopping_data():
            ham[i, j] = val
        if not is_hermitian(ham, atol):
            raise HermiticityViolation(
                "Hopping matrix is not hermitian: check the O-O connector tables"
            )
        logger.debug("Built two-sublattice matrix of rank %d", rank)
        return ham
