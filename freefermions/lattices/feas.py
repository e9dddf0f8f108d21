# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Two-orbital square lattice with nearest and next-nearest neighbor hoppings.

The hopping table holds 16 values: for each direction ``d`` in ``X, Y, X+Y, X-Y``
the four orbital-pair amplitudes ``aa, ba, ab, bb`` at ``4 * d + pair``.
"""

import logging
import numpy as np
from ..errors import ConfigurationError, HermiticityViolation, MissingDataError
from ..params import Direction
from ..matrix import is_hermitian, permute_sites, assemble_orbital_blocks

logger = logging.getLogger(__name__)

__all__ = [
    "NUM_ORBS",
    "square_hopping_block",
    "reorder_ladder_x",
    "feas_hamiltonian",
]

NUM_ORBS = 2


def _hopping(hoppings, pair, direction):
    return hoppings[pair + 4 * int(direction)]


def square_hopping_block(num_sites, leg, hoppings, pair=0, periodic=False):
    """Builds the hopping block of one orbital pair on a square grid.

    Sites are numbered ``i = x + y * length_x`` with ``length_x = num_sites // leg``.

    Parameters
    ----------
    num_sites : int
        The number of sites ``N`` of the grid.
    leg : int
        The number of sites along y.
    hoppings : (16, ) Sequence of float
        The hopping table.
    pair : int, optional
        The orbital pair ``0..3``.
    periodic : bool, optional
        Add the wraparound bonds of a torus.

    Returns
    -------
    block : (N, N) np.ndarray
    """
    if leg <= 0 or num_sites % leg != 0:
        raise ConfigurationError(
            f"Leg {leg} must divide the number of sites {num_sites}"
        )
    lx = num_sites // leg
    t = np.zeros((num_sites, num_sites))

    tx = _hopping(hoppings, pair, Direction.X)
    for j in range(leg):
        for i in range(lx):
            if i + 1 < lx:
                t[i + 1 + j * lx, i + j * lx] = t[i + j * lx, i + 1 + j * lx] = tx
            if i > 0:
                t[i - 1 + j * lx, i + j * lx] = t[i + j * lx, i - 1 + j * lx] = tx
        if periodic:
            t[j * lx, lx - 1 + j * lx] = t[lx - 1 + j * lx, j * lx] = tx

    ty = _hopping(hoppings, pair, Direction.Y)
    for i in range(lx):
        for j in range(leg):
            if j > 0:
                t[i + (j - 1) * lx, i + j * lx] = t[i + j * lx, i + (j - 1) * lx] = ty
            if j + 1 < leg:
                t[i + (j + 1) * lx, i + j * lx] = t[i + j * lx, i + (j + 1) * lx] = ty
        if periodic:
            t[i, i + (leg - 1) * lx] = t[i + (leg - 1) * lx, i] = ty

    txpy = _hopping(hoppings, pair, Direction.XPY)
    txmy = _hopping(hoppings, pair, Direction.XMY)
    last = (leg - 1) * lx
    for i in range(lx):
        for j in range(leg):
            site = i + j * lx
            if j + 1 < leg and i + 1 < lx:
                t[i + 1 + (j + 1) * lx, site] = t[site, i + 1 + (j + 1) * lx] = txpy
            if i + 1 < lx and j > 0:
                t[i + 1 + (j - 1) * lx, site] = t[site, i + 1 + (j - 1) * lx] = txmy
            if not periodic or i > 0:
                continue
            # wrap along x from the last column
            end = lx - 1 + j * lx
            if j + 1 < leg:
                t[(j + 1) * lx, end] = t[end, (j + 1) * lx] = txpy
            if j > 0:
                t[(j - 1) * lx, end] = t[end, (j - 1) * lx] = txmy
        if not periodic:
            continue
        # wrap along y from the last row
        if i + 1 < lx:
            t[i + 1, i + last] = t[i + last, i + 1] = txpy
            t[i + 1 + last, i] = t[i, i + 1 + last] = txmy
        if i > 0:
            continue
        # corners
        t[0, lx - 1 + last] = t[lx - 1 + last, 0] = txpy
        t[last, lx - 1] = t[lx - 1, last] = txmy
    return t


def reorder_ladder_x(block, leg):
    """Relabels a grid matrix from ``x + y * length_x`` to ``y + x * leg``.

    ::

        0 --1 --2 --...           0--2--4--...
        N --N+1-N+2-...    into   1--3--5--...
    """
    num_sites = block.shape[0]
    lx = num_sites // leg
    idx = np.arange(num_sites)
    perm = idx // lx + (idx % lx) * leg
    return permute_sites(block, perm)


def feas_hamiltonian(num_sites, leg, hoppings, periodic=False, atol=None):
    """Constructs the hopping matrix of the two-orbital square lattice.

    Row ``i + orb * N`` of the result belongs to site ``i`` and orbital ``orb``,
    where sites are numbered ``y + x * leg``.

    Parameters
    ----------
    num_sites : int
        The number of sites ``N``.
    leg : int
        The number of sites along y. Must divide ``N``.
    hoppings : (16, ) Sequence of float
        The hopping table.
    periodic : bool, optional
        Use periodic boundary conditions along both axes.
    atol : float, optional
        Tolerance of the symmetry checks.

    Returns
    -------
    ham : (2N, 2N) np.ndarray
    """
    hoppings = np.asarray(hoppings, dtype=np.float64)
    size = 4 * NUM_ORBS * NUM_ORBS
    if len(hoppings) < size:
        raise MissingDataError(
            "hoppings",
            msg=f"Expected {size} hoppings but {len(hoppings)} were found",
        )
    if num_sites <= 0:
        raise ConfigurationError(f"FeAs needs at least one site, got {num_sites}")

    blocks = list()
    for pair in range(NUM_ORBS * NUM_ORBS):  # aa ba ab bb
        block = square_hopping_block(num_sites, leg, hoppings, pair, periodic)
        block = reorder_ladder_x(block, leg)
        if not is_hermitian(block, atol):
            raise HermiticityViolation(f"Orbital block {pair} is not hermitian")
        blocks.append(block)

    ham = assemble_orbital_blocks(blocks, NUM_ORBS)
    if not is_hermitian(ham, atol):
        raise HermiticityViolation(
            "Hopping matrix is not hermitian: the inter-orbital hoppings of the "
            "table are not symmetric"
        )
    return ham
