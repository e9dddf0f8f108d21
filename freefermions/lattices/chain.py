# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import numpy as np
from typing import List
from ..errors import ConfigurationError

__all__ = [
    "chain_hamiltonian",
    "ladder_same_column",
    "ladder_neighbors",
    "ladder_hamiltonian",
]


def chain_hamiltonian(num_sites, hop=1.0, periodic=False, dtype=np.float64):
    """Constructs the hopping matrix of a one-dimensional chain.

    Parameters
    ----------
    num_sites : int
        The number of sites ``N`` of the chain.
    hop : float, optional
        The nearest neighbor hopping energy. The default is ``1``.
    periodic : bool, optional
        Connect the first and last site of the chain. The default is ``False``.
    dtype : str or np.dtype, optional
        The data-type of the resulting matrix.

    Returns
    -------
    ham : (N, N) np.ndarray
    """
    if num_sites <= 0:
        raise ConfigurationError(f"Chain needs at least one site, got {num_sites}")
    hh = np.full(num_sites - 1, hop, dtype=dtype)
    ham = np.diag(hh, k=1) + np.diag(hh, k=-1)
    if periodic and num_sites > 1:
        ham[0, num_sites - 1] = ham[num_sites - 1, 0] = hop
    return ham


def ladder_same_column(i, k, leg):
    """Checks if sites ``i`` and ``k`` belong to the same rung of the ladder."""
    return i // leg == k // leg


def ladder_neighbors(i, num_sites, leg, periodic_y=False) -> List[int]:
    """Returns the neighbors of site ``i`` of a ladder of width ``leg``."""
    neighbors = list()
    k = i + 1
    if k < num_sites and ladder_same_column(k, i, leg):
        neighbors.append(k)
    k = i + leg
    if k < num_sites:
        neighbors.append(k)
    if leg > 2 and periodic_y and i % leg == 0:
        k = i + leg - 1
        if k < num_sites:
            neighbors.append(k)

    if i == 0:
        return neighbors
    k = i - 1
    if ladder_same_column(i, k, leg):
        neighbors.append(k)
    if i >= leg:
        neighbors.append(i - leg)
    return neighbors


def ladder_hamiltonian(num_sites, leg, hop=(1.0, 1.0), periodic_y=False, dtype=None):
    """Constructs the hopping matrix of a ladder.

    Sites are numbered rung by rung: site ``i`` sits on rung ``i // leg``.
    Bonds along a rung use the second hopping amplitude, bonds between
    neighboring rungs the first one.

    Parameters
    ----------
    num_sites : int
        The total number of sites ``N``.
    leg : int
        The number of sites per rung. Must be at least 2.
    hop : (2, ) Sequence of float, optional
        The hopping amplitudes ``(t_leg, t_rung)``.
    periodic_y : bool, optional
        Close each rung into a ring. Requires ``leg > 2``.
    dtype : str or np.dtype, optional
        The data-type of the resulting matrix.

    Returns
    -------
    ham : (N, N) np.ndarray
    """
    if len(hop) != 2:
        raise ConfigurationError(
            f"Ladder expects 2 hopping amplitudes but {len(hop)} were given"
        )
    if leg < 2:
        raise ConfigurationError(f"Ladder must have leg > 1, got {leg}")
    if periodic_y and leg <= 2:
        raise ConfigurationError("Periodic rungs require leg > 2")
    if num_sites <= 0:
        raise ConfigurationError(f"Ladder needs at least one site, got {num_sites}")
    if dtype is None:
        dtype = np.float64

    ham = np.zeros((num_sites, num_sites), dtype=dtype)
    for i in range(num_sites):
        for j in ladder_neighbors(i, num_sites, leg, periodic_y):
            t = hop[1] if ladder_same_column(i, j, leg) else hop[0]
            ham[i, j] = ham[j, i] = t
    return ham
