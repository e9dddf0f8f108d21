# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import numpy as np
from numba import njit, prange
from .errors import ConfigurationError

__all__ = ["grid_coordinates", "fourier_matrix", "fourier_diagonal"]

_jitkw = dict(fastmath=True, nogil=True, parallel=True, cache=True)


def grid_coordinates(num_sites, leg):
    """Returns the grid coordinates of the sites ``i = x + y * length_x``.

    Parameters
    ----------
    num_sites : int
        The number of sites of the grid.
    leg : int
        The number of sites along y.

    Returns
    -------
    x, y : (N, ) np.ndarray
    """
    if leg <= 0 or num_sites % leg != 0:
        raise ConfigurationError(
            f"Leg {leg} must divide the number of sites {num_sites}"
        )
    length_x = num_sites // leg
    idx = np.arange(num_sites)
    return idx % length_x, idx // length_x


def fourier_matrix(num_sites, leg):
    r"""Builds the Fourier basis of a periodic ``length_x x leg`` grid.

    .. math::
        B_{ik} = e^{2πi (x_i k_x / L_x + y_i k_y / L_y)}

    Parameters
    ----------
    num_sites : int
        The number of sites of the grid.
    leg : int
        The number of sites along y.

    Returns
    -------
    basis : (N, N) complex np.ndarray
    """
    x, y = grid_coordinates(num_sites, leg)
    length_x = num_sites // leg
    phase = np.outer(x, x) / length_x + np.outer(y, y) / leg
    return np.exp(2j * np.pi * phase)


@njit(**_jitkw)
def _fourier_diagonal(dest, basis, src):
    n = src.shape[0]
    for k in prange(n):
        acc = 0j
        for i in range(n):
            bik = basis[i, k].conjugate()
            for j in range(n):
                acc += bik * src[i, j] * basis[j, k]
        dest[k] = acc


def fourier_diagonal(src, basis):
    r"""Projects a real-space matrix onto the momenta of a Fourier basis.

    .. math::
        d_k = Σ_{ij} B^*_{ik} S_{ij} B_{jk}

    Parameters
    ----------
    src : (N, N) np.ndarray
        The real-space matrix.
    basis : (N, N) complex np.ndarray
        The Fourier basis, see :func:`fourier_matrix`.

    Returns
    -------
    dest : (N, ) complex np.ndarray
    """
    src = np.ascontiguousarray(src, dtype=np.float64)
    basis = np.ascontiguousarray(basis, dtype=np.complex128)
    dest = np.zeros(src.shape[0], dtype=np.complex128)
    _fourier_diagonal(dest, basis, src)
    return dest
