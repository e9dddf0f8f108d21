# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Helpers for dense hopping matrices."""

import io
import numpy as np
from scipy import linalg as la
from typing import Sequence
from .utils import HERMITIAN_ATOL

__all__ = [
    "is_hermitian",
    "fill_diagonal",
    "permute_sites",
    "assemble_orbital_blocks",
    "dump",
    "dumps",
]


def is_hermitian(a: np.ndarray, atol: float = None) -> bool:
    """Checks if a square matrix is hermitian within the absolute tolerance ``atol``."""
    a = np.asarray(a)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        return False
    if atol is None:
        atol = HERMITIAN_ATOL
    return bool(la.ishermitian(a, atol=atol))


def fill_diagonal(a: np.ndarray, values: Sequence[float]) -> None:
    """Overwrites the diagonal of ``a`` in place."""
    idx = np.arange(len(values))
    a[idx, idx] = values


def permute_sites(a: np.ndarray, perm: Sequence[int]) -> np.ndarray:
    """Relabels the sites of a matrix such that ``new[perm[i], perm[j]] = a[i, j]``."""
    perm = np.asarray(perm, dtype=np.int64)
    new = np.zeros_like(a)
    new[np.ix_(perm, perm)] = a
    return new


def assemble_orbital_blocks(blocks: Sequence[np.ndarray], num_orbs: int) -> np.ndarray:
    """Assembles orbital-pair blocks into one matrix.

    The block at position ``p`` couples orbital ``p % num_orbs`` (row) with
    orbital ``p // num_orbs`` (column). Row ``i + orb * n`` of the result belongs
    to site ``i`` and orbital ``orb``.

    Parameters
    ----------
    blocks : Sequence of (N, N) np.ndarray
        The ``num_orbs**2`` orbital-pair blocks.
    num_orbs : int
        The number of orbitals per site.

    Returns
    -------
    ham : (N*M, N*M) np.ndarray
    """
    n = blocks[0].shape[0]
    ham = np.zeros((num_orbs * n, num_orbs * n), dtype=blocks[0].dtype)
    for pair, block in enumerate(blocks):
        orb1 = pair % num_orbs
        orb2 = pair // num_orbs
        ham[orb1 * n : (orb1 + 1) * n, orb2 * n : (orb2 + 1) * n] += block
    return ham


def dump(fp, a: np.ndarray, name: str) -> None:
    """Writes a hopping matrix and its geometry name to a text stream.

    The matrix is written as a line ``"<rows> <cols>"`` followed by one line per
    row. Values are written with the shortest representation that reads back
    exactly. The last line is ``GeometryName=<name>``.
    """
    a = np.asarray(a)
    rows, cols = a.shape
    fp.write(f"{rows} {cols}\n")
    for row in a:
        fp.write(" ".join(repr(float(x)) for x in row) + "\n")
    fp.write(f"GeometryName={name}\n")


def dumps(a: np.ndarray, name: str) -> str:
    """Formats a hopping matrix and its geometry name as string."""
    with io.StringIO() as fp:
        dump(fp, a, name)
        return fp.getvalue()
