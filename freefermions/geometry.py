# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import logging
import numpy as np
from typing import Sequence, Tuple
from .errors import ConfigurationError, MissingDataError
from .params import LatticeType, GeometryParameters
from .io import read_hoppings
from .matrix import fill_diagonal, dumps
from .fourier import fourier_matrix, fourier_diagonal
from .lattices import (
    chain_hamiltonian,
    ladder_hamiltonian,
    feas_hamiltonian,
    SublatticeBuilder,
)

logger = logging.getLogger(__name__)

__all__ = ["LatticeBuilder", "fit_potential"]


class LatticeBuilder:
    """Hopping matrix of one of the supported lattice geometries.

    The matrix is built completely on construction. It can be modified once
    afterwards with :meth:`add_potential` or :meth:`bathify`; both require
    exclusive access when the builder is shared between threads.

    Parameters
    ----------
    params : GeometryParameters
        The geometry parameters. The lattice type selects the builder.

    Attributes
    ----------
    orbitals : int
        The maximal number of orbitals per site. The sites of the two-sublattice
        geometry carry one or two orbitals, use :meth:`index` to locate them.

    Raises
    ------
    ConfigurationError
        If the parameters are invalid for the selected lattice type.
    MissingDataError
        If the hopping table lacks a required entry.
    HermiticityViolation
        If the hopping table produces an asymmetric matrix.
    """

    def __init__(self, params: GeometryParameters):
        self.params = params
        self.type = LatticeType.parse(params.type)
        self.orbitals = 1
        self._sublattice = None
        logger.debug("Building %s geometry with %d sites", self.name, params.sites)
        if self.type == LatticeType.CHAIN:
            self._ham = self._build_chain()
        elif self.type == LatticeType.LADDER:
            self._ham = self._build_ladder()
        elif self.type == LatticeType.FEAS:
            self._ham = self._build_feas()
            self.orbitals = 2
        elif self.type == LatticeType.KTWONIFFOUR:
            self._ham = self._build_kniffour()
            self.orbitals = 2
        else:
            raise ConfigurationError(f"Unsupported lattice type {self.type!r}")
        logger.debug("Built %s matrix of shape %s", self.name, self._ham.shape)

    def _require_hopping(self, num):
        hopping = self.params.hopping
        if len(hopping) < num:
            raise ConfigurationError(
                f"{self.name} expects {num} hopping amplitude(s) but "
                f"{len(hopping)} were given"
            )
        return hopping

    def _require_filename(self):
        if not self.params.filename:
            raise MissingDataError(
                "filename", msg=f"{self.name} geometry needs a hopping table"
            )
        return self.params.filename

    def _build_chain(self):
        hop = self._require_hopping(1)[0]
        return chain_hamiltonian(self.params.sites, hop, self.params.periodic)

    def _build_ladder(self):
        p = self.params
        return ladder_hamiltonian(p.sites, p.leg, p.hopping, p.periodic_y)

    def _build_feas(self):
        filename = self._require_filename()
        hoppings = read_hoppings(filename)
        p = self.params
        return feas_hamiltonian(p.sites, p.leg, hoppings, p.periodic)

    def _build_kniffour(self):
        self._require_filename()
        self._sublattice = SublatticeBuilder(self.params)
        return self._sublattice.hamiltonian()

    @property
    def name(self) -> str:
        """str: The name of the lattice type."""
        return self.type.label

    @property
    def shape(self) -> Tuple[int, int]:
        return self._ham.shape

    @property
    def rank(self) -> int:
        return self._ham.shape[0]

    def index(self, site: int, orb: int = 0) -> int:
        """Returns the matrix row of the orbital ``orb`` of a lattice site."""
        if not 0 <= site < self.params.sites:
            raise IndexError(f"Site {site} out of range for {self.params.sites} sites")
        if not 0 <= orb < self.orbitals:
            raise ConfigurationError(f"{self.name} has no orbital {orb}")
        if self._sublattice is not None:
            return self._sublattice.index(site, orb)
        return site + orb * self.params.sites

    def row(self) -> int:
        """Returns the number of rows of the hopping matrix."""
        return self._ham.shape[0]

    def col(self) -> int:
        """Returns the number of columns of the hopping matrix."""
        return self._ham.shape[1]

    @property
    def hamiltonian(self) -> np.ndarray:
        """np.ndarray: Read-only view of the hopping matrix."""
        view = self._ham.view()
        view.flags.writeable = False
        return view

    def toarray(self) -> np.ndarray:
        """Returns a copy of the hopping matrix."""
        return self._ham.copy()

    def __getitem__(self, item):
        i, j = item
        n = self.rank
        if not (0 <= i < n and 0 <= j < n):
            raise IndexError(f"Index ({i}, {j}) out of range for rank {n}")
        return self._ham[i, j]

    def __array__(self, dtype=None, copy=None):
        return np.array(self._ham, dtype=dtype)

    def add_potential(self, values: Sequence[float]) -> None:
        """Sets the diagonal of the hopping matrix.

        Parameters
        ----------
        values : (N, ) Sequence of float
            The on-site potential. The length must equal the number of rows.
        """
        values = np.asarray(values, dtype=np.float64)
        if values.ndim != 1 or len(values) != self.row():
            raise ConfigurationError(
                f"add_potential: expecting {self.row()} numbers but "
                f"{values.size} found instead"
            )
        fill_diagonal(self._ham, values)

    def bathify(self, amplitudes: Sequence[float]) -> None:
        """Appends bath sites to every site of the lattice.

        Each site ``i`` gets ``M = len(amplitudes)`` bath sites with indices
        ``N + j + M * i`` that only couple to site ``i`` with ``amplitudes[j]``.

        Parameters
        ----------
        amplitudes : (M, ) Sequence of float
            The hopping between a site and each of its bath sites.
        """
        amplitudes = np.atleast_1d(np.asarray(amplitudes, dtype=np.float64))
        sites = self.params.sites
        if self._ham.size == 1:
            raise ConfigurationError("bathify: lattice has a single site")
        if self.row() != sites or self.col() != sites:
            raise ConfigurationError(
                f"bathify: matrix of shape {self.shape} does not match {sites} sites"
            )
        num_bath = len(amplitudes)
        if num_bath == 0:
            raise ConfigurationError("bathify: no bath amplitudes given")

        size = sites * (1 + num_bath)
        ham = np.zeros((size, size), dtype=self._ham.dtype)
        ham[:sites, :sites] = self._ham
        for i in range(sites):
            for j in range(num_bath):
                k = sites + j + num_bath * i
                ham[i, k] = ham[k, i] = amplitudes[j]
        logger.debug("Added %d bath sites per site", num_bath)
        self._ham = ham

    def fourier_transform(self, src, leg=None) -> np.ndarray:
        """Projects a real-space matrix onto the momenta of the square lattice.

        Parameters
        ----------
        src : (N, N) np.ndarray
            The real-space matrix on the ``N`` grid sites, numbered
            ``x + y * length_x``.
        leg : int, optional
            The number of sites along y. Defaults to the leg of the geometry.

        Returns
        -------
        dest : (N, ) complex np.ndarray
            The diagonal ``d_k = Σ_{ij} B^*_{ik} S_{ij} B_{jk}`` in momentum space.
        """
        if self.type != LatticeType.FEAS:
            raise ConfigurationError(
                f"Fourier transform is not supported for {self.name} geometry"
            )
        src = np.asarray(src)
        n = self.params.sites
        if src.shape != (n, n):
            raise ConfigurationError(
                f"Source of shape {src.shape} does not match the {n} lattice sites"
            )
        if not self.params.periodic:
            logger.warning("Fourier transform of a non-periodic lattice")
        if leg is None:
            leg = self.params.leg
        basis = fourier_matrix(n, leg)
        return fourier_diagonal(src, basis)

    def dumps(self) -> str:
        return dumps(self._ham, self.name)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name}, shape={self.shape})"

    def __str__(self):
        return self.dumps()


def fit_potential(values, params: GeometryParameters) -> np.ndarray:
    """Truncates a spin-resolved potential to the size of a spinless lattice.

    A potential with ``4N`` entries is cut to ``2N``. On a ladder a potential
    with ``2N`` entries is further cut to ``N``.
    """
    values = np.asarray(values, dtype=np.float64)
    n = params.sites
    if len(values) == 4 * n:
        values = values[: 2 * n]
    if len(values) == 2 * n and LatticeType.parse(params.type) == LatticeType.LADDER:
        values = values[:n]
    return values
