# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import numpy as np
import lattpy as lp
from pytest import mark, raises
from hypothesis import given, strategies as st
from numpy.testing import assert_array_equal, assert_allclose
from scipy import linalg as la
from freefermions import ConfigurationError, is_hermitian
from freefermions.lattices import chain_hamiltonian, ladder_hamiltonian
from freefermions.lattices.chain import ladder_neighbors


def tight_binding_hamiltonian(latt, eps=0.0, hop=1.0):
    dmap = latt.dmap()
    data = np.zeros(dmap.size)
    data[dmap.onsite()] = eps
    data[dmap.hopping()] = hop
    return dmap.build_csr(data).toarray()


def test_chain_open():
    expected = [
        [0.0, 1.0, 0.0, 0.0],
        [1.0, 0.0, 1.0, 0.0],
        [0.0, 1.0, 0.0, 1.0],
        [0.0, 0.0, 1.0, 0.0],
    ]
    ham = chain_hamiltonian(4, hop=1.0)
    assert_array_equal(ham, expected)


def test_chain_periodic():
    expected = [
        [0.0, 1.0, 0.0, 1.0],
        [1.0, 0.0, 1.0, 0.0],
        [0.0, 1.0, 0.0, 1.0],
        [1.0, 0.0, 1.0, 0.0],
    ]
    ham = chain_hamiltonian(4, hop=1.0, periodic=True)
    assert_array_equal(ham, expected)


def test_chain_single_site():
    assert_array_equal(chain_hamiltonian(1, periodic=True), [[0.0]])
    with raises(ConfigurationError):
        chain_hamiltonian(0)


@given(st.integers(2, 30), st.floats(-5, 5), st.booleans())
def test_chain_bonds(num_sites, hop, periodic):
    ham = chain_hamiltonian(num_sites, hop, periodic)
    expected = np.zeros((num_sites, num_sites))
    for i in range(num_sites - 1):
        expected[i, i + 1] = expected[i + 1, i] = hop
    if periodic:
        expected[0, num_sites - 1] = expected[num_sites - 1, 0] = hop
    assert_array_equal(ham, expected)


@mark.parametrize("num_sites", [4, 5, 6, 7])
@mark.parametrize("periodic", [False, True])
def test_chain_spectrum_lattpy(num_sites, periodic):
    latt = lp.finite_hypercubic(num_sites, periodic=periodic)
    expected = la.eigvalsh(tight_binding_hamiltonian(latt, hop=1.0))
    ham = chain_hamiltonian(latt.num_sites, hop=1.0, periodic=periodic)
    assert_allclose(la.eigvalsh(ham), expected, atol=1e-10)


def test_ladder_two_legs():
    # 0 - 1
    # |   |
    # 2 - 3
    # |   |
    # 4 - 5
    ham = ladder_hamiltonian(6, 2, hop=(1.0, 1.0))
    expected = np.zeros((6, 6))
    for i, j in [(0, 1), (0, 2), (1, 3), (2, 3), (2, 4), (3, 5), (4, 5)]:
        expected[i, j] = expected[j, i] = 1.0
    assert_array_equal(ham, expected)


def test_ladder_amplitudes():
    ham = ladder_hamiltonian(6, 2, hop=(1.0, 0.5))
    assert ham[0, 1] == 0.5
    assert ham[0, 2] == 1.0
    assert ham[2, 3] == 0.5
    assert ham[3, 5] == 1.0


def test_ladder_periodic_rungs():
    ham = ladder_hamiltonian(6, 3, hop=(1.0, 0.5), periodic_y=True)
    assert ham[0, 2] == ham[2, 0] == 0.5
    assert ham[3, 5] == ham[5, 3] == 0.5
    assert ham[0, 3] == 1.0
    assert ham[2, 3] == 0.0
    assert is_hermitian(ham)


def test_ladder_neighbors():
    assert sorted(ladder_neighbors(0, 6, 2)) == [1, 2]
    assert sorted(ladder_neighbors(1, 6, 2)) == [0, 3]
    assert sorted(ladder_neighbors(3, 6, 2)) == [1, 2, 5]
    assert sorted(ladder_neighbors(3, 9, 3, periodic_y=True)) == [0, 4, 5, 6]


@mark.parametrize("leg", [0, 1])
def test_ladder_leg_too_small(leg):
    with raises(ConfigurationError):
        ladder_hamiltonian(6, leg)


def test_ladder_invalid_parameters():
    with raises(ConfigurationError):
        ladder_hamiltonian(6, 2, periodic_y=True)
    with raises(ConfigurationError):
        ladder_hamiltonian(6, 2, hop=(1.0,))


@mark.parametrize("length", [2, 3, 4])
@mark.parametrize("leg", [2, 3])
def test_ladder_spectrum(length, leg):
    ham = ladder_hamiltonian(length * leg, leg, hop=(1.0, 1.0))
    kx = np.pi * np.arange(1, length + 1) / (length + 1)
    ky = np.pi * np.arange(1, leg + 1) / (leg + 1)
    expected = np.sort(np.add.outer(2 * np.cos(kx), 2 * np.cos(ky)).flatten())
    assert_allclose(la.eigvalsh(ham), expected, atol=1e-10)


@given(st.integers(2, 5), st.integers(1, 6), st.booleans())
def test_ladder_symmetric(leg, length, periodic_y):
    periodic_y = periodic_y and leg > 2
    ham = ladder_hamiltonian(leg * length, leg, (1.0, 0.3), periodic_y)
    assert_array_equal(ham, ham.T)
