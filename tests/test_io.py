# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

from pytest import raises
from numpy.testing import assert_array_equal
from freefermions import ConfigurationError, MissingDataError
from freefermions.io import TableReader, read_hoppings, read_potential
from .tables import write_feas_table, FEAS_HOPPINGS

TABLE = """\
SignChange=-1
hoppings 4
1.0 2.0
3.0 4.0

Connectors
2 2
1 2
3 4
Connectors 1 2
5 6
value 7
"""


def test_read_vector():
    io = TableReader.from_string(TABLE)
    assert_array_equal(io.read_vector("hoppings"), [1.0, 2.0, 3.0, 4.0])


def test_read_matrix_sequential():
    io = TableReader.from_string(TABLE)
    assert_array_equal(io.read_matrix("Connectors"), [[1, 2], [3, 4]])
    assert_array_equal(io.read_matrix("Connectors"), [[5, 6]])
    with raises(MissingDataError):
        io.read_matrix("Connectors")


def test_read_value():
    io = TableReader.from_string(TABLE)
    assert io.read_value("SignChange=", int) == -1
    assert io.read_value("value") == 7.0


def test_rewind():
    io = TableReader.from_string(TABLE)
    io.read_matrix("Connectors")
    with raises(MissingDataError):
        io.read_vector("hoppings")
    io.rewind()
    assert io.position == 0
    assert len(io.read_vector("hoppings")) == 4


def test_missing_label_keeps_position():
    io = TableReader.from_string(TABLE)
    io.read_vector("hoppings")
    pos = io.position
    with raises(MissingDataError):
        io.read_value("SignChange=")
    assert io.position == pos


def test_malformed_values():
    with raises(ConfigurationError):
        TableReader.from_string("hoppings\n2\n1.0 abc\n").read_vector("hoppings")
    with raises(ConfigurationError):
        TableReader.from_string("hoppings\n3\n1.0 2.0\n").read_vector("hoppings")
    with raises(ConfigurationError):
        TableReader.from_string("hoppings\n-1\n").read_vector("hoppings")


def test_missing_file(tmp_path):
    with raises(MissingDataError):
        TableReader(tmp_path / "missing.txt")


def test_table_is_directory(tmp_path):
    with raises(MissingDataError):
        TableReader(tmp_path)
    with raises(MissingDataError):
        read_hoppings(tmp_path)


def test_table_not_text(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00hoppings 1 \xff")
    with raises(ConfigurationError):
        TableReader(path)


def test_read_hoppings(tmp_path):
    filename = write_feas_table(tmp_path)
    assert_array_equal(read_hoppings(filename), FEAS_HOPPINGS)


def test_read_potential(tmp_path):
    file = tmp_path / "pot.txt"
    file.write_text("potentialV\n4\n1 2 3 4\n")
    assert_array_equal(read_potential(str(file)), [1, 2, 3, 4])

    file.write_text("potentialV\n4\n1 2 3 4\nPotentialT\n2\n0.5 0.5\n")
    assert_array_equal(read_potential(str(file)), [1.5, 2.5])


def test_read_potential_missing(tmp_path):
    file = tmp_path / "pot.txt"
    file.write_text("PotentialT\n2\n0.5 0.5\n")
    with raises(MissingDataError):
        read_potential(str(file))
    file.write_text("potentialV\n1\n1\nPotentialT\n2\n0.5 0.5\n")
    with raises(ConfigurationError):
        read_potential(str(file))
