# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import json
from pytest import mark, raises
from freefermions import GeometryParameters, LatticeType, ConfigurationError


def test_defaults():
    params = GeometryParameters(sites=4)
    assert params.type == LatticeType.CHAIN
    assert params.sites == 4
    assert params.leg == 1
    assert params.periodic is False
    assert params.periodic_y is False
    assert params.hopping == (1.0,)
    assert params.filename is None


def test_access():
    params = GeometryParameters("ladder", 6, 2, hopping=[1.0, 0.5])
    assert params["type"] == LatticeType.LADDER
    assert params.hopping == (1.0, 0.5)
    assert len(params) == 7
    assert list(params) == [
        "type",
        "sites",
        "leg",
        "periodic",
        "periodic_y",
        "hopping",
        "filename",
    ]


def test_read_only():
    params = GeometryParameters(sites=4)
    with raises(AttributeError):
        params.sites = 5
    with raises(TypeError):
        params["sites"] = 5


def test_replace():
    params = GeometryParameters(sites=4)
    other = params.replace(periodic=True)
    assert other.periodic and not params.periodic
    assert other.sites == 4
    assert params == GeometryParameters(sites=4)
    assert hash(params) == hash(GeometryParameters(sites=4))


@mark.parametrize(
    "value, expected",
    [
        ("chain", LatticeType.CHAIN),
        ("LADDER", LatticeType.LADDER),
        ("feas", LatticeType.FEAS),
        ("kniffour", LatticeType.KTWONIFFOUR),
        ("ktwoniffour", LatticeType.KTWONIFFOUR),
        (2, LatticeType.FEAS),
        (LatticeType.LADDER, LatticeType.LADDER),
    ],
)
def test_lattice_type_parse(value, expected):
    assert LatticeType.parse(value) == expected


@mark.parametrize("value", ["square", 7, None])
def test_lattice_type_invalid(value):
    with raises(ConfigurationError):
        LatticeType.parse(value)


def test_descriptor_chain():
    params = GeometryParameters.from_descriptor(4, "chain")
    assert params.type == LatticeType.CHAIN
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(4, "chain,2")


def test_descriptor_ladder():
    params = GeometryParameters.from_descriptor(8, "ladder,2,0")
    assert params.type == LatticeType.LADDER
    assert params.leg == 2
    assert params.hopping == (1.0, 1.0)
    assert not params.periodic_y
    params = GeometryParameters.from_descriptor(9, ["ladder", "3", "1"])
    assert params.periodic_y
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(8, "ladder,2")


@mark.parametrize("descriptor", ["ladder,3,1", "kniffour,1,table.txt"])
def test_descriptor_periodic_y_conflict(descriptor):
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(9, descriptor, periodic_y=False)


def test_descriptor_keywords():
    params = GeometryParameters.from_descriptor(
        8, "feas,2,hoppings.txt", periodic=True, periodic_y=True
    )
    assert params.periodic and params.periodic_y
    params = GeometryParameters.from_descriptor(8, "ladder,2,0", hopping=(1.0, 0.5))
    assert params.hopping == (1.0, 0.5)


def test_descriptor_tables():
    params = GeometryParameters.from_descriptor(8, "feas,2,hoppings.txt")
    assert params.type == LatticeType.FEAS
    assert params.filename == "hoppings.txt"
    assert not params.periodic_y
    params = GeometryParameters.from_descriptor(8, "kniffour,1,table.txt")
    assert params.type == LatticeType.KTWONIFFOUR
    assert params.periodic_y
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(8, "feas,2")
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(8, "square,2,file.txt")
    with raises(ConfigurationError):
        GeometryParameters.from_descriptor(8, "feas,x,file.txt")


def test_formatting():
    params = GeometryParameters("ladder", 6, 2, hopping=[1.0, 0.5])
    assert "type=ladder" in params.tostring()
    data = json.loads(params.json())
    assert data["type"] == "ladder"
    assert data["hopping"] == [1.0, 0.5]
    assert str(params).startswith("GeometryParameters(")
