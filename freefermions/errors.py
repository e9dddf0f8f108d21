# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Exceptions raised while building lattice geometries."""

__all__ = [
    "GeometryError",
    "ConfigurationError",
    "MissingDataError",
    "HermiticityViolation",
]


class GeometryError(Exception):
    """Base class of all errors raised by ``freefermions``."""


class ConfigurationError(GeometryError, ValueError):
    """Invalid or inconsistent geometry parameters."""


class MissingDataError(GeometryError, LookupError):
    """A required label is missing from an input table."""

    def __init__(self, label, filename=None, msg=None):
        self.label = label
        self.filename = filename
        if msg is None:
            msg = f"Label '{label}' not found"
            if filename:
                msg += f" in file '{filename}'"
        super().__init__(msg)

    def __str__(self):
        return self.args[0]


class HermiticityViolation(GeometryError, ValueError):
    """A hopping matrix (or one of its orbital blocks) is not symmetric."""
