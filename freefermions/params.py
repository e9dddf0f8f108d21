# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import json
import numpy as np
from enum import IntEnum
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any, Dict, Iterator
from .errors import ConfigurationError

__all__ = ["LatticeType", "Direction", "GeometryParameters"]


class LatticeType(IntEnum):
    """Topology families supported by the ``LatticeBuilder``."""

    CHAIN = 0
    LADDER = 1
    FEAS = 2
    KTWONIFFOUR = 3

    @property
    def label(self) -> str:
        return _LATTICE_LABELS[self]

    @classmethod
    def parse(cls, value) -> "LatticeType":
        """Converts a ``LatticeType``, an integer or a name to a ``LatticeType``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for item, label in _LATTICE_LABELS.items():
                if key == label or key == item.name.lower():
                    return item
            raise ConfigurationError(f"Unknown lattice type '{value}'")
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ConfigurationError(f"Unknown lattice type {value!r}") from None


_LATTICE_LABELS = {
    LatticeType.CHAIN: "chain",
    LatticeType.LADDER: "ladder",
    LatticeType.FEAS: "feas",
    LatticeType.KTWONIFFOUR: "kniffour",
}


class Direction(IntEnum):
    """Bond directions of the square-lattice geometries."""

    X = 0
    Y = 1
    XPY = 2
    XMY = 3


class GeometryParameters(Mapping):
    """Read-only parameter record of a lattice geometry.

    The parameters can be accessed as attributes or dict-entries. Use
    :meth:`replace` to derive a modified copy.

    Attributes
    ----------
    type : LatticeType
        The lattice type selecting the builder.
    sites : int
        The number of physical sites ``n``.
    leg : int
        The transverse width of ladder-like and square geometries.
    periodic : bool
        Global periodic boundary flag (chain and FeAs geometries).
    periodic_y : bool
        Periodic boundaries along the transverse direction (ladder and
        two-sublattice geometries).
    hopping : tuple of float
        Default hopping amplitudes. One value for the chain, two values
        ``(leg, rung)`` for the ladder.
    filename : str
        Path of the hopping table (FeAs and two-sublattice geometries).
    """

    def __init__(
        self,
        type=LatticeType.CHAIN,
        sites=0,
        leg=1,
        periodic=False,
        periodic_y=False,
        hopping=1.0,
        filename=None,
    ):
        Mapping.__init__(self)
        params = OrderedDict(
            type=LatticeType.parse(type),
            sites=int(sites),
            leg=int(leg),
            periodic=bool(periodic),
            periodic_y=bool(periodic_y),
            hopping=tuple(float(x) for x in np.atleast_1d(hopping)),
            filename=None if filename is None else str(filename),
        )
        object.__setattr__(self, "__params__", params)

    @classmethod
    def from_descriptor(cls, sites, descriptor, **kwargs):
        """Creates parameters from a comma separated geometry descriptor.

        Parameters
        ----------
        sites : int
            The number of sites.
        descriptor : str or Sequence of str
            One of ``"chain"``, ``"ladder,leg,isPeriodic"``, ``"feas,leg,filename"``
            or ``"kniffour,leg,filename"``. A descriptor with a single token
            always selects the chain.
        **kwargs
            Additional parameters, for example ``periodic`` or ``hopping``.

        Returns
        -------
        params : GeometryParameters
        """
        if isinstance(descriptor, str):
            tokens = [s.strip() for s in descriptor.split(",")]
        else:
            tokens = [str(s).strip() for s in descriptor]

        if len(tokens) < 2:
            return cls(LatticeType.CHAIN, sites, **kwargs)

        name = tokens[0].lower()
        if name == "chain":
            raise ConfigurationError("Geometry 'chain' takes no further arguments")
        try:
            leg = int(tokens[1])
        except ValueError:
            raise ConfigurationError(f"Invalid leg '{tokens[1]}'") from None
        if name in ("ladder", "kniffour", "ktwoniffour") and "periodic_y" in kwargs:
            raise ConfigurationError(
                f"periodic_y is set by the '{name}' descriptor and can't be passed"
            )

        if name == "ladder":
            if len(tokens) != 3:
                raise ConfigurationError("Usage is: ladder,leg,isPeriodic")
            try:
                periodic_y = int(tokens[2]) > 0
            except ValueError:
                raise ConfigurationError(f"Invalid flag '{tokens[2]}'") from None
            kwargs.setdefault("hopping", (1.0, 1.0))
            return cls(LatticeType.LADDER, sites, leg, periodic_y=periodic_y, **kwargs)

        if len(tokens) != 3:
            raise ConfigurationError("Usage is: {feas | kniffour},leg,filename")
        filename = tokens[2]
        if name == "feas":
            return cls(LatticeType.FEAS, sites, leg, filename=filename, **kwargs)
        if name in ("kniffour", "ktwoniffour"):
            return cls(
                LatticeType.KTWONIFFOUR,
                sites,
                leg,
                periodic_y=leg > 0,
                filename=filename,
                **kwargs,
            )
        raise ConfigurationError(f"Unknown geometry '{tokens[0]}'")

    @property
    def params(self) -> Dict[str, Any]:
        """dict: Returns a copy of all parameters."""
        return dict(self.__params__)

    def replace(self, **kwargs) -> "GeometryParameters":
        """Returns a copy of the parameters with the given values replaced."""
        params = self.params
        params.update(kwargs)
        return self.__class__(**params)

    def __len__(self) -> int:
        """Number of parameters."""
        return len(self.__params__)

    def __getitem__(self, key: str) -> Any:
        """Make parameters accessable as dictionary items."""
        return self.__params__[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__params__)

    def __getattr__(self, key: str) -> Any:
        """Make parameters accessable as attributes."""
        key = str(key)
        if not key.startswith("__") and key in self.__params__.keys():
            return self.__params__[key]
        else:
            return super().__getattribute__(key)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def __eq__(self, other):
        if isinstance(other, GeometryParameters):
            return self.__params__ == other.__params__
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self.__params__.items()))

    def tostring(self, decimals: int = None, delim: str = "; ") -> str:
        """Formats the parameters as string.

        Parameters
        ----------
        decimals : int, optional
            The number of decimal places used for formatting numeric values.
        delim : str
            The delimiter used to connect the parameter strings.

        Returns
        -------
        s : str
            The formatted string.
        """
        strings = list()
        for k, v in self.__params__.items():
            if isinstance(v, LatticeType):
                v = v.label
            elif decimals is not None and isinstance(v, float):
                v = f"{v:.{decimals}f}"
            strings.append(f"{k}={v}")
        return delim.join(strings)

    def json(self) -> str:
        """Formats the parameters as JSON string."""
        data = self.params
        data["type"] = data["type"].label
        return json.dumps(data)

    def pformat(self) -> str:
        return ", ".join([f"{k}={v}" for k, v in self.__params__.items()])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.params})"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.pformat()})"
