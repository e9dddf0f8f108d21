# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Reader for the plain text tables holding hoppings and potentials.

A table is a sequence of labeled entries. Vectors and matrices start with a line
whose first token is the label, followed by the sizes and the values::

    hoppings
    4
    1.0 0.5 0.5 1.0

    Connectors
    2 1
    0.5
    -0.5

Scalars are stored on a single line as ``label=value``::

    SignChange=-1

Entries are read sequentially: reading a label that occurs multiple times returns
the entries in file order.
"""

import logging
import numpy as np
from .errors import ConfigurationError, MissingDataError

logger = logging.getLogger(__name__)

__all__ = ["TableReader", "read_hoppings", "read_potential"]


class TableReader:
    """Sequential reader of a labeled text table.

    Parameters
    ----------
    filename : str
        The path of the table file.
    """

    def __init__(self, filename):
        self.filename = str(filename)
        try:
            with open(self.filename, "r", encoding="utf-8") as fh:
                self._lines = fh.read().splitlines()
        except FileNotFoundError:
            raise MissingDataError(
                None, self.filename, f"Table file '{self.filename}' not found"
            ) from None
        except UnicodeDecodeError:
            raise ConfigurationError(
                f"Table file '{self.filename}' is not a text file"
            ) from None
        except OSError as err:
            raise MissingDataError(
                None,
                self.filename,
                f"Table file '{self.filename}' cannot be read: {err.strerror}",
            ) from None
        self._pos = 0

    @classmethod
    def from_string(cls, text: str, filename="<string>"):
        self = cls.__new__(cls)
        self.filename = filename
        self._lines = text.splitlines()
        self._pos = 0
        return self

    @property
    def position(self) -> int:
        """int: The index of the next line that is searched."""
        return self._pos

    def rewind(self) -> None:
        """Moves the reader back to the start of the table."""
        self._pos = 0

    def _find(self, label, prefix=False):
        for i in range(self._pos, len(self._lines)):
            tokens = self._lines[i].split()
            if not tokens:
                continue
            if tokens[0] == label or (prefix and tokens[0].startswith(label)):
                return i, tokens
        raise MissingDataError(label, self.filename)

    def _stream(self, start, first):
        """Yields ``(line, token)`` pairs beginning with the tokens ``first``."""
        for token in first:
            yield start, token
        for i in range(start + 1, len(self._lines)):
            for token in self._lines[i].split():
                yield i, token

    def _take(self, label, stream, count, dtype):
        values = list()
        line = self._pos
        for _ in range(count):
            try:
                line, token = next(stream)
            except StopIteration:
                raise ConfigurationError(
                    f"Unexpected end of table reading '{label}' in {self.filename}"
                ) from None
            try:
                values.append(dtype(token))
            except ValueError:
                raise ConfigurationError(
                    f"Invalid value '{token}' for '{label}' in {self.filename}"
                ) from None
        return values, line

    def _read_sizes(self, label, stream, num):
        sizes, line = self._take(label, stream, num, int)
        if any(s < 0 for s in sizes):
            raise ConfigurationError(f"Negative size for '{label}' in {self.filename}")
        return sizes, line

    def read_vector(self, label: str, dtype=float) -> np.ndarray:
        """Reads the next vector with the given label.

        Parameters
        ----------
        label : str
            The label of the vector entry.
        dtype : callable, optional
            Conversion applied to each value. The default is ``float``.

        Returns
        -------
        vec : (N, ) np.ndarray
        """
        start, tokens = self._find(label)
        stream = self._stream(start, tokens[1:])
        (size,), line = self._read_sizes(label, stream, 1)
        values, last = self._take(label, stream, size, dtype)
        self._pos = max(line, last) + 1
        return np.array(values)

    def read_matrix(self, label: str, dtype=float) -> np.ndarray:
        """Reads the next matrix with the given label.

        The label is followed by the number of rows and columns and the
        elements in row-major order.

        Parameters
        ----------
        label : str
            The label of the matrix entry.
        dtype : callable, optional
            Conversion applied to each value. The default is ``float``.

        Returns
        -------
        mat : (N, M) np.ndarray
        """
        start, tokens = self._find(label)
        stream = self._stream(start, tokens[1:])
        (nrows, ncols), line = self._read_sizes(label, stream, 2)
        values, last = self._take(label, stream, nrows * ncols, dtype)
        self._pos = max(line, last) + 1
        return np.array(values).reshape(nrows, ncols)

    def read_value(self, label: str, dtype=float):
        """Reads the next scalar stored as ``label=value`` (or ``label value``)."""
        start, tokens = self._find(label, prefix=True)
        head = tokens[0][len(label):]
        first = [head] if head else list()
        stream = self._stream(start, first + tokens[1:])
        values, line = self._take(label, stream, 1, dtype)
        self._pos = line + 1
        return values[0]

    def __repr__(self):
        return f"{self.__class__.__name__}({self.filename!r})"


def read_hoppings(filename, label="hoppings") -> np.ndarray:
    """Reads the hopping vector of a geometry table."""
    return TableReader(filename).read_vector(label)


def read_potential(filename) -> np.ndarray:
    """Reads the on-site potential of a table.

    The ``potentialV`` entry is required. If the table also contains a
    ``PotentialT`` entry, ``potentialV`` is truncated to its length and the two
    are added.

    Parameters
    ----------
    filename : str
        The path of the table file.

    Returns
    -------
    potential : (N, ) np.ndarray
    """
    io = TableReader(filename)
    try:
        pot_t = io.read_vector("PotentialT")
    except MissingDataError:
        logger.info("No PotentialT in file %s", filename)
        pot_t = np.zeros(0)
    io.rewind()

    pot_v = io.read_vector("potentialV")
    if len(pot_t) == 0:
        return pot_v
    if len(pot_v) < len(pot_t):
        raise ConfigurationError(
            f"potentialV has {len(pot_v)} entries but PotentialT has {len(pot_t)}"
        )
    pot_v = pot_v[: len(pot_t)]
    return pot_v + pot_t
