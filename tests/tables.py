# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

"""Hopping tables used by the tests."""

import numpy as np

# X, Y, X+Y, X-Y blocks of (aa, ba, ab, bb)
FEAS_HOPPINGS = np.array(
    [
        [-0.058, 0.2196, 0.2196, 0.2],
        [0.2, 0.2196, 0.2196, -0.058],
        [0.2, 0.3, 0.3, 0.2],
        [0.2, -0.3, -0.3, 0.2],
    ]
).flatten()

KNIFFOUR_CONNECTORS = """\
Connectors
2 1
0.5
0.6

Connectors
2 1
0.7
0.8

Connectors
2 2
0.1 0.2
0.2 0.3

Connectors
2 2
0.4 0.5
0.5 0.6
"""


def format_vector(label, values):
    values = " ".join(f"{x}" for x in values)
    return f"{label}\n{len(values.split())}\n{values}\n"


def write_feas_table(path, hoppings=FEAS_HOPPINGS):
    file = path / "feas.txt"
    file.write_text(format_vector("hoppings", hoppings))
    return str(file)


def write_kniffour_table(path, sign_change=-1, connectors=KNIFFOUR_CONNECTORS):
    text = ""
    if sign_change is not None:
        text += f"SignChange={sign_change}\n\n"
    text += connectors
    file = path / "kniffour.txt"
    file.write_text(text)
    return str(file)
