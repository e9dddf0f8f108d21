# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import os
import matplotlib.pyplot as plt
from scipy import linalg as la
import freefermions as ff

TABLE = os.path.join(os.path.dirname(__file__), "tables", "kniffour.txt")


def main():
    params = ff.GeometryParameters.from_descriptor(16, f"kniffour,1,{TABLE}")
    geometry = ff.LatticeBuilder(params)
    energies = la.eigvalsh(geometry.hamiltonian)

    fig, ax = plt.subplots()
    ax.plot(energies, marker="o", ls="")
    ax.set_xlabel("Index")
    ax.set_ylabel("Energy")
    ax.set_title(f"{geometry.name}: rank {geometry.rank}")
    fig.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
