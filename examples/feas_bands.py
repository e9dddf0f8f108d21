# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import os
import numpy as np
import matplotlib.pyplot as plt
import freefermions as ff
from freefermions.lattices import square_hopping_block

TABLE = os.path.join(os.path.dirname(__file__), "tables", "feas.txt")


def main():
    sites, leg = 64, 8
    params = ff.GeometryParameters(ff.LatticeType.FEAS, sites, leg, True, filename=TABLE)
    geometry = ff.LatticeBuilder(params)
    print(repr(geometry))

    # intra-orbital block of orbital a in grid ordering
    hoppings = ff.read_hoppings(TABLE)
    src = square_hopping_block(sites, leg, hoppings, pair=0, periodic=True)
    energies = geometry.fourier_transform(src).real / sites

    lx = sites // leg
    k = np.arange(sites)
    fig, ax = plt.subplots()
    sc = ax.scatter(k % lx, k // lx, c=energies, s=200, cmap="viridis")
    fig.colorbar(sc, ax=ax, label="ε(k)")
    ax.set_xlabel("$k_x$")
    ax.set_ylabel("$k_y$")
    fig.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
