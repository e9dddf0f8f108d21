# coding: utf-8
#
# This code is part of freefermions.
#
# Copyright (c) 2022, Dylan Jones

import numpy as np
import matplotlib.pyplot as plt
import freefermions as ff


def main():
    params = ff.GeometryParameters.from_descriptor(12, "ladder,3,1")
    geometry = ff.LatticeBuilder(params)
    geometry.add_potential(np.linspace(-0.5, 0.5, geometry.row()))
    print(geometry)

    fig, ax = plt.subplots()
    im = ax.matshow(geometry.hamiltonian, cmap="RdBu")
    fig.colorbar(im, ax=ax)
    ax.set_title(f"{geometry.name}: {params.sites} sites, leg {params.leg}")
    fig.tight_layout()
    fig.savefig("ladder_hamiltonian.png")
    plt.show()


if __name__ == "__main__":
    main()
