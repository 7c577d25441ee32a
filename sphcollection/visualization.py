"""
Plotting helpers for the spherical test functions.
"""

import numpy as np
from typing import Callable, Optional, Tuple, Union
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from . import catalog


def plot_function(
    func: Union[str, Callable],
    n_theta: int = 181,
    n_phi: int = 361,
    ax: Optional[Axes] = None,
    cmap: str = 'viridis',
    dtype=None,
) -> Tuple[Figure, Axes]:
    """
    Plot a test function over the (phi, theta) rectangle.

    Parameters
    ----------
    func : str or callable
        Catalog entry name or a function ``f(theta, phi)``
    n_theta, n_phi : int
        Number of grid nodes along theta in [0, pi] and phi in [0, 2 pi]
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure
    cmap : str
        Matplotlib colormap name
    dtype : numpy dtype, optional
        Floating width used for the evaluation. Default: float64

    Returns
    -------
    fig : matplotlib.figure.Figure
        Figure object
    ax : matplotlib.axes.Axes
        Axes object

    Examples
    --------
    >>> fig, ax = plot_function("renka_f5")
    >>> fig.savefig("renka_f5.png")
    """
    if n_theta < 2 or n_phi < 2:
        raise ValueError(
            f"Grid needs at least 2 nodes per axis, got {n_theta}x{n_phi}"
        )

    if isinstance(func, str):
        name = func
        func = catalog.get_function(func)
    else:
        name = getattr(func, '__name__', 'f')

    dtype = np.dtype(np.float64 if dtype is None else dtype)
    theta = np.linspace(0.0, np.pi, n_theta, dtype=dtype)
    phi = np.linspace(0.0, 2.0 * np.pi, n_phi, dtype=dtype)
    phi_grid, theta_grid = np.meshgrid(phi, theta)
    values = func(theta_grid, phi_grid)

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    mesh = ax.pcolormesh(phi_grid, theta_grid, values, cmap=cmap,
                         shading='auto')
    fig.colorbar(mesh, ax=ax, label='f(θ, φ)')

    ax.set_xlabel('φ (rad)')
    ax.set_ylabel('θ (rad)')
    ax.set_xlim(0.0, 2.0 * np.pi)
    ax.set_ylim(np.pi, 0.0)
    ax.set_title(name)

    fig.tight_layout()
    return fig, ax
