"""
Plots for simulation histories.

- Population over time, split by lifecycle status
- Mean trait values over time
- Occupancy map of a single world, coloured by plant height

All functions take an optional matplotlib axis and return the axis they
drew on.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from understory.config import Status
from understory.rollout import History
from understory.traits import TRAIT_NAMES
from understory.world import World, iter_occupants


def plot_population(history: History, title: str = "Population", ax=None):
    """
    Plot living plants per tick.

    Args:
        history: Output from run_simulation
        title: Plot title
        ax: Matplotlib axis (optional, creates new figure if None)

    Returns:
        Matplotlib axis with the plot
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 5))

    arrays = history.get_population_arrays()
    ticks = np.arange(len(arrays["total"]))

    ax.plot(ticks, arrays["total"], linewidth=2, color="black", label="total")
    for status, color in zip(Status, ("tab:brown", "tab:olive", "tab:green")):
        ax.plot(ticks, arrays[status.value], linewidth=1, color=color, label=status.value)

    ax.set_xlabel("Tick")
    ax.set_ylabel("Plants")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()

    return ax


def plot_trait_means(history: History, axes=None):
    """
    Plot the mean of each heritable trait over time, one panel per trait.

    Args:
        history: Output from run_simulation
        axes: Sequence of four matplotlib axes (optional)

    Returns:
        Array of matplotlib axes with the plots
    """
    if axes is None:
        _, axes = plt.subplots(2, 2, figsize=(12, 8))
    axes = np.ravel(axes)

    traits = history.get_trait_arrays()
    for ax, name in zip(axes, TRAIT_NAMES):
        values = traits[name]
        ax.plot(np.arange(len(values)), values, linewidth=2, color="tab:blue")
        ax.set_xlabel("Tick")
        ax.set_ylabel(name)
        ax.set_title(f"Mean {name}")
        ax.grid(True, alpha=0.3)

    return axes


def height_grid(world: World) -> np.ndarray:
    """Height of the plant in each cell, 0 for empty cells."""
    grid = np.zeros((len(world), len(world)))
    for (x, y), plant in iter_occupants(world):
        grid[x, y] = plant.height
    return grid


def plot_world(world: World, title: str = "Occupancy", ax=None):
    """Heatmap of plant heights across the grid."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    im = ax.imshow(height_grid(world), origin="upper", cmap="Greens")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    ax.set_title(title)
    plt.colorbar(im, ax=ax, label="Height")

    return ax


def save_history_plots(history: History, directory: str | Path) -> list[Path]:
    """Render population, trait and final-world plots as PNG files."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths = []

    fig, ax = plt.subplots(figsize=(10, 5))
    plot_population(history, ax=ax)
    paths.append(directory / "population.png")
    fig.savefig(paths[-1], dpi=150, bbox_inches="tight")
    plt.close(fig)

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    plot_trait_means(history, axes=axes)
    fig.tight_layout()
    paths.append(directory / "traits.png")
    fig.savefig(paths[-1], dpi=150, bbox_inches="tight")
    plt.close(fig)

    fig, ax = plt.subplots(figsize=(8, 8))
    plot_world(history.worlds[-1], title=f"Tick {history.num_ticks}", ax=ax)
    paths.append(directory / "world.png")
    fig.savefig(paths[-1], dpi=150, bbox_inches="tight")
    plt.close(fig)

    return paths
