"""Centralized plotting style for rendered sequences."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.ticker import MaxNLocator

FIGURE_DPI = 100
DEFAULT_OUTPUT_DIR = Path("output")


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 11.0
    TITLE_FONTSIZE: float = 13.0
    TICK_FONTSIZE: float = 10.0
    LEGEND_FONTSIZE: float = 10.0
    LINEWIDTH: float = 1.8
    LINEWIDTH_THIN: float = 1.0
    MARKERSIZE: float = 4.5
    GRID_ALPHA: float = 0.20
    DATA_COLOR: str = "#1f77b4"
    FIT_COLOR: str = "#d62728"
    FIGSIZE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()


def _rc_params(style: StyleConfig) -> dict:
    return {
        "font.size": style.BASE_FONTSIZE,
        "axes.titlesize": style.TITLE_FONTSIZE,
        "xtick.labelsize": style.TICK_FONTSIZE,
        "ytick.labelsize": style.TICK_FONTSIZE,
        "legend.fontsize": style.LEGEND_FONTSIZE,
        "legend.frameon": False,
        "axes.linewidth": style.LINEWIDTH_THIN,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "lines.linewidth": style.LINEWIDTH,
        "lines.markersize": style.MARKERSIZE,
        "figure.dpi": FIGURE_DPI,
        # Keep text as text so the inline SVG stays small.
        "svg.fonttype": "none",
    }


@contextmanager
def plot_style(style: StyleConfig = STYLE) -> Iterator[StyleConfig]:
    """Apply the datakit rcParams for the duration of a ``with`` block.

    The previous rcParams are restored on exit, so rendering never leaks
    global matplotlib state.
    """
    with plt.rc_context(_rc_params(style)):
        yield style


def clean_axis(ax: Axes, style: StyleConfig = STYLE) -> None:
    """Apply consistent ticks and a light horizontal grid to one axis."""
    ax.xaxis.set_major_locator(MaxNLocator(nbins=6))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=6))
    ax.grid(True, axis="y", alpha=style.GRID_ALPHA, linestyle=":", linewidth=0.7)
