"""Render a numeric sequence as a self-contained HTML document.

The figure is drawn with matplotlib and embedded as inline SVG, so the
document needs no external files or scripts.
"""

from __future__ import annotations

import html
import io
import logging
import os
from typing import Iterable, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..errors import EmptyInputError, LengthMismatchError
from .style import STYLE, StyleConfig, clean_axis, plot_style

logger = logging.getLogger(__name__)


def _figure_to_svg(fig: plt.Figure) -> str:
    buf = io.StringIO()
    fig.savefig(buf, format="svg", bbox_inches="tight")
    svg = buf.getvalue()
    # Drop the XML prolog and DOCTYPE; only the <svg> element is inlined.
    start = svg.find("<svg")
    return svg[start:] if start >= 0 else svg


def render_html(
    values: Iterable[float],
    x: Optional[Iterable[float]] = None,
    fitted: Optional[Iterable[float]] = None,
    title: Optional[str] = None,
    style: StyleConfig = STYLE,
) -> str:
    """Render a sequence, optionally with a fitted overlay, as HTML.

    Args:
        values (Iterable[float]): Sequence to draw.
        x (Iterable[float], optional): Abscissa for each value. Defaults to
            the element index.
        fitted (Iterable[float], optional): Fitted values aligned with
            ``values``, such as ``RegressionModel.fitted_points``. Drawn as a
            line over the data markers.
        title (str, optional): Document and figure title.
        style (StyleConfig, optional): Plot style.

    Returns:
        str: Document beginning with ``<html>`` and ending with ``</html>``.

    Raises:
        EmptyInputError: If ``values`` is empty.
        LengthMismatchError: If ``x`` or ``fitted`` is not aligned with
            ``values``.
    """
    y_arr = np.asarray(values, dtype=float)
    if y_arr.size == 0:
        raise EmptyInputError("Cannot render an empty sequence.")
    x_arr = np.arange(y_arr.size, dtype=float) if x is None else np.asarray(x, dtype=float)
    if x_arr.shape != y_arr.shape:
        raise LengthMismatchError(
            f"x has {x_arr.size} values but the sequence has {y_arr.size}."
        )
    fit_arr = None if fitted is None else np.asarray(fitted, dtype=float)
    if fit_arr is not None and fit_arr.shape != y_arr.shape:
        raise LengthMismatchError(
            f"fitted has {fit_arr.size} values but the sequence has {y_arr.size}."
        )

    heading = title or "datakit plot"
    with plot_style(style):
        fig, ax = plt.subplots(figsize=style.FIGSIZE)
        try:
            if fit_arr is None:
                ax.plot(x_arr, y_arr, marker="o", color=style.DATA_COLOR)
            else:
                ax.plot(
                    x_arr, y_arr, linestyle="none", marker="o",
                    color=style.DATA_COLOR, label="data",
                )
                order = np.argsort(x_arr, kind="stable")
                ax.plot(x_arr[order], fit_arr[order], color=style.FIT_COLOR, label="fit")
                ax.legend(loc="best")
            ax.set_title(heading)
            clean_axis(ax, style)
            svg = _figure_to_svg(fig)
        finally:
            plt.close(fig)

    logger.debug("Rendered %d points to %d characters of SVG", y_arr.size, len(svg))
    escaped = html.escape(heading)
    return (
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escaped}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{svg}\n"
        "</body>\n"
        "</html>"
    )


def save_html(document: str, path: str) -> str:
    """Write a rendered document to ``path``, creating parent directories."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(document)
    return path
