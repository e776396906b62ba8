"""
HTML rendering for numeric sequences and fitted models.

Modules:
    report_html:
        Draw a sequence (optionally with a fitted line) with matplotlib and
        embed it as inline SVG in a self-contained HTML document.

    style:
        Frozen style configuration applied through a scoped rcParams
        context, so rendering never changes global matplotlib state.

Design Principle:
    No statistics are computed here. Callers pass precomputed values, for
    example ``RegressionModel.fitted_points``.
"""

from .report_html import render_html, save_html
from .style import STYLE, StyleConfig, plot_style

__all__ = ["render_html", "save_html", "STYLE", "StyleConfig", "plot_style"]
