#!/usr/bin/env python3
"""
Main script for summarising and fitting two numeric CSV columns.
"""

# Pipeline overview:
# 1) Load the CSV as text records.
# 2) Coerce the two requested columns to floats, filling empty cells.
# 3) Summarise each column (mean, sd, min, max) with the compensated engine.
# 4) Fit y against x by least squares.
# 5) Render the data with the fitted line as a self-contained HTML page.

import argparse
import logging
import os
import sys
import time

from datakit.data_processing import col, load_csv, numeric
from datakit.errors import DatakitError
from datakit.plotting import render_html, save_html
from datakit.plotting.style import DEFAULT_OUTPUT_DIR
from datakit.stats import fit, mean, sample_max, sample_min, sd


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Summarise two CSV columns and fit a least-squares line."
    )
    parser.add_argument("--input", required=True, help="Path to input CSV file.")
    parser.add_argument("--x", required=True, help="Independent-variable column.")
    parser.add_argument("--y", required=True, help="Dependent-variable column.")
    parser.add_argument(
        "--default",
        type=float,
        default=0.0,
        help="Value used for empty or non-numeric cells (default: 0.0).",
    )
    parser.add_argument(
        "--outdir",
        default=str(DEFAULT_OUTPUT_DIR),
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    return parser


def _summarise(name, values):
    logging.info(
        "%s: n=%d mean=%.6g sd=%.6g min=%.6g max=%.6g",
        name,
        len(values),
        mean(values),
        sd(values),
        sample_min(values),
        sample_max(values),
    )


def main(argv=None):
    """Run the load, summarise, fit and render pipeline."""

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    args = _build_arg_parser().parse_args(argv)

    start_time = time.time()
    logging.info("Loading records from %s", args.input)
    records = load_csv(args.input)
    logging.info("Loaded %d records", len(records))

    try:
        converted = numeric(records, [args.x, args.y], args.default)
        x = col(converted, args.x)
        y = col(converted, args.y)

        _summarise(args.x, x)
        _summarise(args.y, y)

        step_start = time.time()
        model = fit(x, y)
        logging.info(
            "Fitted %s = %.6g * %s + %.6g in %.3f seconds",
            args.y,
            model.slope,
            args.x,
            model.intercept,
            time.time() - step_start,
        )
    except (DatakitError, KeyError) as exc:
        logging.error("Analysis failed: %s", exc)
        return 1

    document = render_html(
        y, x=x, fitted=model.fitted_points, title=f"{args.y} vs {args.x}"
    )
    html_path = save_html(document, os.path.join(args.outdir, "fit.html"))

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    logging.info("  - Fit plot: %s", html_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
