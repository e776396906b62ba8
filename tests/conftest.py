"""Pytest configuration: repository-relative imports and a headless matplotlib backend."""

import os
import sys

import matplotlib

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")
