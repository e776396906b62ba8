import matplotlib
import pytest

from datakit.errors import EmptyInputError, LengthMismatchError
from datakit.plotting import render_html, save_html
from datakit.stats import fit


def test_plot_returns_an_html_string():
    p = render_html([1, 2, 3])
    assert p[:6] == "<html>"
    assert p[-7:] == "</html>"
    assert "<svg" in p


def test_plot_with_fitted_overlay():
    x = [1, 2, 3, 5]
    y = [2.1, 3.9, 6.2, 9.8]
    model = fit(x, y)
    p = render_html(y, x=x, fitted=model.fitted_points, title="y <vs> x")
    assert p.startswith("<html>")
    assert "<title>y &lt;vs&gt; x</title>" in p


def test_plot_restores_rcparams():
    before = matplotlib.rcParams["lines.linewidth"]
    render_html([3.0, 1.0, 2.0])
    assert matplotlib.rcParams["lines.linewidth"] == before


def test_plot_rejects_empty_and_misaligned_input():
    with pytest.raises(EmptyInputError):
        render_html([])
    with pytest.raises(LengthMismatchError):
        render_html([1, 2, 3], x=[1, 2])
    with pytest.raises(LengthMismatchError):
        render_html([1, 2, 3], fitted=[1, 2])


def test_save_html_creates_directories(tmp_path):
    target = tmp_path / "nested" / "plot.html"
    out = save_html(render_html([1, 2, 3]), str(target))
    assert out == str(target)
    assert target.read_text(encoding="utf-8").startswith("<html>")
