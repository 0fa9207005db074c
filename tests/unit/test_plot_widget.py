"""
Unit tests for view/plot_widget.py and view/main_window.py (offscreen Qt).
"""

import pytest

from functionplot.model.sampler import Sample
from functionplot.model.scaling import Viewport


class TestPlotWidget:

    def test_viewport_follows_size(self, qapp, default_samples):
        from functionplot.view.plot_widget import PlotWidget

        widget = PlotWidget(default_samples)
        widget.resize(640, 480)
        assert widget.current_viewport() == Viewport(640.0, 480.0, 50.0)

        widget.resize(320, 240)
        assert widget.current_viewport() == Viewport(320.0, 240.0, 50.0)

    def test_samples_cached_as_tuple(self, qapp, default_samples):
        from functionplot.view.plot_widget import PlotWidget

        widget = PlotWidget(list(default_samples))
        assert widget.samples() == default_samples

        widget.set_samples([Sample(1.0, 2.0)])
        assert widget.samples() == (Sample(1.0, 2.0),)

    def test_grab_repaints(self, qapp, default_samples):
        from functionplot.view.plot_widget import PlotWidget

        widget = PlotWidget(default_samples)
        widget.resize(400, 300)
        pixmap = widget.grab()
        assert pixmap.width() == 400
        assert pixmap.height() == 300


class TestRenderToImage:

    def test_size(self, qapp, default_samples):
        from functionplot.view.plot_widget import render_to_image

        image = render_to_image(default_samples, 320, 200)
        assert (image.width(), image.height()) == (320, 200)

    def test_save(self, qapp, default_samples, tmp_path):
        from functionplot.view.plot_widget import render_to_image

        path = tmp_path / "plot.png"
        render_to_image(default_samples, 320, 200, path)
        assert path.exists()
        assert path.stat().st_size > 0

    def test_save_failure(self, qapp, default_samples, tmp_path):
        from functionplot.view.plot_widget import render_to_image

        with pytest.raises(OSError, match="Could not save image"):
            render_to_image(default_samples, 320, 200, tmp_path / "missing" / "plot.png")


class TestMainWindow:

    def test_window_setup(self, qapp, default_samples):
        from functionplot.view.main_window import MainWindow

        window = MainWindow(default_samples)
        assert window.windowTitle() == "Function plot: y = tan(0.5x) / (x^3 + 7.5)"
        assert (window.width(), window.height()) == (800, 600)
        assert (window.minimumWidth(), window.minimumHeight()) == (400, 300)
        assert window.plot.samples() == default_samples

    def test_export_image(self, qapp, default_samples, tmp_path):
        from functionplot.view.main_window import MainWindow

        window = MainWindow(default_samples)
        path = tmp_path / "export.png"
        window.export_image(str(path))
        assert path.exists()
