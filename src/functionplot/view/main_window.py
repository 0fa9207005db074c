"""
Main Application Window
=======================
The top-level window that holds the plot and the File menu.

Why is this file needed?
------------------------
1. Layout: It hosts the PlotWidget as the central widget and sets the
   initial and minimum window size.
2. Routing: It connects the File menu actions (export, quit) to their handlers.
"""
from __future__ import annotations

import logging
from typing import Iterable

from PySide6.QtWidgets import QMainWindow, QFileDialog, QMessageBox
from PySide6.QtGui import QAction, QKeySequence

from functionplot import config
from functionplot.model.sampler import FORMULA_TEXT, Sample
from functionplot.view.plot_widget import PlotWidget, render_to_image


logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Function plot"


class MainWindow(QMainWindow):
    def __init__(self, samples: Iterable[Sample]) -> None:
        super().__init__()
        self.setWindowTitle(f"{VISIBLE_APP_NAME}: {FORMULA_TEXT}")
        self.resize(*config.WINDOW_SIZE)
        self.setMinimumSize(*config.MINIMUM_WINDOW_SIZE)

        self.plot = PlotWidget(samples, parent=self)
        self.setCentralWidget(self.plot)

        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_export = QAction("&Export image...", self)
        self.act_export.setShortcut(QKeySequence.StandardKey.Save)
        self.act_export.triggered.connect(self.on_export_image)

        self.act_exit = QAction("&Quit", self)
        self.act_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    def export_image(self, path: str) -> None:
        """Save the plot at the current widget size to ``path``."""
        render_to_image(
            self.plot.samples(),
            max(1, self.plot.width()),
            max(1, self.plot.height()),
            path,
        )

    def on_export_image(self) -> None:
        fname, _ = QFileDialog.getSaveFileName(
            self, "Export Image", "plot.png", "PNG Images (*.png);;JPEG Images (*.jpg *.jpeg)"
        )
        if fname:
            # Ensure extension
            if not fname.lower().endswith((".png", ".jpg", ".jpeg")):
                fname += ".png"

            try:
                self.export_image(fname)
            except OSError as e:
                logger.error("Export failed: %s", e)
                QMessageBox.critical(self, "Error", f"Could not export the image:\n{e}")
