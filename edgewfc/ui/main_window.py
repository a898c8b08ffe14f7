"""
Main application window.
"""

import logging
import random
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QToolBar, QLabel, QSpinBox,
    QPushButton, QFileDialog, QMessageBox, QStatusBar, QSizePolicy,
    QListWidget, QSplitter
)
from PySide6.QtCore import Qt, Slot

from ..core.serialization import load_config, save_result
from ..core.solver import GenerationResult, SolverState, generate
from ..core.validation import find_adjacency_violations
from ..models import GeneratorConfig
from ..utils.png_export import export_result_to_png

from .grid_canvas import GridCanvas

logger = logging.getLogger(__name__)

# Toolbar spin box limits; QSpinBox holds 32-bit ints
MAX_GRID_SIZE = 2000
MAX_SEED = 2 ** 31 - 1

STATUS_TEXT = {
    SolverState.DONE: "Complete",
    SolverState.DEGRADED: "Incomplete (degraded)",
    SolverState.FAILED: "Invalid configuration",
    SolverState.CONTRADICTION: "Contradiction!",
}


class MainWindow(QMainWindow):
    """Main application window for the tile generator."""

    def __init__(self):
        super().__init__()

        self._config: Optional[GeneratorConfig] = None
        self._config_path: Optional[Path] = None
        self._result: Optional[GenerationResult] = None

        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle("Edge WFC")
        self.setMinimumSize(800, 600)
        self.resize(1200, 800)

        # Dark theme
        self.setStyleSheet("""
            QMainWindow {
                background-color: #1e1e22;
            }
            QToolBar {
                background-color: #252528;
                border: none;
                border-bottom: 1px solid #303035;
                spacing: 6px;
                padding: 4px;
            }
            QToolBar QLabel {
                color: #b0b0b0;
                font-size: 11px;
            }
            QToolBar QPushButton {
                background-color: #2a2a30;
                border: 1px solid #404045;
                border-radius: 4px;
                padding: 4px 10px;
                color: #e0e0e0;
                font-size: 11px;
                min-width: 60px;
            }
            QToolBar QPushButton:hover {
                background-color: #353540;
                border-color: #505055;
            }
            QToolBar QPushButton:disabled {
                background-color: #1a1a1f;
                color: #606060;
                border-color: #303035;
            }
            QSpinBox {
                background-color: #2a2a30;
                border: 1px solid #404045;
                border-radius: 3px;
                padding: 2px 4px;
                color: #e0e0e0;
                min-width: 50px;
            }
            QListWidget {
                background-color: #222226;
                border: none;
                border-top: 1px solid #303035;
                color: #e08080;
                font-size: 11px;
            }
            QStatusBar {
                background-color: #252528;
                border-top: 1px solid #303035;
                color: #909090;
                font-size: 11px;
            }
            QStatusBar QLabel {
                color: #909090;
            }
        """)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._create_toolbar()

        splitter = QSplitter(Qt.Vertical)
        self._canvas = GridCanvas()
        self._canvas.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self._canvas.cell_hovered.connect(self._on_cell_hovered)
        splitter.addWidget(self._canvas)

        # Validation defects and adjacency violations
        self._issues_list = QListWidget()
        self._issues_list.setVisible(False)
        splitter.addWidget(self._issues_list)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter, 1)

        self._create_status_bar()

    def _create_toolbar(self):
        toolbar = QToolBar()
        toolbar.setMovable(False)
        toolbar.setFloatable(False)
        self.addToolBar(toolbar)

        self._open_btn = QPushButton("📂 Open config")
        self._open_btn.clicked.connect(self._on_open_config)
        toolbar.addWidget(self._open_btn)

        self._save_btn = QPushButton("💾 Save result")
        self._save_btn.clicked.connect(self._on_save_result)
        toolbar.addWidget(self._save_btn)

        self._export_png_btn = QPushButton("🖼 Export PNG")
        self._export_png_btn.clicked.connect(self._on_export_png)
        toolbar.addWidget(self._export_png_btn)

        toolbar.addSeparator()

        toolbar.addWidget(QLabel(" Grid: "))

        self._width_spin = QSpinBox()
        self._width_spin.setRange(1, MAX_GRID_SIZE)
        self._width_spin.setValue(10)
        toolbar.addWidget(self._width_spin)

        toolbar.addWidget(QLabel(" × "))

        self._height_spin = QSpinBox()
        self._height_spin.setRange(1, MAX_GRID_SIZE)
        self._height_spin.setValue(10)
        toolbar.addWidget(self._height_spin)

        toolbar.addSeparator()

        toolbar.addWidget(QLabel(" Seed: "))

        self._seed_spin = QSpinBox()
        self._seed_spin.setRange(0, MAX_SEED)
        self._seed_spin.setFixedWidth(100)
        toolbar.addWidget(self._seed_spin)

        self._reseed_btn = QPushButton("🎲")
        self._reseed_btn.setToolTip("Pick a random seed and generate")
        self._reseed_btn.clicked.connect(self._on_reseed)
        toolbar.addWidget(self._reseed_btn)

        toolbar.addSeparator()

        self._generate_btn = QPushButton("▶ Generate")
        self._generate_btn.clicked.connect(self._on_generate)
        toolbar.addWidget(self._generate_btn)

    def _create_status_bar(self):
        status = QStatusBar()
        self.setStatusBar(status)

        self._status_label = QLabel("Ready")
        status.addWidget(self._status_label)

        status.addWidget(QLabel(" │ "))

        self._progress_label = QLabel("Cells: 0/0")
        status.addWidget(self._progress_label)

        status.addWidget(QLabel(" │ "))

        self._iterations_label = QLabel("Iterations: 0")
        status.addWidget(self._iterations_label)

        status.addWidget(QLabel(" │ "))

        self._hover_label = QLabel("")
        status.addWidget(self._hover_label)

        self._file_label = QLabel("No file loaded")
        status.addPermanentWidget(self._file_label)

    def _update_ui_state(self):
        """Update UI enabled states based on current state."""
        has_config = self._config is not None
        has_grid = self._result is not None and self._result.grid is not None

        self._generate_btn.setEnabled(has_config)
        self._reseed_btn.setEnabled(has_config)
        self._save_btn.setEnabled(self._result is not None)
        self._export_png_btn.setEnabled(has_grid)

    def load_config_file(self, filepath: str):
        """Load a config and show it in the toolbar fields."""
        try:
            self._config = load_config(filepath)
        except (OSError, ValueError) as e:
            logger.error("Failed to load %s: %s", filepath, e)
            QMessageBox.critical(self, "Error", f"Failed to load file:\n{e}")
            return

        self._config, adjusted = self._config.clamped(MAX_GRID_SIZE, MAX_SEED)
        if adjusted:
            fields = ", ".join(adjusted)
            logger.warning("Adjusted %s of %s to fit the toolbar limits", fields, filepath)
            QMessageBox.warning(
                self, "Config adjusted",
                f"These values were out of range and have been adjusted: {fields}\n"
                f"Grid size is limited to {MAX_GRID_SIZE} and seed to 0..{MAX_SEED}."
            )

        self._config_path = Path(filepath)
        self._result = None
        self._width_spin.setValue(self._config.width)
        self._height_spin.setValue(self._config.height)
        self._seed_spin.setValue(self._config.seed)
        self._canvas.set_catalog(self._config.catalog, self._config_path.parent,
                                 round(self._config.tile_size))
        self._canvas.clear()
        self._issues_list.clear()
        self._issues_list.setVisible(False)

        self._file_label.setText(self._config_path.name)
        self._status_label.setText(f"Loaded {len(self._config.catalog)} tile types")
        self._update_ui_state()

    # === Slots ===

    @Slot()
    def _on_open_config(self):
        filepath, _ = QFileDialog.getOpenFileName(
            self, "Open Generator Config",
            "", "Generator Config (*.json);;All Files (*)"
        )
        if filepath:
            self.load_config_file(filepath)

    @Slot()
    def _on_generate(self):
        if self._config is None:
            return

        config = self._config.with_overrides(
            width=self._width_spin.value(),
            height=self._height_spin.value(),
            seed=self._seed_spin.value(),
        )
        self._result = generate(config)
        self._show_result(self._result)
        self._update_ui_state()

    @Slot()
    def _on_reseed(self):
        self._seed_spin.setValue(random.randint(0, MAX_SEED))
        self._on_generate()

    def _show_result(self, result: GenerationResult):
        self._issues_list.clear()
        self._iterations_label.setText(f"Iterations: {result.iterations}")

        if result.status == SolverState.FAILED:
            self._canvas.clear()
            self._progress_label.setText("Cells: 0/0")
            self._issues_list.addItems(result.validation.messages())
            self._issues_list.setVisible(True)
            self._status_label.setText(
                f"{STATUS_TEXT[result.status]}: {result.validation.error_count} defect(s)"
            )
            return

        grid = result.grid
        self._canvas.show_result(result)
        self._progress_label.setText(f"Cells: {grid.collapsed_count()}/{len(grid)}")

        violations = find_adjacency_violations(
            grid, self._config.catalog, self._config.compatibility
        )
        for index in result.contradictions:
            x, y = grid.position_of(index)
            self._issues_list.addItem(f"Contradiction at ({x},{y})")
        self._issues_list.addItems(violations)
        self._issues_list.setVisible(self._issues_list.count() > 0)

        text = STATUS_TEXT.get(result.status, result.status.name)
        if violations:
            text += f", {len(violations)} rule violation(s)"
        self._status_label.setText(text)

    @Slot()
    def _on_save_result(self):
        if self._result is None:
            return

        filepath, _ = QFileDialog.getSaveFileName(
            self, "Save Result",
            "", "Generation Result (*.json);;All Files (*)"
        )
        if not filepath:
            return

        try:
            save_result(self._result, filepath)
            self._status_label.setText(f"Saved to {Path(filepath).name}")
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Failed to save file:\n{e}")

    @Slot()
    def _on_export_png(self):
        if self._result is None or self._result.grid is None:
            return

        filepath, _ = QFileDialog.getSaveFileName(
            self, "Export PNG",
            "", "PNG Image (*.png);;All Files (*)"
        )
        if not filepath:
            return

        if not filepath.endswith('.png'):
            filepath += '.png'

        try:
            base_dir = self._config_path.parent if self._config_path else None
            drawn = export_result_to_png(
                filepath, self._result, self._config, base_dir=base_dir
            )
            if drawn:
                self._status_label.setText(f"Exported to {Path(filepath).name}")
            else:
                QMessageBox.warning(self, "Warning", "Export completed but grid is empty")
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Failed to export:\n{e}")

    @Slot(int, int)
    def _on_cell_hovered(self, x: int, y: int):
        grid = self._result.grid if self._result is not None else None
        if grid is None:
            return
        cell = grid.cell_at(x, y)
        if cell.collapsed:
            tile = self._config.catalog[cell.final]
            name = tile.name or f"tile {cell.final}"
            self._hover_label.setText(f"({x},{y}) {name}")
        else:
            self._hover_label.setText(f"({x},{y}) {cell.entropy} candidate(s)")

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts."""
        if event.key() == Qt.Key_Space:
            self._on_generate()
        elif event.key() == Qt.Key_R:
            self._on_reseed()
        elif event.key() == Qt.Key_S and event.modifiers() & Qt.ControlModifier:
            self._on_save_result()
        elif event.key() == Qt.Key_O and event.modifiers() & Qt.ControlModifier:
            self._on_open_config()
        else:
            super().keyPressEvent(event)
