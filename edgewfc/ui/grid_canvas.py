"""
Zoomable, pannable grid canvas that draws a generation result.
"""

from pathlib import Path
from typing import Dict, Optional

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsRectItem
from PySide6.QtGui import QPainter, QColor, QBrush, QPen, QPixmap, QWheelEvent, QMouseEvent
from PySide6.QtCore import Qt, Signal, QPointF

from ..core.solver import GenerationResult
from ..models import TileCatalog
from ..utils.image_utils import ImageUtils
from ..utils.placement import compute_placements


class GridCanvas(QGraphicsView):
    """
    Zoomable and pannable canvas for displaying a generated grid.

    Signals:
        cell_hovered(x, y): Emitted when the mouse moves over a cell
    """

    cell_hovered = Signal(int, int)

    # Visual settings
    CELL_SIZE = 48  # Cell size when the config gives none
    MIN_ZOOM = 0.1
    MAX_ZOOM = 5.0
    GRID_COLOR = QColor(100, 100, 100)

    def __init__(self, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        # No smooth transform for pixel art
        self.setRenderHint(QPainter.Antialiasing, False)
        self.setRenderHint(QPainter.SmoothPixmapTransform, False)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setMouseTracking(True)

        self.setBackgroundBrush(QBrush(QColor(30, 30, 35)))

        self._result: Optional[GenerationResult] = None
        self._catalog: Optional[TileCatalog] = None
        self._base_dir: Optional[Path] = None
        self._cell_size = self.CELL_SIZE
        self._zoom = 1.0

        self._panning = False
        self._pan_start = QPointF()

        self._tile_pixmaps: Dict[int, QPixmap] = {}
        self._uncollapsed_pixmap: Optional[QPixmap] = None
        self._error_pixmap: Optional[QPixmap] = None

    def set_catalog(self, catalog: TileCatalog, base_dir: Optional[Path] = None,
                    cell_size: Optional[int] = None):
        """Set the tile catalog whose assets are drawn, one cell_size square per cell."""
        self._catalog = catalog
        self._base_dir = base_dir
        self._cell_size = max(1, int(cell_size)) if cell_size else self.CELL_SIZE
        self._tile_pixmaps.clear()
        self._uncollapsed_pixmap = None
        self._error_pixmap = None

    def show_result(self, result: GenerationResult):
        """Draw every cell of a finished run."""
        self._result = result
        self._scene.clear()

        grid = result.grid
        if grid is None or self._catalog is None:
            return

        size = self._cell_size
        scene_width = grid.width * size
        scene_height = grid.height * size
        self._scene.setSceneRect(-size, -size, scene_width + 2 * size, scene_height + 2 * size)

        pen = QPen(self.GRID_COLOR)
        pen.setWidth(1)

        # Background for every cell, tiles are placed on top
        for index, cell in enumerate(grid):
            x, y = grid.position_of(index)
            rect = QGraphicsRectItem(x * size, y * size, size, size)
            rect.setPen(pen)
            if cell.is_contradiction:
                rect.setBrush(QBrush(self._get_error_pixmap()))
            else:
                rect.setBrush(QBrush(self._get_uncollapsed_pixmap()))
            self._scene.addItem(rect)

        for placement in compute_placements(grid, size):
            item = self._scene.addPixmap(self._get_tile_pixmap(placement.tile_index))
            item.setPos(*placement.position)

        self.centerOn(scene_width / 2, scene_height / 2)

    def clear(self):
        self._result = None
        self._scene.clear()

    def _get_tile_pixmap(self, tile_index: int) -> QPixmap:
        pixmap = self._tile_pixmaps.get(tile_index)
        if pixmap is None:
            tile = self._catalog[tile_index]
            pixmap = ImageUtils.create_tile_pixmap(tile.asset, tile_index, self._cell_size, self._base_dir)
            self._tile_pixmaps[tile_index] = pixmap
        return pixmap

    def _get_uncollapsed_pixmap(self) -> QPixmap:
        if self._uncollapsed_pixmap is None:
            self._uncollapsed_pixmap = ImageUtils.create_question_mark(self._cell_size)
        return self._uncollapsed_pixmap

    def _get_error_pixmap(self) -> QPixmap:
        if self._error_pixmap is None:
            self._error_pixmap = ImageUtils.create_error_pixmap(self._cell_size)
        return self._error_pixmap

    # === Input handling ===

    def wheelEvent(self, event: QWheelEvent):
        """Handle mouse wheel for zooming."""
        factor = 1.15
        if event.angleDelta().y() > 0:
            if self._zoom < self.MAX_ZOOM:
                self._zoom *= factor
                self.scale(factor, factor)
        else:
            if self._zoom > self.MIN_ZOOM:
                self._zoom /= factor
                self.scale(1 / factor, 1 / factor)

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() in (Qt.MiddleButton, Qt.RightButton, Qt.LeftButton):
            self._panning = True
            self._pan_start = event.position()
            self.setCursor(Qt.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._panning:
            delta = event.position() - self._pan_start
            self._pan_start = event.position()
            self.horizontalScrollBar().setValue(
                self.horizontalScrollBar().value() - int(delta.x())
            )
            self.verticalScrollBar().setValue(
                self.verticalScrollBar().value() - int(delta.y())
            )
            event.accept()
            return

        grid = self._result.grid if self._result is not None else None
        if grid is not None:
            pos = self.mapToScene(event.position().toPoint())
            cell_x = int(pos.x() // self._cell_size)
            cell_y = int(pos.y() // self._cell_size)
            if 0 <= cell_x < grid.width and 0 <= cell_y < grid.height:
                self.cell_hovered.emit(cell_x, cell_y)

        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if self._panning:
            self._panning = False
            self.setCursor(Qt.ArrowCursor)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def reset_view(self):
        """Reset zoom and center view."""
        self.resetTransform()
        self._zoom = 1.0
        grid = self._result.grid if self._result is not None else None
        if grid is not None:
            self.centerOn(grid.width * self._cell_size / 2, grid.height * self._cell_size / 2)
