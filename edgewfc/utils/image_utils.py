"""
Image utility functions.
"""

from pathlib import Path
from typing import Optional

from PIL import Image
from PySide6.QtGui import QImage, QPixmap, QPainter, QColor
from PySide6.QtCore import Qt

from .png_export import load_tile_image


class ImageUtils:
    """Utility class for image operations."""

    @staticmethod
    def pil_to_pixmap(image: Image.Image) -> QPixmap:
        """Convert a PIL RGBA image to a QPixmap."""
        image = image.convert('RGBA')
        data = image.tobytes('raw', 'RGBA')
        qimage = QImage(data, image.width, image.height, image.width * 4, QImage.Format_RGBA8888)
        # Copy so the pixmap doesn't reference the temporary buffer
        return QPixmap.fromImage(qimage.copy())

    @staticmethod
    def create_tile_pixmap(
        asset: Optional[str],
        tile_index: int,
        size: int,
        base_dir: Optional[Path] = None,
    ) -> QPixmap:
        """Pixmap for a collapsed cell showing the tile's asset."""
        image = load_tile_image(asset, tile_index, size, base_dir)
        return ImageUtils.pil_to_pixmap(image)

    @staticmethod
    def create_question_mark(size: int) -> QPixmap:
        """Create a question mark pixmap (for uncollapsed cells)."""
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor(240, 240, 240))

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)

        # Draw subtle border
        painter.setPen(QColor(200, 200, 200))
        painter.drawRect(0, 0, size - 1, size - 1)

        font = painter.font()
        font.setPixelSize(int(size * 0.6))
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor(180, 180, 180))
        painter.drawText(pixmap.rect(), Qt.AlignCenter, "?")

        painter.end()
        return pixmap

    @staticmethod
    def create_error_pixmap(size: int) -> QPixmap:
        """Create a contradiction pixmap (cell with no candidates left)."""
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor(255, 200, 200))

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)

        # Draw X
        painter.setPen(QColor(200, 50, 50))
        margin = int(size * 0.2)
        painter.drawLine(margin, margin, size - margin, size - margin)
        painter.drawLine(size - margin, margin, margin, size - margin)

        painter.end()
        return pixmap
