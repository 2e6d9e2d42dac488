"""
Die face widget.

Paints the image for the current face value from its pip layout.
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import QRectF, QPointF
from PyQt6.QtGui import QPainter, QPen, QBrush

from engine import face_asset
from shared.constants import FACE_PIPS, INITIAL_FACE
from client.gui.styles import DIE_BODY_COLOR, DIE_EDGE_COLOR, DIE_PIP_COLOR


class DieFaceWidget(QWidget):
    """Square die image showing one face."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        
        self._face = INITIAL_FACE
        self.setMinimumSize(160, 160)
        self._sync_description()
    
    @property
    def face(self) -> int:
        return self._face
    
    @property
    def asset_id(self) -> str:
        """Asset id of the face being shown."""
        return face_asset(self._face)
    
    def set_face(self, value: int) -> None:
        """Show a new face value and repaint."""
        face_asset(value)  # rejects values outside 1..6
        self._face = value
        self._sync_description()
        self.update()
    
    def _sync_description(self) -> None:
        self.setAccessibleDescription(str(self._face))
        self.setToolTip(str(self._face))
    
    def paintEvent(self, event) -> None:
        """Draw the die body and its pips."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        
        size = min(self.width(), self.height())
        margin = 8
        side = size - 2 * margin
        left = (self.width() - side) / 2
        top = (self.height() - side) / 2
        body = QRectF(left, top, side, side)
        
        painter.setPen(QPen(QBrush(DIE_EDGE_COLOR), 3))
        painter.setBrush(QBrush(DIE_BODY_COLOR))
        painter.drawRoundedRect(body, side * 0.12, side * 0.12)
        
        # Pips sit on a 3x3 grid inset from the edges
        cell = side / 4
        radius = side * 0.08
        painter.setPen(QPen(DIE_PIP_COLOR))
        painter.setBrush(QBrush(DIE_PIP_COLOR))
        for col, row in FACE_PIPS[self.asset_id]:
            center = QPointF(left + cell * (col + 1), top + cell * (row + 1))
            painter.drawEllipse(center, radius, radius)
        
        painter.end()
