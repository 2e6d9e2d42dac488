"""
Dice roller screen: a die image with a Roll button under it.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QPushButton
from PyQt6.QtCore import Qt, pyqtSignal

from client.gui.widgets import DieFaceWidget
from engine import Dice
from shared.constants import INITIAL_FACE, STRINGS


logger = logging.getLogger(__name__)


class DiceScreen(QWidget):
    """
    Shows the last rolled face and rolls again on request.
    
    Signals:
        rolled: A new face value was rolled
    """
    
    rolled = pyqtSignal(int)
    
    def __init__(self, dice: Optional[Dice] = None, parent=None):
        super().__init__(parent)
        
        self._dice = dice or Dice()
        self._result = INITIAL_FACE
        
        self._setup_ui()
        self._render()
    
    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        
        self._die = DieFaceWidget()
        layout.addWidget(self._die, 0, Qt.AlignmentFlag.AlignHCenter)
        
        self._roll_btn = QPushButton(STRINGS["roll"])
        self._roll_btn.setObjectName("actionButton")
        self._roll_btn.clicked.connect(self.roll)
        layout.addWidget(self._roll_btn, 0, Qt.AlignmentFlag.AlignHCenter)
    
    @property
    def result(self) -> int:
        """Face value currently shown."""
        return self._result
    
    def roll(self) -> int:
        """Roll the die and show the new face."""
        self._result = self._dice.roll()
        logger.debug("Rolled %d", self._result)
        self._render()
        self.rolled.emit(self._result)
        return self._result
    
    def _render(self) -> None:
        self._die.set_face(self._result)
