"""
Input rows for the tip calculator form.
"""

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit, QCheckBox
from PyQt6.QtCore import Qt, pyqtSignal

from shared.constants import STRINGS


class EditTextField(QLineEdit):
    """
    Single-line numeric text field.
    
    Accepts any text; parsing happens when the form is rendered.
    """
    
    def __init__(self, placeholder: str, parent=None):
        super().__init__(parent)
        
        self.setPlaceholderText(STRINGS[placeholder])
        self.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)


class RoundTipRow(QWidget):
    """
    Label with a switch aligned to the right edge.
    
    Signals:
        checked_changed: The switch was toggled (new state)
    """
    
    checked_changed = pyqtSignal(bool)
    
    def __init__(self, parent=None):
        super().__init__(parent)
        
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setMinimumHeight(48)
        
        label = QLabel(STRINGS["round_up_tip"])
        layout.addWidget(label)
        layout.addStretch(1)
        
        self._switch = QCheckBox()
        self._switch.setAccessibleName(STRINGS["round_up_tip"])
        self._switch.toggled.connect(self.checked_changed.emit)
        layout.addWidget(self._switch, 0, Qt.AlignmentFlag.AlignRight)
    
    def is_checked(self) -> bool:
        return self._switch.isChecked()
    
    def set_checked(self, checked: bool) -> None:
        self._switch.setChecked(checked)
