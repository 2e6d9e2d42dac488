"""
Tip calculator screen.

Holds the raw form inputs in a TipFormState and re-renders the tip line
every time one of them changes.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt, QLocale

from client.gui.widgets import EditTextField, RoundTipRow
from engine import TipFormState
from shared.constants import STRINGS


class TipScreen(QWidget):
    """Bill amount and tip percent fields, a round-up switch and the result."""
    
    def __init__(self, locale: Optional[QLocale] = None, parent=None):
        super().__init__(parent)
        
        self._state = TipFormState()
        self._locale = locale
        
        self._setup_ui()
        self._connect_signals()
        self._render()
    
    def _setup_ui(self) -> None:
        """Set up the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setAlignment(Qt.AlignmentFlag.AlignVCenter)
        
        header = QLabel(STRINGS["header"])
        header.setObjectName("headerLabel")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(header)
        layout.addSpacing(12)
        
        self._amount_field = EditTextField("bill_amount")
        layout.addWidget(self._amount_field)
        layout.addSpacing(12)
        
        self._tip_field = EditTextField("how_was_the_service")
        layout.addWidget(self._tip_field)
        layout.addSpacing(16)
        
        self._round_row = RoundTipRow()
        layout.addWidget(self._round_row)
        layout.addSpacing(32)
        
        self._tip_label = QLabel()
        self._tip_label.setObjectName("tipAmountLabel")
        self._tip_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._tip_label)
    
    def _connect_signals(self) -> None:
        """Connect input widget signals."""
        self._amount_field.textChanged.connect(self._on_amount_changed)
        self._tip_field.textChanged.connect(self._on_tip_changed)
        self._round_row.checked_changed.connect(self._on_round_up_changed)
        
        # Enter moves from the bill field to the tip field, then leaves the form
        self._amount_field.returnPressed.connect(self._tip_field.setFocus)
        self._tip_field.returnPressed.connect(self._tip_field.clearFocus)
    
    def _on_amount_changed(self, text: str) -> None:
        self._state.amount_input = text
        self._render()
    
    def _on_tip_changed(self, text: str) -> None:
        self._state.tip_input = text
        self._render()
    
    def _on_round_up_changed(self, checked: bool) -> None:
        self._state.round_up = checked
        self._render()
    
    @property
    def state(self) -> TipFormState:
        return self._state
    
    def tip_amount_text(self) -> str:
        """Text of the tip line as currently displayed."""
        return self._tip_label.text()
    
    def _render(self) -> None:
        self._tip_label.setText(self._state.display_text(self._locale))
