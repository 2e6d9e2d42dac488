"""
Screen-local state for the tip calculator form.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QLocale

from shared.constants import STRINGS
from .tip import calculate_tip, parse_number


logger = logging.getLogger(__name__)


@dataclass
class TipFormState:
    """
    Raw inputs held by one tip calculator screen.
    
    The displayed tip is always derived from these fields; nothing else is
    cached between renders.
    """
    amount_input: str = ""
    tip_input: str = ""
    round_up: bool = False
    
    @property
    def amount(self) -> float:
        """Bill amount, 0.0 when the text does not parse."""
        value = parse_number(self.amount_input)
        return 0.0 if value is None else value
    
    @property
    def tip_percent(self) -> float:
        """Tip percentage, 0.0 when the text does not parse."""
        value = parse_number(self.tip_input)
        return 0.0 if value is None else value
    
    def tip_text(self, locale: Optional[QLocale] = None) -> str:
        """Formatted tip for the current inputs."""
        text = calculate_tip(self.amount, self.tip_percent, self.round_up, locale)
        logger.debug(
            "Tip for amount=%r percent=%r round_up=%s -> %r",
            self.amount_input, self.tip_input, self.round_up, text
        )
        return text
    
    def display_text(self, locale: Optional[QLocale] = None) -> str:
        """Tip line as shown under the form."""
        return STRINGS["tip_amount"].format(value=self.tip_text(locale))
