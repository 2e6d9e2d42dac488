"""
GUI widgets for the dice roller and tip calculator.
"""

from .die_face import DieFaceWidget
from .form_fields import EditTextField, RoundTipRow

__all__ = [
    "DieFaceWidget",
    "EditTextField",
    "RoundTipRow",
]
