"""
Computational core for the dice roller and tip calculator.
"""
from .dice import Dice, roll_dice, face_asset
from .tip import calculate_tip, format_decimal, parse_number, round_tip
from .form import TipFormState

__all__ = [
    "Dice",
    "roll_dice",
    "face_asset",
    "calculate_tip",
    "format_decimal",
    "parse_number",
    "round_tip",
    "TipFormState",
]
