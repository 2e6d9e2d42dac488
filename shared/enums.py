"""
Enumerations used throughout the apps.
"""
from enum import Enum


class AppScreen(str, Enum):
    """Apps the client can open."""
    DICE = "dice"
    TIP = "tip"
    
    @property
    def title_key(self) -> str:
        """String table key for the app's title."""
        return "dice_roller" if self is AppScreen.DICE else "tip_calculator"
