"""
Dice rolling mechanics.
"""
import random

from shared.constants import DIE_FACES, FACE_ASSETS


class Dice:
    """Rolls a single six-sided die."""
    
    def __init__(self, seed: int | None = None):
        """
        Initialize dice roller.
        
        Args:
            seed: Optional seed for reproducible rolls (useful for testing)
        """
        self._random = random.Random(seed)
    
    def roll(self) -> int:
        """
        Roll one six-sided die.
        
        Returns:
            Face value in 1..6, each equally likely
        """
        return self._random.randint(DIE_FACES[0], DIE_FACES[-1])
    
    def set_seed(self, seed: int) -> None:
        """Set random seed for reproducible results."""
        self._random.seed(seed)


_default_dice = Dice()


def roll_dice() -> int:
    """Roll the shared unseeded die."""
    return _default_dice.roll()


def face_asset(value: int) -> str:
    """Return the asset id shown for a face value."""
    try:
        return FACE_ASSETS[value]
    except KeyError:
        raise ValueError(f"Not a die face: {value!r}") from None
