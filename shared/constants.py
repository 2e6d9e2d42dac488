"""
Constants shared by the dice roller and the tip calculator.
"""

# Dice
DIE_FACES = (1, 2, 3, 4, 5, 6)
INITIAL_FACE = 1

# Face value -> image asset id
FACE_ASSETS = {face: f"face-{face}" for face in DIE_FACES}

# Pip positions per asset on a 3x3 grid, as (column, row)
FACE_PIPS = {
    "face-1": [(1, 1)],
    "face-2": [(0, 0), (2, 2)],
    "face-3": [(0, 0), (1, 1), (2, 2)],
    "face-4": [(0, 0), (2, 0), (0, 2), (2, 2)],
    "face-5": [(0, 0), (2, 0), (1, 1), (0, 2), (2, 2)],
    "face-6": [(0, 0), (2, 0), (0, 1), (2, 1), (0, 2), (2, 2)],
}

# Tips
DEFAULT_TIP_PERCENT = 15.0
MAX_FRACTION_DIGITS = 3  # Decimal places shown for an unrounded tip

# String table
STRINGS = {
    "app_name": "Compose Pathway",
    "dice_roller": "Dice Roller",
    "tip_calculator": "Tip Calculator",
    "roll": "Roll",
    "header": "Calculate Tip",
    "bill_amount": "Bill Amount",
    "how_was_the_service": "Tip (%)",
    "round_up_tip": "Round up tip?",
    "tip_amount": "Tip Amount: {value}",
}
