"""
Desktop client for the dice roller and tip calculator.
"""
