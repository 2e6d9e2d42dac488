"""
PyQt6 user interface.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
