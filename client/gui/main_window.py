"""
Main application window.

Hosts one app screen, or both in tabs when no app was chosen.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QTabWidget, QWidget
from PyQt6.QtCore import QLocale

from client.config import settings
from client.gui.dice_screen import DiceScreen
from client.gui.tip_screen import TipScreen
from client.gui.styles import MAIN_STYLESHEET
from engine import Dice
from shared.constants import STRINGS
from shared.enums import AppScreen


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.
    
    Each screen owns its own state; closing the window discards it.
    """
    
    def __init__(
        self,
        screen: Optional[AppScreen] = None,
        dice: Optional[Dice] = None,
        locale: Optional[QLocale] = None,
    ):
        super().__init__()
        
        self.setMinimumSize(settings.window_width, settings.window_height)
        self.setStyleSheet(MAIN_STYLESHEET)
        
        self._dice = dice
        self._locale = locale
        self._screens: dict[AppScreen, QWidget] = {}
        
        self._setup_ui(screen)
    
    def _setup_ui(self, screen: Optional[AppScreen]) -> None:
        """Set up the main UI."""
        if screen is not None:
            self.setWindowTitle(STRINGS[screen.title_key])
            widget = self._create_screen(screen)
            widget.setObjectName("centralWidget")
            self.setCentralWidget(widget)
            logger.info("Opened %s", STRINGS[screen.title_key])
            return
        
        self.setWindowTitle(STRINGS["app_name"])
        self._tabs = QTabWidget()
        self._tabs.setObjectName("centralWidget")
        for app in AppScreen:
            self._tabs.addTab(self._create_screen(app), STRINGS[app.title_key])
        self.setCentralWidget(self._tabs)
        logger.info("Opened launcher with %d apps", self._tabs.count())
    
    def _create_screen(self, screen: AppScreen) -> QWidget:
        if screen is AppScreen.DICE:
            widget = DiceScreen(self._dice)
        else:
            widget = TipScreen(self._locale)
        self._screens[screen] = widget
        return widget
    
    def app_screen(self, screen: AppScreen) -> Optional[QWidget]:
        """Return the widget hosting an app, or None if it is not open."""
        return self._screens.get(screen)
