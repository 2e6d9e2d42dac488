"""
GUI tests for the dice roller and tip calculator screens.

Drives the widgets the way a user would (click, type, toggle) on the
offscreen Qt platform and checks what the screens display.

Run from project root: python -m pytest tests/test_gui -v
"""

import os
import sys
import unittest
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QLocale
from PyQt6.QtTest import QTest

from client.gui import MainWindow
from client.gui.dice_screen import DiceScreen
from client.gui.tip_screen import TipScreen
from client.gui.widgets import DieFaceWidget
from engine import Dice
from shared.enums import AppScreen


EN_US = QLocale("en_US")


def get_app() -> QApplication:
    """Return the running QApplication, creating it once."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class GUITestCase(unittest.TestCase):
    """Base test case with a QApplication."""
    
    @classmethod
    def setUpClass(cls):
        cls.app = get_app()


class DieFaceWidgetTestCase(GUITestCase):
    
    def test_starts_on_face_one(self):
        widget = DieFaceWidget()
        self.assertEqual(widget.face, 1)
        self.assertEqual(widget.asset_id, "face-1")
        self.assertEqual(widget.accessibleDescription(), "1")
    
    def test_set_face_updates_asset_and_description(self):
        widget = DieFaceWidget()
        widget.set_face(5)
        self.assertEqual(widget.asset_id, "face-5")
        self.assertEqual(widget.accessibleDescription(), "5")
    
    def test_rejects_non_face_values(self):
        widget = DieFaceWidget()
        with self.assertRaises(ValueError):
            widget.set_face(7)
        self.assertEqual(widget.face, 1)
    
    def test_every_face_paints(self):
        widget = DieFaceWidget()
        widget.resize(160, 160)
        for face in range(1, 7):
            widget.set_face(face)
            self.assertFalse(widget.grab().isNull())


class DiceScreenTestCase(GUITestCase):
    
    def test_initial_result(self):
        screen = DiceScreen(Dice(seed=3))
        self.assertEqual(screen.result, 1)
    
    def test_roll_button_shows_seeded_sequence(self):
        expected_dice = Dice(seed=11)
        expected = [expected_dice.roll() for _ in range(5)]
        
        screen = DiceScreen(Dice(seed=11))
        seen = []
        screen.rolled.connect(seen.append)
        for _ in range(5):
            screen._roll_btn.click()
        
        self.assertEqual(seen, expected)
        self.assertEqual(screen.result, expected[-1])
        self.assertEqual(screen._die.face, expected[-1])
        self.assertEqual(screen._die.asset_id, f"face-{expected[-1]}")


class TipScreenTestCase(GUITestCase):
    
    def setUp(self):
        self.screen = TipScreen(EN_US)
    
    def test_empty_form(self):
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 0")
    
    def test_typing_updates_tip(self):
        self.screen._amount_field.setText("100")
        self.screen._tip_field.setText("15")
        
        self.assertEqual(self.screen.state.amount_input, "100")
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 15")
    
    def test_round_up_switch(self):
        self.screen._amount_field.setText("59.99")
        self.screen._tip_field.setText("18")
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 10.798")
        
        self.screen._round_row.set_checked(True)
        self.assertTrue(self.screen.state.round_up)
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 11")
        
        self.screen._round_row.set_checked(False)
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 10.798")
    
    def test_garbage_input_shows_zero(self):
        self.screen._amount_field.setText("12abc")
        self.screen._tip_field.setText("20")
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 0")
    
    def test_very_large_bill_keeps_running(self):
        self.screen._tip_field.setText("15")
        self.screen._amount_field.setText("1e26")
        
        digits = self.screen.tip_amount_text().removeprefix("Tip Amount: ").replace(",", "")
        self.assertEqual(len(digits), 26)
        
        self.screen._amount_field.setText("1e308")
        self.screen._tip_field.setText("1e308")
        self.assertEqual(self.screen.tip_amount_text(), "Tip Amount: 0")
    
    def test_enter_moves_focus_then_leaves_form(self):
        self.screen.show()
        self.screen.activateWindow()
        self.assertTrue(QTest.qWaitForWindowActive(self.screen))
        
        self.screen._amount_field.setFocus()
        self.screen._amount_field.returnPressed.emit()
        self.assertTrue(self.screen._tip_field.hasFocus())
        
        self.screen._tip_field.returnPressed.emit()
        self.assertFalse(self.screen._tip_field.hasFocus())
        self.screen.close()
    
    def test_placeholders(self):
        self.assertEqual(self.screen._amount_field.placeholderText(), "Bill Amount")
        self.assertEqual(self.screen._tip_field.placeholderText(), "Tip (%)")


class MainWindowTestCase(GUITestCase):
    
    def test_launcher_hosts_both_apps(self):
        window = MainWindow(dice=Dice(seed=1), locale=EN_US)
        self.assertIsInstance(window.app_screen(AppScreen.DICE), DiceScreen)
        self.assertIsInstance(window.app_screen(AppScreen.TIP), TipScreen)
        self.assertEqual(window.windowTitle(), "Compose Pathway")
    
    def test_single_app_window(self):
        window = MainWindow(AppScreen.TIP, locale=EN_US)
        self.assertIsInstance(window.centralWidget(), TipScreen)
        self.assertIsNone(window.app_screen(AppScreen.DICE))
        self.assertEqual(window.windowTitle(), "Tip Calculator")
    
    def test_screens_do_not_share_state(self):
        first = MainWindow(AppScreen.TIP, locale=EN_US)
        second = MainWindow(AppScreen.TIP, locale=EN_US)
        first.app_screen(AppScreen.TIP)._amount_field.setText("50")
        
        self.assertEqual(second.app_screen(AppScreen.TIP).state.amount_input, "")


if __name__ == "__main__":
    unittest.main()
