"""
Styles and colors for the desktop apps.
"""

from PyQt6.QtGui import QColor

# Die face colors
DIE_BODY_COLOR = QColor(250, 250, 250)
DIE_EDGE_COLOR = QColor(44, 62, 80)
DIE_PIP_COLOR = QColor(44, 62, 80)

# Stylesheet
MAIN_STYLESHEET = """
QMainWindow {
    background-color: #2C3E50;
}

QWidget#centralWidget {
    background-color: #2C3E50;
}

QLabel {
    color: white;
}

QLabel#headerLabel {
    font-size: 24px;
}

QLabel#tipAmountLabel {
    font-size: 20px;
    font-weight: bold;
}

QPushButton {
    background-color: #3498DB;
    color: white;
    border: none;
    padding: 8px 16px;
    border-radius: 4px;
    font-weight: bold;
}

QPushButton:hover {
    background-color: #2980B9;
}

QPushButton:pressed {
    background-color: #1F618D;
}

QPushButton#actionButton {
    background-color: #27AE60;
    font-size: 14px;
    padding: 12px 24px;
}

QPushButton#actionButton:hover {
    background-color: #229954;
}

QLineEdit {
    padding: 8px;
    border: 2px solid #3498DB;
    border-radius: 4px;
    background-color: white;
}

QCheckBox {
    color: white;
}

QTabWidget::pane {
    border: none;
}

QTabBar::tab {
    background-color: #34495E;
    color: white;
    padding: 8px 16px;
}

QTabBar::tab:selected {
    background-color: #3498DB;
}
"""
