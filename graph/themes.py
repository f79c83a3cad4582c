# graph/themes.py

# label 1 (above the line) -> red, label 0 -> blue
POINT_COLORS = {1: '#e0413a', 0: '#2f6fd6'}
LINE_COLOR = 'black'
LEARNED_LINE_COLOR = '#ffcc66'
AXIS_COLOR = 'lightgray'

LIGHT_THEME = """
QWidget {
    background-color: #f5f7fa;
    color: #0b1730;
    font-family: 'Segoe UI', Roboto, Arial, sans-serif;
    font-size: 13px;
}
QLabel#status { color: #20508a; font-weight: 600; padding: 4px; }
"""

DARK_THEME = """
QWidget {
    background-color: #0f1720;
    color: #e6eef8;
    font-family: 'Segoe UI', Roboto, Arial, sans-serif;
    font-size: 13px;
}
QLabel#status { color: #9fb3d6; font-weight: 600; padding: 4px; }
"""
