# graph/window.py
import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

# Try to import PyQt5, fallback to PySide6
try:
    from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget
    qt_binding = 'PyQt5'
except ImportError:
    from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget
    qt_binding = 'PySide6'

from graph.themes import DARK_THEME, LIGHT_THEME
from graph.view import GraphView, plot_success_rates


class GraphWindow(QWidget):
    """Read-only window: the graph of points and lines, the success-rate series and a status line."""

    def __init__(self, dark=True):
        super().__init__()
        self.setWindowTitle('Perceptron — separating line')
        self.resize(720, 900)

        layout = QVBoxLayout(self)

        self.fig_graph = Figure(figsize=(6, 6))
        self.canvas_graph = FigureCanvas(self.fig_graph)
        layout.addWidget(self.canvas_graph, stretch=3)

        self.fig_rates = Figure(figsize=(6, 2))
        self.canvas_rates = FigureCanvas(self.fig_rates)
        layout.addWidget(self.canvas_rates, stretch=1)

        self.status_label = QLabel('Ready — using %s' % qt_binding)
        self.status_label.setObjectName('status')
        layout.addWidget(self.status_label)

        self.setStyleSheet(DARK_THEME if dark else LIGHT_THEME)

        self.view = GraphView(ax=self.fig_graph.add_subplot(111))

    def show_series(self, series):
        plot_success_rates(series, self.fig_rates.add_subplot(111))
        self.canvas_rates.draw()

    def refresh(self, status=None):
        self.canvas_graph.draw()
        if status is not None:
            self.status_label.setText(status)
