# graph/view.py
import numpy as np
from matplotlib.figure import Figure

from graph.themes import AXIS_COLOR, LEARNED_LINE_COLOR, LINE_COLOR, POINT_COLORS
from neuron.trainer import COORDINATE_RANGE

LOW, HIGH = COORDINATE_RANGE
SPAN = HIGH - LOW


def view_x(x, width):
    """Graph x in [-100, 100] -> pixel column in [0, width]."""
    return width * (x - LOW) / SPAN


def view_y(y, height):
    """Graph y in [-100, 100] -> pixel row in [0, height], row 0 at the top."""
    return height - height * (y - LOW) / SPAN


class GraphView:
    """
    Draws classified points and separating lines on a width x height pixel
    surface that shows [-100, 100] on both graph axes.
    The matplotlib Axes is set up in pixel units with row 0 at the top, and
    every graph coordinate goes through view_x / view_y before drawing.
    If no axes are given a standalone Figure is created.
    """
    def __init__(self, ax=None, width=400, height=400, point_size=30):
        if ax is None:
            self.figure = Figure(figsize=(6, 6))
            ax = self.figure.add_subplot(111)
        else:
            self.figure = ax.figure
        self.ax = ax
        self.width = width
        self.height = height
        self.point_size = point_size
        self.clear()

    def to_pixels(self, x, y):
        return view_x(x, self.width), view_y(y, self.height)

    def clear(self):
        ax = self.ax
        ax.cla()
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect('equal')
        ax.set_xticks([])
        ax.set_yticks([])
        cx, cy = self.to_pixels(0, 0)
        ax.axvline(cx, color=AXIS_COLOR, linewidth=1)
        ax.axhline(cy, color=AXIS_COLOR, linewidth=1)

    def render_point(self, point, label):
        px, py = self.to_pixels(*point)
        self.ax.scatter([px], [py], s=self.point_size,
                        color=POINT_COLORS[1 if label > 0 else 0])

    def render_line(self, a, b, color=LINE_COLOR, label=None):
        xs = np.array([LOW, HIGH], dtype=float)
        px, py = self.to_pixels(xs, a * xs + b)
        if label is None:
            label = f'y = {a}x + {b}'
        self.ax.plot(px, py, '-', linewidth=1, color=color, label=label)

    def render_learned_line(self, weights, bias):
        # w0*x + w1*y + b = 0
        w = np.asarray(weights, dtype=float)
        if len(w) != 2:
            raise ValueError(f"learned line needs 2 weights, got {len(w)}")
        if abs(w[1]) > 1e-8:
            self.render_line(-w[0] / w[1], -bias / w[1], color=LEARNED_LINE_COLOR,
                             label='learned')
        elif abs(w[0]) > 1e-8:
            self.ax.axvline(view_x(-bias / w[0], self.width), linestyle='--',
                            linewidth=2, color=LEARNED_LINE_COLOR, label='learned')

    def legend(self):
        self.ax.legend(loc='upper left')

    def save(self, path):
        self.figure.savefig(path)


def plot_success_rates(series, ax):
    ax.cla()
    ax.plot(range(1, len(series) + 1), series, marker='o', markersize=3, linestyle='-')
    ax.set_ylim(0, 100)
    ax.set_xlabel('round')
    ax.set_ylabel('correct / 100')
    ax.set_title('Success rate')
    return ax
