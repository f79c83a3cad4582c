# app.py
import logging
import os
import sys

# Ensure top-level package import works even when running as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np

from neuron.boundary import Boundary
from neuron.config import parse_args
from neuron.perceptron import Perceptron
from neuron.report import success_rate_series, summarize
from neuron.trainer import Trainer
from graph.view import GraphView

logger = logging.getLogger(__name__)


def build_trainer(config):
    """Boundary, 2-input perceptron and trainer, all drawing from one generator."""
    rng = np.random.default_rng(config.seed)
    boundary = Boundary.random(rng, config.a_range, config.b_range)
    perceptron = Perceptron(2, rng=rng)
    return Trainer(boundary, perceptron, rng=rng,
                   coordinate_range=config.coordinate_range)


def run(config, view=None):
    """Train once, draw one verification pass, then measure the success-rate series."""
    trainer = build_trainer(config)
    logger.info("training on y = %dx + %d for %d iterations at rate %g",
                trainer.boundary.a, trainer.boundary.b, config.iterations, config.learning_rate)
    trainer.train(config.iterations, config.learning_rate)

    if view is not None:
        view.render_line(trainer.boundary.a, trainer.boundary.b)
        trainer.verify(observer=view.render_point)
        view.render_learned_line(trainer.perceptron.weights, trainer.perceptron.bias)
        view.legend()

    series = success_rate_series(trainer, config.rounds)
    return trainer, series


def format_summary(trainer, series):
    s = summarize(series)
    w = trainer.perceptron.weights
    return (f"line y = {trainer.boundary.a}x + {trainer.boundary.b} | "
            f"w=({w[0]:.3f}, {w[1]:.3f}) b={trainer.perceptron.bias:.3f} | "
            f"success rate mean {s.mean:.1f}% (min {s.minimum}, max {s.maximum}, "
            f"{s.rounds} rounds)")


def main(argv=None):
    config, args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.no_gui:
        view = GraphView() if args.save else None
        trainer, series = run(config, view)
        if view is not None:
            view.save(args.save)
        print(format_summary(trainer, series))
        return 0

    # Try PyQt5, fallback to PySide6 (consistent with graph.window)
    try:
        from PyQt5.QtWidgets import QApplication
    except ImportError:
        from PySide6.QtWidgets import QApplication
    from graph.window import GraphWindow

    app = QApplication(sys.argv[:1])
    win = GraphWindow()
    trainer, series = run(config, win.view)
    summary = format_summary(trainer, series)
    print(summary)
    if args.save:
        win.view.save(args.save)
    win.show_series(series)
    win.refresh(summary)
    win.show()
    return app.exec_() if hasattr(app, 'exec_') else app.exec()


if __name__ == "__main__":
    sys.exit(main())
