"""
Command-line entry point: python -m clothsim
"""

from typing import List, Optional
import argparse
import logging
from .io import ConfigLoader
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clothsim",
        description="Interactive 2D cloth: left-drag to pull, right-drag to tear."
    )
    parser.add_argument('--config', help="Scene file (.json, .yaml or .yml)")
    parser.add_argument('--frames', type=int, default=None,
                        help="Run N frames headless instead of opening a window")
    parser.add_argument('--save', help="Save the last frame to this image file")
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--log-file', help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.config:
        config = ConfigLoader.load_config(args.config)
    else:
        config = ConfigLoader.default_config()
    engine = ConfigLoader.create_engine_from_config(config)

    canvas = config.get('canvas', {})
    canvas_size = (canvas.get('width', 800), canvas.get('height', 600))

    if args.frames is not None:
        engine.step_n(args.frames)
        logger.info(f"Finished {args.frames} frames: {engine.get_debug_info()}")
        if args.save:
            import matplotlib
            matplotlib.use('Agg')
            from .visualization import Visualizer
            visualizer = Visualizer(engine, canvas_size)
            visualizer.render_frame(args.save)
            visualizer.close()
        return 0

    from .visualization import Visualizer
    visualizer = Visualizer(engine, canvas_size)
    visualizer.animate(save_path=args.save)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
