#!/usr/bin/env python3
"""
CLI tool to render a Pacsnek session to an animated GIF

Usage:
    python render_session.py --output session.gif
    python render_session.py --moves R R R D D --output session.gif

Examples:
    # Random autopilot on the bundled level, reproducible with a seed
    python render_session.py --seed 7 --output ./session.gif

    # Scripted run on a custom level, one frame per tick
    python render_session.py --level ../my-level.txt --moves R R D --frame-every 1 -o out.gif
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, get_level_path  # noqa: E402
from domain.constants import MOVE_INTERVAL  # noqa: E402
from domain.level import read_level_source  # noqa: E402
from main import add_session_arguments, build_player, run_session  # noqa: E402
from services.frame_renderer import FrameRenderer, DEFAULT_FPS  # noqa: E402

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Render a Pacsnek session to an animated GIF',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    add_session_arguments(parser)

    parser.add_argument(
        '--output', '-o',
        type=str,
        default='pacsnek_session.gif',
        help='Output GIF path (default: pacsnek_session.gif)'
    )
    parser.add_argument(
        '--frame-every',
        type=int,
        default=MOVE_INTERVAL,
        help=f'Capture a frame every N ticks (default: {MOVE_INTERVAL})'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=20,
        help='Cell size in pixels (default: 20)'
    )

    args = parser.parse_args()
    configure_logging()

    try:
        level_source = read_level_source(args.level or get_level_path())
        result = run_session(
            build_player(args),
            level_source,
            max_ticks=args.max_ticks,
            record_every=args.frame_every
        )

        renderer = FrameRenderer(cell_size=args.cell_size, fps=args.fps)
        output_path = renderer.save_animation(result["history"], args.output)

        logger.info(
            f"[OK] Session {result['status']} with score {result['score']} "
            f"after {result['ticks']} ticks: {output_path}"
        )

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
