"""Main entry point for pytiles."""

import argparse
import logging
import sys

from PyQt6.QtCore import QCoreApplication, QTimer

from pytiles.animation.easing import EASINGS, get_easing
from pytiles.controller.controller import ArrangementController
from pytiles.controller.driver import FrameDriver
from pytiles.errors import PytilesError
from pytiles.layout.engine import Arrangement

logger = logging.getLogger("pytiles")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="pytiles",
        description="Animate tiles between table, sphere, helix and grid arrangements (headless)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--count",
        type=int,
        default=200,
        metavar="N",
        help="Number of tiles to arrange (default: 200)",
    )
    parser.add_argument(
        "--sequence",
        default="sphere,helix,grid,table",
        help="Comma-separated arrangements to cycle through after the initial table "
        "(default: sphere,helix,grid,table)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=2000.0,
        metavar="MS",
        help="Transition duration in milliseconds (default: 2000)",
    )
    parser.add_argument(
        "--hold",
        type=int,
        default=500,
        metavar="MS",
        help="Pause between arrangements in milliseconds (default: 500)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        metavar="N",
        help="Target frame rate of the animation loop (default: 60)",
    )
    parser.add_argument(
        "--easing",
        choices=sorted(EASINGS),
        default="exponential",
        help="Easing curve for transitions (default: exponential)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the initial random scatter",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.fps <= 0:
        print(f"Error: --fps must be positive, got {args.fps}", file=sys.stderr)
        return 1

    try:
        sequence = [Arrangement.parse(name) for name in args.sequence.split(",") if name.strip()]
        controller = ArrangementController(
            default_duration=args.duration,
            easing=get_easing(args.easing),
        )
    except PytilesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Create Qt application (no GUI needed)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    driver = FrameDriver(controller, interval_ms=max(1, 1000 // args.fps))
    pending = list(sequence)

    def next_arrangement() -> None:
        """Start the next queued arrangement, or quit when none remain."""
        if not pending:
            driver.stop()
            logger.info("Finished after %d frames", driver.frame_count)
            app.quit()
            return
        controller.request_arrangement(pending.pop(0))

    def on_settled() -> None:
        if controller.items.count:
            first = controller.items.position(0)
            logger.info("Settled as %s; item 0 at %r", controller.current_arrangement.value, first)
        QTimer.singleShot(max(0, args.hold), next_arrangement)

    controller.transitions_finished.connect(on_settled)

    try:
        controller.load_items(args.count, seed=args.seed)
    except PytilesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not controller.transitions.is_animating:
        # Nothing to move (no items); finish immediately
        pending.clear()
        QTimer.singleShot(0, next_arrangement)

    driver.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
