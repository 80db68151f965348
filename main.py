"""Main entry point for the RPS arena simulation.

This module provides command-line options to run the simulation:
- Web mode (default): FastAPI backend serving arena state
- Viewer mode: pygame window drawing the arena
- Headless mode: Stats-only, faster than realtime for testing
"""

import argparse
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace):
    """Translate CLI arguments into a SimulationConfig."""
    from rps.config.simulation_config import SimulationConfig

    config = SimulationConfig.for_arena(args.width, args.height, args.agents_per_kind)
    config.debug_invariants = args.check_invariants
    return config


def run_web_server(args: argparse.Namespace) -> None:
    """Run the web server with the simulation in a background thread."""
    import uvicorn

    from backend.app_factory import AppContext, create_app
    from rps.config.display import SEPARATOR_WIDTH

    context = AppContext(config=build_config(args), seed=args.seed)
    app = create_app(context=context)

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("RPS ARENA SIMULATION - WEB SERVER")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("API docs available at http://localhost:%d/docs", context.api_port)
    logger.info("Press Ctrl+C to stop the server")
    logger.info("=" * SEPARATOR_WIDTH)

    uvicorn.run(app, host="0.0.0.0", port=context.api_port)


def run_viewer(args: argparse.Namespace) -> None:
    """Open the pygame viewer."""
    from arena_viewer import main as viewer_main

    viewer_main(config=build_config(args), seed=args.seed)


def run_headless(args: argparse.Namespace) -> None:
    """Run the simulation in headless mode (no visualization)."""
    from rps.simulation.engine import SimulationEngine

    engine = SimulationEngine(build_config(args), seed=args.seed)
    engine.run_headless(
        max_frames=args.max_frames,
        stats_interval=args.stats_interval,
        export_json=args.export_stats,
        stop_on_monoculture=args.stop_on_monoculture,
    )


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    from rps.config.display import ARENA_HEIGHT, ARENA_WIDTH
    from rps.config.simulation import AGENTS_PER_KIND
    from rps.exceptions import ConfigurationError

    parser = argparse.ArgumentParser(
        description="Rock-Paper-Scissors Arena Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run web server (default)
  python main.py

  # Open the pygame viewer
  python main.py --viewer

  # Quick headless run with a fixed seed
  python main.py --headless --max-frames 3600 --seed 42

  # Export stats after a long run
  python main.py --headless --max-frames 36000 --export-stats results.json
        """,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no UI, stats only)"
    )
    mode.add_argument("--viewer", action="store_true", help="Open the pygame viewer")

    parser.add_argument(
        "--max-frames",
        type=int,
        default=3600,
        help="Maximum frames to simulate in headless mode (default: 3600)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=600,
        help="Log stats every N frames in headless mode (default: 600)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export final stats to a JSON file",
    )
    parser.add_argument(
        "--agents-per-kind",
        type=int,
        default=AGENTS_PER_KIND,
        help=f"Initial agents of each kind (default: {AGENTS_PER_KIND})",
    )
    parser.add_argument("--width", type=float, default=ARENA_WIDTH, help="Arena width")
    parser.add_argument("--height", type=float, default=ARENA_HEIGHT, help="Arena height")
    parser.add_argument(
        "--stop-on-monoculture",
        action="store_true",
        help="End a headless run once only one kind is left",
    )
    parser.add_argument(
        "--check-invariants",
        action="store_true",
        help="Verify containment and population conservation after every frame",
    )

    args = parser.parse_args(argv)

    try:
        if args.headless:
            logger.info("Starting headless simulation...")
            run_headless(args)
        elif args.viewer:
            run_viewer(args)
        else:
            run_web_server(args)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
