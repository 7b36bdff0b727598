import argparse
import logging
import sys

from . import settings
from .errors import ConfigurationError
from .export import export_array, export_points_json
from .gasket import GasketConfig, initialize, run


def build_parser():
    ap = argparse.ArgumentParser(description="Generate an Apollonian gasket")
    ap.add_argument("--width", type=float, default=settings.CANVAS_WIDTH, help="Canvas width")
    ap.add_argument("--height", type=float, default=settings.CANVAS_HEIGHT, help="Canvas height")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for the seed circle placement")
    ap.add_argument("--epsilon", type=float, default=settings.EPSILON, help="Tangency/duplicate tolerance")
    ap.add_argument("--min-radius", type=float, default=settings.MIN_RADIUS, help="Smallest circle kept")
    ap.add_argument("--max-generations", type=int, default=None, help="Stop after this many generations")
    ap.add_argument("--no-index", action="store_true", help="Scan every circle for duplicates")
    ap.add_argument("--json", dest="json_out", default=None, help="Write point cloud JSON here")
    ap.add_argument("--npy", dest="npy_out", default=None, help="Write (N,5) circle array here")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GasketConfig(
            epsilon=args.epsilon,
            min_radius=args.min_radius,
            use_spatial_index=not args.no_index,
        )
        state = initialize(args.width, args.height, seed=args.seed, config=config)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    state = run(state, max_generations=args.max_generations)
    status = "complete" if state.terminal else "stopped"
    print(f"Generated {len(state.circles)} circles in {state.generation} generations ({status})")

    if args.json_out:
        path = export_points_json(state.circles, args.json_out)
        print(f"Exported {len(state.circles)} circles to {path}")
    if args.npy_out:
        path = export_array(state.circles, args.npy_out)
        print(f"Exported {len(state.circles)} circles to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
