import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_scad' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_scad.algo.registry import GENERATORS, DEFAULT_ALGO, create_generator
from maze_scad.core.grid import SquareGrid
from maze_scad.core.stats import calculate_stats
from maze_scad.render.scad import (RenderSettings, render_scad, DEFAULT_BLOCK_SIZE, DEFAULT_BLOCK_DEPTH,
                                   DEFAULT_BALL_RADIUS, DEFAULT_BALL_DEPTH)
from maze_scad.render.text import render_text

APP_NAME = "maze-scad"
VERSION = "1.0.0"

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10

logger = logging.getLogger("maze_scad")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number

def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {value}")
    return number

def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --height, so help is long-form only
    parser = argparse.ArgumentParser(prog=APP_NAME, add_help=False,
                                     description="Utility to generate an OpenSCAD file of a maze")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    parser.add_argument("--width", "-w", type=positive_int, default=DEFAULT_WIDTH, help="Width (in blocks) of the maze")
    parser.add_argument("--height", "-h", type=positive_int, default=DEFAULT_HEIGHT, help="Height (in blocks) of the maze")
    parser.add_argument("--blockSize", "-s", dest="block_size", type=positive_float, default=DEFAULT_BLOCK_SIZE,
                        help="Size of the block of the maze")
    parser.add_argument("--blockDepth", "-d", dest="block_depth", type=positive_float, default=DEFAULT_BLOCK_DEPTH,
                        help="Depth of each block of the maze")
    parser.add_argument("--ballRadius", "-r", dest="ball_radius", type=positive_float, default=DEFAULT_BALL_RADIUS,
                        help="Radius of the ball that runs through the maze")
    parser.add_argument("--ballDepth", "-D", dest="ball_depth", type=positive_float, default=DEFAULT_BALL_DEPTH,
                        help="Depth at which the ball runs through the maze")

    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--algo", type=str, default=DEFAULT_ALGO, choices=sorted(GENERATORS), help="Generation Algorithm")
    parser.add_argument("--format", type=str, default="scad", choices=["scad", "text"], help="Output artifact")
    parser.add_argument("--out", type=str, help="Output file path (default: stdout)")
    parser.add_argument("--visual", action="store_true", help="Watch the generation in a preview window")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    settings = RenderSettings(args.block_size, args.block_depth, args.ball_radius, args.ball_depth)
    logger.debug(f"Render settings: {settings}")

    logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
    grid = SquareGrid(args.width, args.height)
    generator = create_generator(args.algo, grid, seed=args.seed)

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_scad.viz.renderer import Renderer
        renderer = Renderer(grid, generator=generator)
        renderer.init_window()
        renderer.run_loop()
        renderer.finish()
    else:
        generator.run_all()

    logger.debug(f"Stats: {calculate_stats(grid)}")

    if args.format == "text":
        artifact = render_text(grid)
    else:
        artifact = render_scad(grid, settings)

    if args.out:
        logger.info(f"Saving {args.format} to {args.out}...")
        with open(args.out, "w") as f:
            f.write(artifact)
        logger.info("Save complete.")
    else:
        sys.stdout.write(artifact)
    return 0

if __name__ == "__main__":
    sys.exit(main())
