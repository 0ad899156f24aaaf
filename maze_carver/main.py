import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.config import MazeConfig

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: step-by-step DFS maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=None, help="Maze Width (cells)")
    gen_parser.add_argument("--height", type=int, default=None, help="Maze Height (cells)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Watch construction in a window")
    gen_parser.add_argument("--delay", dest="step_delay", type=int, default=None, help="Frames between steps (visual mode)")
    gen_parser.add_argument("--cell-size", dest="cell_size", type=int, default=None, help="Pixels per cell (visual mode)")
    gen_parser.add_argument("--print", dest="print_maze", action="store_true", help="Print the finished maze as ASCII")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time a full generation")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(args, config: MazeConfig, logger: logging.Logger):
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.core.stats import MazeInspector

    logger.info(f"Generating {config.width}x{config.height} maze with DFS...")
    generator = RecursiveBacktracker.create(config.width, config.height, seed=config.seed)

    if args.visual:
        logger.info("Visual mode enabled - Opening window...")
        from maze_carver.viz.renderer import Renderer
        renderer = Renderer(generator, config)
        renderer.init_window()
        renderer.run_loop()
    else:
        logger.info("Headless generation...")
        for status in generator.run():
            logger.debug(status)

    if generator.is_complete:
        stats = MazeInspector.calculate_stats(generator.grid)
        logger.info(f"Done in {generator.step_count} steps. Stats: {stats}")
    else:
        logger.info(f"Window closed after {generator.step_count} steps; maze incomplete.")

    if args.print_maze:
        from maze_carver.viz.text import render_text
        current = None if generator.is_complete else generator.current
        print(render_text(generator.grid, current))

    return generator

def run_benchmark(args, logger: logging.Logger):
    from maze_carver.algo.dfs import RecursiveBacktracker

    logger.info(f"Benchmarking {args.size}x{args.size} ({args.size * args.size:,} cells)...")

    t0 = time.time()
    generator = RecursiveBacktracker.create(args.size, args.size, seed=args.seed)
    init_time = time.time() - t0

    t0 = time.time()
    generator.run_all()
    gen_time = time.time() - t0

    logger.info(f"Grid Init: {init_time:.4f}s")
    logger.info(f"Generation Time: {gen_time:.4f}s ({generator.step_count} steps)")
    if gen_time > 0:
        logger.info(f"Speed: {generator.step_count / gen_time:,.0f} steps/sec")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        try:
            config = MazeConfig.from_args(args)
        except ValueError as e:
            parser.error(str(e))
        run_generate(args, config, logger)

    elif args.command == "benchmark":
        if args.size < 1:
            parser.error(f"--size must be positive, got {args.size}")
        run_benchmark(args, logger)

if __name__ == "__main__":
    main()
