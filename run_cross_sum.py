#!/usr/bin/env python3
"""
Cross-Sum Puzzle Toolkit

Command line entry point for generating cross-sum puzzles, checking filled
grids and validating the built-in puzzle catalog.

Usage Examples:
  # Use config defaults (minimal command)
  python run_cross_sum.py generate

  # Reproducible batch written to disk
  python run_cross_sum.py generate --grid-size 5 --difficulty Hard --count 3 --seed 7 --output-dir puzzles

  # Check a grid stored as JSON ({"grid": ..., "row_targets": ..., "col_targets": ...})
  python run_cross_sum.py check my_grid.json

  # Validate the catalog and export the summary table
  python run_cross_sum.py catalog --csv catalog.csv
"""

import argparse
import logging
import json
from pathlib import Path
from typing import Optional
import sys
from datetime import datetime

from cross_sum.core.base_puzzle import CrossSumPuzzle
from cross_sum.core.difficulty import Difficulty
from cross_sum.data.catalog import EASY_PUZZLES, catalog_frame, validate_catalog
from cross_sum.evaluate.checker import check_puzzle_completion
from cross_sum.evaluate.metrics import get_grid_statistics
from cross_sum.generate.puzzle_entry import PuzzleEntry
from cross_sum.generate.puzzle_generator import PuzzleGenerator
from cross_sum.utils.config_loader import get_config


def get_config_defaults():
    """Get configuration defaults for CLI arguments."""
    config = get_config()
    return config.get_cli_defaults()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration with optional file output."""
    level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always detailed in file
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logging.info("=== CROSS-SUM TOOLKIT TRACE ===")
        logging.info(f"Start time: {datetime.now().isoformat()}")
        logging.info(f"Log file: {log_file}")
        logging.info(f"Verbose mode: {verbose}")

    return log_file


def format_puzzle(puzzle: CrossSumPuzzle, show_solution: bool = False) -> str:
    """Render a puzzle as text: column targets on top, row targets on the left."""
    width = max(3, len(str(max(puzzle.row_targets + puzzle.col_targets, default=0))) + 1)
    lines = [" " * (width + 2) + "".join(f"{t:>{width}}" for t in puzzle.col_targets)]
    lines.append(" " * (width + 2) + "-" * (width * puzzle.grid_size))
    for i, target in enumerate(puzzle.row_targets):
        if show_solution:
            cells = "".join(f"{v:>{width}}" for v in puzzle.solution[i])
        else:
            cells = "".join(f"{'_':>{width}}" for _ in puzzle.solution[i])
        lines.append(f"{target:>{width}} |{cells}")
    return "\n".join(lines)


def run_generation(args) -> bool:
    """Generate random puzzles and print or save them."""
    print("🧩 CROSS-SUM PUZZLE GENERATION")
    print("=" * 60)

    difficulty = Difficulty.parse(args.difficulty)
    print("📋 Configuration:")
    print(f"   Grid size: {args.grid_size}x{args.grid_size}")
    print(f"   Difficulty: {difficulty.value} (numbers 1-{difficulty.max_number})")
    print(f"   Count: {args.count}")
    print(f"   Seed: {args.seed if args.seed is not None else 'random'}")

    generator = PuzzleGenerator(seed=args.seed)
    puzzles = generator.generate_batch(args.count, grid_size=args.grid_size, difficulty=difficulty)

    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)

    for puzzle in puzzles:
        print(f"\n📐 {puzzle.puzzle_id}")
        print(format_puzzle(puzzle, show_solution=args.show_solution))

        if output_dir:
            entry = PuzzleEntry.from_puzzle(puzzle)
            path = output_dir / f"{entry.id}.json"
            path.write_text(entry.to_json(), encoding="utf-8")
            logging.info(f"Saved {path}")

    stats = generator.get_generation_statistics()
    print("\n📊 GENERATION STATISTICS")
    print("=" * 60)
    print(f"Total generated: {stats['total_generated']}")
    print(f"Average cell value: {stats['average_cell_value']:.2f}")
    if output_dir:
        print(f"✅ Saved {len(puzzles)} puzzles to {output_dir}")
    return True


def run_check(args) -> bool:
    """Check a grid stored as JSON against its targets."""
    with open(args.puzzle_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    missing = [key for key in ("grid", "row_targets", "col_targets") if key not in data]
    if missing:
        print(f"❌ Error: {args.puzzle_file} is missing {', '.join(missing)}")
        return False

    grid = CrossSumPuzzle.grid_from_rows(data["grid"])
    result = check_puzzle_completion(grid, data["row_targets"], data["col_targets"])
    stats = get_grid_statistics(grid, data["row_targets"], data["col_targets"])

    print("🔍 GRID CHECK")
    print("=" * 60)
    print(f"Result: {result.describe()}")
    print(f"Filled: {stats.filled_cells}/{stats.total_cells} ({stats.completion_percentage:.1f}%)")
    print(f"Correct rows: {stats.correct_rows}/{stats.total_rows}, over target: {stats.overflow_rows}")
    print(f"Correct cols: {stats.correct_cols}/{stats.total_cols}, over target: {stats.overflow_cols}")

    if args.json:
        print(json.dumps({"result": result.to_dict(), "statistics": stats.to_dict()}, indent=2))
    return result.is_complete


def run_catalog(args) -> bool:
    """Validate the built-in catalog."""
    print("📚 PUZZLE CATALOG")
    print("=" * 60)

    frame = catalog_frame(EASY_PUZZLES)
    print(frame.to_string(index=False))

    if args.csv:
        frame.to_csv(args.csv, index=False)
        print(f"\n✅ Wrote summary to {args.csv}")

    invalid = validate_catalog(EASY_PUZZLES)
    if invalid:
        print(f"\n❌ Invalid entries: {', '.join(invalid)}")
        return False
    print(f"\n✅ All {len(EASY_PUZZLES)} catalog puzzles are consistent")
    return True


def main(argv=None):
    """Main CLI entry point."""
    config_defaults = get_config_defaults()

    parser = argparse.ArgumentParser(
        description="Cross-Sum Puzzle Toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate --grid-size 5 --difficulty Hard --count 3 --seed 7
  %(prog)s check my_grid.json
  %(prog)s catalog --csv catalog.csv
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", help="Also write a detailed log to this file")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    generate_parser = subparsers.add_parser("generate", help="Generate random puzzles")
    generate_parser.add_argument(
        "--grid-size",
        type=int,
        default=config_defaults["grid_size"],
        help=f"Grid side length (default: {config_defaults['grid_size']})",
    )
    generate_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=config_defaults["difficulty"],
        help=f"Difficulty level (default: {config_defaults['difficulty']})",
    )
    generate_parser.add_argument(
        "--count",
        type=int,
        default=config_defaults["count"],
        help="Number of puzzles to generate",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=config_defaults["seed"],
        help="Random seed for reproducible puzzles",
    )
    generate_parser.add_argument(
        "--output-dir",
        default=config_defaults["output_dir"],
        help="Directory to save puzzles as JSON files",
    )
    generate_parser.add_argument(
        "--show-solution", action="store_true", help="Print the solution grids"
    )

    check_parser = subparsers.add_parser("check", help="Check a filled grid")
    check_parser.add_argument("puzzle_file", help="JSON file with grid, row_targets, col_targets")
    check_parser.add_argument("--json", action="store_true", help="Also print JSON output")

    catalog_parser = subparsers.add_parser("catalog", help="Validate the built-in catalog")
    catalog_parser.add_argument("--csv", help="Write the catalog summary to a CSV file")

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    logging.info(f"ARGUMENTS: {vars(args)}")

    if not args.command:
        parser.print_help()
        return False

    try:
        if args.command == "generate":
            return run_generation(args)
        elif args.command == "check":
            return run_check(args)
        elif args.command == "catalog":
            return run_catalog(args)
        else:
            print(f"❌ Unknown command: {args.command}")
            return False

    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user")
        return False
    except (OSError, ValueError, IndexError) as e:
        print(f"❌ Error: {e}")
        logging.error(f"Command {args.command} failed: {e}", exc_info=True)
        return False


def cli():
    """Console script entry point."""
    sys.exit(0 if main() else 1)


if __name__ == "__main__":
    cli()
