"""
Gem & Wine Generator - Main Entry Point

Loads the CSV reference tables and prints randomly generated gems and
wines, one per line.
"""

import sys
from pathlib import Path

# Add the project root to the Python path for module discovery
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional, TextIO

from src.content_loader import DataLoadError
from src.data_models import DiceRoller
from src.generators import GemGenerator, WineGenerator


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    gem_count: int = 19
    wine_count: int = 0
    seed: Optional[int] = None

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Ensure paths are Path objects and counts make sense."""
        if isinstance(self.data_dir, str):
            self.data_dir = Path(self.data_dir)
        if self.gem_count < 0:
            raise ValueError(f"gem_count must be non-negative, got {self.gem_count}")
        if self.wine_count < 0:
            raise ValueError(f"wine_count must be non-negative, got {self.wine_count}")


# =============================================================================
# GENERATION RUN
# =============================================================================

def run(config: GeneratorConfig, out: Optional[TextIO] = None) -> int:
    """
    Generate and print items according to config.

    Reference tables are only loaded for the item kinds actually requested.

    Returns:
        Process exit code (0 on success, 1 if a table failed to load).
    """
    if out is None:
        out = sys.stdout

    if config.seed is not None:
        DiceRoller.set_seed(config.seed)
        logger.info(f"Random seed set to {config.seed}")

    try:
        gem_gen = GemGenerator.from_data_dir(config.data_dir) if config.gem_count else None
        wine_gen = WineGenerator.from_data_dir(config.data_dir) if config.wine_count else None
    except DataLoadError as e:
        logger.error(str(e))
        return 1

    if gem_gen is not None:
        for _ in range(config.gem_count):
            print(gem_gen.generate().describe(), file=out)

    if wine_gen is not None:
        for _ in range(config.wine_count):
            print(wine_gen.generate().describe(), file=out)

    logger.info(f"Generated {config.gem_count} gems and {config.wine_count} wines")
    return 0


# =============================================================================
# COMMAND LINE
# =============================================================================

def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Gem & Wine Generator - random treasure from CSV tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.main                          # 19 gems from ./data
  python -m src.main --gems 5 --wines 3       # Five gems, three wines
  python -m src.main --data-dir tables --seed 7
        """
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="Directory holding the CSV tables (default: data)",
    )
    parser.add_argument(
        "--gems",
        type=int,
        default=19,
        help="Number of gems to generate (default: 19)",
    )
    parser.add_argument(
        "--wines",
        type=int,
        default=0,
        help="Number of wines to generate (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Create GeneratorConfig from parsed arguments."""
    return GeneratorConfig(
        data_dir=args.data_dir,
        gem_count=args.gems,
        wine_count=args.wines,
        seed=args.seed,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        config = create_config_from_args(args)
    except ValueError as e:
        logger.error(str(e))
        return 2

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
