"""
CSV reference-table loader.

Each table is a comma-separated file with a header row naming its columns.
Rows are parsed into the frozen record types from src.data_models.

Table formats:
    wine_notes.csv, wine_feels.csv   name,value_mod,weight,ex_pool
    liquid_containers.csv            name,value_mod,weight,oz
    gem_types.csv                    name,value_min,value_max,value_category,weight
    gem_cuts.csv, gem_qualities.csv,
    gem_sizes.csv                    name,value_category_delta,weight

Any failure raises DataLoadError. Nothing is skipped or defaulted silently.
"""

import csv
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from src.data_models import AttributeRecord, GemAttribute, GemType, LiquidContainer

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default file names inside a data directory
WINE_NOTES_FILE = "wine_notes.csv"
WINE_FEELS_FILE = "wine_feels.csv"
LIQUID_CONTAINERS_FILE = "liquid_containers.csv"
GEM_TYPES_FILE = "gem_types.csv"
GEM_CUTS_FILE = "gem_cuts.csv"
GEM_QUALITIES_FILE = "gem_qualities.csv"
GEM_SIZES_FILE = "gem_sizes.csv"


class DataLoadError(Exception):
    """Raised when a reference table cannot be read or parsed."""

    def __init__(self, path: Union[str, Path], message: str, line: Optional[int] = None):
        self.path = Path(path)
        self.line = line
        self.message = message
        location = f"{self.path}:{line}" if line is not None else str(self.path)
        super().__init__(f"Failed to load {location}: {message}")


class RowParseError(ValueError):
    """A single row did not match its table's shape."""
    pass


# =============================================================================
# FIELD PARSING
# =============================================================================


def _field(row: dict[str, Optional[str]], column: str) -> str:
    value = row.get(column)
    if value is None:
        raise RowParseError(f"missing value for column '{column}'")
    return value.strip()


def _as_int(row: dict[str, Optional[str]], column: str) -> int:
    text = _field(row, column)
    try:
        return int(text)
    except ValueError:
        raise RowParseError(f"column '{column}' is not an integer: {text!r}") from None


def _as_float(row: dict[str, Optional[str]], column: str) -> float:
    text = _field(row, column)
    try:
        value = float(text)
    except ValueError:
        raise RowParseError(f"column '{column}' is not a number: {text!r}") from None
    if not math.isfinite(value):
        raise RowParseError(f"column '{column}' is not finite: {text!r}")
    return value


def _as_weight(row: dict[str, Optional[str]]) -> float:
    weight = _as_float(row, "weight")
    if weight < 0:
        raise RowParseError(f"weight must be non-negative, got {weight}")
    return weight


def _as_name(row: dict[str, Optional[str]]) -> str:
    name = _field(row, "name")
    if not name:
        raise RowParseError("name is empty")
    return name


# =============================================================================
# ROW PARSERS
# =============================================================================


def parse_attribute_record(row: dict[str, Optional[str]]) -> AttributeRecord:
    """Parse a wine note/feel row. A blank or absent ex_pool means no group."""
    group = (row.get("ex_pool") or "").strip()
    return AttributeRecord(
        name=_as_name(row),
        value_modifier=_as_float(row, "value_mod"),
        weight=_as_weight(row),
        exclusion_group=group or None,
    )


def parse_liquid_container(row: dict[str, Optional[str]]) -> LiquidContainer:
    return LiquidContainer(
        name=_as_name(row),
        value_modifier=_as_float(row, "value_mod"),
        weight=_as_weight(row),
        volume=_as_int(row, "oz"),
    )


def parse_gem_type(row: dict[str, Optional[str]]) -> GemType:
    gem_type = GemType(
        name=_as_name(row),
        value_min=_as_int(row, "value_min"),
        value_max=_as_int(row, "value_max"),
        value_category=_as_int(row, "value_category"),
        weight=_as_weight(row),
    )
    if gem_type.value_max < gem_type.value_min:
        raise RowParseError(
            f"value_max {gem_type.value_max} is below value_min {gem_type.value_min}"
        )
    return gem_type


def parse_gem_attribute(row: dict[str, Optional[str]]) -> GemAttribute:
    return GemAttribute(
        name=_as_name(row),
        value_category_delta=_as_int(row, "value_category_delta"),
        weight=_as_weight(row),
    )


# Columns that must be present in each table's header
REQUIRED_COLUMNS: dict[Callable, tuple[str, ...]] = {
    parse_attribute_record: ("name", "value_mod", "weight"),
    parse_liquid_container: ("name", "value_mod", "weight", "oz"),
    parse_gem_type: ("name", "value_min", "value_max", "value_category", "weight"),
    parse_gem_attribute: ("name", "value_category_delta", "weight"),
}


# =============================================================================
# FILE LOADING
# =============================================================================


def read_items(
    file_path: Union[str, Path],
    parser: Callable[[dict[str, Optional[str]]], T],
) -> list[T]:
    """
    Read every row of a CSV table.

    Args:
        file_path: Path to the CSV file
        parser: Row parser, e.g. parse_gem_type

    Returns:
        Parsed records in file order

    Raises:
        DataLoadError: if the file is missing or unreadable, a required
            column is absent, any row fails to parse, or there are no rows.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise DataLoadError(file_path, "file not found")

    items: list[T] = []
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            header = [name.strip() for name in (reader.fieldnames or [])]
            if not header:
                raise DataLoadError(file_path, "missing header row")
            reader.fieldnames = header

            missing = [c for c in REQUIRED_COLUMNS.get(parser, ()) if c not in header]
            if missing:
                raise DataLoadError(file_path, f"missing columns: {', '.join(missing)}")

            for row in reader:
                if None in row:
                    raise DataLoadError(
                        file_path, "row has more fields than the header", reader.line_num
                    )
                try:
                    items.append(parser(row))
                except RowParseError as e:
                    raise DataLoadError(file_path, str(e), reader.line_num) from e
    except OSError as e:
        raise DataLoadError(file_path, f"error reading file: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise DataLoadError(file_path, f"malformed CSV: {e}") from e

    if not items:
        raise DataLoadError(file_path, "table has no rows")

    logger.debug(f"Loaded {len(items)} rows from {file_path}")
    return items


# =============================================================================
# TABLE SETS
# =============================================================================


@dataclass
class GemTables:
    """The four tables a gem is assembled from."""

    gem_types: list[GemType]
    gem_cuts: list[GemAttribute]
    gem_qualities: list[GemAttribute]
    gem_sizes: list[GemAttribute]


@dataclass
class WineTables:
    """The note, feel and container tables a wine is assembled from."""

    notes: list[AttributeRecord]
    feels: list[AttributeRecord]
    containers: list[LiquidContainer]


def load_gem_tables(data_dir: Union[str, Path]) -> GemTables:
    """Load gem_types, gem_cuts, gem_qualities and gem_sizes from data_dir."""
    data_dir = Path(data_dir)
    tables = GemTables(
        gem_types=read_items(data_dir / GEM_TYPES_FILE, parse_gem_type),
        gem_cuts=read_items(data_dir / GEM_CUTS_FILE, parse_gem_attribute),
        gem_qualities=read_items(data_dir / GEM_QUALITIES_FILE, parse_gem_attribute),
        gem_sizes=read_items(data_dir / GEM_SIZES_FILE, parse_gem_attribute),
    )
    logger.info(
        f"Loaded gem tables from {data_dir}: {len(tables.gem_types)} types, "
        f"{len(tables.gem_cuts)} cuts, {len(tables.gem_qualities)} qualities, "
        f"{len(tables.gem_sizes)} sizes"
    )
    return tables


def load_wine_tables(data_dir: Union[str, Path]) -> WineTables:
    """Load wine_notes, wine_feels and liquid_containers from data_dir."""
    data_dir = Path(data_dir)
    tables = WineTables(
        notes=read_items(data_dir / WINE_NOTES_FILE, parse_attribute_record),
        feels=read_items(data_dir / WINE_FEELS_FILE, parse_attribute_record),
        containers=read_items(data_dir / LIQUID_CONTAINERS_FILE, parse_liquid_container),
    )
    logger.info(
        f"Loaded wine tables from {data_dir}: {len(tables.notes)} notes, "
        f"{len(tables.feels)} feels, {len(tables.containers)} containers"
    )
    return tables
