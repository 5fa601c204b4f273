"""Reference-table loading module."""

from src.content_loader.table_loader import (
    DataLoadError,
    GemTables,
    WineTables,
    read_items,
    load_gem_tables,
    load_wine_tables,
    parse_attribute_record,
    parse_liquid_container,
    parse_gem_type,
    parse_gem_attribute,
    WINE_NOTES_FILE,
    WINE_FEELS_FILE,
    LIQUID_CONTAINERS_FILE,
    GEM_TYPES_FILE,
    GEM_CUTS_FILE,
    GEM_QUALITIES_FILE,
    GEM_SIZES_FILE,
)

__all__ = [
    # Errors
    "DataLoadError",
    # Table sets
    "GemTables",
    "WineTables",
    # Loading
    "read_items",
    "load_gem_tables",
    "load_wine_tables",
    # Row parsers
    "parse_attribute_record",
    "parse_liquid_container",
    "parse_gem_type",
    "parse_gem_attribute",
    # Default file names
    "WINE_NOTES_FILE",
    "WINE_FEELS_FILE",
    "LIQUID_CONTAINERS_FILE",
    "GEM_TYPES_FILE",
    "GEM_CUTS_FILE",
    "GEM_QUALITIES_FILE",
    "GEM_SIZES_FILE",
]
