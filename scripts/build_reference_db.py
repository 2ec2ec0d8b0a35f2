#!/usr/bin/env python3
"""
Build a SQLite reference database from the bundled demonstration tables.

The resulting file can be served by pointing AIRWAY_ROUTER_DB_PATH at it.

Usage:
    python scripts/build_reference_db.py
    python scripts/build_reference_db.py --output /tmp/reference.db
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.airway_router.adapters.data_providers.bundled_tables import (
    load_bundled_tables,
)
from src.airway_router.adapters.data_providers.sqlite_provider import (
    write_reference_tables,
)

DEFAULT_OUTPUT = Path(__file__).parent.parent / "data" / "reference.db"


def main(output: Path = DEFAULT_OUTPUT) -> Path:
    """Write the bundled tables to *output* and report the row counts."""
    tables = load_bundled_tables()
    path = write_reference_tables(output, tables)

    print("=" * 60)
    print(f"Reference database written to {path}")
    print(f"  airports:      {len(tables.airports)}")
    print(f"  fixes:         {len(tables.fixes)}")
    print(f"  navaids:       {len(tables.navaids)}")
    print(f"  airway points: {len(tables.airway_points)}")
    print("=" * 60)
    return path


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Build the SQLite reference database")
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT, help="Target database file"
    )
    args = parser.parse_args()
    main(args.output)
