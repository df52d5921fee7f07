"""Generate db_schema_whitelist.json for one module or for all modules.

Usage:
    python -m tools.generate_whitelist
    python -m tools.generate_whitelist --module-name Catalog
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from schema_whitelist import create_generator
from schema_whitelist.core.config import get_settings
from schema_whitelist.core.exceptions import (
    ComponentNotFoundError,
    ConfigurationMismatchError,
    SchemaReadError,
)
from schema_whitelist.core.registry import ALL_MODULES

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Generate declarative schema whitelists")
    parser.add_argument(
        "--module-name",
        default=ALL_MODULES,
        help=f"Module to generate the whitelist for ('{ALL_MODULES}' for every registered module)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    generator = create_generator(settings)
    try:
        report = generator.generate(args.module_name)
    except (ConfigurationMismatchError, ComponentNotFoundError, SchemaReadError) as exc:
        logger.error(str(exc))
        return 1

    for path in report.written_paths:
        print(f"Wrote whitelist to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
