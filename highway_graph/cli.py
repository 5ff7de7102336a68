"""Command-line entry point.

Reads one TMG file, prints the graph summary followed by the extremal
vertices, extremal edges and edge-count diagnostics, and optionally
writes an interactive map of the network.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig, ObservabilityConfig, get_config
from .domain.errors import ConfigurationError, HighwayGraphError
from .io.report import format_analysis
from .services import HighwayGraphService


def configure_logging(config: ObservabilityConfig) -> None:
    """Configure the root logger.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {config.level!r}",
            setting_name="HWG_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)


def load_config() -> AppConfig:
    """Read the configuration and set up logging from it.

    Raises:
        ConfigurationError: If an environment setting is invalid.
    """
    try:
        config = get_config()
    except ValueError as e:
        raise ConfigurationError("Invalid configuration", cause=e)
    configure_logging(config.observability)
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="highway-graph",
        description="Summarize a highway graph stored in TMG format",
    )
    parser.add_argument("tmgfile", type=Path, help="Path to the TMG graph file")
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        metavar="HTML",
        help="Also write an interactive map of the graph to this file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        service = HighwayGraphService.create_default(path=args.tmgfile, config=config)
        analysis = service.analyze()
        print(format_analysis(analysis, config.report.length_decimals), end="")
        if args.map is not None:
            written = service.render_map(args.map)
            print(f"Map written to {written}")
    except HighwayGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
