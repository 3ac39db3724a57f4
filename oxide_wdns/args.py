"""Command-line arguments for the DoH gateway server."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

PROG_NAME = "oxide-wdns"
VERSION = "0.1.6"
DEFAULT_CONFIG_PATH = "config.yaml"

DESCRIPTION = """\
High-performance Secure DNS via HTTP (DoH) Gateway

Key Features:
- Full RFC 8484 DoH compliance (Wireformat & JSON, GET/POST, HTTP/1.1 & HTTP/2)
- Advanced DNSSEC validation for response integrity
- Multi-protocol upstream support (UDP, TCP, DoT, DoH) with flexible selection strategies
- Powerful DNS routing: rule-based (Exact, Regex, Wildcard, File, URL), multiple upstream groups, loading remote rules
- Intelligent LRU caching: includes negative caching and persistent cache (disk load/save, periodic save)
- Flexible EDNS Client Subnet (ECS) handling: strip, forward, anonymize strategies; ECS-aware caching
- Robust security: built-in IP-based rate limiting and strict input validation
- Comprehensive observability: integrated Prometheus metrics, Kubernetes health probes, and structured logging
- Cloud-native friendly design with support for graceful shutdown"""


@dataclass
class CliArgs:
    """Parsed server command-line options."""

    config: Path = Path(DEFAULT_CONFIG_PATH)
    test_config: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        self.config = Path(self.config)

    def validate(self) -> None:
        """Raise FileNotFoundError if the configuration file does not exist."""
        if not self.config.exists():
            raise FileNotFoundError(
                f"Configuration file does not exist: {self.config}"
            )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the server command."""
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROG_NAME} {VERSION}",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_PATH),
        help="Server configuration file path (YAML format)",
    )
    parser.add_argument(
        "-t",
        "--test",
        dest="test_config",
        action="store_true",
        help="Test configuration file for validity and exit",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug level logging for detailed output",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    """Parse the given arguments (or sys.argv) into CliArgs."""
    namespace = build_parser().parse_args(argv)
    return CliArgs(
        config=namespace.config,
        test_config=namespace.test_config,
        debug=namespace.debug,
    )