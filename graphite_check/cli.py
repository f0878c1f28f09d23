"""
graphite-check CLI - Command line entry point for the Graphite data check.

Prints a single result line and exits with the conventional check status:
0 ok, 1 warning, 2 critical, 3 unknown.
"""

import argparse
import sys
from collections.abc import Sequence
from typing import Any, NoReturn

from graphite_check.check import GraphiteDataCheck
from graphite_check.config import CheckConfig, build_config, load_config
from graphite_check.core import ConfigError, Outcome, OutcomeKind
from graphite_check.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

CHECK_NAME = "GraphiteData"

# argparse dest -> CheckConfig field
OPTION_FIELDS = (
    "target",
    "server",
    "warning",
    "critical",
    "reset_on_change",
    "name",
    "allowed_age",
    "hostname_sub",
    "comparator",
    "timespan",
    "timeout",
)


class CheckArgumentParser(argparse.ArgumentParser):
    """Reports a bad command line as a ConfigError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(f"Invalid arguments: {message}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = CheckArgumentParser(
        prog="check-graphite-data",
        description="Check the latest values of a Graphite target against thresholds"
    )
    # Values stay strings here; CheckConfig validates and converts them so that
    # bad values are reported as an UNKNOWN result.
    parser.add_argument("-t", "--target", help="Graphite data target ($ is replaced by the hostname)")
    parser.add_argument("-s", "--server", help="Graphite server host and port (SERVER:PORT)")
    parser.add_argument(
        "-w", "--warn", dest="warning", metavar="VALUE",
        help="Generate warning if the latest value is past VALUE"
    )
    parser.add_argument(
        "-c", "--critical", metavar="VALUE",
        help="Generate critical if the latest value is past VALUE"
    )
    parser.add_argument(
        "-r", "--reset", dest="reset_on_change", metavar="INTERVAL",
        help="Send OK if the last INTERVAL values have steadily moved back from the threshold"
    )
    parser.add_argument("-n", "--name", help="Name used in responses (default: graphite check)")
    parser.add_argument(
        "-a", "--age", dest="allowed_age", metavar="SECONDS",
        help="Allowed number of seconds since last data update (default: 60)"
    )
    parser.add_argument(
        "--host-sub", dest="hostname_sub", metavar="CHARACTER",
        help="Character used to replace periods (.) in hostname (default: _)"
    )
    parser.add_argument(
        "-C", "--comparison", dest="comparator", metavar="COMPARISON",
        help="Comparison to use when checking values: gt or lt (default: gt)"
    )
    parser.add_argument(
        "-S", "--timespan", metavar="MINUTES",
        help="Run check over the last MINUTES minutes of data (default: 5)"
    )
    parser.add_argument(
        "--timeout", metavar="SECONDS",
        help="Timeout for the Graphite request (default: 10)"
    )
    parser.add_argument("--config", help="YAML file with default option values")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for stderr output (default: WARNING)"
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> CheckConfig:
    """
    Build the check configuration from parsed arguments.

    Raises:
        ConfigError: If the options are invalid
        FileNotFoundError: If --config names a missing file
    """
    values: dict[str, Any] = {field: getattr(args, field) for field in OPTION_FIELDS}
    if args.config:
        return load_config(args.config, overrides=values)
    return build_config(values)


def run_check(args: argparse.Namespace) -> Outcome:
    """Run the check for parsed arguments and return its outcome."""
    try:
        config = config_from_args(args)
    except ConfigError as e:
        return e.to_outcome()
    except FileNotFoundError as e:
        return Outcome(kind=OutcomeKind.UNKNOWN, message=str(e))

    return GraphiteDataCheck(config).run()


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    try:
        args = build_parser().parse_args(argv)
    except ConfigError as e:
        outcome = e.to_outcome()
    else:
        setup_logging(level=args.log_level, log_file=args.log_file)
        outcome = run_check(args)

    print(outcome.render(CHECK_NAME))
    return outcome.kind.exit_code


if __name__ == '__main__':
    sys.exit(main())
