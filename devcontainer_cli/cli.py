import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from devcontainer_cli.config_env import settings
from devcontainer_cli.helpers.configuration import parse_configuration
from devcontainer_cli.reader import read_configuration
from devcontainer_cli.utils.cli.exceptions import DevcontainerCliError
from devcontainer_cli.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devcontainer-read-config",
        description="Print the devcontainer configuration of a workspace folder as JSON.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="workspace folder (defaults to the current directory)",
    )
    parser.add_argument(
        "--parse",
        action="store_true",
        help="validate the output and print it re-serialized",
    )
    parser.add_argument(
        "--log-level",
        default=settings.logging.level,
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.logging.json_output,
        help="emit diagnostics as JSON lines",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        log_level=args.log_level,
        log_file=settings.logging.log_file,
        json_output=args.json_logs,
    )

    try:
        text = read_configuration(args.path)
        if args.parse:
            text = parse_configuration(text).model_dump_json(by_alias=True)
    except DevcontainerCliError as e:
        logger.error("read_configuration_failed", kind=e.kind.value, error=str(e))
        print(e, file=sys.stderr)
        return 1
    except ValidationError as e:
        logger.error("configuration_invalid", error_count=e.error_count())
        print(e, file=sys.stderr)
        return 2

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
