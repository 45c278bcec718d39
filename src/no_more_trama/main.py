"""Main entry point for the No More Trama application."""

import asyncio
import logging
import sys

from no_more_trama.cli import build_parser, load_config, run_command

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the no-more-trama command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args)
    except (ValueError, FileNotFoundError) as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    logger.debug("No More Trama - Initialized")

    try:
        exit_code = asyncio.run(run_command(args, config))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
