"""Command-line interface for compatscan."""

import sys
import logging
import argparse
import asyncio
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

from compatscan import __version__
from compatscan.config.loader import load_config, ConfigError
from compatscan.config.validator import validate_config, ValidationError
from compatscan.api.client import StoreClient, create_http_client
from compatscan.scanner.library_scanner import find_steam_root, ScannerError
from compatscan.workflow.orchestrator import AnalysisOrchestrator
from compatscan.ui.report import ReportRenderer


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='compatscan',
        description='Inventory Steam compatdata directories and the apps they belong to',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyse the Steam installation under $HOME
  compatscan

  # Analyse a specific Steam root
  compatscan --steam-path /mnt/games/Steam

  # Slow down store lookups
  compatscan --delay 1.0

  # Use custom config file
  compatscan --config /path/to/compatscan.yaml
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to config file (default: ./compatscan.yaml if present)'
    )

    parser.add_argument(
        '--steam-path',
        type=Path,
        metavar='PATH',
        help='Steam installation root. Overrides config and auto-detection.'
    )

    parser.add_argument(
        '--delay',
        type=float,
        metavar='SECONDS',
        help='Delay after each compatdata entry. Overrides config.'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output. Overrides config.'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Log level for stderr/file logging. Overrides config.'
    )

    return parser


def _setup_logging(config: dict) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = (logging_config.get('level') or 'WARNING').upper()
    level = getattr(logging, level_str, logging.WARNING)

    handlers = []

    # Console handler writes to stderr so it never interleaves with the report
    if logging_config.get('console', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file).expanduser()
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for compatscan CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Apply CLI overrides, then validate the merged result
    try:
        config = load_config(args.config)

        if args.steam_path is not None:
            config.setdefault('steam', {})['root'] = str(args.steam_path)

        if args.delay is not None:
            config.setdefault('api', {})['request_delay'] = args.delay

        if args.no_color:
            config.setdefault('output', {})['color'] = False

        if args.log_level:
            config.setdefault('logging', {})['level'] = args.log_level

        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)

    try:
        return asyncio.run(run_analysis(config))
    except ScannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nAnalysis interrupted by user.", file=sys.stderr)
        return 130


async def run_analysis(config: dict) -> int:
    """
    Run the analysis workflow (async).

    Args:
        config: Loaded configuration

    Returns:
        Exit code

    Raises:
        ScannerError: If the Steam root or its manifest is unusable
    """
    configured_root = config.get('steam', {}).get('root')
    if configured_root:
        steam_root = Path(configured_root).expanduser().resolve()
    else:
        steam_root = find_steam_root()
    logger.debug(f"Using Steam root: {steam_root}")

    renderer = ReportRenderer(color=config.get('output', {}).get('color', True))
    renderer.header(steam_root)

    client = create_http_client()
    try:
        orchestrator = AnalysisOrchestrator(
            api_client=StoreClient(config, client=client),
            steam_root=steam_root,
            request_delay=config.get('api', {}).get('request_delay', 0.2),
            reporter=renderer,
        )
        result = await orchestrator.run()
    finally:
        await client.aclose()

    renderer.summary(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
