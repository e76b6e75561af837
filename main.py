#!/usr/bin/env python3
import argparse
import datetime
import sys
import time
from typing import List, Optional

from rich.panel import Panel
from rich.table import Table

from common.containers import container
from common.file_watcher import BaseFileChangeWatcher, InvalidTargetError
from common.models import Dimension
from common.utils import configure_logging, console, logger


def display_banner(path: str) -> None:
    """Display the startup banner using Rich"""
    welcome_panel = Panel(
        f"\n[bold cyan]FILE POLLER[/bold cyan]\n\n[italic green]{path}[/italic green]\n",
        border_style="bright_blue",
        title="Watching",
        title_align="center",
        width=80,
    )
    console.print(welcome_panel, justify="center")
    console.print("\nPress Ctrl+C to stop.\n")


def build_dimension_table(dimensions: List[Dimension], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for dimension in dimensions:
        table.add_row(dimension.key, dimension.value)
    return table


def poll_changes(
    watcher: BaseFileChangeWatcher,
    interval: float,
    count: Optional[int] = None,
) -> int:
    """Poll ``watcher`` every ``interval`` seconds and report each observed change.

    Returns:
        Number of changes reported before stopping
    """
    reported = 0
    while count is None or reported < count:
        time.sleep(interval)
        if watcher.poll_and_reset():
            reported += 1
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            console.print(f"[yellow]{timestamp}[/yellow] changed")
    return reported


def run_watch(args: argparse.Namespace) -> int:
    with container.file_change_watcher(args.path) as watcher:
        display_banner(watcher.path)
        poll_changes(watcher, args.interval, args.count)
    return 0


def run_metadata(args: argparse.Namespace) -> int:
    with container.metadata_monitor(args.path) as monitor:
        display_banner(monitor.path)
        console.print(build_dimension_table(monitor.dimensions(), monitor.path))
        last_refresh = monitor.refresh_count
        while True:
            time.sleep(args.interval)
            dimensions = monitor.dimensions()
            if monitor.refresh_count != last_refresh:
                last_refresh = monitor.refresh_count
                console.print(build_dimension_table(dimensions, monitor.path))


def run_enrich(args: argparse.Namespace) -> int:
    enricher = container.metadata_enricher(
        indirection_file_name=args.indirection_file or container.config.indirection_file()
    )
    if not enricher.available:
        console.print(
            f"[yellow]Indirection file {enricher.indirection_file_name} not found[/yellow]"
        )
    console.print(build_dimension_table(enricher.dimensions(), "Agent metadata"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report when a file is rewritten by another process"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    watch_parser = subparsers.add_parser("watch", help="Report changes to a file")
    watch_parser.add_argument("path", help="File to watch")
    watch_parser.add_argument(
        "--interval",
        type=float,
        default=container.config.poll_interval(),
        help="Seconds between polls",
    )
    watch_parser.add_argument(
        "--count", type=int, default=None, help="Stop after this many changes"
    )
    watch_parser.set_defaults(handler=run_watch)

    metadata_parser = subparsers.add_parser(
        "metadata", help="Print a key=value file every time it changes"
    )
    metadata_parser.add_argument("path", help="key=value file to watch")
    metadata_parser.add_argument(
        "--interval",
        type=float,
        default=container.config.poll_interval(),
        help="Seconds between polls",
    )
    metadata_parser.set_defaults(handler=run_metadata)

    enrich_parser = subparsers.add_parser("enrich", help="Print agent metadata")
    enrich_parser.add_argument(
        "--indirection-file", default=None, help="Indirection file to follow"
    )
    enrich_parser.set_defaults(handler=run_enrich)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function"""
    args = build_parser().parse_args(argv)
    configure_logging(container.config.log_dir(), container.config.log_level())

    try:
        return args.handler(args)
    except InvalidTargetError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 2
    except (KeyboardInterrupt, EOFError):
        console.print("\n\nGoodbye!", style="bold green")
        return 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        console.print(f"\n[red]Error: {str(e)}[/red]\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
