"""Command line access to a Buzz instance.

Credentials come from BEESWAX_USER and BEESWAX_PASSWORD; the instance URL
from BEESWAX_URL or --url.

    beeswax read advertiser --filter advertiser_id=496
    beeswax creatives 496 --name "2019-20200306-medium_large_rectangle 300x250"
    beeswax view continents
"""

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty

from beeswax.client import BeeswaxClient
from beeswax.config import BeeswaxConnectionConfig
from beeswax.errors import BeeswaxError
from beeswax.resources import (
    ReadAdvertiser,
    ReadCreative,
    ReadView,
    ReadViewList,
    Resource,
    get_resource_schemas,
    registered_resource_names,
)
from beeswax.version import get_version

logger = logging.getLogger(__name__)

ClientFactory = Callable[[BeeswaxConnectionConfig], Any]


def parse_filters(pairs: Sequence[str]) -> dict[str, str]:
    """Turn ``key=value`` arguments into a filter dict."""
    filters: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Invalid filter '{pair}', expected key=value")
        filters[key.strip()] = value.strip()
    return filters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beeswax", description="Query the Beeswax (Buzz) API")
    parser.add_argument("--url", help="Base URL of the Buzz instance (default: $BEESWAX_URL)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    read = subparsers.add_parser("read", help="Read resources matching filters")
    read.add_argument("resource", choices=registered_resource_names())
    read.add_argument("--filter", "-f", action="append", default=[], metavar="KEY=VALUE")

    creatives = subparsers.add_parser("creatives", help="List the creatives of an advertiser")
    creatives.add_argument("advertiser_id", type=int)
    creatives.add_argument("--name", help="Only creatives with this exact name")

    view = subparsers.add_parser("view", help="Print the rows of a view")
    view.add_argument("view_name")
    view.add_argument("--list", action="store_true", help="Read the view list metadata instead")

    return parser


def _print_resources(console: Console, resources: list[Resource]) -> None:
    if not resources:
        console.print("[yellow]No results[/yellow]")
        return
    for resource in resources:
        console.print(Pretty(resource.model_dump(mode="json")))
    console.print(f"[dim]{len(resources)} result(s)[/dim]")


def _run(args: argparse.Namespace, client: Any, console: Console) -> int:
    if args.command == "read":
        schemas = get_resource_schemas(args.resource)
        if schemas is None or schemas.read is None:
            console.print(f"[bold red]Resource '{args.resource}' cannot be read[/bold red]")
            return 2
        criteria = schemas.read.model_validate(parse_filters(args.filter))
        _print_resources(console, client.read(criteria))
        return 0

    if args.command == "creatives":
        advertisers = client.read(ReadAdvertiser(advertiser_id=args.advertiser_id))
        if not advertisers:
            console.print(f"[bold red]Advertiser {args.advertiser_id} not found[/bold red]")
            return 1
        criteria = ReadCreative.for_advertiser(advertisers[0])
        criteria.creative_name = args.name
        _print_resources(console, client.read(criteria))
        return 0

    if args.command == "view":
        read_type = ReadViewList if args.list else ReadView
        _print_resources(console, client.read(read_type(view_name=args.view_name)))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(
    argv: Sequence[str] | None = None,
    client_factory: ClientFactory = BeeswaxClient.from_config,
    console: Console | None = None,
) -> int:
    """Entry point of the ``beeswax`` command."""
    console = console or Console()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = BeeswaxConnectionConfig.from_env(base_url=args.url)
        client = client_factory(config)
        return _run(args, client, console)
    except argparse.ArgumentTypeError as e:
        console.print(f"[bold red]{escape(str(e))}[/bold red]")
        return 2
    except ValidationError as e:
        console.print(f"[bold red]Invalid filter: {escape(str(e))}[/bold red]")
        return 2
    except BeeswaxError as e:
        logger.debug("Beeswax command failed", exc_info=True)
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
