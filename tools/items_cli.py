
"""
tools/items_cli.py
------------------
Visor de terminal para la API de items (vista lista y vista detalle).
Usage:
    python tools/items_cli.py list
    python tools/items_cli.py show 1
    python tools/items_cli.py --api-url http://localhost:3001 list
Synopsis: created by emeday 2025
"""
import argparse
import sys
from typing import List, Optional
from items_shared.client import ItemsApiClient, ItemsApiError

LIST_ERROR = "Error fetching items. Please try again later."
DETAIL_ERROR = "Error fetching item details. Please try again later."

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="items_cli", description="Items API viewer")
    p.add_argument("--api-url", default=None, help="URL base de la API (default: API_URL)")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Lista todos los items")
    show = sub.add_parser("show", help="Muestra el detalle de un item")
    show.add_argument("item_id")
    return p

def main(argv: Optional[List[str]] = None, client: Optional[ItemsApiClient] = None) -> int:
    args = build_parser().parse_args(argv)
    client = client or ItemsApiClient(base_url=args.api_url)
    with client:
        if args.command == "list":
            try:
                items = client.list_items()
            except ItemsApiError:
                print(LIST_ERROR, file=sys.stderr)
                return 1
            print("Items")
            for item in items:
                print(f"\n[{item.id}] {item.name}\n    {item.description}")
            return 0

        try:
            item = client.get_item(args.item_id)
        except ItemsApiError:
            print(DETAIL_ERROR, file=sys.stderr)
            return 1
        print(item.name)
        print(item.description)
        return 0

if __name__ == "__main__":
    sys.exit(main())
