#!/usr/bin/env python3
"""
Command line access to the GOG store provider.

Usage: python -m gamestore_gog [-v] <command> [args]
"""
import argparse
import asyncio
import json
import logging
import sys

from .main import main as register
from .stores.errors import GameStoreError
from .stores.manager import StoreManager
from .utils.paths import STORE_ID


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="gamestore_gog",
        description="List and launch games installed through GOG Galaxy",
    )
    parser.add_argument(
        "-v", "--verbose",
        default=False,
        action="store_true",
        help="Show debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List installed games as JSON")
    commands.add_parser("store-path", help="Print the GOG Galaxy executable path")

    find_name = commands.add_parser("find-name", help="Find a game whose whole name matches a pattern")
    find_name.add_argument("pattern")

    find_id = commands.add_parser("find-id", help="Find a game by one or more GOG ids")
    find_id.add_argument("app_ids", nargs="+")

    exec_info = commands.add_parser("exec-info", help="Show how Galaxy would be invoked for a game")
    exec_info.add_argument("app_id")

    launch = commands.add_parser("launch", help="Launch a game through GOG Galaxy")
    launch.add_argument("app_id")

    return parser.parse_args(argv)


async def run(args) -> int:
    manager = StoreManager()
    register(manager)
    store = manager.get_store(STORE_ID)

    try:
        if args.command == "list":
            games = await store.all_games()
            print(json.dumps([game.to_dict() for game in games], indent=2))
        elif args.command == "store-path":
            store_path = await store.get_game_store_path()
            if store_path is None:
                print("GOG Galaxy not installed", file=sys.stderr)
                return 1
            print(store_path)
        elif args.command == "find-name":
            game = await store.find_by_name(args.pattern)
            print(json.dumps(game.to_dict(), indent=2))
        elif args.command == "find-id":
            query = args.app_ids[0] if len(args.app_ids) == 1 else args.app_ids
            game = await store.find_by_app_id(query)
            print(json.dumps(game.to_dict(), indent=2))
        elif args.command == "exec-info":
            info = await store.get_exec_info(args.app_id)
            print(json.dumps({"execPath": info.exec_path, "arguments": info.arguments}, indent=2))
        elif args.command == "launch":
            return await store.launch_game(args.app_id, manager)
    except GameStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cli(argv=None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(cli())
