"""CLI entry point for the weather lookup client."""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from clima.config.loader import get_config_value, load_config, set_config_value
from clima.config.schema import ClimaConfig
from clima.models.result import Err
from clima.models.state import DisplayMode
from clima.reporting.formatters import format_result_json, format_state_text
from clima.storage.last_city import LastCityStore
from clima.view import WeatherView

QUIT_COMMANDS = (":q", ":quit", ":sair")


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="clima",
        description="Current weather by city name",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="SQLite DB path")

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Look up one city")
    search_p.add_argument("city", nargs="+", help="City name")
    search_p.add_argument("--json", action="store_true", help="Print JSON")

    # interactive
    sub.add_parser("interactive", help="Prompt for cities until :q")

    # last
    last_p = sub.add_parser("last", help="Show the last searched city")
    last_p.add_argument("--clear", action="store_true", help="Forget it")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    if args.db:
        config = set_config_value(config, "storage.db_path", args.db)

    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format,
    )

    if args.command == "search":
        return asyncio.run(_cmd_search(config, args))
    elif args.command == "interactive":
        return asyncio.run(_cmd_interactive(config, stdin or sys.stdin))
    elif args.command == "last":
        return asyncio.run(_cmd_last(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_search(config: ClimaConfig, args) -> int:
    view = WeatherView.from_config(config)
    await view.mount(restore=False)
    try:
        await view.submit(" ".join(args.city))
    finally:
        view.unmount()

    state = view.state
    if state.display_mode == DisplayMode.RESULT and args.json:
        assert state.result is not None
        print(format_result_json(state.result))
    else:
        print(format_state_text(state))
    return 0 if state.display_mode == DisplayMode.RESULT else 1


async def _cmd_interactive(config: ClimaConfig, stdin: TextIO) -> int:
    view = WeatherView.from_config(config, renderer=print)
    await view.mount()
    try:
        while True:
            line = await asyncio.to_thread(stdin.readline)
            if not line or line.strip() in QUIT_COMMANDS:
                break
            await view.submit(line)
    finally:
        view.unmount()
    return 0


async def _cmd_last(config: ClimaConfig, args) -> int:
    store = LastCityStore(config.storage.db_path)
    if args.clear:
        cleared = await store.clear()
        if isinstance(cleared, Err):
            print(f"Error: {cleared.message}")
            return 1
        print("Last city cleared")
        return 0

    stored = await store.read()
    if isinstance(stored, Err):
        print(f"Error: {stored.message}")
        return 1
    print(stored.value if stored.value else "No city saved yet")
    return 0


def _cmd_config(config: ClimaConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
