"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from weatherdash.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherdash.config.schema import DashboardConfig
from weatherdash.controller import build_controller
from weatherdash.models.state import Ready
from weatherdash.reporting.formatters import format_state_json, format_state_text

DEFAULT_CONFIG = "weatherdash.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Weather dashboard backed by Open-Meteo",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Fetch and print the dashboard")
    show_p.add_argument("--city", help="City to search for")
    show_p.add_argument(
        "--hours", type=int, help="Hourly forecast entries to show"
    )
    show_p.add_argument("--json", action="store_true", help="Print JSON")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP dashboard")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "show":
        return asyncio.run(_cmd_show(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(args)
    else:
        parser.print_help()
        return 1


async def _cmd_show(config: DashboardConfig, args) -> int:
    controller = build_controller(config)
    # A successful search fetches the new location, so mount only as a fallback
    if not args.city or not await controller.search(args.city):
        if args.city:
            print(
                f"No location found for {args.city!r}, "
                f"showing {controller.location.display_name}",
                file=sys.stderr,
            )
        await controller.mount()

    hours = args.hours or config.display.hourly_hours
    if args.json:
        print(format_state_json(controller.state, hours))
    else:
        print(format_state_text(controller.state, hours))
    return 0 if isinstance(controller.state, Ready) else 1


def _cmd_config(config: DashboardConfig, args) -> int:
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
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())} in {args.config}")
            return 0
        except (KeyError, ValueError, OSError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(args) -> int:
    import uvicorn

    from weatherdash import dashboard

    dashboard.CONFIG_PATH = Path(args.config)
    dashboard.get_config.cache_clear()
    uvicorn.run(dashboard.app, host=args.host, port=args.port)
    return 0
