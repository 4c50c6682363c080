"""CLI entry point for the switch exporter.

Examples:
  switchexporter --switch-hostname 192.168.0.1 --switch-password <PW>

  SWITCH_PASSWORD=<PW> switchexporter --switch-hostname 192.168.0.1 \\
      --listen-address 127.0.0.1:9108 --switch-timeout 5
"""

from __future__ import annotations

import argparse
import os
import sys
import time

from loguru import logger
from prometheus_client.exposition import start_http_server
from prometheus_client.platform_collector import PlatformCollector
from prometheus_client.process_collector import ProcessCollector
from prometheus_client.registry import CollectorRegistry
from pydantic import ValidationError
from tabulate import tabulate

from switchexporter import __version__, configure_logging
from switchexporter.base.client import BaseSwitchClient
from switchexporter.collector import SwitchCollector
from switchexporter.config import (
    DEFAULT_LISTEN_ADDRESS,
    PASSWORD_ENV,
    ExporterConfig,
    password_from_env,
)
from switchexporter.vendors.tplink import TPLinkSwitch


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the exporter."""
    parser = argparse.ArgumentParser(
        prog="switchexporter",
        description="Prometheus exporter for TP-Link Easy Smart switch port statistics",
    )
    parser.add_argument(
        "--listen-address",
        default=DEFAULT_LISTEN_ADDRESS,
        help=(
            "The address to listen on for HTTP requests, an empty host binds all IPv4 and IPv6 interfaces "
            f"(default: {DEFAULT_LISTEN_ADDRESS})"
        ),
    )
    parser.add_argument("--switch-hostname", help="Switch IP address or hostname")
    parser.add_argument(
        "--switch-username",
        default="admin",
        help="Username used to login to the switch (default: admin)",
    )
    parser.add_argument(
        "--switch-password",
        help=f"Password used to login to the switch [env: {PASSWORD_ENV}]",
    )
    parser.add_argument(
        "--switch-timeout",
        type=float,
        default=10.0,
        help="Timeout in seconds for each request to the switch, 0 disables it (default: 10)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(args)


def build_config(parsed: argparse.Namespace) -> ExporterConfig:
    """Turn parsed arguments into a validated ExporterConfig.

    Raises:
        pydantic.ValidationError: If a setting is missing or invalid.
    """
    return ExporterConfig(
        listen_address=parsed.listen_address,
        switch_hostname=parsed.switch_hostname or "",
        switch_username=parsed.switch_username,
        switch_password=password_from_env(parsed.switch_password),
        switch_timeout=parsed.switch_timeout,
    )


def build_registry(switch: BaseSwitchClient) -> CollectorRegistry:
    """Create a registry holding the switch collector plus process and platform metrics."""
    registry = CollectorRegistry()
    registry.register(SwitchCollector(switch, log=logger.bind(classname="SwitchCollector", host=switch.host)))
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    return registry


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(str(err["msg"]).removeprefix("Value error, ") for err in e.errors())


def _print_startup_banner(config: ExporterConfig) -> None:
    startup_rows = [
        ["version", __version__],
        ["listen address", config.display_address],
        ["switch", config.switch_hostname],
        ["username", config.switch_username],
        ["timeout", f"{config.switch_timeout}s" if config.switch_timeout else "none"],
    ]

    for var in ("GITHUB_REF", "GITHUB_SHA", "BUILDTIME"):
        val = os.environ.get(var)
        if val and not val.endswith("_is_undefined"):
            startup_rows.append([var, val])

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "switchexporter starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    logger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main(args: list[str] | None = None) -> None:
    """Main entry point for the exporter CLI."""
    parsed = parse_args(args)
    configure_logging(level="DEBUG" if parsed.verbose else None)

    try:
        config = build_config(parsed)
    except ValidationError as e:
        print(f"Error: {_format_validation_error(e)}", file=sys.stderr)
        sys.exit(1)

    _print_startup_banner(config)

    switch = TPLinkSwitch(
        host=config.switch_hostname,
        username=config.switch_username,
        password=config.switch_password,
        timeout=config.switch_timeout,
        log=logger.bind(classname="TPLinkSwitch", host=config.switch_hostname),
    )
    registry = build_registry(switch)

    start_http_server(config.listen_port, addr=config.listen_host, registry=registry)
    logger.info(f"Metrics available at http://{config.display_address}/metrics")

    try:
        while True:
            time.sleep(60)
    except KeyboardInterrupt:
        logger.info("Shutting down exporter")
    finally:
        switch.close()


if __name__ == "__main__":
    main()
