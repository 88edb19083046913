# -*- coding: utf-8 -*-
"""
Command-line interface.
"""
import json
import math
import sys
import typing
from collections import OrderedDict
from functools import wraps
from typing import Iterable, List, Optional, Tuple

from click import Choice, Path, argument, pass_context
from cloup import Color, Context, HelpFormatter, HelpTheme, Style, group, option
from tabulate import tabulate

from . import logging
from .colors import (
    BatteryThresholds,
    ColorCategory,
    UsageThresholds,
    battery_color,
    category_color,
    parse_hex_color,
    to_hex_string,
    usage_color,
)
from .config import Config
from .formatting import condense_whitespace, format_size
from .geometry import Path as VectorPath
from .geometry import Point
from .params import ByteCount, JsonParamType, Ratio
from .units import ByteQuantity, Unit
from .version import get_version

FORMAT_OPTION_HELP = 'Output format. The default is "table" format.'


@group(
    context_settings=Context.settings(
        help_option_names=["-h", "--help"],
        terminal_width=100,
        align_option_groups=False,
        formatter_settings=HelpFormatter.settings(
            theme=HelpTheme(
                invoked_command=Style(fg=Color.bright_green),  # type: ignore
                heading=Style(fg=Color.bright_white, bold=True),  # type: ignore
                col1=Style(fg=Color.bright_yellow),  # type: ignore
            ),
        ),
    )
)
@option(
    "-c",
    "--config",
    type=Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file path.",
)
@option(
    "--config-parameter",
    "config_parameters",
    multiple=True,
    type=(str, JsonParamType()),
    metavar="PATH VALUE",
    help="Paths and values to override mini-stats config values. "
    'Path should contains a string with dot separated keys (e.g. "colors.usage.ceiling"). '
    "Value should be json-serializable string or plain value (string, true/false, number). "
    "Can be specified multiple times to override several settings.",
)
@pass_context
def cli(
    ctx: Context,
    config: Optional[str],
    config_parameters: Iterable[Tuple[str, dict]],
) -> None:
    """Formatting helpers for system statistics indicators."""
    cfg = Config(config)

    if config_parameters is not None:
        cli_cfg = _build_cli_cfg_from_config_parameters(config_parameters)
        cfg.merge(cli_cfg)

    logging.configure(cfg["loguru"])
    logging.debug("Colors config: {}", cfg["colors"])

    ctx.obj = {"config": cfg}


def command(*args, **kwargs):
    """
    Decorator for mini-stats cli commands.
    """

    def decorator(f):
        @pass_context
        @wraps(f)
        def wrapper(ctx, *args, **kwargs):
            try:
                logging.info(
                    "Executing command '{}', params: {}, args: {}, version: {}",
                    ctx.command.name,
                    {
                        **ctx.parent.params,
                        **ctx.params,
                    },
                    ctx.args,
                    get_version(),
                )
                result = ctx.invoke(f, ctx, ctx.obj["config"], *args, **kwargs)
                logging.info("Command '{}' completed", ctx.command.name)
                return result
            except Exception:
                logging.exception("Command '{}' failed", ctx.command.name)
                raise

        return cli.command(*args, **kwargs)(wrapper)

    return decorator


@command(name="rate")
@argument("values", metavar="BYTES...", nargs=-1, required=True, type=ByteCount())
@option(
    "--format",
    "format_",
    type=Choice(["table", "json"]),
    default="table",
    help=FORMAT_OPTION_HELP,
)
def rate_command(
    _ctx: Context, _config: Config, values: List[int], format_: str
) -> None:
    """Show transfer rates for byte-per-second counts."""
    records = []
    for value in values:
        rate, unit = ByteQuantity(value).readable_rate()
        records.append(
            OrderedDict((("bytes", value), ("rate", rate), ("unit", unit)))
        )

    _print_records(records, format_)


@command(name="size")
@argument("values", metavar="BYTES...", nargs=-1, required=True, type=ByteCount())
@option(
    "--format",
    "format_",
    type=Choice(["table", "json"]),
    default="table",
    help=FORMAT_OPTION_HELP,
)
def size_command(
    _ctx: Context, _config: Config, values: List[int], format_: str
) -> None:
    """Show human-readable sizes for byte counts."""
    records = []
    for value in values:
        records.append(
            OrderedDict(
                (
                    ("bytes", value),
                    ("size", ByteQuantity(value).readable_size()),
                    ("binary_size", format_size(value)),
                )
            )
        )

    _print_records(records, format_)


@command(name="units")
@argument("value", metavar="BYTES", type=ByteCount())
def units_command(_ctx: Context, _config: Config, value: int) -> None:
    """Show byte count in all units."""
    quantity = ByteQuantity(value)
    records = [
        OrderedDict((("unit", unit.name.lower()), ("value", quantity.in_units(unit))))
        for unit in Unit
    ]
    print(tabulate(records, headers="keys", floatfmt=".6g"))


@command(name="usage")
@argument("ratio", type=Ratio())
@option(
    "--reversed",
    "reversed_",
    is_flag=True,
    default=False,
    help="Treat high values as good ones (e.g. free space).",
)
@option("--monochrome", is_flag=True, default=False, help="Disable coloring.")
def usage_command(
    _ctx: Context, config: Config, ratio: float, reversed_: bool, monochrome: bool
) -> None:
    """Show indicator color for usage ratio."""
    colors_config = config["colors"]
    category = usage_color(
        ratio,
        reversed=reversed_,
        color=not monochrome,
        thresholds=UsageThresholds.from_config(colors_config["usage"]),
    )
    _print_category(category, colors_config["palette"])


@command(name="battery")
@argument("level", type=Ratio())
@option("--monochrome", is_flag=True, default=False, help="Disable coloring.")
def battery_command(
    _ctx: Context, config: Config, level: float, monochrome: bool
) -> None:
    """Show indicator color for battery charge level."""
    colors_config = config["colors"]
    category = battery_color(
        level,
        color=not monochrome,
        thresholds=BatteryThresholds.from_config(colors_config["battery"]),
    )
    _print_category(category, colors_config["palette"])


@command(name="hex")
@argument("color")
def hex_command(_ctx: Context, _config: Config, color: str) -> None:
    """Normalize hex color string."""
    print(to_hex_string(parse_hex_color(color)))


@command(name="arrow")
@argument("x1", type=float)
@argument("y1", type=float)
@argument("x2", type=float)
@argument("y2", type=float)
@option(
    "--length",
    type=float,
    default=10.0,
    show_default=True,
    help="Length of arrow pointer lines.",
)
@option(
    "--angle",
    type=float,
    default=30.0,
    show_default=True,
    help="Angle between arrow shaft and pointer lines, in degrees.",
)
# pylint: disable=too-many-positional-arguments
def arrow_command(
    _ctx: Context,
    _config: Config,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    length: float,
    angle: float,
) -> None:
    """Show SVG path data of an arrow."""
    path = VectorPath()
    path.add_arrow(Point(x1, y1), Point(x2, y2), length, math.radians(angle))
    print(path.to_svg())


@command(name="condense")
@argument("text")
def condense_command(_ctx: Context, _config: Config, text: str) -> None:
    """Collapse whitespaces and newlines in text."""
    print(condense_whitespace(text))


def _print_records(records: List[dict], format_: str) -> None:
    if format_ == "json":
        json.dump(records, sys.stdout, indent=2)
        print()
    else:
        print(tabulate(records, headers="keys"))


def _print_category(category: ColorCategory, palette: dict) -> None:
    print(f"{category.value} {to_hex_string(category_color(category, palette))}")


def _build_cli_cfg_from_config_parameters(values: Iterable[Tuple[str, dict]]) -> dict:
    """
    Build config dict from specified keys and values in plain format.
    Duplicate keys are ignored in favor of the last entry.
    """

    def _split_key(key: str) -> typing.List[str]:
        return key.split(".")

    values_by_uniq_key: typing.Dict[str, dict] = {}
    for key, value in values:
        values_by_uniq_key[key] = value

    values_sorted = sorted(
        values_by_uniq_key.items(), key=lambda x: len(_split_key(x[0]))
    )

    result: dict = {}
    for key, value in values_sorted:
        path = _split_key(key)
        if not path:
            continue

        subresult = result
        for i, subkey in enumerate(path):
            if i != len(path) - 1 and not isinstance(subresult, dict):
                continue

            if i == len(path) - 1:
                subresult[subkey] = value
            elif subkey not in subresult:
                subresult[subkey] = {}
            subresult = subresult[subkey]

    return result
