"""CLI command for the network throughput status producer."""
import logging
import sys
from typing import Tuple

import click

from counters.exceptions import BaselineError, ConfigurationError, InvalidIntervalError
from counters.proc_net_dev import DEFAULT_SOURCE, ProcNetDevReader
from counters.sysfs import DEFAULT_SYSFS_ROOT, validate_interfaces
from utils.interface_filter import InterfaceFilter
from .driver import PollingConfig, PollingDriver
from .output import StatusWriter

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 1
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StatusCommand(click.Command):
    """Command whose usage errors exit with status 1 instead of click's 2."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = USAGE_EXIT_CODE
            raise


def parse_interval(value: str) -> int:
    """Whole seconds written as plain ASCII digits; anything else is rejected."""
    if not (isinstance(value, str) and value.isascii() and value.isdigit()):
        raise InvalidIntervalError(str(value))
    interval = int(value)
    if interval < 1:
        raise InvalidIntervalError(str(value))
    return interval


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


@click.command(cls=StatusCommand)
@click.argument("interfaces", nargs=-1)
@click.option("-t", "--interval", "interval", default="1", show_default=True,
              metavar="SECONDS", help="Polling interval in whole seconds (>= 1)")
@click.option("--source", "source", default=DEFAULT_SOURCE, show_default=True,
              envvar="NETSPEED_SOURCE", type=click.Path(dir_okay=False),
              help="Per-interface statistics table to sample")
@click.option("--sysfs", "sysfs", default=DEFAULT_SYSFS_ROOT, show_default=True,
              envvar="NETSPEED_SYSFS", type=click.Path(file_okay=False),
              help="Directory used to check that named interfaces exist")
@click.option("-v", "--verbose", "verbose", is_flag=True, default=False,
              help="Log diagnostics to stderr")
@click.pass_context
def cli(ctx: click.Context,
        interfaces: Tuple[str, ...],
        interval: str,
        source: str,
        sysfs: str,
        verbose: bool):
    """
    Print aggregate RX/TX throughput as status bar JSON, one line per interval.

    With no INTERFACE arguments, eth*, wlan*, enp* and wlp* interfaces are
    tracked. Otherwise only the named interfaces are, and each must exist.

    Example:
      netspeed -t 2 enp3s0 wlp2s0
    """
    _configure_logging(verbose)
    writer = StatusWriter()

    try:
        config = PollingConfig(interval=parse_interval(interval))
        if interfaces:
            interface_filter = InterfaceFilter.from_names(validate_interfaces(interfaces, sysfs))
        else:
            interface_filter = InterfaceFilter.auto()
    except ConfigurationError as e:
        logger.error("%s", e)
        writer.error(e.token, e.tooltip)
        ctx.exit(1)

    logger.debug("Polling %s every %ds (%s)", source, config.interval,
                 "explicit: " + ", ".join(sorted(interface_filter.allowed))
                 if interface_filter.is_explicit else "auto-detect")

    driver = PollingDriver(ProcNetDevReader(interface_filter, source), config, writer)
    try:
        driver.run()
    except BaselineError as e:
        logger.error("%s", e)
        ctx.exit(1)
