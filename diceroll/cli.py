"""Command-line entry point for the dice roller.

Reads the number of dice, number of sides and glyph flag, rolls once, and
prints the results as a single line on stdout. Invalid input is reported on
stderr with a non-zero exit status:

  2  usage error (malformed or out-of-range option value)
  1  configuration the roller cannot handle (e.g. glyphs with d8)
"""

from __future__ import annotations

import logging
from functools import partial

import click

from diceroll import __version__
from diceroll.config import settings
from diceroll.num import DiceError, PositiveCount
from diceroll.rollset import RollSet

logger = logging.getLogger(__name__)

_LOG_FORMAT = "[%(levelname)s] [%(name)s] %(message)s"


def _parse_count(
    ctx: click.Context, param: click.Parameter, value: object, *, minimum: int
) -> int:
    """Convert a count option to an int; only plain digits at or above minimum are accepted."""
    if minimum == 0:
        message = "The value should be an integer greater than or equal to 0."
    else:
        message = f"The value should be an integer greater than {minimum - 1}."
    text = str(value)
    if not (text.isascii() and text.isdigit()):
        raise click.BadParameter(message, ctx=ctx, param=param)
    count = int(text)
    if count < minimum:
        raise click.BadParameter(message, ctx=ctx, param=param)
    return count


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("diceroll").setLevel(level)


# Defaults are callables so they are read from settings at invocation time.
@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-n",
    "--number",
    metavar="N",
    default=lambda: settings.default_number_of_dice,
    callback=partial(_parse_count, minimum=0),
    help="The number of dice to roll.",
)
@click.option(
    "-s",
    "--sides",
    metavar="N",
    default=lambda: settings.default_number_of_sides,
    callback=partial(_parse_count, minimum=1),
    help="How many sides the dice or die should have.",
)
@click.option(
    "-g",
    "--glyphs",
    is_flag=True,
    flag_value=True,
    default=lambda: settings.default_glyphs,
    help="Output roll results with die glyphs when using dice with six or less sides.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="diceroll")
def main(number: int, sides: int, glyphs: bool, verbose: bool) -> None:
    """Roll any number of dice with any number of sides."""
    _configure_logging(verbose)

    cap = settings.max_number_of_dice
    if cap and number > cap:
        raise click.BadParameter(
            f"Too many dice: {number} (max {cap})", param_hint="'-n' / '--number'"
        )

    try:
        rolls = RollSet(number, PositiveCount(sides), glyphs)
    except DiceError as exc:
        logger.debug("Rejected n=%d s=%d glyphs=%s: %s", number, sides, glyphs, exc)
        raise click.ClickException(str(exc)) from exc

    rolls.roll()
    click.echo(rolls.render())
