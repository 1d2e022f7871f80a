"""Exercise commands for the DRILLS CLI.

Results go to **stdout**; success and error notices go to **stderr** through
the message helpers. Invalid input exits with status 1.
"""

from __future__ import annotations

import logging

import click

from drills import config
from drills.bootstrap import bootstrap
from drills.domain.basics import fizz_buzz
from drills.domain.coupons import calculate_discount, get_coupons
from drills.domain.results import Invalid
from drills.domain.stack import Stack
from drills.domain.validators import can_drive, validate_user_input

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _fail(ctx: click.Context, result: Invalid) -> None:
    logger.debug("Rejected input: %s", result.reasons)
    error(str(result))
    ctx.exit(1)


@click.command()
def coupons() -> None:
    """List the available coupon codes."""
    for coupon in get_coupons():
        click.echo(f"{coupon.code}\t{coupon.discount:.0%}")


@click.command()
@click.argument("price", type=float)
@click.argument("code")
@click.pass_context
def discount(ctx: click.Context, price: float, code: str) -> None:
    """Apply coupon CODE to PRICE and print the result."""
    result = calculate_discount(price, code)
    if isinstance(result, Invalid):
        _fail(ctx, result)
        return
    click.echo(f"{result.value:.2f}")


@click.command(name="validate-user")
@click.argument("username")
@click.argument("age", type=int)
@click.pass_context
def validate_user(ctx: click.Context, username: str, age: int) -> None:
    """Check a USERNAME and AGE for sign-up."""
    result = validate_user_input(username, age)
    if isinstance(result, Invalid):
        _fail(ctx, result)
        return
    success(result.value)


@click.command(name="can-drive")
@click.argument("age", type=int)
@click.argument("country")
@click.pass_context
def can_drive_cmd(ctx: click.Context, age: int, country: str) -> None:
    """Tell whether someone of AGE may drive in COUNTRY (e.g. US, UK)."""
    result = can_drive(age, country.upper())
    if isinstance(result, Invalid):
        _fail(ctx, result)
        return
    click.echo("yes" if result.value else "no")


@click.command()
def status() -> None:
    """Show whether the shop is open and today's discount."""
    try:
        app = bootstrap()
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e

    if app.is_online():
        click.echo("online")
    else:
        click.echo("offline")
        warn("The shop is currently closed.")
    click.echo(f"discount: {app.get_discount():.0%}")


@click.command()
@click.argument("words", nargs=-1, required=True)
def reverse(words: tuple[str, ...]) -> None:
    """Print WORDS in reverse order."""
    stack: Stack[str] = Stack()
    for word in words:
        stack.push(word)
    reversed_words = []
    while not stack.is_empty():
        reversed_words.append(stack.pop())
    click.echo(" ".join(reversed_words))


@click.command()
@click.argument("n", type=click.IntRange(min=1))
def fizzbuzz(n: int) -> None:
    """Print fizz-buzz for 1..N."""
    for i in range(1, n + 1):
        click.echo(fizz_buzz(i))


COMMANDS = (coupons, discount, validate_user, can_drive_cmd, status, reverse, fizzbuzz)
