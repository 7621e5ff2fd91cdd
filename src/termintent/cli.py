"""CLI entry point for termintent. Uses Click for argument parsing."""

from __future__ import annotations

import json
import logging
import sys

import click

from termintent.command import CommandState
from termintent.feed import CommandFeed
from termintent.keybindings import get_command_keybindings, set_command_keybindings
from termintent.sequence import parse_command_sequence, read_command_file
from termintent.settings import Settings

logger = logging.getLogger(__name__)


def _describe(state: CommandState) -> str:
    return json.dumps(
        {"raw": state.raw, "intent": state.intent.model_dump(mode="json")},
        ensure_ascii=False,
    )


@click.group()
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Logging verbosity (default: warning)",
)
@click.option("--cwd", default=None, help="Directory whose .termintent settings apply")
@click.pass_context
def main(ctx, log_level, cwd):
    """Interpret command text and terminal input as user intents."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    settings = Settings.load(cwd=cwd)
    if settings.load_error is not None:
        click.echo(f"Warning: could not load settings: {settings.load_error}", err=True)
    set_command_keybindings(settings.create_keybindings_manager())
    ctx.obj = settings


@main.command("parse")
@click.argument("commands", nargs=-1)
@click.option("--separator", default=None, help="Separator between commands (default: ;)")
@click.option(
    "--file", "path", default=None, type=click.Path(exists=True, dir_okay=False),
    help="Read one command per line from a file",
)
@click.pass_obj
def parse(settings, commands, separator, path):
    """Print the intent of each batch command as JSON."""
    separator = separator or settings.get_command_separator()
    states: list[CommandState] = []
    if path:
        states.extend(read_command_file(path))
    for text in commands:
        states.extend(parse_command_sequence(text, separator))
    if not states:
        raise click.UsageError("no command given")
    for state in states:
        click.echo(_describe(state))


@main.command("replay")
@click.argument("source", type=click.File("rb"), default="-")
def replay(source):
    """Feed raw terminal input (stdin by default) and print each intent."""
    feed = CommandFeed()
    data = source.read().decode("utf-8", errors="replace")
    intents = feed.feed(data) + feed.flush()
    for intent in intents:
        click.echo(intent.model_dump_json())
    logger.info("Replayed %d event(s)", len(intents))
    click.echo(_describe(feed.state))


@main.command("keys")
def keys():
    """List the effective keybindings."""
    for action, bound in get_command_keybindings().items():
        click.echo(f"{action:<20} {', '.join(bound)}")


if __name__ == "__main__":
    sys.exit(main())
