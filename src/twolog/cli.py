"""2log CLI - Daily Note Logger."""

import logging
import sys

import click

from .config import CONFIG_FILE, Config, load_config
from .core import parse_time
from .errors import TwoLogError
from .workflows import add_entry, show_entries, undo_last

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class InvalidArguments(click.UsageError):
    """Malformed invocation. Reported with usage and a help hint, exit status 1."""

    exit_code = 1


class LogCommand(click.Command):
    """Command that reports every parse error as InvalidArguments."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except InvalidArguments:
            raise
        except click.NoSuchOption as e:
            raise InvalidArguments(f"Unknown option: {e.option_name}", ctx=ctx) from e
        except click.UsageError as e:
            raise InvalidArguments(e.message, ctx=ctx) from e

    def format_epilog(self, ctx, formatter):
        config = load_config()
        with formatter.section("Configuration"):
            formatter.write_dl(
                [
                    ("Journal directory", config.journal_dir),
                    ("Daily note format", "YYYY-MM-DD.md"),
                    ("Entry format", "- HH:mm <message>"),
                    ("Target header", config.today_header),
                    ("Config file", str(CONFIG_FILE)),
                ]
            )
        formatter.write_paragraph()
        formatter.write_text("The tool will create a new daily note if one doesn't exist for today.")


def _report(error: TwoLogError) -> None:
    click.echo(f"❌ {error}", err=True)
    if error.hint:
        click.echo(f"💡 Tip: {error.hint}", err=True)


def _list(config: Config) -> None:
    entries = show_entries(config)
    if not entries:
        click.echo("No entries for today.")
        return
    for entry in entries:
        click.echo(entry.to_line())


def _add(config: Config, message: str, time_value: str | None) -> None:
    entry_time = parse_time(time_value) if time_value is not None else None
    result = add_entry(config, message, entry_time=entry_time)
    if result.created:
        click.echo(f"📄 Created new daily note: {result.path.name}")
    click.echo(f"✅ Added log entry: {result.entry.raw}")


def _undo(config: Config) -> None:
    result = undo_last(config)
    click.echo(f"↩️  Removed log entry: {result.entry.raw}")


@click.command(cls=LogCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("words", nargs=-1)
@click.option("-t", "--time", "time_value", metavar="HH:mm",
              help="Use this time instead of now for the new entry")
@click.option("-l", "--list", "list_mode", is_flag=True, help="List today's entries")
@click.option("-u", "--undo", is_flag=True, help="Remove the chronologically last entry")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="2log", prog_name="2log")
@click.pass_context
def main(ctx, words: tuple[str, ...], time_value: str | None, list_mode: bool, undo: bool, debug: bool):
    """2log - Daily Note Logger.

    Add a timestamped entry to today's note. With no arguments, list
    today's entries.

    \b
    Examples:
      2log Had a productive morning call
      2log -t 9:15 "Standup - discussed project timeline"
      2log --list
      2log --undo
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    if list_mode and undo:
        raise InvalidArguments("--list and --undo cannot be used together", ctx=ctx)
    if (list_mode or undo) and (words or time_value is not None):
        raise InvalidArguments("--list and --undo do not take a message or --time", ctx=ctx)
    if time_value is not None and not words:
        raise InvalidArguments("--time requires a message", ctx=ctx)

    message = " ".join(words)
    if words and not message.strip():
        raise InvalidArguments("Log message cannot be empty", ctx=ctx)

    config = load_config()
    try:
        if undo:
            _undo(config)
        elif list_mode or not words:
            _list(config)
        else:
            _add(config, message, time_value)
    except TwoLogError as e:
        _report(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
