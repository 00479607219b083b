"""ajour CLI - command line journal."""

import json
import logging
import sys

import click

from .adapters.json_store import StoreError, StoreWriteError
from .config import load_config
from .core.dates import DateParseError
from .core.summary import format_entry_line, format_summary_line
from .workflows import add_entry, get_store, list_entries, summarize

EXIT_STORE_ERROR = 1
EXIT_BAD_DATE = 2
EXIT_WRITE_FAILED = 3


class DefaultAddGroup(click.Group):
    """Group that treats unknown leading words as text for `add`."""

    def resolve_command(self, ctx, args):
        if args and self.get_command(ctx, args[0]) is None:
            return "add", self.get_command(ctx, "add"), args
        return super().resolve_command(ctx, args)


def _fail(e: Exception, code: int) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(code)


@click.group(cls=DefaultAddGroup)
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Config file to use instead of the default")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="ajour")
@click.pass_context
def main(ctx, config_path: str | None, debug: bool):
    """ajour - append short notes to your journal.

    Running `ajour some text` is the same as `ajour add some text`.
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config(config_path)


@main.command()
@click.argument("text", nargs=-1)
@click.pass_obj
def add(config, text: tuple[str, ...]):
    """Add a journal entry."""
    store = get_store(config)
    try:
        if not text:
            # Nothing to record, the store is still created if missing
            store.load()
            return
        add_entry(store, " ".join(text))
    except StoreWriteError as e:
        _fail(e, EXIT_WRITE_FAILED)
    except StoreError as e:
        _fail(e, EXIT_STORE_ERROR)


@main.command("list")
@click.option("--from", "-f", "start", default=None, help="Start date (YYYY-MM-DD [HH:MM])")
@click.option("--to", "-t", "end", default=None, help="End date (YYYY-MM-DD [HH:MM])")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_cmd(config, start: str | None, end: str | None, as_json: bool):
    """List journal entries."""
    store = get_store(config)
    try:
        entries = list_entries(store, start, end)
    except DateParseError as e:
        _fail(e, EXIT_BAD_DATE)
    except StoreError as e:
        _fail(e, EXIT_STORE_ERROR)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "timestamp": e.timestamp.astimezone().isoformat(),
                        "message": e.message,
                    }
                    for e in entries
                ],
                indent=2,
            )
        )
        return

    for entry in entries:
        click.echo(format_entry_line(entry))


@main.command()
@click.option("--from", "-f", "start", default=None, help="Start date (YYYY-MM-DD [HH:MM])")
@click.option("--to", "-t", "end", default=None, help="End date (YYYY-MM-DD [HH:MM]), needs --from")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def summary(config, start: str | None, end: str | None, as_json: bool):
    """Summarize journal entries per day."""
    if end is not None and start is None:
        raise click.UsageError("--to requires --from")

    store = get_store(config)
    try:
        dailies = summarize(store, start, end, day_boundary=config.day_boundary)
    except DateParseError as e:
        _fail(e, EXIT_BAD_DATE)
    except StoreError as e:
        _fail(e, EXIT_STORE_ERROR)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": d.day.astimezone().strftime("%Y-%m-%d"),
                        "message": d.message,
                        "entries": d.entries,
                    }
                    for d in dailies
                ],
                indent=2,
            )
        )
        return

    for daily in dailies:
        click.echo(format_summary_line(daily))


if __name__ == "__main__":
    main()
