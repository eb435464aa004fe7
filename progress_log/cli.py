# progress_log/cli.py

import click
from flask import current_app
from flask.cli import AppGroup
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from progress_log.errors import StorageError
from progress_log.models.log_entry import local_timestamp

console = Console()

entries_cli = AppGroup("entries", help="Inspect and edit the progress log from a terminal.")


def _repository():
    return current_app.extensions["entry_repository"]


def _run(operation, *args):
    try:
        return operation(*args)
    except StorageError as exc:
        raise click.ClickException(str(exc)) from exc


def display_table(entries):
    table = Table(title="Progress Log")
    for c in ["ID", "Created", "Text"]:
        table.add_column(c)
    for entry in entries:
        table.add_row(str(entry.id), escape(entry.created_at), escape(entry.text))
    console.print(table)


@entries_cli.command("init-db")
def init_db():
    """Create the progress_logs table if it is missing."""
    _run(_repository().ensure_schema)
    console.print("[bold cyan]Progress log table ready.[/bold cyan]")


@entries_cli.command("list")
def list_entries():
    entries = _run(_repository().list)
    if not entries:
        console.print("[yellow]No entries yet.[/yellow]")
        return
    display_table(entries)


@entries_cli.command("add")
@click.argument("text")
@click.option("--created-at", default=None, help="Timestamp to store; defaults to local now.")
def add_entry(text, created_at):
    _run(_repository().add, text, created_at or local_timestamp())
    console.print("[green]Entry added.[/green]")


@entries_cli.command("delete")
@click.argument("entry_id", type=int)
def delete_entry(entry_id):
    _run(_repository().delete, entry_id)
    console.print(f"[red]Entry {entry_id} deleted (if it existed).[/red]")
