"""CLI application for Noir using Rich and Typer."""

import logging
import mimetypes
import sys
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from noir.core.config import NOIR_API_KEY, NOIR_HOST, NOIR_PORT, setup_logging
from noir.core.store import NoteStore, build_store
from noir.core.types import StoreError

app = typer.Typer(
    name="noir",
    help="Noir CLI - dated notes with review reminders",
    no_args_is_help=True,
)

console = Console()

_state: dict[str, Optional[Path]] = {"data_dir": None}


def _get_store() -> NoteStore:
    """Build the store for the selected data directory."""
    return build_store(_state["data_dir"])


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.callback()
def main(
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-D",
        help="Data directory (default: ~/.noir or $NOIR_DATA_DIR)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
):
    """Noir CLI - dated notes with review reminders."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        console.print("[dim]Debug logging enabled[/dim]")
    _state["data_dir"] = data_dir


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help=f"Bind address (default {NOIR_HOST})"),
    port: Optional[int] = typer.Option(None, help=f"Port (default {NOIR_PORT})"),
):
    """Run the local API server."""
    import uvicorn

    from noir.api.app import create_app

    setup_logging()
    uvicorn.run(
        create_app(_get_store()),
        host=host or NOIR_HOST,
        port=port or NOIR_PORT,
    )


@app.command()
def show(date: str = typer.Argument(..., help="Note date, YYYY-MM-DD")):
    """Render a note."""
    try:
        content = _get_store().load_note(date)
    except StoreError as e:
        _fail(str(e))
        return

    if not content:
        console.print(f"[dim]No note for {date}.[/dim]")
        return
    console.print(Panel(Markdown(content), title=date, border_style="green"))


@app.command()
def write(
    date: str = typer.Argument(..., help="Note date, YYYY-MM-DD"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read content from a file instead of stdin"
    ),
):
    """Create or overwrite a note."""
    content = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    try:
        _get_store().save_note(date, content)
    except StoreError as e:
        _fail(str(e))
    console.print(f"[green]Saved note {date}[/green]")


@app.command()
def delete(date: str = typer.Argument(..., help="Note date, YYYY-MM-DD")):
    """Delete a note and its reminder."""
    try:
        _get_store().delete_note(date)
    except StoreError as e:
        _fail(str(e))
    console.print(f"[yellow]Deleted note {date}[/yellow]")


@app.command()
def month(
    year: int = typer.Argument(..., help="Year"),
    month: int = typer.Argument(..., min=1, max=12, help="Month, 1-12"),
):
    """List notes and reminders for a month."""
    store = _get_store()
    try:
        dates = sorted(store.get_notes_for_month(year, month - 1))
        titles = {d: store.get_note_title(d) for d in dates}
    except StoreError as e:
        _fail(str(e))
        return
    reminders = store.get_reminders_for_month(year, month - 1)

    if not dates:
        console.print(f"[dim]No notes in {year}-{month:02d}.[/dim]")
        return

    table = Table(title=f"Notes for {year}-{month:02d}", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Title")
    table.add_column("Review")

    for d in dates:
        table.add_row(d, titles[d], reminders.get(d, ""))

    console.print(table)


@app.command()
def search(query: str = typer.Argument(..., help="Text to look for")):
    """Find notes containing the given text (case-insensitive)."""
    try:
        notes = _get_store().get_all_notes()
    except StoreError as e:
        _fail(str(e))
        return

    needle = query.lower()
    matches = sorted(
        (n for n in notes if needle in n.content.lower()),
        key=lambda n: n.date_string,
    )
    if not matches:
        console.print(f"[dim]No notes match {query!r}.[/dim]")
        return

    table = Table(title=f"Matches for {query!r}", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Line")
    for note in matches:
        line = next(
            (ln.strip() for ln in note.content.splitlines() if needle in ln.lower()),
            "",
        )
        table.add_row(note.date_string, line)

    console.print(table)


@app.command()
def remind(
    date: str = typer.Argument(..., help="Note date, YYYY-MM-DD"),
    days: int = typer.Argument(..., help="Days from today until review"),
):
    """Schedule a review of a note."""
    ack = _get_store().set_reminder(date, days)
    if not ack.success:
        _fail(ack.message)
    console.print(f"[green]{ack.message}[/green] Review on {ack.review_date}")


@app.command()
def unremind(date: str = typer.Argument(..., help="Note date, YYYY-MM-DD")):
    """Remove the reminder for a note."""
    _get_store().delete_reminder(date)
    console.print(f"[yellow]Reminder removed for {date}[/yellow]")


@app.command()
def due():
    """List notes due for review."""
    reminders = _get_store().get_due_reminders()
    if not reminders:
        console.print("[dim]Nothing to review.[/dim]")
        return

    table = Table(title="Due for review", show_header=True)
    table.add_column("Note", style="cyan")
    table.add_column("Review")
    table.add_column("Title")
    for reminder in reminders:
        table.add_row(reminder.note_date, reminder.review_date, reminder.title)

    console.print(table)


@app.command()
def attach(path: Path = typer.Argument(..., exists=True, dir_okay=False)):
    """Store an image and print the markdown to reference it."""
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type:
        _fail(f"Cannot tell the media type of {path.name}")
        return

    store = _get_store()
    file_name = store.save_pasted_image(path.read_bytes(), mime_type)
    if file_name is None:
        _fail(f"Failed to save image {path.name}")
        return
    console.print(f"![{path.stem}]({file_name})", markup=False)


@app.command()
def settings():
    """Show the current settings."""
    current = _get_store().get_settings()
    table = Table(title="Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("API key", "set" if current.api_key else "not set")
    table.add_row("Font size", str(current.font_size))
    table.add_row("Font family", str(current.font_family))
    prompt_lines = current.quiz_prompt.splitlines()
    table.add_row("Quiz prompt", prompt_lines[0] if prompt_lines else "")

    console.print(table)


@app.command()
def capture(
    text: str = typer.Argument(..., help="Captured text"),
    url: Optional[str] = typer.Option(
        None, help="Server base URL (default http://NOIR_HOST:NOIR_PORT)"
    ),
):
    """Send captured text to the running server."""
    base_url = url or f"http://{NOIR_HOST}:{NOIR_PORT}"
    headers = {"X-API-Key": NOIR_API_KEY} if NOIR_API_KEY else {}
    try:
        response = httpx.post(
            f"{base_url}/api/v1/capture",
            json={"text": text},
            headers=headers,
            timeout=5.0,
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        _fail(f"Could not reach Noir server at {base_url}: {e}")
        return

    if response.json().get("published"):
        console.print("[green]Captured[/green]")
    else:
        console.print("[dim]Nothing to capture.[/dim]")


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()
