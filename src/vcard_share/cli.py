from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DEFAULT_CONF_PATH, ensure_config, load_settings
from .encoder import encode_vcard, share_filename
from .escape import safe_filename
from .model import SAMPLE_CONTACT, ContactFieldError, ContactRecord

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="vcard-share: preview the vCard and filename a contact would be shared as.",
)
console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]{escape(message)}[/bold red]")
    raise typer.Exit(code=2)


def _print_trace_line(line: str) -> None:
    console.print(Text.assemble(("  emit ", "dim"), line))


def _load_json_contact(path: Path) -> ContactRecord:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        _fail(f"No such file: {path}")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        _fail(f"Could not read contact from {path}: {exc}")
    if not isinstance(data, dict):
        _fail(f"Expected a JSON object in {path}")
    try:
        return ContactRecord.from_mapping(data)
    except ContactFieldError as exc:
        _fail(str(exc))


# ── `render` command ───────────────────────────────────────────────────────────

@app.command()
def render(
    first: str | None = typer.Option(None, "--first", help="First name"),
    last: str | None = typer.Option(None, "--last", help="Last name"),
    phone: str | None = typer.Option(None, "--phone", help="Phone number (free-form)"),
    email: str | None = typer.Option(None, "--email", help="Email address"),
    org: str | None = typer.Option(None, "--org", help="Organization"),
    address: str | None = typer.Option(
        None, "--address",
        help="street;apt;city;state;postal;country",
    ),
    website: str | None = typer.Option(None, "--website", help="Website URL"),
    sample: bool = typer.Option(False, "--sample", help="Start from the demo contact (John Doe)"),
    json_file: Path | None = typer.Option(None, "--json", help="Load the contact from a JSON object"),
    config: Path = typer.Option(DEFAULT_CONF_PATH, "--config", "-c", help="TOML settings file"),
    trace: bool = typer.Option(False, "--trace", help="Print each line as it is encoded"),
) -> None:
    """Print the vCard text and share filename for a contact. Nothing is written to disk."""
    base = SAMPLE_CONTACT if sample else ContactRecord()
    if json_file is not None:
        base = _load_json_contact(json_file)

    overrides = {
        "first_name": first, "last_name": last, "phone": phone, "email": email,
        "organization": org, "address": address, "website": website,
    }
    contact = dataclasses.replace(base, **{k: v for k, v in overrides.items() if v is not None})
    settings = load_settings(config)

    hook = _print_trace_line if trace else None
    text = encode_vcard(contact, trace=hook)

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column(style="cyan", no_wrap=True)
    summary.add_column(style="bold")
    # Names are user input; Text keeps brackets from being read as markup.
    summary.add_row("File name", Text(share_filename(contact, settings)))
    summary.add_row("Title", Text(contact.display_name() or "(none)"))
    summary.add_row("Lines", str(text.count("\r\n")))
    summary.add_row("Size", f"{len(text.encode('utf-8'))} bytes")
    console.print(Panel(summary, title="vCard 3.0", border_style="cyan"))

    # Raw text, CRLFs intact, so it can be piped into a file.
    typer.echo(text, nl=False)


# ── `init-config` command ──────────────────────────────────────────────────────

@app.command("init-config")
def init_config(
    config: Path = typer.Option(DEFAULT_CONF_PATH, "--config", "-c", help="TOML settings file to create"),
) -> None:
    """Create the settings file with default values. An existing file is left as is."""
    existed = config.exists()
    try:
        path = ensure_config(config)
    except OSError as exc:
        _fail(f"Could not create {config}: {exc}")
    if existed:
        console.print(Text.assemble(("Config already exists: ", "dim"), str(path)))
    else:
        console.print(Text.assemble(("✓ Wrote default config → ", "bold green"), str(path)))


# ── `filename` command ─────────────────────────────────────────────────────────

@app.command()
def filename(text: str = typer.Argument(..., help="Text to fold into a filename segment")) -> None:
    """Print the ASCII-safe filename segment for TEXT."""
    typer.echo(safe_filename(text))


if __name__ == "__main__":
    app()
