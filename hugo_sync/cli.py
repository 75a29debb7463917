"""CLI entry point for Hugo Sync."""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax

from hugo_sync.core.config import SyncConfig, load_config
from hugo_sync.core.converter import DocumentConverter
from hugo_sync.core.models import HugoSyncError, NoSelectionError
from hugo_sync.core.sync import HugoSync
from hugo_sync.core.vault import Vault

app = typer.Typer(
    name="hugo-sync",
    help="Sync Obsidian notes and their images into a Hugo site.",
)

VaultOption = Annotated[Path, typer.Option("--vault", "-v", help="Path to the Obsidian vault")]
ConfigOption = Annotated[
    Optional[Path], typer.Option("--config", "-c", help="Settings file (YAML or plugin data.json)")
]


def _load(config: Optional[Path], hugo_path: Optional[str] = None) -> SyncConfig:
    try:
        return load_config(config, hugo_path=hugo_path)
    except HugoSyncError as e:
        rprint(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def sync(
    notes: Annotated[List[str], typer.Argument(help="Notes to sync (paths or names)")],
    vault: VaultOption = Path("."),
    config: ConfigOption = None,
    hugo_path: Annotated[
        Optional[str], typer.Option("--hugo-path", help="Hugo site root (overrides config)")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log image search details")] = False,
) -> None:
    """Sync notes to the Hugo content and static directories."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = _load(config, hugo_path)
    if not cfg.hugo_path:
        typer.echo("Error: --hugo-path is required or set hugo_path in config")
        raise typer.Exit(1)

    obsidian_vault = Vault(vault)
    converter = DocumentConverter(obsidian_vault, cfg)

    try:
        result = HugoSync(converter).sync(obsidian_vault.select(notes))
    except NoSelectionError as e:
        rprint(f"[yellow]{escape(str(e))}[/yellow]")
        raise typer.Exit(1)

    style = "red" if result.failures else "green"
    rprint(f"[{style}]{escape(result.summary())}[/{style}]")
    if result.failures:
        raise typer.Exit(1)


@app.command()
def preview(
    note: Annotated[str, typer.Argument(help="Note to preview (path or name)")],
    vault: VaultOption = Path("."),
    config: ConfigOption = None,
) -> None:
    """Print a note as it would be written to Hugo, without copying images."""
    cfg = _load(config)
    obsidian_vault = Vault(vault)

    selected = obsidian_vault.select([note])
    if not selected:
        rprint(f"[yellow]Note not found: {escape(note)}[/yellow]")
        raise typer.Exit(1)

    document = selected[0]
    converter = DocumentConverter(obsidian_vault, cfg)
    content = converter.to_hugo(obsidian_vault.read(document), document.name)
    rprint(Syntax(content, "markdown", word_wrap=True))


if __name__ == "__main__":
    app()
