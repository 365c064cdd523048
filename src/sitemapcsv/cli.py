# SitemapCSV — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import Settings
from .core.errors import SitemapError
from .core.sitemap import Record, parse_sitemap
from .logging_config import configure_logging
from .storage.writers import CSV_HEADERS, export_filename, write_csv
from .utils.io import read_source

app = typer.Typer(add_completion=False, no_args_is_help=True)
logger = logging.getLogger(__name__)


def build_preview(records: List[Record], limit: int) -> Table:
	shown = records[:limit]
	table = Table(caption=f"Showing {len(shown)} of {len(records)} entries")
	for h in CSV_HEADERS:
		table.add_column(h, overflow="fold")
	for rec in shown:
		# plain Text so brackets in URLs are not read as markup
		table.add_row(*(Text(v) for v in rec.as_row()))
	return table


@app.command()
def convert(
	source: Optional[str] = typer.Argument(None, help="Sitemap XML file ('-' reads stdin)"),
	text: Optional[str] = typer.Option(None, help="Sitemap XML pasted as text"),
	output: Optional[str] = typer.Option(None, "--output", "-o", help="CSV file to write"),
	output_dir: Optional[str] = typer.Option(None, help="Directory for the timestamped CSV (overrides env)"),
	preview: bool = typer.Option(None, help="Show a table of the first entries"),
	preview_rows: Optional[int] = typer.Option(None, help="Rows shown in the preview table"),
	escape_quotes: bool = typer.Option(None, help="Double embedded quotes in CSV fields"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
):
	"""Parse a sitemap or sitemap index and export it as CSV."""
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=cfg.log_dir)
	try:
		raw = read_source(source, text)
	except ValueError as e:
		raise typer.BadParameter(str(e))
	except OSError as e:
		print(f"[red]Error:[/red] cannot read {escape(source or '')}: {escape(e.strerror or str(e))}")
		raise typer.Exit(code=1)

	try:
		records = parse_sitemap(raw)
	except SitemapError as e:
		logger.warning("Parse failed (%s): %s", e.kind.value, e)
		print(f"[red]Error:[/red] {e}")
		raise typer.Exit(code=1)

	path = output or os.path.join(output_dir or cfg.output_dir, export_filename())
	try:
		write_csv(records, path, escape_quotes=escape_quotes if escape_quotes is not None else cfg.escape_quotes)
	except OSError as e:
		logger.warning("Write failed for %s: %s", path, e)
		print(f"[red]Error:[/red] cannot write {escape(path)}: {escape(e.strerror or str(e))}")
		raise typer.Exit(code=1)

	show = preview if preview is not None else cfg.show_preview
	if show:
		limit = preview_rows if preview_rows is not None else cfg.preview_rows
		print(build_preview(records, limit))
	print(f"[green]Found {len(records)} entries[/green] -> {escape(path)}")


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()
