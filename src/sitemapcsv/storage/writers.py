# SitemapCSV — CSV export of parsed sitemap records
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import os
from datetime import datetime
from typing import Iterable, Optional

from ..core.sitemap import Record
from ..utils.io import ensure_dirs


logger = logging.getLogger(__name__)

CSV_HEADERS = ("URL", "Last Modified", "Change Frequency", "Priority", "Alternates")


def _quote(value: str, escape_quotes: bool = False) -> str:
	if escape_quotes:
		value = value.replace('"', '""')
	return f'"{value}"'


def to_csv(records: Iterable[Record], escape_quotes: bool = False) -> str:
	"""Render records as CSV text: header row, then one fully quoted row per record.

	Embedded quotes are left as-is unless escape_quotes is set, in which case they
	are doubled. Rows are joined with "\\n" and there is no trailing newline.
	"""
	lines = [",".join(CSV_HEADERS)]
	for rec in records:
		lines.append(",".join(_quote(v, escape_quotes) for v in rec.as_row()))
	return "\n".join(lines)


def export_filename(now: Optional[datetime] = None) -> str:
	now = now or datetime.now()
	return f"sitemap-{int(now.timestamp() * 1000)}.csv"


def write_csv(records: Iterable[Record], path: str, escape_quotes: bool = False) -> str:
	parent = os.path.dirname(path)
	if parent:
		ensure_dirs(parent)
	content = to_csv(records, escape_quotes=escape_quotes)
	with open(path, "w", encoding="utf-8", newline="") as f:
		f.write(content)
	logger.info("Wrote CSV to %s", path)
	return path
