# SitemapCSV — IO helpers (directories, input sources)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import os
import sys
from typing import Optional


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		os.makedirs(p, exist_ok=True)


def read_source(path: Optional[str] = None, text: Optional[str] = None) -> Optional[str]:
	"""Return raw sitemap text from a file ("-" reads stdin) or from pasted text.

	Pasted text is trimmed. Returns None when neither source is given so the
	caller can report empty input; raises ValueError when both are given.
	"""
	if path and text is not None:
		raise ValueError("Use either a file or pasted text, not both")
	if path == "-":
		return sys.stdin.read()
	if path:
		# utf-8-sig drops a leading BOM
		with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
			return f.read()
	if text is not None:
		return text.strip()
	return None
