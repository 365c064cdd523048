# SitemapCSV — Logging configuration (stderr, optional rotating file)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import logging.handlers
import os
import sys
from typing import Optional


STREAM_FORMAT = "%(levelname)s\t%(name)s\t%(message)s"
FILE_FORMAT = "%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s"
LOG_FILENAME = "sitemapcsv.log"

# marks handlers installed here so a re-run only replaces its own
_OWNED = "_sitemapcsv_handler"


def configure_logging(level: str = "WARNING", log_dir: Optional[str] = None) -> Optional[str]:
	"""Route log records to stderr, and to a rotating file when log_dir is set.

	stdout is left to the CLI's Rich output. An empty or missing log_dir means no
	file is created. Returns the log file path, or None.
	"""
	root = logging.getLogger()
	root.setLevel(getattr(logging, level.upper(), logging.WARNING))

	for h in list(root.handlers):
		if getattr(h, _OWNED, False):
			root.removeHandler(h)
			h.close()

	stream = logging.StreamHandler(sys.stderr)
	stream.setFormatter(logging.Formatter(STREAM_FORMAT))
	setattr(stream, _OWNED, True)
	root.addHandler(stream)

	if not log_dir:
		return None

	os.makedirs(log_dir, exist_ok=True)
	log_path = os.path.join(log_dir, LOG_FILENAME)
	file_handler = logging.handlers.RotatingFileHandler(
		log_path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
	)
	file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
	setattr(file_handler, _OWNED, True)
	root.addHandler(file_handler)
	return log_path
