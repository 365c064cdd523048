# SitemapCSV — Cleanup of browser-rendered XML before parsing
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re


# Notices browsers print above unstyled XML; copy-pasting the page picks them up.
BROWSER_NOTICES = (
	re.compile(r"This XML file does not appear to have any style information associated with it\.", re.IGNORECASE),
	re.compile(r"The document tree is shown below\.", re.IGNORECASE),
	re.compile(r"This page contains the following errors:", re.IGNORECASE),
	re.compile(r"Below is a rendering of the page up to the first error\.", re.IGNORECASE),
)

XML_START = re.compile(r"<\?xml|<urlset|<sitemapindex|<rss|<feed", re.IGNORECASE)


def _strip_notices(text: str) -> str:
	for pattern in BROWSER_NOTICES:
		text = pattern.sub("", text)
	return text


def _drop_preamble(text: str) -> str:
	m = XML_START.search(text)
	if m:
		text = text[m.start():]
	lines = text.split("\n")
	for i, line in enumerate(lines):
		stripped = line.strip()
		if not stripped or stripped.startswith("<"):
			if i > 0:
				text = "\n".join(lines[i:])
			break
	return text


def _clean_once(text: str) -> str:
	text = _strip_notices(text).strip()
	return _drop_preamble(text).strip()


def sanitize(raw: str) -> str:
	"""Strip browser notices and leading non-XML text from a pasted or saved sitemap.

	Text with no recognizable root tag passes through (trimmed) and is left for the
	parser to reject.
	"""
	text = _clean_once(raw)
	# every pass only removes characters, so this settles on a fixed point
	while True:
		again = _clean_once(text)
		if again == text:
			return text
		text = again
