# SitemapCSV — Sitemap parsing (urlset, sitemap index, hreflang alternates)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Any, Dict, Iterator, List, Optional
import xml.etree.ElementTree as ET

from .errors import EmptyInputError, InvalidXmlError, NoUrlsFoundError
from .sanitize import sanitize


logger = logging.getLogger(__name__)

INDEX_MARKER = "Sitemap Index"


class Record:
	"""One output row. ``url`` is always non-empty; ``alternates`` is None when the entry has no hreflang links."""

	def __init__(
		self,
		url: str,
		last_modified: str = "",
		change_frequency: str = "",
		priority: str = "",
		alternates: Optional[str] = None,
	) -> None:
		self.url = url
		self.last_modified = last_modified
		self.change_frequency = change_frequency
		self.priority = priority
		self.alternates = alternates

	def as_row(self) -> List[str]:
		return [
			self.url,
			self.last_modified or "",
			self.change_frequency or "",
			self.priority or "",
			self.alternates or "",
		]

	def to_dict(self) -> Dict[str, Any]:
		return {
			"url": self.url,
			"last_modified": self.last_modified,
			"change_frequency": self.change_frequency,
			"priority": self.priority,
			"alternates": self.alternates,
		}

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Record):
			return NotImplemented
		return self.to_dict() == other.to_dict()

	def __repr__(self) -> str:
		return f"Record({self.to_dict()!r})"


def _local_name(tag: Any) -> str:
	if not isinstance(tag, str):
		return ""
	return tag.rsplit("}", 1)[-1]


def _iter_named(root: ET.Element, name: str) -> Iterator[ET.Element]:
	# root included, document order
	for el in root.iter():
		if _local_name(el.tag) == name:
			yield el


def _child_text(el: ET.Element, name: str) -> str:
	found = el.find(f".//{{*}}{name}")
	if found is None:
		return ""
	return "".join(found.itertext()).strip()


def _alternates(url_el: ET.Element) -> Optional[str]:
	pairs = [
		f"{link.get('hreflang') or ''}: {link.get('href') or ''}"
		for link in url_el.findall(".//{*}link")
	]
	if not pairs:
		return None
	return "; ".join(pairs)


def _url_records(root: ET.Element) -> List[Record]:
	records: List[Record] = []
	for url_el in _iter_named(root, "url"):
		loc = _child_text(url_el, "loc")
		if not loc:
			continue
		records.append(
			Record(
				url=loc,
				last_modified=_child_text(url_el, "lastmod"),
				change_frequency=_child_text(url_el, "changefreq"),
				priority=_child_text(url_el, "priority"),
				alternates=_alternates(url_el),
			)
		)
	return records


def _index_records(root: ET.Element) -> List[Record]:
	records: List[Record] = []
	for sm in _iter_named(root, "sitemap"):
		loc = _child_text(sm, "loc")
		if not loc:
			continue
		records.append(
			Record(
				url=loc,
				last_modified=_child_text(sm, "lastmod"),
				change_frequency=INDEX_MARKER,
			)
		)
	return records


def extract(xml_text: str) -> List[Record]:
	"""Parse sanitized sitemap XML into records.

	URL entries are tried first; a document without any falls back to sitemap-index
	entries. Raises InvalidXmlError on malformed markup and NoUrlsFoundError when
	neither shape yields a record.
	"""
	try:
		root = ET.fromstring(xml_text)
	except ET.ParseError as e:
		logger.debug("XML parse failed: %s", e)
		raise InvalidXmlError() from e

	records = _url_records(root)
	if records:
		logger.info("Extracted %d url entries", len(records))
		return records

	records = _index_records(root)
	if records:
		logger.info("No url entries; extracted %d sitemap index entries", len(records))
		return records

	raise NoUrlsFoundError()


def parse_sitemap(raw: Optional[str]) -> List[Record]:
	"""Run the full pipeline on raw user input: empty check, sanitize, extract."""
	if raw is None or not raw.strip():
		raise EmptyInputError()
	return extract(sanitize(raw))
