# SitemapCSV — Error kinds surfaced to callers
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
	EMPTY_INPUT = "empty_input"
	INVALID_XML = "invalid_xml"
	NO_URLS_FOUND = "no_urls_found"


class SitemapError(Exception):
	"""Base error for the parse pipeline. str(err) is the message shown to users."""

	kind: ErrorKind
	default_message = "Failed to parse sitemap"

	def __init__(self, message: Optional[str] = None) -> None:
		self.message = message or self.default_message
		super().__init__(self.message)


class EmptyInputError(SitemapError):
	kind = ErrorKind.EMPTY_INPUT
	default_message = "No content provided"


class InvalidXmlError(SitemapError):
	kind = ErrorKind.INVALID_XML
	default_message = "Invalid XML format"


class NoUrlsFoundError(SitemapError):
	kind = ErrorKind.NO_URLS_FOUND
	default_message = "No URLs found in the sitemap"
