# SitemapCSV — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Application settings with sane defaults.

	Environment variables are prefixed with SITEMAPCSV_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="SITEMAPCSV_", env_file=".env", extra="ignore")

	output_dir: str = Field(default=".")
	preview_rows: int = Field(default=100, ge=0)
	show_preview: bool = Field(default=True)
	escape_quotes: bool = Field(default=False)
	log_level: str = Field(default="WARNING")
	# empty disables the log file
	log_dir: str = Field(default="")
