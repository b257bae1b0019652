# UrlManip — Configuration via Pydantic BaseSettings
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
	"""Normalizer defaults.

	Environment variables are prefixed with URLMANIP_. CLI flags can override.
	"""

	model_config = SettingsConfigDict(env_prefix="URLMANIP_", env_file=".env", extra="ignore")

	cut_www: bool = Field(default=True)
	secure: bool = Field(default=False)
	strict_query: bool = Field(default=False)
	log_level: str = Field(default="INFO")
	log_dir: str = Field(default="logs")
