# UrlManip — Error types
# Author: Sachin Chhetri
# Year: 2025
# License: MIT


class UrlError(Exception):
	"""Base error for URL manipulation failures."""


class InvalidUrlError(UrlError, ValueError):
	"""Raised when an operation receives a string that is not a valid URL."""

	def __init__(self, message: str = "Invalid url", uri: object = None) -> None:
		super().__init__(message)
		self.uri = uri
