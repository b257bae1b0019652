# UrlManip — URL syntax validation (validators)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import validators

from .parser import with_scheme


def is_url(value: object, strict_query: bool = False) -> bool:
	"""True when ``value`` is a syntactically valid URL.

	Scheme-less strings such as ``example.com/a`` are checked as http URLs.
	"""
	if not isinstance(value, str) or not value:
		return False
	return bool(validators.url(with_scheme(value), strict_query=strict_query))


__all__ = ["is_url"]
