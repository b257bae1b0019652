# UrlManip — URL parser: split a URL string into named components
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from urllib.parse import urlsplit

from ..core.components import UrlComponents
from ..core.errors import InvalidUrlError


SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)


def with_scheme(uri: str, default: str = "http") -> str:
	"""Prefix ``default://`` when the string carries no scheme."""
	if SCHEME_RE.match(uri):
		return uri
	return f"{default}://{uri}"


def split_url(uri: str) -> UrlComponents:
	"""Split ``uri`` into UrlComponents. Scheme-less input is read as http."""
	try:
		p = urlsplit(with_scheme(uri))
		port = p.port
	except ValueError as exc:
		raise InvalidUrlError(uri=uri) from exc

	hostname = p.hostname
	if hostname and ":" in hostname:
		# IPv6 literal keeps its brackets so the host can be written back as-is
		hostname = f"[{hostname}]"

	auth = None
	if "@" in p.netloc:
		auth = p.netloc.rpartition("@")[0]

	return UrlComponents(
		protocol=f"{p.scheme}:" if p.scheme else None,
		auth=auth or None,
		hostname=hostname or None,
		port=str(port) if port is not None else None,
		pathname=p.path or None,
		hash=f"#{p.fragment}" if p.fragment else None,
		query=p.query or None,
	)


__all__ = ["SCHEME_RE", "with_scheme", "split_url"]
