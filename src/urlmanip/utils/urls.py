# UrlManip — URL utilities: scheme and www prefix handling
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import re
from typing import Literal, Union


HTTP_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)
PROTO_RE = re.compile(r"^(https?)://", re.IGNORECASE)
WWW_AFTER_PROTO_RE = re.compile(r"^(https?://)www\.(?=.)", re.IGNORECASE)
WWW_RE = re.compile(r"^www\.(?=.)", re.IGNORECASE)


def _require_str(uri: object) -> None:
	if not isinstance(uri, str):
		raise TypeError(f"expected str, got {type(uri).__name__}")


def http_less(uri: str) -> str:
	"""Drop a leading http:// or https://."""
	_require_str(uri)
	return HTTP_PREFIX_RE.sub("", uri, count=1)


def add_http(uri: str, secure: bool = False) -> str:
	"""Put http:// (or https:// when ``secure``) in front, replacing any existing http(s) scheme."""
	_require_str(uri)
	return ("https://" if secure else "http://") + http_less(uri)


def get_proto(uri: str) -> Union[Literal["http", "https"], Literal[False]]:
	"""Return "http" or "https" for a URL starting with that scheme, else False."""
	_require_str(uri)
	m = PROTO_RE.match(uri)
	if not m:
		return False
	return m.group(1).lower()


def www_less(uri: str) -> str:
	if get_proto(uri):
		return WWW_AFTER_PROTO_RE.sub(r"\1", uri, count=1)
	return WWW_RE.sub("", uri, count=1)


def add_www(uri: str) -> str:
	"""Ensure a single www. label after the (optional) http(s) scheme."""
	proto = get_proto(uri)
	rest = http_less(www_less(uri))
	return (f"{proto}://" if proto else "") + "www." + rest


__all__ = [
	"http_less",
	"add_http",
	"get_proto",
	"www_less",
	"add_www",
]
