# UrlManip — URL components and the reassembly table
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple


COMPONENT_KEYS = ("protocol", "auth", "hostname", "port", "pathname", "hash", "query")


class Notation:
	"""How one component is delimited when written back into a URL."""

	__slots__ = ("name", "before", "after")

	def __init__(self, name: str, before: str = "", after: str = "") -> None:
		self.name = name
		self.before = before
		self.after = after

	def render(self, value: str) -> str:
		return self.before + value + self.after

	def __repr__(self) -> str:
		return f"Notation({self.name!r}, before={self.before!r}, after={self.after!r})"


# Order here is the order components are written out.
URL_NOTATIONS: Tuple[Notation, ...] = (
	Notation("protocol", after="//"),
	Notation("auth", after="@"),
	Notation("hostname"),
	Notation("port", before=":"),
	Notation("pathname"),
	Notation("hash"),
	Notation("query", before="?"),
)


class UrlComponents:
	"""Named parts of a URL as produced by the parser.

	Values follow the parser's conventions: ``protocol`` keeps its trailing colon,
	``hash`` keeps its leading ``#`` and ``query`` has no ``?``. Missing parts are None.
	"""

	__slots__ = COMPONENT_KEYS

	def __init__(
		self,
		protocol: Optional[str] = None,
		auth: Optional[str] = None,
		hostname: Optional[str] = None,
		port: Optional[str] = None,
		pathname: Optional[str] = None,
		hash: Optional[str] = None,
		query: Optional[str] = None,
	) -> None:
		self.protocol = protocol
		self.auth = auth
		self.hostname = hostname
		self.port = port
		self.pathname = pathname
		self.hash = hash
		self.query = query

	def as_dict(self) -> Dict[str, Optional[str]]:
		return {k: getattr(self, k) for k in COMPONENT_KEYS}

	def replace(self, **changes: Optional[str]) -> "UrlComponents":
		values = self.as_dict()
		for k in changes:
			if k not in values:
				raise TypeError(f"unknown URL component: {k}")
		values.update(changes)
		return UrlComponents(**values)

	def __getitem__(self, key: str) -> Optional[str]:
		if key not in COMPONENT_KEYS:
			raise KeyError(key)
		return getattr(self, key)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, UrlComponents):
			return NotImplemented
		return self.as_dict() == other.as_dict()

	def __repr__(self) -> str:
		inner = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items() if v is not None)
		return f"UrlComponents({inner})"


def build_url(parts: Any) -> Any:
	"""Join components back into a URL string.

	Anything that is neither UrlComponents nor a mapping is returned unchanged.
	Components with empty values contribute nothing, punctuation included.
	"""
	if isinstance(parts, UrlComponents):
		parts = parts.as_dict()
	elif not isinstance(parts, Mapping):
		return parts

	out = []
	for notation in URL_NOTATIONS:
		value = parts.get(notation.name)
		if value:
			out.append(notation.render(str(value)))
	return "".join(out)


__all__ = [
	"COMPONENT_KEYS",
	"Notation",
	"URL_NOTATIONS",
	"UrlComponents",
	"build_url",
]
