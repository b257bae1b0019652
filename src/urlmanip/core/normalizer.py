# UrlManip — URL normalizer: validity, host equality, encode/decode, punycode, reassembly
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Any, Literal, Optional, Union

from .components import UrlComponents, build_url
from .errors import InvalidUrlError
from ..config import Settings
from ..utils import codec
from ..utils.parser import split_url
from ..utils.urls import add_http, add_www, get_proto, http_less, www_less
from ..utils.validate import is_url


logger = logging.getLogger(__name__)

WWW_PREFIX = "www."

# parts that get percent-encoded segment by segment
ENCODED_PARTS = ("pathname", "query", "hash")


class UrlNormalizer:
	"""Canonical, comparable URL forms built on a parser, a validator and text codecs.

	Every method taking ``uri`` raises InvalidUrlError for strings that are not valid URLs.
	The scheme/www helpers are purely lexical and accept any string.
	No mutable state: one instance can be shared freely.
	"""

	def __init__(self, settings: Optional[Settings] = None) -> None:
		self.settings = settings if settings is not None else Settings()

	def _guard(self, uri: Any) -> None:
		if not self.is_valid(uri):
			raise InvalidUrlError(uri=uri)

	def is_valid(self, uri: Any) -> bool:
		return is_url(uri, strict_query=self.settings.strict_query)

	def is_same_host(self, url1: str, url2: str, cut_www: Optional[bool] = None) -> bool:
		"""Compare the decoded hostnames of two URLs. Scheme, port and path are ignored."""
		self._guard(url1)
		self._guard(url2)
		if cut_www is None:
			cut_www = self.settings.cut_www
		return self._hostname(url1, True, cut_www) == self._hostname(url2, True, cut_www)

	def encode(self, uri: str) -> str:
		"""Percent-encode pathname, query and hash, one "/"-separated segment at a time.

		A URL whose decoded form differs from itself is taken to be encoded already and
		comes back untouched. That check is a heuristic: an input that decodes to itself
		but is not safe to re-encode will still be encoded.
		"""
		self._guard(uri)

		if self.decode(uri) != uri:
			return uri

		parts = split_url(uri)
		changes = {}
		for name in ENCODED_PARTS:
			value = parts[name]
			if not value:
				continue
			if name == "hash":
				changes[name] = "#" + _encode_segments(value[1:])
			else:
				changes[name] = _encode_segments(value)

		encoded = build_url(parts.replace(**changes))
		logger.debug("encoded %s -> %s", uri, encoded)
		return encoded

	def decode(self, uri: str) -> str:
		"""Human-readable form: percent escapes decoded, hostname converted from punycode."""
		self._guard(uri)

		decoded = codec.percent_decode(uri)
		parts = split_url(decoded)
		parts.hostname = self._hostname(decoded, True, False)
		return build_url(parts)

	def to_punycode(self, uri: str) -> str:
		"""Punycode every non-ASCII label of the whole string, not only the host."""
		self._guard(uri)
		return codec.to_ascii(uri)

	def from_punycode(self, uri: str) -> str:
		self._guard(uri)
		return codec.to_unicode(uri)

	def get_hostname(self, uri: str, decode: bool = False, cut_www: Optional[bool] = None) -> Optional[str]:
		"""Hostname of ``uri`` or None when it has none.

		``cut_www`` drops one leading "www." label; ``decode`` turns punycode labels into Unicode.
		"""
		self._guard(uri)
		if cut_www is None:
			cut_www = self.settings.cut_www
		return self._hostname(uri, decode, cut_www)

	def _hostname(self, uri: str, decode: bool, cut_www: bool) -> Optional[str]:
		host = split_url(uri).hostname
		if not host:
			return None
		if cut_www and host.startswith(WWW_PREFIX):
			host = host[len(WWW_PREFIX):]
		return codec.to_unicode(host) if decode else host

	def parse_url(self, uri: str) -> UrlComponents:
		self._guard(uri)
		return split_url(uri)

	def build_url(self, parts: Union[UrlComponents, Any]) -> Any:
		return build_url(parts)

	def http_less(self, uri: str) -> str:
		return http_less(uri)

	def add_http(self, uri: str, secure: Optional[bool] = None) -> str:
		if secure is None:
			secure = self.settings.secure
		return add_http(uri, secure)

	def get_proto(self, uri: str) -> Union[Literal["http", "https"], Literal[False]]:
		return get_proto(uri)

	def www_less(self, uri: str) -> str:
		return www_less(uri)

	def add_www(self, uri: str) -> str:
		return add_www(uri)


def _encode_segments(value: str) -> str:
	return "/".join(codec.percent_encode(seg) for seg in value.split("/"))


__all__ = ["UrlNormalizer"]
