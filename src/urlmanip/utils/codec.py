# UrlManip — Text codecs: percent-encoding and IDNA (punycode) conversion
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from urllib.parse import quote, unquote

import idna


logger = logging.getLogger(__name__)

# RFC 3986 sub-delims plus ":" and "@" stay literal inside a segment
SEGMENT_SAFE = "!$&'()*+,;=:@"

ACE_PREFIX = "xn--"

# Letters, digits, hyphens and any non-ASCII character. "_" and URL punctuation are boundaries.
LABEL_RE = re.compile(r"(?:[^\W_]|-|[^\x00-\x7f])+")


def percent_encode(segment: str) -> str:
	"""Percent-encode one path/query/fragment segment as UTF-8."""
	return quote(segment, safe=SEGMENT_SAFE, encoding="utf-8", errors="strict")


def percent_decode(text: str) -> str:
	"""Decode every %XX escape. Malformed escapes are left as they are."""
	return unquote(text, encoding="utf-8", errors="replace")


def _label_to_ascii(m: "re.Match[str]") -> str:
	label = m.group(0)
	if label.isascii():
		return label
	try:
		return idna.encode(label).decode("ascii")
	except idna.IDNAError:
		# uppercase, symbols and emoji: plain RFC 3492 keeps the label as written
		return ACE_PREFIX + label.encode("punycode").decode("ascii")


def _label_to_unicode(m: "re.Match[str]") -> str:
	label = m.group(0)
	if label[:len(ACE_PREFIX)].lower() != ACE_PREFIX or len(label) == len(ACE_PREFIX):
		return label
	# idna lowercases before decoding, so only all-lowercase labels go through it
	if label == label.lower():
		try:
			return idna.decode(label)
		except UnicodeError:
			pass
	try:
		decoded = label[len(ACE_PREFIX):].encode("ascii").decode("punycode")
	except UnicodeError:
		return label
	return decoded if decoded.isprintable() else label


def to_ascii(text: str) -> str:
	"""Rewrite every non-ASCII label in ``text`` as an ``xn--`` label, keeping its case.

	Labels that pass IDNA 2008 come from idna; anything else is plain punycode.
	"""
	out = LABEL_RE.sub(_label_to_ascii, text)
	if out != text:
		logger.debug("punycode %s -> %s", text, out)
	return out


def to_unicode(text: str) -> str:
	"""Rewrite every ``xn--`` label in ``text`` back to Unicode.

	A label that does not decode to printable text is left as it is.
	"""
	out = LABEL_RE.sub(_label_to_unicode, text)
	if out != text:
		logger.debug("unicode %s -> %s", text, out)
	return out


__all__ = [
	"SEGMENT_SAFE",
	"percent_encode",
	"percent_decode",
	"to_ascii",
	"to_unicode",
]
