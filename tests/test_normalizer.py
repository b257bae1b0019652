import pytest
from urlmanip.config import Settings
from urlmanip.core.errors import InvalidUrlError, UrlError
from urlmanip.core.normalizer import UrlNormalizer


@pytest.fixture
def un():
	return UrlNormalizer(settings=Settings(_env_file=None))


def test_is_valid(un):
	assert un.is_valid("http://example.com")
	assert un.is_valid("https://www.example.com/a?b=c")
	assert un.is_valid("example.com")
	assert not un.is_valid("not a url")
	assert not un.is_valid("")
	assert not un.is_valid(None)


@pytest.mark.parametrize(
	"call",
	[
		lambda n: n.encode("not a url"),
		lambda n: n.decode("not a url"),
		lambda n: n.to_punycode("not a url"),
		lambda n: n.from_punycode("not a url"),
		lambda n: n.get_hostname("not a url"),
		lambda n: n.parse_url("not a url"),
		lambda n: n.is_same_host("not a url", "http://example.com"),
		lambda n: n.is_same_host("http://example.com", "not a url"),
	],
)
def test_guarded_operations_raise(un, call):
	with pytest.raises(InvalidUrlError) as exc:
		call(un)
	assert str(exc.value) == "Invalid url"
	assert isinstance(exc.value, UrlError)


def test_lexical_operations_never_raise_url_error(un):
	assert un.http_less("not a url") == "not a url"
	assert un.add_http("not a url") == "http://not a url"
	assert un.get_proto("not a url") is False
	assert un.www_less("not a url") == "not a url"
	assert un.add_www("not a url") == "www.not a url"
	assert un.build_url("not a url") == "not a url"


def test_is_same_host(un):
	assert un.is_same_host("http://www.example.com", "https://example.com")
	assert not un.is_same_host("http://www.example.com", "https://example.com", cut_www=False)
	assert un.is_same_host("http://example.com:8080/a", "https://example.com/b?c=d")
	assert not un.is_same_host("http://a.example.com", "http://b.example.com")


def test_is_same_host_compares_decoded_hosts(un):
	assert un.is_same_host("http://xn--e1afmkfd.xn--p1ai/", "http://www.пример.рф/x")


def test_get_hostname(un):
	assert un.get_hostname("http://example.com/path", False, True) == "example.com"
	assert un.get_hostname("http://example.com", True, True) == "example.com"
	assert un.get_hostname("http://www.example.com") == "example.com"
	assert un.get_hostname("http://www.example.com", cut_www=False) == "www.example.com"
	assert un.get_hostname("http://xn--e1afmkfd.xn--p1ai/") == "xn--e1afmkfd.xn--p1ai"
	assert un.get_hostname("http://xn--e1afmkfd.xn--p1ai/", decode=True) == "пример.рф"


def test_get_hostname_without_host(un, monkeypatch):
	# the real validator rejects host-less URLs, so stub it to reach the None branch
	monkeypatch.setattr("urlmanip.core.normalizer.is_url", lambda value, strict_query=False: True)
	assert un.get_hostname("file:///etc/hosts") is None


def test_decode(un):
	assert un.decode("http://example.com/a%20b") == "http://example.com/a b"
	assert un.decode("http://xn--e1afmkfd.xn--p1ai/%D0%BF%D1%83%D1%82%D1%8C") == "http://пример.рф/путь"
	assert un.decode("http://www.example.com/") == "http://www.example.com/"


@pytest.mark.parametrize(
	"u",
	[
		"http://example.com/",
		"https://www.example.com/a/b?x=1",
		"http://xn--e1afmkfd.xn--p1ai/%D0%BF%D1%83%D1%82%D1%8C",
		"example.com/%D1%84",
	],
)
def test_decode_is_idempotent(un, u):
	once = un.decode(u)
	assert un.decode(once) == once


def test_encode(un):
	assert un.encode("http://example.com/путь/файл") == (
		"http://example.com/%D0%BF%D1%83%D1%82%D1%8C/%D1%84%D0%B0%D0%B9%D0%BB"
	)
	assert un.encode("http://example.com/?q=тест") == "http://example.com/?q=%D1%82%D0%B5%D1%81%D1%82"
	assert un.encode("http://example.com/p#раздел") == "http://example.com/p#%D1%80%D0%B0%D0%B7%D0%B4%D0%B5%D0%BB"


def test_encode_keeps_plain_ascii_url(un):
	assert un.encode("http://example.com/a/b?x=1&y=2") == "http://example.com/a/b?x=1&y=2"


@pytest.mark.parametrize(
	"u",
	[
		"http://example.com/%D0%BF%D1%83%D1%82%D1%8C",
		"http://example.com/a%20b",
	],
)
def test_encode_does_not_double_encode(un, u):
	assert un.encode(u) == u


def test_encode_then_decode(un):
	u = "http://example.com/путь"
	assert un.decode(un.encode(u)) == u


def test_punycode(un):
	assert un.to_punycode("http://пример.рф/") == "http://xn--e1afmkfd.xn--p1ai/"
	assert un.from_punycode("http://xn--e1afmkfd.xn--p1ai/") == "http://пример.рф/"


def test_parse_and_build(un):
	u = "https://user:pw@example.com:8080/a/b?x=1"
	parts = un.parse_url(u)
	assert parts.hostname == "example.com"
	assert un.build_url(parts) == u
	assert un.build_url(un.parse_url("example.com/a")) == "http://example.com/a"


def test_settings_drive_defaults(monkeypatch):
	monkeypatch.setenv("URLMANIP_CUT_WWW", "false")
	monkeypatch.setenv("URLMANIP_SECURE", "true")
	n = UrlNormalizer()
	assert not n.is_same_host("http://www.example.com", "http://example.com")
	assert n.get_hostname("http://www.example.com") == "www.example.com"
	assert n.add_http("example.com") == "https://example.com"


def test_undecodable_ace_host(un):
	u = "http://xn--zz.com/"
	assert un.is_valid(u)
	assert un.decode(u) == u
	assert un.encode(u) == u
	assert un.get_hostname(u, decode=True) == "xn--zz.com"
	assert not un.is_same_host(u, "http://example.com")
	assert un.is_same_host(u, "https://www.xn--zz.com/x")


def test_punycode_on_path_text(un):
	for u in ("http://example.com/ä_b", "http://example.com/Путь"):
		assert un.is_valid(u)
		assert un.from_punycode(un.to_punycode(u)) == u
	assert un.from_punycode("http://example.com/xn--a_b") == "http://example.com/xn--a_b"


def test_encode_of_decoded_converges(un):
	u = "http://example.com/%D0%BF%D1%83%D1%82%D1%8C/%D1%84%D0%B0%D0%B9%D0%BB"
	assert un.encode(un.decode(u)) == u
	assert un.decode(un.encode(un.decode(u))) == un.decode(u)
