import pytest
from urlmanip.utils.urls import add_http, add_www, get_proto, http_less, www_less


def test_http_less():
	assert http_less("http://example.com/a") == "example.com/a"
	assert http_less("HTTPS://example.com") == "example.com"
	assert http_less("ftp://example.com") == "ftp://example.com"
	assert http_less("example.com") == "example.com"


def test_add_http():
	assert add_http("example.com") == "http://example.com"
	assert add_http("http://example.com", secure=True) == "https://example.com"
	assert add_http("https://example.com") == "http://example.com"


@pytest.mark.parametrize("u", ["example.com/x", "http://example.com", "HTTPS://www.example.com/?q=1", ""])
def test_http_less_after_add_http(u):
	assert http_less(add_http(u, True)) == http_less(u)


def test_get_proto():
	assert get_proto("https://x.com") == "https"
	assert get_proto("http://x.com") == "http"
	assert get_proto("HTTP://x.com") == "http"
	assert get_proto("ftp://x.com") is False
	assert get_proto("httpbin.org") is False


def test_www_less():
	assert www_less("https://www.example.com/x") == "https://example.com/x"
	assert www_less("www.example.com") == "example.com"
	assert www_less("WWW.example.com") == "example.com"
	assert www_less("http://example.com") == "http://example.com"
	assert www_less("www.") == "www."


def test_add_www():
	assert add_www("http://example.com/a") == "http://www.example.com/a"
	assert add_www("example.com") == "www.example.com"
	assert add_www("https://www.example.com") == "https://www.example.com"
	once = add_www("example.com")
	assert add_www(once) == once


def test_lexical_helpers_reject_non_strings():
	with pytest.raises(TypeError):
		http_less(None)
	with pytest.raises(TypeError):
		get_proto(42)
