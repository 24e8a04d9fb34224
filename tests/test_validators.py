"""
Tests for long URL and short identifier predicates.
"""
import pytest

from shorturl_app.services.validators import is_valid_http_url, is_valid_short_url


class TestIsValidShortUrl:

    @pytest.mark.parametrize("short_url", ["cloud", "123", "abc123", "a", "Zz09Zz0"])
    def test_accepts_alphanumerics_up_to_seven(self, short_url):
        assert is_valid_short_url(short_url) is True

    @pytest.mark.parametrize("short_url", [
        "", "mock$example", "1 23", "!@#", "mock|example", "ab#c", "a@b", "abc\n", "é",
    ])
    def test_rejects_other_characters(self, short_url):
        assert is_valid_short_url(short_url) is False

    @pytest.mark.parametrize("short_url", ["12345678", "abcdefghijklmn"])
    def test_rejects_over_max_length(self, short_url):
        assert is_valid_short_url(short_url) is False

    def test_rejects_non_strings(self):
        assert is_valid_short_url(None) is False
        assert is_valid_short_url(1234) is False


class TestIsValidHttpUrl:

    @pytest.mark.parametrize("url", [
        "http://cloudflare.com",
        "https://cloudflare.com",
        "http://example.com",
        "https://example.com/path?q=1#frag",
        "http://localhost:8000/x",
    ])
    def test_accepts_http_and_https(self, url):
        assert is_valid_http_url(url) is True

    @pytest.mark.parametrize("url", [
        "ftp://cloudflare.com",
        "httpss://cloudflare.com",
        "://cloudflare.com",
        "//cloudflare.com",
        "http:/cloudflare.com",
        "https:/cloudflare.com",
        "http://",
        "cloudflare.com",
        "",
        "http://exa mple.com",
        "http://[::1",
    ])
    def test_rejects_invalid(self, url):
        assert is_valid_http_url(url) is False

    def test_rejects_non_strings(self):
        assert is_valid_http_url(None) is False
