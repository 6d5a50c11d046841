import logging

from clipicons.urls import get_favicon_url, is_url, parse_url


class TestIsUrl:
    def test_http(self):
        assert is_url("http://foo.bar") is True

    def test_https(self):
        assert is_url("https://example.com/path?q=1") is True

    def test_surrounding_whitespace_trimmed(self):
        assert is_url("  http://foo.bar  ") is True

    def test_other_scheme(self):
        assert is_url("ftp://x") is False

    def test_empty(self):
        assert is_url("") is False

    def test_none(self):
        assert is_url(None) is False

    def test_prefix_only(self):
        assert is_url("https://") is False

    def test_prefix_followed_by_space(self):
        assert is_url("https:// example.com") is False

    def test_case_sensitive(self):
        assert is_url("HTTPS://example.com") is False

    def test_url_not_at_start(self):
        assert is_url("see https://example.com") is False

    def test_trailing_text_allowed(self):
        assert is_url("https://example.com and more") is True


class TestParseUrl:
    def test_simple(self):
        result = parse_url("https://example.com/path")
        assert result.ok
        assert result.scheme == "https"
        assert result.host == "example.com"
        assert result.port is None
        assert result.origin == "https://example.com"
        assert result.error is None

    def test_trims_input(self):
        result = parse_url("\n  http://example.com  \t")
        assert result.ok
        assert result.url == "http://example.com"

    def test_lowercases_scheme_and_host(self):
        result = parse_url("HTTPS://Example.COM/Path")
        assert result.origin == "https://example.com"

    def test_default_port_omitted(self):
        assert parse_url("https://example.com:443/").origin == "https://example.com"
        assert parse_url("http://example.com:80/").origin == "http://example.com"

    def test_custom_port_kept(self):
        result = parse_url("http://localhost:8080/api")
        assert result.port == 8080
        assert result.origin == "http://localhost:8080"

    def test_userinfo_not_in_origin(self):
        assert parse_url("https://user:pw@example.com/").origin == "https://example.com"

    def test_ipv6_host(self):
        result = parse_url("http://[0:0:0:0:0:0:0:1]:3000/")
        assert result.ok
        assert result.origin == "http://[::1]:3000"

    def test_empty_fails(self):
        result = parse_url("   ")
        assert not result.ok
        assert result.origin is None
        assert result.error

    def test_no_scheme_fails(self):
        assert not parse_url("garbage").ok

    def test_missing_host_fails(self):
        assert not parse_url("http:///path").ok

    def test_host_with_space_fails(self):
        assert not parse_url("http://exa mple.com").ok

    def test_bad_port_fails(self):
        assert not parse_url("http://example.com:99999").ok
        assert not parse_url("http://example.com:abc").ok

    def test_opaque_origin(self):
        result = parse_url("mailto:someone@example.com")
        assert result.ok
        assert result.scheme == "mailto"
        assert result.origin is None

    def test_backslash_separator(self):
        result = parse_url("https://example.com\\path")
        assert result.ok
        assert result.origin == "https://example.com"

    def test_percent_encoded_host(self):
        assert parse_url("https://ex%61mple.com/").origin == "https://example.com"

    def test_percent_encoded_forbidden_char_fails(self):
        assert not parse_url("https://exa%20mple.com/").ok

    def test_internationalized_host(self):
        result = parse_url("https://BÜCHER.de/x")
        assert result.host == "xn--bcher-kva.de"
        assert result.origin == "https://xn--bcher-kva.de"

    def test_numeric_ipv4_host(self):
        assert parse_url("http://2130706433/").origin == "http://127.0.0.1"

    def test_hex_ipv4_parts(self):
        assert parse_url("http://0x7f.1/").origin == "http://127.0.0.1"

    def test_dotted_ipv4_host_unchanged(self):
        assert parse_url("http://192.168.0.1:8080/").origin == "http://192.168.0.1:8080"

    def test_ipv4_part_out_of_range_fails(self):
        assert not parse_url("http://1.2.3.999/").ok

    def test_digits_in_domain_label_not_ipv4(self):
        assert parse_url("https://v2.example/").origin == "https://v2.example"

    def test_failure_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="clipicons.urls")
        parse_url("garbage")
        assert "garbage" in caplog.text


class TestGetFaviconUrl:
    def test_https(self):
        assert get_favicon_url("https://a.b/c") == "https://a.b/favicon.ico"

    def test_keeps_port(self):
        assert get_favicon_url("http://localhost:8000/x") == "http://localhost:8000/favicon.ico"

    def test_trims(self):
        assert get_favicon_url("  https://example.com/page  ") == "https://example.com/favicon.ico"

    def test_any_special_scheme(self):
        assert get_favicon_url("ftp://files.example.com/pub") == "ftp://files.example.com/favicon.ico"

    def test_garbage(self):
        assert get_favicon_url("garbage") == ""

    def test_empty(self):
        assert get_favicon_url("") == ""
        assert get_favicon_url(None) == ""

    def test_opaque_origin(self):
        assert get_favicon_url("mailto:someone@example.com") == ""

    def test_internationalized_host(self):
        assert get_favicon_url("https://bücher.de/x") == "https://xn--bcher-kva.de/favicon.ico"

    def test_idempotent(self):
        assert get_favicon_url("https://a.b/c") == get_favicon_url("https://a.b/c")
