"""Tests for input normalization."""

import pytest

from psl_lite.domain.errors import EmptyInput
from psl_lite.resolver.normalize import normalize_input, split_labels


class TestNormalizeInput:

    @pytest.mark.parametrize("raw, expected", [
        ("example.com", "example.com"),
        ("  Example.COM  ", "example.com"),
        ("john@billing.acmecompany.com", "billing.acmecompany.com"),
        ('"odd@local"@mail.example.com', "mail.example.com"),
        ("https://shop.example.com", "shop.example.com"),
        ("HTTP://Shop.Example.COM", "shop.example.com"),
        ("HTTPS://Shop.Example.COM:8080/path?q=1", "shop.example.com"),
        ("example.com?q=a/b", "example.com"),
        ("example.com#frag", "example.com"),
        ("example.com:443", "example.com"),
        ("ftp://example.com", "ftp"),
        ("localhost", "localhost"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_input(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", None, "user@", "https://", "/path", ":8080"])
    def test_empty(self, raw):
        with pytest.raises(EmptyInput):
            normalize_input(raw)

    def test_empty_input_carries_value(self):
        with pytest.raises(EmptyInput) as exc_info:
            normalize_input("user@")
        assert exc_info.value.value == "user@"

    def test_idempotent(self):
        for raw in [
            "john@billing.acmecompany.com",
            "HTTPS://Shop.Example.COM:8080/path?q=1",
            "a@b@c.example.org",
            "http://http://example.com",
            " spaced . example . com ",
        ]:
            once = normalize_input(raw)
            assert normalize_input(once) == once


class TestSplitLabels:

    def test_split(self):
        assert split_labels("billing.acmecompany.com") == ("billing", "acmecompany", "com")

    def test_trailing_dot_dropped(self):
        assert split_labels("example.com.") == ("example", "com")

    def test_inner_empty_labels_kept(self):
        assert split_labels("invalid..domain") == ("invalid", "", "domain")

    def test_single_label(self):
        assert split_labels("localhost") == ("localhost",)
