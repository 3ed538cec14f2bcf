"""Tests for the Domain value object."""

from __future__ import annotations

import pytest

from suffixctl.core.names import Domain, name_to_labels


class TestNameToLabels:
    def test_splits_on_dots(self) -> None:
        assert name_to_labels("someone.spaces.live.com") == ["someone", "spaces", "live", "com"]
        assert name_to_labels("leontina23samiko.wiki.zoho.com") == [
            "leontina23samiko",
            "wiki",
            "zoho",
            "com",
        ]


class TestDomain:
    def test_fields(self) -> None:
        d = Domain("com", "google", "www")
        assert d.tld == "com"
        assert d.sld == "google"
        assert d.trd == "www"

    def test_frozen(self) -> None:
        d = Domain("com")
        with pytest.raises(AttributeError):
            d.tld = "net"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "args,expected",
        [
            (("com",), (None, None, "com")),
            (("com", "google"), (None, "google", "com")),
            (("com", "google", "www"), ("www", "google", "com")),
        ],
    )
    def test_to_tuple(self, args: tuple[str, ...], expected: tuple[str | None, ...]) -> None:
        assert Domain(*args).to_tuple() == expected

    @pytest.mark.parametrize(
        "args,expected",
        [
            (("com",), "com"),
            (("com", "google"), "google.com"),
            (("com", "google", "www"), "www.google.com"),
            (("co.uk", "example", "a.b"), "a.b.example.co.uk"),
        ],
    )
    def test_str(self, args: tuple[str, ...], expected: str) -> None:
        assert str(Domain(*args)) == expected


class TestDomainQueries:
    @pytest.mark.parametrize("tld", ["com", "tldnotlisted"])
    def test_bare_suffix(self, tld: str) -> None:
        d = Domain(tld)
        assert d.domain is None
        assert d.subdomain is None
        assert d.is_domain is False
        assert d.is_subdomain is False

    @pytest.mark.parametrize("tld", ["com", "tldnotlisted"])
    def test_registrable_domain(self, tld: str) -> None:
        d = Domain(tld, "google")
        assert d.domain == f"google.{tld}"
        assert d.subdomain is None
        assert d.is_domain is True
        assert d.is_subdomain is False

    @pytest.mark.parametrize("tld", ["com", "tldnotlisted"])
    def test_subdomain(self, tld: str) -> None:
        d = Domain(tld, "google", "www")
        assert d.domain == f"google.{tld}"
        assert d.subdomain == f"www.google.{tld}"
        assert d.is_domain is True
        assert d.is_subdomain is True

    def test_trd_without_sld_is_ignored(self) -> None:
        d = Domain("com", None, "www")
        assert d.domain is None
        assert d.subdomain is None
