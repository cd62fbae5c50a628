"""Tests for decoration stripping in typed_identifier.engine.normalizer."""

import pytest

from typed_identifier.engine.normalizer import (
    DecorationRule,
    normalize,
    normalize_with_rule,
    protocol_variant,
)
from typed_identifier.schemes.models import SchemeDescriptor


class TestNormalize:
    @pytest.mark.parametrize("raw,expected", [
        ("doi:10.1234/example", "10.1234/example"),
        ("DOI:10.1234/example", "10.1234/example"),
        ("Doi:10.1234/Example", "10.1234/Example"),
        ("https://doi.org/10.1234/example", "10.1234/example"),
        ("http://doi.org/10.1234/example", "10.1234/example"),
        ("10.1234/example", "10.1234/example"),
    ])
    def test_four_input_shapes(self, doi, raw, expected):
        assert normalize(doi, raw) == expected

    def test_reports_rule(self, doi):
        assert normalize_with_rule(doi, "DOI:10.1/x")[1] is DecorationRule.scheme_token
        assert normalize_with_rule(doi, "https://doi.org/10.1/x")[1] is DecorationRule.exact_prefix
        assert normalize_with_rule(doi, "http://doi.org/10.1/x")[1] is DecorationRule.protocol_swapped
        assert normalize_with_rule(doi, "10.1/x")[1] is DecorationRule.bare

    def test_trailing_slash_kept(self, doi):
        assert normalize(doi, "https://doi.org/10.1234/example/") == "10.1234/example/"

    def test_only_first_rule_applies(self, doi):
        # the scheme token wins; the URL left behind is not stripped again
        assert normalize(doi, "doi:https://doi.org/10.1/x") == "https://doi.org/10.1/x"

    def test_prefix_match_is_case_sensitive(self, doi):
        assert normalize(doi, "HTTPS://DOI.ORG/10.1/x") == "HTTPS://DOI.ORG/10.1/x"

    def test_original_case_preserved_after_token(self, openalex):
        assert normalize(openalex, "OPENALEX:W00000000") == "W00000000"

    def test_no_prefix_scheme_only_strips_token(self):
        netid = SchemeDescriptor(id="netid", pattern=r"^[a-zA-Z0-9_]*$")
        assert normalize(netid, "NetID:jdoe") == "jdoe"
        assert normalize(netid, "https://example.org/jdoe") == "https://example.org/jdoe"

    def test_http_only_prefix_has_no_variant(self):
        legacy = SchemeDescriptor(id="legacy", prefix="http://legacy.example/")
        assert normalize(legacy, "http://legacy.example/42") == "42"
        assert normalize(legacy, "https://legacy.example/42") == "https://legacy.example/42"

    def test_already_bare_is_noop(self, doi):
        once = normalize(doi, "https://doi.org/10.1234/example")
        assert normalize(doi, once) == once


class TestProtocolVariant:
    def test_https_prefix(self):
        assert protocol_variant("https://orcid.org/") == "http://orcid.org/"

    def test_http_prefix(self):
        assert protocol_variant("http://orcid.org/") is None

    def test_empty_prefix(self):
        assert protocol_variant("") is None
