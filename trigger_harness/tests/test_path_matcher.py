import pytest

from trigger_harness.core.path_matcher import (
    extract_params,
    is_valid_match,
    split_segments,
    wildcard_name,
)

TEMPLATE = "companies/{company}/users/{user}"


class TestIsValidMatch:
    def test_path_fitting_template(self):
        assert is_valid_match(TEMPLATE, "/companies/firebase/users/abe") is True

    def test_too_long(self):
        assert is_valid_match(TEMPLATE, "companies/firebase/users/abe/boots") is False

    def test_too_short(self):
        assert is_valid_match(TEMPLATE, "companies/firebase/users/") is False

    def test_different_literal_segment(self):
        assert is_valid_match("locations/{company}/users/{user}", "companies/firebase/users/{user}") is False

    def test_literal_template_segment_is_compared_verbatim(self):
        assert is_valid_match("a/{still_wild}/b", "a/{still_wild}/b") is True
        assert is_valid_match("a/literal/b", "a/{literal}/b") is False

    def test_unfilled_wildcards_in_path_match(self):
        assert is_valid_match(TEMPLATE, "companies/{company}/users/{user}") is True


class TestExtractParams:
    def test_full_match(self):
        params = extract_params(TEMPLATE, "/companies/firebase/users/abe")
        assert params == {"company": "firebase", "user": "abe"}

    def test_unfilled_wildcard_is_skipped(self):
        params = extract_params(TEMPLATE, "companies/{still_wild}/users/abe")
        assert params == {"user": "abe"}

    @pytest.mark.parametrize(
        "template, path",
        [
            (TEMPLATE, "companies/firebase/users/abe/boots"),
            (TEMPLATE, "companies/firebase/users/"),
            ("locations/{company}/users/{user}", "companies/firebase/users/{user}"),
        ],
    )
    def test_mismatch_returns_empty(self, template, path):
        assert extract_params(template, path) == {}

    def test_literal_template_has_nothing_to_extract(self):
        assert extract_params("companies/users", "/companies/users/") == {}

    def test_round_trip_through_compiled_path(self):
        from trigger_harness.core.resource_compiler import compile_resource

        params = {"company": "Google", "user": "Lauren"}
        assert extract_params(TEMPLATE, compile_resource(TEMPLATE, params)) == params


def test_split_segments_trims_slashes():
    assert split_segments("/a/b/c/") == ["a", "b", "c"]


def test_wildcard_name():
    assert wildcard_name("{company}") == "company"
    assert wildcard_name("company") is None
    assert wildcard_name("{a}{b}") is None
