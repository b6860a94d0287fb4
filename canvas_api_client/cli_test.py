"""Unit tests for CLI parameter parsing."""

import pytest

from canvas_api_client.cli import parse_params


def describe_parse_params():
    def it_parses_plain_pairs():
        assert parse_params(["search_term=baz", "per_page=10"]) == {"search_term": "baz", "per_page": "10"}

    def it_accumulates_empty_brackets_into_lists():
        assert parse_params(["include[]=term", "include[]=sections"]) == {"include": ["term", "sections"]}

    def it_builds_nested_mappings():
        assert parse_params(["course[name]=N", "course[term_id]=6"]) == {"course": {"name": "N", "term_id": "6"}}

    def it_keeps_equals_signs_in_values():
        assert parse_params(["q=a=b"]) == {"q": "a=b"}

    def it_overwrites_repeated_plain_keys():
        assert parse_params(["q=a", "q=b"]) == {"q": "b"}

    def it_rejects_scalar_then_list():
        with pytest.raises(ValueError, match="--param a"):
            parse_params(["a=1", "a[]=2"])

    def it_rejects_list_then_mapping():
        with pytest.raises(ValueError, match="--param include"):
            parse_params(["include[]=x", "include[k]=y"])

    def it_rejects_mapping_then_scalar():
        with pytest.raises(ValueError, match="--param course"):
            parse_params(["course[name]=N", "course=1"])
