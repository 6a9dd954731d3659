"""
Tests for finding and stripping `:KSP_VERSION[...]` markers in names.
"""

import pytest
from kspver.exceptions import MalformedAnnotationError
from kspver.markers import AnnotatedName, split_annotation


class TestSplitAnnotation:

    def test_trailing_marker(self):
        result = split_annotation("SomeNode:KSP_VERSION[1.8]")
        assert result.name == "SomeNode"
        assert result.expression == "1.8"
        assert result.has_annotation

    def test_marker_is_case_insensitive(self):
        result = split_annotation("SomeNode:ksp_version[1.8]")
        assert result == AnnotatedName("SomeNode", "1.8")

    def test_marker_in_the_middle(self):
        result = split_annotation("@PART[foo]:KSP_VERSION[1.9]:NEEDS[Bar]")
        assert result.name == "@PART[foo]:NEEDS[Bar]"
        assert result.expression == "1.9"

    def test_expression_taken_verbatim(self):
        result = split_annotation("x:KSP_VERSION[ >1.8 ]")
        assert result.expression == " >1.8 "

    def test_empty_brackets_still_an_annotation(self):
        result = split_annotation("x:KSP_VERSION[]")
        assert result.has_annotation
        assert result.expression == ""

    def test_no_marker(self):
        result = split_annotation("SomeNode")
        assert result == AnnotatedName("SomeNode")
        assert not result.has_annotation

    def test_none_name(self):
        assert split_annotation(None) == AnnotatedName(None)

    def test_only_first_marker_recognized(self):
        result = split_annotation("A:KSP_VERSION[1]:KSP_VERSION[2]")
        assert result.name == "A:KSP_VERSION[2]"
        assert result.expression == "1"

    def test_stripping_is_idempotent(self):
        stripped = split_annotation("SomeNode:KSP_VERSION[1.8]").name
        again = split_annotation(stripped)
        assert again.name == stripped
        assert not again.has_annotation

    def test_missing_closing_bracket(self):
        with pytest.raises(MalformedAnnotationError):
            split_annotation("SomeNode:KSP_VERSION[2.0")

    def test_closing_bracket_before_marker_does_not_count(self):
        with pytest.raises(MalformedAnnotationError):
            split_annotation("@PART[x]:KSP_VERSION[2.0")
