"""Tests for constants module."""

from tallyunit.constants import (
    FAILED_TAG,
    FIXTURE_RULE,
    MAX_NAME_LENGTH,
    NOTE_TAG,
    PASSED_TAG,
    RUN_TAG,
    SUMMARY_RULE,
    SUMMARY_TITLE,
    TOTAL_FAILED_TAG,
    TOTAL_PASSED_TAG,
    VERSION,
    VERSION_MAJOR,
    VERSION_MINOR,
    VERSION_PATCH,
    VERSION_STRING,
)


class TestVersion:
    """Tests for the packed version number."""

    def test_version_encoding(self):
        assert VERSION == VERSION_MAJOR * 1000000 + VERSION_MINOR * 1000 + VERSION_PATCH

    def test_version_string_matches(self):
        assert VERSION_STRING == f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"


class TestReportTags:
    """All report tags share one width so names line up."""

    def test_tags_have_equal_width(self):
        tags = [
            FIXTURE_RULE,
            SUMMARY_RULE,
            SUMMARY_TITLE,
            RUN_TAG,
            PASSED_TAG,
            FAILED_TAG,
            NOTE_TAG,
            TOTAL_PASSED_TAG,
            TOTAL_FAILED_TAG,
        ]
        assert {len(tag) for tag in tags} == {16}

    def test_name_bound(self):
        assert MAX_NAME_LENGTH == 255
