"""Tests for deprecated profile helpers."""

import logging

from markup_profiles.profiles import legacy


def test_quote_logs_and_returns_char(caplog):
    with caplog.at_level(logging.WARNING, logger="markup_profiles.profiles.legacy"):
        assert legacy.quote("single") == "'"
        assert legacy.quote("double") == '"'
        assert legacy.quote(None) == '"'

    deprecations = [r for r in caplog.records if "deprecated" in r.getMessage()]
    assert len(deprecations) == 3


def test_self_closing_logs_and_returns_token(caplog):
    with caplog.at_level(logging.WARNING, logger="markup_profiles.profiles.legacy"):
        assert legacy.self_closing("xhtml") == " /"
        assert legacy.self_closing(True) == "/"
        assert legacy.self_closing(False) == ""
        assert legacy.self_closing("other") == ""

    deprecations = [r for r in caplog.records if "deprecated" in r.getMessage()]
    assert len(deprecations) == 4
