"""Tests for rgpy.search.matchers module."""

from __future__ import annotations

import threading

import pytest

from rgpy.core.types import Engine
from rgpy.search import matchers
from rgpy.search.matchers import (
    Matcher,
    available_engines,
    compile_matcher,
    engine_available,
    resolve_engine,
)
from rgpy.utils.error_handling import (
    ConfigurationError,
    EngineUnavailableError,
    ErrorCategory,
    InvalidPatternError,
    SearchError,
)


class TestResolveEngine:
    """Tests for resolve_engine."""

    def test_strings(self):
        assert resolve_engine("regex") is Engine.REGEX
        assert resolve_engine("pcre2") is Engine.PCRE2
        assert resolve_engine(" PCRE2 ") is Engine.PCRE2

    def test_enum_passthrough(self):
        assert resolve_engine(Engine.REGEX) is Engine.REGEX

    def test_unknown(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_engine("hyperscan")
        assert "hyperscan" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


class TestEngineAvailability:
    """Tests for engine_available and available_engines."""

    def test_default_always_available(self):
        assert engine_available("regex") is True
        assert Engine.REGEX in available_engines()

    def test_pcre2_absent(self, monkeypatch):
        monkeypatch.setattr(matchers, "_PCRE2_AVAILABLE", False)
        assert engine_available(Engine.PCRE2) is False
        assert available_engines() == [Engine.REGEX]


class TestCompileMatcher:
    """Tests for compile_matcher with the default engine."""

    def test_basic(self):
        m = compile_matcher("foo")
        assert isinstance(m, Matcher)
        assert m.pattern == "foo"
        assert m.ignore_case is False
        assert m.engine is Engine.REGEX

    def test_is_match_unanchored(self):
        m = compile_matcher("foo")
        assert m.is_match("foo")
        assert m.is_match("xx foobar")
        assert not m.is_match("bar")
        assert not m.is_match("")

    def test_regex_syntax(self):
        m = compile_matcher(r"^def \w+\(")
        assert m.is_match("def main():")
        assert not m.is_match("    def inner():")

    def test_empty_pattern_matches_everything(self):
        m = compile_matcher("")
        assert m.is_match("")
        assert m.is_match("anything")

    def test_case_sensitive_by_default(self):
        m = compile_matcher("FOO")
        assert not m.is_match("foo")

    def test_ignore_case(self):
        m = compile_matcher("FOO", ignore_case=True)
        assert m.ignore_case is True
        for text in ("foo", "Foo", "FOO", "a fOo b"):
            assert m.is_match(text)
        assert not m.is_match("bar")

    def test_ignore_case_symmetric(self):
        lower = compile_matcher("hello", ignore_case=True)
        upper = compile_matcher("HELLO", ignore_case=True)
        for text in ("hello", "HELLO", "HeLLo world"):
            assert lower.is_match(text) == upper.is_match(text) is True

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_matcher("[unclosed")
        err = exc_info.value
        assert err.pattern == "[unclosed"
        assert err.engine == "regex"
        assert err.diagnostic
        assert err.category == ErrorCategory.PATTERN
        assert isinstance(err, ValueError)
        assert isinstance(err, SearchError)

    def test_unknown_engine(self):
        with pytest.raises(ConfigurationError):
            compile_matcher("foo", engine="nope")

    def test_matcher_is_immutable(self):
        m = compile_matcher("foo")
        with pytest.raises(AttributeError):
            m.pattern = "bar"  # type: ignore[misc]

    def test_equality_ignores_compiled_state(self):
        assert compile_matcher("foo") == compile_matcher("foo")
        assert compile_matcher("foo") != compile_matcher("foo", ignore_case=True)

    def test_concurrent_use(self):
        m = compile_matcher(r"\d{3}")
        lines = [f"line {i}" for i in range(2000)]
        expected = [m.is_match(line) for line in lines]
        results: list[list[bool]] = []

        def worker():
            results.append([m.is_match(line) for line in lines])

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r == expected for r in results)


class TestPcre2Engine:
    """Tests for the optional pcre2 engine."""

    def test_unavailable_raises(self, monkeypatch):
        monkeypatch.setattr(matchers, "_PCRE2_AVAILABLE", False)
        with pytest.raises(EngineUnavailableError) as exc_info:
            compile_matcher("foo", engine="pcre2")
        assert exc_info.value.engine == "pcre2"
        assert exc_info.value.category == ErrorCategory.CONFIGURATION

    def test_unavailable_never_falls_back(self, monkeypatch):
        monkeypatch.setattr(matchers, "_PCRE2_AVAILABLE", False)
        with pytest.raises(EngineUnavailableError):
            compile_matcher("[unclosed", engine=Engine.PCRE2)

    def test_match_when_installed(self):
        pytest.importorskip("pcre2")
        m = compile_matcher(r"(?<=id=)\d+", engine="pcre2")
        assert m.engine is Engine.PCRE2
        assert m.is_match("user id=42")
        assert not m.is_match("user id=")

    def test_unanchored_when_installed(self):
        pytest.importorskip("pcre2")
        m = compile_matcher("bar", engine="pcre2")
        assert m.is_match("foobar")
        assert m.is_match("a bar b")
        assert not m.is_match("foo")

    def test_ignore_case_when_installed(self):
        pytest.importorskip("pcre2")
        m = compile_matcher("FOO", ignore_case=True, engine="pcre2")
        assert m.is_match("foobar")

    def test_invalid_pattern_when_installed(self):
        pytest.importorskip("pcre2")
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_matcher("(unclosed", engine="pcre2")
        assert exc_info.value.engine == "pcre2"
