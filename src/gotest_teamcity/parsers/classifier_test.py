"""Tests for go test line classification."""

import pytest

from gotest_teamcity.parsers.classifier import LineKind, classify


class TestStartLines:
    """Tests for ``=== RUN`` lines."""

    def test_run(self):
        """Run line yields the test name."""
        c = classify("=== RUN   TestFoo/bar_baz\n")
        assert c.kind is LineKind.START
        assert c.name == "TestFoo/bar_baz"

    def test_run_requires_identifier(self):
        """Names must start like an identifier."""
        assert classify("=== RUN   1Test\n").kind is LineKind.OTHER

    def test_pause_and_cont_are_other(self):
        """Parallel bookkeeping lines are not starts."""
        assert classify("=== PAUSE TestFoo\n").kind is LineKind.OTHER
        assert classify("=== CONT  TestFoo\n").kind is LineKind.OTHER


class TestEndLines:
    """Tests for ``--- STATUS`` lines."""

    @pytest.mark.parametrize("status", ["PASS", "FAIL", "SKIP"])
    def test_statuses(self, status):
        """Each terminal keyword is captured."""
        c = classify(f"--- {status}: TestFoo (0.25s)\n")
        assert c.kind is LineKind.END
        assert c.status == status
        assert c.name == "TestFoo"
        assert c.duration == "0.25s"
        assert c.indent == ""

    def test_indented_subtest(self):
        """Leading indentation is kept for detail matching."""
        c = classify("        --- FAIL: TestFoo/a/b (-0.01s)\n")
        assert c.kind is LineKind.END
        assert c.indent == "        "
        assert c.name == "TestFoo/a/b"
        assert c.duration == "-0.01s"

    def test_missing_duration(self):
        """Without a parenthesized duration the line is not an end line."""
        assert classify("--- PASS: TestFoo\n").kind is LineKind.OTHER


class TestOtherKinds:
    """Tests for summary, race and fallthrough lines."""

    @pytest.mark.parametrize("line", [
        "ok  \texample.com/pkg\t0.01s\n",
        "PASS\n",
        "FAIL\n",
        "FAIL\texample.com/pkg\t0.01s\n",
        "exit status 1\n",
        "Found 2 data race(s)\n",
    ])
    def test_summary(self, line):
        """Top-level verdict lines are summaries."""
        assert classify(line).kind is LineKind.SUMMARY

    def test_race(self):
        """Race detector header is recognised."""
        assert classify("WARNING: DATA RACE\n").kind is LineKind.RACE

    def test_indented_race_is_other(self):
        """The race header must start the line."""
        assert classify("  WARNING: DATA RACE\n").kind is LineKind.OTHER

    def test_boundary(self):
        """Only start, end and summary lines are boundaries."""
        assert classify("=== RUN   TestA\n").is_boundary
        assert classify("--- PASS: TestA (0.00s)\n").is_boundary
        assert classify("PASS\n").is_boundary
        assert not classify("WARNING: DATA RACE\n").is_boundary
        assert not classify("some output\n").is_boundary
