"""Tests for semantic version handling."""

from __future__ import annotations

import pytest

from changelog_md.exceptions import ParseError, SemVerErrorCause, SemVerParseError
from changelog_md.semver import BumpKind, SemVer


class TestParse:
    """Tests for SemVer.parse."""

    @pytest.mark.parametrize(
        ("text", "expected", "rendered"),
        [
            ("1.4.7", SemVer(1, 4, 7), "1.4.7"),
            ("0.0.0", SemVer(0, 0, 0), "0.0.0"),
            ("2.0.0-beta.1", SemVer(2, 0, 0, "beta.1"), "2.0.0-beta.1"),
            ("1.0.0-rc-1", SemVer(1, 0, 0, "rc-1"), "1.0.0-rc-1"),
            (" 3.2.1 ", SemVer(3, 2, 1), "3.2.1"),
        ],
    )
    def test_valid_versions(self, text: str, expected: SemVer, rendered: str) -> None:
        version = SemVer.parse(text)

        assert version == expected
        assert str(version) == rendered

    @pytest.mark.parametrize(
        ("text", "cause", "component"),
        [
            ("", SemVerErrorCause.MISSING_MAJOR, "major"),
            ("1", SemVerErrorCause.MISSING_MINOR, "minor"),
            ("1.2", SemVerErrorCause.MISSING_PATCH, "patch"),
            ("1..3", SemVerErrorCause.MISSING_MINOR, "minor"),
            ("x.2.3", SemVerErrorCause.NON_NUMERIC, "major"),
            ("1.y.3", SemVerErrorCause.NON_NUMERIC, "minor"),
            ("1.2.3.4", SemVerErrorCause.NON_NUMERIC, "patch"),
            ("v1.2.3", SemVerErrorCause.NON_NUMERIC, "major"),
        ],
    )
    def test_invalid_versions(
        self, text: str, cause: SemVerErrorCause, component: str
    ) -> None:
        with pytest.raises(SemVerParseError) as exc_info:
            SemVer.parse(text)

        assert exc_info.value.cause is cause
        assert exc_info.value.component == component
        assert component in str(exc_info.value)

    def test_error_is_parse_error(self) -> None:
        with pytest.raises(ParseError, match="patch version is missing"):
            SemVer.parse("1.2")


class TestBump:
    """Tests for bump, infer and change_to."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (BumpKind.MAJOR, "2.0.0"),
            (BumpKind.MINOR, "1.5.0"),
            (BumpKind.PATCH, "1.4.8"),
            ("major", "2.0.0"),
            ("Minor", "1.5.0"),
        ],
    )
    def test_bump_laws(self, kind: BumpKind | str, expected: str) -> None:
        assert str(SemVer(1, 4, 7).bump(kind)) == expected

    @pytest.mark.parametrize("kind", list(BumpKind))
    def test_bump_drops_pre_release(self, kind: BumpKind) -> None:
        assert SemVer(1, 4, 7, "alpha").bump(kind).pre_release is None

    def test_unknown_bump_kind(self) -> None:
        with pytest.raises(ValueError):
            SemVer(1, 0, 0).bump("huge")

    def test_infer_is_identical_copy(self) -> None:
        version = SemVer(1, 2, 3, "rc.1")

        inferred = version.infer()

        assert str(inferred) == "1.2.3-rc.1"
        assert inferred == version

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            ("major", "2.0.0"),
            ("minor", "1.5.0"),
            ("patch", "1.4.8"),
            ("infer", "1.4.7"),
            ("3.0.0", "3.0.0"),
        ],
    )
    def test_change_to(self, target: str, expected: str) -> None:
        assert str(SemVer(1, 4, 7).change_to(target)) == expected

    def test_change_to_invalid(self) -> None:
        with pytest.raises(SemVerParseError):
            SemVer(1, 4, 7).change_to("1.2")


class TestOrdering:
    """Versions order by major, minor, patch."""

    def test_ordering(self) -> None:
        versions = [SemVer(1, 10, 0), SemVer(1, 2, 3), SemVer(0, 9, 9), SemVer(1, 2, 10)]

        assert [str(version) for version in sorted(versions)] == [
            "0.9.9",
            "1.2.3",
            "1.2.10",
            "1.10.0",
        ]

    def test_pre_release_ignored_in_comparison(self) -> None:
        assert SemVer(1, 0, 0, "beta") == SemVer(1, 0, 0)
        assert not SemVer(1, 0, 0, "beta") < SemVer(1, 0, 0)
