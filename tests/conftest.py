"""Test setup for changelog-md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]

- Nothing yet!

## [1.1.0] - 2024-02-01

### Added

- Support for scopes
- Release command

### Fixed

- Crash on empty file

## [1.0.0] - 2024-01-01

### Added

- Initial release

[unreleased]: https://github.com/o/r/compare/v1.1.0...HEAD
[1.1.0]: https://github.com/o/r/releases/tag/v1.1.0
[1.0.0]: https://github.com/o/r/releases/tag/v1.0.0
"""

MONOREPO_CHANGELOG = """# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased - web]

### Fixed

- Broken link

## [Unreleased - api]

- Nothing yet!

## [web@v2.0.0] - 2024-03-01

### Changed

- New layout

## [api@v1.4.0] - 2024-02-20

### Added

- Pagination

[unreleased - web]: https://github.com/o/r/compare/web@v2.0.0...HEAD
[unreleased - api]: https://github.com/o/r/compare/api@v1.4.0...HEAD
[web@v2.0.0]: https://github.com/o/r/releases/tag/web@v2.0.0
[api@v1.4.0]: https://github.com/o/r/releases/tag/api@v1.4.0
"""


@pytest.fixture
def changelog_text() -> str:
    """Keep a Changelog document with an empty Unreleased section."""
    return CHANGELOG


@pytest.fixture
def monorepo_text() -> str:
    """Changelog shared by the ``web`` and ``api`` packages of a monorepo."""
    return MONOREPO_CHANGELOG
