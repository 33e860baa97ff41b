"""Local configuration for changelog-md."""

from __future__ import annotations

import os

DEFAULT_FILENAME = "CHANGELOG.md"
DEFAULT_LIST_AMOUNT = 10
DEFAULT_SECTION = "Added"

UNRELEASED_NAME = "Unreleased"
PLACEHOLDER_ITEM = "Nothing yet!"
# Unreleased position under a title that has no sections yet: title -> description -> Unreleased.
UNRELEASED_INDEX = 2

CHANGELOG_MD_FILENAME = os.getenv("CHANGELOG_MD_FILENAME", DEFAULT_FILENAME)
CHANGELOG_MD_LIST_AMOUNT = int(os.getenv("CHANGELOG_MD_LIST_AMOUNT", str(DEFAULT_LIST_AMOUNT)))
CHANGELOG_MD_DEFAULT_SECTION = os.getenv("CHANGELOG_MD_DEFAULT_SECTION", DEFAULT_SECTION)

CHANGELOG_TEMPLATE = f"""# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [{UNRELEASED_NAME}]

- {PLACEHOLDER_ITEM}
"""
