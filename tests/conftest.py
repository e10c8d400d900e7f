"""Pytest configuration and shared fixtures for sidediff tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

# One hunk with no file header: remove "foo", add "bar"
SIMPLE_HUNK = "@@ -1,1 +1,1 @@\n-foo\n+bar\n"

# Two files, context lines mixed in with the changes
GIT_DIFF = (
    "diff --git a/api/queries.js b/api/queries.js\n"
    "index 1a2b3c4..5d6e7f8 100644\n"
    "--- a/api/queries.js\n"
    "+++ b/api/queries.js\n"
    "@@ -194,6 +194,9 @@ const mergeInNewUserApplications = async () => {\n"
    "     .insert(newUserAppRecords);\n"
    " };\n"
    " \n"
    "+const testTimeZoneThings = async () => {\n"
    "+  return database('applications').first();\n"
    "+};\n"
    " module.exports = {\n"
    "-  getAllUsers,\n"
    "+  testTimeZoneThings,\n"
    "   database,\n"
    "diff --git a/api/index.js b/api/index.js\n"
    "index c84b2ab..684b141 100644\n"
    "--- a/api/index.js\n"
    "+++ b/api/index.js\n"
    "@@ -100,3 +100,4 @@ function routeHandlerWithError({ handler, errorMessage }) {\n"
    "   };\n"
    " }\n"
    "+app.get('/timezone', handler);\n"
    " /**\n"
)

# Only added and removed lines, two hunks in one file
CHANGES_ONLY_DIFF = (
    "--- a/notes.txt\n"
    "+++ b/notes.txt\n"
    "@@ -1,2 +1,1 @@\n"
    "-first\n"
    "-second\n"
    "+replacement\n"
    "@@ -10,1 +9,2 @@\n"
    "-old tail\n"
    "+new tail\n"
    "+extra tail\n"
)

# Only context lines
UNCHANGED_ONLY_DIFF = (
    "--- a/same.txt\n"
    "+++ b/same.txt\n"
    "@@ -3,2 +3,2 @@\n"
    " alpha\n"
    " beta\n"
)


@pytest.fixture
def sample_diff_path() -> Path:
    """Return path to the on-disk sample diff."""
    return FIXTURES_DIR / "sample.diff"


@pytest.fixture
def simple_hunk() -> str:
    return SIMPLE_HUNK


@pytest.fixture
def git_diff() -> str:
    return GIT_DIFF


@pytest.fixture
def changes_only_diff() -> str:
    return CHANGES_ONLY_DIFF


@pytest.fixture
def unchanged_only_diff() -> str:
    return UNCHANGED_ONLY_DIFF
