"""Shared fixtures for condition tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_conditions import build_default_registry


@pytest.fixture
def registry():
    """Frozen registry with the built-in condition types."""
    return build_default_registry()


@pytest.fixture
def configs() -> dict[str, dict[str, object]]:
    """Per-type configuration allowing a couple of columns for each type."""
    return {
        "text": {"keys": ["title", "comments"]},
        "number": {"keys": ["rating", "upvotes"]},
        "date": {"keys": ["due_on", "posted_on"]},
        "boolean": {"keys": ["flag", "archived"]},
    }
