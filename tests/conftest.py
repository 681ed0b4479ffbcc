"""Shared fixtures for pathdoc tests."""

from __future__ import annotations

from typing import Any, Dict

import pytest

from pathdoc.model.document import PathDocument


@pytest.fixture
def nested_body() -> Dict[str, Any]:
    """A small decoded document with every value kind."""
    return {
        "title": "hello",
        "count": 5,
        "ratio": 0.5,
        "enabled": True,
        "missing": None,
        "tags": ["a", "b"],
        "user": {
            "name": "ada",
            "address": {"city": "London", "zip": None},
        },
    }


@pytest.fixture
def doc(nested_body: Dict[str, Any]) -> PathDocument:
    return PathDocument("logs", "_doc", "1", nested_body)
