"""Smoke test for the top-level package exports."""

import pathdoc


def test_public_api_round_trip():
    doc = pathdoc.PathDocument("logs", "_doc", "1", {"user": {"name": "ada"}})
    doc.set_value("user.address.city", "London")

    assert doc.get_value("user.name", str) == "ada"
    assert doc.get_value("user.address", pathdoc.ValueKind.MAPPING) == {
        "city": "London"
    }
    assert doc.modified


def test_exports():
    for name in pathdoc.__all__:
        assert hasattr(pathdoc, name), name
    assert isinstance(pathdoc.__version__, str)
