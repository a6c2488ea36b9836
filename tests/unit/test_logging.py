from __future__ import annotations

import logging

import pytest

from grocery_auth.infrastructure import logging as logging_module


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
        ("basic_format", logging.INFO),
    ],
)
def test_configure_logging_resolves_level(
    monkeypatch: pytest.MonkeyPatch,
    level: str,
    expected: int,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_module.configure_logging(level=level)

    assert calls == [
        {"level": expected, "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}
    ]
