"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "pwa-lifecycle[test]"
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

_TAG_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_"


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def tag_strategy(*, max_segments: int = 3) -> "SearchStrategy[str]":
    """Notification tags such as ``new-question`` or ``answer-42``.

    Segments never contain the separator, so ``"-".join`` round-trips.
    """
    st = _require_hypothesis()
    segment = st.text(alphabet=_TAG_ALPHABET, min_size=1, max_size=8)
    return st.lists(segment, min_size=1, max_size=max_segments).map("-".join)


def push_document_strategy() -> "SearchStrategy[dict[str, Any]]":
    """JSON-object push bodies with every optional field present or absent."""
    st = _require_hypothesis()
    action = st.fixed_dictionaries({"action": st.text(min_size=1), "title": st.text()})
    return st.fixed_dictionaries(
        {},
        optional={
            "title": st.text(),
            "body": st.text(),
            "url": st.text(),
            "tag": tag_strategy(),
            "badge": st.one_of(st.integers(min_value=0, max_value=999), st.none(), st.text()),
            "actions": st.lists(action, max_size=3),
        },
    )


def push_data_strategy() -> "SearchStrategy[bytes | str | None]":
    """Anything a push event may carry: nothing, raw bytes, text or JSON."""
    st = _require_hypothesis()
    encoded = push_document_strategy().map(lambda doc: json.dumps(doc).encode("utf-8"))
    return st.one_of(st.none(), st.binary(max_size=64), st.text(max_size=64), encoded)


__all__ = ["push_data_strategy", "push_document_strategy", "tag_strategy"]
