"""Testing generators – Hypothesis strategies for tags and push payloads."""
from pwa_lifecycle.testing.generators.strategies import (
    push_data_strategy,
    push_document_strategy,
    tag_strategy,
)

__all__ = ["push_data_strategy", "push_document_strategy", "tag_strategy"]
