"""Runtime capability checks used to classify arbitrary errors."""

from __future__ import annotations

from collections.abc import Mapping

from .types import Disclosable


def as_disclosable(err: object) -> Disclosable | None:
    """Return ``err`` when it exposes a public code, else ``None``."""
    if isinstance(err, Disclosable):
        return err
    return None


def as_validation_aggregate(err: object) -> Mapping[str, Disclosable] | None:
    """Return ``err`` when it is a field name to disclosable error mapping.

    The check is structural: any mapping with string keys and disclosable
    values qualifies, including an empty one.
    """
    if not isinstance(err, Mapping):
        return None
    for name, error in err.items():
        if not isinstance(name, str) or not isinstance(error, Disclosable):
            return None
    return err
