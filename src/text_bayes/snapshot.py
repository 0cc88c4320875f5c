"""Snapshot codec for persisting classifier state as JSON.

A snapshot is a whole-model document::

    {
        "version": 1,
        "categories": {"spam": {"tally": 3, "tokens": {"buy": 2, "now": 1}}},
        "tokenizer": {"language": "english", "removeStopWords": false}
    }

The ``tokenizer`` block is present only when the classifier uses the
default tokenizer. Decoding validates the whole document before returning,
so callers can install the result without touching existing state on
failure.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidDataError, SnapshotIssue
from .models import CategoryState, is_valid_category_name
from .tokenizer import TokenizerSettings

SCHEMA_VERSION = 1


@dataclass
class DecodedSnapshot:
    """Validated snapshot contents. Category priors are not yet computed."""

    categories: dict[str, CategoryState] = field(default_factory=dict)
    tokenizer_settings: Optional[TokenizerSettings] = None


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def build_snapshot(
    categories: Mapping[str, CategoryState],
    tokenizer_settings: Optional[TokenizerSettings] = None,
) -> dict:
    """Copy category state into the persisted document structure.

    Args:
        categories: Category states keyed by normalized name.
        tokenizer_settings: Default tokenizer configuration, if any.

    Returns:
        A plain dict independent of the live model.
    """
    snapshot: dict = {
        "version": SCHEMA_VERSION,
        "categories": {
            state.name: {
                "tally": state.token_tally,
                "tokens": dict(state.token_counts),
            }
            for state in categories.values()
        },
    }
    if tokenizer_settings is not None:
        snapshot["tokenizer"] = tokenizer_settings.to_dict()
    return snapshot


def serialize(snapshot: dict) -> bytes:
    """Encode a snapshot document as UTF-8 JSON."""
    return json.dumps(snapshot, ensure_ascii=False, sort_keys=True).encode("utf-8")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def deserialize(payload: bytes) -> DecodedSnapshot:
    """Decode and validate a snapshot payload.

    Checks run in a fixed order and the first failure wins: structure,
    schema version, category names, tallies, token names, token counts,
    and finally the tally/token-sum match.

    Args:
        payload: Raw bytes produced by :func:`serialize`.

    Returns:
        DecodedSnapshot with fresh CategoryState objects.

    Raises:
        InvalidDataError: If any check fails; ``issue`` names the check.
    """
    try:
        document = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise InvalidDataError(
            SnapshotIssue.UNREADABLE, "Unable to deserialize persisted model."
        ) from exc

    if not isinstance(document, dict) or not isinstance(document.get("categories"), dict):
        raise InvalidDataError(SnapshotIssue.UNREADABLE, "Unable to deserialize persisted model.")

    version = document.get("version")
    if not _is_int(version) or version != SCHEMA_VERSION:
        raise InvalidDataError(
            SnapshotIssue.UNSUPPORTED_VERSION, f"Unsupported model version: {version!r}."
        )

    tokenizer_settings = _decode_tokenizer(document.get("tokenizer"))

    categories: dict[str, CategoryState] = {}
    for name, entry in document["categories"].items():
        state = _decode_category(name, entry)
        key = name.lower()
        if key in categories:
            raise InvalidDataError(
                SnapshotIssue.INVALID_CATEGORY_NAME,
                f"Invalid category name: {name} duplicates {categories[key].name}.",
            )
        categories[key] = state

    return DecodedSnapshot(categories=categories, tokenizer_settings=tokenizer_settings)


def _decode_tokenizer(block: object) -> Optional[TokenizerSettings]:
    if block is None:
        return None
    if not isinstance(block, dict):
        raise InvalidDataError(SnapshotIssue.UNREADABLE, "Unable to deserialize persisted model.")
    try:
        return TokenizerSettings.from_dict(block)
    except ValueError as exc:
        raise InvalidDataError(
            SnapshotIssue.UNREADABLE, f"Unable to deserialize persisted model: {exc}"
        ) from exc


def _decode_category(name: str, entry: object) -> CategoryState:
    if not is_valid_category_name(name):
        raise InvalidDataError(SnapshotIssue.INVALID_CATEGORY_NAME, f"Invalid category name: {name}.")

    if not isinstance(entry, dict) or not isinstance(entry.get("tokens", {}), dict):
        raise InvalidDataError(SnapshotIssue.UNREADABLE, "Unable to deserialize persisted model.")

    tally = entry.get("tally", 0)
    if not _is_int(tally) or tally < 0:
        raise InvalidDataError(
            SnapshotIssue.INVALID_TALLY, f"Invalid tally for category {name}: {tally!r}."
        )

    state = CategoryState(name=name)
    total = 0
    for token, count in entry.get("tokens", {}).items():
        if not token.strip():
            raise InvalidDataError(
                SnapshotIssue.INVALID_TOKEN_NAME, f"Invalid token name for category {name}."
            )
        if not _is_int(count) or count <= 0:
            raise InvalidDataError(
                SnapshotIssue.INVALID_TOKEN_COUNT,
                f"Invalid token count for category {name}: {count!r}.",
            )
        key = token.lower()
        state.token_counts[key] = state.token_counts.get(key, 0) + count
        total += count

    if total != tally:
        raise InvalidDataError(
            SnapshotIssue.TALLY_MISMATCH,
            f"Tally mismatch for category {name}: tally={tally}, sum={total}.",
        )

    state.token_tally = tally
    return state
