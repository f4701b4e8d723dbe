"""Document normalization pipeline."""

from .normalize import (
    Normalizer,
    key_alias,
    normalize_document,
    normalize_tree,
    plural,
    plural_value_or_map,
    unplural,
)

__all__ = [
    "Normalizer",
    "key_alias",
    "normalize_document",
    "normalize_tree",
    "plural",
    "plural_value_or_map",
    "unplural",
]
