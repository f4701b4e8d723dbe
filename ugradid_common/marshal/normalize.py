"""Normalization of documents whose fields permit a single value or an array.

DID Documents and Verifiable Credentials allow several properties to appear
either as a single value or as an array of values. Normalizers rewrite the
top level of a parsed document so that typed (de)serialization sees one shape.
"""

import json

from typing import Any, Callable, Dict, Union

from ..core.error import MalformedDocumentError

Normalizer = Callable[[Dict[str, Any]], Dict[str, Any]]


def normalize_tree(tree: Dict[str, Any], *normalizers: Normalizer) -> Dict[str, Any]:
    """Apply the normalizers to a parsed document, in the given order.

    The input mapping is left untouched; the normalized copy is returned.
    """
    result = dict(tree)
    for normalizer in normalizers:
        result = normalizer(result)
    return result


def normalize_document(document: Union[str, bytes], *normalizers: Normalizer) -> str:
    """Parse a JSON document, apply the normalizers in order, and re-serialize it.

    Args:
        document: The raw JSON document
        normalizers: The normalizers to apply, left to right

    Returns:
        The normalized document as compact JSON

    Raises:
        MalformedDocumentError: If the input is not a JSON object

    """
    try:
        tree = json.loads(document)
    except (TypeError, ValueError) as err:
        raise MalformedDocumentError("Document is not valid JSON") from err
    if not isinstance(tree, dict):
        raise MalformedDocumentError(
            f"Document must be a JSON object, not {type(tree).__name__}"
        )
    return json.dumps(normalize_tree(tree, *normalizers), separators=(",", ":"))


def key_alias(alias: str, alias_for: str) -> Normalizer:
    """Rename an aliased key to its original form.

    When working with Linked Data in JSON form, `@context` is an alias for
    `context`; `key_alias("@context", "context")` performs that rename. An
    existing value under `alias_for` is overwritten.
    """

    def normalize(tree: Dict[str, Any]) -> Dict[str, Any]:
        if alias not in tree:
            return tree
        result = dict(tree)
        result[alias_for] = result.pop(alias)
        return result

    return normalize


def plural(key: str) -> Normalizer:
    """Wrap a singular value (string, number, bool or object) in an array.

    Example input:  {"message": "Hello, World"}
    Example output: {"message": ["Hello, World"]}

    Absent and null values are left alone. Nested keys are not supported.
    """

    def normalize(tree: Dict[str, Any]) -> Dict[str, Any]:
        value = tree.get(key)
        if value is None or isinstance(value, list):
            return tree
        return {**tree, key: [value]}

    return normalize


def unplural(key: str) -> Normalizer:
    """Collapse an array holding exactly one value into that value.

    The opposite of `plural`. Arrays of any other length are left untouched.
    """

    def normalize(tree: Dict[str, Any]) -> Dict[str, Any]:
        value = tree.get(key)
        if not isinstance(value, list) or len(value) != 1:
            return tree
        return {**tree, key: value[0]}

    return normalize


def plural_value_or_map(key: str) -> Normalizer:
    """Behave like `plural`, except that objects are left as objects."""

    def normalize(tree: Dict[str, Any]) -> Dict[str, Any]:
        value = tree.get(key)
        if value is None or isinstance(value, (dict, list)):
            return tree
        return {**tree, key: [value]}

    return normalize
