"""Validate documents against JSON Schemas, and schemas against the meta-schema."""

import json
import logging

from typing import Any, List, Mapping, Optional, Union

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from jsonschema.validators import validator_for

from ...config.base import BaseSettings
from ...config.settings import FORMAT_CHECKS_KEY
from ...core.error import MalformedDocumentError
from .error import SchemaValidationFailedError
from .json_schema import JsonSchemaDocument

LOGGER = logging.getLogger(__name__)


def is_json(text: Union[str, bytes]) -> bool:
    """Check whether the text parses as JSON."""
    try:
        json.loads(text)
    except (TypeError, ValueError):
        return False
    return True


def _load_json(text: Union[str, bytes], what: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as err:
        raise MalformedDocumentError(f"{what} is not valid JSON: {err}") from err


def _messages(errors: List[JsonSchemaValidationError]) -> List[str]:
    return [f"{error.json_path}: {error.message}" for error in errors]


def validate_json_schema(schema: Union[JsonSchemaDocument, Mapping]):
    """Check a schema against the meta-schema of the draft it declares.

    Documents without `$schema` are checked as draft-07.

    Raises:
        SchemaValidationFailedError: Carrying every violation found

    """
    if isinstance(schema, JsonSchemaDocument):
        schema = schema.serialize()

    validator_cls = validator_for(schema, default=Draft7Validator)
    meta_validator = validator_cls(validator_cls.META_SCHEMA)
    errors = _messages(list(meta_validator.iter_errors(schema)))
    if errors:
        LOGGER.debug("Schema failed meta-validation: %s", errors)
        raise SchemaValidationFailedError(errors)


def validate_json_schema_string(schema: Union[str, bytes]):
    """Parse a schema from JSON text and check it against its meta-schema."""
    loaded = _load_json(schema, "Schema")
    if not isinstance(loaded, dict):
        raise MalformedDocumentError("Schema is not a JSON object")
    validate_json_schema(loaded)


def validate_document(
    schema: Mapping,
    document: Any,
    settings: Optional[BaseSettings] = None,
):
    """Validate an already-parsed document against an already-parsed schema.

    Format assertions are enabled unless the `schema.format_checks` setting
    is false.

    Raises:
        SchemaValidationFailedError: If the schema or the document is invalid

    """
    validate_json_schema(schema)

    validator_cls = validator_for(schema, default=Draft7Validator)
    format_checks = (
        settings.get_bool(FORMAT_CHECKS_KEY, default=True) if settings else True
    )
    validator = validator_cls(
        schema,
        format_checker=validator_cls.FORMAT_CHECKER if format_checks else None,
    )
    errors = _messages(list(validator.iter_errors(document)))
    if errors:
        LOGGER.debug("Document failed validation: %s", errors)
        raise SchemaValidationFailedError(errors)


def validate(
    schema: Union[str, bytes],
    document: Union[str, bytes],
    settings: Optional[BaseSettings] = None,
):
    """Validate a JSON document against a JSON schema, both given as text.

    Raises:
        MalformedDocumentError: If either input is not JSON
        SchemaValidationFailedError: If the schema or the document is invalid

    """
    loaded_schema = _load_json(schema, "Schema")
    loaded_document = _load_json(document, "Document")
    if not isinstance(loaded_schema, dict):
        raise MalformedDocumentError("Schema is not a JSON object")
    validate_document(loaded_schema, loaded_document, settings)


def validate_credential(
    subject_schema: Union[str, bytes],
    credential: Union[str, bytes],
    settings: Optional[BaseSettings] = None,
):
    """Validate the credential subject of a credential against a schema.

    Raises:
        MalformedDocumentError: If either input is not a JSON object
        SchemaValidationFailedError: If the subject does not satisfy the schema

    """
    from ..credential import VerifiableCredential

    loaded = VerifiableCredential.from_json(credential)
    validate(subject_schema, json.dumps(loaded.credential_subject), settings)
