"""Classify credential schema updates as major or minor and derive the next version.

A breaking change (removing or retyping a property, relaxing a required
property, disallowing additional properties) is major. A compatible change
(adding a property or a required property, allowing additional properties,
renaming or redescribing the schema) is minor. Major takes priority.
"""

import logging

from typing import Callable, List, Optional, Tuple

from .error import InvalidUpdateInputError, NoChangeDetectedError
from .schema import Schema, UpdateInput, UpdateResult
from .version import Version

LOGGER = logging.getLogger(__name__)

Rule = Callable[[Schema, Schema], bool]


def property_removed_or_edited(previous: Schema, updated: Schema) -> bool:
    """Check for a previous property that is gone or has a new type or format."""
    updated_properties = updated.body.get_properties()
    for name, previous_property in previous.body.get_properties().items():
        updated_property = updated_properties.get(name)
        if updated_property is None:
            return True
        if updated_property.declared_type() != previous_property.declared_type():
            return True
        if updated_property.declared_format() != previous_property.declared_format():
            return True
    return False


def required_property_became_optional(previous: Schema, updated: Schema) -> bool:
    """Check for a previously required property that is no longer required."""
    updated_required = updated.body.required_fields()
    return any(
        name not in updated_required for name in previous.body.required_fields()
    )


def additional_properties_disallowed(previous: Schema, updated: Schema) -> bool:
    """Check whether additional properties went from allowed to disallowed."""
    return (
        previous.body.allows_additional_properties()
        and not updated.body.allows_additional_properties()
    )


def additional_properties_allowed(previous: Schema, updated: Schema) -> bool:
    """Check whether additional properties went from disallowed to allowed."""
    return (
        not previous.body.allows_additional_properties()
        and updated.body.allows_additional_properties()
    )


def property_added(previous: Schema, updated: Schema) -> bool:
    """Check for a property absent from the previous schema."""
    previous_properties = previous.body.get_properties()
    return any(
        name not in previous_properties for name in updated.body.get_properties()
    )


def required_property_added(previous: Schema, updated: Schema) -> bool:
    """Check for a required property the previous schema did not require."""
    previous_required = previous.body.required_fields()
    return any(
        name not in previous_required for name in updated.body.required_fields()
    )


def name_changed(previous: Schema, updated: Schema) -> bool:
    """Check whether the schema name changed."""
    return (previous.name or "") != (updated.name or "")


def description_changed(previous: Schema, updated: Schema) -> bool:
    """Check whether the schema body description changed."""
    return (previous.body.description or "") != (updated.body.description or "")


MAJOR_RULES: Tuple[Rule, ...] = (
    property_removed_or_edited,
    required_property_became_optional,
    additional_properties_disallowed,
)

MINOR_RULES: Tuple[Rule, ...] = (
    additional_properties_allowed,
    property_added,
    name_changed,
    description_changed,
    required_property_added,
)


def _check_input(update_input: Optional[UpdateInput]):
    def fail(message: str):
        result = UpdateResult(valid=False, message=message)
        raise InvalidUpdateInputError(message, result)

    if update_input is None:
        fail("Input is not valid")

    updated = update_input.updated_schema
    if updated is None or updated.metadata is None or updated.body is None:
        fail("Updated Schema is missing from input")

    previous = update_input.previous_schema
    if previous is None or previous.metadata is None or previous.body is None:
        fail("Previous Schema is missing from input")

    if not updated.author or updated.author != previous.author:
        fail("Schema Author is invalid")


def _fired(rules: Tuple[Rule, ...], previous: Schema, updated: Schema) -> List[str]:
    return [rule.__name__ for rule in rules if rule(previous, updated)]


def previous_version(schema: Schema) -> Version:
    """Return the version of a schema, read from its ID when not set.

    Raises:
        UnrecognizedVersionFormatError: If the version is not major.minor

    """
    version = schema.metadata.version or schema.version_from_id()
    return Version.parse(version)


def validate_schema_update(update_input: Optional[UpdateInput]) -> UpdateResult:
    """Classify an update and derive the version of the updated schema.

    Raises:
        InvalidUpdateInputError: If either schema is missing or the author differs
        NoChangeDetectedError: If no rule detects a difference
        UnrecognizedVersionFormatError: If the previous version cannot be parsed

    The `result` attribute of the update errors holds the invalid result.
    """
    _check_input(update_input)
    previous = update_input.previous_schema
    updated = update_input.updated_schema

    major = _fired(MAJOR_RULES, previous, updated)
    minor = _fired(MINOR_RULES, previous, updated)
    LOGGER.debug(
        "Schema update %s -> %s: major rules %s, minor rules %s",
        previous.id,
        updated.id,
        major,
        minor,
    )

    if not major and not minor:
        message = "Schema has not been updated"
        raise NoChangeDetectedError(message, UpdateResult(valid=False, message=message))

    version = previous_version(previous)
    derived = version.increment_major() if major else version.increment_minor()
    return UpdateResult(
        valid=True,
        major_change=bool(major),
        minor_change=bool(minor),
        derived_version=str(derived),
    )
