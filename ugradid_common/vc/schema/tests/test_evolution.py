from unittest import mock

import pytest

from .. import evolution as test_module
from ..error import (
    InvalidUpdateInputError,
    NoChangeDetectedError,
    UnrecognizedIDFormatError,
    UnrecognizedVersionFormatError,
)
from ..evolution import validate_schema_update
from ..json_schema import JsonSchemaDocument
from ..schema import Schema, SchemaMetadata, UpdateInput, UpdateResult

AUTHOR = "did:ugra:abc123"


def make_schema(
    properties=None,
    required=None,
    additional_properties=None,
    description="Person",
    name="Person",
    version="1.0",
    author=AUTHOR,
    schema_id=None,
) -> Schema:
    if properties is None:
        properties = {"name": {"type": "string"}, "age": {"type": "integer"}}
    body = JsonSchemaDocument.deserialize(
        {
            key: value
            for key, value in {
                "type": "object",
                "description": description,
                "properties": properties,
                "required": required,
                "additionalProperties": additional_properties,
            }.items()
            if value is not None
        }
    )
    return Schema(
        SchemaMetadata(
            id=schema_id or f"{author};id=person;version={version}",
            version=version,
            name=name,
            author=author,
        ),
        body,
    )


def update(previous: Schema, updated: Schema) -> UpdateResult:
    return validate_schema_update(UpdateInput(previous, updated))


class TestPreconditions:
    @pytest.mark.parametrize(
        "update_input,message",
        [
            (None, "Input is not valid"),
            (UpdateInput(make_schema(), None), "Updated Schema is missing from input"),
            (
                UpdateInput(make_schema(), Schema(None, JsonSchemaDocument())),
                "Updated Schema is missing from input",
            ),
            (
                UpdateInput(make_schema(), Schema(SchemaMetadata(author=AUTHOR))),
                "Updated Schema is missing from input",
            ),
            (UpdateInput(None, make_schema()), "Previous Schema is missing from input"),
            (
                UpdateInput(Schema(SchemaMetadata(author=AUTHOR)), make_schema()),
                "Previous Schema is missing from input",
            ),
            (
                UpdateInput(make_schema(), make_schema(author="")),
                "Schema Author is invalid",
            ),
            (
                UpdateInput(make_schema(), make_schema(author="did:ugra:other")),
                "Schema Author is invalid",
            ),
        ],
    )
    def test_invalid_input(self, update_input, message):
        with pytest.raises(InvalidUpdateInputError) as excinfo:
            validate_schema_update(update_input)
        assert excinfo.value.message == message
        assert excinfo.value.result == UpdateResult(valid=False, message=message)

    def test_checked_in_order(self):
        with pytest.raises(InvalidUpdateInputError) as excinfo:
            validate_schema_update(UpdateInput(None, None))
        assert excinfo.value.message == "Updated Schema is missing from input"


class TestNoChange:
    def test_identical(self):
        with pytest.raises(NoChangeDetectedError) as excinfo:
            update(make_schema(), make_schema())
        assert excinfo.value.message == "Schema has not been updated"
        assert excinfo.value.result == UpdateResult(
            valid=False, message="Schema has not been updated"
        )

    def test_reordered_properties(self):
        reordered = {"age": {"type": "integer"}, "name": {"type": "string"}}
        with pytest.raises(NoChangeDetectedError):
            update(make_schema(), make_schema(properties=reordered))


class TestMajorRules:
    def test_property_removed(self):
        updated = make_schema(properties={"name": {"type": "string"}})
        result = update(make_schema(), updated)
        assert result == UpdateResult(
            valid=True, major_change=True, derived_version="2.0"
        )

    def test_property_type_changed(self):
        properties = {"name": {"type": "string"}, "age": {"type": "number"}}
        result = update(make_schema(), make_schema(properties=properties))
        assert result.major_change
        assert not result.minor_change

    def test_property_type_widened_to_list(self):
        properties = {
            "name": {"type": "string"},
            "age": {"type": ["integer", "null"]},
        }
        assert update(make_schema(), make_schema(properties=properties)).major_change

    def test_property_format_changed(self):
        previous = make_schema(
            properties={"born": {"type": "string", "format": "date"}}
        )
        updated = make_schema(
            properties={"born": {"type": "string", "format": "date-time"}}
        )
        assert update(previous, updated).major_change

    def test_required_became_optional(self):
        result = update(
            make_schema(required=["name", "age"]), make_schema(required=["name"])
        )
        assert result.major_change
        assert result.derived_version == "2.0"

    def test_additional_properties_disallowed(self):
        result = update(
            make_schema(additional_properties=True),
            make_schema(additional_properties=False),
        )
        assert result.major_change
        assert not result.minor_change

    def test_additional_properties_schema_counts_as_disallowed(self):
        result = update(
            make_schema(additional_properties=True),
            make_schema(additional_properties={"type": "string"}),
        )
        assert result.major_change


class TestMinorRules:
    def test_property_added(self):
        properties = {
            "name": {"type": "string"},
            "age": {"type": "integer"},
            "nickname": {"type": "string"},
        }
        result = update(make_schema(), make_schema(properties=properties))
        assert result == UpdateResult(
            valid=True, minor_change=True, derived_version="1.1"
        )

    def test_required_added(self):
        result = update(make_schema(), make_schema(required=["name"]))
        assert result.minor_change
        assert not result.major_change

    def test_additional_properties_allowed(self):
        result = update(
            make_schema(additional_properties=False),
            make_schema(additional_properties=True),
        )
        assert result.minor_change
        assert result.derived_version == "1.1"

    def test_absent_to_allowed(self):
        assert update(
            make_schema(), make_schema(additional_properties=True)
        ).minor_change

    def test_name_changed(self):
        assert update(make_schema(), make_schema(name="Human")).minor_change

    def test_description_changed(self):
        result = update(make_schema(), make_schema(description="A human"))
        assert result.minor_change
        assert result.derived_version == "1.1"


class TestVersionDerivation:
    def test_major_takes_priority(self):
        result = update(
            make_schema(required=["name", "age"]),
            make_schema(required=["name"], name="Human"),
        )
        assert result.major_change
        assert result.minor_change
        assert result.derived_version == "2.0"

    def test_minor_from_later_version(self):
        result = update(make_schema(version="3.9"), make_schema(name="Human"))
        assert result.derived_version == "3.10"

    def test_major_resets_minor(self):
        result = update(
            make_schema(version="3.9"),
            make_schema(properties={"name": {"type": "string"}}),
        )
        assert result.derived_version == "4.0"

    def test_version_from_id(self):
        previous = make_schema(version="2.4")
        previous.metadata.version = None
        assert update(previous, make_schema(name="Human")).derived_version == "2.5"

    def test_unparseable_version(self):
        previous = make_schema(version="one")
        with pytest.raises(UnrecognizedVersionFormatError):
            update(previous, make_schema(name="Human"))

    def test_no_version(self):
        previous = make_schema(schema_id=f"{AUTHOR};id=person")
        previous.metadata.version = None
        with pytest.raises(UnrecognizedIDFormatError):
            update(previous, make_schema(name="Human"))

    def test_monotonic(self):
        previous = make_schema(required=["name"])
        minor = update(previous, make_schema(required=["name", "age"]))
        both = update(
            previous,
            make_schema(
                required=["name", "age"],
                properties={"name": {"type": "number"}, "age": {"type": "integer"}},
            ),
        )
        assert minor.minor_change and not minor.major_change
        assert both.major_change and both.minor_change

    def test_rules_logged(self):
        with mock.patch.object(test_module, "LOGGER") as mock_logger:
            update(make_schema(), make_schema(name="Human"))
        mock_logger.debug.assert_called_once()
        assert ["name_changed"] in mock_logger.debug.call_args.args


class TestScenarios:
    def test_additional_properties_opened_and_property_added(self):
        previous = make_schema(
            properties={"name": {"type": "string"}},
            required=["name"],
            additional_properties=False,
        )
        updated = make_schema(
            properties={"name": {"type": "string"}, "nickname": {"type": "string"}},
            required=["name"],
            additional_properties=True,
        )
        assert update(previous, updated) == UpdateResult(
            valid=True, major_change=False, minor_change=True, derived_version="1.1"
        )

    def test_required_removed(self):
        result = update(
            make_schema(required=["name", "age"], version="1.3"),
            make_schema(required=["name"], version="1.3"),
        )
        assert result.major_change
        assert result.derived_version == "2.0"
