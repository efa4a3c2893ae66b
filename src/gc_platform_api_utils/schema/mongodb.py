"""MongoDB JSON schema generator.

Converts a Genesys Cloud Platform API definition (Swagger 2.0 dialect) into
a ``$jsonSchema`` validator document. ``$ref`` references are inlined and
reference cycles are broken with a permissive placeholder so that
self-referential definitions still produce a usable validator.
"""

import logging
import re
from collections.abc import Mapping

from gc_platform_api_utils.errors import SchemaConversionError, SchemaErrorKind
from gc_platform_api_utils.schema.mapper import map_bson_type

logger = logging.getLogger(__name__)

DEFINITION_URI = re.compile(r"^#/definitions/(\w+)$")

# "format" and "allowEmptyValue" are read by the "type" handler.
IGNORED_KEYS = (
    "format",
    "allowEmptyValue",
    "readOnly",
    "position",
    "example",
    "x-genesys-entity-type",
    "x-genesys-search-fields",
)

PASSTHROUGH_KEYS = (
    "minimum",
    "maximum",
    "minItems",
    "maxItems",
    "minLength",
    "maxLength",
    "pattern",
    "required",
    "uniqueItems",
    "enum",
    "description",
)


def _circular_reference_schema() -> dict:
    return {"bsonType": "object", "additionalProperties": True}


class MongoDBSchemaGenerator:
    """Resolves definitions of one specification into MongoDB validators.

    An instance holds the resolution stack of a single conversion, so it
    must not be shared between concurrent calls.
    """

    def __init__(self, spec: Mapping):
        self.definitions = spec["definitions"]
        self._stack: set[int] = set()
        self._handlers = {
            "type": self._parse_type,
            "properties": self._parse_properties,
            "items": self._parse_items,
            "additionalProperties": self._parse_additional_properties,
            "$ref": self._parse_ref,
        }
        for key in IGNORED_KEYS:
            self._handlers[key] = self._ignore
        for key in PASSTHROUGH_KEYS:
            self._handlers[key] = self._passthrough

    def generate(self, definition_name: str) -> dict:
        """Return the ``$jsonSchema`` validator document for a named definition."""
        if definition_name not in self.definitions:
            raise SchemaConversionError(SchemaErrorKind.DEFINITION_NOT_FOUND, definition_name)
        return {"$jsonSchema": self.parse(self.definitions[definition_name])}

    def parse(self, definition: Mapping) -> dict:
        """Resolve a single definition node into a validator node."""
        if not isinstance(definition, Mapping):
            raise SchemaConversionError(SchemaErrorKind.DEFINITION_TYPE_INVALID)

        node_id = id(definition)
        if node_id in self._stack:
            logger.debug("Circular reference detected, substituting a permissive object schema")
            return _circular_reference_schema()

        self._stack.add(node_id)
        try:
            parsed: dict = {}
            for key, value in definition.items():
                handler = self._handlers.get(key)
                if handler is None:
                    raise SchemaConversionError(SchemaErrorKind.DEFINITION_PROPERTY_INVALID, key)
                handler(definition, key, value, parsed)
        finally:
            self._stack.discard(node_id)
        return parsed

    def _ignore(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        pass

    def _passthrough(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        parsed[key] = value

    def _parse_type(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        parsed["bsonType"] = map_bson_type(definition)

    def _parse_properties(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        if not isinstance(value, Mapping):
            raise SchemaConversionError(SchemaErrorKind.DEFINITION_TYPE_INVALID)
        parsed["properties"] = {name: self.parse(prop) for name, prop in value.items()}

    def _parse_items(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        parsed["items"] = self.parse(value)

    def _parse_additional_properties(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        if isinstance(value, bool):
            parsed["additionalProperties"] = value
        elif isinstance(value, Mapping):
            parsed["additionalProperties"] = self.parse(value)
        else:
            raise SchemaConversionError(SchemaErrorKind.ADDITIONAL_PROPERTIES_TYPE_INVALID)

    def _parse_ref(self, definition: Mapping, key: str, value, parsed: dict) -> None:
        match = DEFINITION_URI.match(value) if isinstance(value, str) else None
        if match is None:
            raise SchemaConversionError(SchemaErrorKind.DEFINITION_URI_INVALID, value)

        name = match.group(1)
        if name not in self.definitions:
            raise SchemaConversionError(SchemaErrorKind.DEFINITION_NOT_FOUND, name)

        # Referenced fields win over anything already parsed on this node.
        parsed.update(self.parse(self.definitions[name]))


def generate_mongodb_json_schema(spec, definition_name) -> dict:
    """Generate a MongoDB JSON schema from a Platform API definition.

    Args:
        spec: The parsed Platform API specification, a mapping holding a
            ``definitions`` mapping of definition name to definition node.
        definition_name: Name of the definition to convert.

    Returns:
        A validator document of the form ``{"$jsonSchema": {...}}``.

    Raises:
        SchemaConversionError: If the specification, the name or any
            reachable definition is not valid.
    """
    if not isinstance(spec, Mapping):
        raise SchemaConversionError(SchemaErrorKind.SPEC_TYPE_INVALID)
    if "definitions" not in spec:
        raise SchemaConversionError(SchemaErrorKind.SPEC_DEFINITIONS_MISSING)
    if not isinstance(definition_name, str):
        raise SchemaConversionError(SchemaErrorKind.DEFINITION_NAME_TYPE_INVALID)

    logger.debug("Generating MongoDB JSON schema for definition %s", definition_name)
    return MongoDBSchemaGenerator(spec).generate(definition_name)


resolve = generate_mongodb_json_schema
