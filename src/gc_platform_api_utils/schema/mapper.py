"""Genesys Cloud data type / format to BSON type mapping."""

from gc_platform_api_utils.errors import SchemaConversionError, SchemaErrorKind

TYPES_TO_BSON_TYPES = {
    "object": "object",
    "array": "array",
    "string": "string",
    "number": "double",
    "integer": "long",
    "boolean": "bool",
}

# A "format" overrides the "type" it accompanies.
FORMATS_TO_BSON_TYPES = {
    "date-time": "date",
    "local-date-time": "date",
    "date": "string",
    "local-time": "string",
    "float": "double",
    "double": "double",
    "int32": "int",
    "int64": "long",
    "uri": "string",
    "url": "string",
}

NULL_BSON_TYPE = "null"


def map_bson_type(definition: dict) -> str | list[str]:
    """Return the ``bsonType`` for a definition carrying a ``type`` field.

    Nullable definitions (those with ``allowEmptyValue``) get a two element
    list ending in ``"null"``.
    """
    if "format" in definition:
        fmt = definition["format"]
        if not isinstance(fmt, str) or fmt not in FORMATS_TO_BSON_TYPES:
            raise SchemaConversionError(SchemaErrorKind.FORMAT_VALUE_INVALID, fmt)
        bson_type = FORMATS_TO_BSON_TYPES[fmt]
    else:
        data_type = definition["type"]
        if not isinstance(data_type, str) or data_type not in TYPES_TO_BSON_TYPES:
            raise SchemaConversionError(SchemaErrorKind.TYPE_VALUE_INVALID, data_type)
        bson_type = TYPES_TO_BSON_TYPES[data_type]

    if "allowEmptyValue" in definition:
        return [bson_type, NULL_BSON_TYPE]
    return bson_type
