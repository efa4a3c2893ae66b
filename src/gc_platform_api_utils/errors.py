"""Error types raised by the library.

Each failure family is a single exception class tagged with a ``kind``
enumerant. The offending value (if any) travels as structured payload so
callers can match on ``error.kind`` instead of on nominal subclasses.
"""

from enum import Enum


class SchemaErrorKind(Enum):
    """Faults raised while converting definitions to MongoDB validators."""

    SPEC_TYPE_INVALID = "The Genesys Cloud Platform API specification is not valid, it should be an object."
    SPEC_DEFINITIONS_MISSING = 'The Genesys Cloud Platform API specification does not have a "definitions" property.'
    DEFINITION_NAME_TYPE_INVALID = "The Genesys Cloud Platform API definition name type is not valid, it should be a string."
    DEFINITION_NOT_FOUND = "The Genesys Cloud Platform API definition {value} was not found in the specification."
    DEFINITION_TYPE_INVALID = "The Genesys Cloud Platform API definition is not valid, it should be an object."
    FORMAT_VALUE_INVALID = 'The Genesys Cloud Platform API definition "format" property value {value} is not valid.'
    TYPE_VALUE_INVALID = 'The Genesys Cloud Platform API definition "type" property value {value} is not valid.'
    ADDITIONAL_PROPERTIES_TYPE_INVALID = 'The Genesys Cloud Platform API definition "additionalProperties" property value type is not valid, it should be an object or a boolean.'
    DEFINITION_URI_INVALID = "The Genesys Cloud Platform API definition URI {value} is not valid."
    DEFINITION_PROPERTY_INVALID = "The Genesys Cloud Platform API definition property {value} is not valid."


class PlatformErrorKind(Enum):
    """Faults raised while locating or downloading the API specification."""

    REGION_TYPE_INVALID = "The Genesys Cloud region type is not valid, it should be a string."
    REGION_INVALID = "The Genesys Cloud region {value} is not valid."
    TIMEOUT_TYPE_INVALID = "The timeout type is not valid, it should be a positive integer."
    TIMEOUT_OUT_OF_BOUNDS = "The timeout is out of bounds, it should be at least 1 millisecond."
    HTTP_CLIENT_ERROR = "An error occurred on the HTTP client side."
    SERVICES_ERROR = "An error occurred on the Genesys Cloud services side."


class GcPlatformApiUtilsError(Exception):
    """Base class for every error raised by gc_platform_api_utils."""

    def __init__(self, kind: Enum, value=None, detail: str | None = None):
        self.kind = kind
        self.value = value
        self.detail = detail
        message = kind.value.format(value=value)
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class SchemaConversionError(GcPlatformApiUtilsError):
    """A definition could not be converted to a MongoDB JSON schema."""

    def __init__(self, kind: SchemaErrorKind, value=None):
        super().__init__(kind, value=value)


class PlatformApiError(GcPlatformApiUtilsError):
    """The region or the remote specification could not be used."""

    def __init__(self, kind: PlatformErrorKind, value=None, detail: str | None = None):
        super().__init__(kind, value=value, detail=detail)
