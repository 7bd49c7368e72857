"""
Exceptions raised while converting JSON schemas to GraphQL types.
"""

from typing import List, Optional


class SchemaConversionError(Exception):
    """
    Exception raised when a JSON schema cannot be converted to GraphQL.

    Attributes:
        message: Human-readable error description
        context: Optional attribute path where the error occurred
    """

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        full_message = message
        if context:
            full_message = f"{message} (context: {context})"
        super().__init__(full_message)


class UnsupportedScalarType(SchemaConversionError):
    """An attribute declares a type without a GraphQL mapping."""

    def __init__(self, type_name, attribute_path: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"A JSON Schema attribute type {type_name} on attribute {attribute_path} does not have a known GraphQL mapping",
            context=attribute_path)


class UnsupportedEnumBaseType(SchemaConversionError):
    """An attribute declares enumerated values on a non-string type."""

    def __init__(self, type_name, attribute_path: str) -> None:
        self.type_name = type_name
        super().__init__(
            f"The attribute {attribute_path} is not supported because only string enumerations can be converted, not {type_name}",
            context=attribute_path)


class UnknownTypeReference(SchemaConversionError):
    """
    A ``$ref`` names a type that is not registered in the context.

    Attributes:
        reference: The referenced schema id
        building_input: True if the input type was being built
        attribute_path: The attribute holding the reference
    """

    def __init__(self, reference: str, building_input: bool, attribute_path: str) -> None:
        self.reference = reference
        self.building_input = building_input
        self.attribute_path = attribute_path
        direction = 'input' if building_input else 'output'
        super().__init__(
            f"The referenced type {reference} ({direction}) is unknown in {attribute_path}",
            context=attribute_path)


class MissingEnumRegistration(SchemaConversionError):
    """Enum conversion code was requested for a path without an enum."""

    def __init__(self, attribute_path: str) -> None:
        self.attribute_path = attribute_path
        super().__init__(f"No enum has been built for attribute {attribute_path}", context=attribute_path)


class DuplicateEnumKey(SchemaConversionError):
    """Two enum values of one attribute map to the same enum key."""

    def __init__(self, key: str, values: List[str], attribute_path: str) -> None:
        self.key = key
        self.values = values
        self.attribute_path = attribute_path
        conflicting = ', '.join(repr(v) for v in values)
        super().__init__(f"The enum values {conflicting} all map to the key {key}", context=attribute_path)
