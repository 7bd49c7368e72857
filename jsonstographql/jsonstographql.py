# coding: utf-8
"""
Module to convert JSON schema documents into GraphQL types.

Every schema document with an ``id`` becomes a GraphQL object type for query
results and a GraphQL input object type for arguments. Schemas with a
``switch`` become union types, which have no input counterpart. Field sets
and union members are resolved lazily, so schemas may reference each other
(or themselves) in any order as long as every referenced schema has been
converted into the same context before the fields are read.
"""

# pylint: disable=line-too-long

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional

from graphql import (GraphQLBoolean, GraphQLEnumType, GraphQLEnumValue, GraphQLError, GraphQLField,
                     GraphQLFloat, GraphQLInputField, GraphQLInputObjectType, GraphQLInt, GraphQLList,
                     GraphQLNamedType, GraphQLNonNull, GraphQLObjectType, GraphQLSchema, GraphQLString,
                     GraphQLUnionType, print_schema)

from jsonstographql.common import pascal, to_safe_enum_key
from jsonstographql.context import SchemaContext, new_context
from jsonstographql.enumtocode import get_all_enum_converters_code
from jsonstographql.errors import (DuplicateEnumKey, SchemaConversionError, UnknownTypeReference,
                                   UnsupportedEnumBaseType, UnsupportedScalarType)

JsonNode = Dict[str, 'JsonNode'] | List['JsonNode'] | str | bool | int | float | None

logger = logging.getLogger(__name__)

INPUT_SUFFIX = 'In'

# GraphQL does not allow types without fields
EMPTY_TYPE_PLACEHOLDER = '_typesWithoutFieldsAreNotAllowed_'

SCALAR_TYPES = {
    'string': GraphQLString,
    'integer': GraphQLInt,
    'number': GraphQLFloat,
    'boolean': GraphQLBoolean,
}


@dataclass(frozen=True)
class DroppedField:
    """Resolution result for an input field that references a union type."""
    reference: str
    attribute_path: str


class ConversionResult(NamedTuple):
    """The output and input types built for one schema document."""
    output: GraphQLNamedType
    input: Optional[GraphQLInputObjectType]


def map_basic_attribute_type(type_name, attribute_path: str):
    """Map a JSON schema primitive type name to a GraphQL scalar."""
    if isinstance(type_name, str) and type_name in SCALAR_TYPES:
        return SCALAR_TYPES[type_name]
    raise UnsupportedScalarType(type_name, attribute_path)


def build_enum_type(context: SchemaContext, attribute_path: str, enum_values: List[str]) -> GraphQLEnumType:
    """
    Build a GraphQL enum for an attribute and register it in the context.

    The enum keys are the sanitized values, each enum value carries the
    original JSON value. The key to value map is recorded in
    ``context.enum_maps`` so that conversion code can be generated later.

    :param context: The conversion context.
    :param attribute_path: Qualified attribute path, e.g. ``Order.status``.
    :param enum_values: The JSON enumeration values in declaration order.
    :return: The enum type.
    """
    graphql_to_json_map: Dict[str, str] = {}
    for value in enum_values:
        key = to_safe_enum_key(value)
        if key in graphql_to_json_map and graphql_to_json_map[key] != value:
            raise DuplicateEnumKey(key, [graphql_to_json_map[key], value], attribute_path)
        graphql_to_json_map[key] = value

    context.enum_maps[attribute_path] = graphql_to_json_map
    enum_type = GraphQLEnumType(
        pascal(attribute_path),
        {key: GraphQLEnumValue(value) for key, value in graphql_to_json_map.items()})
    context.enum_types[attribute_path] = enum_type
    logger.debug("Registered enum %s for %s", enum_type.name, attribute_path)
    return enum_type


def map_type(context: SchemaContext, attribute_definition: Dict[str, Any], attribute_path: str, building_input: bool = False):
    """
    Resolve a leaf attribute (enum, ``$ref`` or primitive) to a GraphQL type.

    Returns a ``DroppedField`` instead of a type when an input type refers to
    a union, since unions cannot be used as input.
    """
    enum_values = attribute_definition.get('enum')
    if enum_values:
        base_type = attribute_definition.get('type')
        if base_type != 'string':
            raise UnsupportedEnumBaseType(base_type, attribute_path)
        non_string = next((v for v in enum_values if not isinstance(v, str)), None)
        if non_string is not None:
            raise UnsupportedEnumBaseType(type(non_string).__name__, attribute_path)

        existing_enum = context.enum_types.get(attribute_path)
        if existing_enum is not None:
            return existing_enum
        return build_enum_type(context, attribute_path, enum_values)

    type_reference = attribute_definition.get('$ref')
    if type_reference:
        type_map = context.inputs if building_input else context.types
        referenced_type = type_map.get(type_reference)
        if referenced_type is None:
            if building_input and isinstance(context.types.get(type_reference), GraphQLUnionType):
                return DroppedField(type_reference, attribute_path)
            raise UnknownTypeReference(type_reference, building_input, attribute_path)
        return referenced_type

    return map_basic_attribute_type(attribute_definition.get('type'), attribute_path)


def attribute_type(context: SchemaContext, attribute_definition: Dict[str, Any], qualified_name: str, building_input: bool = False):
    """
    Resolve the GraphQL type of one attribute, recursing into arrays and
    nested objects. A dropped array item drops the whole attribute.
    """
    json_type = attribute_definition.get('type')
    if json_type == 'array':
        items = attribute_definition.get('items') or {}
        # referenced item types already have a name of their own
        item_name = qualified_name if '$ref' in items else f"{qualified_name}Item"
        element_type = attribute_type(context, items, item_name, building_input)
        if isinstance(element_type, DroppedField):
            return element_type
        return GraphQLList(GraphQLNonNull(element_type))
    if json_type == 'object':
        return object_from_schema(context, qualified_name, attribute_definition, building_input)
    return map_type(context, attribute_definition, qualified_name, building_input)


def object_from_schema(context: SchemaContext, type_name: str, schema: Dict[str, Any], building_input: bool = False):
    """
    Build a GraphQL object type, or input object type when ``building_input``
    is set, for an object schema.

    The fields are computed by a thunk that graphql-core calls on first
    access, because the referenced types may not be registered yet when the
    type is constructed (circular references).

    :param context: The conversion context.
    :param type_name: Schema id or qualified attribute path of the type.
    :param schema: The object schema.
    :param building_input: Build the input object type.
    :return: The GraphQL type.
    """
    field_class = GraphQLInputField if building_input else GraphQLField

    def get_fields():
        properties = schema.get('properties') or {}
        required = schema.get('required') or []
        fields = {}
        for attribute_name, attribute_definition in properties.items():
            qualified_name = f"{type_name}.{attribute_name}"
            field_type = attribute_type(context, attribute_definition, qualified_name, building_input)
            if isinstance(field_type, DroppedField):
                logger.debug("Dropped input field %s referencing union %s", qualified_name, field_type.reference)
                continue
            if attribute_name in required:
                field_type = GraphQLNonNull(field_type)
            fields[attribute_name] = field_class(field_type, description=attribute_definition.get('description'))
        if not fields:
            fields[EMPTY_TYPE_PLACEHOLDER] = field_class(GraphQLString)
        return fields

    name = pascal(f"{type_name}{INPUT_SUFFIX if building_input else ''}")
    description = schema.get('description')
    if building_input:
        return GraphQLInputObjectType(name, fields=get_fields, description=description)
    return GraphQLObjectType(name, fields=get_fields, description=description)


def build_object_type(context: SchemaContext, type_name: str, schema: Dict[str, Any]) -> ConversionResult:
    """Build the output and the input type of an object schema."""
    output = object_from_schema(context, type_name, schema)
    input_type = object_from_schema(context, type_name, schema, building_input=True)
    return ConversionResult(output=output, input=input_type)


def build_union_type(context: SchemaContext, type_name: str, schema: Dict[str, Any]) -> ConversionResult:
    """
    Build a GraphQL union from the ``then`` branches of a ``switch`` schema.

    GraphQL has no input unions, so the input half of the result is None.
    """
    def get_types():
        member_types = []
        for case_index, switch_case in enumerate(schema['switch']):
            case_name = f"{type_name}.switch[{case_index}]"
            then = switch_case.get('then') or {}
            if then.get('type') == 'object' and '$ref' not in then:
                member_type = object_from_schema(context, case_name, then)
            else:
                member_type = map_type(context, then, case_name)
            if not isinstance(member_type, GraphQLObjectType):
                raise UnsupportedScalarType(then.get('type') or member_type.name, case_name)
            member_types.append(member_type)
        return member_types

    output = GraphQLUnionType(pascal(type_name), types=get_types, description=schema.get('description'))
    return ConversionResult(output=output, input=None)


def convert(context: SchemaContext, schema: Dict[str, Any]) -> ConversionResult:
    """
    Convert one JSON schema document and register the result by its ``id``.

    :param context: The conversion context shared by the schema family.
    :param schema: The parsed schema document.
    :return: The output type and the input type (None for unions).
    """
    type_name = schema.get('id')
    if not type_name:
        raise SchemaConversionError("Only schemas with an id can be converted")

    if type_name in context.types:
        raise SchemaConversionError(f"The type {type_name} has already been converted", context=type_name)

    type_builder = build_union_type if schema.get('switch') else build_object_type
    result = type_builder(context, type_name, schema)

    context.types[type_name] = result.output
    if result.input is not None:
        context.inputs[type_name] = result.input
    logger.debug("Registered %s as %s", type_name, type(result.output).__name__)
    return result


def convert_all(context: SchemaContext, schemas: List[Dict[str, Any]]) -> List[ConversionResult]:
    """Convert a family of schema documents into one context, in order."""
    return [convert(context, schema) for schema in schemas]


def find_conversion_error(error: Optional[BaseException]) -> Optional[SchemaConversionError]:
    """Find the conversion error in the cause chain of a graphql-core error."""
    while error is not None:
        if isinstance(error, SchemaConversionError):
            return error
        error = error.__cause__
    return None


@contextmanager
def conversion_errors():
    """
    Re-raise conversion errors hidden by graphql-core.

    graphql-core re-raises any error of a fields or types thunk as a
    TypeError or GraphQLError chained to the original. Within this block the
    original SchemaConversionError is raised instead.
    """
    try:
        yield
    except (TypeError, GraphQLError) as error:
        conversion_error = find_conversion_error(error)
        if conversion_error is None:
            raise
        raise conversion_error from None


def resolve_fields(type_: GraphQLNamedType):
    """
    Resolve the lazy field set of an object or input type, or the members of
    a union, raising conversion errors unwrapped.
    """
    with conversion_errors():
        if isinstance(type_, GraphQLUnionType):
            return type_.types
        return type_.fields


def build_graphql_schema(context: SchemaContext) -> GraphQLSchema:
    """
    Assemble a GraphQL schema holding every registered type.

    Building the schema reads all field sets, so unresolved references fail
    here.
    """
    with conversion_errors():
        return GraphQLSchema(types=[*context.types.values(), *context.inputs.values()])


def print_graphql_schema(context: SchemaContext) -> str:
    """Render every registered type as GraphQL SDL."""
    return print_schema(build_graphql_schema(context))


def load_json_schemas(json_schema_path: str) -> List[Dict[str, Any]]:
    """Load a file holding one schema document or a list of them."""
    with open(json_schema_path, 'r', encoding='utf-8') as file:
        schemas: JsonNode = json.load(file)
    if isinstance(schemas, dict):
        return [schemas]
    if isinstance(schemas, list) and all(isinstance(s, dict) for s in schemas):
        return schemas
    raise ValueError(f"Expected a JSON schema object or a list of schema objects in {json_schema_path}")


def convert_jsons_to_graphql(json_schema_paths, graphql_schema_path, enum_code_path=None, language='python'):
    """
    Convert JSON schema files to a GraphQL schema file.

    All files are converted into one context so that they can reference each
    other.

    :param json_schema_paths: Path or list of paths to the JSON schema files.
    :param graphql_schema_path: Path to save the GraphQL schema file.
    :param enum_code_path: Optional path to save the enum conversion functions.
    :param language: Language of the enum conversion functions.
    """
    if isinstance(json_schema_paths, str):
        json_schema_paths = [json_schema_paths]
    if not json_schema_paths:
        raise ValueError("At least one input file is required")

    context = new_context()
    for json_schema_path in json_schema_paths:
        convert_all(context, load_json_schemas(json_schema_path))

    graphql_content = print_graphql_schema(context)
    with open(graphql_schema_path, 'w', encoding='utf-8') as file:
        file.write(graphql_content)
        if not graphql_content.endswith('\n'):
            file.write('\n')

    if enum_code_path:
        with open(enum_code_path, 'w', encoding='utf-8') as file:
            file.write(get_all_enum_converters_code(context, language))
