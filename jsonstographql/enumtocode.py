# coding: utf-8
"""
Module to generate functions that convert GraphQL enum keys back to the
original JSON enumeration values.
"""

import ast
import json
from typing import Dict

from jsonstographql.common import camel, process_template
from jsonstographql.context import SchemaContext
from jsonstographql.errors import MissingEnumRegistration

SUPPORTED_LANGUAGES = ['python', 'javascript']


def converter_function_name(attribute_path: str) -> str:
    """Name of the conversion function for an enum attribute."""
    return camel(f"convert{attribute_path}FromGraphQL")


def build_python_converter(function_name: str, attribute_path: str, value_map: Dict[str, str]) -> ast.FunctionDef:
    """
    Build the syntax tree of a Python conversion function.

    The function matches its ``value`` argument against every enum key and
    returns the JSON value recorded for it. Unknown keys raise ValueError.
    """
    value = ast.Name(id='value', ctx=ast.Load())
    cases = [
        ast.match_case(
            pattern=ast.MatchValue(value=ast.Constant(value=key)),
            guard=None,
            body=[ast.Return(value=ast.Constant(value=json_value))])
        for key, json_value in value_map.items()
    ]
    error_message = ast.JoinedStr(values=[
        ast.Constant(value=f"Unknown {attribute_path} value: "),
        ast.FormattedValue(value=ast.Name(id='value', ctx=ast.Load()), conversion=ord('r'), format_spec=None),
    ])
    cases.append(ast.match_case(
        pattern=ast.MatchAs(pattern=None, name=None),
        guard=None,
        body=[ast.Raise(
            exc=ast.Call(func=ast.Name(id='ValueError', ctx=ast.Load()), args=[error_message], keywords=[]),
            cause=None)]))

    function = ast.FunctionDef(
        name=function_name,
        args=ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg='value', annotation=None, type_comment=None)],
            vararg=None,
            kwonlyargs=[],
            kw_defaults=[],
            kwarg=None,
            defaults=[]),
        body=[ast.Match(subject=value, cases=cases)],
        decorator_list=[],
        returns=None,
        type_comment=None)
    return ast.fix_missing_locations(function)


def get_convert_enum_from_graphql_code(context: SchemaContext, attribute_path: str, language: str = 'python') -> str:
    """
    Generate the source of a function converting the keys of the enum built
    for ``attribute_path`` back to the JSON values.

    :param context: The conversion context holding the enum.
    :param attribute_path: Qualified attribute path, e.g. ``Order.status``.
    :param language: ``python`` or ``javascript``.
    :return: The function source.
    """
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")
    value_map = context.enum_maps.get(attribute_path)
    if value_map is None:
        raise MissingEnumRegistration(attribute_path)

    function_name = converter_function_name(attribute_path)
    if language == 'python':
        return ast.unparse(build_python_converter(function_name, attribute_path, value_map)) + '\n'
    return process_template(
        "enumtocode/convert_from_graphql.js.jinja",
        function_name=function_name,
        cases=[(json.dumps(key), json.dumps(json_value)) for key, json_value in value_map.items()],
        error_message=json.dumps(f"Unknown {attribute_path} value: "))


def get_all_enum_converters_code(context: SchemaContext, language: str = 'python') -> str:
    """Generate the conversion functions of all enums in the context."""
    separator = '\n\n' if language == 'python' else '\n'
    return separator.join(
        get_convert_enum_from_graphql_code(context, attribute_path, language)
        for attribute_path in context.enum_maps)
