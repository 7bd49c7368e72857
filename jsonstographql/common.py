"""
Common naming utilities for jsonstographql.
"""

# pylint: disable=line-too-long

import logging
import os
import re
from typing import Dict

import jinja2

logger = logging.getLogger(__name__)

# Comparison operators would otherwise all collapse to underscores
COMPARISON_ENUM_KEYS: Dict[str, str] = {
    '<': 'LT',
    '<=': 'LTE',
    '>=': 'GTE',
    '>': 'GT',
}


def to_safe_enum_key(value: str) -> str:
    """
    Convert a free-form enumeration value into a symbol-safe enum key.

    Values starting with a digit are prefixed with ``VALUE_``, the comparison
    operators map to mnemonic keys and any other character outside of
    ``[_a-zA-Z0-9]`` is replaced by an underscore. The result is upper case.

    Args:
        value (str): The original enumeration value.

    Returns:
        str: The enum key.
    """
    if value in COMPARISON_ENUM_KEYS:
        return COMPARISON_ENUM_KEYS[value]
    if not value:
        return 'EMPTY'
    if re.match(r'^[0-9]', value):
        value = 'VALUE_' + value
    key = re.sub(r'[^_a-zA-Z0-9]', '_', value).upper()
    if key != value.upper():
        logger.debug("Enum value %r was rewritten to key %s", value, key)
    return key


def pascal(string):
    """
    Convert an attribute path to PascalCase.

    Dots, brackets and any other non-alphanumeric characters separate words,
    so ``Order.status`` becomes ``OrderStatus`` and ``Shape.switch[0]``
    becomes ``ShapeSwitch0``. The remainder of each word is kept as is.
    An underscore at the beginning of the string is preserved.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in PascalCase.
    """
    if not string:
        return string
    words = [word for word in re.split(r'[^a-zA-Z0-9]+', string) if word]
    result = ''.join(word[0].upper() + word[1:] for word in words)
    if string[0] == '_':
        result = '_' + result
    return result


def camel(string):
    """
    Convert an attribute path to camelCase.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in camelCase.
    """
    result = pascal(string)
    if not result:
        return result
    if result[0] == '_':
        return '_' + camel(result[1:])
    return result[0].lower() + result[1:]


def process_template(file_path: str, **kvargs) -> str:
    """
    Process a file as a Jinja2 template with the given object as input.

    Args:
        file_path (str): The path to the template, relative to the package.
        **kvargs: The keyword arguments to pass to the template.

    Returns:
        str: The processed template as a string.
    """
    file_dir = os.path.dirname(__file__)
    template_loader = jinja2.FileSystemLoader(searchpath=file_dir)
    template_env = jinja2.Environment(loader=template_loader, keep_trailing_newline=True)
    template_env.filters['pascal'] = pascal
    template_env.filters['camel'] = camel

    template = template_env.get_template(file_path)
    return template.render(**kvargs)
