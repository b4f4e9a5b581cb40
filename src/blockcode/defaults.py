"""Default property values for every element type, in one place.

The table is shared by all languages. Entries that are spelled differently per
language are wrapped in a marker: ``Keyword`` for true/false/null and
``Identifier`` for default variable names, which Python writes in snake_case.
Literals that differ by more than spelling live in ``LANGUAGE_DEFAULTS``.
"""

import re
from typing import Any

from .models import CodeElement, Language


class Keyword(str):
    """A literal keyword: true, false or null."""


class Identifier(str):
    """A default variable name, written in camelCase."""


TRUE = Keyword("true")
FALSE = Keyword("false")
NULL = Keyword("null")

PYTHON_KEYWORDS = {"true": "True", "false": "False", "null": "None"}

_OUTPUT = {"message": ""}
_STRING_OP = {"variable": Identifier("myString")}

DEFAULTS: dict[str, dict[str, str]] = {
    # Output & debug
    "console.writeline": _OUTPUT,
    "console.write": _OUTPUT,
    "debug.print": _OUTPUT,
    "trace.write": _OUTPUT,
    # Control flow
    "for": {"variable": "i", "start": "0", "end": "10", "increment": "1"},
    "foreach": {"type": "var", "item": "item", "collection": "collection"},
    "while": {"condition": TRUE},
    "do-while": {"condition": TRUE},
    "switch": {"variable": "variable", "caseValue": "1"},
    # Conditionals
    "if": {"condition": TRUE},
    "if-else": {"condition": TRUE},
    "if-else-if": {"condition1": TRUE, "condition2": TRUE},
    "ternary": {"condition": TRUE, "trueValue": "value1", "falseValue": "value2"},
    # Variables & data
    "variable": {"type": "var", "name": Identifier("myVariable"), "value": '""'},
    "constant": {"type": "int", "name": "MY_CONSTANT", "value": "0"},
    "array": {"type": "int", "name": Identifier("myArray"), "size": "10"},
    "list": {"type": "int", "name": Identifier("myList")},
    "dictionary": {"keyType": "string", "valueType": "int", "name": Identifier("myDict")},
    "return": {"value": NULL},
    # Primitive types
    "string": {"name": Identifier("myString"), "value": '""'},
    "int": {"name": Identifier("myInt"), "value": "0"},
    "long": {"name": Identifier("myLong"), "value": "0L"},
    "float": {"name": Identifier("myFloat"), "value": "0.0f"},
    "double": {"name": Identifier("myDouble"), "value": "0.0"},
    "decimal": {"name": Identifier("myDecimal"), "value": "0.0m"},
    "bool": {"name": Identifier("myBool"), "value": FALSE},
    "char": {"name": Identifier("myChar"), "value": "'a'"},
    "byte": {"name": Identifier("myByte"), "value": "0"},
    "short": {"name": Identifier("myShort"), "value": "0"},
    # Math
    "math.sqrt": {"value": "16"},
    "math.pow": {"base": "2", "exponent": "3"},
    "math.abs": {"type": "int", "value": "-5"},
    "math.min": {"type": "int", "value1": "5", "value2": "10"},
    "math.max": {"type": "int", "value1": "5", "value2": "10"},
    "random": {"min": "1", "max": "100"},
    # String operations
    "string.length": _STRING_OP,
    "string.substring": {**_STRING_OP, "start": "0", "length": "5"},
    "string.split": {**_STRING_OP, "delimiter": ","},
    "string.replace": {**_STRING_OP, "oldValue": "old", "newValue": "new"},
    "string.tolower": _STRING_OP,
    "string.toupper": _STRING_OP,
    "string.trim": _STRING_OP,
    "string.contains": {**_STRING_OP, "value": "search"},
    # Exceptions
    "throw": {"exceptionType": "Exception", "message": "An error occurred"},
}

LANGUAGE_DEFAULTS: dict[Language, dict[str, dict[str, str]]] = {
    Language.CSHARP: {},
    Language.JAVA: {
        "variable": {"type": "String"},
        "decimal": {"value": '"0.0"'},
        "throw": {"exceptionType": "RuntimeException"},
    },
    Language.JAVASCRIPT: {
        "long": {"value": "0"},
        "float": {"value": "0.0"},
        "decimal": {"value": "0.0"},
        "throw": {"exceptionType": "Error"},
    },
    Language.PYTHON: {
        "long": {"value": "0"},
        "float": {"value": "0.0"},
        "decimal": {"value": '"0.0"'},
    },
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def spell(value: str, language: Language) -> str:
    """Apply the language's spelling to a marked default."""
    if language is Language.PYTHON:
        if isinstance(value, Keyword):
            return PYTHON_KEYWORDS[value]
        if isinstance(value, Identifier):
            return snake_case(value)
    return str(value)


def resolve(element_type: str, field: str, language: Language) -> str:
    """Default for one field of an element type ("" when there is none)."""
    override = LANGUAGE_DEFAULTS[language].get(element_type, {})
    if field in override:
        return spell(override[field], language)
    return spell(DEFAULTS.get(element_type, {}).get(field, ""), language)


def format_scalar(value: Any, language: Language) -> str:
    if isinstance(value, bool):
        return spell(TRUE if value else FALSE, language)
    return str(value)


def prop(element: CodeElement, field: str, language: Language) -> str:
    """The element's value for ``field``, or the default when it is unset.

    ``None`` and the empty string count as unset.
    """
    value = element.properties.get(field)
    if value is None or value == "":
        return resolve(element.type, field, language)
    return format_scalar(value, language)
