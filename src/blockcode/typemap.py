"""Translate the editor's semantic type names into each language's lexicon.

Names missing from a table pass through unchanged, so user-defined types
(``Customer``, ``List<int>``) survive translation.
"""

from .models import Language

CSHARP_TYPES = {
    "string": "string",
    "int": "int",
    "long": "long",
    "float": "float",
    "double": "double",
    "decimal": "decimal",
    "bool": "bool",
    "boolean": "bool",
    "char": "char",
    "byte": "byte",
    "short": "short",
    "object": "object",
    "void": "void",
}

JAVA_TYPES = {
    "string": "String",
    "int": "int",
    "long": "long",
    "float": "float",
    "double": "double",
    "decimal": "BigDecimal",
    "bool": "boolean",
    "char": "char",
    "byte": "byte",
    "short": "short",
    "object": "Object",
    "void": "void",
}

# Generic type arguments must be reference types on the JVM.
JAVA_BOXED_TYPES = {
    "string": "String",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
    "decimal": "BigDecimal",
    "bool": "Boolean",
    "boolean": "Boolean",
    "char": "Character",
    "byte": "Byte",
    "short": "Short",
    "object": "Object",
}

# JSDoc names
JAVASCRIPT_TYPES = {
    "string": "string",
    "int": "number",
    "long": "number",
    "float": "number",
    "double": "number",
    "decimal": "number",
    "bool": "boolean",
    "char": "string",
    "byte": "number",
    "short": "number",
    "object": "Object",
    "void": "void",
}

# Type hints
PYTHON_TYPES = {
    "string": "str",
    "int": "int",
    "long": "int",
    "float": "float",
    "double": "float",
    "decimal": "Decimal",
    "bool": "bool",
    "char": "str",
    "byte": "int",
    "short": "int",
    "object": "object",
    "void": "None",
}

TYPE_TABLES = {
    Language.CSHARP: CSHARP_TYPES,
    Language.JAVA: JAVA_TYPES,
    Language.JAVASCRIPT: JAVASCRIPT_TYPES,
    Language.PYTHON: PYTHON_TYPES,
}


def translate_type(semantic_type: str, language: Language | str, boxed: bool = False) -> str:
    """Spell a semantic type in the target language.

    ``boxed`` selects the JVM reference types used inside generics; it has no
    effect for the other languages.
    """
    language = Language.resolve(language)
    if boxed and language is Language.JAVA:
        table = JAVA_BOXED_TYPES
    else:
        table = TYPE_TABLES[language]
    return table.get(semantic_type, semantic_type)
