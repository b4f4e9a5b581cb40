"""The editor's element palette: categories, labels and new-element defaults.

The palette is the closed vocabulary of element types. Labels follow the
target language (``print`` rather than ``Console.WriteLine`` for Python).
"""

import time
from dataclasses import dataclass

from .models import CodeElement, Language, Position
from .utilities import UTILITY_TYPES


@dataclass(frozen=True)
class PaletteItem:
    type: str
    label: str


@dataclass(frozen=True)
class Category:
    name: str
    items: tuple[PaletteItem, ...]


def _category(name: str, *items: tuple[str, str]) -> Category:
    return Category(name, tuple(PaletteItem(t, label) for t, label in items))


CATEGORIES: tuple[Category, ...] = (
    _category(
        "Output & Debug",
        ("console.writeline", "Console.WriteLine"),
        ("console.write", "Console.Write"),
        ("console.readkey", "Console.ReadKey"),
        ("console.readline", "Console.ReadLine"),
        ("debug.print", "Debug.Print"),
        ("trace.write", "Trace.Write"),
    ),
    _category(
        "Control Flow",
        ("for", "For Loop"),
        ("foreach", "ForEach Loop"),
        ("while", "While Loop"),
        ("do-while", "Do-While Loop"),
        ("switch", "Switch Statement"),
        ("break", "Break"),
        ("continue", "Continue"),
    ),
    _category(
        "Conditionals",
        ("if", "If Statement"),
        ("if-else", "If-Else"),
        ("if-else-if", "If-Else If"),
        ("ternary", "Ternary Operator"),
    ),
    _category(
        "Variables & Data",
        ("variable", "Variable"),
        ("constant", "Constant"),
        ("array", "Array"),
        ("list", "List"),
        ("dictionary", "Dictionary"),
        ("return", "Return Statement"),
    ),
    _category(
        "Primitive Types",
        ("string", "String"),
        ("int", "Integer"),
        ("long", "Long"),
        ("float", "Float"),
        ("double", "Double"),
        ("decimal", "Decimal"),
        ("bool", "Boolean"),
        ("char", "Character"),
        ("byte", "Byte"),
        ("short", "Short"),
    ),
    _category(
        "Math & Operations",
        ("math.sqrt", "Math.Sqrt"),
        ("math.pow", "Math.Pow"),
        ("math.abs", "Math.Abs"),
        ("math.min", "Math.Min"),
        ("math.max", "Math.Max"),
        ("random", "Random"),
    ),
    _category(
        "String Operations",
        ("string.length", "String.Length"),
        ("string.substring", "Substring"),
        ("string.split", "Split"),
        ("string.replace", "Replace"),
        ("string.tolower", "ToLower"),
        ("string.toupper", "ToUpper"),
        ("string.trim", "Trim"),
        ("string.contains", "Contains"),
    ),
    _category(
        "Exception Handling",
        ("try-catch", "Try-Catch"),
        ("try-catch-finally", "Try-Catch-Finally"),
        ("throw", "Throw Exception"),
    ),
    _category(
        "Utility Functions",
        *((t, " ".join(word.capitalize() for word in t.split("-"))) for t in UTILITY_TYPES),
    ),
)

ELEMENT_TYPES: frozenset[str] = frozenset(
    item.type for category in CATEGORIES for item in category.items
)

_DEFAULT_LABELS = {item.type: item.label for category in CATEGORIES for item in category.items}

# type -> (csharp, java, javascript, python)
_LANGUAGE_LABELS: dict[str, tuple[str, str, str, str]] = {
    "console.writeline": ("Console.WriteLine", "System.out.println", "console.log", "print"),
    "console.write": ("Console.Write", "System.out.print", "process.stdout.write", "print"),
    "console.readkey": ("Console.ReadKey", "Scanner.nextLine", "fs.readSync", "input"),
    "console.readline": ("Console.ReadLine", "Scanner.nextLine", "fs.readFileSync", "input"),
    "debug.print": ("Debug.Print", "System.err.println", "console.debug", "print"),
    "trace.write": ("Trace.Write", "System.err.print", "console.trace", "print"),
    "foreach": ("ForEach Loop", "Enhanced For", "For...of Loop", "For...in Loop"),
    "do-while": ("Do-While Loop", "Do-While Loop", "Do-While Loop", "While True"),
    "switch": ("Switch Statement", "Switch Statement", "Switch Statement", "Match Statement"),
    "if-else-if": ("If-Else If", "If-Else If", "If-Else If", "If-Elif-Else"),
    "ternary": ("Ternary Operator", "Ternary Operator", "Ternary Operator", "Conditional Expression"),
    "variable": ("Variable", "Variable", "Let/Const", "Variable"),
    "constant": ("Constant", "Final Variable", "Const", "Constant"),
    "array": ("Array", "Array", "Array", "List"),
    "list": ("List", "ArrayList", "Array", "List"),
    "dictionary": ("Dictionary", "HashMap", "Object/Map", "Dictionary"),
    "try-catch": ("Try-Catch", "Try-Catch", "Try-Catch", "Try-Except"),
    "try-catch-finally": ("Try-Catch-Finally", "Try-Catch-Finally", "Try-Catch-Finally", "Try-Except-Finally"),
    "throw": ("Throw Exception", "Throw Exception", "Throw Error", "Raise Exception"),
}

_LABEL_COLUMNS = {
    Language.CSHARP: 0,
    Language.JAVA: 1,
    Language.JAVASCRIPT: 2,
    Language.PYTHON: 3,
}

DEFAULT_CONTENT = {
    "console.writeline": 'Console.WriteLine("Hello World");',
    "console.write": 'Console.Write("Hello");',
    "for": "for (int i = 0; i < 10; i++)",
    "while": "while (condition)",
    "if": "if (condition)",
    "if-else": "if (condition) { } else { }",
    "if-else-if": "if (condition1) { } else if (condition2) { } else { }",
    "variable": "var myVariable = value;",
    "return": "return value;",
    "string": 'string myString = "";',
    "int": "int myInt = 0;",
    "bool": "bool myBool = false;",
    "double": "double myDouble = 0.0;",
}

DEFAULT_PROPERTIES = {
    "console.writeline": {"message": "Hello World"},
    "console.write": {"message": "Hello"},
    "for": {"variable": "i", "start": "0", "end": "10", "increment": "1"},
    "while": {"condition": "condition"},
    "if": {"condition": "condition"},
    "variable": {"type": "var", "name": "myVariable", "value": "value"},
    "return": {"value": "value"},
}


def label_for(element_type: str, language: Language | str = Language.CSHARP) -> str:
    """Palette label of ``element_type`` as shown for ``language``."""
    labels = _LANGUAGE_LABELS.get(element_type)
    if labels:
        return labels[_LABEL_COLUMNS[Language.resolve(language)]]
    return _DEFAULT_LABELS.get(element_type, element_type)


def create_element(
    element_type: str,
    position: Position | None = None,
    timestamp_ms: int | None = None,
) -> CodeElement:
    """A freshly dropped element with its default content and properties."""
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return CodeElement(
        id=f"{element_type}-{timestamp_ms}",
        type=element_type,
        content=DEFAULT_CONTENT.get(element_type, element_type),
        properties=dict(DEFAULT_PROPERTIES.get(element_type, {})),
        position=position,
    )
