"""Python generator: a module holding one class.

Blocks are delimited by indentation, so an empty body is written as ``pass``.
Python has no hoisting step: a utility element becomes a nested function
definition at the point where it was dropped.
"""

from ..models import CodeElement, Language, Method
from .base import BaseGenerator

PROLOGUE = [
    "from __future__ import annotations",
    "",
    "import math",
    "import random",
    "import re",
    "import sys",
    "from datetime import datetime",
    "from decimal import Decimal",
]


class PythonGenerator(BaseGenerator):
    """Python source generator."""

    language = Language.PYTHON
    comment_prefix = "#"

    STATEMENTS = {
        # Output & debug
        "console.writeline": "print($quoted_message)",
        "console.write": 'print($quoted_message, end="")',
        "console.readkey": "input()",
        "console.readline": "user_input = input()",
        "debug.print": "print($quoted_message, file=sys.stderr)",
        "trace.write": 'print($quoted_message, end="", file=sys.stderr)',
        # Control
        "break": "break",
        "continue": "continue",
        "ternary": "result = $trueValue if $condition else $falseValue",
        # Variables & data
        "variable": "$name = $value",
        "constant": "$name = $value",
        "array": "$name = [0] * $size",
        "list": "$name = []",
        "dictionary": "$name = {}",
        "return": "return $value",
        # Primitive types
        "string": "$name = $value",
        "int": "$name = $value",
        "long": "$name = $value",
        "float": "$name = $value",
        "double": "$name = $value",
        "decimal": "$name = Decimal($value)",
        "bool": "$name = $value",
        "char": "$name = $value",
        "byte": "$name = $value",
        "short": "$name = $value",
        # Math
        "math.sqrt": "result = math.sqrt($value)",
        "math.pow": "result = math.pow($base, $exponent)",
        "math.abs": "result = abs($value)",
        "math.min": "result = min($value1, $value2)",
        "math.max": "result = max($value1, $value2)",
        "random": "random_number = random.randint($min, $max)",
        # Strings
        "string.length": "length = len($variable)",
        "string.substring": "result = $variable[$start:$start + $length]",
        "string.split": "parts = $variable.split($quoted_delimiter)",
        "string.replace": "result = $variable.replace($quoted_oldValue, $quoted_newValue)",
        "string.tolower": "result = $variable.lower()",
        "string.toupper": "result = $variable.upper()",
        "string.trim": "result = $variable.strip()",
        "string.contains": "contains = $quoted_value in $variable",
        # Exceptions
        "try-catch": """\
try:
    # Code that might raise an exception
    pass
except Exception as ex:
    # Handle exception
    pass""",
        "try-catch-finally": """\
try:
    # Code that might raise an exception
    pass
except Exception as ex:
    # Handle exception
    pass
finally:
    # Cleanup code
    pass""",
        "throw": "raise $exceptionType($quoted_message)",
    }

    HEADERS = {
        "for": "for $variable in $range",
        "foreach": "for $item in $collection",
        "while": "while $condition",
        "do": "while True",
        "do-while": "if not ($condition):",
        "if": "if $condition",
        "if-first": "if $condition1",
        "else-if": "elif $condition2",
        "else": "else",
        "switch": "match $variable",
        # a guard compares by value; a bare name would be a capture pattern
        "case": "case _ if $variable == $caseValue",
    }

    UTILITIES = {
        "is-even": """\
def is_even(number):
    return number % 2 == 0""",
        "is-odd": """\
def is_odd(number):
    return number % 2 != 0""",
        "is-prime": """\
def is_prime(number):
    if number < 2:
        return False
    for i in range(2, int(number ** 0.5) + 1):
        if number % i == 0:
            return False
    return True""",
        "factorial": """\
def factorial(n):
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result""",
        "fibonacci": """\
def fibonacci(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a""",
        "reverse-string": """\
def reverse_string(text):
    return text[::-1]""",
        "is-palindrome": """\
def is_palindrome(text):
    cleaned = text.replace(" ", "").lower()
    return cleaned == cleaned[::-1]""",
        "swap": """\
def swap(a, b):
    return b, a""",
        "decimal-to-binary": """\
def decimal_to_binary(number):
    return format(number, "b")""",
        "binary-to-decimal": """\
def binary_to_decimal(binary):
    return int(binary, 2)""",
        "decimal-to-hex": """\
def decimal_to_hex(number):
    return format(number, "X")""",
        "celsius-to-fahrenheit": """\
def celsius_to_fahrenheit(celsius):
    return celsius * 9 / 5 + 32""",
        "fahrenheit-to-celsius": """\
def fahrenheit_to_celsius(fahrenheit):
    return (fahrenheit - 32) * 5 / 9""",
        "validate-email": r"""def validate_email(email):
    return re.fullmatch(r"[^@\s]+@[^@\s]+\.[^@\s]+", email) is not None""",
        "validate-password": """\
def validate_password(password):
    return (
        len(password) >= 8
        and any(c.isupper() for c in password)
        and any(c.islower() for c in password)
        and any(c.isdigit() for c in password)
    )""",
        "validate-url": r"""def validate_url(url):
    return re.fullmatch(r"https?://[^\s/]+(/\S*)?", url) is not None""",
        "validate-date": """\
def validate_date(date):
    try:
        datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        return False
    return True""",
        "is-numeric": """\
def is_numeric(text):
    try:
        float(text)
    except ValueError:
        return False
    return True""",
    }

    @property
    def hoists_utilities(self) -> bool:
        return False

    def generate(self) -> str:
        lines: list[str] = []
        if self.project.namespace:
            lines.append(f"# Module: {self.project.namespace}")
        lines += PROLOGUE + ["", ""]
        lines.append(f"class {self.project.class_name}:")
        lines += self._members(1) or self._lines(1, "pass")
        return "\n".join(lines) + "\n"

    def utility_name(self, utility_type: str) -> str:
        return utility_type.replace("-", "_")

    def _clauses(
        self,
        depth: int,
        clauses: list[tuple[str, list[str]]],
        trailer: str | None = None,
    ) -> list[str]:
        lines: list[str] = []
        for header, body in clauses:
            lines.append(f"{self.indent * depth}{header}:")
            lines.extend(body or self._lines(depth + 1, "pass"))
        return lines

    def _do_while(self, element: CodeElement, depth: int) -> list[str]:
        body = self._children(element, depth + 1)
        body += self._lines(depth + 1, self._header("do-while", element))
        body += self._lines(depth + 2, "break")
        return self._clauses(depth, [(self.HEADERS["do"], body)])

    def _switch(self, element: CodeElement, depth: int) -> list[str]:
        cases = self._clauses(
            depth + 1,
            [
                (self._header("case", element), self._children(element, depth + 2)),
                ("case _", []),
            ],
        )
        return self._clauses(depth, [(self._header("switch", element), cases)])

    def _method(self, method: Method, depth: int) -> list[str]:
        params = [f"{name}: {ptype}" for name, ptype in self._parameters(method)]
        lines: list[str] = []
        if method.is_static:
            lines += self._lines(depth, "@staticmethod")
        else:
            params.insert(0, "self")

        name = f"_{method.name}" if method.visibility == "private" else method.name
        header = f"def {name}({', '.join(params)}) -> {self._native(method.return_type)}"
        return lines + self._clauses(depth, [(header, self._body(method, depth + 1))])


def generate_python(project, config=None) -> str:
    """Render ``project`` as a Python module."""
    return PythonGenerator(project, config).generate()
