"""JavaScript generator: a CommonJS module for Node exporting one ES2015 class.

Parameter and return types survive only as JSDoc annotations. Utility
functions are hoisted into static methods of the class.
"""

from ..models import Language, Method
from .base import BraceGenerator, camel_case


class JavaScriptGenerator(BraceGenerator):
    """JavaScript source generator."""

    language = Language.JAVASCRIPT

    STATEMENTS = {
        # Output & debug
        "console.writeline": "console.log($quoted_message);",
        "console.write": "process.stdout.write($quoted_message);",
        "console.readkey": 'require("fs").readSync(0, Buffer.alloc(1));',
        "console.readline": r'const input = require("fs").readFileSync(0, "utf8").split(/\r?\n/)[0];',
        "debug.print": "console.debug($quoted_message);",
        "trace.write": "console.trace($quoted_message);",
        # Control
        "break": "break;",
        "continue": "continue;",
        "ternary": "const result = $condition ? $trueValue : $falseValue;",
        # Variables & data
        "variable": "let $name = $value;",
        "constant": "const $name = $value;",
        "array": "const $name = new Array($size).fill(0);",
        "list": "const $name = [];",
        "dictionary": "const $name = new Map();",
        "return": "return $value;",
        # Primitive types
        "string": "let $name = $value;",
        "int": "let $name = $value;",
        "long": "let $name = $value;",
        "float": "let $name = $value;",
        "double": "let $name = $value;",
        "decimal": "let $name = $value;",
        "bool": "let $name = $value;",
        "char": "let $name = $value;",
        "byte": "let $name = $value;",
        "short": "let $name = $value;",
        # Math
        "math.sqrt": "const result = Math.sqrt($value);",
        "math.pow": "const result = Math.pow($base, $exponent);",
        "math.abs": "const result = Math.abs($value);",
        "math.min": "const result = Math.min($value1, $value2);",
        "math.max": "const result = Math.max($value1, $value2);",
        "random": "const randomNumber = Math.floor(Math.random() * ($max - $min)) + $min;",
        # Strings
        "string.length": "const length = $variable.length;",
        "string.substring": "const result = $variable.substring($start, $start + $length);",
        "string.split": "const parts = $variable.split($quoted_delimiter);",
        "string.replace": "const result = $variable.replaceAll($quoted_oldValue, $quoted_newValue);",
        "string.tolower": "const result = $variable.toLowerCase();",
        "string.toupper": "const result = $variable.toUpperCase();",
        "string.trim": "const result = $variable.trim();",
        "string.contains": "const contains = $variable.includes($quoted_value);",
        # Exceptions
        "try-catch": """\
try {
    // Code that might throw an error
} catch (error) {
    // Handle error
}""",
        "try-catch-finally": """\
try {
    // Code that might throw an error
} catch (error) {
    // Handle error
} finally {
    // Cleanup code
}""",
        "throw": "throw new $exceptionType($quoted_message);",
    }

    HEADERS = {
        "for": "for (let $variable = $start; $variable < $end; $step)",
        "foreach": "for (const $item of $collection)",
        "while": "while ($condition)",
        "do": "do",
        "do-while": "while ($condition);",
        "if": "if ($condition)",
        "if-first": "if ($condition1)",
        "else-if": "else if ($condition2)",
        "else": "else",
        "switch": "switch ($variable)",
        "case": "case $caseValue:",
    }

    UTILITIES = {
        "is-even": """\
static isEven(number) {
    return number % 2 === 0;
}""",
        "is-odd": """\
static isOdd(number) {
    return number % 2 !== 0;
}""",
        "is-prime": """\
static isPrime(number) {
    if (number < 2) {
        return false;
    }
    for (let i = 2; i * i <= number; i++) {
        if (number % i === 0) {
            return false;
        }
    }
    return true;
}""",
        "factorial": """\
static factorial(n) {
    let result = 1;
    for (let i = 2; i <= n; i++) {
        result *= i;
    }
    return result;
}""",
        "fibonacci": """\
static fibonacci(n) {
    let a = 0;
    let b = 1;
    for (let i = 0; i < n; i++) {
        [a, b] = [b, a + b];
    }
    return a;
}""",
        "reverse-string": """\
static reverseString(text) {
    return text.split("").reverse().join("");
}""",
        "is-palindrome": r"""static isPalindrome(text) {
    const cleaned = text.replace(/\s+/g, "").toLowerCase();
    return cleaned === cleaned.split("").reverse().join("");
}""",
        "swap": """\
static swap(a, b) {
    return [b, a];
}""",
        "decimal-to-binary": """\
static decimalToBinary(number) {
    return number.toString(2);
}""",
        "binary-to-decimal": """\
static binaryToDecimal(binary) {
    return parseInt(binary, 2);
}""",
        "decimal-to-hex": """\
static decimalToHex(number) {
    return number.toString(16).toUpperCase();
}""",
        "celsius-to-fahrenheit": """\
static celsiusToFahrenheit(celsius) {
    return celsius * 9 / 5 + 32;
}""",
        "fahrenheit-to-celsius": """\
static fahrenheitToCelsius(fahrenheit) {
    return (fahrenheit - 32) * 5 / 9;
}""",
        "validate-email": r"""static validateEmail(email) {
    return /^[^@\s]+@[^@\s]+\.[^@\s]+$/.test(email);
}""",
        "validate-password": r"""static validatePassword(password) {
    return password.length >= 8
        && /[A-Z]/.test(password)
        && /[a-z]/.test(password)
        && /\d/.test(password);
}""",
        "validate-url": """\
static validateUrl(url) {
    try {
        const parsed = new URL(url);
        return parsed.protocol === "http:" || parsed.protocol === "https:";
    } catch (error) {
        return false;
    }
}""",
        "validate-date": """\
static validateDate(date) {
    return !Number.isNaN(Date.parse(date));
}""",
        "is-numeric": """\
static isNumeric(text) {
    return text.trim() !== "" && !Number.isNaN(Number(text));
}""",
    }

    def generate(self) -> str:
        lines: list[str] = []
        if self.project.namespace:
            lines.append(f"// Module: {self.project.namespace}")
        lines += ['"use strict";', ""]
        lines.append(f"class {self.project.class_name} {{")
        lines += self._members(1)
        lines += ["}", "", f"module.exports = {self.project.class_name};"]
        return "\n".join(lines) + "\n"

    def utility_name(self, utility_type: str) -> str:
        return camel_case(utility_type)

    def _method(self, method: Method, depth: int) -> list[str]:
        params = self._parameters(method)
        return_type = self._native(method.return_type)

        doc: list[str] = []
        if params or return_type != "void":
            doc.append("/**")
            doc += [f" * @param {{{ptype}}} {name}" for name, ptype in params]
            doc.append(f" * @returns {{{return_type}}}")
            doc.append(" */")

        name = f"#{method.name}" if method.visibility == "private" else method.name
        if method.is_static:
            name = f"static {name}"
        header = f"{name}({', '.join(pname for pname, _ in params)})"
        lines = [self.indent * depth + line for line in doc]
        return lines + self._clauses(depth, [(header, self._body(method, depth + 1))])


def generate_javascript(project, config=None) -> str:
    """Render ``project`` as a JavaScript module."""
    return JavaScriptGenerator(project, config).generate()
