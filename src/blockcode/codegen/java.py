"""Java generator: one public class in a package, K&R braces.

Utility functions become ``public static`` methods of the class. With
``java_inline_utilities`` set the generator reproduces the legacy output and
writes each utility where it is used instead.
"""

from ..models import Language
from .base import BraceGenerator, camel_case

PROLOGUE = [
    "import java.math.BigDecimal;",
    "import java.util.*;",
]


class JavaGenerator(BraceGenerator):
    """Java source generator."""

    language = Language.JAVA

    STATEMENTS = {
        # Output & debug
        "console.writeline": "System.out.println($quoted_message);",
        "console.write": "System.out.print($quoted_message);",
        "console.readkey": "new Scanner(System.in).nextLine();",
        "console.readline": "String input = new Scanner(System.in).nextLine();",
        "debug.print": "System.err.println($quoted_message);",
        "trace.write": "System.err.print($quoted_message);",
        # Control
        "break": "break;",
        "continue": "continue;",
        "ternary": "var result = $condition ? $trueValue : $falseValue;",
        # Variables & data
        "variable": "$native_type $name = $value;",
        "constant": "final $native_type $name = $value;",
        "array": "$native_type[] $name = new $native_type[$size];",
        "list": "List<$boxed_type> $name = new ArrayList<>();",
        "dictionary": "Map<$boxed_keyType, $boxed_valueType> $name = new HashMap<>();",
        "return": "return $value;",
        # Primitive types
        "string": "String $name = $value;",
        "int": "int $name = $value;",
        "long": "long $name = $value;",
        "float": "float $name = $value;",
        "double": "double $name = $value;",
        "decimal": "BigDecimal $name = new BigDecimal($value);",
        "bool": "boolean $name = $value;",
        "char": "char $name = $value;",
        "byte": "byte $name = $value;",
        "short": "short $name = $value;",
        # Math
        "math.sqrt": "double result = Math.sqrt($value);",
        "math.pow": "double result = Math.pow($base, $exponent);",
        "math.abs": "$native_type result = Math.abs($value);",
        "math.min": "$native_type result = Math.min($value1, $value2);",
        "math.max": "$native_type result = Math.max($value1, $value2);",
        "random": "Random rand = new Random();\nint randomNumber = rand.nextInt($max - $min) + $min;",
        # Strings
        "string.length": "int length = $variable.length();",
        "string.substring": "String result = $variable.substring($start, $start + $length);",
        "string.split": "String[] parts = $variable.split($quoted_delimiter);",
        "string.replace": "String result = $variable.replace($quoted_oldValue, $quoted_newValue);",
        "string.tolower": "String result = $variable.toLowerCase();",
        "string.toupper": "String result = $variable.toUpperCase();",
        "string.trim": "String result = $variable.trim();",
        "string.contains": "boolean contains = $variable.contains($quoted_value);",
        # Exceptions
        "try-catch": """\
try {
    // Code that might throw an exception
} catch (Exception ex) {
    // Handle exception
}""",
        "try-catch-finally": """\
try {
    // Code that might throw an exception
} catch (Exception ex) {
    // Handle exception
} finally {
    // Cleanup code
}""",
        "throw": "throw new $exceptionType($quoted_message);",
    }

    HEADERS = {
        "for": "for (int $variable = $start; $variable < $end; $step)",
        "foreach": "for ($native_type $item : $collection)",
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
public static boolean isEven(int number) {
    return number % 2 == 0;
}""",
        "is-odd": """\
public static boolean isOdd(int number) {
    return number % 2 != 0;
}""",
        "is-prime": """\
public static boolean isPrime(int number) {
    if (number < 2) {
        return false;
    }
    for (int i = 2; i * i <= number; i++) {
        if (number % i == 0) {
            return false;
        }
    }
    return true;
}""",
        "factorial": """\
public static long factorial(int n) {
    long result = 1;
    for (int i = 2; i <= n; i++) {
        result *= i;
    }
    return result;
}""",
        "fibonacci": """\
public static long fibonacci(int n) {
    long a = 0;
    long b = 1;
    for (int i = 0; i < n; i++) {
        long next = a + b;
        a = b;
        b = next;
    }
    return a;
}""",
        "reverse-string": """\
public static String reverseString(String text) {
    return new StringBuilder(text).reverse().toString();
}""",
        "is-palindrome": """\
public static boolean isPalindrome(String text) {
    String cleaned = text.replace(" ", "").toLowerCase();
    return cleaned.equals(new StringBuilder(cleaned).reverse().toString());
}""",
        "swap": """\
public static void swap(int[] values, int i, int j) {
    int temp = values[i];
    values[i] = values[j];
    values[j] = temp;
}""",
        "decimal-to-binary": """\
public static String decimalToBinary(int number) {
    return Integer.toBinaryString(number);
}""",
        "binary-to-decimal": """\
public static int binaryToDecimal(String binary) {
    return Integer.parseInt(binary, 2);
}""",
        "decimal-to-hex": """\
public static String decimalToHex(int number) {
    return Integer.toHexString(number).toUpperCase();
}""",
        "celsius-to-fahrenheit": """\
public static double celsiusToFahrenheit(double celsius) {
    return celsius * 9 / 5 + 32;
}""",
        "fahrenheit-to-celsius": """\
public static double fahrenheitToCelsius(double fahrenheit) {
    return (fahrenheit - 32) * 5 / 9;
}""",
        "validate-email": r"""public static boolean validateEmail(String email) {
    return email.matches("^[^@\\s]+@[^@\\s]+\\.[^@\\s]+$");
}""",
        "validate-password": r"""public static boolean validatePassword(String password) {
    return password.length() >= 8
        && password.matches(".*[A-Z].*")
        && password.matches(".*[a-z].*")
        && password.matches(".*\\d.*");
}""",
        "validate-url": """\
public static boolean validateUrl(String url) {
    try {
        java.net.URI uri = new java.net.URI(url);
        return "http".equals(uri.getScheme()) || "https".equals(uri.getScheme());
    } catch (java.net.URISyntaxException e) {
        return false;
    }
}""",
        "validate-date": """\
public static boolean validateDate(String date) {
    try {
        java.time.LocalDate.parse(date);
        return true;
    } catch (java.time.format.DateTimeParseException e) {
        return false;
    }
}""",
        "is-numeric": """\
public static boolean isNumeric(String text) {
    try {
        Double.parseDouble(text);
        return true;
    } catch (NumberFormatException e) {
        return false;
    }
}""",
    }

    @property
    def hoists_utilities(self) -> bool:
        return not self.config.java_inline_utilities

    def generate(self) -> str:
        lines: list[str] = []
        if self.project.namespace:
            lines += [f"package {self.project.namespace};", ""]
        lines += PROLOGUE + [""]
        lines.append(f"public class {self.project.class_name} {{")
        lines += self._members(1)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def utility_name(self, utility_type: str) -> str:
        return camel_case(utility_type)


def generate_java(project, config=None) -> str:
    """Render ``project`` as a Java source file."""
    return JavaGenerator(project, config).generate()
