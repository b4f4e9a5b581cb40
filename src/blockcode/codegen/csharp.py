"""C# generator: a namespace holding one class with Allman-style braces.

Utility functions are hoisted into ``public static`` methods of the class.
"""

from ..models import Language
from .base import BraceGenerator, pascal_case

PROLOGUE = [
    "using System;",
    "using System.Collections.Generic;",
    "using System.Diagnostics;",
    "using System.Linq;",
    "using System.Text.RegularExpressions;",
]


class CSharpGenerator(BraceGenerator):
    """C# source generator."""

    language = Language.CSHARP
    allman = True

    STATEMENTS = {
        # Output & debug
        "console.writeline": "Console.WriteLine($quoted_message);",
        "console.write": "Console.Write($quoted_message);",
        "console.readkey": "Console.ReadKey();",
        "console.readline": "string input = Console.ReadLine();",
        "debug.print": "Debug.Print($quoted_message);",
        "trace.write": "Trace.Write($quoted_message);",
        # Control
        "break": "break;",
        "continue": "continue;",
        "ternary": "var result = $condition ? $trueValue : $falseValue;",
        # Variables & data
        "variable": "$native_type $name = $value;",
        "constant": "const $native_type $name = $value;",
        "array": "$native_type[] $name = new $native_type[$size];",
        "list": "List<$native_type> $name = new List<$native_type>();",
        "dictionary": "Dictionary<$native_keyType, $native_valueType> $name = new Dictionary<$native_keyType, $native_valueType>();",
        "return": "return $value;",
        # Primitive types
        "string": "string $name = $value;",
        "int": "int $name = $value;",
        "long": "long $name = $value;",
        "float": "float $name = $value;",
        "double": "double $name = $value;",
        "decimal": "decimal $name = $value;",
        "bool": "bool $name = $value;",
        "char": "char $name = $value;",
        "byte": "byte $name = $value;",
        "short": "short $name = $value;",
        # Math
        "math.sqrt": "double result = Math.Sqrt($value);",
        "math.pow": "double result = Math.Pow($base, $exponent);",
        "math.abs": "$native_type result = Math.Abs($value);",
        "math.min": "$native_type result = Math.Min($value1, $value2);",
        "math.max": "$native_type result = Math.Max($value1, $value2);",
        "random": "Random rand = new Random();\nint randomNumber = rand.Next($min, $max);",
        # Strings
        "string.length": "int length = $variable.Length;",
        "string.substring": "string result = $variable.Substring($start, $length);",
        "string.split": "string[] parts = $variable.Split($quoted_delimiter);",
        "string.replace": "string result = $variable.Replace($quoted_oldValue, $quoted_newValue);",
        "string.tolower": "string result = $variable.ToLower();",
        "string.toupper": "string result = $variable.ToUpper();",
        "string.trim": "string result = $variable.Trim();",
        "string.contains": "bool contains = $variable.Contains($quoted_value);",
        # Exceptions
        "try-catch": """\
try
{
    // Code that might throw an exception
}
catch (Exception ex)
{
    // Handle exception
}""",
        "try-catch-finally": """\
try
{
    // Code that might throw an exception
}
catch (Exception ex)
{
    // Handle exception
}
finally
{
    // Cleanup code
}""",
        "throw": "throw new $exceptionType($quoted_message);",
    }

    HEADERS = {
        "for": "for (int $variable = $start; $variable < $end; $step)",
        "foreach": "foreach ($native_type $item in $collection)",
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
public static bool IsEven(int number)
{
    return number % 2 == 0;
}""",
        "is-odd": """\
public static bool IsOdd(int number)
{
    return number % 2 != 0;
}""",
        "is-prime": """\
public static bool IsPrime(int number)
{
    if (number < 2)
    {
        return false;
    }
    for (int i = 2; i * i <= number; i++)
    {
        if (number % i == 0)
        {
            return false;
        }
    }
    return true;
}""",
        "factorial": """\
public static long Factorial(int n)
{
    long result = 1;
    for (int i = 2; i <= n; i++)
    {
        result *= i;
    }
    return result;
}""",
        "fibonacci": """\
public static long Fibonacci(int n)
{
    long a = 0;
    long b = 1;
    for (int i = 0; i < n; i++)
    {
        long next = a + b;
        a = b;
        b = next;
    }
    return a;
}""",
        "reverse-string": """\
public static string ReverseString(string text)
{
    char[] chars = text.ToCharArray();
    Array.Reverse(chars);
    return new string(chars);
}""",
        "is-palindrome": """\
public static bool IsPalindrome(string text)
{
    string cleaned = text.Replace(" ", "").ToLower();
    char[] chars = cleaned.ToCharArray();
    Array.Reverse(chars);
    return cleaned == new string(chars);
}""",
        "swap": """\
public static void Swap<T>(ref T a, ref T b)
{
    T temp = a;
    a = b;
    b = temp;
}""",
        "decimal-to-binary": """\
public static string DecimalToBinary(int number)
{
    return Convert.ToString(number, 2);
}""",
        "binary-to-decimal": """\
public static int BinaryToDecimal(string binary)
{
    return Convert.ToInt32(binary, 2);
}""",
        "decimal-to-hex": """\
public static string DecimalToHex(int number)
{
    return number.ToString("X");
}""",
        "celsius-to-fahrenheit": """\
public static double CelsiusToFahrenheit(double celsius)
{
    return celsius * 9 / 5 + 32;
}""",
        "fahrenheit-to-celsius": """\
public static double FahrenheitToCelsius(double fahrenheit)
{
    return (fahrenheit - 32) * 5 / 9;
}""",
        "validate-email": r"""public static bool ValidateEmail(string email)
{
    return Regex.IsMatch(email, @"^[^@\s]+@[^@\s]+\.[^@\s]+$");
}""",
        "validate-password": """\
public static bool ValidatePassword(string password)
{
    return password.Length >= 8
        && password.Any(char.IsUpper)
        && password.Any(char.IsLower)
        && password.Any(char.IsDigit);
}""",
        "validate-url": """\
public static bool ValidateUrl(string url)
{
    return Uri.TryCreate(url, UriKind.Absolute, out Uri result)
        && (result.Scheme == Uri.UriSchemeHttp || result.Scheme == Uri.UriSchemeHttps);
}""",
        "validate-date": """\
public static bool ValidateDate(string date)
{
    return DateTime.TryParse(date, out _);
}""",
        "is-numeric": """\
public static bool IsNumeric(string text)
{
    return double.TryParse(text, out _);
}""",
    }

    def generate(self) -> str:
        lines = PROLOGUE + [""]
        depth = 0
        if self.project.namespace:
            lines += [f"namespace {self.project.namespace}", "{"]
            depth = 1

        lines += self._lines(depth, f"public class {self.project.class_name}")
        lines += self._lines(depth, "{")
        lines += self._members(depth + 1)
        lines += self._lines(depth, "}")

        if self.project.namespace:
            lines.append("}")
        return "\n".join(lines) + "\n"

    def utility_name(self, utility_type: str) -> str:
        return pascal_case(utility_type)


def generate_csharp(project, config=None) -> str:
    """Render ``project`` as a C# source file."""
    return CSharpGenerator(project, config).generate()
