"""Tests for semantic type translation."""

import pytest

from blockcode import Language, translate_type


class TestTranslateType:
    @pytest.mark.parametrize(
        "language,expected",
        [
            (Language.CSHARP, "string"),
            (Language.JAVA, "String"),
            (Language.JAVASCRIPT, "string"),
            (Language.PYTHON, "str"),
        ],
    )
    def test_string(self, language, expected):
        """string is spelled per language."""
        assert translate_type("string", language) == expected

    def test_void(self):
        """void is None in Python hints."""
        assert translate_type("void", Language.PYTHON) == "None"
        assert translate_type("void", Language.JAVA) == "void"

    def test_java_decimal_and_bool(self):
        """Java uses BigDecimal and boolean."""
        assert translate_type("decimal", Language.JAVA) == "BigDecimal"
        assert translate_type("bool", Language.JAVA) == "boolean"

    def test_numbers_in_jsdoc(self):
        """All numeric types are number in JSDoc."""
        for name in ("int", "long", "float", "double", "decimal"):
            assert translate_type(name, Language.JAVASCRIPT) == "number"

    def test_boxed_only_affects_java(self):
        """Boxed names apply to Java only."""
        assert translate_type("int", Language.JAVA, boxed=True) == "Integer"
        assert translate_type("bool", Language.JAVA, boxed=True) == "Boolean"
        assert translate_type("int", Language.CSHARP, boxed=True) == "int"

    def test_custom_types_pass_through(self):
        """Unknown type names are kept as written."""
        assert translate_type("Customer", Language.JAVA) == "Customer"
        assert translate_type("var", Language.CSHARP) == "var"

    def test_language_given_as_string(self):
        """Language strings work; unknown ones mean C#."""
        assert translate_type("string", "python") == "str"
        assert translate_type("string", "unknown") == "string"
