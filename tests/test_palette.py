"""Tests for the element palette and utility discovery."""

from conftest import element

from blockcode import (
    CATEGORIES,
    ELEMENT_TYPES,
    UTILITY_TYPES,
    Method,
    Position,
    collect_utilities,
    create_element,
    label_for,
)


class TestCategories:
    def test_utility_category_last(self):
        """Utility functions are the last category."""
        assert CATEGORIES[-1].name == "Utility Functions"
        assert [item.type for item in CATEGORIES[-1].items] == list(UTILITY_TYPES)

    def test_element_types(self):
        """The vocabulary has every palette tag."""
        assert len(ELEMENT_TYPES) == 68
        assert {"for", "try-catch-finally", "string.contains", "is-numeric"} <= ELEMENT_TYPES

    def test_utility_labels(self):
        """Utility labels are title-cased tags."""
        labels = {item.type: item.label for item in CATEGORIES[-1].items}
        assert labels["celsius-to-fahrenheit"] == "Celsius To Fahrenheit"


class TestLabelFor:
    def test_language_specific(self):
        """Labels follow the selected language."""
        assert label_for("console.writeline", "python") == "print"
        assert label_for("console.writeline", "java") == "System.out.println"
        assert label_for("switch", "python") == "Match Statement"
        assert label_for("console.readline", "javascript") == "fs.readFileSync"

    def test_shared_label(self):
        """Types without language labels use the default label."""
        assert label_for("for", "javascript") == "For Loop"

    def test_unknown_type_is_its_own_label(self):
        """An unknown tag labels itself."""
        assert label_for("mystery") == "mystery"

    def test_unknown_language_uses_csharp(self):
        """Unknown languages get the C# labels."""
        assert label_for("console.writeline", "cobol") == "Console.WriteLine"


class TestCreateElement:
    def test_defaults(self):
        """A new element has a timestamped id and default properties."""
        created = create_element("for", timestamp_ms=1700000000000)
        assert created.id == "for-1700000000000"
        assert created.properties == {"variable": "i", "start": "0", "end": "10", "increment": "1"}
        assert created.content == "for (int i = 0; i < 10; i++)"
        assert created.children is None

    def test_properties_are_copied(self):
        """New elements never share property dicts."""
        first = create_element("console.writeline", timestamp_ms=1)
        first.properties["message"] = "changed"
        assert create_element("console.writeline", timestamp_ms=2).properties["message"] == "Hello World"

    def test_without_defaults(self):
        """Types without defaults start with no properties."""
        created = create_element("is-even", position=Position(x=5, y=6), timestamp_ms=3)
        assert created.properties == {}
        assert created.content == "is-even"
        assert created.position.y == 6

    def test_generated_id(self):
        """The id is generated from the clock when not given."""
        assert create_element("if").id.startswith("if-")


class TestCollectUtilities:
    def test_order_of_first_use(self):
        """Utilities are listed once, in order of first use."""
        methods = [
            Method(elements=[element("fibonacci"), element("print"), element("is-odd")]),
            Method(elements=[element("while", [element("is-odd"), element("swap")])]),
        ]
        assert collect_utilities(methods) == ["fibonacci", "is-odd", "swap"]

    def test_only_block_bodies_searched(self):
        """Children of a non-block element are never rendered, so never hoisted."""
        methods = [Method(elements=[element("return", [element("is-even")]), element("if", [element("is-odd")])])]
        assert collect_utilities(methods) == ["is-odd"]

    def test_none(self):
        """No utilities gives an empty list."""
        assert collect_utilities([Method(elements=[element("break")])]) == []
