"""Tests for the C# generator."""

from conftest import element

from blockcode import CSharpGenerator, GeneratorConfig, Method, ProjectData, generate_csharp


def render(el, depth=0, config=None):
    return CSharpGenerator(ProjectData(), config).render_element(el, depth)


class TestCSharpFile:
    """File layout: usings, namespace, class."""

    def test_hello_world(self, make_project):
        """The starting project renders as a complete C# file."""
        project = make_project("csharp", [element("console.writeline", message="Hello World")])
        assert generate_csharp(project) == (
            "using System;\n"
            "using System.Collections.Generic;\n"
            "using System.Diagnostics;\n"
            "using System.Linq;\n"
            "using System.Text.RegularExpressions;\n"
            "\n"
            "namespace MyProject\n"
            "{\n"
            "    public class MyClass\n"
            "    {\n"
            "        public void MyMethod()\n"
            "        {\n"
            '            Console.WriteLine("Hello World");\n'
            "        }\n"
            "    }\n"
            "}\n"
        )

    def test_no_namespace(self):
        """A blank namespace omits the namespace block."""
        project = ProjectData(namespace="", methods=[])
        source = generate_csharp(project)
        assert "namespace" not in source
        assert "public class MyClass\n{\n}\n" in source

    def test_empty_class(self):
        """A class without methods is an empty brace pair."""
        source = generate_csharp(ProjectData(methods=[]))
        assert source.endswith("    public class MyClass\n    {\n    }\n}\n")

    def test_method_signature(self, compute_method):
        """Visibility, static, return type and typed parameters."""
        source = generate_csharp(ProjectData(methods=[compute_method]))
        assert "        public static int Compute(string name, int count)\n        {\n" in source

    def test_methods_separated_by_blank_line(self):
        """Consecutive methods are separated by one blank line."""
        project = ProjectData(methods=[Method(name="A"), Method(name="B")])
        assert "        }\n\n        public void B()" in generate_csharp(project)


class TestCSharpStatements:
    def test_defaults(self):
        """Elements without properties use the default table."""
        assert render(element("variable")) == 'var myVariable = "";'
        assert render(element("constant")) == "const int MY_CONSTANT = 0;"
        assert render(element("bool")) == "bool myBool = false;"
        assert render(element("long")) == "long myLong = 0L;"
        assert render(element("decimal")) == "decimal myDecimal = 0.0m;"
        assert render(element("return")) == "return null;"

    def test_collections(self):
        """Array, List and Dictionary declarations."""
        assert render(element("array", type="string", size="3")) == "string[] myArray = new string[3];"
        assert render(element("list")) == "List<int> myList = new List<int>();"
        assert render(element("dictionary")) == (
            "Dictionary<string, int> myDict = new Dictionary<string, int>();"
        )

    def test_message_is_escaped(self):
        """Quotes in a message are escaped inside the literal."""
        assert render(element("console.write", message='Say "hi"')) == 'Console.Write("Say \\"hi\\"");'

    def test_string_operations(self):
        """String operations target the configured variable."""
        assert render(element("string.substring", variable="name")) == (
            "string result = name.Substring(0, 5);"
        )
        assert render(element("string.split")) == 'string[] parts = myString.Split(",");'

    def test_random_is_two_lines(self):
        """Multi-line templates are indented line by line."""
        assert render(element("random"), depth=1) == (
            "    Random rand = new Random();\n    int randomNumber = rand.Next(1, 100);"
        )

    def test_throw(self):
        """Throw uses the default exception type and message."""
        assert render(element("throw")) == 'throw new Exception("An error occurred");'

    def test_unknown_type_becomes_comment(self):
        """An unknown tag is written as a comment."""
        assert render(element("mystery"), depth=2) == "        // mystery"


class TestCSharpBlocks:
    def test_for_defaults(self):
        """A default for loop counts i from 0 to 10."""
        assert render(element("for")) == "for (int i = 0; i < 10; i++)\n{\n}"

    def test_for_increment(self):
        """An increment other than 1 uses +=."""
        assert render(element("for", increment="2")).startswith("for (int i = 0; i < 10; i += 2)")

    def test_foreach(self):
        """Foreach names the element type, item and collection."""
        assert render(element("foreach", type="string", item="name", collection="names")) == (
            "foreach (string name in names)\n{\n}"
        )

    def test_do_while(self):
        """The condition follows the closing brace."""
        assert render(element("do-while", condition="x < 3")) == "do\n{\n} while (x < 3);"

    def test_if_else_if(self):
        """Three branches in Allman layout."""
        assert render(element("if-else-if", condition1="a", condition2="b")) == (
            "if (a)\n{\n}\nelse if (b)\n{\n}\nelse\n{\n}"
        )

    def test_switch(self):
        """Children go into the first case, before its break."""
        switch = element("switch", [element("break")], variable="day", caseValue="2")
        assert render(switch) == (
            "switch (day)\n"
            "{\n"
            "    case 2:\n"
            "        break;\n"
            "        break;\n"
            "    default:\n"
            "        break;\n"
            "}"
        )

    def test_children_nested_one_level(self):
        """Each nested block adds one indent level."""
        outer = element("while", [element("if", [element("return", value="x")], condition="x > 0")])
        assert render(outer) == (
            "while (true)\n"
            "{\n"
            "    if (x > 0)\n"
            "    {\n"
            "        return x;\n"
            "    }\n"
            "}"
        )

    def test_try_catch_template_reindented(self):
        """Template nesting is re-indented at the element depth."""
        text = render(element("try-catch"), depth=1)
        assert text.splitlines()[:3] == [
            "    try",
            "    {",
            "        // Code that might throw an exception",
        ]

    def test_indent_width(self):
        """The configured indent width is used for nesting."""
        config = GeneratorConfig(indent_width=2)
        assert render(element("if", [element("break")]), config=config) == "if (true)\n{\n  break;\n}"


class TestCSharpUtilities:
    def test_call_site_comment(self):
        """A hoisted utility leaves a comment where it was dropped."""
        assert render(element("is-even"), depth=1) == (
            "    // IsEven(): utility method defined at class level"
        )

    def test_hoisted_once_after_methods(self):
        """Utilities are written once, after the methods, in first-use order."""
        project = ProjectData(
            methods=[
                Method(name="A", elements=[element("factorial"), element("is-even")]),
                Method(name="B", elements=[element("if", [element("is-even")]), element("is-prime")]),
            ]
        )
        source = generate_csharp(project)
        assert source.count("public static bool IsEven(int number)") == 1
        assert source.count("// IsEven(): utility method defined at class level") == 2
        positions = [
            source.index("public void B()"),
            source.index("public static long Factorial(int n)"),
            source.index("public static bool IsEven(int number)"),
            source.index("public static bool IsPrime(int number)"),
        ]
        assert positions == sorted(positions)

    def test_utility_under_statement_not_hoisted(self, make_project):
        """A utility nested under a non-block element is neither placed nor hoisted."""
        source = generate_csharp(make_project("csharp", [element("return", [element("is-even")])]))
        assert "IsEven" not in source

    def test_hoisted_utility_indented_in_class(self, make_project):
        """Hoisted utilities are indented as class members."""
        source = generate_csharp(make_project("csharp", [element("is-odd")]))
        assert (
            "\n        public static bool IsOdd(int number)\n"
            "        {\n"
            "            return number % 2 != 0;\n"
            "        }\n"
        ) in source
