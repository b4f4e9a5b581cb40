"""Shared machinery for the per-language generators.

A generator walks ``ProjectData`` and returns source text. Each element type is
rendered by one registry entry; the registry is built from the subclass's
``STATEMENTS`` templates (single statements) plus the block renderers defined
here. Every render call receives an explicit indentation depth and returns a
list of finished lines.

Statement templates use ``string.Template`` placeholders that name element
properties (``$name``, ``${variable}``). Three prefixes transform a property:

    $quoted_message   string literal of ``message``
    $native_type      ``type`` translated into the target language
    $boxed_type       same, using JVM reference types inside generics
"""

import logging
from collections.abc import Callable
from string import Template

from ..config import GeneratorConfig
from ..defaults import prop
from ..models import CodeElement, Language, Method, ProjectData
from ..typemap import translate_type
from ..utilities import UTILITY_TYPES, collect_utilities

logger = logging.getLogger(__name__)

Renderer = Callable[[CodeElement, int], list[str]]

TEMPLATE_INDENT = 4  # spaces per level in templates and utility sources


def string_literal(text: str) -> str:
    """Double-quoted literal, valid in all four target languages."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def pascal_case(tag: str) -> str:
    """``is-even`` -> ``IsEven``"""
    return "".join(word.capitalize() for word in tag.split("-"))


def camel_case(tag: str) -> str:
    """``is-even`` -> ``isEven``"""
    first, *rest = tag.split("-")
    return first + "".join(word.capitalize() for word in rest)


class ElementFields:
    """Template mapping over one element's properties."""

    def __init__(self, element: CodeElement, language: Language, **extra: str):
        self.element = element
        self.language = language
        self.extra = extra

    def __getitem__(self, key: str) -> str:
        if key in self.extra:
            return self.extra[key]
        prefix, _, field = key.partition("_")
        if field:
            if prefix == "quoted":
                return string_literal(self._prop(field))
            if prefix == "native":
                return translate_type(self._prop(field), self.language)
            if prefix == "boxed":
                return translate_type(self._prop(field), self.language, boxed=True)
        return self._prop(key)

    def _prop(self, field: str) -> str:
        return prop(self.element, field, self.language)


class BaseGenerator:
    """Renders one compilation unit for a single target language."""

    language: Language
    comment_prefix = "//"

    # element type -> statement template
    STATEMENTS: dict[str, str] = {}
    # clause headers for block-structured elements
    HEADERS: dict[str, str] = {}
    # utility type -> complete function source
    UTILITIES: dict[str, str] = {}

    def __init__(self, project: ProjectData, config: GeneratorConfig | None = None):
        self.project = project
        self.config = config or GeneratorConfig()
        self.indent = self.config.indent
        self.renderers = self._build_registry()
        self.hoisted = collect_utilities(project.methods) if self.hoists_utilities else []

    @property
    def hoists_utilities(self) -> bool:
        return True

    def generate(self) -> str:
        raise NotImplementedError

    # -- Registry ----------------------------------------------------------

    def _build_registry(self) -> dict[str, Renderer]:
        registry: dict[str, Renderer] = {t: self._statement for t in self.STATEMENTS}
        registry.update(
            {
                "for": self._for,
                "foreach": self._foreach,
                "while": self._while,
                "do-while": self._do_while,
                "if": self._if,
                "if-else": self._if_else,
                "if-else-if": self._if_else_if,
                "switch": self._switch,
            }
        )
        registry.update({t: self._utility for t in UTILITY_TYPES})
        return registry

    def render_element(self, element: CodeElement, depth: int = 0) -> str:
        return "\n".join(self._render(element, depth))

    def _render(self, element: CodeElement, depth: int) -> list[str]:
        renderer = self.renderers.get(element.type)
        if renderer is None:
            logger.debug("No renderer for element type %r, writing a comment", element.type)
            return self._comment(depth, element.type)
        return renderer(element, depth)

    def _children(self, element: CodeElement, depth: int) -> list[str]:
        lines: list[str] = []
        for child in element.children or []:
            lines.extend(self._render(child, depth))
        return lines

    # -- Text helpers ------------------------------------------------------

    def _lines(self, depth: int, text: str) -> list[str]:
        """Indent ``text`` at ``depth``, re-indenting its own nesting levels."""
        lines = []
        for raw in text.split("\n"):
            stripped = raw.lstrip(" ")
            if not stripped:
                lines.append("")
                continue
            level, extra = divmod(len(raw) - len(stripped), TEMPLATE_INDENT)
            lines.append(self.indent * (depth + level) + " " * extra + stripped)
        return lines

    def _comment(self, depth: int, text: str) -> list[str]:
        """One comment line; line breaks in ``text`` are flattened to spaces."""
        flat = " ".join(text.splitlines())
        return [f"{self.indent * depth}{self.comment_prefix} {flat}"]

    def _fill(self, template: str, element: CodeElement, **extra: str) -> str:
        return Template(template).substitute(ElementFields(element, self.language, **extra))

    def _header(self, key: str, element: CodeElement, **extra: str) -> str:
        return self._fill(self.HEADERS[key], element, **extra)

    def _clauses(
        self,
        depth: int,
        clauses: list[tuple[str, list[str]]],
        trailer: str | None = None,
    ) -> list[str]:
        """Lay out ``header/body`` pairs in the language's block syntax."""
        raise NotImplementedError

    # -- Statements --------------------------------------------------------

    def _statement(self, element: CodeElement, depth: int) -> list[str]:
        return self._lines(depth, self._fill(self.STATEMENTS[element.type], element))

    def _loop_fields(self, element: CodeElement) -> dict[str, str]:
        variable = prop(element, "variable", self.language)
        start = prop(element, "start", self.language)
        end = prop(element, "end", self.language)
        increment = prop(element, "increment", self.language)
        if increment == "1":
            step = f"{variable}++"
            bounds = f"{start}, {end}"
        else:
            step = f"{variable} += {increment}"
            bounds = f"{start}, {end}, {increment}"
        return {"step": step, "range": f"range({bounds})"}

    def _for(self, element: CodeElement, depth: int) -> list[str]:
        header = self._header("for", element, **self._loop_fields(element))
        return self._clauses(depth, [(header, self._children(element, depth + 1))])

    def _foreach(self, element: CodeElement, depth: int) -> list[str]:
        header = self._header("foreach", element)
        return self._clauses(depth, [(header, self._children(element, depth + 1))])

    def _while(self, element: CodeElement, depth: int) -> list[str]:
        header = self._header("while", element)
        return self._clauses(depth, [(header, self._children(element, depth + 1))])

    def _do_while(self, element: CodeElement, depth: int) -> list[str]:
        body = self._children(element, depth + 1)
        trailer = self._header("do-while", element)
        return self._clauses(depth, [(self.HEADERS["do"], body)], trailer=trailer)

    def _if(self, element: CodeElement, depth: int) -> list[str]:
        header = self._header("if", element)
        return self._clauses(depth, [(header, self._children(element, depth + 1))])

    def _if_else(self, element: CodeElement, depth: int) -> list[str]:
        clauses = [
            (self._header("if", element), self._children(element, depth + 1)),
            (self.HEADERS["else"], []),
        ]
        return self._clauses(depth, clauses)

    def _if_else_if(self, element: CodeElement, depth: int) -> list[str]:
        clauses = [
            (self._header("if-first", element), self._children(element, depth + 1)),
            (self._header("else-if", element), []),
            (self.HEADERS["else"], []),
        ]
        return self._clauses(depth, clauses)

    def _switch(self, element: CodeElement, depth: int) -> list[str]:
        raise NotImplementedError

    # -- Utilities ---------------------------------------------------------

    def utility_name(self, utility_type: str) -> str:
        raise NotImplementedError

    def _utility(self, element: CodeElement, depth: int) -> list[str]:
        if self.hoists_utilities:
            name = self.utility_name(element.type)
            return self._comment(depth, f"{name}(): utility method defined at class level")
        return self._lines(depth, self.UTILITIES[element.type])

    # -- Members -----------------------------------------------------------

    def _method(self, method: Method, depth: int) -> list[str]:
        raise NotImplementedError

    def _body(self, method: Method, depth: int) -> list[str]:
        lines: list[str] = []
        for element in method.elements:
            lines.extend(self._render(element, depth))
        return lines

    def _members(self, depth: int) -> list[str]:
        """Methods then hoisted utilities, separated by blank lines."""
        blocks = [self._method(method, depth) for method in self.project.methods]
        if self.hoisted:
            logger.debug("Hoisting utilities: %s", ", ".join(self.hoisted))
        blocks.extend(self._lines(depth, self.UTILITIES[t]) for t in self.hoisted)

        lines: list[str] = []
        for block in blocks:
            if lines:
                lines.append("")
            lines.extend(block)
        return lines

    def _native(self, semantic_type: str) -> str:
        return translate_type(semantic_type, self.language)

    def _parameters(self, method: Method) -> list[tuple[str, str]]:
        """(name, translated type) pairs."""
        return [(p.name, self._native(p.type)) for p in method.parameters]


class BraceGenerator(BaseGenerator):
    """Block syntax for the curly-brace languages."""

    # Allman puts each brace on its own line; otherwise braces are K&R.
    allman = False

    def _clauses(
        self,
        depth: int,
        clauses: list[tuple[str, list[str]]],
        trailer: str | None = None,
    ) -> list[str]:
        pad = self.indent * depth
        lines: list[str] = []
        for i, (header, body) in enumerate(clauses):
            if self.allman:
                lines += [pad + header, pad + "{"]
            elif i == 0:
                lines.append(f"{pad}{header} {{")
            else:
                lines[-1] = f"{pad}}} {header} {{"
            lines.extend(body)
            lines.append(pad + "}")
        if trailer:
            lines[-1] = f"{pad}}} {trailer}"
        return lines

    def _switch(self, element: CodeElement, depth: int) -> list[str]:
        body = self._lines(depth + 1, self._header("case", element))
        body += self._children(element, depth + 2)
        body += self._lines(depth + 2, "break;")
        body += self._lines(depth + 1, "default:")
        body += self._lines(depth + 2, "break;")
        return self._clauses(depth, [(self._header("switch", element), body)])

    def _method(self, method: Method, depth: int) -> list[str]:
        params = ", ".join(f"{ptype} {name}" for name, ptype in self._parameters(method))
        parts = [
            method.visibility,
            "static" if method.is_static else "",
            self._native(method.return_type),
            f"{method.name}({params})",
        ]
        header = " ".join(p for p in parts if p)
        return self._clauses(depth, [(header, self._body(method, depth + 1))])
