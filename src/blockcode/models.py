"""Project tree consumed by the code generators.

Mirrors the editor's snapshot: a project holds one class, the class holds
methods, and each method holds an ordered list of elements. Fields accept the
editor's camelCase keys as well as their snake_case names.
"""

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Target languages, keyed by the editor's language string."""

    CSHARP = "csharp"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    PYTHON = "python"

    @classmethod
    def resolve(cls, value: "str | Language | None") -> "Language":
        """Map a language string to a Language. Unknown values mean C#."""
        try:
            return cls(value)
        except ValueError:
            return cls.CSHARP


# Element types whose children form a nested body.
BLOCK_TYPES = frozenset(
    {
        "for",
        "foreach",
        "while",
        "do-while",
        "if",
        "if-else",
        "if-else-if",
        "switch",
    }
)


class Position(BaseModel):
    x: float = 0
    y: float = 0


class CodeElement(BaseModel):
    """One block dropped on the canvas."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    type: str
    content: str = ""  # display text only, never rendered
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list["CodeElement"] | None = None
    position: Position | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_block(self) -> bool:
        return self.type in BLOCK_TYPES

    def iter_tree(self) -> Iterator["CodeElement"]:
        """Yield this element and its descendants, depth first."""
        yield self
        for child in self.children or []:
            yield from child.iter_tree()


CodeElement.model_rebuild()


class Parameter(BaseModel):
    name: str
    type: str = "string"  # semantic type, translated per language


class Method(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    visibility: str = "public"
    is_static: bool = Field(False, alias="isStatic")
    return_type: str = Field("void", alias="returnType")
    name: str = "MyMethod"
    parameters: list[Parameter] = Field(default_factory=list)
    elements: list[CodeElement] = Field(default_factory=list)


class ProjectData(BaseModel):
    """Root of the tree. The defaults are the editor's starting project."""

    model_config = ConfigDict(populate_by_name=True)

    namespace: str = "MyProject"
    class_name: str = Field("MyClass", alias="className")
    language: str = Language.CSHARP.value
    methods: list[Method] = Field(default_factory=lambda: [Method()])

    @field_validator("language", mode="before")
    @classmethod
    def _plain_language(cls, value: Any) -> Any:
        return value.value if isinstance(value, Language) else value

    @property
    def target(self) -> Language:
        return Language.resolve(self.language)

    def walk_elements(self) -> Iterator[CodeElement]:
        """Every element of every method, nested children included, in order."""
        for method in self.methods:
            for element in method.elements:
                yield from element.iter_tree()
