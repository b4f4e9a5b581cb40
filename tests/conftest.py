import pytest

from blockcode import CodeElement, Method, Parameter, ProjectData


def element(type_: str, children: list[CodeElement] | None = None, **properties) -> CodeElement:
    return CodeElement(id=f"{type_}-1", type=type_, properties=properties, children=children)


@pytest.fixture
def make_project():
    """Build a one-method project around a list of elements."""

    def _make(language: str = "csharp", elements=(), **method_fields) -> ProjectData:
        method = Method(elements=list(elements), **method_fields)
        return ProjectData(
            namespace="MyProject",
            class_name="MyClass",
            language=language,
            methods=[method],
        )

    return _make


@pytest.fixture
def compute_method() -> Method:
    """A static method with parameters and a non-void return type."""
    return Method(
        visibility="public",
        is_static=True,
        return_type="int",
        name="Compute",
        parameters=[Parameter(name="name", type="string"), Parameter(name="count", type="int")],
    )
