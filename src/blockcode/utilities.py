"""Utility functions: self-contained algorithms offered as single blocks.

Languages that hoist utilities write each one once at class level; the
element's own position only keeps a comment. ``collect_utilities`` finds the
definitions to hoist.
"""

from collections.abc import Iterable, Iterator

from .models import CodeElement, Method

UTILITY_TYPES = (
    "is-even",
    "is-odd",
    "is-prime",
    "factorial",
    "fibonacci",
    "reverse-string",
    "is-palindrome",
    "swap",
    "decimal-to-binary",
    "binary-to-decimal",
    "decimal-to-hex",
    "celsius-to-fahrenheit",
    "fahrenheit-to-celsius",
    "validate-email",
    "validate-password",
    "validate-url",
    "validate-date",
    "is-numeric",
)

UTILITY_TYPE_SET = frozenset(UTILITY_TYPES)


def is_utility(element_type: str) -> bool:
    return element_type in UTILITY_TYPE_SET


def _rendered(elements: Iterable[CodeElement]) -> Iterator[CodeElement]:
    """Elements the generators write, descending only into block bodies."""
    for element in elements:
        yield element
        if element.is_block:
            yield from _rendered(element.children or [])


def collect_utilities(methods: Iterable[Method]) -> list[str]:
    """Distinct utility types used anywhere in ``methods``, first use first."""
    seen: dict[str, None] = {}
    for method in methods:
        for node in _rendered(method.elements):
            if is_utility(node.type):
                seen.setdefault(node.type, None)
    return list(seen)
