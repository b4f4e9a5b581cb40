"""Code generators for the supported target languages."""

from .base import BaseGenerator
from .csharp import CSharpGenerator, generate_csharp
from .java import JavaGenerator, generate_java
from .javascript import JavaScriptGenerator, generate_javascript
from .python import PythonGenerator, generate_python

__all__ = [
    "BaseGenerator",
    "CSharpGenerator",
    "JavaGenerator",
    "JavaScriptGenerator",
    "PythonGenerator",
    "generate_csharp",
    "generate_java",
    "generate_javascript",
    "generate_python",
]
