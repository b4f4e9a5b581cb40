"""blockcode: turn visually assembled methods into source code.

A project built in the block editor (a class, its methods and the elements
dropped into each method) is rendered as C#, Java, JavaScript or Python.

Example:
    from blockcode import generate, load_project, output_filename

    project = load_project("project.json")
    source = generate(project)
    open(output_filename(project), "w").write(source)
"""

__version__ = "0.1.0"

from .codegen import (
    CSharpGenerator,
    JavaGenerator,
    JavaScriptGenerator,
    PythonGenerator,
    generate_csharp,
    generate_java,
    generate_javascript,
    generate_python,
)
from .config import GeneratorConfig, load_config
from .errors import BlockcodeError, ConfigError, ProjectLoadError
from .generator import file_extension, generate, get_generator, output_filename
from .loader import load_project, parse_project
from .models import CodeElement, Language, Method, Parameter, Position, ProjectData
from .palette import CATEGORIES, ELEMENT_TYPES, create_element, label_for
from .typemap import translate_type
from .utilities import UTILITY_TYPES, collect_utilities

__all__ = [
    # Model
    "ProjectData",
    "Method",
    "Parameter",
    "CodeElement",
    "Position",
    "Language",
    # Load
    "load_project",
    "parse_project",
    "ProjectLoadError",
    # Configure
    "GeneratorConfig",
    "load_config",
    "ConfigError",
    "BlockcodeError",
    # Generate
    "generate",
    "get_generator",
    "file_extension",
    "output_filename",
    "translate_type",
    "collect_utilities",
    "UTILITY_TYPES",
    "CSharpGenerator",
    "JavaGenerator",
    "JavaScriptGenerator",
    "PythonGenerator",
    "generate_csharp",
    "generate_java",
    "generate_javascript",
    "generate_python",
    # Palette
    "CATEGORIES",
    "ELEMENT_TYPES",
    "create_element",
    "label_for",
]
