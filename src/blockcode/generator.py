"""Top-level dispatch: pick the generator for a project's language."""

import logging

from .codegen import (
    BaseGenerator,
    CSharpGenerator,
    JavaGenerator,
    JavaScriptGenerator,
    PythonGenerator,
)
from .config import GeneratorConfig
from .models import Language, ProjectData

logger = logging.getLogger(__name__)

GENERATORS: dict[Language, type[BaseGenerator]] = {
    Language.CSHARP: CSharpGenerator,
    Language.JAVA: JavaGenerator,
    Language.JAVASCRIPT: JavaScriptGenerator,
    Language.PYTHON: PythonGenerator,
}

FILE_EXTENSIONS = {
    "csharp": "cs",
    "java": "java",
    "javascript": "js",
    "python": "py",
}


def get_generator(language: Language | str) -> type[BaseGenerator]:
    """Generator class for ``language``; unknown languages get C#."""
    return GENERATORS[Language.resolve(language)]


def generate(project: ProjectData, config: GeneratorConfig | None = None) -> str:
    """Render the whole project as one source file.

    Never raises for a valid ProjectData and never modifies it; the same input
    always produces the same text.
    """
    target = project.target
    if target.value != project.language:
        logger.debug("Unknown language %r, generating %s", project.language, target.value)
    logger.debug(
        "Generating %s for class %s (%d methods)",
        target.value,
        project.class_name,
        len(project.methods),
    )
    return GENERATORS[target](project, config).generate()


def file_extension(language: Language | str) -> str:
    if isinstance(language, Language):
        language = language.value
    return FILE_EXTENSIONS.get(language, "txt")


def output_filename(project: ProjectData) -> str:
    """File name offered for download, e.g. ``MyClass.cs``."""
    return f"{project.class_name}.{file_extension(project.language)}"
