"""Command-line front end.

Usage:
    blockcode generate project.json
    blockcode generate project.yaml --language python --output build/
    blockcode generate project.json --stdout
    blockcode elements --language java
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import GeneratorConfig, config_from_env, load_config
from .errors import BlockcodeError
from .generator import FILE_EXTENSIONS, generate, output_filename
from .loader import load_project
from .models import Language
from .palette import CATEGORIES, label_for

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [language.value for language in Language]


def _config(args: argparse.Namespace) -> GeneratorConfig:
    if args.config:
        return load_config(args.config)
    return config_from_env()


def cmd_generate(args: argparse.Namespace) -> int:
    project = load_project(args.project)
    if args.language:
        project = project.model_copy(update={"language": args.language})

    source = generate(project, _config(args))

    if args.stdout:
        sys.stdout.write(source)
        return 0

    target = args.output / output_filename(project)
    try:
        args.output.mkdir(parents=True, exist_ok=True)
        target.write_text(source)
    except OSError as e:
        print(f"  Error: cannot write {target}: {e}", file=sys.stderr)
        return 1
    logger.info("Wrote %s", target)
    print(f"  Generated {target}")
    return 0


def cmd_elements(args: argparse.Namespace) -> int:
    for category in CATEGORIES:
        print(category.name)
        for item in category.items:
            print(f"  {item.type:24s} {label_for(item.type, args.language)}")
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockcode", description="Generate source code from block-editor projects"
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Render a project file as source code")
    gen.add_argument("project", type=Path, help="Project snapshot (.json, .yaml or .yml)")
    gen.add_argument(
        "--language",
        choices=LANGUAGE_CHOICES,
        default=None,
        help="Override the project's target language",
    )
    out = gen.add_mutually_exclusive_group()
    out.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("."),
        help=f"Directory for the generated file (extensions: {FILE_EXTENSIONS})",
    )
    out.add_argument("--stdout", action="store_true", help="Print instead of writing a file")
    gen.add_argument("--config", type=Path, default=None, help="YAML generator config")
    gen.set_defaults(func=cmd_generate)

    elements = sub.add_parser("elements", help="List the element palette")
    elements.add_argument("--language", choices=LANGUAGE_CHOICES, default=Language.CSHARP.value)
    elements.set_defaults(func=cmd_elements)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except BlockcodeError as e:
        print(f"  Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
