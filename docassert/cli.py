"""Command-line interface for docassert."""

import logging
import sys
from pathlib import Path

import click

from .annotations.errors import AnnotationError
from .generator.assembler import generate
from .generator.errors import RenderError
from .generator.renderer import JinjaRenderer
from .metadata.errors import MetadataError, MetadataValidationError
from .metadata.models import MetadataProvider
from .output.writer import default_output_path, write_test_file
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def output_options(func):
    """Options shared by the generate commands."""
    func = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        default=False,
        help="Log debug information",
    )(func)
    func = click.option(
        "--template-dir",
        type=click.Path(exists=True, file_okay=False),
        envvar="DOCASSERT_TEMPLATE_DIR",
        help="Directory with templates overriding the built-in ones",
    )(func)
    func = click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "file"]),
        default="text",
        help="Output format: 'text' prints to stdout, 'file' writes the test module",
    )(func)
    func = click.option(
        "--output",
        "output_path",
        type=click.Path(dir_okay=False),
        help="File to write with --format file (default: .~unit-tests/ next to the source)",
    )(func)
    func = click.option(
        "--test-class-name",
        help="Name of the generated test class (default: <ClassName>Test)",
    )(func)
    return func


@click.group()
@click.version_option()
def main():
    """docassert: generate unit-test skeletons from @assert annotations."""
    pass


@main.command("generate")
@click.argument("class_name")
@click.option(
    "--source-file",
    type=click.Path(exists=True, dir_okay=False),
    help="File defining the class (CLASS_NAME may then be 'ns-class')",
)
@output_options
def generate_cmd(
    class_name: str,
    source_file: str | None,
    test_class_name: str | None,
    output_path: str | None,
    output_format: str,
    template_dir: str | None,
    verbose: bool,
):
    """Generate tests for a Python class.

    CLASS_NAME is a dotted path such as package.module.Class, or a bare
    class name when --source-file is given.

    Exit codes:
      0 - Success
      1 - Malformed @assert annotation
      2 - Class, file or template error
    """
    from .metadata.introspect import ClassIntrospector

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    provider = ClassIntrospector(class_name, source_file)
    _run(provider, test_class_name, output_path, output_format, template_dir)


@main.command("generate-from-metadata")
@click.argument("metadata_file", type=click.Path(exists=True))
@output_options
def generate_from_metadata_cmd(
    metadata_file: str,
    test_class_name: str | None,
    output_path: str | None,
    output_format: str,
    template_dir: str | None,
    verbose: bool,
):
    """Generate tests from a YAML class description.

    METADATA_FILE is the path to a YAML file listing the class's methods
    and their doc comments.

    Exit codes:
      0 - Success
      1 - Malformed @assert annotation
      2 - Metadata, file or template error
    """
    from .metadata.loader import YamlMetadataProvider

    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    provider = YamlMetadataProvider(metadata_file)
    _run(provider, test_class_name, output_path, output_format, template_dir)


def _run(
    provider: MetadataProvider,
    test_class_name: str | None,
    output_path: str | None,
    output_format: str,
    template_dir: str | None,
) -> None:
    """Generate, then print or write the test module and exit."""
    try:
        metadata = provider.get_metadata()
        logger.debug("Generating tests for %s (%d methods)", metadata.name, len(metadata.methods))
        source = generate(
            metadata,
            renderer=JinjaRenderer(template_dir),
            test_class_name=test_class_name,
        )
    except MetadataValidationError as e:
        click.echo(f"Metadata validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except MetadataError as e:
        click.echo(f"Error loading class: {e}", err=True)
        sys.exit(2)
    except AnnotationError as e:
        click.echo(f"Annotation error: {e}", err=True)
        sys.exit(1)
    except RenderError as e:
        click.echo(f"Template error: {e}", err=True)
        sys.exit(2)

    if output_format == "text":
        click.echo(source, nl=False)
        sys.exit(0)

    if output_path is None:
        output_path = str(default_output_path(metadata.name, _source_file(provider)))

    path = write_test_file(output_path, source)
    click.echo(f"Generated: {path}")
    sys.exit(0)


def _source_file(provider: MetadataProvider) -> Path | None:
    """The file the tests belong next to, if the provider knows it."""
    get_source_file = getattr(provider, "get_source_file", None)
    if get_source_file is not None:
        return get_source_file()
    path = getattr(provider, "path", None)
    return Path(path) if path is not None else None


if __name__ == "__main__":
    main()
