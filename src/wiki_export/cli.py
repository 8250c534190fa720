"""Click CLI entry point for the exporter."""

from __future__ import annotations

from pathlib import Path

import click
from click.core import ParameterSource

from wiki_export.config import ExportOptions, parse_level
from wiki_export.errors import ExportError, ValidationError
from wiki_export.exporter import Exporter
from wiki_export.logging_config import setup_logging

# Command line parameter -> ExportOptions field
OPTION_FIELDS = {
    "project": "project",
    "project_in_title": "project_in_title",
    "title": "title",
    "title_format": "title_format",
    "author": "author",
    "source": "source_path",
    "file": "source_file",
    "target": "target_path",
    "target_file": "target_file",
    "auto_heading": "auto_heading",
    "auto_level": "auto_level",
    "retain_caption": "retain_caption",
    "appendix": "appendix_processing",
    "appendix_level": "appendix_heading_level",
    "toc": "table_of_contents",
}


@click.command()
@click.option("--config", "-c", "config_file", type=click.Path(exists=True, path_type=Path),
              help="YAML file with export options")
@click.option("--project", "-p", help="Project name, defaults to the wiki directory name less .wiki")
@click.option("--project-in-title/--no-project-in-title", default=True,
              help="Whether to include the project in the title")
@click.option("--title", help="Document title, defaults to the source file name")
@click.option("--title-format", default="{project} {title}", show_default=True,
              help="Template for the title, with {project} and {title} placeholders")
@click.option("--author", "-a", help="Author name")
@click.option("--source", "-s", type=click.Path(path_type=Path), help="Source path to process")
@click.option("--file", "-f", help="Source file to process, defaults to the entire directory")
@click.option("--target", "-t", type=click.Path(path_type=Path), help="Target path")
@click.option("--target-file", "-u", help="Target file, defaults to the document title")
@click.option("--auto-heading/--no-auto-heading", default=True,
              help="Add a heading for each content file (except the top-most file)")
@click.option("--auto-level/--no-auto-level", default=True,
              help="Adjust the Markdown headings according to the nesting level")
@click.option("--retain-caption", is_flag=True, help="Retain attachment captions")
@click.option("--appendix/--no-appendix", default=True,
              help="Flatten appendices to a fixed heading level")
@click.option("--appendix-level", type=int, default=1, show_default=True,
              help="Heading level used for appendices")
@click.option("--toc", is_flag=True, help="Ask for a table of contents in the front matter")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"],
              case_sensitive=False), help="Logging level")
@click.option("--fatal-level", type=click.Choice(["WARNING", "ERROR"], case_sensitive=False),
              help="Problems at or above this level fail the export")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, log_level: str | None,
        fatal_level: str | None, verbose: bool, **params) -> None:
    """Export an Azure DevOps wiki tree to a single Markdown document."""
    options = ExportOptions.load(config_file) if config_file else ExportOptions.default()
    apply_overrides(ctx, options, params)
    if log_level:
        options.logging.level = log_level
    if fatal_level:
        options.fatal_error_level = parse_level(fatal_level)

    setup_logging(options.logging, verbose)

    click.echo(f"Exporting {options.source_path} {options.source_file or ''} to {options.target_path}")

    try:
        result = Exporter().export(options)
    except ValidationError as e:
        raise click.UsageError(str(e))
    except ExportError as e:
        print_warnings([p.message for p in e.result.warnings])
        raise click.ClickException(str(e))

    print_warnings([p.message for p in result.warnings])

    click.echo()
    click.echo(f"  Files merged: {result.files_written}, Attachments copied: {result.attachments_copied}")
    click.echo(f"  Written to {result.document_path}")
    click.echo("Done!")


def apply_overrides(ctx: click.Context, options: ExportOptions, params: dict) -> None:
    """Copy parameters given on the command line onto the options.

    Parameters left at their click defaults keep the config file's value.
    """
    for param, field_name in OPTION_FIELDS.items():
        if ctx.get_parameter_source(param) is ParameterSource.DEFAULT:
            continue
        setattr(options, field_name, params[param])


def print_warnings(warnings: list[str]) -> None:
    if not warnings:
        return
    click.echo()
    click.echo(f"Warnings ({len(warnings)}):")
    for warning in warnings[:10]:
        click.echo(f"  - {warning}")
    if len(warnings) > 10:
        click.echo(f"  ... and {len(warnings) - 10} more")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
