#!/usr/bin/env python3
"""
Glossary Builder - Command Line Interface
"""
import sys
import click
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from glossary_builder import __version__
from glossary_builder.core.exceptions import GlossaryBuilderError
from glossary_builder.core.interfaces import IProgressCallback
from glossary_builder.core.linker import TermLinker
from glossary_builder.core.models import BuildJob, BuildStatus, DuplicateTermPolicy
from glossary_builder.core.pipeline import GlossaryPipeline
from glossary_builder.utils.config_manager import AppConfig, ConfigManager, write_config_template
from glossary_builder.utils.logger import setup_logging


console = Console()

_STAGE_LABELS = {
    BuildStatus.PARSING: "Parsing glossary",
    BuildStatus.LINKING: "Cross-linking definitions",
    BuildStatus.RENDERING: "Rendering pages",
    BuildStatus.WRITING: "Writing pages",
}


class RichProgressCallback(IProgressCallback):
    """Progress callback using Rich library."""

    def __init__(self, progress: Progress, task_id):
        self.progress = progress
        self.task_id = task_id

    def on_start(self, job: BuildJob) -> None:
        self.progress.update(self.task_id, total=None, completed=0)

    def on_stage(self, job: BuildJob, status: BuildStatus) -> None:
        label = _STAGE_LABELS.get(status, status.value)
        self.progress.update(self.task_id, description=f"[cyan]{label}...")
        if status is BuildStatus.WRITING:
            self.progress.update(self.task_id, total=job.total_terms + 1, completed=0)

    def on_page_written(self, job: BuildJob, path: Path) -> None:
        self.progress.advance(self.task_id)

    def on_complete(self, job: BuildJob) -> None:
        self.progress.update(self.task_id, description="[green]Done")

    def on_error(self, job: BuildJob, error: Exception) -> None:
        self.progress.update(self.task_id, description="[red]Failed")


def _load_config(config_path, verbose: bool = False, quiet: bool = False) -> AppConfig:
    """Load configuration and configure logging; exits on bad config."""
    try:
        config = ConfigManager(config_path).config
    except GlossaryBuilderError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    log = config.logging
    setup_logging(
        name="glossary_builder",
        log_dir=Path(log.log_dir),
        log_level=log.log_level,
        console_level="DEBUG" if verbose else ("WARNING" if quiet else log.console_level),
        use_colors=log.use_colors,
        file_logging=log.file_logging,
        max_bytes=log.max_bytes,
        backup_count=log.backup_count
    )
    return config


config_option = click.option(
    '--config', '-c', 'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Config file (YAML or JSON); defaults to ./glossary.yaml if present'
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Glossary Builder - Turn a plain-text glossary into cross-linked HTML pages."""
    pass


@cli.command()
@click.argument('input_file', required=False, type=click.Path(path_type=Path))
@click.argument('output_dir', required=False, type=click.Path(file_okay=False, path_type=Path))
@config_option
@click.option('--reject-duplicates', is_flag=True, help='Fail when a term is defined twice')
@click.option('--no-self-links', is_flag=True, help="Do not link a term inside its own definition")
@click.option('--encoding', default=None, help='Encoding of the glossary file')
@click.option('--no-overwrite', is_flag=True, help='Fail if a page already exists')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def build(input_file, output_dir, config_path, reject_duplicates, no_self_links,
          encoding, no_overwrite, verbose):
    """
    Build the index page and one page per term.

    Missing arguments are prompted for.

    Examples:

        # Build into ./site
        glossary-builder build terms.txt site

        # Ask for the file name and output folder
        glossary-builder build
    """
    config = _load_config(config_path, verbose)

    if input_file is None:
        input_file = Path(click.prompt("What is the file name?"))
    if output_dir is None:
        output_dir = Path(click.prompt(
            "Where would you like to save these files?",
            default=config.output.output_dir
        ))

    if reject_duplicates:
        config.parser.duplicate_policy = DuplicateTermPolicy.REJECT.value
    if no_self_links:
        config.linker.link_self = False
    if encoding:
        config.parser.encoding = encoding
    if no_overwrite:
        config.output.overwrite = False

    console.print("\n[bold cyan]Glossary Builder[/bold cyan]")
    console.print(f"[dim]Input:  {escape(str(input_file))}[/dim]")
    console.print(f"[dim]Output: {escape(str(output_dir))}[/dim]\n")

    try:
        pipeline = GlossaryPipeline.from_config(config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True
        ) as progress:
            task = progress.add_task("[cyan]Starting...", total=None)
            callback = RichProgressCallback(progress, task)
            job = pipeline.build_site(input_file, output_dir, progress_callback=callback)

    except KeyboardInterrupt:
        console.print("\n[yellow]Build cancelled by user[/yellow]")
        sys.exit(1)
    except GlossaryBuilderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print("[bold green]✓ Site built[/bold green]\n")

    table = Table(title="Build Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Terms", str(job.total_terms))
    table.add_row("Links", str(job.total_links))
    table.add_row("Pages written", str(job.page_count))
    table.add_row("Output", escape(str(job.output_dir)))
    table.add_row("Duration", f"{job.duration:.2f}s")
    console.print(table)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@config_option
def terms(input_file, config_path):
    """
    List the terms of a glossary file.

    Example:

        glossary-builder terms terms.txt
    """
    config = _load_config(config_path)

    try:
        pipeline = GlossaryPipeline.from_config(config)
        glossary = pipeline.parser.parse_file(input_file)
        linker = pipeline.linker
        link_counts = linker.count_links(glossary) if isinstance(linker, TermLinker) else {}
    except GlossaryBuilderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Term", style="cyan")
    table.add_column("Definition length", style="white", justify="right")
    table.add_column("Links", style="green", justify="right")

    for term, definition in glossary.items():
        table.add_row(escape(term), str(len(definition)), str(link_counts.get(term, 0)))

    console.print(table)
    console.print(f"\n[dim]Total: {len(glossary)} terms[/dim]\n")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('page')
@config_option
def preview(input_file, page, config_path):
    """
    Print the HTML of one page to stdout.

    PAGE is a term or the index page name.

    Example:

        glossary-builder preview terms.txt index
    """
    config = _load_config(config_path, quiet=True)

    try:
        pipeline = GlossaryPipeline.from_config(config)
        linked = pipeline.linker.link(pipeline.parser.parse_file(input_file))
        formatter = pipeline.formatter
        if page == config.output.index_name:
            text = formatter.render_index(linked.terms)
        else:
            text = formatter.render_term_page(page, linked.definition(page))
    except GlossaryBuilderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    click.echo(text, nl=False)


@cli.command('init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path), default=Path("glossary.yaml"))
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init_config(path, force):
    """
    Write a commented configuration template.

    Example:

        glossary-builder init-config glossary.yaml
    """
    if path.exists() and not force:
        console.print(f"[red]Error: {escape(str(path))} already exists (use --force)[/red]")
        sys.exit(1)

    write_config_template(path)
    console.print(f"[green]✓ Template written to {escape(str(path))}[/green]")


if __name__ == '__main__':
    cli()
