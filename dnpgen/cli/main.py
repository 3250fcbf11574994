"""Command-line interface for the DNP3 point list generator."""

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

from .. import __version__
from ..exceptions import DnpGenError

console = Console()
logger = logging.getLogger(__name__)


class CommandError(click.ClickException):
    """Fatal run error, printed in red on the console."""

    def show(self, file=None):
        console.print(f"[red]✗ {escape(self.format_message())}[/red]")


def _load_rules(config_path, verbose, no_annotate):
    """Load configuration, set up logging and build the rule set."""
    from ..config import find_config_file, load_config
    from ..utils import setup_logging

    path = find_config_file(config_path)
    config = load_config(str(path))
    app = config.app
    setup_logging(
        level="DEBUG" if verbose else app.log_level,
        log_file=app.log_file,
    )
    logger.info(f"Configuration loaded from {path}")
    rules = config.build_rules(annotate=False if no_annotate else None)
    return path, config, rules

def _print_summary(result) -> None:
    """Print per-category counts of a generation run."""
    from ..engine import get_family_summary

    summary = get_family_summary(result.lists)

    table = Table(title="DNP3 Lists")
    table.add_column("List", style="cyan")
    table.add_column("Points", justify="right")
    table.add_column("Spares", justify="right")
    table.add_column("Total", justify="right")

    for code in ("DI", "DO", "AI", "AO"):
        row = summary[code]
        table.add_row(code, str(row["points"]), str(row["spares"]), str(row["total"]))

    console.print(table)

    counts = result.counts
    console.print(
        f"DI: {counts['DI']} | DO: {counts['DO']} | AI: {counts['AI']} | AO: {counts['AO']}"
    )

    parse_result = result.parse_result
    ignored = parse_result.declaration_count - result.lists.point_count
    console.print(
        f"[dim]{parse_result.lines_read} lines read, "
        f"{parse_result.signal_lines} SIG= lines, "
        f"{len(parse_result.skipped_lines)} unmatched, "
        f"{ignored} with unrecognized type[/dim]"
    )

    console.print(f"\n[green]✓ List file saved to:[/green] {escape(str(result.output_path))}")
    if result.report_path:
        console.print(f"[green]✓ Report saved to:[/green] {escape(str(result.report_path))}")


config_option = click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Configuration YAML (default: config.yaml beside the tool, then in the working directory)"
)
report_option = click.option(
    "--report", "-r",
    default=None,
    type=click.Path(dir_okay=False),
    help="Also write a point assignment report (.xlsx or .csv)"
)
no_annotate_option = click.option(
    "--no-annotate",
    is_flag=True,
    default=False,
    help="Write bare spare names without the originating point"
)
verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging"
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """DNP3 Point List Generator.

    Build the RTU __lists.ini DNP3 mapping from a node's .SIG signal file.
    """
    pass


@cli.command()
@click.option(
    "--path", "-p", "project_path",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Project root directory"
)
@click.option(
    "--node", "-n",
    required=True,
    help="Node name"
)
@click.option(
    "--skip-ext",
    is_flag=True,
    default=False,
    help="Do not run SIGEXT, use the existing .SIG file"
)
@click.option(
    "--output", "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="List file path (default: __lists.ini in the resource directory)"
)
@config_option
@report_option
@no_annotate_option
@verbose_option
def generate(project_path, node, skip_ext, output, config_path, report, no_annotate, verbose):
    """Extract signals for a project node and generate its DNP3 lists."""
    from ..engine import ProjectPaths, prepare_signal_file, generate_lists

    console.print(Panel.fit(
        f"[bold blue]DNP3 Point List Generator[/bold blue] [dim]v{__version__}[/dim]",
        border_style="blue"
    ))

    try:
        _, config, rules = _load_rules(config_path, verbose, no_annotate)
        paths = ProjectPaths.resolve(project_path, node)
        sig_file = prepare_signal_file(
            paths,
            config.app.sigext_path,
            config.app.sigext_flags,
            skip_ext=skip_ext,
        )
        result = generate_lists(
            str(sig_file),
            output or str(paths.list_file),
            rules,
            report_file=report,
        )
    except DnpGenError as e:
        raise CommandError(str(e)) from e

    _print_summary(result)


@cli.command()
@click.option(
    "--sig", "-s", "sig_file",
    required=True,
    type=click.Path(dir_okay=False),
    help="Path to the .SIG signal file"
)
@click.option(
    "--output", "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output list file path"
)
@config_option
@report_option
@no_annotate_option
@verbose_option
def classify(sig_file, output, config_path, report, no_annotate, verbose):
    """Generate DNP3 lists from an existing .SIG file."""
    from ..engine import generate_lists

    try:
        _, _, rules = _load_rules(config_path, verbose, no_annotate)
        result = generate_lists(sig_file, output, rules, report_file=report)
    except DnpGenError as e:
        raise CommandError(str(e)) from e

    _print_summary(result)


@cli.command("check-config")
@config_option
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with an error if any pattern is invalid"
)
def check_config(config_path, strict):
    """Validate the configuration and list the classification patterns."""
    try:
        path, config, rules = _load_rules(config_path, False, False)
    except DnpGenError as e:
        raise CommandError(str(e)) from e

    console.print(f"Configuration: [cyan]{escape(str(path))}[/cyan]\n")

    table = Table(title="Output Patterns")
    table.add_column("Family", style="cyan")
    table.add_column("Pattern")
    table.add_column("Status")

    for pattern_set in (rules.analog_output_patterns, rules.digital_output_patterns):
        invalid = set(pattern_set.invalid)
        for source in pattern_set.sources:
            status = "[red]invalid[/red]" if source in invalid else "[green]ok[/green]"
            table.add_row(pattern_set.family.value, escape(source), status)

    console.print(table)

    spares = config.app.spares
    console.print(
        f"Spares: DI={escape(spares.di)} DO={escape(spares.do)} "
        f"AI={escape(spares.ai)} AO={escape(spares.ao)} "
        f"(annotate: {'yes' if spares.annotate else 'no'})"
    )

    if rules.invalid_patterns:
        console.print(f"[yellow]{len(rules.invalid_patterns)} invalid pattern(s) will never match[/yellow]")
        if strict:
            raise CommandError("Configuration has invalid patterns")
    else:
        console.print("[green]✓ Configuration is valid[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
