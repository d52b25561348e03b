#!/usr/bin/env python3
"""
Resume Export CLI

Lays out a user's resume and writes it to PDF using the rendering context.

Commands:
    export   - Export a resume to PDF
    layout   - Print the render commands without writing a PDF
    validate - Check the layout against the page margins
    inspect  - Print the text lines of an exported PDF

Examples:\n

    export_resume.py export jane@example.com                       # Template presets

    export_resume.py export jane@example.com -p page_letter        # Letter paper

    export_resume.py export --demo -o demo.pdf                     # Demo account

    export_resume.py layout jane@example.com --page 2              # Commands on page 2

    export_resume.py validate jane@example.com                     # Margin checks only

    export_resume.py inspect resume.pdf --find Experience           # Where a heading landed
"""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from catalyst.contexts.layout.config_resolver import presets_for_template
from catalyst.contexts.layout.diagnostics import analyze_layout
from catalyst.contexts.layout.exceptions import MetricsError
from catalyst.contexts.layout.metrics import StandardFontMetrics
from catalyst.contexts.layout.pagination import DrawLine, DrawText, NewPage
from catalyst.contexts.rendering import export_resume, layout_resume
from catalyst.contexts.tracking import CareerDataStore, DataStoreError, User
from catalyst.utils.pdf_processing import extract_page_lines, find_line
from catalyst.utils.report_formatter import Column, TableFormatter

app = typer.Typer(
    help="Export CareerCatalyst resumes to PDF",
    add_completion=False,
    invoke_without_command=True,
)

EmailArgument = Annotated[
    Optional[str], typer.Argument(help="Email of the user whose resume to export")
]
DemoOption = Annotated[bool, typer.Option("--demo", help="Use the demo account")]
DataDirOption = Annotated[
    Optional[Path],
    typer.Option("--data-dir", "-d", help="Directory with users.json (default: CATALYST_DATA_PATH)"),
]
PresetOption = Annotated[
    Optional[List[str]],
    typer.Option(
        "--preset",
        "-p",
        help="Layout preset applied after the template defaults (repeatable)",
    ),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def load_user(email: Optional[str], demo: bool, data_dir: Optional[Path]) -> User:
    """Resolve the user from the data store, exiting with code 1 on failure."""
    try:
        store = CareerDataStore(data_dir)
    except DataStoreError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if demo:
        return store.demo_user()
    if not email:
        typer.secho("Error: give a user email or --demo", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    user = store.get_user(email)
    if user is None:
        typer.secho(f"Error: no user with email '{email}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return user


def preset_chain(user: User, extra: Optional[List[str]]) -> List[str]:
    """Template defaults followed by any presets given on the command line."""
    return presets_for_template(user.resume.template.name) + list(extra or [])


@app.command("export")
def export_command(
    email: EmailArgument = None,
    demo: DemoOption = False,
    data_dir: DataDirOption = None,
    preset: PresetOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: outs/results/<date>/)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every layout warning"),
    ] = False,
):
    """
    Export a resume to PDF.

    Examples:\n

        $ export_resume.py export jane@example.com                  # Export resume

        $ export_resume.py export jane@example.com -p style_compact # Compact spacing
    """
    user = load_user(email, demo, data_dir)
    presets = preset_chain(user, preset)

    typer.secho(f"\nExporting: {user.full_name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Presets: {', '.join(presets)}")
    typer.echo("")

    result = export_resume(user, output_path=output, presets=presets, verbose=verbose)

    typer.echo("")
    if result.success:
        typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {result.page_count}")
        typer.echo(f"  Warnings: {len(result.warnings)}")
        if verbose:
            for warning in result.warnings[:10]:
                typer.echo(f"  - {warning}")
        typer.echo(f"  PDF: {result.pdf_path}")
    else:
        typer.secho(
            f"✗ Export failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors[:10]:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
        if len(result.errors) > 10:
            typer.echo(f"  ... and {len(result.errors) - 10} more")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("layout")
def layout_command(
    email: EmailArgument = None,
    demo: DemoOption = False,
    data_dir: DataDirOption = None,
    preset: PresetOption = None,
    page: Annotated[
        Optional[int],
        typer.Option("--page", help="Only show commands on this page (1-based)", min=1),
    ] = None,
):
    """
    Print the render commands for a resume.

    Examples:\n

        $ export_resume.py layout jane@example.com            # All commands

        $ export_resume.py layout --demo --page 1             # First page only
    """
    user = load_user(email, demo, data_dir)
    try:
        commands, _ = layout_resume(user, preset_chain(user, preset))
    except (MetricsError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    table = TableFormatter(
        [
            Column("Page", 5, ">"),
            Column("Command", 9),
            Column("X", 8, ">"),
            Column("Y", 8, ">"),
            Column("Font", 18),
            Column("Text", 48),
        ]
    )
    table.add_section_header(f"Layout: {user.full_name}").add_table_header().add_separator()

    current_page = 1
    for command in commands:
        if isinstance(command, NewPage):
            current_page += 1
            continue
        if page is not None and current_page != page:
            continue
        if isinstance(command, DrawText):
            table.add_row(
                [
                    current_page,
                    "text",
                    f"{command.x:.1f}",
                    f"{command.y:.1f}",
                    f"{command.font} {command.size:g}",
                    command.text,
                ]
            )
        elif isinstance(command, DrawLine):
            table.add_row(
                [
                    current_page,
                    "line",
                    f"{command.x1:.1f}",
                    f"{command.y1:.1f}",
                    "",
                    f"to ({command.x2:.1f}, {command.y2:.1f})",
                ]
            )

    table.add_separator().add_text(f"{len(commands)} command(s), {current_page} page(s)")
    typer.echo(table.render())


@app.command("validate")
def validate_command(
    email: EmailArgument = None,
    demo: DemoOption = False,
    data_dir: DataDirOption = None,
    preset: PresetOption = None,
):
    """
    Check a resume layout against the page margins without writing a PDF.

    Examples:\n

        $ export_resume.py validate jane@example.com             # Check layout
    """
    user = load_user(email, demo, data_dir)
    metrics = StandardFontMetrics()

    typer.secho(f"\nValidating: {user.full_name}", fg=typer.colors.BLUE, bold=True)
    try:
        commands, geometry = layout_resume(user, preset_chain(user, preset), metrics)
    except (MetricsError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    diagnostics = analyze_layout(commands, geometry, metrics)
    issues = diagnostics.get_inherited_issues()
    warnings = diagnostics.get_inherited_warnings()

    typer.echo(f"  Pages: {diagnostics.page_count}")
    typer.echo(f"  Commands: {diagnostics.command_count}")
    for warning in warnings:
        typer.secho(f"  ! {warning}", fg=typer.colors.YELLOW)

    if diagnostics.is_valid:
        typer.secho("\n✓ Layout valid", fg=typer.colors.GREEN, bold=True)
        raise typer.Exit(code=0)

    typer.secho(f"\n✗ {len(issues)} layout issue(s)", fg=typer.colors.RED, bold=True)
    for issue in issues:
        typer.secho(f"  - {issue}", fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command("inspect")
def inspect_command(
    pdf_path: Annotated[Path, typer.Argument(help="Exported PDF")],
    find: Annotated[
        Optional[str],
        typer.Option("--find", "-f", help="Only report the page and line of this text"),
    ] = None,
):
    """
    Print the text lines of an exported PDF, page by page.

    Examples:\n

        $ export_resume.py inspect Jane_Doe_Resume.pdf              # All lines

        $ export_resume.py inspect Jane_Doe_Resume.pdf -f Skills    # Locate a heading
    """
    try:
        pages = extract_page_lines(pdf_path)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if find is not None:
        location = find_line(find, pages)
        if location is None:
            typer.secho(f"Not found: {find}", fg=typer.colors.YELLOW)
            raise typer.Exit(code=1)
        page, line = location
        typer.echo(f"{find}: page {page}, line {line + 1}")
        return

    for page, lines in pages.items():
        typer.secho(f"\n--- Page {page} ---", fg=typer.colors.BLUE, bold=True)
        for line in lines:
            typer.echo(line)


if __name__ == "__main__":
    app()
