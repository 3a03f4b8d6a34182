"""cleantable CLI -- Rich-formatted table cleaning from the terminal."""

import logging
from pathlib import Path

import click


def _read_input(text):
    """Return input text from the argument or stdin."""
    if not text:
        text = click.get_text_stream("stdin").read()
    return text


@click.group()
@click.version_option(package_name="cleantable")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose):
    """cleantable -- Turn messy delimited text into a clean table."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True, dir_okay=False), help="Read a .txt, .csv or .xlsx file.")
@click.option("--delimiter", "-d", default="", help="Literal column delimiter (default: auto-detect).")
@click.option("--keep-empty-rows", is_flag=True, help="Do not remove empty rows.")
@click.option("--keep-empty-columns", is_flag=True, help="Do not remove empty columns.")
@click.option("--no-collapse-spaces", is_flag=True, help="Keep cell whitespace exactly.")
@click.option("--format", "-t", "fmt", default="table",
              type=click.Choice(["table", "tsv", "markdown", "csv", "xlsx"]),
              help="Output format (default: table preview).")
@click.option("--output", "-o", default="", help="Output file path.")
@click.option("--exclude-header", is_flag=True, help="Exclude the first row from export.")
def convert(text, file, delimiter, keep_empty_rows, keep_empty_columns,
            no_collapse_spaces, fmt, output, exclude_header):
    """Convert messy text or a file into a clean table."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    from ._types import CleaningOptions, FileLoadError
    from .export import export_table, write_xlsx
    from .pipeline import convert_file, convert_text

    console = Console()
    err_console = Console(stderr=True)

    options = CleaningOptions.from_env()
    if no_collapse_spaces:
        options.collapse_spaces = False
    if keep_empty_rows:
        options.remove_empty_rows = False
    if keep_empty_columns:
        options.remove_empty_columns = False

    try:
        if file:
            result = convert_file(file, delimiter, options)
        else:
            text = _read_input(text)
            if not text or not text.strip():
                err_console.print("[red]No input text provided.[/red]")
                raise SystemExit(1)
            result = convert_text(text, delimiter, options)
    except (FileLoadError, FileNotFoundError, ImportError) as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1)

    err_console.print(f"Detected delimiter: [bold]{escape(result.strategy)}[/bold]")

    if not result.has_table:
        err_console.print(
            "[yellow]No table found. Try a custom delimiter with --delimiter.[/yellow]"
        )
        raise SystemExit(1)

    rows = result.export_rows(exclude_header)

    if fmt == "table":
        width = result.column_count
        preview = Table(title=f"Cleaned Table ({result.row_count} rows)")
        header = result.table[0]
        for i in range(width):
            preview.add_column(escape(header[i]) if i < len(header) else "", style="cyan")
        for row in result.table[1:]:
            preview.add_row(*[escape(row[i]) if i < len(row) else "" for i in range(width)])
        console.print(preview)
        return

    if fmt == "xlsx":
        if not output:
            err_console.print("[red]--output is required for xlsx.[/red]")
            raise SystemExit(1)
        try:
            saved = write_xlsx(rows, output)
        except ImportError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1)
        err_console.print(f"Saved to: [bold]{saved}[/bold]")
        return

    rendered = export_table(rows, fmt)
    if output:
        Path(output).write_text(rendered, encoding="utf-8", newline="")
        err_console.print(f"Saved to: [bold]{output}[/bold]")
    else:
        click.echo(rendered)


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", type=click.Path(exists=True, dir_okay=False), help="Read a .txt, .csv or .xlsx file.")
@click.option("--no-collapse-spaces", is_flag=True, help="Keep cell whitespace exactly.")
def detect(text, file, no_collapse_spaces):
    """Show how each delimiter candidate scores on the input."""
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    from ._types import FileLoadError, Strategy
    from .ingestion import infer_table, load_file, looks_like_csv, score_candidates, split_lines

    console = Console()

    if file:
        try:
            loaded = load_file(file)
        except (FileLoadError, FileNotFoundError, ImportError) as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise SystemExit(1)
        if loaded.kind == "xlsx":
            # Spreadsheet cells are already split; nothing to score.
            console.print(f"Source: {escape(loaded.meta)}")
            console.print(f"\nDetected delimiter: [bold]{Strategy.XLSX.value}[/bold]")
            return
        text = loaded.text
    else:
        text = _read_input(text)
    lines = split_lines(text or "")
    if not lines:
        console.print("[red]No input text provided.[/red]")
        raise SystemExit(1)

    collapse = not no_collapse_spaces

    table = Table(title="Delimiter Candidates")
    table.add_column("Strategy", style="cyan")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Mode columns", justify="right")

    for candidate in score_candidates(lines, collapse):
        score = f"{candidate.score:.0f}" if candidate.usable else "[red]inf[/red]"
        mode = str(candidate.mode_columns) if candidate.mode_columns is not None else "-"
        table.add_row(candidate.strategy.value, score, mode)

    console.print(table)

    if looks_like_csv(lines):
        chosen = Strategy.CSV.value
    else:
        _, chosen = infer_table(lines, collapse_spaces=collapse)
    console.print(f"\nDetected delimiter: [bold]{escape(chosen)}[/bold]")

