import typer
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS, setup_logging
from .core.formatter import JapaneseNumberFormatter
from .utils.number_parts import load_tables

app = typer.Typer(add_completion=False)


def _build_formatter(tables: Optional[Path]) -> JapaneseNumberFormatter:
    if tables is None:
        return JapaneseNumberFormatter()
    try:
        return JapaneseNumberFormatter(load_tables(tables))
    except (FileNotFoundError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--tables")


@app.callback()
def main():
    """
    Convert financial-style Japanese numerals to Arabic digits.
    """
    setup_logging()


@app.command("format")
def format_values(
    values: List[str] = typer.Argument(..., help="Numerals to convert, e.g. 壱萬弐仟"),
    tables: Optional[Path] = typer.Option(None, help="YAML file with extra digits/separators")
):
    """
    Convert numerals given on the command line.
    """
    formatter = _build_formatter(tables)
    failed = False
    for value in values:
        result = formatter.format(value)
        if result is None:
            typer.echo(f"Invalid numeral: {value}", err=True)
            failed = True
        else:
            typer.echo(result)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def convert(
    input: Path = typer.Option(..., help="Text file with one numeral per line"),
    output: Path = typer.Option(..., help="Path to write results"),
    fmt: str = typer.Option(DEFAULT_OUTPUT_FORMAT, help="Output format: yaml or jsonl"),
    tables: Optional[Path] = typer.Option(None, help="YAML file with extra digits/separators")
):
    """
    Convert every line of a file and write YAML or JSON Lines results.
    """
    from .core.batch import BatchConverter

    if fmt not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"Invalid fmt: {fmt}. Must be 'yaml' or 'jsonl'.")
    if not input.exists():
        raise typer.BadParameter(f"Input file not found: {input}", param_hint="--input")

    converter = BatchConverter(_build_formatter(tables))
    summary = converter.convert_file(input, output, fmt)
    typer.echo(f"total={summary['total']} converted={summary['converted']} rejected={summary['rejected']}")


if __name__ == "__main__":
    app()
