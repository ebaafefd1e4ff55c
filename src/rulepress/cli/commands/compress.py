"""Compression CLI commands."""

import click
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


@click.command()
@click.argument("text", required=False)
@click.option("-f", "--file", "input_file", type=click.Path(exists=True), help="Read text from file")
@click.option("-o", "--output", "output_file", type=click.Path(), help="Write result to file")
@click.option("--stopwords/--no-stopwords", default=None, help="Remove stopwords")
@click.option("--punctuation/--no-punctuation", default=None, help="Remove , ; : ' \" ! ?")
@click.option("--spaces/--no-spaces", default=None, help="Remove remaining whitespace")
@click.option("--stemming/--no-stemming", default=None, help="Strip word suffixes")
@click.option(
    "-s", "--stemmer",
    type=click.Choice(["porter", "snowball", "lancaster"]),
    default=None,
    help="Stemmer to use"
)
@click.option("-t", "--tokenizer", default=None, help="Tokenizer for token counts (e.g. gpt-4o, simple)")
@click.option("-v", "--verbose", is_flag=True, help="Show compression statistics")
def compress(text, input_file, output_file, stopwords, punctuation, spaces, stemming, stemmer, tokenizer, verbose):
    """Compress rules text for AI assistants.

    Provide text as argument, use -f to read from a file, or pipe via stdin.
    Unset stage flags fall back to the RP_* settings.

    Examples:

        rulepress compress -f CLAUDE.md -o CLAUDE.min.md

        rulepress compress "Always use the testing library" --no-stemming

        cat .cursorrules | rulepress compress --punctuation -s lancaster -v
    """
    if input_file:
        with open(input_file, encoding="utf-8") as f:
            text = f.read()
    elif not text:
        text = click.get_text_stream("stdin").read()

    if not text or not text.strip():
        console.print("[red]Error:[/red] No text provided")
        raise click.Abort()

    # Import here to avoid slow startup
    from ...compression import TextCompressor
    from ...core.exceptions import RulePressError

    overrides = {
        key: value for key, value in {
            "remove_stopwords": stopwords,
            "remove_punctuation": punctuation,
            "remove_spaces": spaces,
            "use_stemming": stemming,
            "stemmer_type": stemmer,
        }.items()
        if value is not None
    }

    try:
        compressor = TextCompressor(tokenizer=tokenizer)
        report = compressor.compress_with_report(text, **overrides)
    except RulePressError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()

    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(report.compressed_text)
        console.print(f"[green]Saved to:[/green] {output_file}")
    else:
        click.echo(report.compressed_text)

    if verbose:
        table = Table(title="Compression Results")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Original Length", f"{report.original_length} chars")
        table.add_row("Compressed Length", f"{report.compressed_length} chars")
        table.add_row("Compression Ratio", f"{report.compression_ratio}%")
        table.add_row("Est. Token Reduction", f"{report.token_reduction}%")
        table.add_row("Original Tokens", str(report.original_tokens))
        table.add_row("Compressed Tokens", str(report.compressed_tokens))
        table.add_row("Tokenizer", report.tokenizer)
        table.add_row("Stages", ", ".join(report.stages_applied) or "none")

        console.print(table)


@click.command()
@click.argument("original", type=click.Path(exists=True))
@click.argument("compressed", type=click.Path(exists=True))
def stats(original, compressed):
    """Compare a compressed file against its original.

    Example:

        rulepress stats CLAUDE.md CLAUDE.min.md
    """
    from ...compression import calculate_compression_ratio, estimate_token_reduction

    with open(original, encoding="utf-8") as f:
        original_text = f.read()
    with open(compressed, encoding="utf-8") as f:
        compressed_text = f.read()

    table = Table(title="Compression Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Original Length", f"{len(original_text)} chars")
    table.add_row("Compressed Length", f"{len(compressed_text)} chars")
    table.add_row("Compression Ratio", f"{calculate_compression_ratio(original_text, compressed_text)}%")
    table.add_row("Est. Token Reduction", f"{estimate_token_reduction(original_text, compressed_text)}%")

    Console().print(table)


@click.command()
def stages():
    """List compression stages in execution order."""
    from ...compression import TextCompressor

    compressor = TextCompressor()
    enabled = set(compressor.stages_for())

    table = Table(title="Compression Stages")
    table.add_column("Stage", style="cyan")
    table.add_column("Option")
    table.add_column("Default")
    table.add_column("Description")

    for stage in compressor.list_stages():
        default = "[green]on[/green]" if stage["name"] in enabled else "[dim]off[/dim]"
        table.add_row(stage["name"], stage["option"], default, stage["description"])

    Console().print(table)
