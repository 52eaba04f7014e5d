"""CLI command for resolving raw property labels to canonical tags."""

from pathlib import Path

import click

from florascan.tags.canonicalizer import TagCanonicalizer, extract_property_mentions
from florascan.tags.vocabulary import load_vocabulary


@click.command()
@click.argument("tags", nargs=-1)
@click.option(
    "--text",
    help="Free text to scan for anti-<property> mentions, e.g. a species description",
)
@click.option(
    "--vocabulary",
    "vocabulary_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML vocabulary to use instead of the built-in one",
)
@click.option("--verbose", "-v", is_flag=True, help="Show how each input resolved")
def canonicalize_tags(
    tags: tuple[str, ...],
    text: str | None,
    vocabulary_path: Path | None,
    verbose: bool,
) -> None:
    """Resolve raw property labels to the controlled tag vocabulary.

    Examples:
        # Map a few labels
        florascan-canonicalize-tags "Anti Inflammatory" "Immune Support"

        # Extract and map mentions from a description
        florascan-canonicalize-tags --text "It has anti-inflammatory and antiviral effects"
    """
    raw_tags = list(tags) + extract_property_mentions(text)
    if not raw_tags:
        raise click.UsageError("Give at least one TAG or --text")

    canonicalizer = TagCanonicalizer(load_vocabulary(vocabulary_path))

    if verbose:
        for raw_tag in raw_tags:
            resolved = canonicalizer.canonicalize_one(raw_tag)
            if resolved is None:
                click.echo(click.style(f"{raw_tag!r} -> dropped", fg="yellow"))
            elif canonicalizer.is_canonical(resolved):
                click.echo(f"{raw_tag!r} -> {resolved}")
            else:
                click.echo(click.style(f"{raw_tag!r} -> {resolved} (not canonical)", fg="yellow"))
        click.echo()

    for tag in sorted(canonicalizer.canonicalize(raw_tags)):
        click.echo(tag)


if __name__ == "__main__":
    canonicalize_tags()
