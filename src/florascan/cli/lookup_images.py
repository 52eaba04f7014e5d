"""CLI command for looking up species imagery in external catalogs."""

import asyncio

import click

from florascan.config import ConfigManager
from florascan.enrichment.resolver import ImageEnrichmentResolver
from florascan.system.path_resolver import PathResolver
from florascan.system.structlog_configurator import configure_structlog


@click.command()
@click.argument("scientific_name")
@click.option(
    "--diverse",
    is_flag=True,
    help="Gather a set of distinct images from every source instead of one",
)
def lookup_images(scientific_name: str, diverse: bool) -> None:
    """Look up images for a species by scientific name.

    Examples:
        # Representative image (placeholder when nothing is found)
        florascan-lookup-images "Mentha piperita"

        # Up to six distinct images
        florascan-lookup-images "Mentha piperita" --diverse
    """
    asyncio.run(_lookup_images_async(scientific_name, diverse))


async def _lookup_images_async(scientific_name: str, diverse: bool) -> None:
    """Async implementation of the image lookup."""
    path_resolver = PathResolver()
    config = ConfigManager(path_resolver).load()
    configure_structlog(config)

    resolver = ImageEnrichmentResolver(config.enrichment)
    await resolver.start()
    try:
        if diverse:
            images = await resolver.resolve_diverse_images(scientific_name)
            if not images:
                click.echo(click.style(f"No images found for {scientific_name}", fg="yellow"))
                return
            for url in images:
                click.echo(url)
        else:
            url = await resolver.resolve_representative_image(scientific_name)
            if url == config.enrichment.placeholder_image_url:
                click.echo(click.style("No catalog image found, using placeholder", fg="yellow"))
            click.echo(url)
    finally:
        await resolver.stop()


if __name__ == "__main__":
    lookup_images()
