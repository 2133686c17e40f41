"""Command-line entry points for the manifest job and the listing page."""

import logging
import sys
from pathlib import Path

import click
from click.core import ParameterSource

from mindustry_mods.application.card_renderer import render_listing
from mindustry_mods.application.fetcher_service import FetcherService, FetchOptions
from mindustry_mods.application.listing_controller import ListingController
from mindustry_mods.infrastructure.listing_client import ListingClient, load_listing_file
from mindustry_mods.infrastructure.token_store import TokenStore

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


@click.command(name="mindustry-mods-backend")
@click.option("-i", "--instant", is_flag=True, help="Run templates right away.")
@click.option("-p", "--push", is_flag=True, help="Push said changes to GitHub.")
@click.option("-H", "--hourly", is_flag=True, help="Keep running hourly.")
@click.option("-c", "--clean", is_flag=True, help="Clear cache and stuff.")
@click.option("-f", "--fast", is_flag=True, help="No update, just get to the end.")
@click.option("-d", "--path", type=click.Path(path_type=Path), default=Path("."),
              show_default=True, help="Path to root of directory.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def backend(instant, push, hourly, clean, fast, path, verbose):
    """Fetch and decode the upstream mods manifest."""
    setup_logging(verbose)
    options = FetchOptions(
        instant=instant, push=push, hourly=hourly, clean=clean, fast=fast, path=path
    )

    try:
        service = FetcherService(TokenStore())
        content = service.run(options)
    except Exception as e:
        logger.error(f"Manifest fetch failed: {e}", exc_info=True)
        sys.exit(1)

    if content is not None:
        click.echo(content)


@click.command(name="mindustry-mods-listing")
@click.option("--url", "site_url", envvar="MINDUSTRY_MODS_SITE_URL", default=None,
              help="Base URL of the published site (or $MINDUSTRY_MODS_SITE_URL).")
@click.option("--file", "data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Read the listing data from a local JSON file instead.")
@click.option("--sort-toggles", type=click.IntRange(min=0), default=0, show_default=True,
              help="Number of times to press the stars sort button.")
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-",
              help="Write the page here instead of stdout.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def listing(site_url, data_file, sort_toggles, output, verbose):
    """Render the mod listing page."""
    setup_logging(verbose)

    if data_file is None and not site_url:
        raise click.UsageError("Either --url or --file is required.")
    if data_file is not None and site_url and (
        click.get_current_context().get_parameter_source("site_url")
        is ParameterSource.COMMANDLINE
    ):
        raise click.UsageError("--url and --file cannot be used together.")

    if data_file is not None:
        def load():
            return load_listing_file(data_file)
    else:
        client = ListingClient(site_url)
        load = client.fetch_mods

    controller = ListingController()
    result = controller.mount(load)
    if result.ok:
        for _ in range(sort_toggles):
            controller.on_sort_stars_toggle()

    output.write(render_listing(controller.state))

    if not result.ok:
        logger.error(f"Listing load failed: {result.error}", exc_info=result.error)
        sys.exit(1)
