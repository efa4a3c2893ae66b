"""CLI entry point for gc-platform-api-utils."""

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from gc_platform_api_utils.config import get_settings
from gc_platform_api_utils.errors import GcPlatformApiUtilsError
from gc_platform_api_utils.regions import get_region_urls, list_regions
from gc_platform_api_utils.schema.mongodb import generate_mongodb_json_schema
from gc_platform_api_utils.spec.loader import load_spec_from_cloud, load_spec_from_file

logger = logging.getLogger(__name__)


def _load_spec(spec_path: Path | None, region: str | None) -> dict:
    """Load the specification from a file, or from the cloud for a region."""
    if spec_path is not None:
        logger.info("Reading %s", spec_path)
        return load_spec_from_file(spec_path)

    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid environment settings (GC_REGION, GC_HTTP_TIMEOUT): {e}") from e

    region = region or settings.region
    if region:
        logger.info("Downloading Platform API specification for %s", region)
        return load_spec_from_cloud(region, timeout=settings.http_timeout)
    raise click.UsageError("Either --spec or --region (or GC_REGION) is required.")


def _spec_options(f):
    f = click.option("--region", default=None, help="Genesys Cloud region to download the specification from.")(f)
    f = click.option("--spec", "spec_path", default=None, type=click.Path(exists=True, path_type=Path), help="Local Swagger JSON/YAML file.")(f)
    return f


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Genesys Cloud Platform API utilities: MongoDB validators from API definitions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
def regions():
    """List the known Genesys Cloud regions and their API URLs."""
    for region in list_regions():
        click.echo(f"{region}\t{get_region_urls(region).api}")


@main.command()
@_spec_options
def definitions(spec_path: Path | None, region: str | None):
    """List the definition names of the specification."""
    try:
        spec = _load_spec(spec_path, region)
    except GcPlatformApiUtilsError as e:
        raise click.ClickException(str(e)) from e

    for name in sorted(spec["definitions"]):
        click.echo(name)


@main.command()
@click.argument("names", nargs=-1, required=True)
@_spec_options
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output directory, one <NAME>.json per definition.")
@click.option("--indent", default=2, type=int, help="JSON indentation.")
def gen_schema(names: tuple[str, ...], spec_path: Path | None, region: str | None, output: Path | None, indent: int):
    """Generate MongoDB $jsonSchema validators for API definitions."""
    try:
        spec = _load_spec(spec_path, region)
        schemas = {name: generate_mongodb_json_schema(spec, name) for name in names}
    except GcPlatformApiUtilsError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        document = schemas[names[0]] if len(names) == 1 else schemas
        click.echo(json.dumps(document, indent=indent))
        return

    output.mkdir(parents=True, exist_ok=True)
    for name, schema in schemas.items():
        file_path = output / f"{name}.json"
        file_path.write_text(json.dumps(schema, indent=indent) + "\n", encoding="utf-8")
        click.echo(f"  Created {file_path}")

    click.echo(f"Generated {len(schemas)} schemas in {output}")
