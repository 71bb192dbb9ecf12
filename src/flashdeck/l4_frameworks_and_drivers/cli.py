"""CLI entry point for flashdeck."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from flashdeck import __version__
from flashdeck.l1_entities.config import AppConfig
from flashdeck.l1_entities.entry import Card, Separator


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--data-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory holding the saved deck (overrides storage.snapshot_file).',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, config_path, data_dir):
    """flashdeck -- study cards built from headerless two-column CSV files."""
    from flashdeck.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from flashdeck.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    try:
        overrides: dict = {}
        if data_dir:
            overrides['storage'] = {'snapshot_file': str(Path(data_dir) / 'deck.json')}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    ctx.obj = config


def _open_deck(config: AppConfig, *, assume_yes: bool = False, export_dir: Path | None = None):
    """Wire the container, start logging, and restore the saved deck."""
    from flashdeck.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: httpx not loaded on --help
        DependencyContainer,
    )
    from flashdeck.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    container = DependencyContainer(config, assume_yes=assume_yes, export_dir=export_dir)
    setup_file_logging(container.snapshot_path.parent)
    container.controller.start()
    return container.controller


@cli.command('load')
@click.argument('files', nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def load_files(config: AppConfig, files: tuple[Path, ...]):
    """Load one or more CSV files; each becomes a titled group of cards."""
    controller = _open_deck(config)
    results = asyncio.run(controller.load_files(files))
    for result in results:
        if result.ok:
            click.echo(f'{result.title}: {result.cards_added} cards')
    if not any(r.ok for r in results):
        sys.exit(1)


@cli.command('load-url')
@click.argument('url')
@click.pass_obj
def load_url(config: AppConfig, url: str):
    """Fetch a CSV over HTTP and append it to the deck."""
    controller = _open_deck(config)
    result = asyncio.run(controller.load_url(url))
    if not result.ok:
        sys.exit(1)
    click.echo(f'{result.title}: {result.cards_added} cards')


@cli.command('export')
@click.option(
    '-o',
    '--output-dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory for the exported CSV (defaults to export.directory).',
)
@click.pass_obj
def export_deck(config: AppConfig, output_dir: Path | None):
    """Write the whole deck back out as CSV."""
    controller = _open_deck(config, export_dir=output_dir)
    try:
        path = controller.export()
    except OSError as e:
        click.echo(f'Error: cannot write export: {e}', err=True)
        sys.exit(1)
    click.echo(str(path))


@cli.command('clear')
@click.option('-y', '--yes', 'assume_yes', is_flag=True, help='Do not ask for confirmation.')
@click.pass_obj
def clear_deck(config: AppConfig, assume_yes: bool):
    """Remove every card and the saved deck."""
    controller = _open_deck(config, assume_yes=assume_yes)
    if controller.clear():
        click.echo('Deck cleared.')
    else:
        click.echo('Aborted.')


@cli.command('list')
@click.pass_obj
def list_entries(config: AppConfig):
    """Print the deck in study order."""
    controller = _open_deck(config)
    if not controller.entries:
        click.echo('No cards. Load one or more CSV files to start.')
        return
    for entry in controller.entries:
        match entry:
            case Separator(title=title):
                click.echo(f'# {title}')
            case Card(prompt=prompt, response=response):
                click.echo(f'  {prompt} | {response}')


@cli.command('study')
@click.pass_obj
def study(config: AppConfig):
    """Open the deck in the interactive study view."""
    controller = _open_deck(config)
    if not controller.entries:
        click.echo('No cards. Load one or more CSV files to start.')
        return

    from flashdeck.l4_frameworks_and_drivers.apps.study import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for other commands
        StudyApp,
    )

    StudyApp(controller=controller).run()
