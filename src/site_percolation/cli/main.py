"""
Command-line interface for site_percolation.

Commands:
    percolation grid FILE [I J] [--model uf|array]
        Open the sites listed in FILE and report whether the system
        percolates (and whether site (I, J) is full).

    percolation stats N M [--seed S] [--confidence L]
        Estimate the percolation threshold of an N x N system from M trials.

    percolation run --config experiment.yaml
        Same as stats, with parameters taken from a YAML config.
"""

import click

from ..percolation import (
    ArrayPercolation, UFPercolation, PercolationStats, load_percolation,
)
from ..utils.timing import Timer, format_duration

MODELS = {
    'uf': UFPercolation,
    'array': ArrayPercolation,
}


def _fail(error: Exception):
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


def _bool(value: bool) -> str:
    return str(bool(value)).lower()


@click.group()
@click.version_option(package_name='site_percolation')
def cli():
    """Site percolation models and threshold estimation."""
    pass


@cli.command('grid', context_settings={'ignore_unknown_options': True})
@click.argument('grid_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('site', nargs=-1, type=int)
@click.option('--model', '-m', default='uf', type=click.Choice(sorted(MODELS)),
              help='Percolation implementation to use')
def grid(grid_file, site, model):
    """Load a grid file and report its percolation state."""
    if len(site) not in (0, 2):
        raise click.UsageError("Give either no site or both I and J")

    try:
        perc = load_percolation(grid_file, model=MODELS[model])
        n = perc.n
        click.echo(f"{n} x {n} system:")
        click.echo(f"  Open sites = {perc.number_of_open_sites()}")
        click.echo(f"  Percolates = {_bool(perc.percolates())}")
        if site:
            i, j = site
            click.echo(f"  isFull({i}, {j}) = {_bool(perc.is_full(i, j))}")
    except (ValueError, IndexError) as e:
        _fail(e)


def _report_stats(n, m, seed, confidence):
    try:
        with Timer() as timer:
            stats = PercolationStats(n, m, seed=seed)
        low, high = stats.confidence_interval(confidence)
    except (ValueError, IndexError) as e:
        _fail(e)

    click.echo(f"Percolation threshold for a {n} x {n} system:")
    click.echo(f"  Mean                = {stats.mean():.3f}")
    click.echo(f"  Standard deviation  = {stats.stddev():.3f}")
    click.echo(f"  Confidence interval = [{low:.3f}, {high:.3f}]")
    click.echo(f"  Elapsed             = {format_duration(timer.elapsed)}")


@cli.command('stats', context_settings={'ignore_unknown_options': True})
@click.argument('n', type=int)
@click.argument('m', type=int)
@click.option('--seed', '-s', type=int, default=None, help='Random seed')
@click.option('--confidence', '-c', type=float, default=0.95,
              help='Confidence level of the reported interval')
def stats(n, m, seed, confidence):
    """Estimate the threshold of an N x N system from M trials."""
    _report_stats(n, m, seed, confidence)


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True,
              type=click.Path(exists=True, dir_okay=False),
              help='Experiment config YAML')
def run(config_path):
    """Estimate the threshold using parameters from a config file."""
    from ..run import ExperimentConfig

    try:
        config = ExperimentConfig.from_yaml(config_path)
    except ValueError as e:
        _fail(e)

    click.echo(f"Experiment: {config.name}")
    _report_stats(config.n, config.m, config.seed, config.confidence)


if __name__ == '__main__':
    cli()
