"""
Main CLI entry point.
"""

import logging
from pathlib import Path

import click

from kspver import __version__
from kspver.exceptions import MalformedAnnotationError, MalformedExpressionError, MalformedTreeError


def _game_version(ctx, param, value):
    from kspver.parser import parse_version

    if value is None:
        return None
    try:
        return parse_version(value)
    except MalformedExpressionError as e:
        raise click.BadParameter(str(e))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """kspver: KSP_VERSION annotation checker and config tree pruner."""
    pass


@main.command()
@click.argument("expression")
@click.option("--game-version", "-g", envvar="KSPVER_GAME_VERSION",
              callback=_game_version, help="Running game version (major.minor.revision); not needed with --needs")
@click.option("--needs", is_flag=True, help="Treat EXPRESSION as a NEEDS expression over --mod")
@click.option("--mod", "-m", "mods", multiple=True, help="Installed mod identifier (repeatable)")
@click.pass_context
def check(ctx, expression, game_version, needs, mods):
    """Evaluate an expression; exit 0 if satisfied, 1 if not."""
    from kspver.interpreter import evaluate, evaluate_needs

    if not needs and game_version is None:
        raise click.MissingParameter(ctx=ctx, param_hint="'--game-version'", param_type="option")

    try:
        result = evaluate_needs(expression, mods) if needs else evaluate(game_version, expression)
    except MalformedExpressionError as e:
        raise click.BadParameter(str(e), param_hint="EXPRESSION")

    click.echo("true" if result else "false")
    ctx.exit(0 if result else 1)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--game-version", "-g", required=True, envvar="KSPVER_GAME_VERSION",
              callback=_game_version, help="Running game version (major.minor.revision)")
@click.option("--format", "-f", "output_format", type=click.Choice(["yaml", "json"]),
              default=None, help="Output format (defaults to the input format)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the pruned tree here instead of stdout")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def prune(file, game_version, output_format, output, verbose):
    """Prune a YAML or JSON config tree to the parts that apply to GAME_VERSION."""
    from kspver.checker import VersionChecker
    from kspver.progress import ConfigSource, LoggingPatchProgress
    from kspver.serialization import tree_from_json, tree_from_yaml, tree_to_json, tree_to_yaml

    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    path = Path(file)
    is_json = path.suffix.lower() == ".json"
    text = path.read_text(encoding="utf-8")
    try:
        tree = tree_from_json(text) if is_json else tree_from_yaml(text)
    except MalformedTreeError as e:
        raise click.ClickException(f"{path}: {e}")

    progress = LoggingPatchProgress()
    checker = VersionChecker(progress, game_version)

    logger.info(f"Pruning {path} for game version {game_version}")
    try:
        checker.check_version_recursive(tree, ConfigSource(str(path)))
    except MalformedAnnotationError as e:
        raise click.ClickException(str(e))

    if output_format is None:
        output_format = "json" if is_json else "yaml"
    rendered = tree_to_json(tree) if output_format == "json" else tree_to_yaml(tree)
    if output:
        Path(output).write_text(rendered, encoding="utf-8")
    else:
        click.echo(rendered)
    logger.info(progress.counter.summary())


if __name__ == "__main__":
    main()
