"""faithgate CLI — screen text and inspect the moderation term tables."""

import asyncio
import logging

import click
import yaml
from rich.console import Console
from rich.table import Table

from faithgate import __version__

console = Console()


def _load_terms(terms: str | None):
    from faithgate.moderation.terms import DEFAULT_CONFIG, load_config

    return load_config(terms) if terms else DEFAULT_CONFIG


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show fallback warnings")
def main(verbose: bool):
    """faithgate — faith-alignment content moderation.

    Screen posts, comments and prayer requests against the community's
    Christ-centered guidelines.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--rules-only", is_flag=True, help="Skip the AI validation service")
@click.option("--endpoint", default=None, help="Validation service URL")
@click.option("--terms", "-t", default=None, type=click.Path(), help="YAML term file")
def check(text: str, rules_only: bool, endpoint: str | None, terms: str | None):
    """Screen TEXT and print the moderation decision."""
    from faithgate.moderation.ai_client import AIClassifier
    from faithgate.moderation.gate import FallbackClassifier
    from faithgate.moderation.moderator import RuleBasedClassifier, requires_review
    from faithgate.moderation.terms import ConfigError

    try:
        rules = RuleBasedClassifier(_load_terms(terms))
    except ConfigError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    if rules_only:
        result = rules.moderate(text)
    else:
        gate = FallbackClassifier(primary=AIClassifier(endpoint=endpoint), fallback=rules)
        result = asyncio.run(gate.classify(text))

    table = Table(title="Moderation Result")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    decision = "[green]allowed[/]" if result.allowed else "[red]rejected[/]"
    table.add_row("Decision", decision)
    table.add_row("Confidence", f"{result.confidence:.2f}")
    table.add_row("Reason", result.reason or "-")
    table.add_row("Needs review", "yes" if requires_review(result) else "no")
    table.add_row("Tier", result.source)
    console.print(table)

    if not result.allowed:
        raise SystemExit(2)


# ── Terms ────────────────────────────────────────────────────────────


@main.command()
@click.option("--terms", "-t", default=None, type=click.Path(), help="YAML term file")
def terms(terms: str | None):
    """Print the term tables in use as YAML."""
    from faithgate.moderation.terms import ConfigError, config_to_dict

    try:
        config = _load_terms(terms)
    except ConfigError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    click.echo(yaml.safe_dump(config_to_dict(config), allow_unicode=True, sort_keys=False))


@main.command(name="validate-terms")
@click.argument("path", type=click.Path())
def validate_terms(path: str):
    """Check that a YAML term file loads."""
    from faithgate.moderation.terms import ConfigError, load_config

    try:
        config = load_config(path)
    except ConfigError as e:
        console.print(f"  [red]x[/] {e}")
        raise SystemExit(1)

    console.print(f"  [green]v[/] {path}")
    console.print(
        f"    {len(config.blocked_terms)} blocked, "
        f"{len(config.christian_terms)} christian, "
        f"{len(config.contextual_allowed_phrases)} contextual"
    )


if __name__ == "__main__":
    main()
