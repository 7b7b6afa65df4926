"""Click CLI: get, list, env-var."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from chainreg.chain.registry import ChainRegistry
from chainreg.chain.resolver import rpc_env_var
from chainreg.config import get_settings
from chainreg.errors import ChainRegistryError, RpcUrlUnresolvedError


def _parse_identifier(value: str) -> str | int:
    """Numeric arguments are chain IDs, anything else an alias."""
    return int(value) if value.isdecimal() else value


@click.group()
@click.version_option(version="1.0.0")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with an [rpc_endpoints] table",
)
@click.option("--no-fallback", is_flag=True, default=False, help="Never use catalog default RPC URLs")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, no_fallback: bool, verbose: bool):
    """chainreg - look up EVM networks and their RPC endpoints."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid CHAINREG_* settings:\n{e}") from e

    updates = {}
    if config_path is not None:
        updates["chains_config_path"] = config_path
    if no_fallback:
        updates["use_catalog_fallback"] = False
    if updates:
        settings = settings.model_copy(update=updates)

    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)
    ctx.obj = ChainRegistry.from_settings(settings)


@cli.command()
@click.argument("alias_or_id")
@click.pass_obj
def get(registry: ChainRegistry, alias_or_id: str):
    """Show a chain and its resolved RPC URL."""
    try:
        chain = registry.get_chain(_parse_identifier(alias_or_id))
    except ChainRegistryError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"name:     {chain.name}")
    click.echo(f"chain_id: {chain.chain_id}")
    click.echo(f"alias:    {chain.alias}")
    click.echo(f"rpc_url:  {chain.rpc_url}")


@cli.command("list")
@click.pass_obj
def list_chains(registry: ChainRegistry):
    """List registered chains."""
    for alias in registry.aliases():
        try:
            chain = registry.get_chain(alias)
            rpc_url = chain.rpc_url
        except RpcUrlUnresolvedError:
            chain = None
            rpc_url = "<unresolved>"
        except ChainRegistryError as e:
            raise click.ClickException(str(e)) from e

        if chain is None:
            click.echo(f"{alias:<28} {'-':>10}  {rpc_url}")
        else:
            click.echo(f"{alias:<28} {chain.chain_id:>10}  {chain.name} ({rpc_url})")


@cli.command("env-var")
@click.argument("alias")
def env_var(alias: str):
    """Print the environment variable that overrides an alias's RPC URL."""
    click.echo(rpc_env_var(alias))


if __name__ == "__main__":
    cli()
