"""
netrcedit CLI - Lossless netrc editor

Main entry point for the netrcedit command-line tool.
"""

import click
import sys
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich import box

from .core.config import find_netrc_path
from .core.errors import NetrcError
from .core.netrc import Netrc
from .core.store import load


console = Console()

MASK = "********"


def mask_secret(value: str | None) -> str:
    """Hide a secret value for display, keeping empty values visible."""
    if not value:
        return ""
    return MASK


def _fail(message: str, hint: str | None = None):
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True)
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]", highlight=False)
    sys.exit(1)


def _load(path: Path, create: bool = False) -> Netrc:
    """Load the netrc file, or start an empty one when create is set."""
    if create and not path.exists():
        return Netrc(str(path))

    try:
        return load(path)
    except FileNotFoundError:
        _fail(f"{path} not found", "Use 'netrcedit add' to create it.")
    except (NetrcError, OSError) as e:
        _fail(str(e))


def _save(netrc: Netrc):
    try:
        netrc.save()
    except (NetrcError, OSError) as e:
        _fail(str(e))


@click.group()
@click.option('--file', 'netrc_file', default=None, type=click.Path(dir_okay=False),
              help='netrc file to edit (default: $NETRC or ~/.netrc)')
@click.pass_context
def cli(ctx, netrc_file):
    """
    netrcedit - Edit .netrc credentials without touching anything else
    """
    ctx.ensure_object(dict)
    ctx.obj['path'] = find_netrc_path(netrc_file)


@cli.command()
@click.argument('machine')
@click.argument('key', default='password')
@click.option('--login', default=None, help='Pick the entry with this login')
@click.pass_context
def get(ctx, machine, key, login):
    """
    Print one field of a machine entry.

    KEY defaults to 'password'.
    """
    netrc = _load(ctx.obj['path'])

    entry = netrc.machine(machine, login=login)
    if entry is None:
        _fail(f"Machine '{machine}' not found")

    value = entry.get(key)
    if value is None:
        _fail(f"Machine '{machine}' has no '{key}'")

    click.echo(value)


@cli.command(name="set")
@click.argument('machine')
@click.argument('key')
@click.argument('value')
@click.option('--login', default=None, help='Pick the entry with this login')
@click.pass_context
def set_value(ctx, machine, key, value, login):
    """
    Set one field of an existing machine entry.

    Only the value is rewritten; the rest of the file is left as it was.
    """
    path = ctx.obj['path']
    netrc = _load(path)

    entry = netrc.machine(machine, login=login)
    if entry is None:
        _fail(f"Machine '{machine}' not found", "Use 'netrcedit add' to create it.")

    try:
        entry.set(key, value)
    except NetrcError as e:
        _fail(str(e))
    _save(netrc)

    console.print(f"[green]✓ Set '{key}' for {machine}[/green]", highlight=False)


@cli.command()
@click.argument('machine')
@click.argument('login')
@click.argument('password')
@click.pass_context
def add(ctx, machine, login, password):
    """
    Add a machine with login and password.

    An existing machine of the same name is replaced.
    """
    path = ctx.obj['path']
    netrc = _load(path, create=True)

    replaced = netrc.machine(machine) is not None
    try:
        netrc.add_machine(machine, login, password)
    except NetrcError as e:
        _fail(str(e))
    _save(netrc)

    action = "Replaced" if replaced else "Added"
    console.print(f"[green]✓ {action} {machine} in {path}[/green]", highlight=False)


@cli.command()
@click.argument('machine')
@click.pass_context
def remove(ctx, machine):
    """
    Remove every entry for a machine.
    """
    netrc = _load(ctx.obj['path'])

    removed = netrc.remove_machine(machine)
    if not removed:
        _fail(f"Machine '{machine}' not found")

    _save(netrc)
    console.print(f"[green]✓ Removed {removed} entr{'y' if removed == 1 else 'ies'} for {machine}[/green]",
                  highlight=False)


@cli.command(name="list")
@click.option('--show-passwords', is_flag=True, help='Print passwords in clear text')
@click.pass_context
def list_machines(ctx, show_passwords):
    """
    Show all machine entries.
    """
    path = ctx.obj['path']
    netrc = _load(path)

    entries = netrc.machines()
    if not entries:
        console.print(f"[yellow]No machines in {path}[/yellow]", highlight=False)
        return

    table = Table(title=str(path), box=box.ROUNDED)
    table.add_column("Machine", style="cyan", no_wrap=True)
    table.add_column("Login", style="blue")
    table.add_column("Account", style="magenta")
    table.add_column("Password", style="yellow")

    for entry in entries:
        password = entry.get("password")
        if not show_passwords:
            password = mask_secret(password)
        name = escape(entry.name)
        if entry.is_default:
            name = f"[bold]{name}[/bold]"
        table.add_row(
            name,
            escape(entry.get("login") or ""),
            escape(entry.get("account") or ""),
            escape(password or ""),
        )

    console.print(table)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
