import click
from rich.console import Console
from rich.table import Table

from .utils import current, print_json


@click.group()
def user():
    pass


@user.command()
@click.argument("name")
@click.argument("password")
@click.option("--role", "roles", multiple=True)
def create(name: str, password: str, roles: tuple[str, ...]):
    client, auth = current()
    print_json(client.users().create_user(name, password, *auth, roles=list(roles)))


@user.command()
@click.argument("name")
def get(name: str):
    client, auth = current()
    print_json(client.users().get_user(name, *auth))


@user.command(name="list")
def list_users():
    client, auth = current()
    table = Table(header_style="bold magenta", box=None)
    table.add_column("name")
    table.add_column("roles")
    table.add_column("rev")
    for u in client.users().list_users(*auth):
        table.add_row(u["name"], ", ".join(u.get("roles", [])), u.get("_rev", ""))
    Console().print(table)


@user.command()
@click.argument("name")
@click.argument("rev")
def delete(name: str, rev: str):
    client, auth = current()
    client.users().delete_user(name, rev, *auth)
    click.echo(f"deleted user {name}")


@user.command()
@click.argument("name")
@click.argument("rev")
@click.argument("password")
def passwd(name: str, rev: str, password: str):
    client, auth = current()
    print_json(client.users().update_password(name, rev, password, *auth))


@user.command()
@click.argument("name")
@click.argument("rev")
@click.option("--role", "roles", multiple=True)
def roles(name: str, rev: str, roles: tuple[str, ...]):
    client, auth = current()
    print_json(client.users().update_roles(name, rev, list(roles), *auth))
