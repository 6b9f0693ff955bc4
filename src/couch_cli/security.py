import click

from .utils import current, parse_json, print_json


@click.group()
def security():
    pass


@security.command()
@click.argument("db")
def get(db: str):
    client, auth = current()
    print_json(client.security().get_security(db, *auth))


@security.command(name="set")
@click.argument("db")
@click.argument("body")
def set_security(db: str, body: str):
    client, auth = current()
    parsed = parse_json(body)
    if not isinstance(parsed, dict):
        raise click.BadParameter("body must be a JSON object")
    client.security().set_security(db, parsed, *auth)
    click.echo(f"updated security for {db}")
