import click

from .utils import current, print_json


@click.group()
def server():
    pass


@server.command()
def info():
    client, auth = current()
    print_json(client.server().info(*auth))


@server.command()
def up():
    client, auth = current()
    if client.server().up(*auth):
        click.echo(f"✅ {client} is up")
    else:
        click.echo(f"❌ {client} is down")
        exit(1)


@server.command()
@click.option("--count", default=1)
def uuids(count: int):
    client, auth = current()
    for uuid in client.server().get_uuids(*auth, count=count)["uuids"]:
        click.echo(uuid)


@server.command()
def dbs():
    client, auth = current()
    for name in client.server().all_dbs(*auth):
        click.echo(name)
