import click

from .utils import current, print_json


@click.group()
def session():
    pass


@session.command()
@click.argument("username")
@click.argument("password")
def login(username: str, password: str):
    """Log in and print the AuthSession cookie for --session-cookie."""
    client, _ = current()
    result, cookie = client.sessions().login(username, password)
    print_json(result)
    if cookie is not None:
        click.echo(f"{cookie.name}={cookie.value}")


@session.command()
def info():
    client, auth = current()
    print_json(client.sessions().get_session(*auth))


@session.command()
def logout():
    client, auth = current()
    client.sessions().logout(*auth)
    click.echo("logged out")
