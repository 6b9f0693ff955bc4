import click

from couch.config import LOCAL_NODE

from .utils import current, print_json


@click.group()
@click.option("--node", default=LOCAL_NODE, show_default=True)
@click.pass_context
def config(ctx: click.Context, node: str):
    ctx.obj = node


@config.command(name="list")
@click.pass_obj
def list_config(node: str):
    client, auth = current()
    print_json(client.configuration().get_configuration(*auth, node=node))


@config.command()
@click.argument("section")
@click.argument("key", required=False)
@click.pass_obj
def get(node: str, section: str, key: str | None):
    client, auth = current()
    configuration = client.configuration()
    if key:
        print_json(configuration.get_configuration_value(section, key, *auth, node=node))
    else:
        print_json(configuration.get_configuration_section(section, *auth, node=node))


@config.command(name="set")
@click.argument("section")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def set_value(node: str, section: str, key: str, value: str):
    client, auth = current()
    old = client.configuration().set_configuration_value(
        section, key, value, *auth, node=node
    )
    click.echo(f"{section}/{key}: {old!r} -> {value!r}")


@config.command()
@click.argument("section")
@click.argument("key")
@click.pass_obj
def delete(node: str, section: str, key: str):
    client, auth = current()
    old = client.configuration().delete_configuration_value(
        section, key, *auth, node=node
    )
    click.echo(f"deleted {section}/{key} (was {old!r})")


@config.command()
@click.pass_obj
def reload(node: str):
    client, auth = current()
    client.configuration().reload_configuration(*auth, node=node)
    click.echo("configuration reloaded")


@config.command()
@click.pass_obj
def admins(node: str):
    client, auth = current()
    for name in client.configuration().get_admins(*auth, node=node):
        click.echo(name)
