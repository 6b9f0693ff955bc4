import click
from rich.console import Console
from rich.table import Table

from .utils import bytes_to_human, current, parse_json, print_json, status


@click.group()
def db():
    pass


@db.command()
@click.argument("name")
@click.option("--q", default=0, help="shards")
@click.option("--n", default=0, help="replicas")
@click.option("--partitioned", is_flag=True, default=False)
def create(name: str, q: int, n: int, partitioned: bool):
    client, auth = current()
    with status(f"creating db {name}"):
        client.databases().create_database(
            name, *auth, options={"q": q, "n": n, "partitioned": partitioned}
        )


@db.command()
@click.argument("name")
def get(name: str):
    client, auth = current()
    print_json(client.databases().get_database(name, *auth))


@db.command()
@click.argument("name")
def delete(name: str):
    client, auth = current()
    with status(f"deleting db {name}"):
        client.databases().delete_database(name, *auth)


@db.command()
@click.argument("name")
def exists(name: str):
    client, auth = current()
    if client.databases().database_exists(name, *auth):
        click.echo(f"{name} exists")
    else:
        click.echo(f"{name} does not exist")
        exit(1)


@db.command(name="list")
def list_dbs():
    client, auth = current()
    databases = client.databases()
    console = Console()

    with console.status("fetching dbs..."):
        table = Table(header_style="bold magenta", box=None, show_lines=True)
        table.add_column("name")
        table.add_column("docs")
        table.add_column("size")
        table.add_column("q")
        table.add_column("n")
        for name in client.server().all_dbs(*auth):
            info = databases.get_database(name, *auth)
            table.add_row(
                name,
                str(info["doc_count"]),
                bytes_to_human(info["sizes"]["file"]),
                str(info["cluster"]["q"]),
                str(info["cluster"]["n"]),
            )
    console.print(table)


@db.command()
@click.argument("name")
@click.argument("selector")
@click.option("--limit", default=0)
@click.option("--field", "fields", multiple=True)
def find(name: str, selector: str, limit: int, fields: tuple[str, ...]):
    client, auth = current()
    result = client.databases().find(
        name,
        {
            "selector": parse_json(selector, "selector"),
            "limit": limit,
            "fields": list(fields),
        },
        *auth,
    )
    if "warning" in result:
        click.echo(f"warning: {result['warning']}", err=True)
    print_json(result["docs"])


@db.command()
@click.argument("name")
@click.option("--include-docs", is_flag=True, default=False)
@click.option("--limit", default=0)
@click.option("--start-key", default=None)
@click.option("--end-key", default=None)
@click.option("--key", "keys", multiple=True)
def all_docs(
    name: str,
    include_docs: bool,
    limit: int,
    start_key: str | None,
    end_key: str | None,
    keys: tuple[str, ...],
):
    client, auth = current()
    print_json(
        client.databases().all_docs(
            name,
            *auth,
            options={
                "include_docs": include_docs,
                "limit": limit,
                "startkey": start_key or "",
                "endkey": end_key or "",
                "keys": list(keys),
            },
        )
    )


@db.command()
@click.argument("name")
@click.argument("docs")
def bulk(name: str, docs: str):
    """Submit a JSON array of documents; use _deleted to delete."""
    client, auth = current()
    parsed = parse_json(docs, "docs")
    if not isinstance(parsed, list):
        raise click.BadParameter("docs must be a JSON array")
    print_json(client.databases().bulk_update(name, parsed, *auth))
