import json

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from .utils import bytes_to_human, current, parse_json, print_json


@click.group()
def doc():
    pass


@doc.command()
@click.argument("db")
@click.argument("body")
def create(db: str, body: str):
    client, auth = current()
    print_json(client.documents().create_document(db, parse_json(body), *auth))


@doc.command()
@click.argument("db")
@click.argument("id")
@click.option("--rev", default=None)
@click.option("--conflicts", is_flag=True, default=False)
def get(db: str, id: str, rev: str | None, conflicts: bool):
    client, auth = current()
    print_json(
        client.documents().get_document(
            db, id, *auth, options={"rev": rev or "", "conflicts": conflicts}
        )
    )


@doc.command()
@click.argument("db")
@click.argument("id")
def rev(db: str, id: str):
    client, auth = current()
    click.echo(client.documents().head_document(db, id, *auth))


@doc.command()
@click.argument("db")
@click.argument("id")
@click.argument("rev")
@click.argument("body")
def update(db: str, id: str, rev: str, body: str):
    client, auth = current()
    print_json(
        client.documents().update_document(
            db, id, parse_json(body), *auth, options={"rev": rev}
        )
    )


@doc.command()
@click.argument("db")
@click.argument("id")
@click.argument("rev")
def delete(db: str, id: str, rev: str):
    client, auth = current()
    print_json(client.documents().delete_document(db, id, rev, *auth))


@doc.command(name="list")
@click.argument("db")
def list_docs(db: str):
    client, auth = current()
    table = Table(header_style="bold magenta", box=None, show_lines=True)
    table.add_column("id")
    table.add_column("rev")
    table.add_column("size")
    table.add_column("body")

    result = client.databases().all_docs(db, *auth, options={"include_docs": True})
    for row in result["rows"]:
        raw = json.dumps(row.get("doc"), indent=2)
        table.add_row(
            row["id"], row["value"]["rev"], bytes_to_human(len(raw)), Syntax(raw, "json")
        )

    Console().print(table)
