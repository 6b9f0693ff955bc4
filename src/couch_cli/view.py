import click

from .utils import current, parse_json, print_json


@click.group()
def view():
    pass


@view.command()
@click.argument("db")
@click.argument("ddoc")
@click.argument("name")
@click.option("--key", default=None, help="JSON value")
@click.option("--start-key", default=None, help="JSON value")
@click.option("--end-key", default=None, help="JSON value")
@click.option("--limit", default=0)
@click.option("--reduce/--no-reduce", default=None)
@click.option("--group", is_flag=True, default=False)
@click.option("--include-docs", is_flag=True, default=False)
def query(
    db: str,
    ddoc: str,
    name: str,
    key: str | None,
    start_key: str | None,
    end_key: str | None,
    limit: int,
    reduce: bool | None,
    group: bool,
    include_docs: bool,
):
    client, auth = current()
    options = {
        "limit": limit,
        "group": group,
        "include_docs": include_docs,
    }
    if reduce is not None:
        options["reduce"] = reduce
    for option, raw in (("key", key), ("startkey", start_key), ("endkey", end_key)):
        if raw is not None:
            options[option] = parse_json(raw, option)

    print_json(
        client.design_documents().query_view(db, ddoc, name, *auth, options=options)
    )


@view.command()
@click.argument("db")
@click.argument("ddoc")
def get(db: str, ddoc: str):
    client, auth = current()
    print_json(client.design_documents().get_design_document(db, ddoc, *auth))


@view.command()
@click.argument("db")
@click.argument("ddoc")
@click.argument("body")
@click.option("--rev", default=None)
def put(db: str, ddoc: str, body: str, rev: str | None):
    client, auth = current()
    print_json(
        client.design_documents().put_design_document(
            db, ddoc, parse_json(body), *auth, rev=rev
        )
    )
