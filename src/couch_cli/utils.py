import json
from contextlib import contextmanager
from typing import Any

import click
from rich.console import Console
from rich.syntax import Syntax

from couch import AuthOption, Client

_client: Client | None = None
_auth: tuple[AuthOption, ...] = ()


def set_current(client: Client, *auth: AuthOption):
    global _client, _auth
    _client = client
    _auth = auth


def current() -> tuple[Client, tuple[AuthOption, ...]]:
    if _client is None:
        raise click.UsageError("no client configured")
    return _client, _auth


def print_json(value: Any):
    Console().print(Syntax(json.dumps(value, indent=2), "json"))


def parse_json(raw: str, what: str = "body") -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise click.BadParameter(f"{what} is not valid JSON: {e}")


@contextmanager
def status(text: str):
    console = Console()
    with console.status(f" {text}"):
        try:
            yield
        except Exception:
            console.print(f"❌ {text}")
            raise
    console.print(f"✅ {text}")


def bytes_to_human(bytes: int) -> str:
    if bytes < 1024:
        return f"{bytes}B"
    elif bytes < 1024**2:
        return f"{bytes / 1024:.1f}KB"
    elif bytes < 1024**3:
        return f"{bytes / 1024 ** 2:.1f}MB"
    else:
        return f"{bytes / 1024 ** 3:.1f}GB"
