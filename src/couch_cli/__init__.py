import click
from couch import (
    Client,
    CouchError,
    credentials,
    with_basic_auth,
    with_cookie_auth,
    with_jwt_auth,
    with_proxy_auth,
)
from couch.log import setup_logging
from couch.session import SESSION_COOKIE
from requests.cookies import create_cookie

from .config import config
from .db import db
from .doc import doc
from .security import security
from .server import server
from .session import session
from .user import user
from .utils import set_current
from .view import view


@click.group()
@click.option("--url", envvar="COUCH_URL", default=credentials.url, show_default=True)
@click.option("--username", "-u", envvar="COUCH_USERNAME", default=credentials.username)
@click.option("--password", "-p", envvar="COUCH_PASSWORD", default=credentials.password)
@click.option("--jwt", envvar="COUCH_JWT", default=None, help="bearer token")
@click.option(
    "--session-cookie", envvar="COUCH_SESSION", default=None, help="AuthSession value"
)
@click.option("--proxy-user", envvar="COUCH_PROXY_USER", default=None)
@click.option("--proxy-role", multiple=True)
@click.option("--proxy-token", envvar="COUCH_PROXY_TOKEN", default="")
@click.option("--timeout", envvar="COUCH_TIMEOUT", default=30.0, type=float)
@click.option("-v", "--verbose", default=False, is_flag=True)
def main(
    url: str,
    username: str,
    password: str,
    jwt: str | None,
    session_cookie: str | None,
    proxy_user: str | None,
    proxy_role: tuple[str, ...],
    proxy_token: str,
    timeout: float,
    verbose: bool,
):
    setup_logging(verbose)

    if jwt:
        auth = with_jwt_auth(jwt)
    elif session_cookie:
        auth = with_cookie_auth(create_cookie(SESSION_COOKIE, session_cookie))
    elif proxy_user:
        auth = with_proxy_auth(proxy_user, list(proxy_role), proxy_token)
    else:
        auth = with_basic_auth(username, password)

    set_current(Client(url, timeout=timeout), auth)


main.add_command(config)
main.add_command(db)
main.add_command(doc)
main.add_command(security)
main.add_command(server)
main.add_command(session)
main.add_command(user)
main.add_command(view)


def run():
    try:
        main()
    except CouchError as e:
        click.echo(f"error: {e}", err=True)
        exit(1)
