from typing import Any

from couch.auth import AuthOption
from couch.http import Query, Service, escape
from couch.types import DocumentResponse, ViewOptions, ViewResponse

_VIEW_FLAGS = (
    "conflicts",
    "descending",
    "group",
    "include_docs",
    "inclusive_end",
    "sorted",
    "stable",
    "update_seq",
)
_VIEW_NUMBERS = ("group_level", "limit", "skip")
_VIEW_STRINGS = ("endkey_docid", "stale", "startkey_docid", "update")
_VIEW_KEYS = ("key", "startkey", "endkey")


def view_query(options: ViewOptions) -> Query:
    query = Query()
    for flag in _VIEW_FLAGS:
        query.flag(flag, options.get(flag))
    for number in _VIEW_NUMBERS:
        query.number(number, options.get(number))
    for string in _VIEW_STRINGS:
        query.string(string, options.get(string))
    query.tristate("reduce", options.get("reduce"))
    return query


class DesignDocumentService(Service):
    def query_view(
        self,
        db: str,
        ddoc: str,
        view: str,
        *auth: AuthOption,
        options: ViewOptions | None = None,
        timeout: float | None = None,
    ) -> ViewResponse:
        options = options or {}
        query = view_query(options)
        path = f"/{escape(db)}/_design/{escape(ddoc)}/_view/{escape(view)}"

        keys = options.get("keys")
        if keys:
            return self.call(
                "query view",
                "POST",
                query.apply(path),
                *auth,
                body={"keys": keys},
                timeout=timeout,
            )

        for key in _VIEW_KEYS:
            query.json(key, options.get(key))

        return self.call("query view", "GET", query.apply(path), *auth, timeout=timeout)

    def get_design_document(
        self,
        db: str,
        ddoc: str,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        return self.call(
            "get design document",
            "GET",
            f"/{escape(db)}/_design/{escape(ddoc)}",
            *auth,
            not_found=("design document", f"{db}/_design/{ddoc}"),
            timeout=timeout,
        )

    def put_design_document(
        self,
        db: str,
        ddoc: str,
        doc: dict[str, Any],
        *auth: AuthOption,
        rev: str | None = None,
        timeout: float | None = None,
    ) -> DocumentResponse:
        query = Query()
        query.string("rev", rev)
        return self.call(
            "put design document",
            "PUT",
            query.apply(f"/{escape(db)}/_design/{escape(ddoc)}"),
            *auth,
            body=doc,
            expect=(201, 202),
            timeout=timeout,
        )

    def delete_design_document(
        self,
        db: str,
        ddoc: str,
        rev: str,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> DocumentResponse:
        return self.call(
            "delete design document",
            "DELETE",
            Query(rev=rev).apply(f"/{escape(db)}/_design/{escape(ddoc)}"),
            *auth,
            timeout=timeout,
        )
