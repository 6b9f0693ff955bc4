from typing import Any

from couch.auth import AuthOption
from couch.http import Query, Service, error_from, escape
from couch.types import (
    AllDocsOptions,
    AllDocsResponse,
    BulkDocItem,
    DatabaseCreateOptions,
    DatabaseInfo,
    DatabaseResponse,
    FindRequest,
    FindResponse,
)

_ALL_DOCS_KEYS = ("key", "startkey", "endkey")


class DatabaseService(Service):
    def get_database(
        self, name: str, *auth: AuthOption, timeout: float | None = None
    ) -> DatabaseInfo:
        return self.call(
            "get database",
            "GET",
            f"/{escape(name)}",
            *auth,
            not_found=("database", name),
            timeout=timeout,
        )

    def create_database(
        self,
        name: str,
        *auth: AuthOption,
        options: DatabaseCreateOptions | None = None,
        timeout: float | None = None,
    ) -> DatabaseResponse:
        query = Query()
        if options:
            query.number("q", options.get("q"))
            query.number("n", options.get("n"))
            query.flag("partitioned", options.get("partitioned"))

        return self.call(
            "create database",
            "PUT",
            query.apply(f"/{escape(name)}"),
            *auth,
            expect=(200, 201),
            timeout=timeout,
        )

    def delete_database(
        self, name: str, *auth: AuthOption, timeout: float | None = None
    ) -> DatabaseResponse:
        return self.call(
            "delete database", "DELETE", f"/{escape(name)}", *auth, timeout=timeout
        )

    def database_exists(
        self, name: str, *auth: AuthOption, timeout: float | None = None
    ) -> bool:
        operation = "check database"
        with self.send(
            operation, "HEAD", f"/{escape(name)}", *auth, timeout=timeout
        ) as resp:
            if resp.status_code == 200:
                return True
            if resp.status_code == 404:
                return False
            content = self.read(operation, resp)
            raise error_from(operation, resp.status_code, content)

    def bulk_insert(
        self,
        name: str,
        docs: list[dict[str, Any]],
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> list[BulkDocItem]:
        return self._bulk_docs("bulk insert", name, docs, *auth, timeout=timeout)

    def bulk_update(
        self,
        name: str,
        docs: list[dict[str, Any]],
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> list[BulkDocItem]:
        """Updates or deletes documents in one request.

        Each doc must carry its current ``_rev``; set ``_deleted: true`` to
        delete it. On the wire this is the same request as ``bulk_insert``.
        """
        return self._bulk_docs("bulk update", name, docs, *auth, timeout=timeout)

    def _bulk_docs(
        self,
        operation: str,
        name: str,
        docs: list[dict[str, Any]],
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> list[BulkDocItem]:
        return self.call(
            operation,
            "POST",
            f"/{escape(name)}/_bulk_docs",
            *auth,
            body={"docs": docs},
            expect=(200, 201),
            result=list,
            timeout=timeout,
        )

    def find(
        self,
        name: str,
        query: FindRequest,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> FindResponse:
        body: dict[str, Any] = {"selector": query.get("selector", {})}
        for field, value in query.items():
            if field != "selector" and value:
                body[field] = value

        return self.call(
            "execute find",
            "POST",
            f"/{escape(name)}/_find",
            *auth,
            body=body,
            timeout=timeout,
        )

    def all_docs(
        self,
        name: str,
        *auth: AuthOption,
        options: AllDocsOptions | None = None,
        timeout: float | None = None,
    ) -> AllDocsResponse:
        options = options or {}
        keys = options.get("keys")

        query = Query()
        query.flag("conflicts", options.get("conflicts"))
        query.flag("descending", options.get("descending"))
        query.string("endkey_docid", options.get("endkey_docid"))
        query.flag("include_docs", options.get("include_docs"))
        query.flag("inclusive_end", options.get("inclusive_end"))
        query.number("limit", options.get("limit"))
        query.number("skip", options.get("skip"))
        query.string("startkey_docid", options.get("startkey_docid"))
        query.flag("update_seq", options.get("update_seq"))

        path = f"/{escape(name)}/_all_docs"
        if keys:
            return self.call(
                "get all docs",
                "POST",
                query.apply(path),
                *auth,
                body={"keys": keys},
                timeout=timeout,
            )

        for key in _ALL_DOCS_KEYS:
            query.json(key, options.get(key) or None)

        return self.call(
            "get all docs", "GET", query.apply(path), *auth, timeout=timeout
        )
