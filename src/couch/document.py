from typing import Any

from couch.auth import AuthOption
from couch.http import Query, Service, escape
from couch.types import DocumentGetOptions, DocumentPutOptions, DocumentResponse

_GET_FLAGS = (
    "revs",
    "revs_info",
    "latest",
    "conflicts",
    "deleted_conflicts",
    "local_seq",
    "meta",
)


def strip_etag(etag: str) -> str:
    if len(etag) >= 2 and etag[0] == '"' and etag[-1] == '"':
        return etag[1:-1]
    return etag


class DocumentService(Service):
    def get_document(
        self,
        db: str,
        id: str,
        *auth: AuthOption,
        options: DocumentGetOptions | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        query = Query()
        if options:
            query.string("rev", options.get("rev"))
            for flag in _GET_FLAGS:
                query.flag(flag, options.get(flag))

        return self.call(
            "get document",
            "GET",
            query.apply(f"/{escape(db)}/{escape(id)}"),
            *auth,
            not_found=("document", f"{db}/{id}"),
            timeout=timeout,
        )

    def head_document(
        self,
        db: str,
        id: str,
        *auth: AuthOption,
        options: DocumentGetOptions | None = None,
        timeout: float | None = None,
    ) -> str:
        """Returns the current revision of a document without fetching its body."""
        operation = "head document"
        query = Query()
        if options:
            query.string("rev", options.get("rev"))

        with self.send(
            operation,
            "HEAD",
            query.apply(f"/{escape(db)}/{escape(id)}"),
            *auth,
            timeout=timeout,
        ) as resp:
            self.check(
                operation,
                resp,
                b"",
                not_found=("document", f"{db}/{id}"),
            )
            return strip_etag(resp.headers.get("ETag", ""))

    def create_document(
        self,
        db: str,
        doc: dict[str, Any],
        *auth: AuthOption,
        options: DocumentPutOptions | None = None,
        timeout: float | None = None,
    ) -> DocumentResponse:
        query = Query()
        if options:
            query.string("batch", options.get("batch"))

        return self.call(
            "create document",
            "POST",
            query.apply(f"/{escape(db)}"),
            *auth,
            body=doc,
            expect=(201, 202),
            timeout=timeout,
        )

    def update_document(
        self,
        db: str,
        id: str,
        doc: dict[str, Any],
        *auth: AuthOption,
        options: DocumentPutOptions | None = None,
        timeout: float | None = None,
    ) -> DocumentResponse:
        query = Query()
        if options:
            query.string("rev", options.get("rev"))
            query.string("batch", options.get("batch"))

        return self.call(
            "update document",
            "PUT",
            query.apply(f"/{escape(db)}/{escape(id)}"),
            *auth,
            body=doc,
            expect=(201, 202),
            timeout=timeout,
        )

    def delete_document(
        self,
        db: str,
        id: str,
        rev: str,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> DocumentResponse:
        query = Query(rev=rev)
        return self.call(
            "delete document",
            "DELETE",
            query.apply(f"/{escape(db)}/{escape(id)}"),
            *auth,
            timeout=timeout,
        )
