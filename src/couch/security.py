from couch.auth import AuthOption
from couch.http import Service, escape
from couch.types import SecurityObject


class SecurityService(Service):
    def get_security(
        self, db: str, *auth: AuthOption, timeout: float | None = None
    ) -> SecurityObject:
        return self.call(
            "get security", "GET", f"/{escape(db)}/_security", *auth, timeout=timeout
        )

    def set_security(
        self,
        db: str,
        security: SecurityObject,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> None:
        body = {
            section: {
                "names": security.get(section, {}).get("names", []),
                "roles": security.get(section, {}).get("roles", []),
            }
            for section in ("admins", "members")
        }
        self.call(
            "set security",
            "PUT",
            f"/{escape(db)}/_security",
            *auth,
            body=body,
            result=None,
            timeout=timeout,
        )
