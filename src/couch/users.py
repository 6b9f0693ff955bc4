from couch.auth import AuthOption
from couch.http import Query, Service, escape
from couch.types import User, UserResponse

USERS_DB = "_users"
USER_PREFIX = "org.couchdb.user:"

# hashed credential fields the server derives from "password"
_CREDENTIAL_FIELDS = (
    "salt",
    "derived_key",
    "iterations",
    "password_scheme",
    "pbkdf2_prf",
)


def user_id(name: str) -> str:
    return f"{USER_PREFIX}{name}"


def user_path(name: str) -> str:
    return f"/{USERS_DB}/{escape(user_id(name))}"


class UserService(Service):
    """Users stored as documents in the _users database."""

    def create_user(
        self,
        name: str,
        password: str,
        *auth: AuthOption,
        roles: list[str] | None = None,
        timeout: float | None = None,
    ) -> UserResponse:
        user: User = {
            "_id": user_id(name),
            "name": name,
            "type": "user",
            "roles": roles or [],
            "password": password,
        }
        return self.call(
            "create user",
            "POST",
            f"/{USERS_DB}",
            *auth,
            body=user,
            expect=(200, 201),
            timeout=timeout,
        )

    def get_user(
        self, name: str, *auth: AuthOption, timeout: float | None = None
    ) -> User:
        return self.call(
            "get user",
            "GET",
            user_path(name),
            *auth,
            not_found=("user", name),
            timeout=timeout,
        )

    def update_user(
        self,
        name: str,
        rev: str,
        *auth: AuthOption,
        password: str | None = None,
        roles: list[str] | None = None,
        timeout: float | None = None,
    ) -> UserResponse:
        user: User = {
            "_id": user_id(name),
            "_rev": rev,
            "name": name,
            "type": "user",
            "roles": roles or [],
        }
        if password is not None:
            user["password"] = password
        return self._put("update user", user, *auth, timeout=timeout)

    def delete_user(
        self, name: str, rev: str, *auth: AuthOption, timeout: float | None = None
    ) -> UserResponse:
        return self.call(
            "delete user",
            "DELETE",
            Query(rev=rev).apply(user_path(name)),
            *auth,
            timeout=timeout,
        )

    def list_users(self, *auth: AuthOption, timeout: float | None = None) -> list[User]:
        body = self.call(
            "list users",
            "GET",
            f"/{USERS_DB}/_all_docs?include_docs=true",
            *auth,
            timeout=timeout,
        )
        users: list[User] = []
        for row in body.get("rows", []):
            doc = row.get("doc") or {}
            # skips _design/_auth and anything else that isn't a user
            if doc.get("type") == "user":
                users.append(doc)
        return users

    def update_password(
        self,
        name: str,
        rev: str,
        new_password: str,
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> UserResponse:
        current = self.get_user(name, *auth, timeout=timeout)
        return self.update_user(
            name,
            rev,
            *auth,
            password=new_password,
            roles=current.get("roles", []),
            timeout=timeout,
        )

    def update_roles(
        self,
        name: str,
        rev: str,
        roles: list[str],
        *auth: AuthOption,
        timeout: float | None = None,
    ) -> UserResponse:
        current = self.get_user(name, *auth, timeout=timeout)

        user: User = {
            "_id": user_id(name),
            "_rev": rev,
            "name": name,
            "type": "user",
            "roles": roles or [],
        }
        for field in _CREDENTIAL_FIELDS:
            if current.get(field):
                user[field] = current[field]  # type: ignore[literal-required]

        return self._put("update roles", user, *auth, timeout=timeout)

    def _put(
        self, operation: str, user: User, *auth: AuthOption, timeout: float | None = None
    ) -> UserResponse:
        return self.call(
            operation,
            "PUT",
            user_path(user["name"]),
            *auth,
            body=user,
            expect=(200, 201),
            timeout=timeout,
        )
