from couch.auth import AuthOption
from couch.http import Service, escape

LOCAL_NODE = "_local"
ADMINS = "admins"


def config_path(node: str, *parts: str) -> str:
    path = f"/_node/{escape(node)}/_config"
    for part in parts:
        path += f"/{escape(part)}"
    return path


class ConfigurationService(Service):
    """Node configuration under /_node/{node}/_config.

    The server stores values as strings and speaks JSON strings on the wire:
    setting a value of 5 means sending ``"5"``. Pass ``node`` to reach a
    specific cluster member; the default is the node that serves the request.
    """

    def get_configuration(
        self,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> dict[str, dict[str, str]]:
        return self.call(
            "get configuration", "GET", config_path(node), *auth, timeout=timeout
        )

    def get_configuration_section(
        self,
        section: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> dict[str, str]:
        return self.call(
            "get configuration section",
            "GET",
            config_path(node, section),
            *auth,
            timeout=timeout,
        )

    def get_configuration_value(
        self,
        section: str,
        key: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> str:
        return self.call(
            "get configuration value",
            "GET",
            config_path(node, section, key),
            *auth,
            result=str,
            timeout=timeout,
        )

    def set_configuration_value(
        self,
        section: str,
        key: str,
        value: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> str:
        """Sets a value and returns the one it replaced ("" if there was none)."""
        return self.call(
            "set configuration value",
            "PUT",
            config_path(node, section, key),
            *auth,
            body=value,
            result=str,
            timeout=timeout,
        )

    def delete_configuration_value(
        self,
        section: str,
        key: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> str:
        return self.call(
            "delete configuration value",
            "DELETE",
            config_path(node, section, key),
            *auth,
            result=str,
            timeout=timeout,
        )

    def reload_configuration(
        self,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> None:
        self.call(
            "reload configuration",
            "POST",
            config_path(node, "_reload"),
            *auth,
            result=None,
            timeout=timeout,
        )

    # server admins live in the "admins" section, the server hashes the
    # plaintext password on write

    def create_admin(
        self,
        username: str,
        password: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> None:
        self.set_configuration_value(
            ADMINS, username, password, *auth, node=node, timeout=timeout
        )

    def update_admin_password(
        self,
        username: str,
        new_password: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> None:
        self.set_configuration_value(
            ADMINS, username, new_password, *auth, node=node, timeout=timeout
        )

    def delete_admin(
        self,
        username: str,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> None:
        self.delete_configuration_value(
            ADMINS, username, *auth, node=node, timeout=timeout
        )

    def get_admins(
        self,
        *auth: AuthOption,
        node: str = LOCAL_NODE,
        timeout: float | None = None,
    ) -> dict[str, str]:
        return self.get_configuration_section(ADMINS, *auth, node=node, timeout=timeout)
