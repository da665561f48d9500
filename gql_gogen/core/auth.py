"""Authentication for fetching a schema from a GraphQL endpoint.

Any object with a ``get_headers()`` method can be passed as ``auth`` to
``load_schema``.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {"Authorization": f"Bearer {self.token}", "X-Tenant": self.tenant}
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in the introspection request."""
        ...


class BearerAuth:
    """Bearer token authentication."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Arbitrary request headers.

    Example:
        auth = HeaderAuth.from_strings(["X-API-Key: key123"])
    """

    def __init__(self, headers: Dict[str, str]):
        self._headers = headers

    @classmethod
    def from_strings(cls, values: list[str]) -> "HeaderAuth":
        """Build from ``Name: value`` strings, as given on the command line."""
        headers = {}
        for value in values:
            name, sep, content = value.partition(":")
            if not sep or not name.strip():
                raise ValueError(f"Invalid header {value!r}, expected 'Name: value'")
            headers[name.strip()] = content.strip()
        return cls(headers)

    def get_headers(self) -> Dict[str, str]:
        return self._headers.copy()


class NoAuth:
    """No authentication (public endpoints)."""

    def get_headers(self) -> Dict[str, str]:
        return {}
