from typing import Optional, Protocol


class Transport(Protocol):
    """Issues requests relative to the project root and returns the raw body."""

    def get(self, path: str) -> str: ...

    def post(self, path: str, body: Optional[str] = None) -> str: ...

    def delete(self, path: str) -> str: ...
