"""Redis option store."""

from __future__ import annotations

import json
from typing import Any


class RedisOptionStore:
    """Option store shared by every process that talks to the same Redis."""

    def __init__(
        self,
        client: Any,  # redis.Redis
        *,
        prefix: str = "tagbase",
    ) -> None:
        self._client = client
        self._prefix = prefix

    def _option_key(self, name: str) -> str:
        """Generate full Redis key for an option."""
        return f"{self._prefix}:option:{name}"

    def get(self, name: str) -> Any | None:
        """Get an option value, or None if unset."""
        data = self._client.get(self._option_key(name))
        if data is None:
            return None
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)

    def set(self, name: str, value: Any) -> None:
        """Create or update an option (values are JSON encoded)."""
        self._client.set(self._option_key(name), json.dumps(value))

    def delete(self, name: str) -> None:
        """Delete an option."""
        self._client.delete(self._option_key(name))

    def disconnect(self) -> None:
        """Close the Redis connection."""
        self._client.close()
