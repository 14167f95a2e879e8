"""Single success/failure value shared by the async and sync call paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonrpc_post.errors import RpcError


@dataclass(frozen=True)
class Outcome:
    value: Any = None
    error: RpcError | None = None

    @classmethod
    def success(cls, value: Any) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, error: RpcError) -> Outcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value, or raise the error for failed outcomes."""
        if self.error is not None:
            raise self.error
        return self.value
