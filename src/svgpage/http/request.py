"""The slice of an ASGI HTTP scope that page handling needs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """Method and path of one incoming request, used for routing and logs."""

    method: str
    path: str

    @classmethod
    def from_scope(cls, scope: Mapping[str, Any]) -> Request:
        return cls(method=scope["method"], path=scope["path"])
