"""
Storage Response
================
Immutable view of an HTTP response returned by the storage service.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Tuple, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class SwiftResponse:
    """
    A completed storage response.

    Headers are stored as a tuple of (name, value) pairs; ``headers`` hands
    out a fresh case-insensitive copy. The body is kept as raw bytes;
    ``json()`` and ``parse()`` decode it on demand.
    """
    status_code: int
    reason: str
    header_items: Tuple[Tuple[str, str], ...] = ()
    content: bytes = b""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "SwiftResponse":
        return cls(
            status_code=response.status_code,
            reason=response.reason_phrase,
            header_items=tuple(response.headers.multi_items()),
            content=response.content,
        )

    @property
    def headers(self) -> httpx.Headers:
        return httpx.Headers(list(self.header_items))

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.content)

    def parse(self, model: Type[T]) -> Union[T, List[T]]:
        """
        Validate the JSON body into a pydantic model.

        A JSON array yields a list of models, anything else a single model.
        """
        data = self.json()
        if isinstance(data, list):
            return [model.model_validate(item) for item in data]
        return model.model_validate(data)
