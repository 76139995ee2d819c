"""Response values produced by submit handlers.

A handler returns the complete response for its request instead of
queueing it on shared request state. ASGI hosts convert it with
``to_starlette()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.responses import Response


@dataclass(frozen=True, slots=True)
class TextResponse:
    """A text body with its media type and charset.

    Attributes:
        content_type: Media type without parameters, e.g. ``application/json``
        encoding: Charset used to encode ``text``
        text: The response body
    """

    content_type: str
    encoding: str
    text: str

    @property
    def content_type_header(self) -> str:
        return f"{self.content_type}; charset={self.encoding}"

    @property
    def body(self) -> bytes:
        return self.text.encode(self.encoding)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "content-type": self.content_type_header,
            "content-length": str(len(self.body)),
        }

    def to_starlette(self, status_code: int = 200) -> Response:
        """Convert to a Starlette/FastAPI response."""
        from starlette.responses import Response

        return Response(
            content=self.body,
            status_code=status_code,
            media_type=self.content_type_header,
        )


def json_response(text: str, encoding: str = "UTF-8") -> TextResponse:
    """A TextResponse carrying JSON text."""
    return TextResponse("application/json", encoding, text)


__all__ = ["TextResponse", "json_response"]
