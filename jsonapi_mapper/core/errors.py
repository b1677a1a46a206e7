"""JSON:API mapper errors and error object templates."""

from typing import Any


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error


class JSONAPIMapperError(Exception):
    """Base class for errors raised while mapping models to documents."""

    status = "500"
    code = "mapper_error"
    title = "Mapping Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_error_object(self) -> dict[str, Any]:
        """Return this error as a JSON:API error object."""
        return JSONAPIErrorBuilder().error_object(
            status=self.status,
            code=self.code,
            title=self.title,
            detail=self.detail,
        )


class InvalidModelError(JSONAPIMapperError):
    """A model presented for mapping has no resolvable id or is unsupported."""

    code = "invalid_model"
    title = "Invalid Model"
