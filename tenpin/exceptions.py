from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 style error report."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for scoring errors."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class OutOfRange(DomainException, IndexError):
    def __init__(self, index: object) -> None:
        super().__init__(
            title="Frame out of range",
            detail=f"frame index {index!r} is outside 0-9",
            code="frame_out_of_range",
        )
        self.index = index


class InvalidRoll(DomainException, ValueError):
    def __init__(self, detail: str, *, frame: int | None = None) -> None:
        super().__init__(
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )
        self.frame = frame


def problem_from_exception(
    exc: DomainException, *, instance: Optional[str] = None
) -> ProblemDetail:
    """Build a serializable report for a raised domain error."""

    return ProblemDetail(
        type=exc.type,
        title=exc.title,
        detail=exc.detail,
        instance=instance,
        code=exc.code,
    )
