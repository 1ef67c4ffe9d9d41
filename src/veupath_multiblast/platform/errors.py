"""Typed error model with problem+json rendering."""

from enum import StrEnum

from pydantic import BaseModel

from veupath_multiblast.platform.types import JSONArray, JSONObject


class ErrorCode(StrEnum):
    """Application error codes."""

    # General
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # WDK model
    QUESTION_NOT_FOUND = "QUESTION_NOT_FOUND"

    # Multi-blast
    UNKNOWN_BLAST_TOOL = "UNKNOWN_BLAST_TOOL"


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details document."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    code: ErrorCode
    errors: JSONArray | None = None


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: ErrorCode,
        title: str,
        status: int = 400,
        detail: str | None = None,
        errors: JSONArray | None = None,
    ) -> None:
        self.code = code
        self.title = title
        self.status = status
        self.detail = detail
        self.errors = errors
        super().__init__(title)


class NotFoundError(AppError):
    """Resource not found error."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.NOT_FOUND,
        title: str = "Resource not found",
        detail: str | None = None,
    ) -> None:
        super().__init__(code=code, title=title, status=404, detail=detail)


class ValidationError(AppError):
    """Validation error."""

    def __init__(
        self,
        title: str = "Validation failed",
        detail: str | None = None,
        errors: JSONArray | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            title=title,
            status=422,
            detail=detail,
            errors=errors,
        )


class UnknownBlastToolError(AppError):
    """The BLAST algorithm param names a tool multi-blast does not run."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(
            code=ErrorCode.UNKNOWN_BLAST_TOOL,
            title="Unknown blast tool",
            status=400,
            detail=f"Unknown blast tool: {tool}",
            errors=[{"param": "BlastAlgorithm", "value": tool}],
        )


class MissingParameterError(KeyError):
    """A parameter required by the selected tool was not supplied."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Missing required parameter: {self.name}"


class MalformedNumericError(ValueError):
    """A numeric (or numeric pair) parameter value could not be parsed."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Parameter '{name}' has a malformed numeric value: {value!r}")


def problem_detail(exc: AppError, instance: str | None = None) -> JSONObject:
    """Render an AppError as a problem+json document.

    :param exc: Application error.
    :param instance: Optional URI (or path) identifying the failing input.
    :returns: JSON-ready problem document without empty members.
    """
    problem = ProblemDetail(
        title=exc.title,
        status=exc.status,
        detail=exc.detail,
        instance=instance,
        code=exc.code,
        errors=exc.errors,
    )
    return problem.model_dump(mode="json", exclude_none=True)
