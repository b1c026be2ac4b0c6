"""Errors reported during documentation generation."""

from __future__ import annotations

from oasgen.status_code import StatusCode


class GenerationError(Exception):
    """Base class of all documentation generation errors.

    Some of these may be false positives when there is not enough
    context to tell whether something is really wrong.
    """


class ParameterNotExists(GenerationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'parameter "{name}" does not exist for the operation')


class DefaultResponseExists(GenerationError):
    def __init__(self) -> None:
        super().__init__("the default response already exists for the operation")


class ResponseExists(GenerationError):
    def __init__(self, status: StatusCode) -> None:
        self.status = status
        super().__init__(f'the response for status "{status}" already exists for the operation')


class OperationExists(GenerationError):
    def __init__(self, path: str, method: str) -> None:
        self.path = path
        self.method = method
        super().__init__(f'the operation "{method}" already exists for the path "{path}"')


class DuplicateRequestBody(GenerationError):
    def __init__(self) -> None:
        super().__init__("duplicate request body for the operation")


class DuplicateParameter(GenerationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'duplicate parameter "{name}" for the operation')


class UnexpectedReference(GenerationError):
    def __init__(self) -> None:
        super().__init__("transformations do not support references")


class InferredResponseConflict(GenerationError):
    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(
            "did not apply inferred response because a response "
            f"for status {status} already exists"
        )


class InferredDefaultResponseConflict(GenerationError):
    def __init__(self) -> None:
        super().__init__(
            "did not apply inferred default response because a default response already exists"
        )


class OtherError(GenerationError):
    """Wraps any other exception raised while generating documentation."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause))
        self.__cause__ = cause