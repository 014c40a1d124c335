"""Exception types raised while scaffolding a project."""

from __future__ import annotations

__all__ = [
    "CopyError",
    "DestinationFileExistsError",
    "DirectoryCreateFailedError",
    "ParentNotDirectoryError",
    "ReadFailedError",
    "ScaffoldError",
    "TemplateListFailedError",
    "WriteFailedError",
]


class ScaffoldError(RuntimeError):
    """Base class for scaffolding failures.

    ``code`` is the underlying filesystem error code (``None`` when the failure
    was not caused by an I/O error) and ``path`` is the offending location.
    """

    def __init__(self, message: str, *, path: str, code: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.code = code


class ParentNotDirectoryError(ScaffoldError):
    """Raised when the chosen parent folder is missing or not a directory."""

    def __init__(self, path: str, code: str | None = None) -> None:
        if code is None:
            message = f"unable to write to {path} because it isn't a directory"
        else:
            message = f"unable to write to {path} ({code})"
        super().__init__(message, path=path, code=code)


class DirectoryCreateFailedError(ScaffoldError):
    """Raised when the project directory cannot be created."""

    def __init__(self, path: str, code: str | None = None) -> None:
        super().__init__(f"unable to create directory {path} ({code})", path=path, code=code)


class TemplateListFailedError(ScaffoldError):
    """Raised when the template directory cannot be enumerated."""

    def __init__(self, path: str, code: str | None = None) -> None:
        super().__init__(f"unable to list template files in {path} ({code})", path=path, code=code)


class CopyError(ScaffoldError):
    """Failure to copy a single template file. Never fatal to a scaffold."""


class DestinationFileExistsError(CopyError):
    def __init__(self, path: str) -> None:
        super().__init__(f"{path} already exists", path=path, code="EEXIST")


class ReadFailedError(CopyError):
    def __init__(self, path: str, code: str | None = None) -> None:
        super().__init__(f"unable to read {path} ({code})", path=path, code=code)


class WriteFailedError(CopyError):
    def __init__(self, path: str, code: str | None = None) -> None:
        super().__init__(f"unable to write {path} ({code})", path=path, code=code)
