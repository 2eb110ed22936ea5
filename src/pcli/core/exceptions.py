from pathlib import Path
from typing import Any, Optional


class PCLIException(Exception):
    def __init__(
        self,
        *,
        message: str,
        code: str = "ERROR",
        detail: Optional[Any] = None,
    ):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class CommandNotFoundError(PCLIException):
    """Raised by dispatch when no command owns the requested keyword."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(
            message=f'No command found for the keyword "{keyword}"',
            code="COMMAND_NOT_FOUND",
            detail={"keyword": keyword},
        )


class MalformedCommandModuleError(PCLIException):
    """Raised at load time when a command unit exposes no register() function."""

    def __init__(self, name: str, path: Path | str):
        self.name = name
        self.path = Path(path)
        super().__init__(
            message=f"Could not find register() function in command unit '{name}' ({self.path})",
            code="MALFORMED_COMMAND_MODULE",
            detail={"name": name, "path": str(self.path)},
        )
