"""dotenv_cli error hierarchy."""


class DotenvError(Exception):
    """Base exception for all dotenv_cli errors."""


class ConfigError(DotenvError):
    """Configuration file malformed."""


class FileNotReadable(DotenvError):
    """The dotenv file is missing or cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Unable to read file "{path}": {reason}')


class FileNotWritable(DotenvError):
    """The rewritten dotenv file could not be written back."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Unable to write file "{path}": {reason}')


class VariableNotFound(DotenvError):
    """No assignment for the requested name in the dotenv file."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f'The variable "{name}" was not found in "{path}"')


class InvalidVariableName(DotenvError):
    """Variable name cannot be written to a dotenv file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'The variable name "{name}" contains invalid characters')


class CommandNotRunnable(DotenvError):
    """The command given to ``run`` could not be started."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f'Unable to run command "{command}": {reason}')
