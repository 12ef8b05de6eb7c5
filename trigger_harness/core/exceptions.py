"""
Custom exception classes.

Represent errors raised while synthesizing an invocation for a wrapped handler.
"""


class HarnessError(Exception):
    """Base exception class for the harness."""

    pass


class PathMismatchError(HarnessError):
    """Raised when a payload path does not fit the trigger's resource template."""

    def __init__(self, template: str, path: str):
        self.template = template
        self.path = path
        super().__init__(
            f"Provided path {path!r} does not match the trigger resource {template!r}"
        )


class MissingParamError(HarnessError):
    """Raised when a wildcard has no value to substitute."""

    def __init__(self, template: str, name: str):
        self.template = template
        self.name = name
        super().__init__(f"Missing value for wildcard {{{name}}} in {template!r}")


class ConfigError(HarnessError):
    """Raised when the mocked runtime configuration cannot be loaded."""

    pass
