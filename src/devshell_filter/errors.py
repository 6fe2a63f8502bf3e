"""Error types raised while building or launching the filtered environment."""


class DevshellFilterError(Exception):
    """Base class for every error the CLI reports to the user."""


class DecodeError(DevshellFilterError):
    """Malformed or schema-mismatched JSON for an Env, filter or Config."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"failed to decode {source}: {detail}")


class EncodeError(DevshellFilterError):
    """A path segment cannot be joined back into a path list."""


class SourceUnavailable(DevshellFilterError):
    """The environment exporter failed or an input file could not be read."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"{source} unavailable: {detail}")


class LaunchError(DevshellFilterError):
    """No usable shell was found or it could not be executed."""
