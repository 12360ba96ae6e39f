"""Exception types raised by vale-frontmatter."""


class ValeFrontmatterError(Exception):
    """Base class for all vale-frontmatter errors."""


class FrontMatterError(ValeFrontmatterError):
    """Front matter could not be parsed."""


class CacheError(ValeFrontmatterError):
    """A projection could not be written, or the cache root created."""


class LinterError(ValeFrontmatterError):
    """The external linter could not be run to completion."""


class LinterNotFoundError(LinterError):
    """The linter executable does not exist or is not executable."""


class LinterTimeoutError(LinterError):
    """The linter did not exit within the configured timeout."""

    def __init__(self, command: list[str], timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command[0]} did not finish within {timeout:g}s")
