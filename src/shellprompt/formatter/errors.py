"""Error types raised while parsing and rendering format strings"""

from typing import Optional


class FormatterError(Exception):
    """Base class for all formatter errors"""


class ParseError(FormatterError):
    """A format string could not be parsed"""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)


class UnbalancedDelimiter(ParseError):
    """An opening or closing delimiter has no partner"""

    def __init__(self, delimiter: str, position: int):
        self.delimiter = delimiter
        super().__init__(f"Unbalanced delimiter '{delimiter}'", position)


class DanglingEscape(ParseError):
    """The format string ends with a lone backslash"""

    def __init__(self, position: int):
        super().__init__("Dangling escape", position)


class StyleError(FormatterError):
    """A style value could not be turned into a Style"""


class ResolutionError(FormatterError):
    """A parsed template could not be rendered"""


class UnknownVariable(ResolutionError):
    """No resolver claimed a variable that is required"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown variable `{name}`")


class ResolverFailed(ResolutionError):
    """A resolver reported a failure for a variable"""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"Error resolving variable `{name}`: {cause}")
