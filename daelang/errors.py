"""Exception hierarchy for the Dae language toolchain."""


class DaeError(Exception):
    """Base class for every error raised while handling a Dae program."""


class LexerError(DaeError):
    """Raised when source text cannot be split into tokens."""


class ParserError(DaeError):
    """Raised when the token stream does not form a valid program."""


class InterpreterError(DaeError):
    """Raised when a parsed program cannot be executed."""