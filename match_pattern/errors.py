"""
Match Pattern - Errors

Validation failures raised while compiling a match pattern.
"""


class InvalidPatternError(ValueError):
    """The string does not conform to the match pattern grammar."""

    def __init__(self, pattern: str, message: str = ""):
        self.pattern = pattern
        super().__init__(message or f'"{pattern}" is not a valid match pattern')


class InvalidHostError(InvalidPatternError):
    """The pattern omits a host while using a scheme that requires one."""

    def __init__(self, pattern: str):
        super().__init__(pattern, f'"{pattern}" does not have a valid host')
