"""
Input Errors
============

Every failure the tool reports to the user derives from InputError. The
parser raises InvalidJsonError and InvalidShapeError; the classifier guards
its own contract with InvalidInputError.
"""


class InputError(Exception):
    """Base class for rejected input."""


class InvalidJsonError(InputError):
    def __init__(self, message: str = "Invalid JSON format. Please check your input."):
        super().__init__(message)


class InvalidShapeError(InputError):
    def __init__(self, message: str = 'Input must contain a "data" array'):
        super().__init__(message)


class InvalidInputError(InputError):
    def __init__(self, message: str = "Tokens must be a sequence of strings"):
        super().__init__(message)
