"""
Exceptions raised by the generation core.

The core never decides what is fatal; the CLI maps these to exit codes.
"""


class PasswordGenerationError(Exception):
    """Generic generation error."""


class EmptyAlphabetError(PasswordGenerationError):
    """No usable characters left after class selection and filtering."""


class EmptySetError(PasswordGenerationError):
    """A character set handed to the sampler was empty."""


class InvalidRangeError(PasswordGenerationError):
    """The sampler was asked for an index in a non-positive range."""


class EntropySourceError(PasswordGenerationError):
    """The secure random source failed."""


class ClipboardError(Exception):
    """No clipboard tool was found, or the tool failed."""
