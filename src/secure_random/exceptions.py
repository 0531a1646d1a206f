"""Exception hierarchy for secure-random.

All exceptions derive from SecureRandomError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""

SIZE_CANNOT_BE_LESS_THAN_ONE = "size can't be less than 1."
MAX_CANNOT_BE_LESS_OR_EQUAL_TO_MIN = "max can't be less or equal to min."


class SecureRandomError(Exception):
    """Base exception for all secure-random errors."""


class InvalidArgumentError(SecureRandomError, ValueError):
    """A generation request was rejected before touching the entropy source.

    Attributes:
        parameter: Name of the offending argument (``'size'``, ``'min'`` or
            ``'max'``).
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{message} (parameter: {parameter})")
        self.parameter = parameter


class UseAfterReleaseError(SecureRandomError):
    """An operation was invoked on a SamplerContext that has been released.

    Attributes:
        type_name: Qualified type name of the released object.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Cannot access a released object: {type_name}")
        self.type_name = type_name


class EntropySourceUnavailableError(SecureRandomError):
    """The host cannot supply cryptographically secure random bytes.

    Never recovered locally and never replaced by a non-cryptographic
    generator.
    """


class ConfigValidationError(SecureRandomError):
    """Configuration field validation failed."""
