"""Security code generators for DRILLS."""

import secrets

from drills.interfaces.code_generator import CodeGenerator

# pylint: disable=too-few-public-methods


class RandomCodeGenerator(CodeGenerator):
    """Cryptographically random fixed-width numeric codes.

    Codes are drawn with `secrets` so they are unpredictable. A six-digit
    generator yields values in ``[100000, 999999]``.
    """

    def __init__(self, digits: int = 6) -> None:
        if digits < 1:
            raise ValueError("digits must be at least 1")
        self._low = 10 ** (digits - 1)
        self._span = 10**digits - self._low

    def generate_code(self) -> int:
        """Generate a new random code."""
        return self._low + secrets.randbelow(self._span)


class SimpleCodeGenerator(CodeGenerator):
    """A simple generator that produces sequential codes.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, start: int = 100000) -> None:
        self._next = start

    def generate_code(self) -> int:
        """Generate the next code in sequence."""
        code = self._next
        self._next += 1
        return code
