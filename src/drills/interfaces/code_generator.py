"""Interface for one-time security code generators."""

import abc

# pylint: disable=too-few-public-methods


class CodeGenerator(abc.ABC):
    """Contract for a one-time login code generator."""

    @abc.abstractmethod
    def generate_code(self) -> int:
        """Generate a new numeric security code."""
