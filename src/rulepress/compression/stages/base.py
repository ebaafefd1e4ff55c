"""Abstract base class for compression stages."""

from abc import ABC, abstractmethod
from typing import Dict, Any

from ...core.types import CompressionOptions


class CompressionStage(ABC):
    """
    Abstract base class for compression stages.

    A stage is a total function from text to text: it must return a
    string for every string input, including the empty string.
    """

    name: str = "base"
    description: str = "Base compression stage"
    option_flag: str = ""  # CompressionOptions field that enables the stage

    @abstractmethod
    def apply(self, text: str, options: CompressionOptions) -> str:
        """
        Transform the input text.

        Args:
            text: Output of the previous enabled stage
            options: Options of the current compression run

        Returns:
            Transformed text
        """
        pass

    def is_enabled(self, options: CompressionOptions) -> bool:
        """Check whether the options switch this stage on."""
        return bool(getattr(options, self.option_flag, False))

    def get_capabilities(self) -> Dict[str, Any]:
        """Return stage metadata."""
        return {
            "name": self.name,
            "description": self.description,
            "option": self.option_flag,
        }
