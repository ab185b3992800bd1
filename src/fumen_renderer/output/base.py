"""Base class for output format providers."""

from abc import ABC, abstractmethod
from typing import Iterator

from PIL import Image


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    @abstractmethod
    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Iterator of indexed-colour frames sharing one size and palette
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded output as bytes
        """
        raise NotImplementedError
