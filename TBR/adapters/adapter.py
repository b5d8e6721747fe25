from abc import ABC, abstractmethod
from typing import Any, Optional

from TBR.geometry import Point, Size
from TBR.settings import ColorSpec


class ImageAdapter(ABC):
    """
    Abstract class for image libraries used by resizers
    """

    @abstractmethod
    def load(self, data: bytes) -> Any:
        """
        Decodes image from bytes

        Parameters
        ----------
        data: bytes
            Encoded image

        Returns
        -------
        Any
            In-memory image
        """
        pass

    @abstractmethod
    def get_size(self, image: Any) -> Size:
        pass

    @abstractmethod
    def resize(self, image: Any, size: Size) -> Any:
        """
        Scales image to exactly the given size

        Parameters
        ----------
        image: Any
            In-memory image
        size: Size
            Target size

        Returns
        -------
        Any
            New scaled image
        """
        pass

    @abstractmethod
    def crop(self, image: Any, point: Point, size: Size) -> Any:
        """
        Extracts a region of the image

        Parameters
        ----------
        image: Any
            In-memory image
        point: Point
            Top-left corner of the region
        size: Size
            Size of the region

        Returns
        -------
        Any
            New image with the region

        Raises
        ------
        CropOutOfBoundsError
            If the region does not fit in the image
        """
        pass

    @abstractmethod
    def create(self, size: Size, color: Optional[Any] = None) -> Any:
        """
        Creates a blank canvas

        Parameters
        ----------
        size: Size
            Size of the canvas
        color: Optional[Any] = None
            Parsed color (see parse_color). Transparent if None
        """
        pass

    @abstractmethod
    def paste(self, background: Any, image: Any, point: Point) -> Any:
        pass

    @abstractmethod
    def encode(self, image: Any, img_format: str, quality: int) -> bytes:
        """
        Encodes image

        Parameters
        ----------
        image: Any
            In-memory image
        img_format: str
            Format name or file extension (jpg, png, etc.)
        quality: int
            Quality from 0 to 100

        Returns
        -------
        bytes
            Encoded image
        """
        pass

    @abstractmethod
    def parse_color(self, color: ColorSpec) -> Any:
        """
        Converts color specification to library color

        Raises
        ------
        ValueError
            If color is malformed
        """
        pass
