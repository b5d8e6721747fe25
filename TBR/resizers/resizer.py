from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Union

from TBR.connectors import File
from TBR.geometry import Size
from TBR.media import Media
from TBR.settings import ResizeSettings

SettingsLike = Union[ResizeSettings, Mapping[str, Any]]


class Resizer(ABC):
    """Base class for all resizers"""

    @abstractmethod
    def resize(
        self,
        media: Media,
        in_file: File,
        out_file: File,
        img_format: str,
        settings: SettingsLike
    ) -> None:
        """Makes a thumbnail of media

        Parameters
        ----------
        media: Media
            Source image descriptor
        in_file: File
            File with the source image
        out_file: File
            File to write the thumbnail to
        img_format: str
            Format of the thumbnail (jpg, png, etc.)
        settings: SettingsLike
            ResizeSettings or a plain settings mapping
        """
        pass

    @abstractmethod
    def get_box(self, media: Media, settings: SettingsLike) -> Size:
        """Final size of the thumbnail, without touching image data

        Parameters
        ----------
        media: Media
            Source image descriptor
        settings: SettingsLike
            ResizeSettings or a plain settings mapping

        Returns
        -------
        Size
            Size of the thumbnail
        """
        pass
