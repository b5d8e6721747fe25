import logging

from TBR.configs import ThumbnailFormatsConfig
from TBR.connectors import Connector, File
from TBR.geometry import Size
from TBR.media import Media
from TBR.resizers import Resizer

logger = logging.getLogger(__name__)


class FormatThumbnail:
    """Generates one thumbnail per format of the media context

    Reference images are stored as "{root}/{context}/{id}.{ext}",
    thumbnails as "{root}/{context}/thumb_{id}_{format_name}.{ext}".
    """

    def __init__(
        self,
        resizer: Resizer,
        connector: Connector,
        root: str,
        formats_config: ThumbnailFormatsConfig
    ):
        """
        Parameters
        ----------
        resizer: Resizer
            Resizer used to make thumbnails
        connector: Connector
            Storage of reference images and thumbnails
        root: str
            Root folder in the storage
        formats_config: ThumbnailFormatsConfig
            Formats of each context
        """
        self.resizer = resizer
        self.connector = connector
        self.root = root.rstrip('/')
        self.formats_config = formats_config

    def _check_media(self, media: Media) -> None:
        assert media.id is not None, "Media must have an id to store thumbnails"

    def reference_path(self, media: Media) -> str:
        self._check_media(media)
        return self.connector.join(self.root, media.context, f'{media.id}.{media.extension}')

    def thumbnail_path(self, media: Media, format_id: str) -> str:
        self._check_media(media)
        _, format_name = self.formats_config.split_format_id(format_id)
        return self.connector.join(
            self.root, media.context, f'thumb_{media.id}_{format_name}.{media.extension}'
        )

    def get_boxes(self, media: Media) -> dict[str, Size]:
        """Final size of every thumbnail of media, computed without reading images"""
        formats = self.formats_config.formats_for(media.context)
        return {
            format_id: self.resizer.get_box(media, settings)
            for format_id, settings in formats.items()
        }

    def generate(self, media: Media) -> dict[str, Size]:
        """Makes all thumbnails of media

        Returns
        -------
        dict[str, Size]
            Mapping format id -> size of the written thumbnail
        """
        formats = self.formats_config.formats_for(media.context)
        reference = File(self.connector, self.reference_path(media))
        self.connector.mkdir(self.connector.join(self.root, media.context))

        boxes = {}
        for format_id, settings in formats.items():
            thumbnail = File(self.connector, self.thumbnail_path(media, format_id))
            self.resizer.resize(media, reference, thumbnail, media.extension, settings)
            boxes[format_id] = self.resizer.get_box(media, settings)
            logger.info(f'Generated {format_id} thumbnail {boxes[format_id]} for media {media.id}')
        return boxes

    def delete(self, media: Media) -> list[str]:
        """Removes existing thumbnails of media

        Returns
        -------
        list[str]
            Paths of removed files
        """
        removed = []
        for format_id in self.formats_config.formats_for(media.context):
            path = self.thumbnail_path(media, format_id)
            if self.connector.exists(path):
                self.connector.remove(path)
                removed.append(path)
        return removed
