import os
from collections.abc import Mapping
from typing import Any, Optional, Union

from PIL import Image

from TBR.connectors import Connector, File, LocalConnector
from TBR.media import Media
from TBR.resizers import Resizer
from TBR.settings import ResizeSettings, as_settings
from TBR.transforms.base_file_transforms import (
    BaseFilesTransforms,
    PoolOptions,
    TransformsFileData,
)


class ThumbnailTransforms(BaseFilesTransforms):
    """Makes a thumbnail for every file with the same settings

    Thumbnails are written to output_dir if it is set,
    otherwise next to the source as "{name}_thumb.{img_format}".

    Pass native "width" and "height" in metadata_lists when they are known:
    without them every source is read one extra time to parse its header.
    """

    def __init__(
        self,
        resizer: Resizer,
        settings: Union[ResizeSettings, Mapping[str, Any]],
        img_format: str = 'jpg',
        output_dir: Optional[str] = None,
        connector: Optional[Connector] = None,
        context: str = 'default',
        pool_type: PoolOptions = 'threads',
        workers: int = 16,
        pbar: bool = True
    ):
        super().__init__(pool_type, workers, pbar)
        self.resizer = resizer
        self.settings = as_settings(settings)
        self.img_format = img_format
        self.output_dir = output_dir
        self.connector = connector if connector is not None else LocalConnector()
        self.context = context

    @property
    def required_metadata(self) -> list[str]:
        return []

    @property
    def metadata_to_change(self) -> list[str]:
        return ['thumbnail_path', 'width', 'height']

    def get_output_path(self, filepath: str) -> str:
        name = os.path.splitext(os.path.basename(filepath))[0]
        if self.output_dir is not None:
            return self.connector.join(self.output_dir, f'{name}.{self.img_format}')
        return self.connector.join(
            self.connector.dirname(filepath), f'{name}_thumb.{self.img_format}'
        )

    def _read_size(self, data: TransformsFileData) -> tuple[int, int]:
        if 'width' in data.metadata and 'height' in data.metadata:
            return data.metadata['width'], data.metadata['height']
        # Image.open parses only the header, pixels are decoded later by the resizer
        with Image.open(self.connector.read_file(data.filepath, binary=True)) as img:
            return img.width, img.height

    def _process_filepath(self, data: TransformsFileData) -> TransformsFileData:
        width, height = self._read_size(data)
        media = Media(width, height, context=self.context, provider_name='file')
        output_path = self.get_output_path(data.filepath)

        self.resizer.resize(
            media,
            File(self.connector, data.filepath),
            File(self.connector, output_path),
            self.img_format,
            self.settings
        )
        box = self.resizer.get_box(media, self.settings)

        return TransformsFileData(
            data.filepath,
            {'thumbnail_path': output_path, 'width': box.width, 'height': box.height}
        )
