import logging
import warnings
from typing import Any, Optional, Union

from TBR.adapters import ImageAdapter
from TBR.connectors import File
from TBR.errors import ConfigurationError, MalformedColorWarning
from TBR.geometry import Size, centered_offset
from TBR.media import Media
from TBR.settings import (
    ResizeModes,
    ResizeSettings,
    as_settings,
    resolve_mode,
    validate_settings,
)

from .resizer import Resizer, SettingsLike

logger = logging.getLogger(__name__)


class BoxResizer(Resizer):
    """
    Resizer that fits images into a box. Crops the overflow when crop is set,
    pads with a background color when fill is set, otherwise only scales
    with the default mode.
    """

    def __init__(self, adapter: ImageAdapter, mode: Union[ResizeModes, str] = ResizeModes.INSET):
        """
        Parameters
        ----------
        adapter: ImageAdapter
            Image library used to decode, transform and encode images
        mode: Union[ResizeModes, str] = ResizeModes.INSET
            Scaling mode used when neither crop nor fill is set
        """
        self.adapter = adapter
        try:
            self.mode = ResizeModes(mode)
        except ValueError:
            raise ConfigurationError(
                f"Invalid resizer mode: {mode!r}. Use mode from ResizeModes"
            ) from None

    @staticmethod
    def compute_scaled_size(size: Size, settings: ResizeSettings, mode: ResizeModes) -> Size:
        """Scales size so it fits (inset) or covers (outbound) the settings box

        It's not a final thumbnail size when crop or fill is used.
        """
        ratios = []
        if settings.has_width:
            ratios.append(settings.width / size.width)
        if settings.has_height:
            ratios.append(settings.height / size.height)

        if mode == ResizeModes.INSET:
            ratio = min(ratios)
        else:
            ratio = max(ratios)

        return size.scale(ratio)

    def get_box(self, media: Media, settings: SettingsLike) -> Size:
        settings = as_settings(settings)
        validate_settings(media, settings)
        mode = resolve_mode(settings, self.mode)

        if settings.crop is True or settings.has_fill:
            return Size(settings.width, settings.height)

        return self.compute_scaled_size(media.box, settings, mode)

    def resize(
        self,
        media: Media,
        in_file: File,
        out_file: File,
        img_format: str,
        settings: SettingsLike
    ) -> None:
        settings = as_settings(settings)
        validate_settings(media, settings)
        mode = resolve_mode(settings, self.mode)

        image = self.adapter.load(in_file.get_content())
        image_size = self.adapter.get_size(image)

        if settings.crop is True:
            image = self._crop(image, image_size, media, settings, mode)
        elif settings.has_fill:
            image = self._fill(image, image_size, media, settings, mode)
        else:
            size = self.compute_scaled_size(media.box, settings, mode)
            image = self._scale(image, image_size, size)

        out_file.set_content(self.adapter.encode(image, img_format, settings.quality))
        logger.debug(f'Thumbnail of {media.label} written to {out_file.path}')

    def _scale(self, image: Any, image_size: Size, size: Size) -> Any:
        if size != image_size:
            logger.debug(f'Scaling image from {image_size} to {size}')
            image = self.adapter.resize(image, size)
        return image

    def _crop(
        self,
        image: Any,
        image_size: Size,
        media: Media,
        settings: ResizeSettings,
        mode: ResizeModes
    ) -> Any:
        size = self.compute_scaled_size(media.box, settings, mode)
        image = self._scale(image, image_size, size)

        box = Size(settings.width, settings.height)
        if size != box:
            point = centered_offset(size, box)
            logger.debug(f'Cropping {box} at ({point.x}, {point.y}) from {size}')
            image = self.adapter.crop(image, point, box)
        return image

    def _fill(
        self,
        image: Any,
        image_size: Size,
        media: Media,
        settings: ResizeSettings,
        mode: ResizeModes
    ) -> Any:
        color = self._parse_fill(settings.fill, media)

        size = self.compute_scaled_size(media.box, settings, mode)
        image = self._scale(image, image_size, size)

        box = Size(settings.width, settings.height)
        if size != box:
            background = self.adapter.create(box, color)
            point = centered_offset(box, size)
            logger.debug(f'Pasting {size} at ({point.x}, {point.y}) on {box} canvas')
            image = self.adapter.paste(background, image, point)
        return image

    def _parse_fill(self, fill: Any, media: Media) -> Optional[Any]:
        try:
            return self.adapter.parse_color(fill)
        except ValueError as err:
            message = f'Malformed fill color {fill!r} in {media.label}, using default background: {err}'
            logger.warning(message)
            warnings.warn(message, MalformedColorWarning, stacklevel=4)
            return None
