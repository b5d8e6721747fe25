from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from TBR.errors import ConfigurationError
from TBR.media import Media

ColorSpec = Union[str, tuple[int, ...]]

DEFAULT_QUALITY = 80
SETTINGS_KEYS = ('width', 'height', 'quality', 'crop', 'fill')


# scaling logic used to compute the scaled size
class ResizeModes(str, Enum):
    INSET = 'inset'
    OUTBOUND = 'outbound'


@dataclass(frozen=True)
class ResizeSettings:
    """Settings of one thumbnail format

    Parameters
    ----------
    width: Optional[int] = None
        Width of the target box. None or 0 means not set
    height: Optional[int] = None
        Height of the target box. None or 0 means not set
    quality: int = 80
        Encoding quality, from 0 to 100
    crop: bool = False
        Scale to cover the box and cut the overflow
    fill: Optional[Union[ColorSpec, bool]] = None
        Scale to fit the box and pad the rest with this color
    """
    width: Optional[int] = None
    height: Optional[int] = None
    quality: int = DEFAULT_QUALITY
    crop: bool = False
    fill: Optional[Union[ColorSpec, bool]] = None

    def __post_init__(self) -> None:
        for name in ('width', 'height'):
            _check_dimension(name, getattr(self, name), self)

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> 'ResizeSettings':
        unknown_keys = set(settings.keys()) - set(SETTINGS_KEYS)
        if unknown_keys:
            raise ConfigurationError(
                f"Unknown resize settings keys: {sorted(unknown_keys)}", settings=settings
            )

        for name in ('width', 'height'):
            _check_dimension(name, settings.get(name), settings)

        quality = settings.get('quality', DEFAULT_QUALITY)
        if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 100:
            raise ConfigurationError(
                f"Quality must be an integer between 0 and 100, got {quality!r}", settings=settings
            )

        return cls(
            width=settings.get('width'),
            height=settings.get('height'),
            quality=quality,
            crop=settings.get('crop', False),
            fill=settings.get('fill'),
        )

    @property
    def has_width(self) -> bool:
        return bool(self.width)

    @property
    def has_height(self) -> bool:
        return bool(self.height)

    @property
    def has_fill(self) -> bool:
        return bool(self.fill)

    def to_dict(self) -> dict[str, Any]:
        return {k: getattr(self, k) for k in SETTINGS_KEYS}


def _check_dimension(name: str, value: Any, settings: Any) -> None:
    # None, 0 and "" mean the side is not set
    if value is None or (not isinstance(value, bool) and value in (0, '')):
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(
            f"{name.capitalize()} must be a positive integer, got {value!r}", settings=settings
        )


def as_settings(settings: Union[ResizeSettings, Mapping[str, Any]]) -> ResizeSettings:
    if isinstance(settings, ResizeSettings):
        return settings
    return ResizeSettings.from_dict(settings)


def validate_settings(media: Media, settings: ResizeSettings) -> None:
    """Checks that settings are not contradictory

    Parameters
    ----------
    media: Media
        Media for which settings are checked, used in error messages
    settings: ResizeSettings
        Settings to check

    Raises
    ------
    ConfigurationError
        On the first violated rule
    """
    if not settings.has_width and not settings.has_height:
        message = f'Width or height parameter must be determined in {media.label}'
    elif settings.crop is True and (
        not settings.has_width or not settings.has_height or settings.has_fill
    ):
        message = (
            'For crop mode width and height parameter must be determined, '
            f'fill must be null (or false) in {media.label}'
        )
    elif settings.has_fill and (
        settings.crop is not False or not settings.has_width or not settings.has_height
    ):
        message = (
            'For fill mode width and height parameter must be determined, '
            f'crop must be false in {media.label}'
        )
    else:
        return

    raise ConfigurationError(
        message,
        context=media.context,
        provider_name=media.provider_name,
        settings=settings,
    )


def resolve_mode(settings: ResizeSettings, default_mode: ResizeModes) -> ResizeModes:
    """Crop wins over fill, fill wins over the default mode"""
    if settings.crop is True:
        return ResizeModes.OUTBOUND
    elif settings.has_fill:
        return ResizeModes.INSET
    return default_mode
