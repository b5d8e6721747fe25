from dataclasses import dataclass
from typing import Optional, Union

from TBR.geometry import Size


@dataclass
class Media:
    """Describes a source image: native size and where it belongs

    Parameters
    ----------
    width: int
        Native width of the image
    height: int
        Native height of the image
    context: str
        Name of the context the media belongs to (e.g. "news", "avatar")
    provider_name: str
        Name of the provider that stores the media
    id: Optional[Union[int, str]] = None
        Media identifier, used to name reference and thumbnail files
    extension: str = 'jpg'
        Extension of the reference file
    """
    width: int
    height: int
    context: str = 'default'
    provider_name: str = 'image'
    id: Optional[Union[int, str]] = None
    extension: str = 'jpg'

    @property
    def box(self) -> Size:
        return Size(self.width, self.height)

    @property
    def label(self) -> str:
        return f'context "{self.context}" for provider "{self.provider_name}"'
