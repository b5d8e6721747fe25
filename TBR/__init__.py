"""TBR - thumbnail box resizer"""

__version__ = "1.0.0"

from .adapters import ImageAdapter, PILImageAdapter
from .configs import ThumbnailFormatsConfig
from .connectors import Connector, File, LocalConnector, S3Connector
from .errors import ConfigurationError, CropOutOfBoundsError, MalformedColorWarning
from .geometry import Point, Size
from .media import Media
from .resizers import BoxResizer, Resizer
from .settings import ResizeModes, ResizeSettings
from .thumbnails import FormatThumbnail
