from .formats_config import ThumbnailFormatsConfig
