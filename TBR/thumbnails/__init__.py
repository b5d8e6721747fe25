from .format_thumbnail import FormatThumbnail
