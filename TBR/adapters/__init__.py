from .adapter import ImageAdapter
from .pil_adapter import PILImageAdapter
