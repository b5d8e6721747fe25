from .base_file_transforms import BaseFilesTransforms, PoolOptions, TransformsFileData
from .boxes import compute_boxes
from .thumbnail_transforms import ThumbnailTransforms
