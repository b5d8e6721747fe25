from io import BytesIO
from typing import Optional

from PIL import Image, ImageColor

from TBR.adapters.adapter import ImageAdapter
from TBR.errors import CropOutOfBoundsError, UnknownFormatError
from TBR.geometry import Point, Size
from TBR.settings import ColorSpec

Image.MAX_IMAGE_PIXELS = None

RGBColor = tuple[int, ...]

# modes that can be saved as JPEG without conversion
JPEG_MODES = {'RGB', 'L', 'CMYK'}


class PILImageAdapter(ImageAdapter):
    """
    Image adapter backed by Pillow
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.resample = resample

    def load(self, data: bytes) -> Image.Image:
        pil_img = Image.open(BytesIO(data))
        pil_img.load()
        return pil_img

    def get_size(self, image: Image.Image) -> Size:
        return Size(image.width, image.height)

    def resize(self, image: Image.Image, size: Size) -> Image.Image:
        return image.resize(tuple(size), resample=self.resample)

    def crop(self, image: Image.Image, point: Point, size: Size) -> Image.Image:
        right = point.x + size.width
        lower = point.y + size.height
        if right > image.width or lower > image.height:
            raise CropOutOfBoundsError(
                f"Crop region {size} at ({point.x}, {point.y}) "
                f"exceeds image size {image.width}x{image.height}"
            )
        return image.crop((point.x, point.y, right, lower))

    def create(self, size: Size, color: Optional[RGBColor] = None) -> Image.Image:
        if color is None:
            return Image.new('RGBA', tuple(size), (0, 0, 0, 0))
        mode = 'RGBA' if len(color) == 4 else 'RGB'
        return Image.new(mode, tuple(size), color)

    def paste(self, background: Image.Image, image: Image.Image, point: Point) -> Image.Image:
        result = background.copy()
        mask = image if image.mode == 'RGBA' else None
        result.paste(image, tuple(point), mask)
        return result

    def encode(self, image: Image.Image, img_format: str, quality: int) -> bytes:
        pil_format = self.get_pil_format(img_format)
        if pil_format == 'JPEG' and image.mode not in JPEG_MODES:
            image = image.convert('RGB')

        data = BytesIO()
        image.save(data, format=pil_format, quality=quality)
        return data.getvalue()

    def parse_color(self, color: ColorSpec) -> RGBColor:
        if isinstance(color, str):
            return ImageColor.getrgb(color)
        if (
            isinstance(color, (tuple, list))
            and len(color) in (3, 4)
            and all(isinstance(c, int) and 0 <= c <= 255 for c in color)
        ):
            return tuple(color)
        raise ValueError(f"Unknown color specifier: {color!r}")

    @staticmethod
    def get_pil_format(img_format: str) -> str:
        extensions = Image.registered_extensions()
        ext = '.' + img_format.lower().lstrip('.')
        if ext in extensions:
            return extensions[ext]
        if img_format.upper() in Image.SAVE:
            return img_format.upper()
        raise UnknownFormatError(f"Unknown image format: {img_format}")
