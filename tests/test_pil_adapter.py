import pytest
from PIL import Image

from TBR.adapters import PILImageAdapter
from TBR.errors import CropOutOfBoundsError, UnknownFormatError
from TBR.geometry import Point, Size


def test_pil_format():
    assert PILImageAdapter.get_pil_format('jpg') == 'JPEG'
    assert PILImageAdapter.get_pil_format('jpeg') == 'JPEG'
    assert PILImageAdapter.get_pil_format('.png') == 'PNG'
    assert PILImageAdapter.get_pil_format('TIFF') == 'TIFF'
    with pytest.raises(UnknownFormatError):
        PILImageAdapter.get_pil_format('xyz')


def test_parse_color():
    adapter = PILImageAdapter()
    assert adapter.parse_color('#ffffff') == (255, 255, 255)
    assert adapter.parse_color('red') == (255, 0, 0)
    assert adapter.parse_color((1, 2, 3)) == (1, 2, 3)
    assert adapter.parse_color([1, 2, 3, 4]) == (1, 2, 3, 4)

    for color in ['not-a-color', '#12', (300, 0, 0), (1, 2), True, 16777215]:
        with pytest.raises(ValueError):
            adapter.parse_color(color)


def test_crop():
    adapter = PILImageAdapter()
    img = Image.new('RGB', (400, 300))

    assert adapter.get_size(adapter.crop(img, Point(50, 0), Size(300, 300))) == (300, 300)
    with pytest.raises(CropOutOfBoundsError):
        adapter.crop(img, Point(101, 0), Size(300, 300))
    with pytest.raises(CropOutOfBoundsError):
        adapter.crop(img, Point(0, 1), Size(300, 300))


def test_create():
    adapter = PILImageAdapter()

    canvas = adapter.create(Size(10, 20), (1, 2, 3))
    assert canvas.mode == 'RGB'
    assert canvas.size == (10, 20)
    assert canvas.getpixel((0, 0)) == (1, 2, 3)

    canvas = adapter.create(Size(10, 20))
    assert canvas.mode == 'RGBA'
    assert canvas.getpixel((0, 0)) == (0, 0, 0, 0)


def test_paste_keeps_background():
    adapter = PILImageAdapter()
    background = adapter.create(Size(10, 10), (255, 255, 255))
    image = Image.new('RGB', (4, 4), (0, 0, 0))

    result = adapter.paste(background, image, Point(3, 3))
    assert result.getpixel((0, 0)) == (255, 255, 255)
    assert result.getpixel((3, 3)) == (0, 0, 0)
    assert result.getpixel((7, 7)) == (255, 255, 255)
    assert background.getpixel((3, 3)) == (255, 255, 255)


def test_encode_load():
    adapter = PILImageAdapter()
    img = Image.new('RGBA', (30, 20), (255, 0, 0, 128))

    data = adapter.encode(img, 'jpg', 75)
    loaded = adapter.load(data)
    assert loaded.format == 'JPEG'
    assert loaded.mode == 'RGB'
    assert adapter.get_size(loaded) == (30, 20)

    loaded = adapter.load(adapter.encode(img, 'png', 75))
    assert loaded.format == 'PNG'
    assert loaded.mode == 'RGBA'
