import pytest

from TBR.adapters import PILImageAdapter
from TBR.errors import ConfigurationError
from TBR.geometry import Size, centered_offset
from TBR.media import Media
from TBR.resizers import BoxResizer
from TBR.settings import ResizeModes, ResizeSettings

SOURCE_SIZES = [(800, 600), (600, 800), (1024, 1024), (1920, 1080), (333, 777), (5, 3)]
BOXES = [(300, 300), (100, 250), (250, 100), (1000, 1000), (1, 7)]


def test_invalid_mode():
    with pytest.raises(ConfigurationError):
        BoxResizer(PILImageAdapter(), 'fixed')
    with pytest.raises(ConfigurationError):
        BoxResizer(PILImageAdapter(), None)

    assert BoxResizer(PILImageAdapter(), 'outbound').mode == ResizeModes.OUTBOUND
    assert BoxResizer(PILImageAdapter(), ResizeModes.INSET).mode == ResizeModes.INSET


def test_width_only():
    resizer = BoxResizer(PILImageAdapter())
    media = Media(800, 600)
    settings = {'width': 400, 'height': None, 'crop': False, 'fill': None}

    scaled = BoxResizer.compute_scaled_size(media.box, ResizeSettings.from_dict(settings), ResizeModes.INSET)
    assert scaled == (400, 300)
    assert resizer.get_box(media, settings) == (400, 300)


def test_height_only():
    resizer = BoxResizer(PILImageAdapter())
    assert resizer.get_box(Media(800, 600), {'height': 150}) == (200, 150)
    assert resizer.get_box(Media(800, 600), {'height': 1200}) == (1600, 1200)


def test_crop_scenario():
    resizer = BoxResizer(PILImageAdapter())
    media = Media(800, 600)
    settings = ResizeSettings(width=300, height=300, crop=True)

    scaled = BoxResizer.compute_scaled_size(media.box, settings, ResizeModes.OUTBOUND)
    assert scaled == (400, 300)
    assert resizer.get_box(media, settings) == (300, 300)
    assert centered_offset(scaled, Size(300, 300)) == (50, 0)


def test_fill_scenario():
    resizer = BoxResizer(PILImageAdapter())
    media = Media(800, 600)
    settings = ResizeSettings(width=300, height=300, fill='#ffffff')

    scaled = BoxResizer.compute_scaled_size(media.box, settings, ResizeModes.INSET)
    assert scaled == (300, 225)
    assert resizer.get_box(media, settings) == (300, 300)
    assert centered_offset(Size(300, 300), scaled) == (0, 38)


def test_default_mode():
    media = Media(800, 600)
    settings = {'width': 300, 'height': 300}

    assert BoxResizer(PILImageAdapter(), 'inset').get_box(media, settings) == (300, 225)
    assert BoxResizer(PILImageAdapter(), 'outbound').get_box(media, settings) == (400, 300)


def test_get_box_is_idempotent():
    resizer = BoxResizer(PILImageAdapter())
    media = Media(1920, 1080)
    settings = ResizeSettings(width=300, height=200)

    assert resizer.get_box(media, settings) == resizer.get_box(media, settings)


def test_get_box_validates():
    resizer = BoxResizer(PILImageAdapter())
    for width in [-100, '300', 300.5, True]:
        with pytest.raises(ConfigurationError):
            resizer.get_box(Media(800, 600), {'width': width, 'height': 300, 'crop': True})
    with pytest.raises(ConfigurationError):
        resizer.get_box(Media(800, 600), {'width': 300, 'crop': True})
    with pytest.raises(ConfigurationError):
        resizer.get_box(Media(800, 600), {})


def test_crop_scaled_size_covers_box():
    resizer = BoxResizer(PILImageAdapter())
    for width, height in SOURCE_SIZES:
        for box_w, box_h in BOXES:
            settings = ResizeSettings(width=box_w, height=box_h, crop=True)
            scaled = BoxResizer.compute_scaled_size(Size(width, height), settings, ResizeModes.OUTBOUND)

            assert scaled.contains(Size(box_w, box_h))
            assert resizer.get_box(Media(width, height), settings) == (box_w, box_h)


def test_fill_scaled_size_fits_box():
    for width, height in SOURCE_SIZES:
        for box_w, box_h in BOXES:
            settings = ResizeSettings(width=box_w, height=box_h, fill='red')
            scaled = BoxResizer.compute_scaled_size(Size(width, height), settings, ResizeModes.INSET)

            assert Size(box_w, box_h).contains(scaled)


def test_single_side_keeps_aspect_ratio():
    for width, height in SOURCE_SIZES:
        for target in [1, 64, 300, 1000]:
            for mode in ResizeModes:
                settings = ResizeSettings(width=target)
                ratio = target / width
                scaled = BoxResizer.compute_scaled_size(Size(width, height), settings, mode)
                assert scaled.width == target
                assert abs(scaled.height - height * ratio) <= 0.5

                if (width, height, target) == (333, 777, 1):
                    continue
                settings = ResizeSettings(height=target)
                ratio = target / height
                scaled = BoxResizer.compute_scaled_size(Size(width, height), settings, mode)
                assert scaled.height == target
                assert abs(scaled.width - width * ratio) <= 0.5


def test_scaled_side_below_one_pixel():
    # 333 * 1 / 777 rounds to 0
    for mode in ResizeModes:
        with pytest.raises(ValueError):
            BoxResizer.compute_scaled_size(Size(333, 777), ResizeSettings(height=1), mode)
