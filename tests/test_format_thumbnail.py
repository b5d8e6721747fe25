import io

from PIL import Image

from TBR.adapters import PILImageAdapter
from TBR.configs import ThumbnailFormatsConfig
from TBR.connectors import LocalConnector
from TBR.media import Media
from TBR.resizers import BoxResizer
from TBR.thumbnails import FormatThumbnail

CONFIG = {
    'news': {
        'small': {'width': 100, 'height': 100, 'crop': True},
        'wide': {'width': 200},
        'boxed': {'width': 120, 'height': 120, 'fill': 'white'},
    },
}


def get_thumbnail(root: str) -> FormatThumbnail:
    return FormatThumbnail(
        BoxResizer(PILImageAdapter()),
        LocalConnector(),
        root,
        ThumbnailFormatsConfig.from_dict(CONFIG)
    )


def test_paths(tmp_path):
    thumbnail = get_thumbnail(str(tmp_path) + '/')
    media = Media(800, 600, context='news', id=1, extension='png')

    assert thumbnail.reference_path(media) == f'{tmp_path}/news/1.png'
    assert thumbnail.thumbnail_path(media, 'news_small') == f'{tmp_path}/news/thumb_1_small.png'


def test_get_boxes(tmp_path):
    thumbnail = get_thumbnail(str(tmp_path))
    media = Media(800, 600, context='news', id=1)

    assert thumbnail.get_boxes(media) == {
        'news_small': (100, 100),
        'news_wide': (200, 150),
        'news_boxed': (120, 120),
    }


def test_generate_and_delete(tmp_path):
    thumbnail = get_thumbnail(str(tmp_path))
    connector = thumbnail.connector
    media = Media(800, 600, context='news', id=7, extension='png')

    connector.mkdir(connector.join(str(tmp_path), 'news'))
    data = io.BytesIO()
    Image.new('RGB', (800, 600), (0, 128, 0)).save(data, format='PNG')
    connector.save_file(data, thumbnail.reference_path(media), binary=True)

    boxes = thumbnail.generate(media)
    assert boxes == thumbnail.get_boxes(media)

    for format_id, box in boxes.items():
        path = thumbnail.thumbnail_path(media, format_id)
        with Image.open(path) as img:
            assert img.size == tuple(box)

    removed = thumbnail.delete(media)
    assert len(removed) == 3
    assert not any(connector.exists(p) for p in removed)
    assert thumbnail.delete(media) == []
