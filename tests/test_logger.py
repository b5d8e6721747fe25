import logging
import os

from TBR.utils.logger import init_logger, init_stdout_logger


def test_init_logger(tmp_path):
    logger = init_logger('thumbnails.log', logging_dir=str(tmp_path))
    logger.info('generated thumbnails')
    logging.getLogger('TBR.thumbnails.format_thumbnail').info('from child logger')

    with open(os.path.join(tmp_path, 'thumbnails.log')) as f:
        content = f.read()
    assert 'generated thumbnails' in content
    assert 'from child logger' in content


def test_init_stdout_logger():
    logger = init_stdout_logger(level=logging.DEBUG)
    assert logger.name == 'TBR'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
