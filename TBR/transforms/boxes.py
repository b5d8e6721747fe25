from collections.abc import Mapping
from typing import Any, Union

import pandas as pd

from TBR.media import Media
from TBR.resizers import Resizer
from TBR.settings import ResizeSettings, as_settings


def compute_boxes(
    df: pd.DataFrame,
    resizer: Resizer,
    settings: Union[ResizeSettings, Mapping[str, Any]],
    width_col: str = 'width',
    height_col: str = 'height',
    context_col: str = 'context',
    prefix: str = 'thumbnail_'
) -> pd.DataFrame:
    """Predicts thumbnail sizes for a table of images without reading them

    Parameters
    ----------
    df: pd.DataFrame
        Dataframe with native width and height of images
    resizer: Resizer
        Resizer that will make thumbnails
    settings: Union[ResizeSettings, Mapping[str, Any]]
        Settings of the thumbnail format
    width_col: str = 'width'
        Column with native width
    height_col: str = 'height'
        Column with native height
    context_col: str = 'context'
        Column with media context. Optional, used in error messages
    prefix: str = 'thumbnail_'
        Prefix of added columns

    Returns
    -------
    pd.DataFrame
        Copy of df with "{prefix}width" and "{prefix}height" columns
    """
    settings = as_settings(settings)
    has_context = context_col in df.columns

    widths = []
    heights = []
    for _, row in df.iterrows():
        media = Media(
            int(row[width_col]),
            int(row[height_col]),
            context=row[context_col] if has_context else 'default'
        )
        box = resizer.get_box(media, settings)
        widths.append(box.width)
        heights.append(box.height)

    df = df.copy()
    df[prefix + 'width'] = widths
    df[prefix + 'height'] = heights
    return df
