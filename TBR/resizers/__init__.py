from .box_resizer import BoxResizer
from .resizer import Resizer, SettingsLike
