"""Models for hxprint."""

from hxprint.models.content_type import ContentType, charset_from_content_type, detect_content_type
from hxprint.models.messages import HeaderList, RequestView, ResponseView
from hxprint.models.output import Pretty, RenderMode, Theme

__all__ = [
    "ContentType",
    "HeaderList",
    "Pretty",
    "RenderMode",
    "RequestView",
    "ResponseView",
    "Theme",
    "charset_from_content_type",
    "detect_content_type",
]
