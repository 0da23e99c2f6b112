from turnwise.models.parts import ContentPart, ImagePart, TextPart
from turnwise.models.target import TargetMessage

__all__ = [
    "ContentPart",
    "ImagePart",
    "TargetMessage",
    "TextPart",
]
