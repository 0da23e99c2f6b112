from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    """Text part of a target message."""

    type: Literal["text"] = "text"
    text: str


class ImagePart(BaseModel):
    """Image part of a target message, referenced by a data URL."""

    type: Literal["image_url"] = "image_url"
    url: str


ContentPart = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]
