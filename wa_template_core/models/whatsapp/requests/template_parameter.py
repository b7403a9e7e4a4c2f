import logging
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, model_serializer, model_validator
from wa_template_core.models.whatsapp.errors import InvalidField

logger = logging.getLogger(__name__)

class ParameterType(Enum):
    TEXT = "text"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"

class ButtonParameterType(Enum):
    TEXT = "text"
    PAYLOAD = "payload"

class Currency(BaseModel):
    fallback_value: str = Field(..., description="Text shown when the currency cannot be localized.")
    code: str = Field(..., description="ISO 4217 currency code, e.g. 'USD'.")
    amount_1000: int = Field(..., description="Amount multiplied by 1000.")

class DateTime(BaseModel):
    fallback_value: str = Field(..., description="Text shown for the date and time.")

class Media(BaseModel):
    id: Optional[str] = Field(None, description="Id of previously uploaded media.")
    link: Optional[str] = Field(None, description="Public URL of the media.")
    caption: Optional[str] = Field(None, description="Caption of the media.")
    filename: Optional[str] = Field(None, description="File name, documents only.")

    @model_validator(mode="after")
    def _validate_source(self):
        if self.id is None and self.link is None:
            raise InvalidField("link", "link or id is required for media")
        return self

def _require_value(model, type_value):
    if getattr(model, type_value) is None:
        logger.debug(f"Rejected {model.__class__.__name__} of type {type_value} without value")
        raise InvalidField(type_value, f"{type_value} is required when type is {type_value}")

def _dump_value(value):
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_none=True)
    return value

class ParameterObject(BaseModel):
    """Substitution value of a header or body component."""
    type: ParameterType = Field(..., description="Type of the parameter (e.g., 'text', 'image').")
    text: Optional[str] = Field(None, description="Text content of the parameter.")
    currency: Optional[Currency] = Field(None, description="Currency content of the parameter.")
    date_time: Optional[DateTime] = Field(None, description="Date and time content of the parameter.")
    image: Optional[Media] = Field(None, description="Image content of the parameter.")
    document: Optional[Media] = Field(None, description="Document content of the parameter.")
    video: Optional[Media] = Field(None, description="Video content of the parameter.")

    @model_validator(mode="after")
    def _validate_value(self):
        _require_value(self, self.type.value)
        return self

    @model_serializer
    def serialize(self) -> Dict[str, Any]:
        type_value = self.type.value
        return {
            "type": type_value,
            type_value: _dump_value(getattr(self, type_value))
        }

class ButtonParameter(BaseModel):
    """Substitution value of a button component."""
    type: ButtonParameterType = Field(..., description="Type of the button parameter, 'text' or 'payload'.")
    text: Optional[str] = Field(None, description="Suffix appended to the url of a url button.")
    payload: Optional[str] = Field(None, description="Payload returned when a quick reply button is tapped.")

    @model_validator(mode="after")
    def _validate_value(self):
        _require_value(self, self.type.value)
        return self

    @model_serializer
    def serialize(self) -> Dict[str, Any]:
        type_value = self.type.value
        return {
            "type": type_value,
            type_value: getattr(self, type_value)
        }
