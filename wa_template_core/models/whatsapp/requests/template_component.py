import logging
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_serializer, model_validator
from wa_template_core.models.whatsapp.errors import InvalidField

logger = logging.getLogger(__name__)

class ComponentType(Enum):
    HEADER = "header"
    BODY = "body"
    BUTTON = "button"

class ComponentSubType(Enum):
    QUICK_REPLY = "quick_reply"
    URL = "url"

class TemplateComponent(BaseModel):
    """
    One structural piece (header, body or button) of a template message.

    Button components are positioned at index 0 unless told otherwise.
    Fields are checked once, when the component is built; add_parameter
    appends without re-validating. A component is meant to be filled by a
    single writer, there is no locking around parameters.
    """
    type: ComponentType = Field(..., description="Role of the component: header, body or button.")
    parameters: List[Any] = Field(default_factory=list, description="Ordered substitution parameters, each exposing serialize().")
    sub_type: Optional[ComponentSubType] = Field(None, description="Button behaviour, quick_reply or url. Only used when type is button.")
    index: Optional[int] = Field(None, ge=0, description="Position of the button, 0 to 2. Only used when type is button.")

    @field_validator("parameters")
    @classmethod
    def _check_serializable(cls, parameters):
        for parameter in parameters:
            if not callable(getattr(parameter, "serialize", None)):
                raise ValueError(f"parameter {parameter!r} does not provide serialize()")
        return parameters

    @model_validator(mode="after")
    def _validate_fields(self):
        if self.index is None and self.type == ComponentType.BUTTON:
            self.index = 0
        if self.type == ComponentType.BUTTON:
            return self

        if self.sub_type is not None:
            logger.debug(f"Rejected {self.type.value} component with sub_type {self.sub_type.value}")
            raise InvalidField("sub_type", "sub_type is not required when type is not button")
        if self.index is not None:
            logger.debug(f"Rejected {self.type.value} component with index {self.index}")
            raise InvalidField("index", "index is not required when type is not button")
        return self

    def add_parameter(self, parameter):
        self.parameters.append(parameter)

    @model_serializer
    def serialize(self) -> Dict[str, Any]:
        # an index of 0 is omitted, same as an unset index
        json = {
            "type": self.type.value,
            "parameters": [parameter.serialize() for parameter in self.parameters]
        }
        if self.sub_type:
            json["sub_type"] = self.sub_type.value
        if self.index:
            json["index"] = self.index
        return json
