from pydantic import BaseModel, Field
from typing import Optional, List
from wa_template_core.models.whatsapp.message_context import WhatsappMessageReplyContext
from wa_template_core.models.whatsapp.requests.template_component import TemplateComponent

class TemplateLanguage(BaseModel):
    code: str = Field(..., description="Language code for the template (e.g., 'en_US').")
    policy: str = Field("deterministic", description="Language policy, the Cloud API only accepts 'deterministic'.")

class Template(BaseModel):
    name: str = Field(..., description="Name of the approved template to use.")
    language: TemplateLanguage = Field(..., description="Language settings for the template.")
    components: Optional[List[TemplateComponent]] = Field(None, description="Header, body and button components of the template.")

class WhatsAppTemplateMessage(BaseModel):
    messaging_product: str = Field(..., description="Product identifier, typically 'whatsapp'.")
    to: str = Field(..., description="Recipient phone number in international format.")
    type: Optional[str] = Field(default="template", description="Type of the message, default is 'template'.")
    template: Template = Field(..., description="Template details including name, language and components.")
    context: Optional[WhatsappMessageReplyContext] = Field(None, description="The message context")
