from wa_template_core.models.whatsapp.requests.template_component import TemplateComponent, ComponentType, ComponentSubType
from wa_template_core.models.whatsapp.requests.template_parameter import ParameterObject, ParameterType, ButtonParameter, ButtonParameterType, Currency, DateTime, Media
from wa_template_core.models.whatsapp.requests.template_message_request import WhatsAppTemplateMessage, Template, TemplateLanguage

__all__ = [
    'TemplateComponent',
    'ComponentType',
    'ComponentSubType',
    'ParameterObject',
    'ParameterType',
    'ButtonParameter',
    'ButtonParameterType',
    'Currency',
    'DateTime',
    'Media',
    'WhatsAppTemplateMessage',
    'Template',
    'TemplateLanguage'
]
