import logging
from typing import List, Optional
import wa_template_core.models.whatsapp.requests as wa_requests
import wa_template_core.configuration.config as env_config
from wa_template_core.models.whatsapp.message_context import WhatsappMessageReplyContext

logger = logging.getLogger(__name__)

def get_text_parameters(texts: List[str]):
    return [
        wa_requests.ParameterObject(
            type=wa_requests.ParameterType.TEXT,
            text=text
        ) for text in texts
    ]

def get_body_component(texts: List[str]):
    return wa_requests.TemplateComponent(
        type=wa_requests.ComponentType.BODY,
        parameters=get_text_parameters(texts)
    )

def get_button_component(
    index: int,
    sub_type: wa_requests.ComponentSubType,
    payload: Optional[str] = None,
    text: Optional[str] = None
):
    """
    Builds a button component carrying a single button parameter.

    Args:
        index (int): Position of the button in the template.
        sub_type (ComponentSubType): quick_reply buttons take a payload, url buttons take a text.
        payload (str): Payload returned when a quick reply button is tapped.
        text (str): Suffix appended to the url of a url button.

    Returns:
        TemplateComponent: The button component.
    """
    if payload is not None:
        parameter = wa_requests.ButtonParameter(
            type=wa_requests.ButtonParameterType.PAYLOAD,
            payload=payload
        )
    else:
        parameter = wa_requests.ButtonParameter(
            type=wa_requests.ButtonParameterType.TEXT,
            text=text
        )
    return wa_requests.TemplateComponent(
        type=wa_requests.ComponentType.BUTTON,
        sub_type=sub_type,
        index=index,
        parameters=[parameter]
    )

def get_whatsapp_template_request(
    phone_number_id: str,
    template_name: str,
    template_language: Optional[str] = None,
    components: Optional[List[wa_requests.TemplateComponent]] = None,
    reply_id: Optional[str] = None
):
    if template_language is None:
        template_language = env_config.env_whatsapp_template_language
    context = None
    if reply_id is not None:
        context = WhatsappMessageReplyContext(
            message_id=reply_id
        )
    template = wa_requests.Template(
        name=template_name,
        language=wa_requests.TemplateLanguage(
            code=template_language,
        ),
        components=components or None
    )
    template_message = wa_requests.WhatsAppTemplateMessage(
        messaging_product=env_config.env_whatsapp_messaging_product,
        to=phone_number_id,
        template=template,
        context=context
    )
    logger.debug(f"Built template request {template_name} with {len(components or [])} components")
    return template_message.model_dump(exclude_none=True)
