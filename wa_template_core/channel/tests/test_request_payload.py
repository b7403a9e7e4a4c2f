import json
import pytest
import wa_template_core.channel.whatsapp.request_payload as wa_request_payload
import wa_template_core.configuration.config as env_config
import wa_template_core.models.whatsapp.requests as wa_requests
from wa_template_core.models.whatsapp.errors import InvalidField

def test_body_component():
    component = wa_request_payload.get_body_component(["Ada", "Monday"])
    assert component.serialize() == {
        "type": "body",
        "parameters": [
            {"type": "text", "text": "Ada"},
            {"type": "text", "text": "Monday"}
        ]
    }

def test_quick_reply_button_component():
    component = wa_request_payload.get_button_component(
        index=0,
        sub_type=wa_requests.ComponentSubType.QUICK_REPLY,
        payload="show_answer"
    )
    assert component.serialize() == {
        "type": "button",
        "parameters": [{"type": "payload", "payload": "show_answer"}],
        "sub_type": "quick_reply"
    }

def test_url_button_component():
    component = wa_request_payload.get_button_component(
        index=2,
        sub_type=wa_requests.ComponentSubType.URL,
        text="track/42"
    )
    assert component.serialize() == {
        "type": "button",
        "parameters": [{"type": "text", "text": "track/42"}],
        "sub_type": "url",
        "index": 2
    }

def test_button_component_without_value():
    with pytest.raises(InvalidField):
        wa_request_payload.get_button_component(
            index=1,
            sub_type=wa_requests.ComponentSubType.URL
        )

def test_template_request_payload():
    components = [
        wa_request_payload.get_body_component(["नवजात शिशु के शरीर में 300 हड्डियाँ होती हैं।"]),
        wa_request_payload.get_button_component(
            index=1,
            sub_type=wa_requests.ComponentSubType.QUICK_REPLY,
            payload="show_answer"
        )
    ]
    payload = wa_request_payload.get_whatsapp_template_request(
        phone_number_id="918837701828",
        template_name="question_of_the_week",
        template_language="hi",
        components=components,
        reply_id="wamid.HBgMOTE4ODM3NzAxODI4FQIAERgSQjM1RjY0M0QyMkU4OUU3OTc3AA=="
    )
    print(json.dumps(payload, ensure_ascii=False))
    assert payload == {
        "messaging_product": env_config.env_whatsapp_messaging_product,
        "to": "918837701828",
        "type": "template",
        "template": {
            "name": "question_of_the_week",
            "language": {"code": "hi", "policy": "deterministic"},
            "components": [
                {
                    "type": "body",
                    "parameters": [{"type": "text", "text": "नवजात शिशु के शरीर में 300 हड्डियाँ होती हैं।"}]
                },
                {
                    "type": "button",
                    "parameters": [{"type": "payload", "payload": "show_answer"}],
                    "sub_type": "quick_reply",
                    "index": 1
                }
            ]
        },
        "context": {"message_id": "wamid.HBgMOTE4ODM3NzAxODI4FQIAERgSQjM1RjY0M0QyMkU4OUU3OTc3AA=="}
    }

def test_template_request_defaults():
    payload = wa_request_payload.get_whatsapp_template_request(
        phone_number_id="918904954952",
        template_name="hello_world",
        components=[]
    )
    assert payload["template"]["language"]["code"] == env_config.env_whatsapp_template_language
    assert "components" not in payload["template"]
    assert "context" not in payload
    assert payload["type"] == "template"

def test_default_config_values():
    assert env_config.app_config["channel"]["whatsapp"]["messaging_product"] == "whatsapp"
    assert env_config.app_config["channel"]["whatsapp"]["template_language"] == "en_US"
