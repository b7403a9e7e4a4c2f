import os
import json
from dotenv import load_dotenv

# Get the directory of the current script
current_dir = os.path.dirname(os.path.abspath(__file__))
app_config_path = os.path.join(current_dir, 'app_config.json')
app_config_path = os.path.normpath(app_config_path)
app_config = None
with open(app_config_path, 'r') as file:
    app_config = json.load(file)

environment_path = os.path.join(current_dir, '..', '..', 'keys.env')
environment_path = os.path.normpath(environment_path)
load_dotenv(environment_path)
# Environment variables override app_config.json
env_whatsapp_messaging_product = os.getenv(
    "WHATSAPP_MESSAGING_PRODUCT",
    app_config["channel"]["whatsapp"]["messaging_product"]
)
env_whatsapp_template_language = os.getenv(
    "WHATSAPP_TEMPLATE_LANGUAGE",
    app_config["channel"]["whatsapp"]["template_language"]
)
