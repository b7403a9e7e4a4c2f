from pydantic import BaseModel, Field

class WhatsappMessageReplyContext(BaseModel):
    message_id: str = Field(..., description="The message id to which the reply is sent")
