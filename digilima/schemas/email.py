from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class EmailTag(BaseModel):
    """Provider-side tag used for filtering and reporting"""
    name: str
    value: str


class OutboundEmail(BaseModel):
    """A fully rendered email ready to hand to the provider"""
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: List[str]
    reply_to: Optional[str] = None
    subject: str
    html: str
    text: str
    tags: List[EmailTag] = []
