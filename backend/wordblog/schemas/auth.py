from pydantic import BaseModel
from typing import Optional


class IdentityOut(BaseModel):
    user_id: str
    email: Optional[str] = None

    model_config = {"from_attributes": True}
