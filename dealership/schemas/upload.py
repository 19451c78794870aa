"""
Pydantic schema for image upload responses.
"""
from pydantic import BaseModel


class UploadResult(BaseModel):
    url: str
    public_id: str
