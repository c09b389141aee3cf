"""Pydantic schemas for the auth API.

The callback answers with Spotify's token JSON as-is, so only the request
body is modelled here.
"""

from typing import Optional

from pydantic import BaseModel


class CallbackRequest(BaseModel):
    code: Optional[str] = None
