"""
Configure generic models not specific
to a particular feature.
"""

from sqlmodel import SQLModel


class PingResponse(SQLModel):
    message: str


class ErrorResponse(SQLModel):
    """ Body of every 4xx/5xx response raised through HTTPException """
    detail: str
