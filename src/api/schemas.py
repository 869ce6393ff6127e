from pydantic import BaseModel, Field


class SolveRequest(BaseModel):
    """Body posted by the front end; field names follow its camelCase keys"""

    userQuery: str | None = Field(None, description="Math problem as text")
    base64Image: str | None = Field(
        None, description="Optional picture of the problem, base64 encoded")
    mimeType: str | None = Field(
        None, description="MIME type of base64Image, e.g. image/png")


class SolveResponse(BaseModel):
    solution: str


class MessageResponse(BaseModel):
    message: str
