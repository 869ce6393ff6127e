"""Request and response bodies of the Gemini ``generateContent`` endpoint."""
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


class InlineData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(..., alias="mimeType")
    data: str


class Part(BaseModel):
    """A single content part: either text or inline (base64) data"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: str | None = None
    inline_data: InlineData | None = Field(default=None, alias="inlineData")


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: List[Part] = Field(default_factory=list)


class GenerateContentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    system_instruction: Content = Field(..., alias="systemInstruction")

    def to_wire(self) -> dict:
        """JSON body as sent upstream (camelCase, unset parts dropped)"""
        return self.model_dump(by_alias=True, exclude_none=True)


# Response side: any field of an unexpected type reads as absent, so an odd
# body still ends up as "no usable text" rather than a validation error.


def _dict_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


def _list_or_empty(value: Any) -> Any:
    return value if isinstance(value, list) else []


def _str_or_none(value: Any) -> Any:
    return value if isinstance(value, str) else None


LenientStr = Annotated[str | None, BeforeValidator(_str_or_none)]


class CandidatePart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: LenientStr = None


class CandidateContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: Annotated[
        List[Annotated[CandidatePart | None, BeforeValidator(_dict_or_none)]],
        BeforeValidator(_list_or_empty),
    ] = Field(default_factory=list)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Annotated[CandidateContent | None, BeforeValidator(_dict_or_none)] = None


class ApiError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: Any = None
    message: LenientStr = None
    status: Any = None


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: Annotated[
        List[Annotated[Candidate | None, BeforeValidator(_dict_or_none)]],
        BeforeValidator(_list_or_empty),
    ] = Field(default_factory=list)
    error: Annotated[ApiError | None, BeforeValidator(_dict_or_none)] = None

    @model_validator(mode="before")
    @classmethod
    def _body_as_dict(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @property
    def first_text(self) -> str | None:
        """Text of the first part of the first candidate, if any"""
        if not self.candidates or self.candidates[0] is None:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts or content.parts[0] is None:
            return None
        return content.parts[0].text or None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return self.error.message or None
