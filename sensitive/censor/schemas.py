from __future__ import annotations

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """通用接口响应包装。"""

    code: int = 200
    msg: str = "success"
    data: T

    model_config = ConfigDict(populate_by_name=True)


class WordsRequest(BaseModel):
    words: List[str] = Field(..., min_length=1)
    updated_by: str | None = None


class AffectedResponse(BaseModel):
    affected: int


class ReloadResponse(BaseModel):
    count: int


class TextRequest(BaseModel):
    text: str


class TextsRequest(BaseModel):
    texts: List[str] = Field(..., min_length=1)


class ReplaceRequest(BaseModel):
    text: str
    mask_char: str | None = Field(default=None, min_length=1, max_length=1)


class NoisePatternRequest(BaseModel):
    pattern: str


class ValidateResponse(BaseModel):
    valid: bool
    word: str = ""


class FindInResponse(BaseModel):
    found: bool
    word: str = ""


class FindAllResponse(BaseModel):
    words: List[str] = Field(default_factory=list)


class BatchValidateResponse(BaseModel):
    valid: bool
    words: List[str] = Field(default_factory=list)


class TextResponse(BaseModel):
    text: str


class NoisePatternResponse(BaseModel):
    pattern: str
