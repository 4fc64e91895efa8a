from typing import Optional

from pydantic import BaseModel, Field


class ExecuteCodeRequest(BaseModel):
    code: str = Field(min_length=1)
    language: str = Field(min_length=1)


class ExecuteCodeResponse(BaseModel):
    output: str


class SaveSnippetRequest(BaseModel):
    code: str = Field(min_length=1)
    language: str = Field(min_length=1)
    title: Optional[str] = None


class ShareCodeRequest(BaseModel):
    code: str = Field(min_length=1)
    language: str = Field(min_length=1)


class ShareCodeResponse(BaseModel):
    id: str
