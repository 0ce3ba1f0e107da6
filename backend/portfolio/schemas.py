from typing import Literal

from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatTurn]


class ChatResponse(BaseModel):
    content: str
    skills: list[str] = Field(default_factory=list)
    experiences: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class RectIn(BaseModel):
    left: float
    top: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)


class PointIn(BaseModel):
    x: float = 0.0
    y: float = 0.0


class ConnectorRequest(BaseModel):
    active_skills: list[str]
    skills: dict[str, RectIn] = Field(default_factory=dict)
    experiences: dict[str, RectIn] = Field(default_factory=dict)
    scroll: PointIn = Field(default_factory=PointIn)
    style: Literal["circuit", "curve"] | None = None
