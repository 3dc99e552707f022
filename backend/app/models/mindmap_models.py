from __future__ import annotations

from pydantic import BaseModel


class MindmapNode(BaseModel):
    text: str
    children: list[MindmapNode] = []


class MindmapDocument(BaseModel):
    file_name: str
    forest: list[MindmapNode]
    node_count: int


class RenderRequest(BaseModel):
    text: str


class RenderResponse(BaseModel):
    html: str
    node_count: int
