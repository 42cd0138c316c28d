"""Pydantic schemas for CV generation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HotspotResponse(BaseModel):
    """A clickable link region placed in the generated document."""

    page: int = Field(description="1-based page number")
    x: float
    y: float
    width: float
    height: float
    url: str


class DefectResponse(BaseModel):
    """A decoration that was skipped while laying out the document."""

    kind: str
    message: str


class CvLayoutResponse(BaseModel):
    """Layout summary of a generated CV, without the PDF bytes."""

    page_count: int = Field(description="Number of pages in the document")
    size_bytes: int = Field(description="Size of the serialized PDF")
    hotspots: list[HotspotResponse] = []
    defects: list[DefectResponse] = []
