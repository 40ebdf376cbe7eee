"""Data models for rdu."""

from pydantic import BaseModel, Field


class SizeRecord(BaseModel):
    """Size of one file or directory visited during a scan."""

    path: str = Field(..., description="Path as produced by traversal")
    size: int = Field(..., ge=0, description="Size in bytes (aggregate for directories)")
    depth: int = Field(0, ge=0, description="Distance from the traversal root")
    is_dir: bool = Field(False, description="Whether this record is a directory")
