"""Pydantic schemas for JSON output validation.

All --json output from CLI commands uses these models, which keep the JSON
structure consistent across commands and leave out unset (None) values.

Commands using Pydantic validation:
- show: ShowResponse | ErrorResponse
- frames: FramesResponse | ErrorResponse
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "no_tag")
        message: Human-readable error message
        path: File the error relates to, if any
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "no_tag", "malformed_tag", "parse_error"],
    )
    message: str = Field(description="Human-readable error description")
    path: Optional[str] = Field(default=None, description="File being read")


# ============================================================================
# Show Command Response
# ============================================================================


class TagInfo(BaseModel):
    """Normalized fields of one file's tag."""

    path: str = Field(description="Path to the audio file")
    version: str = Field(description="Tag version, e.g. 2.3.0 or 1.1.0")
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    track: Optional[Union[int, str]] = Field(
        default=None, description="Track number, or the TRCK text when it is not numeric"
    )
    total_tracks: Optional[int] = Field(default=None, ge=0)
    year: Optional[str] = None
    comment: Optional[str] = None
    genre: Optional[str] = None


class ShowResponse(BaseModel):
    """Response for `id3r show`.

    Attributes:
        status: "success", or "completed_with_errors" if some files failed
        tags: Tags read successfully
        errors: Files that could not be read
    """

    status: Literal["success", "completed_with_errors"] = "success"
    tags: List[TagInfo] = Field(default_factory=list)
    errors: Optional[List[ErrorResponse]] = None


# ============================================================================
# Frames Command Response
# ============================================================================


class FrameInfo(BaseModel):
    """One ID3v2 frame."""

    key: str = Field(min_length=4, max_length=4)
    size: int = Field(ge=0)
    flags: int = Field(ge=0)
    description: Optional[str] = None
    value: Optional[str] = Field(
        default=None, description="Decoded text for text and comment frames"
    )


class FramesResponse(BaseModel):
    """Response for `id3r frames`."""

    status: Literal["success"] = "success"
    path: str
    version: str
    frames: List[FrameInfo] = Field(default_factory=list)
