from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class AppBaseModel(BaseModel):
    """Base Pydantic model with common configuration."""

    model_config = {
        "extra": "forbid",  # Forbid extra fields not defined in the model
        "populate_by_name": True,
    }


class ColorResult(AppBaseModel):
    """
    Outcome of looking up a single color code.
    Either an ok result carrying the hex string, or an error result
    carrying the error kind and a human-readable message.
    """
    code: str = Field(description="The color code that was looked up.")
    status: Literal["ok", "error"] = Field(description="Whether the lookup succeeded.")
    hex: Optional[str] = Field(
        default=None,
        description="Hex color string (e.g. '#f00') when status is 'ok'."
    )
    error: Optional[str] = Field(
        default=None,
        description="Error kind (e.g. 'invalid_color_code') when status is 'error'."
    )
    message: Optional[str] = Field(default=None, description="Error details.")

    @model_validator(mode="after")
    def check_variant(self) -> "ColorResult":
        if self.status == "ok" and (self.hex is None or self.error is not None):
            raise ValueError("an ok result needs a hex value and no error")
        if self.status == "error" and (self.error is None or self.hex is not None):
            raise ValueError("an error result needs an error kind and no hex value")
        return self

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ColorLookupRequest(AppBaseModel):
    """Input model for a batch lookup."""
    codes: List[str] = Field(
        min_length=1,
        description="Color codes to look up (e.g. 'red', 'blue')."
    )


class ColorLookupResponse(AppBaseModel):
    """Output model for a batch lookup, one result per requested code."""
    results: List[ColorResult] = Field(default_factory=list)
    found: int = Field(default=0, description="Number of codes that resolved.")
    missing: int = Field(default=0, description="Number of codes that did not resolve.")


class ColorTableResponse(AppBaseModel):
    colors: Dict[str, str] = Field(
        default_factory=dict,
        description="Every known color code and its hex string."
    )


class ErrorResponse(AppBaseModel):
    error: str
    code: str
    message: str
