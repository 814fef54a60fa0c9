# src/inspector/model.py
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Backend(str, Enum):
    """The automation backend that produced a hierarchy snapshot."""
    SELENDROID = "selendroid"
    UIAUTOMATOR = "uiautomator"

    @classmethod
    def from_flag(cls, selendroid: bool) -> "Backend":
        """Maps the session's boolean selendroid flag onto a backend."""
        return cls.SELENDROID if selendroid else cls.UIAUTOMATOR


class ElementDescriptor(BaseModel):
    """
    Flat, normalized summary of one UI element.

    `name` holds the accessibility label (Selendroid) or the content
    description (uiautomator). `class_name` is exposed as `class` when dumped
    by alias.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    text: Optional[str] = None
    name: Optional[str] = None
    class_name: Optional[str] = Field(default=None, alias="class")
    visible: bool = True
    source: Backend = Backend.UIAUTOMATOR

    @field_validator("visible", mode="before")
    @classmethod
    def coerce_visible(cls, value: Any) -> bool:
        # Selendroid serializes flags either as JSON booleans or as strings
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)

    @property
    def short_class(self) -> str:
        """Last dotted component of the class, e.g. 'Button'."""
        if not self.class_name:
            return ""
        return self.class_name.split(".")[-1]
