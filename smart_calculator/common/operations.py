"""Pydantic models for statements and their outcome."""
from typing import Optional

from pydantic import BaseModel, Field


class StatementResult(BaseModel):
    """Represents the outcome of a successfully executed statement."""

    statement: str = Field(..., description="Original statement text")
    result: Optional[int] = Field(default=None, description="Value of an expression, None for an assignment")
    assigned: Optional[str] = Field(default=None, description="Name of the variable bound by an assignment")

    @property
    def is_assignment(self) -> bool:
        return self.assigned is not None


class StatementError(BaseModel):
    """Represents a statement that failed to execute."""

    statement: str = Field(..., description="Original statement text")
    error: str = Field(..., description="User-facing error message")
