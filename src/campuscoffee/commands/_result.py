"""CommandResult and CommandError — the JSON envelope every command prints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel):
    """Outcome of one CLI command.

    Attributes:
        ok: Whether the command succeeded.
        op: Name of the operation (e.g. ``"create_pos"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: CommandError | None = None
