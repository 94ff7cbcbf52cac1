"""Result types returned by every fnrctl service call.

Services report bad input as ``ServiceResult(ok=False, ...)`` and never
raise for it. The CLI maps ``ok`` onto the process exit status, and
``--json`` prints the model unchanged.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable code plus a human message for a failed operation."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: True when every identity number handled by the operation passed.
        op: Operation name, ``"inspect"`` or ``"validate"``.
        data: Payload on success.
        error: Populated when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any]) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
