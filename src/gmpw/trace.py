from typing import Any

from pydantic import BaseModel, Field


class TraceStep(BaseModel):
    """Single step in the generation trace."""

    step: str = Field(description="Step identifier, e.g., 'resolve_digit'")
    choice: str = Field(description="Human-readable description of what was chosen")
    value: Any = Field(description="The actual sampled value (serializable)")


class GenerationTrace(BaseModel):
    """Complete trace of a password generation run."""

    length: int = Field(description="Requested password length")
    steps: list[TraceStep] = Field(
        default_factory=list, description="Ordered list of sampling steps"
    )


def trace_step(
    trace: list[TraceStep] | None,
    step: str,
    choice: str,
    value: Any,
) -> None:
    """Append a step to ``trace`` when tracing is enabled."""
    if trace is None:
        return
    trace.append(TraceStep(step=step, choice=choice, value=value))
