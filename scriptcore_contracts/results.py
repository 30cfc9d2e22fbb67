"""
Data exchanged between the executor and its collaborators.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FilePreProcessorResult(BaseModel):
    """
    Output of a pre-processing pass over a script.
    
    The executor owns an instance for the duration of one execution and may
    mutate it in place when the script library is injected.
    """
    
    code: str = Field(default="", description="Ready-to-run script code")
    references: list[str] = Field(
        default_factory=list,
        description="References declared by the script, in declaration order",
    )
    namespaces: list[str] = Field(
        default_factory=list,
        description="Namespaces declared by the script, in declaration order",
    )
    load_paths: list[str] = Field(
        default_factory=list,
        description="Files pulled in while pre-processing",
    )


class ScriptResult(BaseModel):
    """Result of handing code to a script engine."""
    
    model_config = ConfigDict(arbitrary_types_allowed=True)
    
    return_value: Any = Field(default=None, description="Value produced by the script")
    compile_error: BaseException | None = Field(default=None, description="Compilation failure")
    execute_error: BaseException | None = Field(default=None, description="Runtime failure")
    invalid_namespaces: list[str] = Field(
        default_factory=list,
        description="Namespaces the engine could not open",
    )
    is_complete_submission: bool = Field(
        default=True,
        description="False when the engine expects more input (REPL continuation)",
    )
    
    @property
    def success(self) -> bool:
        """Whether the engine reported neither a compile nor a runtime failure."""
        return self.compile_error is None and self.execute_error is None
    
    def get_summary(self) -> str:
        """Get a brief summary of the result."""
        if self.compile_error is not None:
            return f"[COMPILE ERROR] {self.compile_error}"
        if self.execute_error is not None:
            return f"[EXECUTION ERROR] {self.execute_error}"
        if not self.is_complete_submission:
            return "[INCOMPLETE] awaiting more input"
        return "[SUCCESS]"
