"""
Dry-run script engine.

Records what it was asked to run instead of compiling anything. The result
value of every run is the ExecutionPlan, so the CLI can show exactly which
code, references and namespaces a real engine would receive.
"""

from __future__ import annotations

from typing import Any, Sequence

from scriptcore.models.plan import ExecutionPlan
from scriptcore_contracts.engine import ScriptEngine
from scriptcore_contracts.packs import PackSession
from scriptcore_contracts.results import ScriptResult


class DryRunEngine(ScriptEngine):
    """Engine that returns an ExecutionPlan instead of running code."""
    
    def __init__(self):
        self.base_directory: str | None = None
        self.cache_directory: str | None = None
        self.file_name: str | None = None
        self.plans: list[ExecutionPlan] = []
    
    def execute(
        self,
        code: str,
        script_args: Sequence[str],
        references: Any,
        namespaces: Sequence[str],
        session: PackSession,
    ) -> ScriptResult:
        plan = ExecutionPlan(
            file_name=self.file_name,
            base_directory=self.base_directory,
            cache_directory=self.cache_directory,
            code=code,
            script_args=list(script_args),
            references=list(getattr(references, "paths", references)),
            module_references=[m.__name__ for m in getattr(references, "modules", [])],
            namespaces=list(namespaces),
            pack_references=list(getattr(session, "references", [])),
            pack_namespaces=list(getattr(session, "namespaces", [])),
        )
        self.plans.append(plan)
        return ScriptResult(return_value=plan)
