from dataclasses import dataclass
from typing import Dict, Any
from umlgen.core.workflow import ExportStage

@dataclass
class AgentResult:
    stage: ExportStage
    ok: bool
    message: str
    artifacts_index: Dict[str, Any]

class BaseAgent:
    """One export stage. Agents report failures through AgentResult instead of raising."""
    stage: ExportStage

    def run(self, job, ws) -> AgentResult:
        raise NotImplementedError

    def succeed(self, message: str, **artifacts: Any) -> AgentResult:
        return AgentResult(self.stage, True, message, artifacts)

    def fail(self, message: str, **artifacts: Any) -> AgentResult:
        return AgentResult(self.stage, False, message, artifacts)
