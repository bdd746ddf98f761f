from dataclasses import dataclass
from typing import Dict
from umlgen.core.workflow import ExportStage
from umlgen.agents.base import BaseAgent
from umlgen.agents.impl_validate import DiagramValidationAgent
from umlgen.agents.impl_generate import ProjectGeneratorAgent
from umlgen.agents.impl_package import ArchivePackagerAgent

@dataclass
class AgentRegistry:
    mapping: Dict[ExportStage, BaseAgent]

    def get(self, stage: ExportStage) -> BaseAgent:
        return self.mapping[stage]

    @staticmethod
    def default() -> "AgentRegistry":
        return AgentRegistry(mapping={
            ExportStage.VALIDATE_DIAGRAM: DiagramValidationAgent(),
            ExportStage.GENERATE_PROJECT: ProjectGeneratorAgent(),
            ExportStage.PACKAGE_ARCHIVE: ArchivePackagerAgent(),
        })
