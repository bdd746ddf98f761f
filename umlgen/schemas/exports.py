from typing import Any, Dict, Optional
from pydantic import BaseModel
from umlgen.core.workflow import ExportStage


class ExportResponse(BaseModel):
    id: str
    project_name: str
    package_name: str
    stage: ExportStage
    status: str
    error_message: Optional[str] = None
    artifacts: Dict[str, Any] = {}
