from enum import Enum

class ExportStage(str, Enum):
    VALIDATE_DIAGRAM = "VALIDATE_DIAGRAM"
    GENERATE_PROJECT = "GENERATE_PROJECT"
    PACKAGE_ARCHIVE = "PACKAGE_ARCHIVE"
    DONE = "DONE"
    FAILED = "FAILED"

class ExportStatus(str, Enum):
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    DONE = "DONE"
    PARTIAL = "PARTIAL"
    FAILED = "FAILED"

PIPELINE = (
    ExportStage.VALIDATE_DIAGRAM,
    ExportStage.GENERATE_PROJECT,
    ExportStage.PACKAGE_ARCHIVE,
)
