from typing import List, Optional


class SitegenError(Exception):
    """Base class for every error raised by the generation pipeline."""


class ConfigurationError(SitegenError):
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class FetchError(SitegenError):
    """Source page could not be retrieved (bad URL, non-200 status, network failure)."""

    def __init__(self, message: str, url: str = "", status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class AnalysisParseError(SitegenError):
    """Structural analysis response was not a usable JSON object."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class GenerationError(SitegenError):
    pass


class NoArtifactsError(SitegenError):
    """No component survived extraction and validation."""

    def __init__(self, message: str, raw_response: str = "", rejected: Optional[List] = None):
        super().__init__(message)
        self.raw_response = raw_response
        self.rejected = rejected or []


class PathTraversalError(SitegenError):
    def __init__(self, key: str):
        super().__init__(f"Invalid filename: {key}")
        self.key = key


class WriteError(SitegenError):
    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class PipelineError(SitegenError):
    """Wraps a stage failure with the stage that raised it."""

    def __init__(self, stage, cause: BaseException):
        stage_name = getattr(stage, "value", str(stage))
        super().__init__(f"{stage_name} failed: {cause}")
        self.stage = stage
        self.cause = cause
