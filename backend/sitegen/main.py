import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, HttpUrl

from .analyzer import StructuralAnalyzer
from .config import Settings
from .errors import ConfigurationError, PipelineError
from .llm_service import LLMService
from .models import BrandConfig, BrandContent, load_brand_config, load_brand_content
from .orchestrator import LayoutPipeline
from .scraper import WebsiteScraper

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "production"

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Layout Generation API", version="1.0.0")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],  # Frontend URLs
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services lazily
llm_service = None


def get_llm_service() -> LLMService:
    global llm_service
    if llm_service is None:
        llm_service = LLMService(settings)
    return llm_service


def get_pipeline() -> LayoutPipeline:
    try:
        llm = get_llm_service()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {str(e)}")
    return LayoutPipeline(
        scraper=WebsiteScraper(settings),
        analyzer=StructuralAnalyzer(llm),
        llm=llm,
    )


def get_brand() -> Dict[str, Any]:
    try:
        return {
            "content": load_brand_content(settings.content_path),
            "brand": load_brand_config(settings.brand_path),
        }
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load brand files: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load brand files: {str(e)}")


def resolve_output_dir(output_dir: str) -> Path:
    """Resolve a requested output directory below settings.output_root, refusing anything that escapes it."""
    root = Path(settings.output_root).resolve()
    target = (root / output_dir).resolve()
    if target != root and root not in target.parents:
        raise HTTPException(status_code=400, detail=f"output_dir must stay inside the output root: {output_dir}")
    return target


class AnalyzeRequest(BaseModel):
    url: HttpUrl


class GenerateRequest(BaseModel):
    url: HttpUrl
    output_dir: str = DEFAULT_OUTPUT_DIR


class GenerateResponse(BaseModel):
    success: bool
    components: List[str] = []
    written_files: List[str] = []
    rejected: List[str] = []
    duration: float = 0.0
    analysis: Optional[Dict[str, Any]] = None


@app.get("/")
def read_root():
    return {"message": "Layout Generation API", "version": "1.0.0"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.post("/analyze")
async def analyze_url(request: AnalyzeRequest, pipeline: LayoutPipeline = Depends(get_pipeline)):
    """
    Fetch a reference URL and return its structural analysis (for debugging/testing)
    """
    try:
        analysis = await pipeline.analyze_only(str(request.url))
    except PipelineError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return analysis.model_dump(by_alias=True)


@app.post("/generate", response_model=GenerateResponse)
async def generate_layout(
    request: GenerateRequest,
    pipeline: LayoutPipeline = Depends(get_pipeline),
    brand: Dict[str, Any] = Depends(get_brand),
):
    """
    Analyze the reference URL and write branded layout components to output_dir,
    a directory relative to the configured output root
    """
    output_dir = resolve_output_dir(request.output_dir)
    content: BrandContent = brand["content"]
    brand_config: BrandConfig = brand["brand"]

    try:
        result = await pipeline.run(str(request.url), output_dir, content, brand_config)
    except PipelineError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return GenerateResponse(
        success=True,
        components=result.component_names,
        written_files=[str(path) for path in result.written_files],
        rejected=result.rejected,
        duration=result.duration,
        analysis=result.analysis.model_dump(by_alias=True),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
