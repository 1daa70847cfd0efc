"""
Pipeline driver: fetch -> analyze -> build prompt -> generate -> parse -> write.

Each stage runs exactly once, in order. The first failure stops the run and
is re-raised as a PipelineError naming the stage. Nothing is written until
parsing has produced at least one component; files from earlier runs are left
alone and simply overwritten when names match.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .analyzer import save_analysis
from .errors import PipelineError
from .file_writer import write_layout_files
from .models import BrandConfig, BrandContent, StructuralAnalysis
from .parser import ComponentParser
from .prompts import build_generate_prompt

logger = logging.getLogger(__name__)


class PipelineStage(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    ANALYZING = "analyzing"
    PROMPT_BUILDING = "prompt_building"
    GENERATING = "generating"
    PARSING = "parsing"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


ProgressCallback = Callable[[PipelineStage, str], None]


@dataclass
class PipelineResult:
    analysis: StructuralAnalysis
    components: Dict[str, str]
    written_files: List[Path]
    prompt_length: int = 0
    duration: float = 0.0
    analysis_file: Optional[Path] = None
    rejected: List[str] = field(default_factory=list)

    @property
    def component_names(self) -> List[str]:
        return list(self.components)


class LayoutPipeline:
    def __init__(
        self,
        scraper,
        analyzer,
        llm,
        parser: Optional[ComponentParser] = None,
        writer=write_layout_files,
        prompt_builder=build_generate_prompt,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.scraper = scraper
        self.analyzer = analyzer
        self.llm = llm
        self.parser = parser or ComponentParser()
        self.writer = writer
        self.prompt_builder = prompt_builder
        self.on_progress = on_progress
        self.state = PipelineStage.IDLE
        self.failed_stage: Optional[PipelineStage] = None

    def _enter(self, stage: PipelineStage, message: str) -> None:
        self.state = stage
        logger.info(f"[{stage.value}] {message}")
        if self.on_progress:
            self.on_progress(stage, message)

    def _fail(self, error: Exception) -> PipelineError:
        stage = self.state
        self.failed_stage = stage
        self.state = PipelineStage.FAILED
        logger.error(f"❌ Pipeline failed while {stage.value}: {error}")
        return PipelineError(stage, error)

    def _reset(self) -> None:
        self.state = PipelineStage.IDLE
        self.failed_stage = None

    async def analyze_only(self, url: str) -> StructuralAnalysis:
        """Run just the fetch and analysis stages."""
        self._reset()
        try:
            self._enter(PipelineStage.FETCHING, f"Fetching {url}...")
            page = await self.scraper.fetch_page(url)

            self._enter(PipelineStage.ANALYZING, "Analyzing structure with Claude...")
            analysis = await self.analyzer.analyze(page)

            self._enter(PipelineStage.DONE, "✅ Analysis complete")
        except Exception as e:
            raise self._fail(e) from e
        return analysis

    async def run(
        self,
        url: str,
        output_dir: Union[str, Path],
        content: BrandContent,
        brand: BrandConfig,
        analysis_path: Optional[Union[str, Path]] = None,
    ) -> PipelineResult:
        self._reset()
        start_time = time.monotonic()
        analysis_file = None

        try:
            self._enter(PipelineStage.FETCHING, f"🔍 Fetching {url}...")
            page = await self.scraper.fetch_page(url)

            self._enter(PipelineStage.ANALYZING, "Analyzing structure with Claude...")
            analysis = await self.analyzer.analyze(page)
            if analysis_path:
                analysis_file = save_analysis(analysis, analysis_path)

            self._enter(PipelineStage.PROMPT_BUILDING, "Building generation prompt...")
            prompt = self.prompt_builder(analysis, content, brand)
            logger.info(f"Prompt length: {len(prompt)} characters")

            self._enter(PipelineStage.GENERATING, "🤖 Generating layout components...")
            response_text = await self.llm.generate_components(prompt)

            self._enter(PipelineStage.PARSING, "Extracting components from response...")
            parsed = self.parser.extract(response_text)
            components = parsed.components
            logger.info(f"Extracted {len(components)} components")

            self._enter(PipelineStage.WRITING, f"Writing components to {output_dir}...")
            written_files = await self.writer(components, output_dir)

            duration = time.monotonic() - start_time
            self._enter(PipelineStage.DONE, f"✅ Generated {len(components)} components in {duration:.1f}s")
        except Exception as e:
            raise self._fail(e) from e

        return PipelineResult(
            analysis=analysis,
            components=components,
            written_files=written_files,
            prompt_length=len(prompt),
            duration=duration,
            analysis_file=analysis_file,
            rejected=[r.key for r in parsed.rejected],
        )
