import json
import logging
import re
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .errors import AnalysisParseError
from .models import StructuralAnalysis
from .prompts import build_analysis_prompt
from .scraper import PageContent

logger = logging.getLogger(__name__)

ERROR_PREVIEW = 500

_OPENING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?```\s*$")


def strip_code_fence(text: str) -> str:
    """Remove a ```json / ``` fence wrapping the whole payload, if there is one."""
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = _OPENING_FENCE.sub("", stripped, count=1)
        stripped = _CLOSING_FENCE.sub("", stripped, count=1)
    return stripped.strip()


def extract_json_object(text: str) -> dict:
    json_text = strip_code_fence(text or "")
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise AnalysisParseError(
            f"Structural analysis is not valid JSON ({e.msg}): {json_text[:ERROR_PREVIEW]}",
            text=json_text[:ERROR_PREVIEW],
        ) from e

    if not isinstance(data, dict):
        raise AnalysisParseError(
            f"Structural analysis must be a JSON object, got {type(data).__name__}",
            text=json_text[:ERROR_PREVIEW],
        )
    return data


class StructuralAnalyzer:
    def __init__(self, llm):
        self.llm = llm

    async def analyze(self, page: PageContent) -> StructuralAnalysis:
        prompt = build_analysis_prompt(page.url, page.headings, page.body_text)

        logger.info("Analyzing structure with Claude...")
        response_text = await self.llm.analyze_structure(prompt)

        data = extract_json_object(response_text)
        # The url always comes from the caller, never from the model
        data["url"] = page.url
        try:
            analysis = StructuralAnalysis.model_validate(data)
        except ValidationError as e:
            raise AnalysisParseError(
                f"Structural analysis has an unexpected shape: {e}", text=response_text[:ERROR_PREVIEW]
            ) from e

        logger.info(
            f"📊 Found {len(analysis.sections)} sections, {len(analysis.layout_patterns)} layout patterns"
        )
        return analysis


def save_analysis(analysis: StructuralAnalysis, path: Union[str, Path]) -> Path:
    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(
        json.dumps(analysis.model_dump(by_alias=True), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    logger.info(f"📄 Saved analysis to: {output_file}")
    return output_file
