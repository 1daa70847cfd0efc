"""
Extraction of generated components from a free-form LLM response.

The model is told to wrap each component as

    <Component name="Hero">...source...</Component>

Only that exact, case-sensitive anchor delimits a component; any other angle
brackets inside a body (JSX, comparisons) are left alone. Tags are assumed not
to nest. When the same name appears twice, the last body wins.
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple

from .errors import NoArtifactsError

logger = logging.getLogger(__name__)

COMPONENT_PATTERN = re.compile(r'<Component name="([^"]+)">([\s\S]*?)</Component>')

DEFAULT_SUFFIX = ".tsx"

CODE_MARKERS = ("interface", "export default function", "return")

RAW_RESPONSE_PREVIEW = 500


class Rejection(NamedTuple):
    key: str
    reason: str


def looks_like_component(body: str) -> bool:
    """Rough check that a body is TypeScript/React source rather than prose."""
    return any(marker in body for marker in CODE_MARKERS)


class ParseResult(NamedTuple):
    components: Dict[str, str]
    rejected: List[Rejection]
    duplicates: List[str]


class ComponentParser:
    def __init__(self, validator: Callable[[str], bool] = looks_like_component, suffix: str = DEFAULT_SUFFIX):
        self.validator = validator
        self.suffix = suffix
        # Outcome of the most recent parse() call
        self.rejected: List[Rejection] = []
        self.duplicates: List[str] = []

    def extract(self, response_text: str) -> ParseResult:
        """Parse a response without touching parser state, so one parser can serve concurrent runs."""
        components: Dict[str, str] = {}
        rejected: List[Rejection] = []
        duplicates: List[str] = []

        for match in COMPONENT_PATTERN.finditer(response_text or ""):
            component_name, component_code = match.groups()
            filename = f"{component_name}{self.suffix}"
            clean_code = component_code.strip()

            if not self.validator(clean_code):
                reason = "doesn't look like valid code"
                rejected.append(Rejection(filename, reason))
                logger.warning(f"⚠ Skipping {filename} - {reason}")
                continue

            if filename in components:
                duplicates.append(filename)
                logger.warning(f"⚠ Duplicate component {filename} - keeping the later one")

            components[filename] = clean_code
            logger.info(f"✓ Extracted {filename} ({len(clean_code)} chars)")

        if not components:
            raise NoArtifactsError(
                "No valid components extracted from Claude response. Response format may be incorrect.",
                raw_response=(response_text or "")[:RAW_RESPONSE_PREVIEW],
                rejected=rejected,
            )

        return ParseResult(components, rejected, duplicates)

    def parse(self, response_text: str) -> Dict[str, str]:
        """Return filename -> code for every tagged body that passes the validator."""
        self.rejected = []
        self.duplicates = []
        try:
            result = self.extract(response_text)
        except NoArtifactsError as e:
            self.rejected = list(e.rejected)
            raise
        self.rejected = result.rejected
        self.duplicates = result.duplicates
        return result.components


def parse_components_from_response(response_text: str) -> Dict[str, str]:
    return ComponentParser().parse(response_text)
