import argparse
import asyncio
import json
import logging
import sys

from .analyzer import StructuralAnalyzer, save_analysis
from .config import DEFAULT_BRAND_PATH, DEFAULT_CONTENT_PATH, Settings
from .errors import SitegenError
from .llm_service import LLMService
from .models import load_brand_config, load_brand_content
from .orchestrator import LayoutPipeline, PipelineStage
from .scraper import WebsiteScraper

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitegen", description="Generate a branded layout from a reference URL"
    )
    parser.add_argument("url", help="Reference URL to analyze")
    parser.add_argument("-o", "--output", default="src/layouts/production", help="Output directory")
    parser.add_argument("--content", default=DEFAULT_CONTENT_PATH, help="Brand content JSON file")
    parser.add_argument("--brand", default=DEFAULT_BRAND_PATH, help="Brand styling JSON file")
    parser.add_argument("--save-analysis", metavar="PATH", help="Also write the structural analysis as JSON")
    parser.add_argument("--analyze-only", action="store_true", help="Stop after the structural analysis")
    parser.add_argument("--env-file", help="Load environment variables from this file")
    return parser


def _print_progress(stage: PipelineStage, message: str) -> None:
    print(f"  {message}")


async def _run(args: argparse.Namespace, settings: Settings) -> None:
    llm = LLMService(settings)
    pipeline = LayoutPipeline(
        scraper=WebsiteScraper(settings),
        analyzer=StructuralAnalyzer(llm),
        llm=llm,
        on_progress=_print_progress,
    )

    if args.analyze_only:
        analysis = await pipeline.analyze_only(args.url)
        if args.save_analysis:
            save_analysis(analysis, args.save_analysis)
        print(json.dumps(analysis.model_dump(by_alias=True), indent=2, ensure_ascii=False))
        return

    content = load_brand_content(args.content)
    brand = load_brand_config(args.brand)

    result = await pipeline.run(args.url, args.output, content, brand, analysis_path=args.save_analysis)

    print(f"✅ Done! Generated {len(result.components)} components in {result.duration:.1f}s")
    for path in result.written_files:
        print(f"   • {path}")
    if result.rejected:
        print(f"⚠ Skipped: {', '.join(result.rejected)}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env(args.env_file)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        asyncio.run(_run(args, settings))
    except (SitegenError, OSError, ValueError) as e:
        print(f"💥 {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
