"""
Prompt builder tests.
"""

import re

from sitegen.models import BrandConfig, BrandContent, StructuralAnalysis
from sitegen.parser import COMPONENT_PATTERN
from sitegen.prompts import COMPONENT_NAMES, build_analysis_prompt, build_generate_prompt


class TestGeneratePrompt:
    def test_is_deterministic(self, sample_analysis, brand_content, brand_config):
        first = build_generate_prompt(sample_analysis, brand_content, brand_config)
        second = build_generate_prompt(sample_analysis, brand_content, brand_config)

        assert first == second
        assert first.encode("utf-8") == second.encode("utf-8")

    def test_contains_every_content_string_verbatim(self, sample_analysis, brand_content, brand_config):
        prompt = build_generate_prompt(sample_analysis, brand_content, brand_config)

        expected = [
            brand_content.hero.headline,
            brand_content.hero.subheadline,
            brand_content.hero.cta.text,
            brand_content.hero.cta.link,
            brand_content.about.headline,
            *brand_content.about.body,
            brand_content.approach.headline,
            brand_content.approach.subheadline,
            *[p.title for p in brand_content.approach.pillars],
            *[p.description for p in brand_content.approach.pillars],
            brand_content.contact.headline,
            brand_content.contact.email,
        ]
        for text in expected:
            assert text in prompt, f"missing: {text}"

        assert '- Headline: "Strategic Real Estate Investment"' in prompt
        assert '  Paragraph 2: "We focus on the Midwest."' in prompt
        assert '  1. Market Selection: "We target growing markets"' in prompt

    def test_contains_every_brand_token(self, sample_analysis, brand_content, brand_config):
        prompt = build_generate_prompt(sample_analysis, brand_content, brand_config)

        for color in ["#1E1F1D", "#F5F4EF", "#A76D3E", "#3C4037", "#7A7F78"]:
            assert color in prompt
        assert '"DM Serif Display", serif' in prompt
        assert '"Montserrat", sans-serif' in prompt
        assert '"Lora", serif' in prompt
        assert "Middle Coast" in prompt
        assert "Quiet Strength. Real Returns." in prompt

    def test_contains_analysis(self, sample_analysis, brand_content, brand_config):
        prompt = build_generate_prompt(sample_analysis, brand_content, brand_config)

        assert "**URL**: https://example.com" in prompt
        assert "1. **Hero** (Priority 1)" in prompt
        assert "   - Purpose: Main introduction and call to action" in prompt
        assert "   - Elements: headline, subtext, button" in prompt
        assert "- **hero**: Centered content with background" in prompt
        assert "- Text colors: black, gray-700" in prompt
        assert "- Accent colors: blue-500" in prompt

    def test_sections_keep_given_order(self, brand_content, brand_config):
        analysis = StructuralAnalysis.model_validate({
            "url": "https://example.com",
            "sections": [
                {"name": "Footer", "purpose": "", "elements": [], "hierarchy": 5},
                {"name": "Hero", "purpose": "", "elements": [], "hierarchy": 1},
            ],
        })

        prompt = build_generate_prompt(analysis, brand_content, brand_config)

        assert prompt.index("**Footer** (Priority 5)") < prompt.index("**Hero** (Priority 1)")

    def test_output_format_matches_parser_convention(self, sample_analysis, brand_content, brand_config):
        prompt = build_generate_prompt(sample_analysis, brand_content, brand_config)

        names = [m.group(1) for m in COMPONENT_PATTERN.finditer(prompt)]
        assert names == COMPONENT_NAMES
        assert "never nest" in prompt

    def test_missing_optional_content_renders_empty(self, sample_analysis):
        prompt = build_generate_prompt(sample_analysis, BrandContent(), BrandConfig())

        assert '- Headline: ""' in prompt
        assert '- Email: ""' in prompt
        assert re.search(r"- Pillars:\n\n", prompt)


class TestAnalysisPrompt:
    def test_includes_page_material(self):
        prompt = build_analysis_prompt("https://example.com", ["Welcome", "About us"], "Body text sample")

        assert "URL: https://example.com" in prompt
        assert "Welcome\nAbout us" in prompt
        assert "Body text sample" in prompt
        assert "Return ONLY valid JSON" in prompt
