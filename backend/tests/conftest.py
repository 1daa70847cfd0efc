"""
Shared fixtures for the sitegen tests.

Nothing here talks to the network or to Claude: the LLM and the fetcher are
replaced by small fakes that record how they were called.
"""

import json

import pytest

from sitegen.errors import FetchError
from sitegen.models import BrandConfig, BrandContent, StructuralAnalysis
from sitegen.scraper import PageContent


# ============================================
# Fakes
# ============================================

class FakeLLM:
    """Stands in for LLMService; returns canned text and counts calls."""

    def __init__(self, analysis_response="", generation_response="", generation_error=None):
        self.analysis_response = analysis_response
        self.generation_response = generation_response
        self.generation_error = generation_error
        self.analysis_prompts = []
        self.generation_prompts = []

    @property
    def calls(self):
        return len(self.analysis_prompts) + len(self.generation_prompts)

    async def analyze_structure(self, prompt):
        self.analysis_prompts.append(prompt)
        return self.analysis_response

    async def generate_components(self, prompt):
        self.generation_prompts.append(prompt)
        if self.generation_error:
            raise self.generation_error
        return self.generation_response


class FakeScraper:
    def __init__(self, page=None, error=None):
        self.page = page
        self.error = error
        self.urls = []

    async def fetch_page(self, url):
        self.urls.append(url)
        if self.error:
            raise self.error
        return self.page or PageContent(url=url, title="Reference", body_text="Welcome", headings=["Welcome"])


def not_found_scraper():
    return FakeScraper(error=FetchError("Failed to fetch URL: 404 Not Found", url="https://example.com", status=404))


# ============================================
# Data fixtures
# ============================================

ANALYSIS_DATA = {
    "sections": [
        {
            "name": "Hero",
            "purpose": "Main introduction and call to action",
            "elements": ["headline", "subtext", "button"],
            "hierarchy": 1,
        }
    ],
    "layoutPatterns": [{"type": "hero", "structure": "Centered content with background"}],
    "colorUsage": {"background": ["white"], "text": ["black", "gray-700"], "accents": ["blue-500"]},
}


@pytest.fixture
def analysis_json():
    return json.dumps(ANALYSIS_DATA)


@pytest.fixture
def sample_analysis():
    return StructuralAnalysis.model_validate({"url": "https://example.com", **ANALYSIS_DATA})


@pytest.fixture
def brand_content():
    return BrandContent.model_validate({
        "hero": {
            "headline": "Strategic Real Estate Investment",
            "subheadline": "Building wealth through Midwest opportunities",
            "cta": {"text": "Get Started", "link": "/contact"},
        },
        "about": {
            "headline": "About Middle Coast",
            "body": ["We are real estate experts.", "We focus on the Midwest."],
        },
        "approach": {
            "headline": "Our Approach",
            "subheadline": "Disciplined investing",
            "pillars": [
                {"title": "Market Selection", "description": "We target growing markets"},
                {"title": "Value Creation", "description": "Hands-on improvements"},
            ],
        },
        "contact": {"headline": "Contact Us", "email": "info@middlecoast.com"},
    })


@pytest.fixture
def brand_config():
    return BrandConfig.model_validate({
        "name": "Middle Coast",
        "tagline": "Quiet Strength. Real Returns.",
        "colors": {
            "primary": {"charcoal": "#1E1F1D", "softWhite": "#F5F4EF"},
            "accent": {"copper": "#A76D3E"},
            "supporting": {"deepOlive": "#3C4037", "warmGray": "#7A7F78"},
        },
        "typography": {
            "fonts": {"serif": '"DM Serif Display", serif', "sans": '"Montserrat", sans-serif', "alt": '"Lora", serif'}
        },
    })


# ============================================
# Helper Functions
# ============================================

def tagged(name, body):
    """Wrap a body the way the model is told to."""
    return f'<Component name="{name}">{body}</Component>'


def component_source(name):
    return (
        f"interface {name}Props {{\n  title: string;\n}}\n\n"
        f"export default function {name}({{ title }}: {name}Props) {{\n"
        f"  return <section>{{title}}</section>;\n}}"
    )
