import json
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ---------- Structural analysis (produced by the analyzer) ----------

class Section(_Frozen):
    name: str
    purpose: str = ""
    elements: List[str] = []
    # Opaque importance rank from the LLM; direction is not defined, never sort on it
    hierarchy: int = Field(ge=1, le=5)


class LayoutPattern(_Frozen):
    # Usually hero | text-block | card-grid | form | footer, but free text from the model
    type: str
    structure: str = ""


class ColorUsage(_Frozen):
    background: List[str] = []
    text: List[str] = []
    accents: List[str] = []


class StructuralAnalysis(_Frozen):
    url: str
    sections: List[Section] = []
    layout_patterns: List[LayoutPattern] = Field(default=[], alias="layoutPatterns")
    color_usage: ColorUsage = Field(default_factory=ColorUsage, alias="colorUsage")


# ---------- Brand content ----------

class CallToAction(_Frozen):
    text: str = ""
    link: str = ""


class HeroContent(_Frozen):
    headline: str = ""
    subheadline: str = ""
    cta: CallToAction = CallToAction()


class AboutContent(_Frozen):
    headline: str = ""
    body: List[str] = []


class Pillar(_Frozen):
    title: str = ""
    description: str = ""


class ApproachContent(_Frozen):
    headline: str = ""
    subheadline: str = ""
    pillars: List[Pillar] = []


class ContactContent(_Frozen):
    headline: str = ""
    email: str = ""


class BrandContent(_Frozen):
    hero: HeroContent = HeroContent()
    about: AboutContent = AboutContent()
    approach: ApproachContent = ApproachContent()
    contact: ContactContent = ContactContent()


# ---------- Brand styling ----------

class PrimaryColors(_Frozen):
    charcoal: str = ""
    soft_white: str = Field(default="", alias="softWhite")


class AccentColors(_Frozen):
    copper: str = ""


class SupportingColors(_Frozen):
    deep_olive: str = Field(default="", alias="deepOlive")
    warm_gray: str = Field(default="", alias="warmGray")


class BrandColors(_Frozen):
    primary: PrimaryColors = PrimaryColors()
    accent: AccentColors = AccentColors()
    supporting: SupportingColors = SupportingColors()


class Fonts(_Frozen):
    serif: str = ""
    sans: str = ""
    alt: str = ""


class Typography(_Frozen):
    fonts: Fonts = Fonts()


class BrandConfig(_Frozen):
    name: str = ""
    tagline: str = ""
    colors: BrandColors = BrandColors()
    typography: Typography = Typography()


# Filename -> component source; never empty once parsing succeeds
GeneratedArtifactSet = Dict[str, str]


def _read_json(path: Union[str, Path]) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_brand_content(path: Union[str, Path]) -> BrandContent:
    return BrandContent.model_validate(_read_json(path))


def load_brand_config(path: Union[str, Path]) -> BrandConfig:
    """Brand file may nest name/tagline under "brand", like the site config it mirrors."""
    data = _read_json(path)
    brand = data.pop("brand", None)
    if isinstance(brand, dict):
        data.setdefault("name", brand.get("name", ""))
        data.setdefault("tagline", brand.get("tagline", ""))
    return BrandConfig.model_validate(data)
