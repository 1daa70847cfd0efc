from typing import List

from .models import BrandConfig, BrandContent, StructuralAnalysis

COMPONENT_NAMES = ["Layout", "Hero", "About", "Approach", "Contact"]

_COMPONENT_HINTS = {
    "Layout": [
        "// Main layout component that composes all sections",
        "// Import and render Hero, About, Approach, Contact components",
        "// Include proper TypeScript interfaces",
    ],
    "Hero": [
        "// Hero section component based on reference URL pattern",
        "// Use the brand hero content and styling",
        "// Include CTA button functionality",
    ],
    "About": [
        "// About section component based on reference URL pattern",
        "// Use the brand about content and styling",
        "// Handle multi-paragraph content properly",
    ],
    "Approach": [
        "// Approach/Services section based on reference URL pattern",
        "// Use the brand approach content with every pillar",
        "// Create visually appealing pillar layout",
    ],
    "Contact": [
        "// Contact section component based on reference URL pattern",
        "// Use the brand contact content",
        "// Include proper form structure if reference has forms",
    ],
}


def build_analysis_prompt(url: str, headings: List[str], body_text: str) -> str:
    """Instruction sent with the scraped page to get a JSON structural description back."""
    prompt_parts = [
        "Analyze this website structure and extract key information:",
        "",
        f"URL: {url}",
        "",
        "HEADINGS:",
        "\n".join(headings),
        "",
        "CONTENT SAMPLE:",
        body_text,
        "",
        "Provide a JSON response with:",
        "1. sections: Array of distinct sections (likely: hero, about, services/approach, contact, footer)",
        "   For each section provide:",
        "   - name: short descriptive name",
        "   - purpose: what this section does",
        "   - elements: key UI elements (heading, text, CTA, etc)",
        "   - hierarchy: importance level 1-5",
        "",
        "2. layoutPatterns: Array describing layout types used",
        "   - type: hero | text-block | card-grid | form | footer",
        "   - structure: brief description",
        "",
        "3. colorUsage: Guess the general color strategy",
        "   - background: likely background colors",
        "   - text: likely text colors",
        "   - accents: likely accent colors",
        "",
        "Return ONLY valid JSON, no markdown formatting.",
    ]
    return "\n".join(prompt_parts)


def build_generate_prompt(analysis: StructuralAnalysis, content: BrandContent, brand: BrandConfig) -> str:
    """
    Build the layout generation instruction.

    Pure and deterministic: the same inputs always give the same text. Every
    content string is inserted verbatim so the model can reproduce it exactly,
    and the output format block fixes the <Component name="..."> convention
    the response parser relies on.
    """
    colors = brand.colors
    fonts = brand.typography.fonts
    charcoal = colors.primary.charcoal
    soft_white = colors.primary.soft_white

    prompt_parts = [
        "# Layout Generation Task",
        "",
        "You are an expert React/TypeScript developer tasked with creating a professional website layout "
        "that faithfully recreates the structural patterns from a reference URL while applying specific "
        "branding and content.",
        "",
        "## Reference URL Analysis",
        f"**URL**: {analysis.url}",
        "",
        "**Structural Sections**:",
    ]

    for i, section in enumerate(analysis.sections, 1):
        prompt_parts.extend([
            f"{i}. **{section.name}** (Priority {section.hierarchy})",
            f"   - Purpose: {section.purpose}",
            f"   - Elements: {', '.join(section.elements)}",
        ])

    prompt_parts.extend(["", "**Layout Patterns Identified**:"])
    for pattern in analysis.layout_patterns:
        prompt_parts.append(f"- **{pattern.type}**: {pattern.structure}")

    prompt_parts.extend([
        "",
        "**Visual Style Patterns**:",
        f"- Background colors: {', '.join(analysis.color_usage.background)}",
        f"- Text colors: {', '.join(analysis.color_usage.text)}",
        f"- Accent colors: {', '.join(analysis.color_usage.accents)}",
        "",
        "## Brand Requirements",
        "",
        "**Brand Identity**:",
        f"- Company: {brand.name}",
        f"- Tagline: {brand.tagline}",
        "",
        "**Color Palette** (USE THESE EXACT VALUES):",
        f"- Primary Charcoal: {charcoal}",
        f"- Soft White: {soft_white}",
        f"- Copper Accent: {colors.accent.copper}",
        f"- Deep Olive: {colors.supporting.deep_olive}",
        f"- Warm Gray: {colors.supporting.warm_gray}",
        "",
        "**Typography**:",
        f"- Headlines: {fonts.serif}",
        f"- Body Text: {fonts.sans}",
        f"- Alternative: {fonts.alt}",
        "",
        "## Content to Use (EXACT TEXT)",
        "",
        "**Hero Section**:",
        f'- Headline: "{content.hero.headline}"',
        f'- Subheadline: "{content.hero.subheadline}"',
        f'- CTA Button: "{content.hero.cta.text}" (links to "{content.hero.cta.link}")',
        "",
        "**About Section**:",
        f'- Headline: "{content.about.headline}"',
        "- Content:",
    ])
    for i, paragraph in enumerate(content.about.body, 1):
        prompt_parts.append(f'  Paragraph {i}: "{paragraph}"')

    prompt_parts.extend([
        "",
        "**Approach Section**:",
        f'- Headline: "{content.approach.headline}"',
        f'- Subheadline: "{content.approach.subheadline}"',
        "- Pillars:",
    ])
    for i, pillar in enumerate(content.approach.pillars, 1):
        prompt_parts.append(f'  {i}. {pillar.title}: "{pillar.description}"')

    prompt_parts.extend([
        "",
        "**Contact Section**:",
        f'- Headline: "{content.contact.headline}"',
        f'- Email: "{content.contact.email}"',
        "",
        "## Technical Requirements",
        "",
        "### React/TypeScript Standards",
        "- Use TypeScript with strict typing",
        "- Define interfaces for all component props",
        "- Use kebab-case for filenames, PascalCase for components",
        "- Prefer functional components with explicit return types",
        "- Use meaningful prop destructuring with default values",
        "",
        "### Tailwind CSS Standards",
        "- Use utility-first approach with semantic class names",
        "- Implement mobile-first responsive design",
        f"- Use exact brand colors via arbitrary value syntax: `bg-[{charcoal}]`",
        "- Follow consistent spacing scale: py-24 px-6 for sections, max-w-4xl mx-auto for containers",
        "- Use semantic HTML5 elements (section, header, main, footer)",
        "",
        "### Accessibility Requirements",
        "- Proper heading hierarchy (h1 > h2 > h3)",
        "- ARIA labels for interactive elements",
        "- Semantic HTML structure",
        "- Proper alt text for images (use descriptive placeholders)",
        "- Keyboard navigation support",
        "",
        "### Performance Requirements",
        "- No client-side JavaScript (server-rendered components only)",
        "- Optimized for static site generation",
        "- Minimal CSS footprint using Tailwind utilities",
        "",
        "## Output Format",
        "",
        "Generate a complete layout system with the following components. Wrap each component in XML tags "
        "with the component name, exactly as shown:",
        "",
    ])
    for name in COMPONENT_NAMES:
        prompt_parts.append(f'<Component name="{name}">')
        prompt_parts.extend(_COMPONENT_HINTS[name])
        prompt_parts.extend(["</Component>", ""])

    prompt_parts.extend([
        "Rules for the tags: spell the opening tag and its name attribute exactly as above (case-sensitive, "
        "double quotes), close every component with its own closing tag, never nest one Component tag inside "
        "another, and put nothing but the component source between them.",
        "",
        "## Critical Guidelines",
        "",
        "1. **Faithful Structure Recreation**: Study the reference URL's layout patterns and recreate the "
        "STRUCTURE and COMPOSITION, not the visual styling",
        "2. **Brand Consistency**: Apply the brand colors, fonts, and content throughout - never use "
        "reference URL content",
        "3. **Content Accuracy**: Use the exact content provided - do not modify headlines, body text, or CTAs",
        "4. **Professional Quality**: Generate production-ready code that compiles without errors",
        "5. **Responsive Design**: Ensure components work across mobile, tablet, and desktop viewports",
        "6. **Type Safety**: All components must have proper TypeScript interfaces and type definitions",
        "",
        "## Example Component Structure",
        "",
        "```tsx",
        "interface HeroProps {",
        "  headline: string;",
        "  subheadline: string;",
        "  ctaText: string;",
        "  ctaLink: string;",
        "}",
        "",
        "export default function Hero({ headline, subheadline, ctaText, ctaLink }: HeroProps) {",
        "  return (",
        f'    <section className="min-h-screen flex items-center justify-center bg-[{charcoal}] text-[{soft_white}]">',
        "      {/* Component implementation */}",
        "    </section>",
        "  );",
        "}",
        "```",
        "",
        f"Generate all components now, ensuring they follow the structural patterns from the reference URL "
        f"while applying {brand.name} branding consistently.",
    ])

    return "\n".join(prompt_parts)
