"""Prompt templates per task: image analysis rubric and text-to-kolam instructions."""

from __future__ import annotations

_ANALYZE_TEMPLATE = """You are an expert analyst of kolam, the South Indian dot-grid line art. Study the attached image and assess it from what you can actually see.

ANALYSIS GUIDELINES:
1. Count the dots of the underlying grid before anything else; most kolams use 5-25.
2. Look for mirror lines and repeated motifs to decide the symmetry class.
3. Judge complexity from loops, crossings and how densely the lines fill the grid.
4. Note traditional motifs: lotus petals, temple outlines, geometric tiles.
5. Every number must come from observation, not from assumptions.

Return ONLY a valid JSON object with exactly this structure:

{{
  "dotAnalysis": {{
    "detected": <visible dots / grid points>,
    "validated": <dots properly joined by lines>,
    "precision": <0.75-0.98, line accuracy and dot alignment>
  }},
  "symmetryAnalysis": {{
    "type": "<Radial | Bilateral | Rotational | Asymmetrical>",
    "axisCount": <0 for asymmetrical, 1-2 bilateral, 4-8 radial>,
    "rotationAngle": <90 for 4-fold, 60 for 6-fold, 45 for 8-fold, 0 otherwise>,
    "score": <0.6-0.95>
  }},
  "complexityAnalysis": {{
    "level": "<Beginner | Intermediate | Advanced>",
    "score": <integer 1-10>,
    "patternCount": <distinct motifs>,
    "entropy": <1.0-3.5>
  }},
  "mathematicalPrinciples": ["<3-5 of: Dot Matrix Foundation, Continuous Line Drawing, Geometric Symmetry, Fractal Patterns, Tessellation Principles, Topological Loops, Angular Relationships>"],
  "culturalDescription": [
    "<traditional purpose>",
    "<regional style>",
    "<symbolic meaning>",
    "<historical context>",
    "<materials traditionally used>",
    "<time of creation>"
  ],
  "patternDetails": {{
    "traditionalName": "<Padi | Pulli | Sikku | Kambi Kolam, or Contemporary Design>",
    "region": "<Tamil Nadu | Karnataka | Andhra Pradesh | Kerala | Pan-South Indian>",
    "difficulty": "<realistic drawing time>",
    "authenticity": "<High | Medium | Low>"
  }}
}}

If the image is unclear or is not a kolam, say so inside the analysis fields. Keep the JSON syntactically valid.{notes}"""

_GENERATE_TEMPLATE = """You are an expert in South Indian kolam art and traditional geometric patterns.
Based on the following user request, describe how to create a kolam pattern.

User Request: "{prompt}"

Include:
1. A detailed description of the pattern
2. Step-by-step drawing instructions, starting from the dot grid
3. The mathematical principles involved (symmetry, geometry, loops)
4. Cultural significance and traditional meaning
5. Difficulty level and estimated time to complete
6. Tips for beginners

Format the response as clear, structured JSON that someone could follow to draw this kolam."""

_TEMPLATES = {
    "analyze": _ANALYZE_TEMPLATE,
    "generate": _GENERATE_TEMPLATE,
}


def get_prompt_template(task: str) -> str:
    return _TEMPLATES.get(task, _GENERATE_TEMPLATE)


def get_all_templates() -> dict[str, str]:
    """Return all prompt templates keyed by task name."""
    return dict(_TEMPLATES)


def build_analyze_prompt(notes: str = "") -> str:
    extra = f"\n\nAdditional context from the user: {notes.strip()}" if notes.strip() else ""
    return get_prompt_template("analyze").format(notes=extra)


def build_generate_prompt(prompt: str) -> str:
    return get_prompt_template("generate").format(prompt=prompt.strip())
