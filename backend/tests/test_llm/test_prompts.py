"""Tests for prompt templates and model routing."""

import json

from app.config import settings
from app.llm.model_router import get_model_for_task
from app.llm.prompts import (
    build_analyze_prompt,
    build_generate_prompt,
    get_all_templates,
    get_prompt_template,
)


def test_generate_prompt_embeds_request():
    prompt = build_generate_prompt("  a lotus kolam for Pongal  ")
    assert 'User Request: "a lotus kolam for Pongal"' in prompt
    assert "Step-by-step" in prompt


def test_analyze_prompt_without_notes():
    prompt = build_analyze_prompt()
    assert "Additional context" not in prompt
    assert '"dotAnalysis": {' in prompt
    assert "{{" not in prompt


def test_analyze_prompt_with_notes():
    prompt = build_analyze_prompt("drawn at Margazhi")
    assert prompt.endswith("Additional context from the user: drawn at Margazhi")


def test_analyze_rubric_keys():
    prompt = build_analyze_prompt()
    for key in ("symmetryAnalysis", "complexityAnalysis", "mathematicalPrinciples",
                "culturalDescription", "patternDetails"):
        assert f'"{key}"' in prompt


def test_templates_lookup():
    templates = get_all_templates()
    assert set(templates) == {"analyze", "generate"}
    assert get_prompt_template("unknown") == templates["generate"]
    json.dumps(templates)


def test_model_routing():
    assert get_model_for_task("analyze") == settings.model_cheap
    assert get_model_for_task("generate") == settings.model_mid
    assert get_model_for_task("other") == settings.model_cheap
