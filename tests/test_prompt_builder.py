"""
Test: Prompt builder - language templates, verbatim text, schema in sync.
"""
import re

from feedback_coach.services.normalizer import FIELD_DEFAULTS
from feedback_coach.services.prompt_builder import (
    FEEDBACK_SCHEMA, FEEDBACK_SCHEMA_KEYS, LANGUAGE_ISSUE_KEYS, build_prompt,
)


def test_english_template(sample_text):
    prompt = build_prompt(sample_text, "Argumentative essay", "Year 10", "en")
    assert "Respond in ENGLISH only." in prompt
    assert "Antworte NUR auf DEUTSCH." not in prompt
    assert "Target group/level: Year 10" in prompt
    assert "Text type: Argumentative essay" in prompt


def test_german_template_is_default(sample_text):
    for lang in ("de", "fr", "", None):
        prompt = build_prompt(sample_text, "Erörterung", "Q1", lang)
        assert "Antworte NUR auf DEUTSCH." in prompt
        assert "KEINE Note" in prompt


def test_student_text_embedded_verbatim():
    text = "  Line one.\n\nLine two with {braces} and \"quotes\".  "
    prompt = build_prompt(text, "Essay", "Q1", "de")
    assert f'"""{text}"""' in prompt


def test_schema_and_rules_present(sample_text):
    prompt = build_prompt(sample_text, "Essay", "Q1", "en")
    assert FEEDBACK_SCHEMA in prompt
    assert '"score" must be an integer 1..10' in prompt
    assert "Each list must have 3–6 bullet points" in prompt
    assert "Do NOT rewrite the whole text" in prompt
    assert "NOT a grade" in prompt


def test_empty_text_still_builds():
    prompt = build_prompt("", "", "", "en")
    assert prompt.endswith('""""""')


def test_deterministic(sample_text):
    assert build_prompt(sample_text, "Essay", "Q1", "de") == build_prompt(sample_text, "Essay", "Q1", "de")


def test_schema_matches_normalizer_fields():
    schema_keys = re.findall(r'"(\w+)":', FEEDBACK_SCHEMA)
    top_level = [k for k in schema_keys if k not in LANGUAGE_ISSUE_KEYS]
    assert tuple(top_level) == FEEDBACK_SCHEMA_KEYS
    assert set(FEEDBACK_SCHEMA_KEYS) == set(FIELD_DEFAULTS)
    assert set(LANGUAGE_ISSUE_KEYS) == set(FIELD_DEFAULTS["language_issues"])


def test_schema_rendering():
    assert FEEDBACK_SCHEMA == (
        "{\n"
        '  "score": number,\n'
        '  "score_explanation": string,\n'
        '  "strengths": string[],\n'
        '  "improvements": string[],\n'
        '  "language_issues": {\n'
        '    "grammar": string[],\n'
        '    "spelling": string[]\n'
        "  },\n"
        '  "next_steps": string[],\n'
        '  "mini_exercise": string\n'
        "}"
    )
