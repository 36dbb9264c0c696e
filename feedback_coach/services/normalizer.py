"""
Response normalization.

Model output is untrusted text. normalize_feedback() always returns a dict
with every feedback key present, whatever the model sent back.
"""
import copy
import json
import logging
import math

from feedback_coach.services.prompt_builder import LANGUAGE_ISSUE_KEYS

logger = logging.getLogger(__name__)

SCORE_MIN = 1
SCORE_MAX = 10
RAW_PREVIEW_CHARS = 900

INVALID_JSON_HINTS = {
    "en": [
        "The model did not return valid JSON.",
        "Tip: try another model or tighten the prompt.",
    ],
    "de": [
        "Die KI-Antwort war nicht im erwarteten JSON-Format.",
        "Tipp: Modell wechseln oder Prompt weiter verschärfen.",
    ],
}

# Empty value per key; lists and dicts are copied before use.
FIELD_DEFAULTS = {
    "score": None,
    "score_explanation": "",
    "strengths": [],
    "improvements": [],
    "language_issues": {"grammar": [], "spelling": []},
    "next_steps": [],
    "mini_exercise": "",
}


def _loads_object(text):
    """json.loads that only accepts a JSON object; None otherwise."""
    try:
        value = json.loads(text)
    except (ValueError, TypeError, RecursionError):
        return None
    return value if isinstance(value, dict) else None


def parse_json_object(raw: str):
    """
    Parse raw completion text into a dict.

    Tries the whole text first, then the slice from the first "{" to the
    last "}" (model wrapped its JSON in prose or markdown fences).
    Returns None when neither yields a JSON object.
    """
    parsed = _loads_object(raw)
    if parsed is not None:
        return parsed

    start = raw.find("{")
    end = raw.rfind("}")
    if start != -1 and end > start:
        return _loads_object(raw[start:end + 1])
    return None


def clamp_score(score):
    """Round half up and bound numeric scores to 1..10; leave anything else alone."""
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return score
    if isinstance(score, float):
        if math.isnan(score):
            return None
        if math.isinf(score):
            return SCORE_MAX if score > 0 else SCORE_MIN
        score = math.floor(score + 0.5)
    return max(SCORE_MIN, min(SCORE_MAX, int(score)))


def apply_defaults(parsed: dict) -> dict:
    """Fill missing or null fields with their empty value."""
    for key, default in FIELD_DEFAULTS.items():
        if parsed.get(key) is None:
            parsed[key] = copy.deepcopy(default)

    issues = parsed["language_issues"]
    if not isinstance(issues, dict):
        issues = parsed["language_issues"] = {}
    for key in LANGUAGE_ISSUE_KEYS:
        if issues.get(key) is None:
            issues[key] = []
    return parsed


def degraded_feedback(raw: str, lang: str = "de") -> dict:
    """Schema-valid result for a completion that held no usable JSON."""
    return {
        "score": None,
        "score_explanation": "",
        "strengths": [],
        "improvements": list(INVALID_JSON_HINTS["en" if lang == "en" else "de"]),
        "language_issues": {"grammar": [], "spelling": []},
        "next_steps": [],
        "mini_exercise": raw[:RAW_PREVIEW_CHARS],
    }


def normalize_feedback(raw: str, lang: str = "de") -> dict:
    """Turn raw completion text into a complete feedback dict. Never raises."""
    raw = raw if isinstance(raw, str) else ("" if raw is None else str(raw))

    parsed = parse_json_object(raw)
    if parsed is None:
        logger.warning("Completion was not valid JSON (%d chars)", len(raw))
        return degraded_feedback(raw, lang)

    parsed = apply_defaults(parsed)
    parsed["score"] = clamp_score(parsed["score"])
    return parsed
