"""
Feedback prompt construction.

The schema text is rendered from the key tuples below, which the normalizer
also repairs responses towards. Add new fields there.
"""

FEEDBACK_SCHEMA_KEYS = (
    "score",
    "score_explanation",
    "strengths",
    "improvements",
    "language_issues",
    "next_steps",
    "mini_exercise",
)

LANGUAGE_ISSUE_KEYS = ("grammar", "spelling")

FIELD_TYPES = {
    "score": "number",
    "score_explanation": "string",
    "mini_exercise": "string",
}


def render_schema() -> str:
    """Render the JSON shape the model is asked for, one field per line."""
    lines = []
    for key in FEEDBACK_SCHEMA_KEYS:
        if key == "language_issues":
            nested = ",\n".join(f'    "{sub}": string[]' for sub in LANGUAGE_ISSUE_KEYS)
            lines.append(f'  "{key}": {{\n{nested}\n  }}')
        else:
            lines.append(f'  "{key}": {FIELD_TYPES.get(key, "string[]")}')
    return "{\n" + ",\n".join(lines) + "\n}"


FEEDBACK_SCHEMA = render_schema()

INSTRUCTIONS = {
    "en": {
        "language": "Respond in ENGLISH only.",
        "score": (
            "Add an integer score from 1 to 10 (NOT a grade). It reflects clarity, structure, "
            "and language quality. Explain the score briefly in 1–2 sentences."
        ),
        "language_issues": (
            "Identify typical grammar issues and spelling issues. Do NOT correct the full text. "
            "Provide explanations/patterns and 3–6 bullet points each."
        ),
    },
    "de": {
        "language": "Antworte NUR auf DEUTSCH.",
        "score": (
            "Füge einen ganzzahligen Score von 1 bis 10 hinzu (KEINE Note). Er beschreibt "
            "Verständlichkeit, Struktur und sprachliche Qualität. Erkläre den Score kurz in 1–2 Sätzen."
        ),
        "language_issues": (
            "Identifiziere typische Grammatik- und Rechtschreibprobleme. Korrigiere NICHT den "
            "gesamten Text. Nenne Muster/Erklärungen und jeweils 3–6 Stichpunkte."
        ),
    },
}


def build_prompt(text: str, text_type: str, level: str, lang: str) -> str:
    """
    Build the instruction prompt for one student text.

    Any language other than "en" gets the German instructions. The student
    text is embedded verbatim, so callers enforce the minimum length.
    """
    instructions = INSTRUCTIONS["en"] if lang == "en" else INSTRUCTIONS["de"]

    prompt = f"""
You are a feedback coach for student writing.
{instructions['language']}

You must NOT provide a full rewritten solution or a model answer.
You must NOT assign grades (no numeric/letter grade).

Target group/level: {level}
Text type: {text_type}

Return ONLY valid JSON with this schema:
{FEEDBACK_SCHEMA}

Rules:
- {instructions['score']}
- "score" must be an integer 1..10
- Each list must have 3–6 bullet points
- Be concrete and actionable (structure, coherence, vocabulary, grammar, style)
- {instructions['language_issues']}
- Do NOT rewrite the whole text
- If text is too short, explain what is missing and how to expand

Student text:
\"\"\"{text}\"\"\"
"""
    return prompt.strip()
