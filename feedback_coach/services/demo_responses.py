"""
Canned feedback served in demo mode, keyed by response language.
"""
import copy

DEMO_RESPONSES = {
    "en": {
        "score": 7,
        "score_explanation": (
            "The text is generally clear and structured, but there are some language "
            "and style issues that reduce precision."
        ),
        "strengths": [
            "The introduction makes the topic clear and sets a direction.",
            "Paragraphs mostly follow a logical flow (one main idea per paragraph).",
            "Some linking words connect ideas effectively.",
        ],
        "improvements": [
            "Some sentences are too long; split them for clarity.",
            "Vocabulary is sometimes too general; use more precise terms.",
            "Add a clearer conclusion that summarises your main point.",
        ],
        "language_issues": {
            "grammar": [
                "Inconsistent verb tenses in the body paragraphs",
                "Missing articles (a/an/the) in a few places",
                "Some sentences have unclear word order",
            ],
            "spelling": [
                "Confusion between there/their in one or two places",
                "Minor spelling mistakes in longer words",
                "Check capitalisation at the start of sentences",
            ],
        },
        "next_steps": [
            "Add one counterargument and respond to it briefly.",
            "Replace 3 basic words with more specific vocabulary.",
            "Rewrite your longest sentence into two shorter ones.",
        ],
        "mini_exercise": (
            "Pick 5 sentences and check tense consistency. "
            "Then rewrite 2 long sentences into shorter ones."
        ),
    },
    "de": {
        "score": 7,
        "score_explanation": (
            "Der Text ist insgesamt gut verständlich und logisch aufgebaut, aber "
            "sprachlich/stilistisch noch nicht durchgehend präzise."
        ),
        "strengths": [
            "Die Einleitung macht das Thema klar und gibt eine Richtung vor.",
            "Die Absatzstruktur ist größtenteils logisch (eine Hauptidee pro Absatz).",
            "Teilweise werden passende Konnektoren genutzt, um Gedanken zu verknüpfen.",
        ],
        "improvements": [
            "Einige Sätze sind sehr lang; teile sie für mehr Klarheit.",
            "Der Wortschatz ist stellenweise zu allgemein – nutze präzisere Begriffe.",
            "Ein klareres Fazit würde den Text stärker abrunden.",
        ],
        "language_issues": {
            "grammar": [
                "Unsichere Kommasetzung bei Nebensätzen",
                "Teilweise falsche Verbposition im Hauptsatz",
                "Uneinheitliche Zeitform im Textverlauf",
            ],
            "spelling": [
                "Groß- und Kleinschreibung bei Nomen prüfen",
                "Verwechslung von „das“ und „dass“ möglich",
                "Getrennt- und Zusammenschreibung prüfen",
            ],
        },
        "next_steps": [
            "Füge ein Gegenargument ein und entkräfte es kurz.",
            "Ersetze 3 sehr allgemeine Wörter durch präzisere Alternativen.",
            "Formuliere den längsten Satz in zwei kürzere Sätze um.",
        ],
        "mini_exercise": (
            "Markiere 5 Stellen mit Nebensätzen und setze die Kommas korrekt. "
            "Danach überprüfe 10 Nomen auf Großschreibung."
        ),
    },
}


def demo_response(lang: str) -> dict:
    """Return a fresh copy of the canned feedback for ``lang`` (German otherwise)."""
    return copy.deepcopy(DEMO_RESPONSES["en" if lang == "en" else "de"])
