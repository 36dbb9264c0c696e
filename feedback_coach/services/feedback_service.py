"""
Feedback Service
================
Runs one feedback request end to end:

    extract (if a file was uploaded) -> length check -> demo short-circuit
    -> build prompt -> provider.complete -> normalize

Errors are raised as feedback_coach.errors types; the route maps them to
HTTP responses.
"""
import logging

from feedback_coach.errors import InsufficientContent, OversizedUpload
from feedback_coach.services.demo_responses import demo_response
from feedback_coach.services.extraction_service import extract_text
from feedback_coach.services.normalizer import normalize_feedback
from feedback_coach.services.prompt_builder import build_prompt
from feedback_coach.services.providers import get_provider

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 30
SUPPORTED_LANGUAGES = ("en", "de")
DEFAULT_LANGUAGE = "de"
DEFAULT_TEXT_TYPE = "Essay"
DEFAULT_LEVEL = "Q1"


def normalize_language(lang) -> str:
    lang = (lang or "").strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def resolve_text(text, document, cfg) -> str:
    """Return the trimmed text to review: extracted file content wins over typed text."""
    if document is not None:
        if document.size > cfg.max_file_bytes:
            raise OversizedUpload(cfg.max_file_mb)
        text = extract_text(document)
    return (text or "").strip()


def generate_feedback(text, document, text_type, level, lang, cfg, provider=None) -> dict:
    """
    Produce structured feedback for a student text.

    Parameters:
    - text: typed text (ignored when a document is supplied)
    - document: UploadedDocument or None
    - text_type, level: free labels interpolated into the prompt
    - lang: "en" or "de"
    - cfg: Config
    - provider: CompletionProvider override; selected from cfg when None

    Raises the extraction errors, InsufficientContent, OversizedUpload,
    ProviderUnavailable and ProviderError.
    """
    lang = normalize_language(lang)
    text_type = text_type or DEFAULT_TEXT_TYPE
    level = level or DEFAULT_LEVEL

    content = resolve_text(text, document, cfg)
    if len(content) < MIN_TEXT_LENGTH:
        raise InsufficientContent(f"Text has {len(content)} characters, need {MIN_TEXT_LENGTH}")

    if cfg.demo_active:
        logger.info("Demo mode: serving canned feedback (%s)", lang)
        return demo_response(lang)

    prompt = build_prompt(content, text_type, level, lang)

    if provider is None:
        provider = get_provider(cfg, lang)
    logger.info("Requesting feedback from %s (%d chars, lang=%s)", provider.name, len(content), lang)
    raw = provider.complete(prompt)

    return normalize_feedback(raw, lang)
