"""
Request errors for the feedback pipeline.

Every error carries the HTTP status it maps to and a user-facing message in
each supported response language. Provider errors additionally carry upstream
``details`` that are written to the server log and never returned to callers.
"""

DEFAULT_LANG = "de"


class FeedbackError(Exception):
    """Base class for all pipeline errors."""

    status_code = 500
    messages = {
        "en": "Unexpected server error (see server log).",
        "de": "Unerwarteter Serverfehler (Details im Server-Log).",
    }

    def __init__(self, message: str = None):
        super().__init__(message or self.messages[DEFAULT_LANG])

    def message_for(self, lang: str) -> str:
        return self.messages.get(lang, self.messages[DEFAULT_LANG])


# ── Client input errors (HTTP 400) ─────────────────────────────

class UnsupportedFormat(FeedbackError):
    status_code = 400
    messages = {
        "en": "File type not supported. Please upload TXT, PDF, DOCX, PNG, JPEG or WEBP.",
        "de": "Dateityp nicht unterstützt. Bitte TXT, PDF, DOCX, PNG, JPEG oder WEBP hochladen.",
    }


class ExtractionFailed(FeedbackError):
    status_code = 400
    messages = {
        "en": "The text could not be read from the file. Please check the file or paste the text.",
        "de": "Der Text konnte nicht aus der Datei gelesen werden. Bitte Datei prüfen oder Text einfügen.",
    }


class ImageTooSmall(FeedbackError):
    status_code = 400
    messages = {
        "en": "Image is too small for OCR. Please upload a larger, readable image.",
        "de": "Bild ist zu klein für OCR. Bitte ein größeres/lesbares Bild hochladen.",
    }


class InsufficientContent(FeedbackError):
    status_code = 400
    messages = {
        "en": "Please enter text or upload a file with enough content.",
        "de": "Bitte Text eingeben oder eine Datei mit ausreichend Inhalt hochladen.",
    }


class OversizedUpload(FeedbackError):
    status_code = 413

    def __init__(self, max_file_mb):
        self.max_file_mb = max_file_mb
        self.messages = {
            "en": f"File too large. Maximum {max_file_mb:g} MB allowed.",
            "de": f"Datei zu groß. Maximal {max_file_mb:g} MB erlaubt.",
        }
        super().__init__()


# ── Provider errors (HTTP 500, details logged only) ───────────

class ProviderUnavailable(FeedbackError):
    messages = {
        "en": "The feedback service is not configured or not reachable (see server log).",
        "de": "Der Feedback-Dienst ist nicht konfiguriert oder nicht erreichbar (Details im Server-Log).",
    }

    def __init__(self, message: str = None, details: str = ""):
        self.details = details
        super().__init__(message)


class ProviderError(FeedbackError):
    messages = {
        "en": "The feedback service returned an error (see server log).",
        "de": "Der Feedback-Dienst hat einen Fehler gemeldet (Details im Server-Log).",
    }

    def __init__(self, message: str = None, details: str = ""):
        self.details = details
        super().__init__(message)
