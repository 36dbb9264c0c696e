"""
Shared test fixtures for the feedback coach.
Builds PDF/DOCX/image uploads in memory and swaps completion providers
for fakes. Zero network calls.
"""
import io
import os
import pytest

from feedback_coach.config import Config

SAMPLE_TEXT = (
    "In my essay I argue that school uniforms reduce pressure on students, "
    "because nobody has to compete over expensive clothes every morning."
)

WELL_FORMED_FEEDBACK = {
    "score": 6,
    "score_explanation": "Clear position, thin evidence.",
    "strengths": ["Clear thesis", "Readable sentences", "Logical order"],
    "improvements": ["Add evidence", "Add a counterargument", "Vary sentence openings"],
    "language_issues": {
        "grammar": ["Comma splices", "Tense shifts", "Missing articles"],
        "spelling": ["their/there", "Capitalisation", "Double consonants"],
    },
    "next_steps": ["Find one statistic", "Write a rebuttal", "Reread aloud"],
    "mini_exercise": "Rewrite two comma splices as separate sentences.",
}


class FakeProvider:
    """Completion provider returning a fixed reply and recording prompts."""

    name = "fake"

    def __init__(self, reply=""):
        self.reply = reply
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def cfg():
    """Config with a hosted provider selected and demo mode off."""
    c = Config()
    c.update({
        "provider": "deepseek",
        "demo_mode": False,
        "deepseek_api_key": "test-key",
        "max_file_mb": 1,
    })
    return c


@pytest.fixture
def demo_cfg(cfg):
    cfg.demo_mode = True
    return cfg


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def use_fake_provider(monkeypatch, fake_provider):
    """Route every provider lookup in the feedback service to fake_provider."""
    import feedback_coach.services.feedback_service as fs
    monkeypatch.setattr(fs, "get_provider", lambda cfg, lang="de": fake_provider)
    return fake_provider


@pytest.fixture
def app(cfg):
    from feedback_coach.app import create_app
    flask_app = create_app(cfg)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pdf_bytes():
    """Single-page PDF with a text layer."""
    import fitz
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Uniforms reduce peer pressure.")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def empty_pdf_bytes():
    """PDF page without any text layer (like a scan)."""
    import fitz
    doc = fitz.open()
    doc.new_page()
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def docx_bytes():
    from docx import Document
    doc = Document()
    doc.add_paragraph("Uniforms reduce peer pressure.")
    doc.add_paragraph("They also save families money.")
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture
def large_png_bytes():
    """Noise PNG well above the OCR size floor (noise does not compress)."""
    from PIL import Image
    image = Image.frombytes("RGB", (200, 200), os.urandom(200 * 200 * 3))
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def small_png_bytes():
    from PIL import Image
    image = Image.new("RGB", (10, 10), "white")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def well_formed_feedback():
    import copy
    return copy.deepcopy(WELL_FORMED_FEEDBACK)
