"""
Test: Configuration and error messages.
"""
import pytest

from feedback_coach.config import Config
from feedback_coach.errors import (
    ExtractionFailed, FeedbackError, ImageTooSmall, InsufficientContent, OversizedUpload,
    ProviderError, ProviderUnavailable, UnsupportedFormat,
)


class TestConfig:
    def test_max_file_bytes(self):
        c = Config()
        c.max_file_mb = 30
        assert c.max_file_bytes == 30 * 1024 * 1024

    def test_demo_active(self):
        c = Config()
        c.update({"provider": "deepseek", "demo_mode": False})
        assert not c.demo_active
        c.demo_mode = True
        assert c.demo_active
        c.update({"provider": "demo", "demo_mode": False})
        assert c.demo_active

    def test_to_dict_hides_key(self):
        c = Config()
        c.deepseek_api_key = "sk-secret"
        d = c.to_dict()
        assert d["deepseek_key_loaded"] is True
        assert "sk-secret" not in d.values()

    def test_update_ignores_unknown_keys(self):
        c = Config()
        c.update({"not_a_setting": 1, "port": 8080})
        assert c.port == 8080
        assert not hasattr(c, "not_a_setting")


class TestErrors:
    @pytest.mark.parametrize("error_cls", [
        UnsupportedFormat, ExtractionFailed, ImageTooSmall, InsufficientContent,
    ])
    def test_client_errors_are_400(self, error_cls):
        error = error_cls()
        assert error.status_code == 400
        assert error.message_for("en") != error.message_for("de")

    def test_unknown_language_falls_back_to_german(self):
        assert InsufficientContent().message_for("fr") == InsufficientContent.messages["de"]

    def test_oversized_upload(self):
        error = OversizedUpload(30)
        assert error.status_code == 413
        assert error.message_for("de") == "Datei zu groß. Maximal 30 MB erlaubt."
        assert error.message_for("en") == "File too large. Maximum 30 MB allowed."

    @pytest.mark.parametrize("error_cls", [ProviderError, ProviderUnavailable])
    def test_provider_errors_keep_details_out_of_message(self, error_cls):
        error = error_cls(details="upstream said no")
        assert error.status_code == 500
        assert error.details == "upstream said no"
        assert "upstream" not in str(error)
        assert "upstream" not in error.message_for("en")

    def test_custom_message_used_for_str_only(self):
        error = ExtractionFailed("PDF could not be read: broken xref")
        assert str(error) == "PDF could not be read: broken xref"
        assert "xref" not in error.message_for("en")
        assert isinstance(error, FeedbackError)
