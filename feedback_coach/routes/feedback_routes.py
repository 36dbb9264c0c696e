"""
Feedback API routes.
Accepts typed text or an uploaded file and returns structured feedback.
"""
import logging
from flask import Blueprint, current_app, jsonify, request

from feedback_coach.errors import FeedbackError, ProviderError, ProviderUnavailable
from feedback_coach.services.extraction_service import UploadedDocument
from feedback_coach.services.feedback_service import generate_feedback, normalize_language

logger = logging.getLogger(__name__)

feedback_bp = Blueprint('feedback', __name__)

SERVER_ERROR = "Serverfehler"


def _get_config():
    return current_app.config['COACH_CONFIG']


def _read_upload():
    """Wrap the multipart "file" field, or None if no file was attached."""
    upload = request.files.get('file')
    if upload is None or not upload.filename:
        return None
    data = upload.read()
    return UploadedDocument(data=data, mimetype=upload.mimetype, size=len(data))


@feedback_bp.route('/api/feedback', methods=['POST'])
def create_feedback():
    """Generate writing feedback for a student text."""
    cfg = _get_config()
    lang = normalize_language(request.form.get('lang'))

    try:
        result = generate_feedback(
            text=request.form.get('text', ''),
            document=_read_upload(),
            text_type=request.form.get('textType'),
            level=request.form.get('level'),
            lang=lang,
            cfg=cfg,
        )
    except (ProviderUnavailable, ProviderError) as e:
        logger.error("Provider failure (%s): %s", type(e).__name__, e.details)
        return jsonify({"error": SERVER_ERROR, "details": e.message_for(lang)}), 500
    except FeedbackError as e:
        logger.info("Rejected feedback request (%s): %s", type(e).__name__, e)
        return jsonify({"error": e.message_for(lang)}), e.status_code
    except Exception:
        logger.exception("Unexpected error while generating feedback")
        return jsonify({"error": SERVER_ERROR, "details": FeedbackError().message_for(lang)}), 500

    return jsonify(result)


@feedback_bp.route('/api/health')
def health():
    """Report provider selection (never the credential itself)."""
    cfg = _get_config()
    return jsonify({
        "status": "ok",
        "provider": cfg.provider,
        "demo_mode": cfg.demo_active,
        "max_file_mb": cfg.max_file_mb,
    })
