#!/usr/bin/env python3
"""
Feedback Coach - AI writing feedback for students
=================================================
Run: python3 -m feedback_coach.app
Then open: http://localhost:3000
"""
import logging

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from feedback_coach.config import STATIC_DIR, config as default_config
from feedback_coach.errors import OversizedUpload
from feedback_coach.routes import register_routes
from feedback_coach.services.feedback_service import normalize_language

logger = logging.getLogger(__name__)

# Multipart framing and the other form fields ride on top of the file itself
FORM_OVERHEAD_BYTES = 1024 * 1024


def create_app(cfg=None):
    """Build the Flask app for the given configuration (global config by default)."""
    cfg = cfg or default_config

    app = Flask(__name__, static_folder=str(STATIC_DIR), static_url_path='/static')
    app.config['COACH_CONFIG'] = cfg
    app.config['MAX_CONTENT_LENGTH'] = cfg.max_file_bytes + FORM_OVERHEAD_BYTES
    CORS(app)

    register_routes(app)

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(e):
        lang = normalize_language(request.args.get('lang'))
        return jsonify({"error": OversizedUpload(cfg.max_file_mb).message_for(lang)}), 413

    @app.route('/')
    def serve_landing():
        """Landing page."""
        return send_from_directory(app.static_folder, 'index.html')

    @app.route('/tool')
    def serve_tool():
        """Feedback tool page."""
        return send_from_directory(app.static_folder, 'tool.html')

    return app


def log_startup(cfg):
    logger.info("Server starting...")
    logger.info("PORT: %s", cfg.port)
    logger.info("PROVIDER: %s", cfg.provider)
    logger.info("DEMO_MODE: %s", cfg.demo_mode)
    logger.info("DEEPSEEK key loaded? %s", bool(cfg.deepseek_api_key))
    logger.info("MAX_FILE_MB: %s", cfg.max_file_mb)


def main():
    cfg = default_config
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_startup(cfg)

    app = create_app(cfg)
    logger.info("Server running on %s:%s", cfg.host, cfg.port)
    app.run(host=cfg.host, port=cfg.port, debug=False)


if __name__ == '__main__':
    main()
