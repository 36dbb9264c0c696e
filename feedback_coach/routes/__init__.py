"""
Feedback Coach API Routes
=========================

Usage:
    from feedback_coach.routes import register_routes
    register_routes(app)
"""
from .feedback_routes import feedback_bp


def register_routes(app):
    """Register all route blueprints with the Flask app."""
    app.register_blueprint(feedback_bp)


__all__ = [
    'register_routes',
    'feedback_bp',
]
