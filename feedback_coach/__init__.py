"""
Feedback Coach Package
======================

Flask-based backend that turns a student text (typed or uploaded) into
structured, non-graded writing feedback.

Structure:
- routes/: API route blueprints
- services/: extraction, prompt building, completion providers, normalization
- static/: landing page and feedback tool
- config.py: Configuration management
- errors.py: Typed request errors
"""

from .config import config, Config

__version__ = "1.0.0"

__all__ = ['config', 'Config']
