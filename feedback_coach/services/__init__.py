"""
Feedback Coach Services
=======================

Pipeline stages for one feedback request.

Services:
- extraction_service: uploaded file -> plain text
- prompt_builder: text + metadata -> instruction prompt
- providers: prompt -> raw completion (deepseek, ollama, demo)
- normalizer: raw completion -> schema-valid feedback dict
- feedback_service: runs the stages in order
"""

# Services are imported directly when needed to avoid circular imports
# Example: from feedback_coach.services.feedback_service import generate_feedback

__all__ = [
    'extraction_service',
    'prompt_builder',
    'providers',
    'normalizer',
    'feedback_service',
]
