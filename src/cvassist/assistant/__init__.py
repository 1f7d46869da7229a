"""CV-aware prompt building and generation."""

from cvassist.assistant.service import CVAssistant

__all__ = [
    "CVAssistant",
]
