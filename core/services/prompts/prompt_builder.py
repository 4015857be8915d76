"""Prompt builder for the study assistant - renders prompts for the client-side AI call."""
from pathlib import Path
from typing import Dict, List, Optional

from core.models.chat import ChatHistoryItem
from core.models.notes import GenerateNotesRequest
from core.models.question import GenerateQuestionsRequest
from core.utils.text_utils import truncate_text

STYLE_INSTRUCTIONS = {
    "summary": "Create a concise summary highlighting the main points and key concepts.",
    "detailed": "Create comprehensive notes with detailed explanations, examples, and elaborations.",
    "outline": "Create a structured outline format with main topics, subtopics, and bullet points.",
}


class PromptBuilder:
    """Formats study material and request parameters into provider prompts."""

    def __init__(self, chat_context_chars: int = 2000):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = Path(__file__).parent / "templates"
        self._cache: Dict[str, str] = {}
        self.chat_context_chars = chat_context_chars

    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        if filename not in self._cache:
            content = (self._prompts_dir / filename).read_text(encoding="utf-8")
            if content.startswith("---\n"):
                parts = content.split("---\n", 2)
                if len(parts) >= 3:
                    content = parts[2]
            self._cache[filename] = content.strip()
        return self._cache[filename]

    def build_questions_prompt(self, request: GenerateQuestionsRequest, text: str) -> str:
        """Build the question generation prompt."""
        return self._load_prompt("questions_prompt.promptly").format(
            count=request.count,
            difficulty=request.difficulty,
            types=", ".join(request.types),
            text=text
        )

    def build_chat_prompt(self, context: List[ChatHistoryItem], document_text: Optional[str] = None) -> str:
        """
        Build the tutor prompt for the latest message in the conversation.

        Args:
            context: Recent messages, oldest first; the last one is answered
            document_text: Study material for document-scoped chats

        Returns:
            Prompt text
        """
        if document_text:
            excerpt = truncate_text(document_text, self.chat_context_chars)
            material = f"You have access to the following study material:\n\n{excerpt}"
        else:
            material = "You provide general tutoring assistance."

        earlier, latest = context[:-1], context[-1] if context else None
        history = ""
        if earlier:
            lines = [
                f"{'Student' if item.role == 'user' else 'Tutor'}: {item.content}"
                for item in earlier
            ]
            history = "\nConversation so far:\n" + "\n".join(lines) + "\n"

        return self._load_prompt("tutor_prompt.promptly").format(
            material=material,
            history=history,
            message=latest.content if latest else ""
        )

    def build_notes_prompt(self, request: GenerateNotesRequest, text: str) -> str:
        """Build the study notes prompt."""
        focus = f"Focus on: {request.chapter}" if request.chapter else "Cover the entire document."
        extras = ""
        if request.include_key_terms:
            extras += "- Include a section with key terms and definitions\n"
        if request.include_examples:
            extras += "- Include relevant examples and case studies\n"

        return self._load_prompt("notes_prompt.promptly").format(
            style=request.style,
            focus=focus,
            style_instructions=STYLE_INSTRUCTIONS[request.style],
            extras=extras,
            text=text
        )
