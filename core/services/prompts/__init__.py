"""Prompt rendering and AI reply parsing."""
from core.services.prompts.prompt_builder import PromptBuilder
from core.services.prompts.response_parser import parse_questions_response

__all__ = ["PromptBuilder", "parse_questions_response"]
