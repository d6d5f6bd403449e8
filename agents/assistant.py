from utils import settings
from utils.errors import ShowcaseValidationError
from utils.llm import TextCompletionProvider

GREETING = ("Hi! I'm your AI Problem Solver. I can help you with project ideas, coding issues, "
            "best practices, and more. What would you like help with?")

QUICK_SUGGESTIONS = (
    "Project Ideas for my Year",
    "How to Solve Coding Errors",
    "Best Practices for Documentation",
)

SYSTEM_PROMPT = (
    "You are the AI Problem Solver of a campus project showcase. You help students with "
    "project ideas, coding issues, documentation and best practices.\n"
    "Answer in plain text, in a few short paragraphs or a numbered list. "
    "Suggest concrete next steps, and point students to peers or similar projects "
    "when collaboration would help."
)


class ProblemSolverAgent:
    """One question in, one answer out. No conversation memory is kept."""

    def __init__(self, provider: TextCompletionProvider,
                 temperature: float | None = None, max_tokens: int | None = None):
        self.provider = provider
        self.temperature = settings.codegen_temperature() if temperature is None else temperature
        self.max_tokens = settings.codegen_max_tokens() if max_tokens is None else max_tokens

    def reply(self, message) -> str:
        text = message.strip() if isinstance(message, str) else ""
        if not text:
            raise ShowcaseValidationError("Message is required")
        answer = self.provider.complete(
            SYSTEM_PROMPT,
            text,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return (answer or "").strip()
