"""Prompt generation use case: three fixed templates."""

from demo_server.errors import InvalidArgumentError, NotFoundError
from demo_server.ports.inbound import Prompt, PromptArgument, PromptMessage
from demo_server.ports.outbound import Logger, NoteRepository

HELPFUL_ASSISTANT = "helpful_assistant"
CODE_REVIEWER = "code_reviewer"
SUMMARIZE_NOTES = "summarize_notes"

_PROMPTS = (
    Prompt(
        name=HELPFUL_ASSISTANT,
        description="A helpful and friendly assistant persona",
        arguments=[
            PromptArgument(
                "task", "The task to help with", required=False, default="general assistance"
            ),
        ],
    ),
    Prompt(
        name=CODE_REVIEWER,
        description="Review code and provide constructive feedback",
        arguments=[
            PromptArgument("language", "Programming language", required=True),
            PromptArgument("code", "Code to review", required=True),
        ],
    ),
    Prompt(
        name=SUMMARIZE_NOTES,
        description="Summarize all notes in the system",
    ),
)

_HELPFUL_ASSISTANT_TEMPLATE = (
    "You are a helpful, friendly, and knowledgeable assistant. "
    "Please help me with the following task:\n\n{task}\n\n"
    "Provide clear, accurate, and actionable guidance."
)

_CODE_REVIEWER_TEMPLATE = (
    "Please review the following {language} code and provide constructive feedback:\n\n"
    "```{language}\n{code}\n```\n\n"
    "Consider:\n"
    "- Code quality and readability\n"
    "- Potential bugs or issues\n"
    "- Performance concerns\n"
    "- Best practices\n"
    "- Suggestions for improvement"
)

_NO_NOTES_TEXT = (
    "There are no notes to summarize. "
    "Please create some notes first using the create_note tool."
)


class PromptService:
    def __init__(self, repository: NoteRepository, logger: Logger) -> None:
        self._repository = repository
        self._logger = logger

    def list_prompts(self) -> list[Prompt]:
        return list(_PROMPTS)

    def get_prompt(self, name: str) -> Prompt:
        for prompt in _PROMPTS:
            if prompt.name == name:
                return prompt
        raise NotFoundError(f"Unknown prompt: {name}")

    def generate_prompt(self, name: str, arguments: dict[str, str]) -> list[PromptMessage]:
        prompt = self.get_prompt(name)
        self._logger.info(f"Generating prompt: {name}")
        values = self._resolve_arguments(prompt, arguments)

        if name == HELPFUL_ASSISTANT:
            text = _HELPFUL_ASSISTANT_TEMPLATE.format(**values)
        elif name == CODE_REVIEWER:
            text = _CODE_REVIEWER_TEMPLATE.format(**values)
        else:
            text = self._summarize_notes_text()
        return [PromptMessage(role="user", text=text)]

    @staticmethod
    def _resolve_arguments(prompt: Prompt, arguments: dict[str, str]) -> dict[str, str]:
        """Apply defaults for missing optional arguments; reject missing required ones."""
        values: dict[str, str] = {}
        for argument in prompt.arguments:
            if argument.name in arguments:
                values[argument.name] = arguments[argument.name]
            elif argument.required:
                raise InvalidArgumentError(
                    f"Missing required argument '{argument.name}' for prompt {prompt.name}"
                )
            else:
                values[argument.name] = argument.default or ""
        return values

    def _summarize_notes_text(self) -> str:
        notes = sorted(self._repository.find_all(), key=lambda n: n.id.value)
        if not notes:
            return _NO_NOTES_TEXT

        parts = ["Please provide a concise summary of the following notes:\n\n"]
        for note in notes:
            parts.append(f"**{note.title}** (ID: {note.id})\n{note.content}\n\n---\n\n")
        return "".join(parts)
