"""``prompts/list`` and ``prompts/get``."""

from typing import Any

from pydantic import BaseModel

from demo_server.ports.inbound import PromptGenerationUseCase
from demo_server.protocol.jsonrpc import parse_params


class GetPromptParams(BaseModel):
    name: str
    arguments: dict[str, str] | None = None


class PromptHandler:
    def __init__(self, prompts: PromptGenerationUseCase) -> None:
        self._prompts = prompts

    def list_prompts(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return {
            "prompts": [
                {
                    "name": prompt.name,
                    "description": prompt.description,
                    "arguments": [
                        {
                            "name": argument.name,
                            "description": argument.description,
                            "required": argument.required,
                        }
                        for argument in prompt.arguments
                    ],
                }
                for prompt in self._prompts.list_prompts()
            ]
        }

    def get_prompt(self, params: dict[str, Any]) -> dict[str, Any]:
        request = parse_params(GetPromptParams, params, "prompts/get")
        prompt = self._prompts.get_prompt(request.name)
        messages = self._prompts.generate_prompt(request.name, request.arguments or {})
        return {
            "description": prompt.description,
            "messages": [
                {"role": message.role, "content": {"type": "text", "text": message.text}}
                for message in messages
            ],
        }
