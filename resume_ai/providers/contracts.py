"""Wire contracts for the Gemini generateContent endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Part(_Lenient):
    text: Optional[str] = None


class Content(_Lenient):
    parts: list[Part] = []
    role: Optional[str] = None


class Candidate(_Lenient):
    content: Optional[Content] = None
    finishReason: Optional[str] = None


class GenerateContentResponse(_Lenient):
    candidates: list[Candidate] = []

    def first_text(self) -> str:
        """Text of the first part of the first candidate, or ''."""
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text or ""


class GenerationConfigPayload(BaseModel):
    temperature: float
    maxOutputTokens: int
    responseMimeType: str = "text/plain"


class GenerateContentRequest(BaseModel):
    contents: list[Content]
    generationConfig: GenerationConfigPayload

    @classmethod
    def from_prompt(cls, prompt: str, temperature: float, max_tokens: int) -> "GenerateContentRequest":
        return cls(
            contents=[Content(parts=[Part(text=prompt)])],
            generationConfig=GenerationConfigPayload(temperature=temperature, maxOutputTokens=max_tokens),
        )
