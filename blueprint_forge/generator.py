"""Hosted generator client — asks a remote model for complete game code.

The orchestrator injects a generator callable matching the protocol:

    async def __call__(self, prompt, category, *, packs=None) -> GeneratorResult: ...

Two implementations are provided:

    HttpGenerator  — POSTs {"prompt", "category", "kenneyPacks"?} to the
                     configured endpoint and reads {"code"?, "content"?}.
    EchoGenerator  — returns the prompt as content. Useful for wiring tests
                     without a running endpoint.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

import httpx
from pydantic import BaseModel

from blueprint_forge.kenney import KenneyPack

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[a-zA-Z0-9-]*\n([\s\S]*?)```$")


class GeneratorResult(BaseModel):
    content: str = ""
    code: str | None = None

    @property
    def game_code(self) -> str | None:
        """`code` when the endpoint sent it, else `content`; None when both are empty."""
        return self.code or self.content or None


# ---------------------------------------------------------------------------
# Protocol — every generator implementation must match this signature
# ---------------------------------------------------------------------------

class Generator(Protocol):
    async def __call__(
        self, prompt: str, category: str, *, packs: list[KenneyPack] | None = None
    ) -> GeneratorResult: ...


def strip_code_fence(text: str) -> str:
    """Remove one surrounding ```lang fence, if the whole text is fenced."""
    trimmed = text.strip()
    match = _FENCE_RE.match(trimmed)
    return match.group(1).strip() if match else trimmed


# ---------------------------------------------------------------------------
# HttpGenerator — connects to the hosted endpoint
# ---------------------------------------------------------------------------

class HttpGenerator:
    """Async HTTP client for the hosted content generator.

    Args:
        url:      Full endpoint URL, e.g. "https://example.com/functions/v1/generate-content".
        api_key:  Bearer token, or empty string if not required.
        timeout:  HTTP timeout in seconds. Defaults to 120.
    """

    def __init__(self, url: str, api_key: str = "", timeout: float = 120.0) -> None:
        self._url = url
        self._api_key = api_key
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _build_body(self, prompt: str, category: str, packs: list[KenneyPack] | None) -> dict:
        body: dict = {"prompt": prompt, "category": category}
        if packs:
            body["kenneyPacks"] = [p.model_dump(mode="json", by_alias=True) for p in packs]
        return body

    def _parse_response(self, data: dict) -> GeneratorResult:
        code = data.get("code")
        content = data.get("content")
        if not isinstance(code, str) and not isinstance(content, str):
            raise GeneratorError("Aucun code généré par le modèle IA")
        result = GeneratorResult(
            content=strip_code_fence(content) if isinstance(content, str) else "",
            code=strip_code_fence(code) if isinstance(code, str) else None,
        )
        if result.game_code is None:
            raise GeneratorError("Aucun code généré par le modèle IA")
        return result

    async def __call__(
        self, prompt: str, category: str, *, packs: list[KenneyPack] | None = None
    ) -> GeneratorResult:
        body = self._build_body(prompt, category, packs)
        logger.info("generator call category=%s url=%s prompt_len=%d", category, self._url, len(prompt))

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(self._url, json=body, headers=self._headers())
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise GeneratorError(f"Cannot connect to generator at {self._url}") from e
        except httpx.HTTPStatusError as e:
            raise GeneratorError(
                f"Generator returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise GeneratorError(f"Generator timed out after {self._timeout}s") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise GeneratorError("Generator returned a non-JSON response") from e
        if not isinstance(data, dict):
            raise GeneratorError("Unexpected response format from generator")
        result = self._parse_response(data)
        logger.debug("generator response len=%d", len(result.game_code or ""))
        return result


# ---------------------------------------------------------------------------
# EchoGenerator — returns the prompt unchanged
# ---------------------------------------------------------------------------

class EchoGenerator:
    """Returns the prompt as content. No network calls."""

    async def __call__(
        self, prompt: str, category: str, *, packs: list[KenneyPack] | None = None
    ) -> GeneratorResult:
        logger.debug("EchoGenerator category=%s prompt_len=%d", category, len(prompt))
        return GeneratorResult(content=prompt)


# ---------------------------------------------------------------------------
# GeneratorError — raised by HttpGenerator for all connection and protocol failures
# ---------------------------------------------------------------------------

class GeneratorError(RuntimeError):
    """Raised when the generator cannot be reached or returns no usable code."""
