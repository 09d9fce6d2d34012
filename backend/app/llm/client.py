"""LangChain ChatAnthropic wrapper: send text (and optionally one image), get text back."""

from __future__ import annotations

import base64
import logging

from app.config import settings
from app.llm.model_router import get_model_for_task

logger = logging.getLogger(__name__)


class LLMNotConfiguredError(RuntimeError):
    """No API key is set, so nothing can be sent to the model."""


class LLMRequestError(RuntimeError):
    """The model call itself failed."""


def is_configured() -> bool:
    return bool(settings.anthropic_api_key)


def _content_text(content) -> str:
    if isinstance(content, str):
        return content
    # Content blocks: keep only the text ones
    return "".join(
        block.get("text", "") for block in content if isinstance(block, dict)
    )


async def get_text_response(
    prompt: str,
    image: bytes | None = None,
    media_type: str = "image/png",
    task: str = "generate",
    max_tokens: int = 4096,
) -> str:
    """Relay prompt (+ image) to the model and return its raw text reply."""
    if not is_configured():
        raise LLMNotConfiguredError("AI model API key not configured")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage

    model_id = get_model_for_task(task)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        max_tokens=max_tokens,
    )

    if image is None:
        message = HumanMessage(content=prompt)
    else:
        message = HumanMessage(
            content=[
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": media_type,
                        "data": base64.b64encode(image).decode("ascii"),
                    },
                },
                {"type": "text", "text": prompt},
            ]
        )

    try:
        response = await llm.ainvoke([message])
    except Exception as e:
        logger.warning("Model call failed for task %s: %s", task, e)
        raise LLMRequestError(str(e)) from e

    logger.info("Model %s answered task %s", model_id, task)
    return _content_text(response.content)
