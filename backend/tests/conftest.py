"""Shared fixtures for the translation pipeline tests.

The provider is replaced by a scripted gateway. By default it "translates"
by prefixing every translatable string with ``[<lang>] ``; tests can queue
raw replies or exceptions for specific calls.
"""

import json
from typing import Any, Callable, List, Union

import pytest

from page_translator.core.section_classifier import SectionFieldClassifier
from page_translator.core.translation.models import LLMResponse, PromptBundle
from page_translator.core.translation.pipeline import (
    LLMGateway,
    PipelineConfig,
    TranslationPipeline,
)

Reply = Union[str, LLMResponse, Exception, Callable[[PromptBundle], str]]


def fake_translate(payload: Any, lang: str) -> Any:
    """Prefix translatable strings, leave everything else alone."""
    if isinstance(payload, list):
        return [fake_translate(item, lang) for item in payload]
    if not isinstance(payload, dict):
        return payload
    translated = {}
    for key, value in payload.items():
        if key in SectionFieldClassifier.TEXT_FIELDS and isinstance(value, str):
            translated[key] = f"[{lang}] {value}"
        elif key in SectionFieldClassifier.LIST_FIELDS and isinstance(value, list):
            translated[key] = [f"[{lang}] {item}" for item in value]
        else:
            translated[key] = value
    return translated


def echo_reply(bundle: PromptBundle) -> str:
    lang = bundle.template_variables["target_language"]
    return json.dumps(fake_translate(json.loads(bundle.user_prompt), lang))


class FakeGateway(LLMGateway):
    """Gateway that replays queued replies, then falls back to echo_reply."""

    def __init__(self):
        self.replies: List[Reply] = []
        self.calls: List[PromptBundle] = []

    def queue(self, *replies: Reply) -> "FakeGateway":
        self.replies.extend(replies)
        return self

    async def call(self, bundle: PromptBundle) -> LLMResponse:
        self.calls.append(bundle)
        reply: Reply = self.replies.pop(0) if self.replies else echo_reply
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, LLMResponse):
            return reply
        if callable(reply):
            reply = reply(bundle)
        return LLMResponse(content=reply, model=bundle.model)


def make_section(index: int, **overrides: Any) -> dict:
    section = {
        "id": f"s{index}",
        "order": index,
        "type": "text",
        "content": f"<p>Paragraph <strong>{index}</strong></p>",
        "heading": f"Heading {index}",
        "imageUrl": f"https://cdn.example.com/{index}.jpg",
        "imagePosition": "left",
        "style": "normal",
    }
    section.update(overrides)
    return section


@pytest.fixture
def gateway():
    """Fresh scripted gateway."""
    return FakeGateway()


@pytest.fixture
def pipeline(gateway):
    """Pipeline wired to the scripted gateway with batch size 5."""
    config = PipelineConfig(
        api_key="test-key",
        base_url="https://gateway.test/v1",
        batch_size=5,
    )
    return TranslationPipeline(config, gateway=gateway)


@pytest.fixture
def sections():
    """Twelve sections: three batches of 5, 5 and 2."""
    return [make_section(i) for i in range(12)]


@pytest.fixture
def section_factory():
    """Build a section with optional field overrides."""
    return make_section


@pytest.fixture
def echo():
    """Reply that translates whatever the request carried."""
    return echo_reply
