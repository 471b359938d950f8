"""Shared fakes for the external search and language model services"""

from typing import Any, Callable, Dict, List, Optional, Union

import pytest
import requests

from nomad_sensei.interfaces.llm_interface import LLMInterface
from nomad_sensei.interfaces.search_interface import SearchInterface
from nomad_sensei.models.travel_models import SenseiConfig


def completion(content: str) -> Dict[str, Any]:
    return {"choices": [{"message": {"content": content}}]}


class FakeResponse:
    """Stand-in for requests.Response"""

    def __init__(self, status_code: int = 200, payload: Any = None, json_error: bool = False):
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self.json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records POSTs and answers them through a handler keyed on the JSON body"""

    def __init__(self, handler: Callable[[Dict], Union[FakeResponse, Exception]]):
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        outcome = self.handler(json)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeLLM(LLMInterface):
    """Replies with queued contents; queued exceptions are raised, dicts returned as-is"""

    def __init__(self, replies: List[Any]):
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    def chat(self, messages, temperature=None, max_tokens=None, model=None):
        self.calls.append({
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "model": model,
        })
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return reply
        return completion(reply)


class FakeSearch(SearchInterface):
    """Serves canned results per query; unknown queries return nothing"""

    def __init__(self, results: Optional[Dict[str, Any]] = None):
        self.results = results or {}
        self.calls: List[Dict[str, Any]] = []

    def search(self, query, max_results=10, days=None):
        self.calls.append({"query": query, "max_results": max_results, "days": days})
        outcome = self.results.get(query, [])
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)


@pytest.fixture
def config() -> SenseiConfig:
    return SenseiConfig(openai_api_key="sk-test", tavily_api_key="tvly-test")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return b"\xff\xd8\xff\xe0" + b"\x00" * 16
