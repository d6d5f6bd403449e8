import pytest
from types import SimpleNamespace

from fakes import FakeProvider
from graph.codegen_graph import execute_codegen
from utils.errors import PromptRequiredError, UpstreamError
from utils.llm import GroqCompletionProvider, chat


class _FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_groq(content):
    completions = _FakeCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_execute_codegen_returns_code_and_language():
    provider = FakeProvider(text="  export default function App() {}\n")
    assert execute_codegen("a navbar", provider) == {
        "code": "export default function App() {}",
        "language": "jsx",
    }


def test_execute_codegen_stops_before_model_on_blank_prompt():
    provider = FakeProvider()
    with pytest.raises(PromptRequiredError):
        execute_codegen("   ", provider)
    assert provider.calls == []


def test_execute_codegen_propagates_upstream_errors():
    provider = FakeProvider(error=UpstreamError("boom"))
    with pytest.raises(UpstreamError):
        execute_codegen("a navbar", provider)


def test_chat_passes_limits_and_strips_fences():
    client, completions = _fake_groq("```jsx\nexport default function App() {}\n```")
    out = chat(client, "some-model", [{"role": "user", "content": "x"}], max_tokens=2000, temperature=0.7)
    assert out == "export default function App() {}"
    assert completions.kwargs["model"] == "some-model"
    assert completions.kwargs["max_tokens"] == 2000
    assert completions.kwargs["temperature"] == 0.7


def test_chat_rejects_empty_completion():
    client, _ = _fake_groq("   ")
    with pytest.raises(UpstreamError):
        chat(client, "m", [])


def test_provider_without_api_key_fails_as_upstream_error(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    provider = GroqCompletionProvider()
    with pytest.raises(UpstreamError):
        provider.complete("system", "prompt", temperature=0.7, max_tokens=10)
