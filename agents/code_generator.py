from utils import settings
from utils.llm import TextCompletionProvider

GENERATED_LANGUAGE = "jsx"

SYSTEM_PROMPT = """You are an expert code generator. Generate clean, well-commented, production-ready code based on user prompts.

IMPORTANT RULES:
1. Generate ONLY the code, no explanations or markdown
2. For UI components, generate React/JSX code
3. Use Tailwind CSS for styling (include className attributes)
4. Make sure React components export a default App component
5. Keep code concise but readable
6. Include helpful comments

Example output format for React:
export default function App() {
  return (
    <div className="min-h-screen bg-gray-50">
      {/* Your component here */}
    </div>
  );
}"""

USER_TEMPLATE = "Generate React/JSX code for: {prompt}"


class CodeGeneratorAgent:
    def __init__(self, provider: TextCompletionProvider,
                 temperature: float | None = None, max_tokens: int | None = None):
        self.provider = provider
        self.temperature = settings.codegen_temperature() if temperature is None else temperature
        self.max_tokens = settings.codegen_max_tokens() if max_tokens is None else max_tokens

    def generate_code(self, state: dict):
        req = state.get("prompt", "")
        text = self.provider.complete(
            SYSTEM_PROMPT,
            USER_TEMPLATE.format(prompt=req),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        state["code"] = (text or "").strip()
        state["language"] = GENERATED_LANGUAGE
        return state
