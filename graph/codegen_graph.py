from langgraph.graph import StateGraph, END
from graph.state import CodeGenState

from agents.validator import PromptValidatorAgent
from agents.code_generator import CodeGeneratorAgent
from utils.errors import PromptRequiredError
from utils.llm import TextCompletionProvider


def _route_after_validate(state: CodeGenState) -> str:
    """
    Blank prompt -> 'fail' (stop, the model is never called)
    Else -> 'pass' (go generate)
    """
    return "pass" if state.get("valid") else "fail"


def build_graph(provider: TextCompletionProvider):
    """
    Workflow:

      validate → (pass → generate → END | fail → END)
    """
    validator = PromptValidatorAgent()
    generator = CodeGeneratorAgent(provider)

    g = StateGraph(CodeGenState)

    # Nodes
    g.add_node("validate", validator.validate_prompt)
    g.add_node("generate", generator.generate_code)

    # Entry
    g.set_entry_point("validate")

    g.add_conditional_edges(
        "validate",
        _route_after_validate,
        {"pass": "generate", "fail": END},
    )
    g.add_edge("generate", END)

    return g.compile()


def execute_codegen(prompt, provider: TextCompletionProvider) -> dict:
    """
    Runner used by FastAPI /generate.
    Raises PromptRequiredError for blank prompts; upstream failures propagate.
    """
    executor = build_graph(provider)

    state = CodeGenState({
        "prompt": prompt,
        "valid": False,
        "error": None,
        "code": "",
        "language": "",
    })

    final = executor.invoke(state)

    if not final.get("valid"):
        raise PromptRequiredError(final.get("error") or "Prompt is required")

    return {
        "code": final.get("code", ""),
        "language": final.get("language", ""),
    }
