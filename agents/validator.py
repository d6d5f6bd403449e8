# agents/validator.py


class PromptValidatorAgent:
    """
    First node of the generation graph.
    Normalizes state["prompt"] and records state["error"] when it is unusable,
    so the graph can stop before the upstream model is called.
    """

    def validate_prompt(self, state: dict):
        raw = state.get("prompt")
        prompt = raw.strip() if isinstance(raw, str) else ""

        if not prompt:
            return {**state, "prompt": "", "valid": False, "error": "Prompt is required"}

        # the model sees the prompt as typed; blank-ness is judged on the trimmed text
        return {**state, "prompt": raw, "valid": True, "error": None}
