

class CodeGenState(dict):
    """
    Shared state between the nodes of the generation graph.
    """
    prompt: str
    valid: bool
    error: str
    code: str
    language: str
