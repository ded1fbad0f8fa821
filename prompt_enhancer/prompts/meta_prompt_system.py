"""Fixed text of the meta-prompt sent as the system message."""

META_PROMPT_PREAMBLE: str = (
    "You are an expert prompt engineer. "
    "Refine the user's prompt based on these key principles:\n\n"
)

STRUCTURAL_ELEMENTS_HEADER: str = "Key Structural Guidelines:\n\n"

ANTI_PATTERNS_HEADER: str = "Common Mistakes to Avoid:\n\n"

TASK_GUIDES_HEADER: str = "Task-Specific Guidance:\n\n"

EXAMPLE_TRANSFORMATION_HEADER: str = "Example Transformation:"

CLOSING_INSTRUCTION: str = (
    "Apply these principles to enhance the user's prompt, making it more specific, "
    "structured, and effective for the target AI platform."
)
