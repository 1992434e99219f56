"""Small text helpers."""


def multi_line(*lines: str) -> str:
    """Join the given lines with newlines."""
    return "\n".join(lines)