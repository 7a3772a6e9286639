"""Text splitting utilities."""
import re


def split_into_blocks(text: str | None) -> list[str]:
    """Split text on blank lines, stripping whitespace, removing empty blocks."""
    if not text:
        return []
    blocks = re.split(r"\n\s*\n", text.strip())
    return [b.strip() for b in blocks if b.strip()]
