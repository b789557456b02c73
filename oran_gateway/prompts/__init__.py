"""System prompt loading.

The classifier prompt lives in a plain text file next to this module so it can
be versioned or swapped (``SYSTEM_PROMPT_FILE``) without touching code.
"""

from functools import lru_cache
from pathlib import Path
from typing import Union

from oran_gateway.exceptions import PromptNotFoundError


@lru_cache(maxsize=None)
def load_system_prompt(path: Union[str, Path]) -> str:
    """Read the prompt file once; surrounding whitespace is dropped."""
    prompt_path = Path(path)
    try:
        text = prompt_path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise PromptNotFoundError(f"System prompt file not found: {prompt_path}")
    if not text:
        raise PromptNotFoundError(f"System prompt file is empty: {prompt_path}")
    return text
