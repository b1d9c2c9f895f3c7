"""Line prompts for interactive installation."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from utils.tui.theme import Theme


async def ask(message: str) -> str:
    """Prompt for one line of input and return it stripped.

    Raises:
        KeyboardInterrupt: On Ctrl-C
        EOFError: On Ctrl-D / closed stdin
    """
    session: PromptSession[str] = PromptSession(
        style=Style.from_dict(Theme.get_prompt_toolkit_style())
    )
    answer = await session.prompt_async(FormattedText([("class:prompt", message)]))
    return answer.strip()
