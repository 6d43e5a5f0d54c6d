from __future__ import annotations
import pyperclip
from rich.markup import escape

from entity_agent.config import console


def copy_to_clipboard(text: str) -> bool:
    """클립보드 복사. 실패해도 예외를 올리지 않고 경고 후 False."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        console.print(f"[yellow]Clipboard unavailable:[/yellow] {escape(str(e))}")
        return False
    return True
