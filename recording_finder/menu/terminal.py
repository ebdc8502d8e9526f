"""Terminal collaborators for the selection menu: rich rendering and prompt_toolkit keys."""

from typing import Sequence

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import FormattedTextControl, Layout, Window
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from recording_finder.menu.state import MenuEvent, SelectionMode, SelectionState

CURSOR_MARKER = ">"
CHECKED_MARKER = "[x]"
UNCHECKED_MARKER = "[ ]"


def format_option_line(option: str, index: int, state: SelectionState) -> str:
    """Return the plain text line for one option: cursor marker, check marker, label."""
    cursor = CURSOR_MARKER if index == state.current_index else " "
    check = CHECKED_MARKER if index in state.selected else UNCHECKED_MARKER
    return f"{cursor} {check} {option}"


class RichMenuRenderer:
    """Clear the screen and draw the menu with a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, title: str, options: Sequence[str], state: SelectionState) -> None:
        self.console.clear()
        self.console.print(f"[bold]{escape(title)}[/bold]")
        if state.mode is SelectionMode.MULTI:
            self.console.print("[dim]Up/Down to move, Space to toggle, Enter to confirm[/dim]")
        else:
            self.console.print("[dim]Up/Down to move, Space to select, Enter to confirm[/dim]")
        if not options:
            self.console.print("[yellow](no options)[/yellow]")
        for index, option in enumerate(options):
            line = escape(format_option_line(option, index, state))
            if index == state.current_index:
                self.console.print(f"[reverse]{line}[/reverse]")
            else:
                self.console.print(line)


def build_key_bindings() -> KeyBindings:
    """Key bindings mapping terminal keys to menu events."""
    kb = KeyBindings()

    @kb.add("up")
    @kb.add("k")
    def move_up(event):
        event.app.exit(result=MenuEvent.UP)

    @kb.add("down")
    @kb.add("j")
    def move_down(event):
        event.app.exit(result=MenuEvent.DOWN)

    @kb.add("space")
    def toggle(event):
        event.app.exit(result=MenuEvent.TOGGLE)

    @kb.add("enter", eager=True)
    @kb.add("c-m", eager=True)  # Enter (control-m on some terminals)
    def confirm(event):
        event.app.exit(result=MenuEvent.CONFIRM)

    @kb.add("c-c")
    def interrupt(event):
        event.app.exit(exception=KeyboardInterrupt)

    return kb


class PromptToolkitKeyReader:
    """Read one key press at a time through a minimal prompt_toolkit application."""

    def __init__(self) -> None:
        self._key_bindings = build_key_bindings()

    def read_event(self) -> MenuEvent:
        app: Application[MenuEvent] = Application(
            layout=Layout(Window(FormattedTextControl(""), height=1)),
            key_bindings=self._key_bindings,
            full_screen=False,
            erase_when_done=True,
        )
        return app.run()


class RichTextPrompt:
    """Ask the operator for free text."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, question: str) -> str:
        return Prompt.ask(question, console=self.console, default="", show_default=False)
