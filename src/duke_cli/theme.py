"""Terminal presentation for Duke: console, banners and reply framing.

Replies from the session are plain strings. This module decides how they
look on screen; nothing in the interpreter depends on it.
"""

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from .config import ConfigModel

DUKE_LOGO = (
    " ____        _        \n"
    "|  _ \\ _   _| | _____ \n"
    "| | | | | | | |/ / _ \\\n"
    "| |_| | |_| |   <  __/\n"
    "|____/ \\__,_|_|\\_\\___|"
)

WELCOME_MESSAGE = "Hello! I'm Duke\nWhat can I do for you?"
GOODBYE_MESSAGE = "Bye. Hope to see you again soon!"

DUKE_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'muted': '#4F5B66',
    'border': '#41505E',
}

DUKE_THEME = Theme({
    'primary': f"{DUKE_COLORS['primary']} bold",
    'accent': f"{DUKE_COLORS['accent']}",
    'muted': f"{DUKE_COLORS['muted']}",
    'border': f"{DUKE_COLORS['border']}",
})


def get_console(config: ConfigModel) -> Console:
    """Get a console with the Duke theme applied."""
    return Console(theme=DUKE_THEME, no_color=config.no_color, highlight=False, emoji=False)


def format_reply(message: str, config: ConfigModel) -> str:
    """Prefix every line of ``message`` with the reply indent."""
    indent = config.reply_indent
    return indent + message.replace("\n", "\n" + indent)


def print_reply(console: Console, message: str, config: ConfigModel) -> None:
    """Print a reply between an underscore and a dash divider."""
    console.print("_" * config.divider_width, style="border", soft_wrap=True)
    # Bypasses rich rendering: tabs stay tabs and "[T][ ]" is not read as markup
    console.file.write(format_reply(message, config) + "\n")
    console.file.flush()
    console.print("-" * config.divider_width, style="border", soft_wrap=True)


def show_welcome(console: Console, config: ConfigModel) -> None:
    """Display the logo banner followed by the greeting."""
    if config.show_banner:
        banner = Panel(
            Align.center(Text(DUKE_LOGO, style="primary")),
            title="[accent]Welcome to[/accent]",
            subtitle="[muted]A variant[/muted]",
            border_style="border",
            padding=(1, 2),
            width=config.divider_width,
        )
        console.print(banner)
        console.print("." * config.divider_width, style="muted", soft_wrap=True)
    print_reply(console, WELCOME_MESSAGE, config)


def show_goodbye(console: Console, config: ConfigModel) -> None:
    print_reply(console, GOODBYE_MESSAGE, config)
