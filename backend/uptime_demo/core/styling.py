"""
Terminal text styling backed by colorama
"""
from dataclasses import dataclass
from typing import Callable, Optional

import colorama
from colorama import Back, Fore, Style


@dataclass(frozen=True)
class StyleSpec:
    """Display attributes for one line of terminal output"""
    fore: str = ""
    back: str = ""
    bold: bool = False

    @property
    def prefix(self) -> str:
        return (Style.BRIGHT if self.bold else "") + self.fore + self.back


# Signature shared by every string decorator: (text, style) -> styled text
Decorator = Callable[[str, Optional[StyleSpec]], str]


# White bold on blue
INFO_STYLE = StyleSpec(fore=Fore.WHITE, back=Back.BLUE, bold=True)
# Bright green bold
COUNTER_STYLE = StyleSpec(fore=Fore.LIGHTGREEN_EX, bold=True)


def decorate(text: str, style: Optional[StyleSpec]) -> str:
    """Wrap text in ANSI codes for `style`, resetting all attributes after it"""
    if style is None or not style.prefix:
        return text
    return f"{style.prefix}{text}{Style.RESET_ALL}"


def plain(text: str, style: Optional[StyleSpec]) -> str:
    """Decorator that leaves text unstyled"""
    return text


def get_decorator(color: bool = True) -> Decorator:
    """Pick the decorator for console output"""
    if not color:
        return plain
    # No-op outside Windows; enables ANSI handling on legacy consoles
    colorama.just_fix_windows_console()
    return decorate
