"""
Tests for terminal styling
"""
from colorama import Back, Fore, Style

from uptime_demo.core.styling import (COUNTER_STYLE, INFO_STYLE, StyleSpec,
                                      decorate, get_decorator, plain)


def test_info_style_is_white_bold_on_blue():
    styled = decorate("I depend on a third party library, see?", INFO_STYLE)

    assert styled.startswith(Style.BRIGHT)
    assert Fore.WHITE in styled
    assert Back.BLUE in styled
    assert styled.endswith("I depend on a third party library, see?" + Style.RESET_ALL)


def test_counter_style_is_bright_green_bold():
    styled = decorate("I've been up for 1 seconds", COUNTER_STYLE)

    assert styled == Style.BRIGHT + Fore.LIGHTGREEN_EX + "I've been up for 1 seconds" + Style.RESET_ALL


def test_decorate_without_style_returns_text():
    assert decorate("Hello world!", None) == "Hello world!"
    assert decorate("Hello world!", StyleSpec()) == "Hello world!"


def test_get_decorator():
    assert get_decorator(color=False) is plain
    assert get_decorator(color=True) is decorate
    assert plain("Done", INFO_STYLE) == "Done"
