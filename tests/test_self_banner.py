"""Tests for the incredifont self-banner"""

from incredifont.config import constants
from incredifont.utils.banner import BANNER_SUBTITLE, get_banner, print_banner


def test_plain_banner():
    banner = get_banner(colors=False)
    assert "\x1b[" not in banner
    assert banner.endswith(f"\n{BANNER_SUBTITLE}\n")


def test_colored_banner():
    assert constants.ANSI_TRUECOLOR_PREFIX in get_banner()


def test_print_banner(capsys):
    print_banner(colors=False)
    assert capsys.readouterr().out == get_banner(colors=False) + "\n"
