import re
import sys

from paicehusk import param


def clean(str, ascii_only=False):
    """Replace every non-letter by a space, keeping the length of the input. With ascii_only, only a-z and A-Z count as letters."""
    result = [0] * len(str)
    for i in range(len(str)):
        ch = str[i]
        if ch.isalpha() and (not ascii_only or ch.isascii()):
            result[i] = ch
        else:
            result[i] = ' '
    return ''.join(result)


def first_word(token):
    # first run of letters in a raw token, None if there is none
    match = re.search(r'[^\W\d_]+', token)
    return match.group(0).lower() if match else None


def hex_to_ansi(hex_color_code="", reset=False):
    if not param.settings['color']: return ''
    if reset: return "\033[0m"
    hex_color_code = hex_color_code.lstrip('#')
    red = int(hex_color_code[0:2], 16)
    green = int(hex_color_code[2:4], 16)
    blue = int(hex_color_code[4:6], 16)
    return f'\033[38;2;{red};{green};{blue}m'


def info(msg): print(f'{hex_to_ansi("#F1C40F")}Info:{hex_to_ansi(reset=True)} {msg}', file=sys.stderr)


def warning(msg): print(f'{hex_to_ansi("#E67E22")}WARNING:{hex_to_ansi(reset=True)} {msg}', file=sys.stderr)


def error(msg): print(f'{hex_to_ansi("#E74C3C")}ERROR:{hex_to_ansi(reset=True)} {msg}', file=sys.stderr)


def highlight(text): return f'{hex_to_ansi("#3498DB")}{text}{hex_to_ansi(reset=True)}'
