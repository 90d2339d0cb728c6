"""
Markdown stripping for advisory responses.

The assistant panel shows plain text, so heading markers and emphasis
asterisks are removed from model output before display. Only '#' and '*'
characters are dropped; everything else, including surrounding
whitespace, is left untouched. Applying it twice equals applying it once.
"""

import re

_MARKDOWN_CHARS = re.compile(r'[#*]')


def strip_markdown(text: str) -> str:
    if not text:
        return text
    return _MARKDOWN_CHARS.sub('', text)
