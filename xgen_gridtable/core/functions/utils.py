# xgen_gridtable/core/functions/utils.py
"""
Common utility module for text processing
"""
import re
from typing import List, Optional


def clean_text(text: Optional[str]) -> str:
    if not text:
        return ""
    text = re.sub(r'\n\s*\n\s*\n+', '\n\n', text)
    return text.strip()


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def expand_tabs(text: str, tab_width: int = 8) -> str:
    """Expand tabs line by line so that table borders keep their columns."""
    if '\t' not in text:
        return text
    return '\n'.join(line.expandtabs(tab_width) for line in text.split('\n'))


def split_lines(text: str) -> List[str]:
    """Split text into lines, keeping a trailing empty line out."""
    lines = normalize_newlines(text).split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines
