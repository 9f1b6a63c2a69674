"""Comment blanking for permissive JSON input.

Handles:
- line comments: ``// ...`` up to (not including) the newline
- block comments: ``/* ... */``

Comment characters are replaced with spaces rather than removed, and newlines
inside block comments are kept, so the decoder's line/column positions still
point into the caller's original text.  ``//`` and ``/*`` inside string
literals are left alone.
"""

from __future__ import annotations

__all__ = ["strip_comments"]


def _blank(segment: str) -> str:
    return "".join("\n" if ch == "\n" else " " for ch in segment)


def strip_comments(text: str) -> str:
    """Blank out JSON comments in *text*.

    An unterminated block comment is left untouched so the decoder rejects
    it as malformed input.

    Args:
        text: JSON text that may contain comments.

    Returns:
        Text of the same length with every comment replaced by whitespace.
    """
    if "/" not in text:
        return text

    out: list[str] = []
    in_string = False
    escaped = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            out.append(_blank(text[i:end]))
            i = end
            continue

        if ch == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            if end == -1:
                out.append(text[i:])
                break
            out.append(_blank(text[i : end + 2]))
            i = end + 2
            continue

        out.append(ch)
        i += 1

    return "".join(out)
