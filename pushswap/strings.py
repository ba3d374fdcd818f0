"""Operations on text: search, compare, slice, join, trim, split, map.

Searching functions return an index, or None where nothing is found.
``strlcpy`` and ``strlcat`` work on NUL-terminated byte buffers of a
fixed capacity and report the length of the string they tried to build.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]
TextLike = Union[str, bytes, bytearray]


def _char(c: CharLike) -> str:
    """Turn a character code or a one-character string into a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _as_bytes(text: TextLike) -> bytes:
    """Return the bytes of ``text`` up to its first NUL, if it has one."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return data.split(b"\0", 1)[0]


def _content_length(buf: bytearray) -> int:
    end = buf.find(0)
    if end < 0:
        raise ValueError("buffer is not NUL-terminated")
    return end


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    A NUL character matches the terminator, at index ``len(s)``.
    Returns None when ``c`` does not occur.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    A NUL character matches the terminator, at index ``len(s)``.
    Returns None when ``c`` does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first pair of differing character codes,
    where the end of a string counts as code 0; returns 0 when they match.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(charset, str):
        raise TypeError(f"expected str for the character set, got {type(charset).__name__}")
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` for each character of ``chars`` in place.

    Where ``f`` returns a character it replaces the one at that index;
    where it returns None the character is left as it was.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(dst: bytearray, src: TextLike, size: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``size`` bytes.

    At most ``size - 1`` bytes are copied; nothing is written when ``size``
    is 0. Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"destination holds {len(dst)} bytes, fewer than {size}")
    data = _as_bytes(src)
    if size > 0:
        copied = data[:size - 1]
        dst[:len(copied) + 1] = copied + b"\0"
    return len(data)


def strlcat(dst: bytearray, src: TextLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst``.

    The result, terminator included, takes at most ``size`` bytes. Returns
    the length of the string it tried to build; when ``size`` does not
    exceed the current length, returns ``size`` plus the length of ``src``
    and leaves ``dst`` untouched.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _as_bytes(src)
    dst_len = _content_length(dst)
    if size <= dst_len:
        return size + len(data)
    if size > len(dst):
        raise ValueError(f"destination holds {len(dst)} bytes, fewer than {size}")
    copied = data[:size - dst_len - 1]
    dst[dst_len:dst_len + len(copied) + 1] = copied + b"\0"
    return dst_len + len(data)