"""Tiny string inflections used when naming routes and labelling errors."""

from __future__ import annotations


def humanize(name: str) -> str:
    """Turn an attribute name into a label: ``category_id`` -> ``Category``."""
    text = name.strip()
    if text.endswith("_id"):
        text = text[: -len("_id")]
    text = text.replace("_", " ").strip().lower()
    return text[:1].upper() + text[1:]


def underscore(name: str) -> str:
    """``BlogPost`` -> ``blog_post``; already underscored names pass through."""
    chars: list[str] = []
    for index, char in enumerate(name):
        if char.isupper():
            if index and (name[index - 1].islower() or name[index - 1].isdigit()):
                chars.append("_")
            chars.append(char.lower())
        else:
            chars.append(char)
    return "".join(chars).replace("-", "_")


__all__ = ["humanize", "underscore"]
