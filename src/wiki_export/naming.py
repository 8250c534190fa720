"""Wiki page name encoding and appendix title handling."""

from __future__ import annotations

from urllib.parse import quote_plus, unquote

APPENDIX = "APPENDIX"
APPENDICES = "APPENDICES"

# Characters allowed between "Appendix", its label and the real title
SEPARATORS = frozenset(" :-")


def wiki_encode(name: str) -> str:
    """Encode a display name the way the wiki stores it on disk.

    Spaces become hyphens, so literal hyphens are protected as ``%2D``.

    Args:
        name: Display name, e.g. ``Conceptual Level: Behaviour``.

    Returns:
        Encoded name, e.g. ``Conceptual-Level%3A-Behaviour``.
    """
    encoded = quote_plus(name, safe="!*()")
    return encoded.replace("-", "%2D").replace("+", "-")


def wiki_decode(name: str) -> str:
    """Decode a wiki file name back to its display name."""
    # Hyphens first, an encoded %2D must survive as a literal hyphen
    return unquote(name.replace("-", " "))


def fixup_path(value: str) -> str:
    """Repair a wiki-encoded filesystem path.

    Restores a drive prefix (``C%3A`` -> ``C:``) and unescapes path
    separators and percent signs, leaving the rest of the encoding intact.
    """
    if len(value) > 1 and value[1:4] == "%3A" and value[0].isalpha():
        value = value[0] + ":" + value[4:]

    return value.replace("%5C", "\\").replace("%2F", "/").replace("%25", "%")


def is_appendix(name: str) -> bool:
    return name.upper().startswith(APPENDIX)


def is_appendix_section(name: str) -> bool:
    return name.upper().startswith(APPENDICES)


def appendix_name(name: str) -> str:
    """Strip the appendix prefix and label from a title.

    ``Appendix A: Bibliography`` and ``Appendix - Bibliography`` both give
    ``Bibliography``. A letter or digit directly followed by a separator is
    taken as a label and skipped. Names that are not appendices, or that
    run out before a title is found, are returned unchanged.
    """
    if not is_appendix(name):
        return name

    try:
        i = len(APPENDIX)
        while True:
            c = name[i]
            if c in SEPARATORS:
                i += 1
            elif c.isalnum() and name[i + 1] in SEPARATORS:
                i += 1
            else:
                break
        return name[i:]
    except IndexError:
        return name
