"""Archive-internal path handling."""

from urllib.parse import unquote


def normalize_path(path: str) -> str:
    """Collapse ``.`` and ``..`` segments of a ``/``-separated path.

    Extra ``..`` segments at the root are dropped, so the result never
    escapes the archive root.
    """
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return "/".join(stack)


def package_dir(opf_path: str) -> str:
    """Directory prefix of the package document, with trailing slash."""
    if "/" not in opf_path:
        return ""
    return opf_path[: opf_path.rindex("/") + 1]


def strip_fragment(href: str) -> str:
    return href.split("#", 1)[0]


def decode_href(href: str) -> str:
    """Percent-decode an href, keeping the raw string if decoding fails."""
    try:
        return unquote(href, errors="strict")
    except UnicodeDecodeError:
        return href


def resolve_href(base_dir: str, href: str) -> str:
    """Resolve a manifest or navigation href against the package directory."""
    return normalize_path(base_dir + decode_href(strip_fragment(href)))
