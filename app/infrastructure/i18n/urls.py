"""URL helpers for language-prefixed navigation.

Paths are treated as opaque strings: no percent-decoding is performed and
query strings or fragments are not interpreted by localize_url().
"""

from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def first_path_segment(path: Optional[str]) -> Optional[str]:
    """Return the first non-empty component of a URL path.

    A full URL is accepted too; only its path is inspected.

    Args:
        path: URL path ("/nb/about") or URL ("https://example.org/nb/about").

    Returns:
        The first segment ("nb"), or None for root or empty input.
    """
    if not path:
        return None
    if "://" in path:
        path = urlsplit(path).path
    for segment in path.split("/"):
        if segment:
            return segment
    return None


def strip_language_prefix(path: str, lang: str) -> str:
    """Remove a leading "/<lang>" segment from path.

    Only a whole segment is stripped: "/nb/about" and "/nb" lose the prefix,
    "/nbx" does not. An empty result becomes the root "/".
    """
    prefix = f"/{lang}"
    if path == prefix:
        return "/"
    if path.startswith(prefix + "/"):
        return path[len(prefix) :] or "/"
    return path


def localize_url(
    path: str,
    target_lang: str,
    current_lang: str,
    default_lang: str,
) -> str:
    """Build the path of the same page in another language.

    The default language is served unprefixed, other languages under
    "/<lang>". Re-localizing a localized path to the same language returns
    it unchanged.

    Args:
        path: Current path, possibly prefixed with current_lang.
        target_lang: Language of the returned path.
        current_lang: Language the path is currently in.
        default_lang: Language served without a prefix.

    Returns:
        Localized path.

    Example:
        localize_url("/about", "nb", "en", "en")     # "/nb/about"
        localize_url("/nb/about", "en", "nb", "en")  # "/about"
        localize_url("/", "nb", "en", "en")          # "/nb"
    """
    clean_path = path
    if current_lang != default_lang:
        clean_path = strip_language_prefix(path, current_lang)

    if target_lang == default_lang:
        return clean_path

    if clean_path in ("", "/"):
        return f"/{target_lang}"
    if not clean_path.startswith("/"):
        clean_path = "/" + clean_path
    return f"/{target_lang}{clean_path}"


def with_query_param(url: str, name: str, value: str) -> str:
    """Return url with query parameter name set to value.

    Existing occurrences of the parameter are replaced in place; other
    parameters and the fragment are preserved. Applying the same value
    twice gives the same URL.
    """
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)

    updated = []
    replaced = False
    for key, current in query:
        if key == name:
            if not replaced:
                updated.append((key, value))
                replaced = True
            continue
        updated.append((key, current))
    if not replaced:
        updated.append((name, value))

    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, urlencode(updated), parts.fragment)
    )
