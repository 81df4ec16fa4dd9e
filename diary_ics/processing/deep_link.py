"""Deep links that open a note (or a heading inside it) in Obsidian."""

from urllib.parse import quote

DEEP_LINK_SCHEME = "obsidian"

# Characters JavaScript's encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_deep_link(vault_name: str, file_path: str, heading: str | None = None) -> str:
    """
    Build an ``obsidian://open`` URL.

    Args:
        vault_name: Vault name as known to the app
        file_path: Vault-relative note path
        heading: Optional heading to anchor to

    Returns:
        URL with every component percent-encoded
    """
    url = (
        f"{DEEP_LINK_SCHEME}://open?vault={encode_uri_component(vault_name)}"
        f"&file={encode_uri_component(file_path)}"
    )
    if heading:
        url += encode_uri_component(f"#{heading}")
    return url
