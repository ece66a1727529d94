"""Fetch Unicode Character Database files from unicode.org."""

import logging
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

UCD_BASE_URL = "https://www.unicode.org/Public"
DATA_DIR = Path.home() / ".cellwidth" / "ucd"

# Files needed to build the width tables
UCD_FILES = (
    "EastAsianWidth.txt",
    "extracted/DerivedGeneralCategory.txt",
    "HangulSyllableType.txt",
)


def ucd_url(name: str, version: str = "latest") -> str:
    """URL of a UCD file for a version such as "15.1.0" (or "latest")."""
    if version == "latest":
        return f"{UCD_BASE_URL}/UCD/latest/ucd/{name}"
    return f"{UCD_BASE_URL}/{version}/ucd/{name}"


def fetch_ucd_file(
    name: str,
    version: str = "latest",
    cache_dir: Path | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Return the text of a UCD file, downloading it unless already cached.

    Args:
        name: Path relative to the ucd/ directory, e.g. "EastAsianWidth.txt".
        version: Unicode version or "latest". "latest" is never cached.
        cache_dir: Cache root (default: ~/.cellwidth/ucd).
        client: HTTP client to use; one is created when omitted.

    Raises:
        httpx.HTTPError: If the download fails.
    """
    cached = None
    if version != "latest":
        cached = (cache_dir or DATA_DIR) / version / name
        if cached.exists():
            logger.debug(f"Using cached {cached}")
            return cached.read_text(encoding="utf-8")

    url = ucd_url(name, version)
    logger.info(f"Fetching {url}")
    if client is None:
        with httpx.Client(timeout=30, follow_redirects=True) as own_client:
            response = own_client.get(url)
    else:
        response = client.get(url)
    response.raise_for_status()
    text = response.text

    if cached is not None:
        cached.parent.mkdir(parents=True, exist_ok=True)
        cached.write_text(text, encoding="utf-8")
        logger.info(f"Saved to {cached}")

    return text


def fetch_ucd(
    version: str = "latest",
    cache_dir: Path | None = None,
    client: httpx.Client | None = None,
) -> dict[str, str]:
    """Fetch every file in UCD_FILES. Returns name -> file text."""
    return {name: fetch_ucd_file(name, version, cache_dir, client) for name in UCD_FILES}
