"""
Sitemap Writer

Serializes a SitemapDocument to sitemap XML and renders robots.txt.
Above the protocol limit of 50,000 URLs per file the document is split
into numbered parts referenced from a sitemap index.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Sequence, Union

from ..common.constants import MAX_URLS_PER_SITEMAP, SITEMAP_NS
from ..models import SitemapDocument, SitemapEntry

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _to_string(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def urlset_xml(entries: Sequence[SitemapEntry]) -> str:
    """Render a <urlset> document for the given entries."""
    root = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url_el = ET.SubElement(root, "url")
        ET.SubElement(url_el, "loc").text = entry.loc
        ET.SubElement(url_el, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url_el, "changefreq").text = entry.change_frequency.value
        ET.SubElement(url_el, "priority").text = f"{entry.priority:.1f}"
    return _to_string(root)


def sitemap_index_xml(sitemap_urls: Sequence[str], lastmod: str) -> str:
    """Render a <sitemapindex> document pointing at the part files."""
    root = ET.Element("sitemapindex", xmlns=SITEMAP_NS)
    for loc in sitemap_urls:
        sitemap_el = ET.SubElement(root, "sitemap")
        ET.SubElement(sitemap_el, "loc").text = loc
        ET.SubElement(sitemap_el, "lastmod").text = lastmod
    return _to_string(root)


def robots_txt(site_url: str, sitemap_filename: str = "sitemap.xml") -> str:
    """robots.txt allowing everything and advertising the sitemap."""
    return (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        f"Sitemap: {site_url.rstrip('/')}/{sitemap_filename}\n"
    )


def render_sitemaps(
    document: SitemapDocument,
    sitemap_filename: str = "sitemap.xml",
    max_urls: int = MAX_URLS_PER_SITEMAP,
) -> List[tuple]:
    """
    Render every sitemap file for a document without touching the disk.

    Args:
        document: Assembled sitemap document
        sitemap_filename: Name of the top-level file
        max_urls: URLs per file before splitting

    Returns:
        List of (filename, xml) pairs; the first is always sitemap_filename
    """
    if max_urls <= 0:
        raise ValueError(f"max_urls must be positive (got {max_urls})")

    entries = document.entries
    if len(entries) <= max_urls:
        return [(sitemap_filename, urlset_xml(entries))]

    stem = Path(sitemap_filename).stem
    parts = []
    for start in range(0, len(entries), max_urls):
        part_name = f"{stem}-{len(parts) + 1}.xml"
        parts.append((part_name, urlset_xml(entries[start:start + max_urls])))

    index = sitemap_index_xml(
        [f"{document.site_url}/{name}" for name, _xml in parts],
        document.build_date.isoformat(),
    )
    logger.info("Split %d URLs into %d sitemap files", len(entries), len(parts))
    return [(sitemap_filename, index)] + parts


def write_sitemaps(
    document: SitemapDocument,
    output_dir: Union[str, Path],
    sitemap_filename: str = "sitemap.xml",
    max_urls: int = MAX_URLS_PER_SITEMAP,
    write_robots: bool = True,
) -> List[Path]:
    """
    Write sitemap file(s) and optionally robots.txt.

    Everything is rendered before the first write, so a failure never
    leaves a partial sitemap on disk.

    Returns:
        Paths written, in order
    """
    files = render_sitemaps(document, sitemap_filename, max_urls)
    if write_robots:
        files.append(("robots.txt", robots_txt(document.site_url, sitemap_filename)))

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written = []
    for name, content in files:
        path = out / name
        path.write_text(content, encoding="utf-8")
        written.append(path)
        logger.debug("Wrote %s", path)

    logger.info("Wrote %d files to %s", len(written), out)
    return written
