"""
Shared fixtures: small EPUB archives built in memory.
"""

import io
import sys
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

OPF_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="2.0" unique-identifier="BookId">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    {title}
    <dc:identifier id="BookId">urn:uuid:1234</dc:identifier>
  </metadata>
  <manifest>
    {items}
  </manifest>
  <spine toc="ncx">
    {itemrefs}
  </spine>
</package>
"""

# Smallest well-formed JPEG header bytes; content is never decoded
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


def xhtml(body: str, head: str = "<title>Chapter</title>") -> str:
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">\n'
        f"<head>{head}</head>\n"
        f"<body>{body}</body>\n"
        "</html>\n"
    )


def build_opf(manifest: Dict[str, tuple], spine: list, title: Optional[str] = "Test Book") -> str:
    """``manifest`` maps id -> (href, media_type)."""
    items = "\n    ".join(
        f'<item id="{item_id}" href="{href}" media-type="{media_type}"/>'
        for item_id, (href, media_type) in manifest.items()
    )
    itemrefs = "\n    ".join(f'<itemref idref="{idref}"/>' for idref in spine)
    title_xml = f"<dc:title>{title}</dc:title>" if title is not None else ""
    return OPF_TEMPLATE.format(title=title_xml, items=items, itemrefs=itemrefs)


def build_zip(files: Dict[str, object]) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("mimetype", "application/epub+zip")
        for name, data in files.items():
            zf.writestr(name, data)
    buffer.seek(0)
    return buffer


@pytest.fixture
def make_epub():
    """
    Build an EPUB in memory.

    Usage:
        buffer = make_epub(
            documents={"OEBPS/text/ch1.xhtml": xhtml("<p>Hi</p>")},
            manifest={"ch1": ("text/ch1.xhtml", "application/xhtml+xml")},
            spine=["ch1"],
        )
    """
    def _make(documents: Dict[str, object],
              manifest: Dict[str, tuple],
              spine: list,
              title: Optional[str] = "Test Book",
              opf_path: str = "OEBPS/content.opf",
              with_container: bool = True) -> io.BytesIO:
        files: Dict[str, object] = {}
        if with_container:
            files["META-INF/container.xml"] = CONTAINER_XML.format(opf_path=opf_path)
        files[opf_path] = build_opf(manifest, spine, title)
        files.update(documents)
        return build_zip(files)

    return _make


@pytest.fixture
def image_epub(make_epub):
    """One chapter at OEBPS/text/ch1.xhtml referencing ../images/cover.jpg."""
    return make_epub(
        documents={
            "OEBPS/text/ch1.xhtml": xhtml('<p>Cover</p><img class="pic" alt="cover" src="../images/cover.jpg"/>'),
            "OEBPS/images/cover.jpg": JPEG_BYTES,
        },
        manifest={
            "ch1": ("text/ch1.xhtml", "application/xhtml+xml"),
            "cover": ("images/cover.jpg", "image/jpeg"),
        },
        spine=["ch1"],
    )
