"""Normalize raw SVG markup into tab-indented XML."""
import codecs
import re
from pathlib import Path
from typing import Union

from lxml import etree

from ..utils.logger import get_logger

logger = get_logger(__name__)

# Synthetic root used to parse markup that may hold several top-level nodes.
FRAGMENT_ROOT = "svgjsx-fragment"

XML_DECLARATION_RE = re.compile(r"<\?xml\s[^>]*\?>")
PROLOG_RE = re.compile(
    r"^\s*(?:<\?xml\s[^>]*\?>\s*)?(?:<!DOCTYPE[^>\[]*(?:\[[^\]]*\])?\s*>\s*)?",
    re.IGNORECASE,
)
INDENT_UNIT = "  "


class XMLFormatter:
    """
    Re-serialize SVG files as clean, tab-indented markup.

    The content is parsed leniently as a fragment, written back out as
    canonical XML, parsed again as a document and pretty-printed. The XML
    declaration is dropped and each two-space indent becomes a tab.
    """

    def __init__(self, config: dict):
        formatting = config.get("formatting", {})
        self.indent = formatting.get("indent", 2)
        self.encoding = formatting.get("encoding", "utf-8-sig")
        codecs.lookup(self.encoding)

    def process_file(self, file_path: Union[str, Path]) -> str:
        """Read and normalize one file. Unreadable files yield ""."""
        return self.normalize(self.read_file_content(file_path))

    def read_file_content(self, file_path: Union[str, Path]) -> str:
        path = Path(file_path)
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeError) as e:
            logger.warning(f"Could not read {path}, using empty content: {e}")
            return ""

    def normalize(self, content: str) -> str:
        """Normalize markup text; pure text-to-text."""
        fragment = self.parse_fragment(content)
        canonical = self.serialize_fragment(fragment)
        if not canonical:
            return ""

        pretty = self.pretty_print(canonical)
        pretty = self.strip_xml_header(pretty).strip()
        return pretty.replace(INDENT_UNIT, "\t")

    def parse_fragment(self, content: str) -> etree._Element:
        """Parse markup that may contain several top-level nodes."""
        body = PROLOG_RE.sub("", content, count=1)
        parser = etree.XMLParser(recover=True)
        wrapper = etree.fromstring(f"<{FRAGMENT_ROOT}>{body}</{FRAGMENT_ROOT}>", parser)
        if wrapper is None:
            wrapper = etree.Element(FRAGMENT_ROOT)
        return wrapper

    @staticmethod
    def serialize_fragment(fragment: etree._Element) -> str:
        """
        Write the fragment's top-level nodes back out as canonical XML.

        Loose text before the first node is dropped. Returns "" when the
        fragment holds no element.
        """
        if not any(isinstance(node.tag, str) for node in fragment):
            return ""
        return "".join(etree.tostring(node, encoding="unicode") for node in fragment)

    def pretty_print(self, canonical: str) -> str:
        """Parse canonical XML as a document and indent it."""
        parser = etree.XMLParser(recover=True, remove_blank_text=True)
        root = etree.fromstring(canonical.encode("utf-8"), parser)
        if root is None:
            return ""

        etree.indent(root, space=" " * self.indent)
        document = root.getroottree()
        return etree.tostring(document, xml_declaration=True, encoding="utf-8").decode("utf-8")

    @staticmethod
    def strip_xml_header(content: str) -> str:
        """Remove the XML declaration whatever encoding it names."""
        return XML_DECLARATION_RE.sub("", content, count=1)
