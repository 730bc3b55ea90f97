"""
svg-to-jsx - batch convert SVG icons into React JSX components.

Each SVG file is pretty-printed, tab-indented and wrapped in a fixed
component template.
"""

from .converter import SVGToJSXConverter, ConversionError, ConversionResult, SetupResult
from .discovery.file_finder import FileFinder, find_files, get_file_name
from .formatting.xml_formatter import XMLFormatter
from .rendering.component_renderer import ComponentRenderer
from .utils.naming import string_to_camel_case

__version__ = "0.1.0"

__all__ = [
    "SVGToJSXConverter",
    "ConversionError",
    "ConversionResult",
    "SetupResult",
    "FileFinder",
    "find_files",
    "get_file_name",
    "XMLFormatter",
    "ComponentRenderer",
    "string_to_camel_case",
]
