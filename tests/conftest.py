"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


PATH_SVG = '<svg><path d="M0 0"/></svg>'

DECLARED_SVG = '''<?xml version="1.0" encoding="ISO-8859-1"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle cx="12" cy="12" r="10"/></svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <g fill="none" stroke="currentColor">
    <circle cx="12" cy="12" r="10"/>
    <circle cx="8" cy="9" r="1"/>
    <circle cx="16" cy="9" r="1"/>
    <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
  </g>
</svg>'''

ICON_CLOSE_JS = (
    "import React from 'react';\n"
    "import { pure } from 'recompose';\n"
    "\n"
    "import './Icon.css';\n"
    "\n"
    "const IconCloseIcon = ({ ...props }) => (\n"
    "\t<div className=\"Icon\">\n"
    "\t\t<svg>\n"
    "\t\t\t<path d=\"M0 0\"/>\n"
    "\t\t</svg>\n"
    "\t</div>\n"
    ");\n"
    "\n"
    "const PureIconCloseIcon = pure(IconClose);\n"
    "\n"
    "export default PureIconCloseIcon;\n"
)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Source tree with one top-level icon, one nested icon and a non-SVG file."""
    src = tmp_path / "src"
    (src / "nested").mkdir(parents=True)
    (src / "icon-close.svg").write_text(PATH_SVG, encoding="utf-8")
    (src / "nested" / "arrow_left.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    (src / "readme.txt").write_text("not an icon", encoding="utf-8")
    return src


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out" / "icons"
