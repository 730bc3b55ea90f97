"""Wrap normalized markup in the JSX component template."""
from pathlib import Path
from string import Template

from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE_PATH = Path(__file__).parent.parent / "templates" / "component.jsx"
CONTENT_INDENT = "\t\t"


def indent_lines(content: str, prefix: str = CONTENT_INDENT) -> str:
    """Prefix every line of ``content``, splitting on newlines only."""
    if not content:
        return ""
    return "\n".join(prefix + line for line in content.split("\n"))


class ComponentRenderer:
    """Render component files from a fixed ``string.Template``."""

    def __init__(self, config: dict):
        rendering = config.get("rendering", {})
        template_path = rendering.get("template_path") or DEFAULT_TEMPLATE_PATH
        self.output_extension = rendering.get("output_extension", ".js")
        self.template = self._load_template(template_path)

    @staticmethod
    def _load_template(template_path) -> Template:
        path = Path(template_path).expanduser()
        logger.debug(f"Loading component template: {path}")
        with open(path, encoding="utf-8") as f:
            return Template(f.read())

    def render(self, name: str, content: str) -> str:
        """
        Build the component file text.

        Args:
            name: PascalCase component name, without the "Icon" suffix.
            content: Normalized markup; each line is indented two tabs.

        Returns:
            Full file content.
        """
        return self.template.substitute(name=name, content=indent_lines(content))

    def file_name(self, name: str) -> str:
        return f"{name}{self.output_extension}"
