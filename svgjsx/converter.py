"""Main orchestrator that ties the conversion pipeline together."""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from .discovery.file_finder import FileFinder
from .formatting.xml_formatter import XMLFormatter
from .rendering.component_renderer import ComponentRenderer
from .utils.naming import string_to_camel_case
from .utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "defaults.yaml"


class ConversionError(RuntimeError):
    """Fatal setup problem that stops a run before any file is processed."""


@dataclass
class SetupResult:
    """Resolved directories, or the reason they could not be used."""

    source: Optional[Path] = None
    output: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ConversionResult:
    """One generated component file."""

    source: Path
    output: Path
    name: str


class SVGToJSXConverter:
    """
    Batch SVG to JSX component conversion.

    Pipeline, per discovered file:
      1. Read and normalize the SVG markup
      2. Derive the PascalCase component name from the file name
      3. Render the component template
      4. Write <output>/<Name>.js, overwriting any existing file
    """

    def __init__(self, config: dict = None, config_path: str = None):
        """
        Initialize with a config dict and/or a YAML config path.

        Args:
            config: Direct overrides, applied last.
            config_path: Path to a YAML config file.
        """
        self.config = self._load_config(config, config_path)

        self.finder = FileFinder(self.config)
        self.formatter = XMLFormatter(self.config)
        self.renderer = ComponentRenderer(self.config)
        self.workers = max(1, int(self.config.get("processing", {}).get("workers", 1)))

    def _load_config(self, config, config_path) -> dict:
        """Load and merge configuration."""
        if DEFAULT_CONFIG_PATH.exists():
            with open(DEFAULT_CONFIG_PATH) as f:
                base_config = yaml.safe_load(f) or {}
        else:
            base_config = {}

        if config_path:
            with open(config_path) as f:
                file_config = yaml.safe_load(f) or {}
            base_config = self._deep_merge(base_config, file_config)

        if config:
            base_config = self._deep_merge(base_config, config)

        return base_config

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge two dicts. Override takes precedence."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = SVGToJSXConverter._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @staticmethod
    def check_arguments(source_path: Optional[str], output_path: Optional[str]) -> Optional[str]:
        """Return an error message when a path argument is missing."""
        if not source_path:
            return "No source path input"
        if not output_path:
            return "No output path input"
        return None

    @staticmethod
    def setup(source_path: Optional[str], output_path: Optional[str]) -> SetupResult:
        """
        Check the arguments and directories before any file is touched.

        The output directory, parents included, is created when missing.
        """
        error = SVGToJSXConverter.check_arguments(source_path, output_path)
        if error:
            return SetupResult(error=error)

        source = Path(source_path).expanduser().resolve()
        output = Path(output_path).expanduser().resolve()

        if not source.is_dir():
            return SetupResult(error=f"Source directory not found or does not exist: {source}")

        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return SetupResult(
                error=f"Output directory does not exist or could not be created: {output} ({e})"
            )
        if not output.is_dir():
            return SetupResult(error=f"Output directory does not exist or could not be created: {output}")

        return SetupResult(source=source, output=output)

    def convert(self, source_path: str, output_path: str) -> List[ConversionResult]:
        """
        Convert every matching file under ``source_path``.

        Returns:
            One ConversionResult per written file, in discovery order.

        Raises:
            ConversionError: If the setup checks fail.
        """
        result = self.setup(source_path, output_path)
        if not result.ok:
            raise ConversionError(result.error)
        return self.convert_directory(result.source, result.output)

    def convert_directory(self, source: Path, output: Path) -> List[ConversionResult]:
        """Convert files between two directories already checked by setup()."""
        files = self.finder.find(source)
        logger.info(f"Files found: {len(files)}")

        if self.workers > 1 and len(files) > 1:
            logger.debug(f"Converting with {self.workers} workers")
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = pool.map(lambda path: self.convert_file(path, output), files)
                converted = []
                for item in results:
                    logger.info(f"Created new file: {item.output.name}")
                    converted.append(item)
                return converted

        converted = []
        for path in files:
            item = self.convert_file(path, output)
            logger.info(f"Created new file: {item.output.name}")
            converted.append(item)
        return converted

    def convert_file(self, source: Path, output_dir: Path) -> ConversionResult:
        """Normalize, render and write a single file."""
        name = string_to_camel_case(self.finder.name_of(source))
        target = output_dir / self.renderer.file_name(name)

        content = self.formatter.process_file(source)
        jsx = self.renderer.render(name, content)

        with open(target, "w", encoding="utf-8") as f:
            f.write(jsx)
        logger.debug(f"Wrote {target} from {source}")

        return ConversionResult(source=source, output=target, name=name)
