"""Basic usage examples."""
from svgjsx import SVGToJSXConverter, XMLFormatter, ComponentRenderer, string_to_camel_case

# --- Example 1: Convert a directory of icons ---
converter = SVGToJSXConverter()
converter.convert("examples/icons", "examples/components")

# --- Example 2: Search subfolders, write .jsx files ---
converter = SVGToJSXConverter(
    config={
        "discovery": {"recursive": True},
        "rendering": {"output_extension": ".jsx"},
    }
)
for result in converter.convert("examples/icons", "examples/components"):
    print(f"{result.source} -> {result.output}")

# --- Example 3: Render a single component without touching the disk ---
markup = XMLFormatter({}).normalize('<svg viewBox="0 0 24 24"><path d="M0 0h24v24H0z"/></svg>')
jsx = ComponentRenderer({}).render(string_to_camel_case("icon-close"), markup)
print(jsx)
