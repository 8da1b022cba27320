"""Assemble a project's files into a single previewable HTML document."""

from html import escape

from project_engine.models import ENTRY_POINT, FileSet

STYLESHEET = "style.css"
SCRIPT = "script.js"

FALLBACK_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <link rel="stylesheet" href="style.css">
</head>
<body>
  <div class="container">
    <h1>Welcome</h1>
    <p>Your project is ready. Ask the AI to build something!</p>
  </div>
  <script src="script.js"></script>
</body>
</html>"""

FALLBACK_STYLE_CSS = """* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: system-ui, sans-serif; background: #0a0a0a; color: #fafafa; min-height: 100vh; display: flex; align-items: center; justify-content: center; }
.container { text-align: center; padding: 2rem; }
h1 { font-size: 3rem; margin-bottom: 1rem; background: linear-gradient(135deg, #3b82f6, #8b5cf6); -webkit-background-clip: text; -webkit-text-fill-color: transparent; }
p { color: #a1a1aa; }"""

FALLBACK_SCRIPT_JS = "console.log('Project initialized');"


def fallback_files(title: str = "My Project") -> FileSet:
    """A minimal valid starter site, titled after the prompt that asked for it."""
    return {
        ENTRY_POINT: FALLBACK_INDEX_HTML.format(title=escape(title)),
        STYLESHEET: FALLBACK_STYLE_CSS,
        SCRIPT: FALLBACK_SCRIPT_JS,
    }


def render_preview(files: FileSet) -> str:
    """Inline the stylesheet and script into the entry point HTML.

    The stylesheet goes before the first ``</head>`` and the script before
    the first ``</body>``. Documents without those tags are left as is.
    """
    html = files.get(ENTRY_POINT, "")
    if files.get(STYLESHEET):
        html = html.replace("</head>", f"<style>{files[STYLESHEET]}</style></head>", 1)
    if files.get(SCRIPT):
        html = html.replace("</body>", f"<script>{files[SCRIPT]}</script></body>", 1)
    return html
