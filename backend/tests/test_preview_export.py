import io
import zipfile

from project_engine.services.export import archive_filename, export_zip
from project_engine.services.preview import fallback_files, render_preview


def test_render_preview_inlines_style_and_script():
    html = render_preview({
        "index.html": "<html><head><title>t</title></head><body><p>hi</p></body></html>",
        "style.css": "p { color: red; }",
        "script.js": "console.log(1);",
    })

    assert html == (
        "<html><head><title>t</title><style>p { color: red; }</style></head>"
        "<body><p>hi</p><script>console.log(1);</script></body></html>"
    )


def test_render_preview_only_entry_point():
    assert render_preview({"index.html": "<p>plain</p>"}) == "<p>plain</p>"


def test_render_preview_uses_first_closing_tag_only():
    html = render_preview({
        "index.html": "<head></head><template><head></head></template>",
        "style.css": "x{}",
    })

    assert html.count("<style>") == 1
    assert html.startswith("<head><style>x{}</style></head>")


def test_fallback_files_render():
    html = render_preview(fallback_files("Bakery <site>"))

    assert "<title>Bakery &lt;site&gt;</title>" in html
    assert html.count("<style>") == 1
    assert "<script>console.log('Project initialized');</script></body>" in html
    assert "Welcome" in html


def test_archive_filename_truncates_and_collapses_whitespace():
    assert archive_filename("My  cool   website title is long") == "My-cool-website-t.zip"
    assert archive_filename("Shop") == "Shop.zip"


def test_export_zip_writes_each_file():
    files = {"index.html": "<h1>hi</h1>", "style.css": "h1 { color: red; }", "script.js": ""}

    with zipfile.ZipFile(io.BytesIO(export_zip(files))) as archive:
        assert sorted(archive.namelist()) == sorted(files)
        assert {name: archive.read(name).decode("utf-8") for name in files} == files
