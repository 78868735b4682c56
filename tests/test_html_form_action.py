"""Tests for the HTML form action."""

import pytest

from confform.actions.html_form import DOCTYPE, HTMLFormAction, read_config
from confform.exceptions import ConfigReadError
from confform.parser.config_file import ConfigParser


@pytest.fixture
def action():
    return HTMLFormAction(parser=ConfigParser(line_separator="\n"))


def test_render_document_shell(action):
    html = action.render("")

    assert html == (
        DOCTYPE
        + "<html><head>"
        + '<link rel="stylesheet" href="form.css">'
        + '<script src="form.js"></script>'
        + "</head><body>"
        + '<h3 id="save" onclick="save()">SAVE</h3>'
        + "<form></form>"
        + '<a id="a" style="display: none"></a>'
        + "</body></html>"
    )


def test_render_embeds_sections_in_form(action):
    html = action.render("# Header\n\nsetting = 1 # number\n\n")

    assert (
        '<form><h2 onclick="toggle(event)">\nHeader</h2>'
        '<table><tr><td><p>setting</p></td>'
        '<td><input type="number" name="setting" placeholder="number" value="1"></td>'
        "<td></td></tr></table></form>"
    ) in html


def test_assets_path_prefixes_urls():
    html = HTMLFormAction(assets_path="/static/editor").render("")

    assert 'href="/static/editor/form.css"' in html
    assert 'src="/static/editor/form.js"' in html


def test_asset_urls_use_forward_slashes():
    action = HTMLFormAction(assets_path="https://cdn.example.com/editor/")

    assert action._asset_url("form.css") == "https://cdn.example.com/editor/form.css"
    assert "\\" not in action.render("")


def test_values_are_escaped_by_default(action):
    html = action.render('path = a"<b # string\n\n')

    assert 'value="a&#34;&lt;b"' in html


def test_escaping_can_be_disabled():
    html = HTMLFormAction(escape=False).render('path = a"<b # string\n\n')

    assert 'value="a"<b"' in html


def test_build_document_uses_parser_nodes(action):
    nodes = action.parser.parse("a = 1 # number\n\n")
    document = action.build_document(nodes)

    form = next(document.iter("form"))
    assert form.children == nodes


def test_generate_writes_file(action, sample_config_file, tmp_path):
    output = tmp_path / "out" / "form.html"
    output.parent.mkdir()

    written = action.generate(sample_config_file, output)

    assert written == str(output.resolve())
    content = output.read_text(encoding="utf-8")
    assert content.startswith(DOCTYPE)
    assert '<select name="newlines">' in content
    assert "Orphaned trailing header" not in content


def test_render_file_missing(action, tmp_path):
    with pytest.raises(ConfigReadError):
        action.render_file(tmp_path / "missing.cfg")


def test_read_config_rejects_binary(tmp_path):
    path = tmp_path / "binary.cfg"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(ConfigReadError):
        read_config(path)


def test_contract_is_read_only():
    assert HTMLFormAction.CONTRACT.read_only is True
