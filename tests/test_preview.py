import pytest

from renderer.preview import (
    MOUNT_POINT,
    RUNTIME_SCRIPTS,
    PreviewFrame,
    build_preview_document,
    render_mode,
)

APP_CODE = "export default function App() {\n  return <h1 className=\"text-xl\">Hi</h1>;\n}"


@pytest.mark.parametrize("language", ["jsx", "javascript"])
def test_script_dialect_document(language):
    doc = build_preview_document(APP_CODE, language)
    assert doc.count(MOUNT_POINT) == 1
    assert APP_CODE in doc
    for src in RUNTIME_SCRIPTS:
        assert src in doc
    assert '<script type="text/babel">' in doc
    assert "if (typeof App !== 'undefined')" in doc
    assert "root.render(<App />);" in doc


def test_code_comes_before_the_mount_call():
    doc = build_preview_document(APP_CODE, "jsx")
    assert doc.index(APP_CODE) < doc.index("ReactDOM.createRoot")


@pytest.mark.parametrize("language", ["html", "css", "python", "", None])
def test_markup_and_unknown_languages_render_verbatim(language):
    code = "<main><p>Hello {world}</p></main>"
    assert build_preview_document(code, language) == code


def test_rendering_is_idempotent():
    assert build_preview_document(APP_CODE, "jsx") == build_preview_document(APP_CODE, "jsx")
    assert build_preview_document("<p>x</p>", "html") == build_preview_document("<p>x</p>", "html")


@pytest.mark.parametrize("tag", ["script", "SCRIPT", "Script", "sCrIpT"])
def test_closing_script_tag_inside_code_is_neutralised(tag):
    code = f'const s = "</{tag}><script>alert(1)</{tag}>";'
    doc = build_preview_document(code, "jsx")
    assert f"</{tag}>" not in doc.split('<script type="text/babel">')[1].split("const root")[0]
    assert f'<\\/{tag}><script>alert(1)<\\/{tag}>' in doc


def test_language_tag_casing_is_ignored():
    assert build_preview_document(APP_CODE, "JSX") == build_preview_document(APP_CODE, "jsx")
    assert build_preview_document("<p/>", " HTML ") == "<p/>"


def test_render_mode():
    assert render_mode("jsx") == "script"
    assert render_mode("JavaScript") == "script"
    assert render_mode("html") == "markup"
    assert render_mode("svelte") == "markup"


def test_preview_frame_is_scripts_only_sandbox():
    frame = PreviewFrame()
    frame.load("<p>a</p>")
    assert frame.sandbox == "allow-scripts"
    assert frame.srcdoc == "<p>a</p>"


def test_preview_endpoint_serves_sandboxed_document(client):
    r = client.post("/preview", json={"code": APP_CODE, "language": "jsx"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.headers["content-security-policy"] == "sandbox allow-scripts"
    assert r.text == build_preview_document(APP_CODE, "jsx")


def test_preview_endpoint_requires_code(client):
    r = client.post("/preview", json={"code": "  ", "language": "html"})
    assert r.status_code == 400
    assert r.json() == {"error": "Code is required"}


def test_generator_page_guards_preview_tab_without_result(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.text
    show_preview = body[body.index("async function showPreview()"):body.index("function showCode()")]
    assert "if (!result) return;" in show_preview
    assert show_preview.index("if (!result) return;") < show_preview.index("result.code")
