import json

from cms_seo.app.cli import main


def test_render_to_stdout(tmp_path, capsys):
    settings = tmp_path / "seo_settings.json"
    settings.write_text(json.dumps({"site_title": "Site", "title_separator": "|"}), encoding="utf-8")
    template = tmp_path / "page.html"
    template.write_text("<html><head><title>x</title></head></html>", encoding="utf-8")
    content = tmp_path / "page.md"
    content.write_text('<!-- json {"description": "About page"} -->\n# About', encoding="utf-8")

    rc = main(["--settings", str(settings), "render", str(template), "--content", str(content), "--title", "About"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "<title>About | Site</title>" in out
    assert '<meta name="description" content="About page">' in out


def test_render_to_file(tmp_path):
    template = tmp_path / "page.html"
    template.write_text("<head></head>", encoding="utf-8")
    target = tmp_path / "out.html"

    rc = main(["--settings", str(tmp_path / "none.json"), "render", str(template), "--output", str(target)])

    assert rc == 0
    assert '<meta property="og:title" content="My Website">' in target.read_text(encoding="utf-8")


def test_settings_set_and_show(tmp_path, capsys):
    settings = tmp_path / "seo_settings.json"

    assert main(["--settings", str(settings), "settings", "set", "--site-title", "CLI Site", "--no-append-site-title"]) == 0
    capsys.readouterr()
    assert main(["--settings", str(settings), "settings", "show"]) == 0

    shown = json.loads(capsys.readouterr().out)
    assert shown["site_title"] == "CLI Site"
    assert shown["append_site_title"] is False
    assert shown["title_separator"] == "-"


def test_missing_template_returns_error(tmp_path):
    rc = main(["--settings", str(tmp_path / "s.json"), "render", str(tmp_path / "nope.html")])
    assert rc == 1
