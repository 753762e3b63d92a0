from linktext.link_config import DEFAULT_LINK_COLOR, LinkStyle, load_style


def test_defaults():
    assert load_style() == LinkStyle()
    assert load_style().link_color == DEFAULT_LINK_COLOR
    assert load_style().line_spacing == 4
    assert load_style().text_color == "black"


def test_env_knobs(monkeypatch):
    monkeypatch.setenv("LINKTEXT_LINK_COLOR", "#ff0000")
    monkeypatch.setenv("LINKTEXT_LINK_UNDERLINE", "1")
    monkeypatch.setenv("LINKTEXT_LINE_SPACING", "8")
    style = load_style()
    assert style.link_color == "#ff0000"
    assert style.underline is True
    assert style.line_spacing == 8


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("LINKTEXT_LINK_COLOR", "#ff0000")
    monkeypatch.setenv("LINKTEXT_LINE_SPACING", "8")
    style = load_style(link_color="green", line_spacing=0, text_color="gray")
    assert (style.link_color, style.line_spacing, style.text_color) == ("green", 0, "gray")


def test_bad_env_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("LINKTEXT_LINK_UNDERLINE", "yes")
    monkeypatch.setenv("LINKTEXT_LINE_SPACING", "-2")
    style = load_style()
    assert style.underline is False
    assert style.line_spacing == 4
    assert "LINKTEXT_LINE_SPACING" in caplog.text
