from keysum_cli.parser import html_to_text
from keysum_cli.summarizer import segment


def test_html_to_text_keeps_blocks_and_drops_scripts():
    html = (
        "<html><head><style>p { color: red }</style><script>run()</script></head>"
        "<body><h1>Title</h1><p>Hello <b>world</b>.</p>"
        "<blockquote><p>Quoted text.</p></blockquote></body></html>"
    )
    assert html_to_text(html) == "Title\nHello world.\nQuoted text."


def test_html_to_text_without_blocks():
    assert html_to_text("<div>Just   some\ntext</div>") == "Just some text"


def test_html_to_text_empty():
    assert html_to_text("") == ""


def test_html_to_text_splits_div_only_pages():
    html = "<body><div>First sentence here.</div><div>Second one there.</div></body>"
    text = html_to_text(html)
    assert text == "First sentence here.\nSecond one there."
    assert segment(text) == ["First sentence here.", "Second one there."]


def test_html_to_text_breaks_on_br():
    text = html_to_text("<p>Line one.<br>Line two.</p>")
    assert text == "Line one.\nLine two."
    assert segment(text) == ["Line one.", "Line two."]


def test_html_to_text_keeps_text_outside_blocks():
    html = "<body><section>Loose text.<p>In a paragraph.</p>Trailing <em>words</em>.</section></body>"
    assert html_to_text(html) == "Loose text.\nIn a paragraph.\nTrailing words."
