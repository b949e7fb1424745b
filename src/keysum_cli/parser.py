from __future__ import annotations
from typing import List
import re
from bs4 import BeautifulSoup, NavigableString
from bs4.builder import builder_registry

_DROP_TAGS = ["script", "style", "noscript", "template"]
_BLOCK_TAGS = [
    "p", "div", "section", "article", "main", "header", "footer", "aside", "nav",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li", "dl", "dt", "dd",
    "blockquote", "pre", "table", "tr", "th", "td", "figure", "figcaption", "hr",
]
_WS = re.compile(r"\s+")


def _soup(html: str) -> BeautifulSoup:
    if builder_registry.lookup("lxml") is not None:
        return BeautifulSoup(html, "lxml")
    return BeautifulSoup(html, "html.parser")


def html_to_text(html: str) -> str:
    """Visible text of a page, one block per line."""
    if not html:
        return ""
    soup = _soup(html)
    for tag in soup(_DROP_TAGS):
        tag.decompose()
    root = soup.body or soup

    # source newlines are plain whitespace; only blocks and <br> break lines
    for s in list(root.find_all(string=True)):
        if type(s) is NavigableString:
            s.replace_with(_WS.sub(" ", s))
    for br in root.find_all("br"):
        br.replace_with("\n")
    for el in root.find_all(_BLOCK_TAGS):
        el.insert_before("\n")
        el.append("\n")

    lines: List[str] = []
    for line in root.get_text().splitlines():
        line = " ".join(line.split())
        if line:
            lines.append(line)
    return "\n".join(lines)
