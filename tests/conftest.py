"""
Pytest configuration and fixtures for cleanup tests.
"""

import logging

import pytest
from bs4 import BeautifulSoup

MEDIAWIKI_PAGE = """<!DOCTYPE html>
<html>
<head>
<title>Foo - Example Wiki</title>
<style type="text/css">@import "/skins/monobook/main.css";</style>
<script type="text/javascript">var wgPageName = "Foo";</script>
</head>
<body>
<div id="content">
<h1 class="firstHeading">Foo</h1>
<div id="bodyContent">
<p>Intro text about Zürich.</p>
<div class="editsection">[<a href="/w/index.php?title=Foo&amp;action=edit&amp;section=1">edit</a>]</div>
<a name="History"></a><h2>History</h2>
<p>Some history.</p>
<a name="Early_days"></a>
<h3>Early days</h3>
<p>Even older history.</p>
<div class="printfooter">Retrieved from "http://wiki.example.org/wiki/Foo"</div>
<div id="catlinks"><a href="/wiki/Category:Foo">Foo</a></div>
<div class="visualClear"></div>
</div>
</div>
<div id="column-one"><script>sidebar()</script><ul><li>Main page</li></ul></div>
<div id="footer"><p>Powered by MediaWiki</p></div>
<script>trailing()</script>
</body>
</html>
"""


@pytest.fixture
def mediawiki_page() -> str:
    """A MonoBook-era MediaWiki page with every embellishment present."""
    return MEDIAWIKI_PAGE


@pytest.fixture
def soup_of():
    """Parse a markup string with the lxml tree builder."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "lxml")

    return _parse


@pytest.fixture(autouse=True)
def _reset_cleanup_logger():
    """Undo handler/propagation changes made by the CLI between tests."""
    yield
    logger = logging.getLogger("cleanup")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
