"""
End-to-end parser tests

Tests the full pipeline: root file → segments → blocks → slides.
"""

import pytest

from prexent import parse
from prexent.config import AppSettings
from prexent.lib.converter import ConversionError, MarkdownConverter
from prexent.lib.parser import Parser
from prexent.models.blocks import Code, Error, Footer, Header, Html, SlideClasses


@pytest.fixture
def converter():
    return MarkdownConverter(extensions=[])


@pytest.fixture
def deck_parser(converter):
    return Parser(converter=converter)


def deck_write(tmp_path, text, name="deck.md"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestDocumentShapes:
    """Test whole-document properties"""

    @pytest.mark.parametrize("text", [
        "Just one paragraph.",
        "# Title\n\nSome text with *emphasis*.\n\n- one\n- two\n",
        "Line with ! in it\nand !notadirective\n",
    ])
    def test_plain_markdown_is_one_html_slide(self, deck_parser, converter, tmp_path, text):
        slides = deck_parser.parse(deck_write(tmp_path, text))
        assert slides == [[Html(content=converter.render(text))]]

    @pytest.mark.parametrize("count", [0, 1, 2, 5])
    def test_only_separators_yield_no_slides(self, deck_parser, tmp_path, count):
        slides = deck_parser.parse(deck_write(tmp_path, "---\n" * count))
        assert slides == []

    def test_three_slide_example(self, deck_parser, converter, tmp_path):
        path = deck_write(tmp_path, "Intro\n---\n!header Title\nBody\n---\nEnd")

        assert deck_parser.parse(path) == [
            [Html(content=converter.render("Intro"))],
            [Header(content="Title"), Html(content=converter.render("Body"))],
            [Html(content=converter.render("End"))],
        ]

    def test_text_parse(self, deck_parser):
        slides = deck_parser.text_parse("!slide_classes a b\nHi\n---\n---\n")
        assert slides == [[SlideClasses(content=("a", "b")), Html(content="<p>Hi</p>")]]


class TestErrorsAreValues:
    """Test that only the root load failure short-circuits"""

    def test_missing_root(self, deck_parser, tmp_path):
        missing = tmp_path / "absent.md"
        slides = deck_parser.parse(str(missing))

        assert len(slides) == 1
        assert len(slides[0]) == 1
        [[block]] = slides
        assert isinstance(block, Error)
        assert block.content == f'could not read file "{missing}": no such file or directory'

    def test_root_is_directory(self, deck_parser, tmp_path):
        [[block]] = deck_parser.parse(str(tmp_path))
        assert isinstance(block, Error)

    def test_missing_include_keeps_siblings(self, deck_parser, tmp_path):
        missing = tmp_path / "gone.md"
        path = deck_write(tmp_path, f"Before\n!include {missing}\nAfter\n")

        assert deck_parser.parse(path) == [[
            Html(content="<p>Before</p>"),
            Error(content=f"Included file not found: {missing}"),
            Html(content="<p>After</p>"),
        ]]

    def test_bad_directives_embedded_in_place(self, deck_parser, tmp_path):
        path = deck_write(tmp_path, "!code a.py python\n---\n!nope x\nText\n")

        assert deck_parser.parse(path) == [
            [Error(content="invalid code parameters a.py python")],
            [Error(content="wrong command !nope x"), Html(content="<p>Text</p>")],
        ]

    def test_conversion_failure_embedded(self, tmp_path):
        class RejectingConverter(MarkdownConverter):
            def render(self, text):
                if "bad" in text:
                    raise ConversionError(["cannot render"])
                return super().render(text)

        path = deck_write(tmp_path, "good\n---\nbad\n")
        slides = Parser(converter=RejectingConverter(extensions=[])).parse(path)

        assert slides == [[Html(content="<p>good</p>")], [Error(content="cannot render")]]


class TestIncludes:
    """Test include expansion across slide boundaries"""

    def test_included_separators_split_slides(self, deck_parser, tmp_path):
        part = deck_write(tmp_path, "Middle A\n---\nMiddle B\n", name="part.md")
        path = deck_write(tmp_path, f"Start\n!include {part}\n---\nEnd\n")

        assert deck_parser.parse(path) == [
            [Html(content="<p>Start</p>"), Html(content="<p>Middle A</p>")],
            [Html(content="<p>Middle B</p>")],
            [Html(content="<p>End</p>")],
        ]

    def test_relative_include_and_code(self, deck_parser, tmp_path, monkeypatch):
        (tmp_path / "snippet.py").write_text("print(42)\n")
        (tmp_path / "part.md").write_text("!code snippet.py python python3\n")
        (tmp_path / "deck.md").write_text("!include part.md\n")
        monkeypatch.chdir(tmp_path)

        [[block]] = deck_parser.parse("deck.md")
        assert isinstance(block, Code)
        assert block.content == "print(42)\n"
        assert block.runner == "python3"

    def test_cyclic_include_terminates(self, tmp_path):
        loop = tmp_path / "loop.md"
        loop.write_text(f"!include {loop}\n")
        parser = Parser(settings=AppSettings(max_include_depth=5))

        assert parser.parse(str(loop)) == [
            [Error(content=f"Include depth limit (5) exceeded: {loop}")]
        ]

    def test_large_depth_bound_does_not_exhaust_the_stack(self, tmp_path):
        loop = tmp_path / "loop.md"
        loop.write_text(f"Text\n---\n!include {loop}\n")
        parser = Parser(
            converter=MarkdownConverter(extensions=[]),
            settings=AppSettings(_env_file=None, max_include_depth=1500),
        )

        slides = parser.parse(str(loop))

        assert len(slides) == 1502
        assert slides[0] == [Html(content="<p>Text</p>")]
        assert slides[-1] == [Error(content=f"Include depth limit (1500) exceeded: {loop}")]


class TestModuleLevelParse:
    """Test the package entry point"""

    def test_parse_function(self, tmp_path):
        path = deck_write(tmp_path, "!header Hello\n---\n!footer Bye\n")
        assert parse(path) == [[Header(content="Hello")], [Footer(content="Bye")]]
