"""
Collaborator tests

Tests the markdown converter, the text loader, the Pygments lexer, the
block serialisation helpers and settings loaded from the environment.
"""

import json

import markdown
import pytest
from pydantic import ValidationError
from pygments.token import Keyword, Name, Punctuation, String, Generic

from prexent.config import AppSettings
from prexent.lib.converter import ConversionError, MarkdownConverter
from prexent.lib.lexer import PrexentLexer, get_lexer
from prexent.lib.loader import FileLoadError, TextLoader
from prexent.models.blocks import Code, Html, SlideClasses, block_toDict, slides_toJSON


class TestMarkdownConverter:
    """Test rendering through Python-Markdown"""

    def test_plain_paragraph(self):
        assert MarkdownConverter(extensions=[]).render("Intro") == "<p>Intro</p>"

    def test_default_extensions_render_fenced_code(self):
        html = MarkdownConverter().render("```python\nprint(1)\n```\n")
        assert "<pre>" in html or "codehilite" in html
        assert "print" in html

    def test_default_extensions_render_tables(self):
        html = MarkdownConverter().render("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html

    def test_unknown_extension_is_a_conversion_error(self):
        converter = MarkdownConverter(extensions=["no_such_extension_anywhere"])
        with pytest.raises(ConversionError) as excinfo:
            converter.render("text")
        assert excinfo.value.messages[0].startswith("markdown extension unavailable")

    def test_library_bugs_are_not_conversion_errors(self, monkeypatch):
        """Only extension loading and rejected input become ConversionError"""
        def broken(text, **kwargs):
            raise AttributeError("internal failure")

        monkeypatch.setattr(markdown, "markdown", broken)
        with pytest.raises(AttributeError, match="internal failure"):
            MarkdownConverter(extensions=[]).render("text")


class TestTextLoader:
    """Test file loading"""

    def test_load(self, tmp_path):
        path = tmp_path / "x.md"
        path.write_text("hello")
        assert TextLoader().load(str(path)) == "hello"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "x.md"
        with pytest.raises(FileLoadError) as excinfo:
            TextLoader().load(str(missing))
        assert excinfo.value.path == str(missing)
        assert excinfo.value.message == f'could not read file "{missing}": no such file or directory'

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "bin.md"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FileLoadError, match="not valid utf-8 text"):
            TextLoader().load(str(path))


class TestPrexentLexer:
    """Test token types produced for deck source"""

    def tokens(self, source):
        return [(tok, val) for tok, val in get_lexer().get_tokens(source) if val.strip()]

    def test_separator(self):
        assert (Punctuation, "---") in self.tokens("---\n")

    def test_embed_directive(self):
        tokens = self.tokens("!include intro.md\n")
        assert tokens[:3] == [(Punctuation, "!"), (Keyword.Declaration, "include"), (String, "intro.md")]

    def test_metadata_and_styling_directives(self):
        assert (Name.Tag, "header") in self.tokens("!header Hello world\n")
        assert (Name.Decorator, "slide_classes") in self.tokens("!slide_classes a b\n")

    def test_unknown_directive(self):
        assert (Generic.Error, "bogus") in self.tokens("!bogus arg\n")

    def test_lexer_metadata(self):
        assert PrexentLexer.aliases == ["prexent"]


class TestSerialisation:
    """Test block to dict/JSON conversion"""

    def test_slide_classes_is_hashable(self):
        block = SlideClasses(("dark", "wide"))
        assert hash(block) == hash(SlideClasses(("dark", "wide")))
        assert block_toDict(block) == {"type": "slide_classes", "content": ["dark", "wide"]}

    def test_block_to_dict_has_type_first(self):
        block = Code(content="x", filename="/a.py", lang="python", runner="python3")
        data = block_toDict(block)
        assert list(data)[0] == "type"
        assert data == {
            "type": "code", "content": "x", "filename": "/a.py", "lang": "python", "runner": "python3"
        }

    def test_slides_to_json(self):
        slides = [[Html("<p>a</p>")], [SlideClasses(("dark", "wide"))]]
        assert json.loads(slides_toJSON(slides)) == [
            [{"type": "html", "content": "<p>a</p>"}],
            [{"type": "slide_classes", "content": ["dark", "wide"]}],
        ]


class TestSettings:
    """Test environment configuration"""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.separator == "---"
        assert settings.max_include_depth == 64
        assert settings.default_code_lang == "python"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PREXENT_MAX_INCLUDE_DEPTH", "7")
        monkeypatch.setenv("PREXENT_DEFAULT_CODE_RUNNER", "node")
        settings = AppSettings(_env_file=None)
        assert settings.max_include_depth == 7
        assert settings.default_code_runner == "node"

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, separator="")

    def test_separator_with_whitespace_rejected(self, monkeypatch):
        monkeypatch.setenv("PREXENT_SEPARATOR", "- -")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
