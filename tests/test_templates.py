"""Tests for viewtemplates.templates."""

from __future__ import annotations

import io
import logging

import pytest
from jinja2 import TemplateNotFound

from viewtemplates.resources import MappingResourceReader
from viewtemplates.templates import TemplateGroup


class ClosingStream(io.BytesIO):
    """Byte stream that records close() and can fail on read or close."""

    def __init__(self, data=b"", *, fail_read=False, fail_close=False):
        super().__init__(data)
        self.fail_read = fail_read
        self.fail_close = fail_close
        self.close_calls = 0

    def read(self, *args):
        if self.fail_read:
            raise OSError("read failed")
        return super().read(*args)

    def read1(self, *args):
        if self.fail_read:
            raise OSError("read failed")
        return super().read1(*args)

    def close(self):
        self.close_calls += 1
        if self.fail_close:
            raise OSError("close failed")
        super().close()


class StubReader:
    def __init__(self, stream):
        self.stream = stream

    def get_resource(self, path):
        return f"stub:{path}"

    def open_resource(self, path):
        return self.stream


def test_render_from_reader():
    reader = MappingResourceReader({"/t/test.st": "Hello {{ name }}!"})
    group = TemplateGroup(reader)
    assert group.get_template("/t/test.st").render(name="World") == "Hello World!"


def test_compiled_template_is_cached():
    reader = MappingResourceReader({"/t/test.st": "x"})
    group = TemplateGroup(reader)
    assert group.get_template("/t/test.st") is group.get_template("/t/test.st")


def test_clear_drops_compiled_templates():
    reader = MappingResourceReader({"/t/test.st": "x"})
    group = TemplateGroup(reader)
    first = group.get_template("/t/test.st")
    group.clear()
    assert group.get_template("/t/test.st") is not first


def test_missing_template_raises():
    group = TemplateGroup(MappingResourceReader())
    with pytest.raises(TemplateNotFound):
        group.get_template("/t/nonexistent.st")


def test_malformed_template_name_raises_not_found(caplog):
    group = TemplateGroup(MappingResourceReader())
    with caplog.at_level(logging.ERROR, logger="viewtemplates.templates.group"):
        with pytest.raises(TemplateNotFound):
            group.get_template("relative/name.st")
    assert "Malformed path" in caplog.text


def test_has_template():
    reader = MappingResourceReader({"/t/exists.st": "yes"})
    group = TemplateGroup(reader)
    assert group.has_template("/t/exists.st")
    assert not group.has_template("/t/nope.st")


def test_jinja_conditionals():
    reader = MappingResourceReader(
        {"/t/cond.st": "{% if show %}Shown: {{ what }}{% endif %}"}
    )
    group = TemplateGroup(reader)
    template = group.get_template("/t/cond.st")
    assert template.render(show=True, what="x") == "Shown: x"
    assert template.render(show=False, what="x") == ""


def test_autoescape_by_default():
    reader = MappingResourceReader({"/t/esc.st": "{{ value }}"})
    assert TemplateGroup(reader).get_template("/t/esc.st").render(value="<b>") == "&lt;b&gt;"
    raw = TemplateGroup(reader, autoescape=False)
    assert raw.get_template("/t/esc.st").render(value="<b>") == "<b>"


def test_decodes_with_configured_encoding():
    reader = MappingResourceReader({"/t/latin.st": "café".encode("latin-1")})
    group = TemplateGroup(reader, encoding="latin-1")
    assert group.get_template("/t/latin.st").render() == "café"


class TestStreamLifecycle:
    def test_closed_after_success(self):
        stream = ClosingStream(b"ok")
        source, name, uptodate = TemplateGroup(StubReader(stream)).load_source("/t/a.st")
        assert source == "ok"
        assert name == "/t/a.st"
        assert uptodate()
        assert stream.close_calls == 1

    def test_closed_after_read_failure(self, caplog):
        stream = ClosingStream(b"ok", fail_read=True)
        with caplog.at_level(logging.ERROR, logger="viewtemplates.templates.group"):
            assert TemplateGroup(StubReader(stream)).load_source("/t/a.st") is None
        assert stream.close_calls >= 1
        assert "Can't load [/t/a.st]" in caplog.text

    def test_close_failure_is_logged_not_raised(self, caplog):
        stream = ClosingStream(b"ok", fail_close=True)
        with caplog.at_level(logging.ERROR, logger="viewtemplates.templates.group"):
            result = TemplateGroup(StubReader(stream)).load_source("/t/a.st")
        assert result is not None
        assert result[0] == "ok"
        assert "Cannot close stream for template [/t/a.st]" in caplog.text
        stream.fail_close = False
        stream.close()

    def test_invalid_encoding_returns_none(self, caplog):
        stream = ClosingStream(b"\xff\xfe\xfa")
        with caplog.at_level(logging.ERROR, logger="viewtemplates.templates.group"):
            assert TemplateGroup(StubReader(stream)).load_source("/t/a.st") is None
        assert stream.close_calls == 1
