"""Tests for viewtemplates.models."""

from __future__ import annotations

from viewtemplates.models import MappingModel, SingleValueModel, View


class TestMappingModel:
    def test_variables_are_entries(self):
        model = MappingModel({"a": 1, "b": "two"})
        assert model.variables() == {"a": 1, "b": "two"}

    def test_variables_are_a_copy(self):
        source = {"a": 1}
        variables = MappingModel(source).variables()
        variables["b"] = 2
        assert source == {"a": 1}

    def test_type_name(self):
        assert MappingModel({}).type_name == "dict"


class TestSingleValueModel:
    def test_single_it_variable(self):
        value = object()
        assert SingleValueModel(value).variables() == {"it": value}

    def test_mapping_value_not_unpacked(self):
        # A mapping wrapped explicitly stays one variable
        model = SingleValueModel({"a": 1})
        assert model.variables() == {"it": {"a": 1}}

    def test_type_name(self):
        assert SingleValueModel(3).type_name == "int"
        assert SingleValueModel(None).type_name == "None"


class TestView:
    def test_default_model_is_empty_mapping(self):
        view = View("/home")
        assert isinstance(view.model, MappingModel)
        assert view.model.variables() == {}

    def test_of(self):
        view = View.of("/home.st", viewName="home")
        assert view.path == "/home.st"
        assert view.model == MappingModel({"viewName": "home"})
