# tests/test_report_request.py
import os
import sys
import importlib

# Make sure we import from the project root
sys.path.insert(0, os.getcwd())
rr = importlib.import_module("report_request")

ReportRequest = rr.ReportRequest


def test_from_query_picks_known_parameters():
    req = ReportRequest.from_query({
        "alternativeHeaders": "'name':'Nombre'",
        "excludeColumns": "'id'",
        "page": "2",
    })
    assert req.alternative_headers == "'name':'Nombre'"
    assert req.exclude_columns == "'id'"
    assert req.include_columns is None
    assert req.value_replacements is None

def test_accessors_parse_each_shape():
    req = ReportRequest(
        alternative_headers="'name':'Nombre',\"cost\":\"Costo\"",
        exclude_columns="'id','createdBy'",
        include_columns="\"name\",'cost'",
        value_replacements="'active'.'true':'Yes','active'.'false':'No'",
    )
    assert req.alternative_headers_map() == {"name": "Nombre", "cost": "Costo"}
    assert req.exclude_columns_set() == {"id", "createdBy"}
    assert req.include_columns_set() == {"name", "cost"}
    assert req.value_replacements_map() == {"active": {"true": "Yes", "false": "No"}}

def test_accessors_on_absent_parameters_are_empty():
    req = ReportRequest()
    assert req.alternative_headers_map() == {}
    assert req.exclude_columns_set() == set()
    assert req.include_columns_set() == set()
    assert req.value_replacements_map() == {}

def test_customization_only_has_supplied_directives():
    req = ReportRequest.from_query({"excludeColumns": "'id'", "valueReplacements": "'x'"})
    assert req.customization() == {
        "exclude_columns": {"id"},
        "value_replacements": {},
    }

def test_customization_empty_request():
    assert ReportRequest().customization() == {}

def test_customization_is_recomputed():
    req = ReportRequest(exclude_columns="'id'")
    first = req.customization()
    first["exclude_columns"].add("other")
    assert req.customization() == {"exclude_columns": {"id"}}

def test_repr_lists_raw_directives():
    req = ReportRequest(include_columns="'a'")
    assert "include_columns=\"'a'\"" in repr(req)
