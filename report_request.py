# report_request.py
# Query parameters that customize a tabular report export:
#   alternativeHeaders  map directive     original header -> new header
#   excludeColumns      set directive     columns to drop
#   includeColumns      set directive     columns to keep
#   valueReplacements   nested directive  column -> old value -> new value
#
# Each parameter is parsed on demand with the matching entry point in
# directives.py; nothing is cached.

from typing import Any, Dict, Mapping, Optional, Set

from directives import parse_map, parse_nested_map, parse_set

PARAM_NAMES = {
    "alternativeHeaders": "alternative_headers",
    "excludeColumns": "exclude_columns",
    "includeColumns": "include_columns",
    "valueReplacements": "value_replacements",
}


class ReportRequest:
    def __init__(self,
                 alternative_headers: Optional[str] = None,
                 exclude_columns: Optional[str] = None,
                 include_columns: Optional[str] = None,
                 value_replacements: Optional[str] = None):
        self.alternative_headers = alternative_headers
        self.exclude_columns = exclude_columns
        self.include_columns = include_columns
        self.value_replacements = value_replacements

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "ReportRequest":
        """Build from query parameters; unrelated parameters are ignored."""
        return cls(**{attr: params.get(name) for name, attr in PARAM_NAMES.items()})

    def alternative_headers_map(self) -> Dict[str, str]:
        return parse_map(self.alternative_headers)

    def exclude_columns_set(self) -> Set[str]:
        return parse_set(self.exclude_columns)

    def include_columns_set(self) -> Set[str]:
        return parse_set(self.include_columns)

    def value_replacements_map(self) -> Dict[str, Dict[str, str]]:
        return parse_nested_map(self.value_replacements)

    def customization(self) -> Dict[str, Any]:
        """
        Parsed collections for every directive that was supplied. A directive
        that is present but empty or malformed maps to an empty collection;
        an absent one is left out so the renderer keeps its default.
        """
        out: Dict[str, Any] = {}
        if self.alternative_headers is not None:
            out["alternative_headers"] = self.alternative_headers_map()
        if self.exclude_columns is not None:
            out["exclude_columns"] = self.exclude_columns_set()
        if self.include_columns is not None:
            out["include_columns"] = self.include_columns_set()
        if self.value_replacements is not None:
            out["value_replacements"] = self.value_replacements_map()
        return out

    def __repr__(self) -> str:
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in PARAM_NAMES.values())
        return f"ReportRequest({fields})"
