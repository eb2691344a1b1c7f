from tracecov.source.classify import PythonSourceClassifier, SourceAnalyzer, StaticLineOracle, top_level_starts
from tracecov.source.lines import LineIndex

__all__ = [
    "LineIndex",
    "PythonSourceClassifier",
    "SourceAnalyzer",
    "StaticLineOracle",
    "top_level_starts",
]
