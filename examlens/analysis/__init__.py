from examlens.analysis.analyzer import Analyzer
from examlens.analysis.base import BaseAnalyzer
from examlens.analysis.factory import AnalyzerFactory

__all__ = ["Analyzer", "AnalyzerFactory", "BaseAnalyzer"]
