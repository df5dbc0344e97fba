"""CNIS Analyzer - cliente do serviço de análise de extratos CNIS."""

__version__ = "0.1.0"
