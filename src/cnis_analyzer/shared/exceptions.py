"""Custom exceptions for CNIS Analyzer."""


class CNISAnalyzerError(Exception):
    """Base exception for all CNIS Analyzer errors."""

    pass


class ValidationError(CNISAnalyzerError):
    """Input validation error, raised before any network call."""

    pass


class CPFValidationError(ValidationError):
    """Invalid CPF."""

    pass


class MissingFieldError(ValidationError):
    """Required form field not informed."""

    pass


class DocumentError(CNISAnalyzerError):
    """Error reading the CNIS document."""

    pass


class UnsupportedFileError(DocumentError):
    """File is not a PDF document."""

    pass


class AnalysisServiceError(CNISAnalyzerError):
    """Error talking to the remote analysis service."""

    pass


class RequestFailed(AnalysisServiceError):
    """Analysis service answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Erro na análise: {status_code} - {body}")


class ServiceUnavailableError(AnalysisServiceError):
    """Analysis service could not be reached."""

    pass


class ResponseParseError(AnalysisServiceError):
    """Analysis service answered with a body that is not a valid result."""

    pass


class ResultFileError(CNISAnalyzerError):
    """Saved analysis result could not be read or written."""

    pass


class ReportGenerationError(CNISAnalyzerError):
    """Error generating report."""

    pass
