"""HTTP client for the remote CNIS analysis service."""

import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from cnis_analyzer.core.models.cnis import CnisResponse
from cnis_analyzer.core.models.request import AnalysisRequest
from cnis_analyzer.shared.config import Settings, get_settings
from cnis_analyzer.shared.exceptions import (
    RequestFailed,
    ResponseParseError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

DOCUMENT_FIELD = "cnisDocument"
METADATA_FIELD = "json"


class AnalysisClient:
    """Submits a CNIS extract to ``POST {base_url}/analyze``.

    One call is one independent request: no retries, no idempotency key.
    The client can be used as a context manager; a caller-supplied
    ``httpx.Client`` is never closed by this class.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self.settings.request_timeout)

    def __enter__(self) -> "AnalysisClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def analyze(self, request: AnalysisRequest) -> CnisResponse:
        """
        Send the document and metadata, return the parsed analysis.

        Args:
            request: Validated analysis request

        Returns:
            CnisResponse parsed from the response body

        Raises:
            RequestFailed: If the service answers with a non-2xx status
            ServiceUnavailableError: If the service cannot be reached
            ResponseParseError: If the body is not a valid analysis result
        """
        url = self.settings.analyze_url
        document = request.document
        files = {
            DOCUMENT_FIELD: (document.filename, document.content, document.content_type),
        }
        data = {METADATA_FIELD: request.metadata_json()}

        logger.info(
            "Enviando CNIS %s (%d bytes) para %s", document.filename, document.size, url
        )
        try:
            response = self._http.post(
                url,
                files=files,
                data=data,
                headers={"accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error("Falha de comunicação com o serviço de análise: %s", e)
            raise ServiceUnavailableError(
                f"Não foi possível contatar o serviço de análise: {e}"
            ) from e

        if not response.is_success:
            logger.error("Serviço de análise respondeu %d", response.status_code)
            raise RequestFailed(response.status_code, response.text)

        logger.info("Análise recebida (%d bytes)", len(response.content))
        return parse_analysis_response(response.text)


def parse_analysis_response(body: str) -> CnisResponse:
    """Parse a JSON body into CnisResponse.

    Raises:
        ResponseParseError: If the body is not JSON or does not match the schema
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Resposta do serviço não é um JSON válido: {e}") from e

    try:
        return CnisResponse.model_validate(payload)
    except PydanticValidationError as e:
        raise ResponseParseError(
            f"Resposta do serviço fora do formato esperado: {e.error_count()} erro(s)\n{e}"
        ) from e


def analyze_cnis(request: AnalysisRequest, settings: Optional[Settings] = None) -> CnisResponse:
    """Submit a request with a short-lived client."""
    with AnalysisClient(settings) as client:
        return client.analyze(request)
