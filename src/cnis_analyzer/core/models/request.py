"""Analysis request model (intake form data + CNIS document)."""

import json
from datetime import date
from typing import Any

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from cnis_analyzer.core.models.enums import Genero, TipoSegurado
from cnis_analyzer.shared.exceptions import (
    CPFValidationError,
    MissingFieldError,
    ValidationError,
)
from cnis_analyzer.shared.validators import validar_cpf, validar_email, validar_telefone

# Form labels used in validation messages
FIELD_LABELS = {
    "name": "Nome Completo",
    "federal_document": "CPF",
    "birth_date": "Data de Nascimento",
    "email": "E-mail",
    "phone_number": "Telefone",
    "gender": "Gênero",
    "client_type": "Tipo de Segurado",
    "document": "Extrato CNIS (PDF)",
}


class CnisDocument(BaseModel):
    """The CNIS extract uploaded to the analysis service."""

    filename: str = Field(..., description="Original file name")
    content: bytes = Field(..., description="Raw PDF bytes", repr=False)
    content_type: str = Field(default="application/pdf")

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.content)


class AnalysisRequest(BaseModel):
    """Insured-person metadata plus the CNIS document, submitted once."""

    name: str = Field(..., description="Nome completo do segurado")
    federal_document: str = Field(..., description="CPF, as typed")
    birth_date: date = Field(..., description="Data de nascimento")
    email: str
    phone_number: str
    gender: Genero
    client_type: TipoSegurado
    document: CnisDocument

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Nome não informado")
        return v

    @field_validator("federal_document")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        """Validate CPF check digits, keeping the value as typed."""
        valido, motivo = validar_cpf(v)
        if not valido:
            raise ValueError(motivo)
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        valido, motivo = validar_email(v)
        if not valido:
            raise ValueError(motivo)
        return v.strip()

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        valido, motivo = validar_telefone(v)
        if not valido:
            raise ValueError(motivo)
        return v.strip()

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()[:1]
        return v

    @property
    def birth_date_instant(self) -> str:
        """Birth date as an ISO-8601 instant at midnight UTC with milliseconds."""
        return f"{self.birth_date.isoformat()}T00:00:00.000Z"

    def metadata(self) -> dict[str, str]:
        """Identity metadata sent in the ``json`` multipart part."""
        return {
            "name": self.name,
            "federalDocument": self.federal_document,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "birthDate": self.birth_date_instant,
            "gender": self.gender.wire_value,
            "clientType": self.client_type.value,
        }

    def metadata_json(self) -> str:
        """Metadata serialized as UTF-8 JSON text."""
        return json.dumps(self.metadata(), ensure_ascii=False)

    @classmethod
    def from_form(cls, **fields: Any) -> "AnalysisRequest":
        """Build a request from raw form values.

        Raises:
            MissingFieldError: If a required field or the document is missing
            CPFValidationError: If the CPF is invalid
            ValidationError: For any other invalid field
        """
        missing = [
            FIELD_LABELS.get(key, key)
            for key in FIELD_LABELS
            if fields.get(key) is None
            or (isinstance(fields.get(key), str) and not fields[key].strip())
        ]
        if missing:
            raise MissingFieldError(
                "Campos obrigatórios não informados: " + ", ".join(missing)
            )

        try:
            return cls(**fields)
        except PydanticValidationError as e:
            errors = e.errors()
            messages = []
            for err in errors:
                field = str(err["loc"][0]) if err["loc"] else ""
                label = FIELD_LABELS.get(field, field)
                msg = err["msg"].removeprefix("Value error, ")
                messages.append(f"{label}: {msg}")
            text = "; ".join(messages)
            if any(err["loc"] and err["loc"][0] == "federal_document" for err in errors):
                raise CPFValidationError(text) from e
            raise ValidationError(text) from e
