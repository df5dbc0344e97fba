"""Enumerations for CNIS domain models."""

from enum import Enum


class Genero(str, Enum):
    """Gender code as typed in the intake form."""

    MASCULINO = "M"
    FEMININO = "F"

    @property
    def wire_value(self) -> str:
        """Value expected by the analysis service."""
        return "male" if self is Genero.MASCULINO else "female"


class TipoSegurado(str, Enum):
    """Claimant category (tipo de segurado)."""

    EMPREGADO_URBANO = "empregado_urbano"
    EMPREGADO_RURAL = "empregado_rural"
    EMPREGADO_DOMESTICO = "empregado_domestico"
    TRABALHADOR_AVULSO = "trabalhador_avulso"
    CONTRIBUINTE_INDIVIDUAL_AUTONOMO = "contribuinte_individual_autonomo"
    CONTRIBUINTE_INDIVIDUAL_PRESTADOR = "contribuinte_individual_prestador"
    MEI = "mei"
    SEGURADO_ESPECIAL = "segurado_especial"
    SEGURADO_FACULTATIVO = "segurado_facultativo"

    @property
    def descricao(self) -> str:
        """Human-readable label."""
        return _DESCRICOES_SEGURADO[self]


_DESCRICOES_SEGURADO = {
    TipoSegurado.EMPREGADO_URBANO: "Empregado Urbano",
    TipoSegurado.EMPREGADO_RURAL: "Empregado Rural",
    TipoSegurado.EMPREGADO_DOMESTICO: "Empregado Doméstico",
    TipoSegurado.TRABALHADOR_AVULSO: "Trabalhador Avulso",
    TipoSegurado.CONTRIBUINTE_INDIVIDUAL_AUTONOMO: "Contribuinte Individual (Autônomo)",
    TipoSegurado.CONTRIBUINTE_INDIVIDUAL_PRESTADOR: "Contribuinte Individual (Prestador de Serviço)",
    TipoSegurado.MEI: "MEI",
    TipoSegurado.SEGURADO_ESPECIAL: "Segurado Especial",
    TipoSegurado.SEGURADO_FACULTATIVO: "Segurado Facultativo",
}


class TipoRequisito(str, Enum):
    """Requirement kinds evaluated for a retirement rule."""

    IDADE = "idade"
    CONTRIBUICAO = "contribuicao"
    PONTOS = "pontos"
