"""Main Typer application for CNIS Analyzer."""

import json
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cnis_analyzer import __version__
from cnis_analyzer.cli.console import (
    configure_logging,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from cnis_analyzer.core.models import AnalysisRequest, CnisResponse, Dashboard, Genero, TipoSegurado
from cnis_analyzer.core.services import build_dashboard, parse_competencia, parse_remuneracao
from cnis_analyzer.infrastructure.client import analyze_cnis, parse_analysis_response
from cnis_analyzer.infrastructure.documents import load_cnis_document
from cnis_analyzer.shared.config import Settings, get_settings
from cnis_analyzer.shared.exceptions import CNISAnalyzerError, ResultFileError, ValidationError
from cnis_analyzer.shared.formatters import (
    format_competencia,
    format_currency,
    format_date,
)

app = typer.Typer(
    name="cnis-analyzer",
    help="Análise de CNIS: elegibilidade, tempo de contribuição e evolução salarial",
    add_completion=True,
    no_args_is_help=True,
)

SPARK_CHARS = "▁▂▃▄▅▆▇█"


class Aba(str, Enum):
    """Dashboard sections."""

    TODAS = "todas"
    VISAO_GERAL = "visao-geral"
    ELEGIBILIDADE = "elegibilidade"
    HISTORICO = "historico"
    SALARIOS = "salarios"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"CNIS Analyzer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra logs detalhados no stderr"),
    ] = False,
) -> None:
    """CNIS Analyzer - análise previdenciária a partir do extrato CNIS."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@app.command()
def analyze(
    arquivo: Annotated[
        Path,
        typer.Argument(
            help="Caminho para o extrato CNIS em PDF",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    nome: Annotated[str, typer.Option("--nome", prompt="Nome completo", help="Nome completo do segurado")],
    cpf: Annotated[str, typer.Option("--cpf", prompt="CPF", help="CPF do segurado")],
    nascimento: Annotated[
        str,
        typer.Option("--nascimento", prompt="Data de nascimento (DD/MM/AAAA)", help="Data de nascimento"),
    ],
    email: Annotated[str, typer.Option("--email", prompt="E-mail", help="E-mail de contato")],
    telefone: Annotated[str, typer.Option("--telefone", prompt="Telefone", help="Telefone com DDD")],
    genero: Annotated[
        Genero,
        typer.Option("--genero", prompt="Gênero (M/F)", case_sensitive=False, help="M ou F"),
    ],
    tipo_segurado: Annotated[
        TipoSegurado,
        typer.Option("--tipo-segurado", help="Tipo de segurado"),
    ] = TipoSegurado.EMPREGADO_URBANO,
    aba: Annotated[
        Aba,
        typer.Option("--aba", "-a", help="Seção do painel a exibir"),
    ] = Aba.TODAS,
    salvar_json: Annotated[
        Optional[Path],
        typer.Option("--salvar-json", help="Salva a resposta do serviço neste arquivo JSON"),
    ] = None,
    pdf: Annotated[
        Optional[Path],
        typer.Option("--pdf", help="Gera também o relatório PDF neste caminho"),
    ] = None,
    api_url: Annotated[
        Optional[str],
        typer.Option("--api-url", help="URL base do serviço de análise (padrão: CNIS_API_BASE_URL)"),
    ] = None,
) -> None:
    """Envia o CNIS ao serviço de análise e exibe o painel."""
    try:
        request = AnalysisRequest.from_form(
            name=nome,
            federal_document=cpf,
            birth_date=_parse_birth_date(nascimento),
            email=email,
            phone_number=telefone,
            gender=genero,
            client_type=tipo_segurado,
            document=load_cnis_document(arquivo),
        )

        settings = get_settings()
        if api_url:
            settings = Settings(api_base_url=api_url)

        console.print()
        console.print(
            f"[muted]Analisando {escape(arquivo.name)} ({tipo_segurado.descricao})...[/muted]"
        )
        response = analyze_cnis(request, settings)

        if salvar_json:
            _save_response(response, salvar_json)
            print_info(f"Resposta salva em {salvar_json}")

        _display_dashboard(build_dashboard(response), aba)

        if pdf:
            _write_pdf(response, pdf)

    except CNISAnalyzerError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except ImportError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def show(
    resultado: Annotated[
        Path,
        typer.Argument(
            help="Arquivo JSON salvo com --salvar-json",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    aba: Annotated[
        Aba,
        typer.Option("--aba", "-a", help="Seção do painel a exibir"),
    ] = Aba.TODAS,
    detalhado: Annotated[
        bool,
        typer.Option("--detalhado", "-d", help="Mostra detalhes de cada vínculo"),
    ] = False,
) -> None:
    """Exibe o painel de uma análise salva, sem acessar o serviço."""
    try:
        response = _load_response(resultado)
        _display_dashboard(build_dashboard(response), aba, detalhado=detalhado)
    except CNISAnalyzerError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def report(
    resultado: Annotated[
        Path,
        typer.Argument(
            help="Arquivo JSON salvo com --salvar-json",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Caminho para arquivo PDF de saída",
        ),
    ] = None,
) -> None:
    """Gera relatório em PDF de uma análise salva."""
    try:
        response = _load_response(resultado)
        _write_pdf(response, output or resultado.with_suffix(".pdf"))
    except CNISAnalyzerError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except ImportError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _parse_birth_date(value: str) -> date:
    """Accept DD/MM/AAAA or AAAA-MM-DD."""
    value = value.strip()
    for fmt in ("%d/%m/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Data de nascimento inválida: {value} (use DD/MM/AAAA)")


def _load_response(path: Path) -> CnisResponse:
    try:
        body = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResultFileError(f"Não foi possível ler {path}: {e}") from e
    return parse_analysis_response(body)


def _save_response(response: CnisResponse, path: Path) -> None:
    try:
        path.write_text(
            json.dumps(response.to_wire(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        raise ResultFileError(f"Não foi possível salvar {path}: {e}") from e


def _write_pdf(response: CnisResponse, output: Path) -> None:
    from cnis_analyzer.infrastructure.reports import generate_pdf_report

    console.print("[muted]Gerando relatório PDF...[/muted]")
    generate_pdf_report(response, output)
    print_success(f"Relatório gerado: {output}")


def _display_dashboard(dashboard: Dashboard, aba: Aba = Aba.TODAS, detalhado: bool = False) -> None:
    """Render the dashboard sections selected by ``aba``."""
    _display_header(dashboard)

    if aba in (Aba.TODAS, Aba.VISAO_GERAL):
        _display_overview(dashboard)
    if aba in (Aba.TODAS, Aba.ELEGIBILIDADE):
        _display_eligibility(dashboard)
    if aba in (Aba.TODAS, Aba.HISTORICO):
        _display_history(dashboard, detalhado)
    if aba in (Aba.TODAS, Aba.SALARIOS):
        _display_wages(dashboard)


def _display_header(dashboard: Dashboard) -> None:
    cliente = dashboard.cliente
    resumo = dashboard.resumo

    console.print()
    console.print(
        Panel.fit(
            f"[header]Segurado:[/header] {escape(cliente.nome)}\n"
            f"[header]CPF:[/header] {escape(cliente.cpf)}    [header]NIT:[/header] {escape(cliente.nit)}",
            title="CNIS Analyzer - Segurado",
            border_style="blue",
        )
    )

    stats = Table(show_header=True, header_style="bold", box=None, padding=(0, 3))
    stats.add_column("Idade Atual")
    stats.add_column("Tempo Contrib.")
    stats.add_column("Carência")
    stats.add_column("Pontos")
    stats.add_row(
        f"[value]{escape(resumo.idade_abreviada)}[/value]",
        f"[value]{resumo.tempo_contribuicao}[/value]",
        f"[value]{resumo.carencia_meses}[/value]",
        f"[value]{resumo.pontos}[/value]",
    )
    stats.add_row(
        f"[muted]{resumo.idade_anos} anos[/muted]",
        "[muted]Total líquido[/muted]",
        "[muted]Meses acumulados[/muted]",
        "[muted]Regra de pontos[/muted]",
    )
    console.print(stats)


def _display_overview(dashboard: Dashboard) -> None:
    console.print()
    console.print("[header]Status das Regras:[/header]")
    if not dashboard.regras:
        console.print("[muted]Nenhuma regra retornada pelo serviço.[/muted]")
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Regra", style="cyan", max_width=60)
        table.add_column("Situação", justify="center")
        for regra in dashboard.regras_resumo:
            style = "eligible" if regra.is_eligible else "ineligible"
            table.add_row(escape(regra.label), f"[{style}]{regra.status_resumido}[/{style}]")
        console.print(table)

    console.print()
    console.print("[header]Últimas Remunerações:[/header]")
    if not dashboard.salarios:
        console.print("[muted]Nenhuma remuneração encontrada.[/muted]")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Competência")
    table.add_column("Valor", justify="right", style="currency")
    for ponto in dashboard.salarios_recentes:
        table.add_row(ponto.label, format_currency(ponto.value))
    console.print(table)


def _display_eligibility(dashboard: Dashboard) -> None:
    console.print()
    console.print("[header]Elegibilidade:[/header]")
    if not dashboard.regras:
        console.print("[muted]Nenhuma regra retornada pelo serviço.[/muted]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Regra", style="cyan", max_width=50)
    table.add_column("Previsão", justify="center")
    table.add_column("Requisitos pendentes", max_width=45)

    for regra in dashboard.regras:
        if regra.is_eligible:
            previsao = "[eligible]DIREITO ADQUIRIDO[/eligible]"
            pendentes = "[success]Já possui requisitos[/success]"
        else:
            previsao = f"[ineligible]{regra.status}[/ineligible]"
            if regra.needs_manual_check:
                pendentes = "[warning]Verificar requisitos manualmente[/warning]"
            else:
                pendentes = "\n".join(f"[red]{r.descricao}[/red]" for r in regra.pending_requirements)
        table.add_row(escape(regra.label), previsao, pendentes)

    console.print(table)


def _display_history(dashboard: Dashboard, detalhado: bool = False) -> None:
    console.print()
    console.print("[header]Vínculos & Pendências:[/header]")
    if not dashboard.historico:
        console.print("[muted]Nenhum período consolidado.[/muted]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Seq", style="dim", width=4)
    table.add_column("Origem / Tipo", max_width=40)
    table.add_column("Período")
    table.add_column("Tempo Válido")
    table.add_column("Carência", justify="right")
    table.add_column("Indicadores")
    table.add_column("Status", justify="center")

    for view in dashboard.historico:
        periodo = view.periodo
        datas = periodo.contribution_time.data
        fim = format_date(datas.data_fim) if datas.data_fim else "Atual"
        status = "[pendencia]⚠ Pendência[/pendencia]" if view.is_pendencia else "[success]✓ Ok[/success]"
        table.add_row(
            str(periodo.seq),
            f"{escape(periodo.origem or '-')}\n[muted]{escape(periodo.tipo or '')}[/muted]",
            f"{format_date(datas.data_inicio)} - {fim}",
            periodo.valid_contribution_time.abreviado,
            str(periodo.carencia),
            escape(", ".join(view.indicadores)) or "-",
            status,
        )
    console.print(table)

    if detalhado:
        for view in dashboard.historico:
            _display_relation_details(view)


def _display_relation_details(view) -> None:
    """Expanded row: relation info, last earnings and pendency indicators."""
    periodo = view.periodo
    lines = [
        f"[header]Origem:[/header] {escape(view.origem_do_vinculo or periodo.origem or '-')}",
        f"[header]Início:[/header] {format_date(view.data_inicio)}    "
        f"[header]Fim:[/header] {format_date(view.data_fim) if view.data_fim else 'Em andamento'}",
        f"[header]Tempo bruto:[/header] {periodo.contribution_time.abreviado}    "
        f"[header]Tempo válido:[/header] {periodo.valid_contribution_time.abreviado}    "
        f"[header]Carência:[/header] {periodo.carencia} meses",
    ]
    if view.indicadores_vinculo:
        lines.append(f"[header]Indicadores do vínculo:[/header] {escape(', '.join(view.indicadores_vinculo))}")
    if view.is_pendencia:
        pend = ", ".join(view.indicadores) or "sem indicadores informados"
        lines.append(f"[pendencia]Pendência: {escape(pend)}[/pendencia]")

    if not view.has_relation:
        lines.append("[muted]Detalhes do vínculo não encontrados no CNIS.[/muted]")
    elif view.ultimas_remuneracoes:
        lines.append("")
        lines.append("[header]Últimas remunerações:[/header]")
        for earning in view.ultimas_remuneracoes:
            competencia = parse_competencia(earning.competencia)
            valor = parse_remuneracao(earning.remuneracao)
            lines.append(
                f"  {format_competencia(competencia, long_year=True) if competencia else '-'}: "
                f"{format_currency(valor) if valor is not None else 'R$ 0,00'}"
            )
    else:
        lines.append("[muted]Nenhuma remuneração registrada para este vínculo.[/muted]")

    console.print(Panel("\n".join(lines), title=f"Vínculo {periodo.seq}", border_style="cyan"))


def _display_wages(dashboard: Dashboard) -> None:
    console.print()
    console.print("[header]Evolução Salarial:[/header]")
    salarios = dashboard.salarios
    if dashboard.salarios_ignorados:
        print_warning(
            f"{dashboard.salarios_ignorados} remuneração(ões) ignorada(s) por competência ou valor inválido"
        )
    if not salarios:
        console.print("[muted]Nenhuma remuneração encontrada.[/muted]")
        return

    valores = [p.value for p in salarios]
    console.print(f"[info]{_sparkline(valores)}[/info]")
    console.print(
        f"[muted]{format_competencia(salarios[0].competencia, long_year=True)} a "
        f"{format_competencia(salarios[-1].competencia, long_year=True)} - "
        f"{len(salarios)} competências | mínimo {format_currency(min(valores))} | "
        f"máximo {format_currency(max(valores))}[/muted]"
    )
    console.print("[muted]Use o comando report para o gráfico completo em PDF.[/muted]")


def _sparkline(values: list) -> str:
    """Render values as a one-line block chart."""
    low, high = min(values), max(values)
    span = high - low
    if span == 0:
        return SPARK_CHARS[0] * len(values)
    last = len(SPARK_CHARS) - 1
    return "".join(SPARK_CHARS[int((v - low) / span * last)] for v in values)
