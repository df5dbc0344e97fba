"""PDF report generator for CNIS analysis results."""

from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

try:
    from reportlab.graphics.charts.lineplots import LinePlot
    from reportlab.graphics.shapes import Drawing
    from reportlab.lib import colors
    from reportlab.lib.pagesizes import A4
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import cm
    from reportlab.platypus import (
        PageBreak,
        Paragraph,
        SimpleDocTemplate,
        Spacer,
        Table,
        TableStyle,
    )

    REPORTLAB_AVAILABLE = True
except ImportError:
    REPORTLAB_AVAILABLE = False

from cnis_analyzer import __version__
from cnis_analyzer.core.services import build_dashboard
from cnis_analyzer.shared.exceptions import ReportGenerationError
from cnis_analyzer.shared.formatters import format_competencia, format_currency, format_date

if TYPE_CHECKING:
    from cnis_analyzer.core.models.cnis import CnisResponse
    from cnis_analyzer.core.models.dashboard import Dashboard


def check_reportlab_available() -> None:
    """Check if reportlab is available, raise if not."""
    if not REPORTLAB_AVAILABLE:
        raise ImportError(
            "ReportLab não está instalado. "
            "Instale com: pip install 'cnis-analyzer[pdf]' ou pip install reportlab"
        )


class PDFReportGenerator:
    """Generates a PDF version of the analysis dashboard."""

    HEADER_BG = "#2b6cb0"
    ELIGIBLE_BG = "#c6f6d5"
    PENDENCIA_BG = "#fefcbf"

    def __init__(self, dashboard: "Dashboard"):
        check_reportlab_available()
        self.dashboard = dashboard
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self) -> None:
        """Setup custom paragraph styles."""
        self.styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=self.styles["Heading1"],
                fontSize=20,
                spaceAfter=20,
                textColor=colors.HexColor("#1a365d"),
                alignment=1,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SectionHeader",
                parent=self.styles["Heading2"],
                fontSize=13,
                spaceBefore=20,
                spaceAfter=10,
                textColor=colors.HexColor("#2c5282"),
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="TableCell",
                parent=self.styles["Normal"],
                fontSize=8,
                leading=11,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="TableHeader",
                parent=self.styles["Normal"],
                fontSize=8,
                leading=11,
                fontName="Helvetica-Bold",
                textColor=colors.white,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SmallText",
                parent=self.styles["Normal"],
                fontSize=8,
                textColor=colors.gray,
                alignment=1,
            )
        )

    def _cell(self, text: str) -> "Paragraph":
        return Paragraph(escape(str(text)), self.styles["TableCell"])

    def _header_row(self, *titles: str) -> list:
        return [Paragraph(t, self.styles["TableHeader"]) for t in titles]

    def _grid_style(self) -> list:
        return [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(self.HEADER_BG)),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#cbd5e0")),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]

    def generate(self, output_path: Path) -> Path:
        """Generate PDF report and save to output_path."""
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            rightMargin=1.5 * cm,
            leftMargin=1.5 * cm,
            topMargin=1.5 * cm,
            bottomMargin=1.5 * cm,
        )

        elements = []
        elements.extend(self._build_header())
        elements.extend(self._build_summary())
        elements.extend(self._build_eligibility())

        if self.dashboard.historico:
            elements.append(PageBreak())
            elements.extend(self._build_history())

        elements.extend(self._build_wages())
        elements.extend(self._build_footer())

        try:
            doc.build(elements)
        except Exception as e:
            raise ReportGenerationError(f"Falha ao gerar PDF: {e}") from e
        return output_path

    def _build_header(self) -> list:
        """Build report header with client identification."""
        cliente = self.dashboard.cliente
        elements = [Paragraph("CNIS Analyzer", self.styles["ReportTitle"])]

        data = [[
            Paragraph("<b>Segurado:</b>", self.styles["TableCell"]),
            self._cell(cliente.nome),
            Paragraph("<b>CPF:</b>", self.styles["TableCell"]),
            self._cell(cliente.cpf),
            Paragraph("<b>NIT:</b>", self.styles["TableCell"]),
            self._cell(cliente.nit),
        ]]
        table = Table(data, colWidths=[2 * cm, 6 * cm, 1.3 * cm, 3.2 * cm, 1.3 * cm, 4.2 * cm])
        table.setStyle(
            TableStyle([
                ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor("#f7fafc")),
                ("BOX", (0, 0), (-1, -1), 1, colors.HexColor("#e2e8f0")),
                ("TOPPADDING", (0, 0), (-1, -1), 6),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ])
        )
        elements.append(table)
        return elements

    def _build_summary(self) -> list:
        """Build the four headline numbers."""
        resumo = self.dashboard.resumo
        elements = [Paragraph("Resumo", self.styles["SectionHeader"])]

        data = [
            self._header_row("Idade Atual", "Tempo Contrib.", "Carência", "Pontos"),
            [
                self._cell(f"{resumo.idade_abreviada} ({resumo.idade_anos} anos)"),
                self._cell(resumo.tempo_contribuicao),
                self._cell(f"{resumo.carencia_meses} meses"),
                self._cell(resumo.pontos),
            ],
        ]
        table = Table(data, colWidths=[4.5 * cm] * 4)
        table.setStyle(TableStyle(self._grid_style()))
        elements.append(table)
        return elements

    def _build_eligibility(self) -> list:
        """Build the retirement rules table, eligible rules highlighted."""
        elements = [Paragraph("Elegibilidade", self.styles["SectionHeader"])]
        regras = self.dashboard.regras
        if not regras:
            elements.append(Paragraph("Nenhuma regra de aposentadoria retornada.", self.styles["Normal"]))
            return elements

        data = [self._header_row("Regra", "Situação", "Requisitos pendentes")]
        style = self._grid_style()
        for row, regra in enumerate(regras, start=1):
            if regra.is_eligible:
                pendentes = "Já possui requisitos"
                style.append(("BACKGROUND", (0, row), (-1, row), colors.HexColor(self.ELIGIBLE_BG)))
            elif regra.needs_manual_check:
                pendentes = "Verificar requisitos manualmente"
            else:
                pendentes = "; ".join(r.descricao for r in regra.pending_requirements)
            data.append([self._cell(regra.label), self._cell(regra.status), self._cell(pendentes)])

        table = Table(data, colWidths=[8 * cm, 3 * cm, 7 * cm], repeatRows=1)
        table.setStyle(TableStyle(style))
        elements.append(table)
        return elements

    def _build_history(self) -> list:
        """Build the consolidated periods table (vínculos e pendências)."""
        elements = [Paragraph("Vínculos &amp; Pendências", self.styles["SectionHeader"])]

        data = [self._header_row("Seq", "Origem", "Período", "Tempo válido", "Carência", "Indicadores", "Status")]
        style = self._grid_style()
        for row, view in enumerate(self.dashboard.historico, start=1):
            periodo = view.periodo
            datas = periodo.contribution_time.data
            fim = format_date(datas.data_fim) if datas.data_fim else "Atual"
            if view.is_pendencia:
                style.append(("BACKGROUND", (0, row), (-1, row), colors.HexColor(self.PENDENCIA_BG)))
            data.append([
                self._cell(periodo.seq),
                self._cell(f"{periodo.origem or '-'} {periodo.tipo or ''}".strip()),
                self._cell(f"{format_date(datas.data_inicio)} - {fim}"),
                self._cell(periodo.valid_contribution_time.abreviado),
                self._cell(periodo.carencia),
                self._cell(", ".join(view.indicadores) or "-"),
                self._cell("Pendência" if view.is_pendencia else "Ok"),
            ])

        table = Table(
            data,
            colWidths=[1 * cm, 5 * cm, 3.8 * cm, 2.4 * cm, 1.6 * cm, 2.4 * cm, 1.8 * cm],
            repeatRows=1,
        )
        table.setStyle(TableStyle(style))
        elements.append(table)
        return elements

    def _build_wages(self) -> list:
        """Build the wage evolution chart and the recent wages table."""
        elements = [Paragraph("Evolução Salarial", self.styles["SectionHeader"])]
        salarios = self.dashboard.salarios

        if len({p.competencia for p in salarios}) < 2:
            elements.append(
                Paragraph("Dados insuficientes para o gráfico de evolução salarial.", self.styles["Normal"])
            )
        else:
            elements.append(self._wage_chart())

        if salarios:
            elements.append(Spacer(1, 0.5 * cm))
            data = [self._header_row("Competência", "Remuneração")]
            for ponto in self.dashboard.salarios_recentes:
                data.append([
                    self._cell(format_competencia(ponto.competencia, long_year=True)),
                    self._cell(format_currency(ponto.value)),
                ])
            table = Table(data, colWidths=[5 * cm, 5 * cm])
            style = self._grid_style()
            style.append(("ALIGN", (1, 1), (1, -1), "RIGHT"))
            table.setStyle(TableStyle(style))
            elements.append(table)
        return elements

    def _wage_chart(self) -> "Drawing":
        """Line chart of the full wage series (x = competency ordinal)."""
        width, height = 17 * cm, 7 * cm
        drawing = Drawing(width, height)

        chart = LinePlot()
        chart.x = 1.8 * cm
        chart.y = 1 * cm
        chart.width = width - 2.4 * cm
        chart.height = height - 1.6 * cm
        chart.data = [
            [(p.competencia.toordinal(), float(p.value)) for p in self.dashboard.salarios]
        ]
        chart.lines[0].strokeColor = colors.HexColor("#2563eb")
        chart.lines[0].strokeWidth = 1.5
        chart.xValueAxis.labelTextFormat = lambda v: format_competencia(date.fromordinal(int(v)))
        chart.xValueAxis.labels.fontSize = 7
        chart.yValueAxis.labelTextFormat = lambda v: f"R${v / 1000:.1f}k"
        chart.yValueAxis.labels.fontSize = 7
        chart.yValueAxis.valueMin = 0
        chart.yValueAxis.valueMax = max(max(y for _, y in chart.data[0]) * 1.1, 1.0)

        drawing.add(chart)
        return drawing

    def _build_footer(self) -> list:
        """Build report footer."""
        elements = [Spacer(1, 1 * cm)]
        elements.append(
            Paragraph(
                f"Relatório gerado em {datetime.now().strftime('%d/%m/%Y às %H:%M')} "
                f"pelo CNIS Analyzer v{__version__}",
                self.styles["SmallText"],
            )
        )
        elements.append(
            Paragraph(
                "Os cálculos de tempo de contribuição e elegibilidade são do serviço de análise. "
                "Este relatório é informativo; confirme com um especialista previdenciário.",
                self.styles["SmallText"],
            )
        )
        return elements


def generate_pdf_report(response: "CnisResponse", output_path: Path) -> Path:
    """Generate a PDF report from an analysis response."""
    generator = PDFReportGenerator(build_dashboard(response))
    return generator.generate(output_path)
