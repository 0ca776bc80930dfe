from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from load_planner.models import LoadingPlan, LoadingStats, Package
from load_planner.pdf_export import build_text_pdf
from load_planner.rounding import format_decimal
from load_planner.stats import LoadingStatus, loading_status

REPORT_TITLE = "PLAN DE CHARGEMENT LOGIDOO"
REPORT_FOOTER = "Généré par Logidoo - Module Aide au Chargement"

PACKAGE_COLUMNS = ["Type", "Longueur (cm)", "Largeur (cm)", "Hauteur (cm)", "Poids (kg)", "Quantité"]

STATUS_LABELS = {
    LoadingStatus.OVERLOADED: "Surcharge",
    LoadingStatus.WARNING: "Attention",
    LoadingStatus.OPTIMAL: "Optimal",
    LoadingStatus.UNDERUSED: "Sous-utilisé",
}


def _plain(value) -> str:
    # 30.0 and 30 both print as 30 in the package list
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def build_packages_frame(packages: Iterable[Package]) -> pd.DataFrame:
    rows = [
        {
            "Type": pkg.type,
            "Longueur (cm)": _plain(pkg.length),
            "Largeur (cm)": _plain(pkg.width),
            "Hauteur (cm)": _plain(pkg.height),
            "Poids (kg)": _plain(pkg.weight),
            "Quantité": pkg.quantity,
        }
        for pkg in packages
    ]
    return pd.DataFrame(rows, columns=PACKAGE_COLUMNS)


def packages_csv(packages: Iterable[Package]) -> str:
    return build_packages_frame(packages).to_csv(index=False)


def build_stats_frame(stats: LoadingStats) -> pd.DataFrame:
    rows = [
        ("Volume total (m³)", format_decimal(stats.total_volume)),
        ("Poids total (kg)", format_decimal(stats.total_weight)),
        ("Volume du contenant (m³)", format_decimal(stats.container_volume)),
        ("Charge maximale (kg)", format_decimal(stats.container_max_weight)),
        ("Taux de remplissage volume (%)", format_decimal(stats.volume_utilization)),
        ("Taux de remplissage poids (%)", format_decimal(stats.weight_utilization)),
        ("Volume restant (m³)", format_decimal(stats.remaining_volume)),
        ("Capacité restante (kg)", format_decimal(stats.remaining_weight)),
    ]
    return pd.DataFrame(rows, columns=["Indicateur", "Valeur"])


def status_label(stats: LoadingStats) -> str:
    return STATUS_LABELS[loading_status(stats)]


def build_report_lines(plan: LoadingPlan) -> List[str]:
    stats = plan.stats
    container_name = plan.container.name if plan.container else "-"
    lines = [
        REPORT_TITLE,
        "=" * 37,
        f"Date: {plan.created_at.strftime('%d/%m/%Y')}",
        f"Contenant: {container_name}",
    ]
    if plan.suggested and plan.container and plan.suggested.id != plan.container.id:
        lines.append(f"Suggestion automatique: {plan.suggested.name}")
    lines += [
        "",
        "RÉSUMÉ",
        "------",
        f"Nombre de colis: {len(plan.packages)}",
        f"Poids total: {format_decimal(stats.total_weight)} kg",
        f"Volume total: {format_decimal(stats.total_volume)} m³",
        f"Taux de remplissage volume: {format_decimal(stats.volume_utilization)}%",
        f"Taux de remplissage poids: {format_decimal(stats.weight_utilization)}%",
        f"Statut: {status_label(stats)}",
        "",
        "DÉTAIL DES COLIS",
        "----------------",
    ]
    for index, pkg in enumerate(plan.packages, start=1):
        lines.append(
            f"{index}. {pkg.type} - {_plain(pkg.length)}×{_plain(pkg.width)}×{_plain(pkg.height)}cm"
            f" - {_plain(pkg.weight)}kg (×{pkg.quantity})"
        )
    lines += ["", REPORT_FOOTER]
    return lines


def build_text_report(plan: LoadingPlan) -> str:
    return "\n".join(build_report_lines(plan)) + "\n"


def build_report_pdf(plan: LoadingPlan) -> bytes:
    return build_text_pdf(build_report_lines(plan))


def report_file_name(plan: LoadingPlan, extension: str = "txt") -> str:
    return f"plan-chargement-{plan.created_at.strftime('%Y-%m-%d')}.{extension}"
