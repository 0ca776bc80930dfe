from __future__ import annotations

from decimal import Decimal

from pandas.errors import EmptyDataError
import streamlit as st

from load_planner import (
    CatalogError,
    PackageInputError,
    PackageList,
    build_loading_plan,
    container_volume,
    find_container,
    load_container_catalog,
    load_packages_csv,
    load_packages_excel,
    new_package_id,
    normalize_package_rows,
    package_volume,
)
from load_planner.catalog import DEFAULT_CATALOG_YAML
from load_planner.io import IMPORT_FILE_TYPES, template_excel_bytes
from load_planner.models import ContainerKind, Package
from load_planner.reporting import (
    build_report_pdf,
    build_stats_frame,
    build_text_report,
    packages_csv,
    report_file_name,
    status_label,
)
from load_planner.rounding import format_decimal
from load_planner.stats import LoadingStatus, UtilizationLevel, is_overloaded, loading_status, utilization_level

st.set_page_config(page_title="Aide au chargement", layout="wide")
st.title("Aide au chargement")
st.caption("Ajoutez vos colis, choisissez un contenant et suivez le taux de remplissage.")

KIND_LABELS = {ContainerKind.CONTAINER: "Conteneur", ContainerKind.TRUCK: "Camion"}

LEVEL_COLORS = {
    UtilizationLevel.OVER: "red",
    UtilizationLevel.HIGH: "orange",
    UtilizationLevel.MEDIUM: "green",
    UtilizationLevel.LOW: "blue",
}


def _colored_pct(pct) -> str:
    color = LEVEL_COLORS[utilization_level(pct)]
    return f":{color}[**{format_decimal(pct)} %**]"


def _container_label(container) -> str:
    volume = format_decimal(container_volume(container), 1)
    return (
        f"{container.name} ({KIND_LABELS[container.kind]}) - "
        f"{container.length}×{container.width}×{container.height} cm, "
        f"{volume} m³, {container.max_weight} kg max"
    )


if "packages" not in st.session_state:
    st.session_state["packages"] = PackageList()
if "selected_container_id" not in st.session_state:
    st.session_state["selected_container_id"] = None

with st.sidebar:
    st.header("Catalogue des contenants")
    st.checkbox("Utiliser le catalogue standard", value=True, key="use_default_catalog")
    catalog_file = st.file_uploader("containers.yaml", type=["yaml", "yml"], key="catalog_file")
    catalog_text = st.text_area("containers.yaml (texte)", value=DEFAULT_CATALOG_YAML, height=240)
    st.caption("Le dernier contenant de la liste sert de repli lorsque rien ne convient.")

catalog_yaml = DEFAULT_CATALOG_YAML
if not st.session_state.get("use_default_catalog", True):
    if catalog_file is not None:
        catalog_yaml = catalog_file.getvalue().decode("utf-8")
    elif catalog_text.strip():
        catalog_yaml = catalog_text

try:
    catalog = load_container_catalog(catalog_yaml)
except CatalogError as exc:
    st.error(f"Catalogue invalide: {exc}")
    st.stop()

packages: PackageList = st.session_state["packages"]

input_col, result_col = st.columns([1, 1])

with input_col:
    st.header("Gestion des colis")
    with st.form("package_form", clear_on_submit=True):
        st.subheader("Ajouter un colis")
        package_type = st.text_input("Type de colis", placeholder="Ex: Carton, Palette, Sac...")
        dim_col1, dim_col2, dim_col3 = st.columns(3)
        with dim_col1:
            length = st.number_input("Longueur (cm)", min_value=0.0, value=0.0, step=1.0)
        with dim_col2:
            width = st.number_input("Largeur (cm)", min_value=0.0, value=0.0, step=1.0)
        with dim_col3:
            height = st.number_input("Hauteur (cm)", min_value=0.0, value=0.0, step=1.0)
        weight_col, qty_col = st.columns(2)
        with weight_col:
            weight = st.number_input("Poids (kg)", min_value=0.0, value=0.0, step=0.5)
        with qty_col:
            quantity = st.number_input("Quantité", min_value=1, value=1, step=1)
        submitted = st.form_submit_button("Ajouter le colis", use_container_width=True)

    if submitted:
        if not package_type.strip():
            st.error("Le type de colis est obligatoire.")
        elif min(length, width, height, weight) <= 0:
            st.error("Les dimensions et le poids doivent être supérieurs à 0.")
        else:
            packages = packages.add(
                Package(
                    id=new_package_id(),
                    type=package_type.strip(),
                    length=Decimal(str(length)),
                    width=Decimal(str(width)),
                    height=Decimal(str(height)),
                    weight=Decimal(str(weight)),
                    quantity=int(quantity),
                )
            )
            st.session_state["packages"] = packages
            st.success("Colis ajouté.")

    st.subheader("Import Excel / CSV")
    st.download_button(
        "Télécharger le modèle",
        data=template_excel_bytes(),
        file_name="modele_import_colis.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
    import_file = st.file_uploader("Fichier de colis", type=IMPORT_FILE_TYPES, key="import_file")
    if st.button("Importer", use_container_width=True, disabled=import_file is None):
        try:
            if import_file.name.lower().endswith(".csv"):
                frame = load_packages_csv(import_file.getvalue().decode("utf-8"))
            else:
                frame = load_packages_excel(import_file.getvalue())
            result = normalize_package_rows(frame)
            packages = packages.extend(result.packages)
            st.session_state["packages"] = packages
            st.success(f"{len(result.packages)} colis importés avec succès")
            for skipped in result.skipped:
                st.warning(f"Ligne {skipped.row_no} ignorée: {skipped.reason}")
        except EmptyDataError:
            st.error("Le fichier est vide.")
        except PackageInputError as exc:
            st.error(str(exc))
        except Exception as exc:  # noqa: BLE001
            st.error(f"Erreur lors de la lecture du fichier: {exc}")

    st.subheader(f"Liste des colis ({len(packages)})")
    if not packages:
        st.info("Aucun colis ajouté.")
    for pkg in packages:
        row_col, action_col = st.columns([5, 1])
        with row_col:
            st.markdown(
                f"**{pkg.type}** ×{pkg.quantity} - {pkg.length}×{pkg.width}×{pkg.height} cm, "
                f"{pkg.weight} kg, {format_decimal(package_volume(pkg), 3)} m³"
            )
        with action_col:
            if st.button("Retirer", key=f"remove_{pkg.id}"):
                st.session_state["packages"] = packages.remove(pkg.id)
                st.rerun()

with result_col:
    st.header("Optimisation")
    selected = find_container(st.session_state["selected_container_id"], catalog)
    plan = build_loading_plan(packages, container=selected, catalog=catalog)
    if plan.suggested:
        st.info(f"Suggestion automatique : {plan.suggested.name}")
    ids = [c.id for c in catalog]
    current_id = plan.container.id if plan.container else None
    choice = st.selectbox(
        "Contenant",
        options=ids,
        index=ids.index(current_id) if current_id else None,
        format_func=lambda cid: _container_label(find_container(cid, catalog)),
        placeholder="Choisir un contenant",
    )
    if choice is not None:
        # the first suggestion becomes the selection until the user picks another
        st.session_state["selected_container_id"] = choice
        if choice != current_id:
            plan = build_loading_plan(packages, container=find_container(choice, catalog), catalog=catalog)

    stats = plan.stats
    st.subheader("Statistiques")
    status = loading_status(stats)
    if is_overloaded(stats):
        st.error(status_label(stats))
    elif status == LoadingStatus.WARNING:
        st.warning(status_label(stats))
    else:
        st.success(status_label(stats))

    vol_col, weight_col = st.columns(2)
    with vol_col:
        st.markdown(f"Volume : {_colored_pct(stats.volume_utilization)}")
        st.progress(min(float(stats.volume_utilization), 100.0) / 100)
        st.caption(f"{format_decimal(stats.total_volume)} / {format_decimal(stats.container_volume)} m³")
    with weight_col:
        st.markdown(f"Poids : {_colored_pct(stats.weight_utilization)}")
        st.progress(min(float(stats.weight_utilization), 100.0) / 100)
        st.caption(f"{format_decimal(stats.total_weight, 0)} / {stats.container_max_weight} kg")
    st.dataframe(build_stats_frame(stats), use_container_width=True, hide_index=True)

    st.subheader("Export et partage")
    has_data = bool(packages) and plan.container is not None
    export_col1, export_col2, export_col3 = st.columns(3)
    with export_col1:
        st.download_button(
            "Rapport (TXT)",
            data=build_text_report(plan).encode("utf-8"),
            file_name=report_file_name(plan, "txt"),
            mime="text/plain",
            disabled=not has_data,
            use_container_width=True,
        )
    with export_col2:
        st.download_button(
            "Rapport (PDF)",
            data=build_report_pdf(plan),
            file_name=report_file_name(plan, "pdf"),
            mime="application/pdf",
            disabled=not has_data,
            use_container_width=True,
        )
    with export_col3:
        st.download_button(
            "Colis (CSV)",
            data=packages_csv(packages).encode("utf-8-sig"),
            file_name=f"colis-{plan.created_at.strftime('%Y-%m-%d')}.csv",
            mime="text/csv",
            disabled=not packages,
            use_container_width=True,
        )
    if not has_data:
        st.caption("Ajoutez des colis et sélectionnez un contenant pour activer l'export.")
