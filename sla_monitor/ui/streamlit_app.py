"""
Streamlit UI for the SLA Monitoring Dashboard

This is a visualization layer that:
- Asks for and remembers the records API URL
- Loads records through the existing pipeline
- Exposes filter, sort and export controls
- Shows summary metrics and the record table

NO BUSINESS LOGIC IS IMPLEMENTED HERE.
All logic is in sla_monitor.pipeline, sla_monitor.state and sla_monitor.main.
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import streamlit as st
import pandas as pd

from sla_monitor.main import refresh_store
from sla_monitor.state import RecordStore
from sla_monitor.config_store import ConfigManager
from sla_monitor.schemas.query import FilterSpec, SortColumn, SortDirection
from sla_monitor.pipeline.exporter import export_filename
from sla_monitor.ui.ui_utils import (
    format_record_count,
    format_summary_display,
    record_to_display_row,
)


FILTER_KEYS = (
    "po_date_from", "po_date_to", "received_date_from", "received_date_to",
    "supplier", "contract", "item_code",
)

COLUMN_LABELS = {
    SortColumn.PURCHASE_ORDER_NUMBER: "Nomor PO",
    SortColumn.ITEM_CODE: "Item Code",
    SortColumn.ITEM_NAME: "Item Name",
    SortColumn.SUPPLIER_NAME: "Supplier Name",
    SortColumn.CONTRACT: "Contract/Principal",
    SortColumn.PURCHASE_ORDER_DATE: "PO Date",
    SortColumn.QUANTITY_ORDERED: "Qty PO",
    SortColumn.ORDER_VALUE: "PO Value",
    SortColumn.RECEIVED_DATE: "Received Date",
    SortColumn.QUANTITY_RECEIVED: "Qty Received",
    SortColumn.RECEIVED_VALUE: "Received Value",
    SortColumn.FULFILLMENT_RATIO: "SLA (%)",
    SortColumn.ELAPSED_DAYS: "Avg Days",
}


# ============================================================================
# SESSION STATE
# ============================================================================

def get_store() -> RecordStore:
    """Return the RecordStore kept in this browser session."""
    if "store" not in st.session_state:
        st.session_state.store = RecordStore()
    return st.session_state.store


def load_data(store: RecordStore, config_manager: ConfigManager) -> None:
    """Refresh the store; a failed fetch keeps the previous view."""
    with st.spinner("Loading records..."):
        refresh_store(store, config_manager.api_url, config_manager)


def reset_filters() -> None:
    """Clear every filter widget (runs as a button callback, before widgets render)."""
    for key in FILTER_KEYS:
        st.session_state[key] = None if key.endswith(("_from", "_to")) else ""


# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    page_title="SLA Monitoring Dashboard",
    page_icon="📊",
    layout="wide",
)

config_manager = ConfigManager()
store = get_store()


# ============================================================================
# API URL CONFIGURATION
# ============================================================================

def show_config_form() -> None:
    """Ask for the records API URL and persist it."""
    with st.form("api_url_form"):
        st.markdown("### 🔗 Configure Data Source")
        api_url_input = st.text_input(
            "API URL",
            value=config_manager.api_url,
            placeholder="https://example.com/api/po-fulfillment",
            help="Endpoint returning a JSON list of purchase order lines, or an object with a 'data' list",
        )
        submitted = st.form_submit_button("Save", use_container_width=True)

        if submitted:
            try:
                config_manager.set_api_url(api_url_input)
            except ValueError as e:
                st.error(str(e))
                return
            load_data(store, config_manager)
            st.rerun()


st.title("📊 SLA Monitoring Dashboard")

if not config_manager.has_api_url():
    st.info("No API URL configured yet.")
    show_config_form()
    st.stop()

if store.loaded_at is None and store.last_error is None:
    load_data(store, config_manager)


# ============================================================================
# SIDEBAR - SETTINGS & FILTERS
# ============================================================================

with st.sidebar:
    st.header("⚙️ Settings")

    with st.expander("🔗 Data Source", expanded=False):
        st.caption(config_manager.api_url)
        show_config_form()
        if st.button("Clear API URL", use_container_width=True):
            config_manager.clear_api_url()
            st.rerun()

    if st.button("🔄 Refresh", use_container_width=True):
        load_data(store, config_manager)

    st.header("🔍 Filters")
    po_from_col, po_to_col = st.columns(2)
    po_from_col.date_input("PO date from", value=None, key="po_date_from")
    po_to_col.date_input("PO date to", value=None, key="po_date_to")

    rcv_from_col, rcv_to_col = st.columns(2)
    rcv_from_col.date_input("Received from", value=None, key="received_date_from")
    rcv_to_col.date_input("Received to", value=None, key="received_date_to")

    st.text_input("Supplier", key="supplier")
    st.text_input("Contract/Principal", key="contract")
    st.text_input("Item Code", key="item_code")

    st.button("Clear Filters", on_click=reset_filters, use_container_width=True)

    st.header("↕️ Sort")
    current_sort = store.sort_spec
    sort_column = st.selectbox(
        "Sort by",
        options=list(SortColumn),
        index=list(SortColumn).index(current_sort.column) if current_sort else 0,
        format_func=lambda column: COLUMN_LABELS[column],
    )
    if current_sort is None or current_sort.column != sort_column:
        button_label = "Sort ascending"
    else:
        arrow = "↓ descending" if current_sort.direction is SortDirection.ASCENDING else "↑ ascending"
        button_label = f"Switch to {arrow}"
    if st.button(button_label, use_container_width=True):
        store.sort_by(sort_column)


# ============================================================================
# FILTER, SUMMARY & TABLE
# ============================================================================

store.apply_filters(FilterSpec(**{key: st.session_state.get(key) for key in FILTER_KEYS}))

if store.last_error:
    st.error(store.last_error)

summary = format_summary_display(store.summary())
col1, col2, col3, col4 = st.columns(4)
col1.metric("Total PO", summary["total_po"])
col2.metric("Total Items", summary["total_items"])
col3.metric("Average SLA", summary["avg_sla"])
col4.metric("Average Days", summary["avg_days"])

st.divider()

if store.active_view:
    header_col, export_col = st.columns([4, 1])
    header_col.caption(format_record_count(len(store.active_view)))
    export_col.download_button(
        "⬇️ Export CSV",
        data=store.export_text().encode("utf-8"),
        file_name=export_filename(),
        mime="text/csv",
        use_container_width=True,
    )

    df = pd.DataFrame([record_to_display_row(record) for record in store.active_view])
    st.dataframe(df, width="stretch", hide_index=True)
else:
    st.info("No records match the current filters.")
