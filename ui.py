# ui.py
"""Streamlit UI for the Nurse Management System."""
import asyncio
import time
import streamlit as st
from core.manager import NurseManager
from core.pagination import page_window
from utils.constants import MIN_AGE, PAGE_SIZES
from utils.download import download_buttons
from utils.logger import logger


st.set_page_config(page_title="Nurse Management System", page_icon="🏥", layout="wide")
st.title("🏥 Nurse Management System")
st.caption("Manage nurse records efficiently with modern interface")

COLUMNS = [
    ("name", "Name"),
    ("license_number", "License Number"),
    ("dob", "Date of Birth"),
    ("age", "Age"),
]
COLUMN_WIDTHS = [0.5, 2, 2, 1.5, 0.8, 1.6]
ARROWS = {"asc": " ▲", "desc": " ▼"}

if "manager" not in st.session_state:
    st.session_state.manager = NurseManager()
    st.session_state.loaded = False

manager: NurseManager = st.session_state.manager
message_slot = st.empty()


def render_message(message):
    if message is None:
        message_slot.empty()
    elif message.is_error:
        message_slot.error(f"✕ {message.text}")
    else:
        message_slot.success(f"✓ {message.text}")


def run(coro):
    """ Each rerun drives its actions on a fresh event loop. """
    return asyncio.run(coro)


manager.notifier.on_change = render_message
render_message(manager.notifier.expire())

if not st.session_state.loaded:
    with st.spinner("Loading nurses..."):
        run(manager.refresh())
    st.session_state.loaded = True


# --- form callbacks (run before the script body, so widget state can be seeded) ---

def open_add_form():
    manager.form.open_create()
    seed_form_widgets()


def open_edit_form(nurse):
    manager.form.open_edit(nurse)
    seed_form_widgets()


def seed_form_widgets():
    draft = manager.form.draft
    st.session_state.form_name = draft.name
    st.session_state.form_license_number = draft.license_number
    st.session_state.form_dob = draft.dob


def sync_field(field):
    manager.form.set_field(field, st.session_state[f"form_{field}"])


# --- header: stats and actions ---

col_stats, col_add, col_export = st.columns([1, 1, 2])
with col_stats:
    st.metric("Total Nurses", len(manager.store))
    if manager.store.last_refreshed:
        st.caption(f"Updated {manager.store.last_refreshed:%H:%M:%S}")
with col_add:
    st.button("➕ Add New Nurse", type="primary", on_click=open_add_form)
with col_export:
    download_buttons(manager.store.records)


# --- add / edit form ---

if manager.form.is_open:
    with st.container(border=True):
        st.subheader(manager.form.title)
        st.text_input(
            "Name *", key="form_name", placeholder="Enter nurse name",
            on_change=sync_field, args=("name",),
        )
        st.text_input(
            "License Number *", key="form_license_number", placeholder="e.g., LN123456",
            on_change=sync_field, args=("license_number",),
        )
        earliest, latest = manager.form.dob_bounds()
        st.date_input(
            f"Date of Birth * (Must be {MIN_AGE}+ years old)", key="form_dob",
            min_value=earliest, max_value=latest,
            on_change=sync_field, args=("dob",),
        )
        age = manager.form.age
        st.text_input("Age", value="" if age is None else str(age), disabled=True, placeholder="Auto-calculated")

        col_cancel, col_submit = st.columns(2)
        with col_cancel:
            if st.button("Cancel"):
                manager.form.cancel()
                st.rerun()
        with col_submit:
            if st.button(manager.form.submit_label, type="primary"):
                for field in ("name", "license_number", "dob"):
                    sync_field(field)
                with st.spinner("Saving nurse..."):
                    run(manager.submit_form())
                st.rerun()


# --- delete confirmation ---

if manager.pending_delete is not None and manager.store.get(manager.pending_delete.id) is None:
    # record vanished in a refresh since the dialog opened
    manager.cancel_delete()

if manager.pending_delete is not None:
    nurse = manager.pending_delete
    with st.container(border=True):
        st.markdown("### ⚠️ Delete Nurse?")
        st.write("Are you sure you want to delete this nurse?")
        st.info(f"**{nurse.name}**  \nLicense: {nurse.license_number}  \nAge: {nurse.age} years")
        st.warning("This action cannot be undone!")
        col_cancel, col_delete = st.columns(2)
        with col_cancel:
            if st.button("✖️ Cancel", key="cancel_delete"):
                manager.cancel_delete()
                st.rerun()
        with col_delete:
            if st.button("🗑️ Delete", key="confirm_delete", type="primary"):
                with st.spinner("Deleting nurse..."):
                    run(manager.confirm_delete())
                st.rerun()


# --- table ---

if manager.store.is_empty:
    st.markdown("### 👩‍⚕️ No nurses found")
    st.caption('Click "Add New Nurse" to get started')
else:
    page = manager.view()

    header = st.columns(COLUMN_WIDTHS)
    header[0].markdown("**#**")
    for col, (key, label) in zip(header[1:], COLUMNS):
        arrow = ARROWS[manager.sort.direction] if manager.sort.key == key else ""
        if col.button(f"{label}{arrow}", key=f"sort_{key}"):
            manager.sort_by(key)
            st.rerun()
    header[-1].markdown("**Actions**")

    for offset, nurse in enumerate(page.items):
        row = st.columns(COLUMN_WIDTHS)
        row[0].write(page.first_index + offset + 1)
        row[1].write(nurse.name)
        row[2].write(nurse.license_number)
        row[3].write(nurse.dob.strftime("%d/%m/%Y"))
        row[4].write(nurse.age)
        with row[5]:
            edit_col, delete_col = st.columns(2)
            edit_col.button("✏️ Edit", key=f"edit_{nurse.id}", on_click=open_edit_form, args=(nurse,))
            delete_col.button("🗑️ Delete", key=f"delete_{nurse.id}", on_click=manager.request_delete, args=(nurse,))

    # --- pagination ---
    info_col, controls_col = st.columns([1, 2])
    with info_col:
        page_size = st.selectbox(
            "Show entries", PAGE_SIZES, index=PAGE_SIZES.index(manager.paging.page_size),
        )
        if page_size != manager.paging.page_size:
            manager.set_page_size(page_size)
            st.rerun()
        st.caption(page.summary())

    with controls_col:
        window = page_window(page.page, page.total_pages)
        buttons = st.columns(len(window) + 2)
        if buttons[0].button("← Previous", disabled=not page.has_previous):
            manager.go_to_page(page.page - 1)
            st.rerun()
        for col, number in zip(buttons[1:-1], window):
            if number is None:
                col.write("...")
            elif col.button(str(number), key=f"page_{number}", type="primary" if number == page.page else "secondary"):
                manager.go_to_page(number)
                st.rerun()
        if buttons[-1].button("Next →", disabled=not page.has_next):
            manager.go_to_page(page.page + 1)
            st.rerun()


# Clear a message that nothing awaited once its delay is up
if manager.notifier.current is not None:
    remaining = manager.notifier.remaining()
    logger.debug("Clearing message in %.1fs", remaining)
    time.sleep(remaining)
    manager.notifier.expire()
    st.rerun()
