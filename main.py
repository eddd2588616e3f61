import streamlit as st

import file_loader
from logging_config import setup_logger
from split_csv import SplitError, count_chunks, total_row_count
from split_session import DEFAULT_ROWS_PER_FILE, SplitSession

logger = setup_logger(__name__)

CSV_MIME = "text/csv"
UPLOAD_TYPES = ['csv', 'txt']

SESSION_KEY = 'split_session'
UPLOAD_NONCE_KEY = 'upload_nonce'
ROWS_INPUT_KEY = 'rows_per_file_input'
PREFIX_INPUT_KEY = 'custom_prefix_input'


# --- Session Helpers ---

def get_session():
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SplitSession()
    if UPLOAD_NONCE_KEY not in st.session_state:
        st.session_state[UPLOAD_NONCE_KEY] = 0
    return st.session_state[SESSION_KEY]


def reset_session(session):
    session.reset()
    # Drop widget values so the next file starts from its own defaults
    for key in (ROWS_INPUT_KEY, PREFIX_INPUT_KEY):
        if key in st.session_state:
            del st.session_state[key]
    # A fresh uploader key clears the previously uploaded file
    st.session_state[UPLOAD_NONCE_KEY] += 1


# --- Page Sections ---

def show_upload(session):
    st.subheader("1. Upload CSV")
    st.info("""
    **How it works:**
    1. **Upload** a CSV file. The first line is used as the header.
    2. **Choose** how many data rows each output file should hold.
    3. **Download** the parts. Every part starts with the original header.
    """)

    uploaded_file = st.file_uploader(
        "Upload CSV file",
        type=UPLOAD_TYPES,
        key=f"csv_upload_{st.session_state[UPLOAD_NONCE_KEY]}",
    )

    if uploaded_file is not None:
        try:
            parsed = file_loader.load_upload(uploaded_file.getvalue(), uploaded_file.name)
        except Exception as e:
            logger.error(f"Failed to load '{uploaded_file.name}': {e}")
            st.error(f"Failed to read file: {e}")
        else:
            session.load_file(parsed)
            st.rerun()


def show_preview(session):
    parsed = session.parsed_file

    st.subheader("📄 File Preview")
    col1, col2, col3 = st.columns(3)
    col1.metric("File", parsed.file_name or parsed.base_name)
    col2.metric("Data Rows", f"{parsed.total_rows:,}")
    col3.metric("Columns", len(parsed.header_cols))

    if parsed.header_cols:
        st.write("**Header:**", ", ".join(parsed.header_cols))
    else:
        st.warning("The file is empty. No header line was found.")

    preview = file_loader.preview_frame(parsed)
    if not preview.empty:
        st.caption(f"First {len(preview)} rows")
        st.dataframe(preview, hide_index=True)


def show_settings(session):
    st.subheader("2. Split Settings")

    # Seed widget values from the session the first time they are drawn
    if ROWS_INPUT_KEY not in st.session_state:
        st.session_state[ROWS_INPUT_KEY] = session.rows_per_file
    if PREFIX_INPUT_KEY not in st.session_state:
        st.session_state[PREFIX_INPUT_KEY] = session.custom_prefix

    col1, col2 = st.columns(2)
    with col1:
        rows_per_file = st.number_input("Rows per file", min_value=1, step=100, key=ROWS_INPUT_KEY)
    with col2:
        custom_prefix = st.text_input(
            "File name prefix",
            key=PREFIX_INPUT_KEY,
            help="Leave empty to use the original file name.",
        )

    session.rows_per_file = int(rows_per_file)
    session.custom_prefix = custom_prefix

    try:
        file_count = count_chunks(session.parsed_file.total_rows, session.rows_per_file)
        st.caption(f"This will create **{file_count}** file(s) named `{session.effective_prefix}_partN.csv`")
    except SplitError as e:
        st.error(str(e))

    if st.button("✂️ Split File", type="primary", key="split_button"):
        with st.spinner("Splitting file..."):
            try:
                session.run_split()
            except SplitError as e:
                st.error(str(e))
            else:
                st.rerun()

    if st.button("↻ Start Over", key="start_over_button"):
        reset_session(session)
        st.rerun()


def show_results(session):
    st.subheader("3. Download")

    if session.is_empty_result:
        st.info("The file has no data rows, so no files were created.")
    else:
        st.success(
            f"Created {len(session.chunks)} files from {total_row_count(session.chunks):,} rows "
            f"(prefix: {session.effective_prefix})"
        )
        for i, chunk in enumerate(session.chunks):
            col1, col2 = st.columns([3, 1])
            col1.write(f"**{chunk.name}** ({chunk.row_count:,} rows)")
            with col2:
                st.download_button(
                    "📥 Download",
                    data=chunk.content,
                    file_name=chunk.name,
                    mime=CSV_MIME,
                    key=f"download_{i}",
                )

    st.divider()
    if st.button("🔄 Split Another File", key="split_another_button"):
        reset_session(session)
        st.rerun()


# --- Custom CSS ---
def load_custom_css():
    st.markdown("""
    <style>
    .stApp {
        background: #0F172A;
    }

    h1, h2, h3 {
        color: #F1F5F9 !important;
    }

    .stButton > button, .stDownloadButton > button {
        background: #3B82F6;
        color: white;
        font-weight: 500;
        border-radius: 6px;
        border: none;
        transition: all 0.3s ease;
    }

    .stButton > button:hover, .stDownloadButton > button:hover {
        background: #60A5FA;
        transform: translateY(-1px);
    }

    div[data-testid="stMetricValue"] {
        font-size: 1.5rem;
        font-weight: 600;
        color: #60A5FA;
    }

    .stAlert {
        border-radius: 8px;
        background: #1E293B;
        color: #E2E8F0;
    }

    p, label, span {
        color: #CBD5E1;
    }
    </style>
    """, unsafe_allow_html=True)


# --- Main Application ---
def main():
    st.set_page_config(
        page_title="CSV Splitter",
        page_icon="✂️",
        layout="centered",
    )

    load_custom_css()

    st.markdown("""
        <div style='text-align: center; padding: 1rem 0 2rem 0;'>
            <h1 style='font-size: 2.5rem; margin: 0; color: #F1F5F9; font-weight: 700;'>
                ✂️ CSV Splitter
            </h1>
            <p style='color: #94A3B8; font-size: 1rem; margin-top: 0.5rem;'>
                Split large CSV files into smaller parts, header included
            </p>
        </div>
    """, unsafe_allow_html=True)

    session = get_session()

    if session.parsed_file is None:
        show_upload(session)
    else:
        show_preview(session)
        st.divider()
        if session.has_result:
            show_results(session)
        else:
            show_settings(session)

    st.markdown("---")
    st.markdown(f"""
        <div style='text-align: center; color: #94a3b8; font-size: 0.85rem;'>
            <p>Files are kept in memory for this session only | Default {DEFAULT_ROWS_PER_FILE:,} rows per file</p>
        </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
