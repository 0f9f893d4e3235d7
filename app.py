"""
Streamlit web application for the Contract Insurance Provision Analyzer.
"""

import html

import streamlit as st

from provision_analyzer.exceptions import ArchiveError
from provision_analyzer.models import ContractType
from provision_analyzer.pipeline import ProvisionPipeline
from provision_analyzer.results import contracts_to_csv, filter_contracts, group_by_type
from provision_analyzer.utils import format_file_size

# Page configuration
st.set_page_config(
    page_title="Contract Insurance Provision Analyzer",
    page_icon="📑",
    layout="wide"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #1f77b4;
        text-align: center;
        margin-bottom: 2rem;
    }
    .error-box {
        padding: 1rem;
        border-radius: 0.5rem;
        background-color: #f8d7da;
        border: 1px solid #f5c6cb;
        color: #721c24;
        margin: 1rem 0;
    }
    .clause {
        color: #475569;
        font-style: italic;
        border-left: 4px solid #cbd5e1;
        padding-left: 1rem;
        margin-bottom: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if 'pipeline' not in st.session_state:
    st.session_state.pipeline = None
if 'contracts' not in st.session_state:
    st.session_state.contracts = None
if 'error' not in st.session_state:
    st.session_state.error = None


def initialize_pipeline():
    """Initialize the provision pipeline."""
    try:
        if st.session_state.pipeline is None:
            with st.spinner("Initializing pipeline..."):
                st.session_state.pipeline = ProvisionPipeline()
        return True
    except Exception as e:
        st.error(f"Failed to initialize pipeline: {str(e)}")
        return False


def reset_results():
    st.session_state.contracts = None
    st.session_state.error = None


def display_upload_form():
    """Archive upload and contract type selection."""
    st.header("📦 Upload Contracts")

    contract_type = st.selectbox(
        "Contract type",
        options=list(ContractType),
        format_func=lambda t: t.value
    )

    uploaded_file = st.file_uploader(
        "Choose a .zip archive of contracts",
        type=['zip'],
        help="Supported contract formats inside the archive: PDF, Word (.docx), Text (.txt)"
    )

    if uploaded_file:
        st.write(f"📁 {uploaded_file.name} ({format_file_size(uploaded_file.size)})")

    if st.session_state.error:
        st.markdown(f'<div class="error-box">❌ {html.escape(st.session_state.error)}</div>', unsafe_allow_html=True)

    if st.button("🔍 Analyze Contracts", type="primary", disabled=not uploaded_file):
        status_placeholder = st.empty()
        try:
            with st.spinner("Analyzing contracts..."):
                contracts = st.session_state.pipeline.run(
                    uploaded_file.getvalue(),
                    contract_type,
                    update_status=status_placeholder.info
                )
            st.session_state.contracts = contracts
            st.session_state.error = None
        except ArchiveError as e:
            st.session_state.error = str(e)
        except Exception as e:
            st.session_state.error = f"An unknown error occurred: {e}"
        st.rerun()


def display_results(contracts):
    """Searchable results grouped by contract type."""
    col1, col2, col3 = st.columns([4, 1, 1])
    with col1:
        search_term = st.text_input(
            "Search",
            placeholder="Search by contract name or provision keyword...",
            label_visibility="collapsed"
        )
    filtered = filter_contracts(contracts, search_term)

    with col2:
        st.download_button(
            "⬇️ Export CSV",
            data=contracts_to_csv(filtered),
            file_name="insurance_provision_report.csv",
            mime="text/csv",
            disabled=not filtered
        )
    with col3:
        if st.button("🔄 Analyze New File"):
            reset_results()
            st.rerun()

    if not filtered:
        st.info("No contracts or provisions match your search.")
        return

    for contract_type, group in group_by_type(filtered).items():
        st.subheader(f"{contract_type.value} Contracts")
        for contract in group:
            with st.expander(f"📄 {contract.name} · {len(contract.provisions)} provisions"):
                for provision in contract.provisions:
                    st.markdown(f'<div class="clause">{html.escape(provision.text)}</div>', unsafe_allow_html=True)
                    st.markdown(f"**AI Summary:** {provision.summary}")
                    st.markdown("---")


def main():
    """Main Streamlit application."""
    st.markdown('<h1 class="main-header">📑 Contract Insurance Provision Analyzer</h1>', unsafe_allow_html=True)
    st.markdown("Upload a .zip of contracts to extract and analyze insurance clauses with AI.")

    if not initialize_pipeline():
        st.stop()

    if st.session_state.contracts is None:
        display_upload_form()
    elif not st.session_state.contracts:
        st.warning("No insurance provisions were found in the uploaded contracts.")
        if st.button("🔄 Analyze New File"):
            reset_results()
            st.rerun()
    else:
        display_results(st.session_state.contracts)


if __name__ == "__main__":
    main()
