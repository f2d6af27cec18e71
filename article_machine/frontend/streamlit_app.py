"""
Main Streamlit application for the SEO article machine.
"""

import streamlit as st
from dotenv import load_dotenv

from article_machine.config import config
from article_machine.core.wizard import (
    STEP_CONFIGURE,
    STEP_RESULT,
    STEP_SEARCH,
    SCROLL_STEP2,
    SCROLL_STEP3,
    WizardState,
)
from article_machine.frontend.api_client import ApiClient
from article_machine.frontend.components import (
    header, sidebar, api_status, anchor, scroll_to, write_clipboard, step_navbar,
    loading_spinner, alert_dialog, video_grid, transcription_loading,
    article_config_panel, article_loading, seo_sidebar, article_view,
)


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    api_url = st.session_state.get("api_url", config.API_URL)
    if "api_client" not in st.session_state or st.session_state.api_client.base_url != api_url:
        st.session_state.api_client = ApiClient(api_url)

    if "wizard" not in st.session_state:
        st.session_state.wizard = WizardState()


def handle_reset():
    st.session_state.wizard.reset()


def handle_select(video):
    st.session_state.wizard.begin_transcription(video)


def handle_generate():
    st.session_state.wizard.begin_generation()


def handle_copy():
    text = st.session_state.wizard.copy_article()
    if text is not None:
        st.session_state.pending_clipboard = text


@st.fragment(run_every=1.0)
def copy_control():
    """Copy button whose "copied" label reverts on its own."""
    state = st.session_state.wizard
    if state.is_copied():
        st.button("✅ COPIADO", key="copy", type="primary", on_click=handle_copy)
    else:
        st.button("📋 COPIAR TUDO", key="copy", on_click=handle_copy)

    text = st.session_state.pop("pending_clipboard", None)
    if text is not None:
        write_clipboard(text)


def search_step(state: WizardState, client: ApiClient):
    """Step 1: search for videos and pick one."""
    st.markdown("## 1. Escolha sua Fonte de Inspiração")
    locked = state.current_step != STEP_SEARCH

    with st.form(key="search_form"):
        query = st.text_input(
            "Tema",
            value=state.search_query,
            placeholder="O que vamos churrasquear hoje?",
            label_visibility="collapsed",
            disabled=locked,
        )
        submit = st.form_submit_button("BUSCAR VÍDEOS", disabled=locked or state.is_searching)

    if submit:
        state.search_query = query
        with loading_spinner("Buscando vídeos..."):
            state.search(client)

    if state.videos:
        video_grid(
            state.videos,
            state.selected_video,
            disabled=locked or state.is_transcribing,
            on_select=handle_select,
        )


def configure_step(state: WizardState, client: ApiClient):
    """Step 2: wait for the transcription, then set the article options."""
    anchor(SCROLL_STEP2)
    st.markdown("## 2. Prepare o Tempero (Configurações)")

    if state.is_transcribing:
        transcription_loading()
        with loading_spinner("Gerando transcrição..."):
            state.finish_transcription(client)
        st.rerun()

    article_config_panel(state, disabled=state.current_step > STEP_CONFIGURE, on_generate=handle_generate)


def result_step(state: WizardState, client: ApiClient):
    """Step 3: wait for the article, then show it with its SEO metrics."""
    anchor(SCROLL_STEP3)
    title_column, copy_column = st.columns([4, 1])
    with title_column:
        st.markdown("## 3. Artigo Pronto para Servir!")
    if state.article is not None and not state.is_generating:
        with copy_column:
            copy_control()

    if state.is_generating:
        article_loading()
        with loading_spinner("Gerando artigo..."):
            state.finish_generation(client)
        st.rerun()

    if state.article is not None:
        metrics_column, article_column = st.columns([1, 3])
        with metrics_column:
            seo_sidebar(state.article, on_reset=handle_reset)
        with article_column:
            article_view(state.article, state.config.keywords)


def main():
    """Main application entry point."""
    header()
    sidebar()
    init_session_state()

    state = st.session_state.wizard
    client = st.session_state.api_client
    api_status(client)

    step_navbar(state.current_step, on_reset=handle_reset)

    search_step(state, client)

    if state.current_step >= STEP_CONFIGURE:
        st.divider()
        configure_step(state, client)

    if state.current_step >= STEP_RESULT:
        st.divider()
        result_step(state, client)

    alert = state.consume_alert()
    if alert:
        alert_dialog(alert)

    target = state.consume_scroll()
    if target:
        scroll_to(target)


if __name__ == "__main__":
    main()
