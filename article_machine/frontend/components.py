"""
Reusable UI components for the Streamlit app.
"""

import json
import requests
import streamlit as st
import streamlit.components.v1 as components
from typing import Callable, List, Optional

from article_machine.config import config
from article_machine.core.wizard import STEPS, SCROLL_TOP, WizardState
from article_machine.models.schemas import ArticleType, GeneratedArticle, Video
from article_machine.utils.helpers import sanitize_html

ARTICLE_TYPE_LABELS = {
    ArticleType.GUIDE: "Guia Master",
    ArticleType.TUTORIAL: "Passo a Passo",
    ArticleType.LIST: "Lista / Top 10",
    ArticleType.COMPARISON: "Comparativo",
}

EXTRA_OPTIONS = [
    ("include_faq", "FAQ (Dúvidas)"),
    ("include_tips", "Box de Dicas"),
    ("include_recipes", "Receita Completa"),
    ("include_equipment", "Equipamentos"),
]


def header():
    """Display the application header."""
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon="🔥",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    anchor(SCROLL_TOP)
    st.title("🔥 MÁQUINA DE ARTIGOS SEO")
    st.markdown("**DO YOUTUBE PARA O TOPO DO GOOGLE**")


def sidebar():
    """Display the sidebar with app information and options."""
    with st.sidebar:
        st.title(config.SITE_NAME)

        st.markdown("## Sobre")
        st.info("""
        Transforme vídeos do YouTube em artigos otimizados para SEO:
        - Busque vídeos sobre um tema
        - Gere a transcrição do vídeo escolhido
        - Configure e gere o artigo
        """)

        st.markdown("## Configurações")
        st.text_input("API URL", value=config.API_URL, key="api_url")


def api_status(client):
    """Show in the sidebar whether the API is reachable and has a Gemini key."""
    with st.sidebar:
        try:
            status = client.health()
        except requests.RequestException as e:
            st.warning(f"API indisponível: {e}")
            return

        if status.get("api_key_configured"):
            st.success(f"API conectada ({status.get('model', '')})")
        else:
            st.warning("API conectada, mas GEMINI_API_KEY não está configurada.")


def anchor(name: str):
    """Place an invisible scroll target."""
    st.markdown(f'<div id="{name}"></div>', unsafe_allow_html=True)


def scroll_to(name: str):
    """Smoothly scroll the page to an anchor placed with ``anchor``."""
    target = json.dumps(name)
    components.html(f"""
        <script>
            setTimeout(() => {{
                const el = window.parent.document.getElementById({target});
                if (el) {{
                    el.scrollIntoView({{behavior: 'smooth', block: 'start'}});
                }}
            }}, 100);
        </script>
    """, height=0)


def write_clipboard(text: str):
    """Write text to the user's clipboard."""
    safe_js_text = json.dumps(text)
    components.html(f"""
        <script>
            navigator.clipboard.writeText({safe_js_text}).catch(err => console.error(err));
        </script>
    """, height=0)


def step_navbar(current_step: int, on_reset: Callable):
    """Display the step indicator with the current step highlighted."""
    columns = st.columns([3, 3, 3, 1])
    for column, (step_id, label) in zip(columns, STEPS):
        with column:
            if step_id == current_step:
                st.markdown(f"### :red[{step_id}. {label}]")
            else:
                st.markdown(f"### :gray[{step_id}. {label}]")
    with columns[-1]:
        st.button("↺", key="nav_reset", help="Reiniciar", on_click=on_reset)
    st.divider()


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


@st.dialog("Erro")
def alert_dialog(message: str):
    """Blocking error message."""
    st.error(message)
    if st.button("OK"):
        st.rerun()


def video_grid(videos: List[Video], selected: Optional[Video], disabled: bool, on_select: Callable):
    """
    Display the search results as selectable cards.

    Args:
        videos: Videos to display
        selected: Currently selected video, highlighted
        disabled: Whether selection is blocked
        on_select: Function called with the clicked video
    """
    columns = st.columns(3)
    for i, video in enumerate(videos):
        with columns[i % 3]:
            is_selected = selected is not None and selected.id == video.id
            with st.container(border=True):
                st.image(video.thumbnail, width="stretch")
                st.caption(f"⏱ {video.duration}")
                title = f"**:red[{video.title}]**" if is_selected else f"**{video.title}**"
                st.markdown(title)
                st.caption(f"{video.channel.upper()} · 📊 {video.views} · {video.published}")
                st.button(
                    "Selecionado" if is_selected else "Selecionar",
                    key=f"select_{i}_{video.id}",
                    disabled=disabled,
                    on_click=on_select,
                    args=(video,),
                    width="stretch",
                )


def transcription_loading():
    st.markdown("#### DEGUSTANDO O CONTEÚDO...")
    st.caption("Transformando áudio em conhecimento para seu artigo.")


def _toggle_extra(state: WizardState, field: str):
    state.update_config(**{field: st.session_state[f"extra_{field}"]})


def article_config_panel(state: WizardState, disabled: bool, on_generate: Callable):
    """
    Display the article options for the selected video.

    Args:
        state: Wizard state holding the selected video and the config
        disabled: Whether the panel is read only
        on_generate: Function called when the generate button is pressed
    """
    left, right = st.columns(2)

    with left:
        with st.container(border=True):
            st.caption("✅ VÍDEO SELECIONADO")
            st.markdown(f"**{state.selected_video.title if state.selected_video else ''}**")
            st.caption("_Transcrição pronta com sucesso!_")

        st.caption("ESTILO DO ARTIGO")
        type_columns = st.columns(2)
        for i, (article_type, label) in enumerate(ARTICLE_TYPE_LABELS.items()):
            with type_columns[i % 2]:
                st.button(
                    label,
                    key=f"type_{article_type.value}",
                    type="primary" if state.config.type == article_type else "secondary",
                    disabled=disabled,
                    on_click=state.update_config,
                    kwargs={"type": article_type},
                    width="stretch",
                )

        st.text_input(
            "PALAVRAS-CHAVE SEO",
            value=", ".join(state.config.keywords),
            key="keywords_input",
            placeholder="Ex: churrasco, picanha, dicas...",
            disabled=disabled,
            on_change=lambda: state.update_keywords(st.session_state["keywords_input"]),
        )

    with right:
        with st.container(border=True):
            st.markdown("**⚙️ Adicionais do Chef**")
            extra_columns = st.columns(2)
            for i, (field, label) in enumerate(EXTRA_OPTIONS):
                with extra_columns[i % 2]:
                    st.checkbox(
                        label,
                        value=getattr(state.config, field),
                        key=f"extra_{field}",
                        disabled=disabled,
                        on_change=_toggle_extra,
                        args=(state, field),
                    )

        st.button(
            "🔥 COLOCAR NA BRASA (GERAR)",
            key="generate",
            type="primary",
            disabled=disabled or state.is_generating,
            on_click=on_generate,
            width="stretch",
        )
        st.caption("TEMPO ESTIMADO: 30-45 SEGUNDOS")


def article_loading():
    st.markdown("#### O BARÃO ESTÁ REDIGINDO...")
    st.caption("Estruturando H1, H2, otimizando densidade de palavras-chave e criando conteúdo de alto valor.")


def seo_sidebar(article: GeneratedArticle, on_reset: Callable):
    """Display the SEO metrics of a generated article."""
    st.metric("SEO SCORE", f"{article.seo_score:g}")
    st.progress(int(article.seo_score) / 100)

    st.metric("🕒 Leitura", f"{article.reading_time:g} min")
    st.metric("📄 Palavras", article.word_count)
    st.metric("# Heading Tags", article.heading_count)
    st.metric("📊 Densidade", article.keyword_density)

    st.button("➕ CRIAR NOVO ARTIGO", key="new_article", on_click=on_reset, width="stretch")


def article_view(article: GeneratedArticle, keywords: List[str]):
    """
    Display the generated article.

    Args:
        article: Generated article
        keywords: Keywords the article was optimized for
    """
    st.header(article.title)
    st.markdown(" ".join(f"`# {keyword}`" for keyword in keywords if keyword))
    st.divider()

    with st.container(height=800):
        st.markdown(sanitize_html(article.content), unsafe_allow_html=True)

    with st.expander("Meta tags"):
        st.code(article.meta_tags, language=None)
