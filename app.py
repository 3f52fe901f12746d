"""
LessonPlayer - Interactive lesson player for a programming course.

Streamlit host for the progression engine. Routes are carried in the
`path` query parameter (/lesson/{n}/chapter/{m}, /lesson-complete/{n}).

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from lessonplayer.classroom import (
    CatalogLoader,
    ChapterNavigator,
    build_lesson_list,
    parse_complete_path,
    parse_path,
    progress_fraction,
    resolve_chapter_content,
    step_progress,
)
from lessonplayer.config import load_settings
from lessonplayer.schemas import ProgressRecord


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)

st.set_page_config(
    page_title="LessonPlayer",
    page_icon="🧑‍💻",
    layout="wide",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()

    if "catalog" not in st.session_state:
        content_dir = st.session_state.settings.content_dir
        try:
            st.session_state.catalog = CatalogLoader(content_dir).load()
        except FileNotFoundError:
            st.session_state.catalog = None

    if "profile" not in st.session_state:
        # Local learner profile; a hosted deployment would load this from auth.
        st.session_state.profile = ProgressRecord(is_loaded=True, is_empty=False)

    if "locale" not in st.session_state:
        st.session_state.locale = st.session_state.settings.default_locale


def push(path: str):
    """Routing primitive handed to the navigator."""
    st.query_params["path"] = path
    st.rerun()


def record_completion(lesson_key: str, completed: int):
    """Profile owner side of a chapter-completion event."""
    st.session_state.profile = st.session_state.profile.with_completion(lesson_key, completed)


def get_navigator() -> ChapterNavigator:
    return ChapterNavigator(
        st.session_state.catalog,
        push=push,
        on_chapter_complete=record_completion,
    )


# -----------------------------------------------------------------------------
# Lesson List
# -----------------------------------------------------------------------------

def render_lesson_list():
    catalog = st.session_state.catalog
    profile = st.session_state.profile

    st.title("Lessons")
    for entry in build_lesson_list(catalog, profile):
        label = f"Lesson {entry.lesson_number} : {entry.title} {entry.progress_label}".strip()
        if st.button(label, key=entry.path, use_container_width=True, disabled=entry.chapter_to_start == 0):
            push(entry.path)
        if profile.shows_progress:
            st.progress(progress_fraction(entry.completed_count, entry.total_chapters))


# -----------------------------------------------------------------------------
# Chapter View
# -----------------------------------------------------------------------------

def render_chapter(path: str):
    """Render the chapter addressed by the route."""
    catalog = st.session_state.catalog
    cursor = parse_path(path)
    if cursor is None:
        st.info("Chapter not found.")
        return

    nav = get_navigator()
    params = {"lesson": str(cursor.lesson_number), "chapter": str(cursor.chapter_number)}
    total = nav.total_for(cursor)

    if total:
        current, steps = step_progress(cursor, total)
        st.progress((current + 1) / steps, text=f"Chapter {current + 1} of {steps}")

    content = resolve_chapter_content(catalog, st.session_state.locale, cursor.lesson_key, cursor.chapter_index)
    if content is not None:
        st.subheader(content.instruction.title)
        st.markdown(content.instruction.content)
        if content.instruction.hint:
            with st.expander("Show hint"):
                st.info(content.instruction.hint)

        code = st.text_area("Code", value=content.initial_code or "", height=200)
        if st.button("Check", type="primary"):
            passed = content.answer_code is not None and code.strip() == content.answer_code.strip()
            if not passed:
                st.error("Not quite. Try again.")
            nav.complete_chapter(params, passed)
        with st.expander("Show answer"):
            st.code(content.answer_code or "", language="python")

    flags = nav.flags(params)
    if flags is None:
        return

    col1, _, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("← Back", disabled=flags.back_disabled, use_container_width=True):
            nav.go_back(params)
    with col3:
        if st.button("Next →", disabled=flags.next_disabled, use_container_width=True):
            nav.go_next(params)


def render_lesson_complete(path: str):
    lesson_number = parse_complete_path(path)
    lesson = st.session_state.catalog.get_lesson(lesson_number) if lesson_number is not None else None
    if lesson is None:
        st.info("Lesson not found.")
    else:
        st.success(f"Lesson {lesson_number} : {lesson.title} complete!")
    if st.button("Back to lessons"):
        push("/")


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()

    if st.session_state.catalog is None:
        st.error(f"Content not found in {st.session_state.settings.content_dir}.")
        return

    locales = st.session_state.catalog.locales
    if locales:
        st.session_state.locale = st.sidebar.selectbox(
            "Language",
            locales,
            index=locales.index(st.session_state.locale) if st.session_state.locale in locales else 0,
        )

    path = st.query_params.get("path", "/")
    if path.startswith("/lesson-complete/"):
        render_lesson_complete(path)
    elif path.startswith("/lesson/"):
        render_chapter(path)
    else:
        render_lesson_list()


if __name__ == "__main__":
    main()
