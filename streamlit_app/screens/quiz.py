"""
Quiz screen - one question at a time with a progress bar.

Answering the last question scores the quiz, persists the skin type and moves
to the results screen.
"""

from typing import List

import streamlit as st

from layerit.models import Product
from layerit.navigation import NavigationAction
from utils.session import get_store
from utils.state import complete_quiz, get_quiz_state, go_to, reset_quiz


def render(catalog: List[Product]) -> None:
    quiz = get_quiz_state()
    question = quiz.current_question

    col_step, col_percent = st.columns([3, 1])
    with col_step:
        st.caption(f"Question {quiz.step + 1} of {quiz.total}")
    with col_percent:
        st.caption(f"**{round(quiz.progress)}%**")
    st.progress(int(round(quiz.progress)))

    with st.container(border=True):
        st.markdown(f"## 💭 {question.question}")
        st.caption("Choose the option that best describes you")

        for idx, option in enumerate(question.options):
            if st.button(f"{option.emoji}  {option.text}", key=f"quiz_option_{quiz.step}_{idx}", width="stretch"):
                skin_type = quiz.answer(option.value)
                if skin_type is not None:
                    complete_quiz(get_store(), skin_type)
                st.rerun()

    if st.button("🏠 Back to home", key="quiz_back_home"):
        reset_quiz()
        go_to(NavigationAction.BACK_HOME)
        st.rerun()
