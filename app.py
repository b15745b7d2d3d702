"""
Streamlit AI Therapy Journal

Before running:
 - set GEMINI_API_KEY environment variable (or put it in a .env file)
   Windows: setx GEMINI_API_KEY "<your_key>"
   Linux/Mac: export GEMINI_API_KEY="<your_key>"
 - pip install -e .
 - streamlit run app.py
"""

import streamlit as st

from therapy_journal import charts, insights
from therapy_journal.aggregator import ALL_CATEGORIES, aggregate, filter_entries
from therapy_journal.chat import (
    ASSISTANT,
    USER,
    ChatMessage,
    TherapistChat,
    conversation_content,
    greeting_message,
)
from therapy_journal.config import configure_logging, load_settings
from therapy_journal.deriver import Category
from therapy_journal.entries import EntryCreated, JournalLog, reduce
from therapy_journal.moods import DEFAULT_MOOD, MOOD_CHOICES, mood_label

st.set_page_config(page_title="AI Therapy Journal", layout="wide")

settings = load_settings()
configure_logging(settings.log_level)

PREVIEW_CHARS = 200
MOOD_OPTIONS = {value: f"{emoji} {label}" for value, label, emoji in MOOD_CHOICES}

# ---------------------------
# Session state
# ---------------------------
if "journal" not in st.session_state:
    st.session_state["journal"] = JournalLog()
if "messages" not in st.session_state:
    st.session_state["messages"] = [greeting_message()]
if "mood" not in st.session_state:
    st.session_state["mood"] = DEFAULT_MOOD
if "chat" not in st.session_state:
    st.session_state["chat"] = TherapistChat(settings)


def send_message(text: str):
    """Run one chat turn; a completed turn becomes a journal entry."""
    messages = st.session_state["messages"]
    messages.append(ChatMessage(role=USER, text=text))
    res = st.session_state["chat"].reply(messages)
    if not res["success"]:
        st.session_state["chat_error"] = res["text"]
        return
    messages.append(ChatMessage(role=ASSISTANT, text=res["text"]))
    event = EntryCreated(conversation_content(text, res["text"]), st.session_state["mood"])
    st.session_state["journal"] = reduce(st.session_state["journal"], event)


def show_figure(fig, placeholder: str):
    if fig is None:
        st.info(placeholder)
        return
    st.pyplot(fig)
    charts.close(fig)


# ---------------------------
# Tabs
# ---------------------------
def render_chat():
    st.subheader("🤖 Your AI Therapist")
    st.caption("A safe space for your thoughts")
    if not settings.api_key:
        st.warning("GEMINI_API_KEY environment variable is missing. Set it to chat with the therapist.")

    for message in st.session_state["messages"]:
        with st.chat_message(message.role):
            st.markdown(message.text)
            st.caption(message.timestamp.strftime("%H:%M"))

    error = st.session_state.pop("chat_error", None)
    if error:
        st.error(error)

    with st.form("chat_form", clear_on_submit=True):
        user_text = st.text_area("Share what's on your mind...", height=100)
        submitted = st.form_submit_button("Send")
    if submitted:
        if not user_text.strip():
            st.warning("Please write something.")
        else:
            with st.spinner("Listening..."):
                send_message(user_text)
            st.rerun()


def render_journal(journal: JournalLog):
    st.subheader("📖 Journal Entries")
    st.caption(f"{len(journal)} entries recorded")
    category = st.selectbox(
        "Category", [ALL_CATEGORIES] + [c.value for c in Category], key="category_filter"
    )
    entries = filter_entries(journal, category)
    if not journal:
        st.info("No journal entries yet. Start a conversation to create your first entry!")
        return
    if not entries:
        st.info(f"No entries in {category}.")
        return

    for entry in entries:
        with st.container(border=True):
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"**{entry.title}**")
                st.caption(
                    f"📅 {entry.created_at.strftime('%m/%d/%Y')} at "
                    f"{entry.created_at.strftime('%H:%M')} · {entry.category}"
                )
            with col2:
                st.markdown(f"❤️ {mood_label(entry.mood)}")
            st.write(entry.summary)
            content = entry.content
            if len(content) > PREVIEW_CHARS:
                content = content[:PREVIEW_CHARS] + "..."
            st.text(content)


def render_analytics(journal: JournalLog):
    stats = aggregate(journal)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Average Mood", insights.format_mood(stats.average_mood))
    c2.metric("Total Entries", stats.total_entries)
    c3.metric(
        "Mood Trend",
        stats.trend_direction.title(),
        insights.format_trend(stats.trend),
        delta_color="normal" if stats.trend else "off",
    )
    c4.metric("Growth Points", len(insights.RECENT_GROWTH))

    col1, col2 = st.columns(2)
    with col1:
        show_figure(charts.plot_big_five(insights.BIG_FIVE), "")
    with col2:
        show_figure(charts.plot_mood_series(stats), "Not enough data to display trends")

    show_figure(charts.plot_distribution(stats), "No moods recorded yet.")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("🎯 Current Challenges")
        for challenge in insights.CURRENT_CHALLENGES:
            st.write(f"- {challenge}")
    with col2:
        st.subheader("💡 Recent Growth & Milestones")
        for growth in insights.RECENT_GROWTH:
            st.write(f"⭐ {growth}")

    st.subheader("🙏 Gratitude Moments")
    st.write(" · ".join(insights.GRATITUDE_ITEMS))

    st.subheader("Personal Insights & Affirmations")
    lines = insights.personal_insights(stats)
    if not lines:
        st.write(insights.EMPTY_INSIGHTS)
    else:
        st.info(f"**Today's Affirmation:** *\"{insights.AFFIRMATION}\"*")
        for line in lines:
            st.write(f"• {line}")


# ---------------------------
# Streamlit App Layout
# ---------------------------
st.title("AI Therapy Journal")
st.markdown("Your personal space for growth, reflection, and healing")

st.radio(
    "How are you feeling today?",
    list(MOOD_OPTIONS),
    format_func=lambda v: MOOD_OPTIONS[v],
    horizontal=True,
    key="mood",
)

chat_tab, journal_tab, analytics_tab = st.tabs(["💬 Chat", "📖 Journal", "📊 Analytics"])
with chat_tab:
    render_chat()
with journal_tab:
    render_journal(st.session_state["journal"])
with analytics_tab:
    render_analytics(st.session_state["journal"])

st.markdown("---")
st.caption("❤️ A safe space for your mental health journey. This tool is for reflection, not a medical diagnostic tool. In crisis, contact local emergency services or a professional.")
