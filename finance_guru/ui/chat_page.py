"""NiceGUI chat interface for the finance assistant."""

import asyncio

from nicegui import ui

from finance_guru.agent.conversation import ConversationController
from finance_guru.models.schemas import Message, Sender
from finance_guru.ui.topics import TOPIC_OPTIONS, topic_prompt

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .message-user {
        background: #3182ce;
        color: white;
        border-radius: 12px 12px 4px 12px;
        box-shadow: 0 2px 6px rgba(0, 0, 0, 0.15);
    }

    .message-bot {
        background: #edf2f7;
        color: #1a202c;
        border-radius: 12px 12px 12px 4px;
        box-shadow: 0 2px 6px rgba(0, 0, 0, 0.15);
    }
    .body--dark .message-bot { background: #2d3748; color: #f7fafc; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #3182ce;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-bot pre { margin: 0.5rem 0; overflow-x: auto; }
    .message-bot code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def scroll_to_latest(area: ui.scroll_area) -> None:
    """Scroll the message list so the newest entry is visible."""
    area.scroll_to(percent=1.0)


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each client gets its own conversation."""
    ui.add_head_html(CUSTOM_CSS)
    dark = ui.dark_mode()
    controller = ConversationController()
    current_topic: str | None = None

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button
    new_chat_btn: ui.button
    theme_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.sender == Sender.USER
        align = "justify-end" if is_user else "justify-start"

        with ui.row().classes(f"w-full {align}"):
            if is_user:
                with ui.element("div").classes("message-user px-4 py-3 max-w-[80%]"):
                    ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
            else:
                with ui.element("div").classes("message-bot px-4 py-3 max-w-[80%]"):
                    ui.markdown(msg.text).classes("text-sm leading-relaxed")

    def render_welcome() -> None:
        with ui.column().classes("w-full h-96 items-center justify-center gap-8"):
            ui.label("How can I help you today?").classes("text-2xl font-bold")
            with ui.row().classes("justify-center gap-3 flex-wrap"):
                for option in TOPIC_OPTIONS:
                    ui.button(
                        option, on_click=lambda _, topic=option: select_topic(topic)
                    ).props("outline rounded no-caps")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-bot px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label("AI is typing...").classes("text-sm italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not controller.messages and not controller.is_loading:
                render_welcome()
            else:
                for msg in controller.messages:
                    render_message(msg)
                if controller.is_loading:
                    render_typing_indicator()
        new_chat_btn.set_visibility(bool(controller.messages))
        send_btn.set_enabled(not controller.is_loading)
        scroll_to_latest(scroll_area)

    def select_topic(topic: str) -> None:
        nonlocal current_topic
        current_topic = topic
        input_field.value = topic_prompt(topic)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.is_loading:
            return

        pending = asyncio.create_task(controller.send_message(text, current_topic))
        # The user message is appended before the request suspends
        await asyncio.sleep(0)
        input_field.value = ""
        refresh_messages()

        await pending
        refresh_messages()

    def new_chat() -> None:
        nonlocal current_topic
        controller.reset_chat()
        current_topic = None
        input_field.value = ""
        refresh_messages()

    def toggle_theme() -> None:
        dark.toggle()
        theme_btn.props(f"icon={'light_mode' if dark.value else 'dark_mode'}")

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto h-screen gap-0"):
        # Header
        with ui.row().classes("w-full px-5 py-4 items-center border-b"):
            ui.label("AI Powered Finance Guru").classes(
                "text-2xl font-semibold flex-grow text-center"
            )
            theme_btn = ui.button(icon="dark_mode", on_click=toggle_theme).props(
                "flat round"
            )

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full") as scroll_area,
            ui.column().classes("w-full p-4"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-2 items-end border-t"):
            input_field = (
                ui.textarea(
                    placeholder="Type your message... (Enter to send, Shift+Enter for new line)"
                )
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.exact.prevent", send_message)
            )
            send_btn = ui.button("Send", on_click=send_message).props("unelevated")
            new_chat_btn = ui.button("New Chat", on_click=new_chat).props("outline")

    refresh_messages()


def main() -> None:
    ui.run(title="AI Powered Finance Guru", port=8080, reload=False)


if __name__ == "__main__":
    main()
