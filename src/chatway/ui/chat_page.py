"""NiceGUI chat interface."""

import logging
import os

from nicegui import ui

from chatway.gateway.router import SUPPORTED_MODELS
from chatway.models.schemas import Message, Role
from chatway.ui.client import ChatApiError, reset_conversation, send_turn
from chatway.ui.session import ChatSession

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body { background: #111827; min-height: 100vh; }

    .message-user { background: rgba(59, 130, 246, 0.1); }
    .message-assistant { background: rgba(34, 197, 94, 0.1); }
    .message-error {
        background: rgba(239, 68, 68, 0.1);
        border: 1px solid rgba(239, 68, 68, 0.5);
    }

    .message-assistant pre { margin: 0.5rem 0; overflow-x: auto; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().enable()

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role is Role.USER
        if msg.error:
            bubble = "message-error"
        else:
            bubble = "message-user justify-end" if is_user else "message-assistant"
        icon_color = "text-blue-400" if is_user else "text-green-400"

        with ui.row().classes(f"w-full p-4 rounded-lg gap-4 items-start no-wrap {bubble}"):
            ui.icon("chat_bubble_outline").classes(f"text-xl {icon_color}")
            with ui.column().classes("flex-1 min-w-0"):
                if msg.error:
                    with ui.row().classes("items-center gap-2 no-wrap"):
                        ui.icon("warning").classes("text-xl text-red-400")
                        ui.label(f"Error: {msg.content}").classes(
                            "text-red-400 whitespace-pre-wrap break-words"
                        )
                elif is_user:
                    ui.label(msg.content).classes(
                        "w-full text-right text-gray-100 whitespace-pre-wrap break-words"
                    )
                else:
                    ui.markdown(msg.content).classes("w-full text-gray-100 break-words")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-600")
                    ui.label("Start a conversation").classes("text-lg text-gray-500")
            else:
                for msg in session.messages:
                    render_message(msg)
        # Keep the newest message in view
        scroll_area.scroll_to(percent=1.0)

    def refresh_input() -> None:
        input_field.value = session.input_text
        if session.busy:
            input_field.disable()
            send_btn.props("loading")
        else:
            input_field.enable()
            send_btn.props(remove="loading")

    def on_change() -> None:
        refresh_messages()
        refresh_input()

    session = ChatSession(on_change=on_change)

    async def send_message() -> None:
        session.input_text = input_field.value or ""
        await session.submit(send_turn)

    async def clear_conversation() -> None:
        cleared = session.clear()
        try:
            await reset_conversation(cleared)
        except ChatApiError as e:
            logger.warning(f"Could not reset server history for {cleared}: {e}")
            ui.notify(f"Server history not cleared: {e}", type="warning")

    # === UI Layout ===
    with ui.column().classes("w-full h-screen gap-0 no-wrap"):
        # Header
        with ui.row().classes(
            "w-full bg-gray-800 p-4 border-b border-gray-700 items-center justify-between"
        ):
            with ui.row().classes("items-center gap-2"):
                ui.icon("chat_bubble_outline").classes("text-2xl text-blue-400")
                ui.label("Chat Way").classes("text-xl font-semibold text-gray-100")
            with ui.row().classes("items-center gap-4"):
                ui.select(
                    options=SUPPORTED_MODELS,
                    value=session.selected_model,
                    label="Select a model",
                ).bind_value(session, "selected_model").props("dense outlined").classes(
                    "w-56"
                )
                ui.button("Clear", icon="cancel", on_click=clear_conversation).props(
                    "outline color=red"
                )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-4 gap-4")

        # Input
        with ui.row().classes(
            "w-full bg-gray-800 p-4 border-t border-gray-700 gap-4 items-end no-wrap"
        ):
            input_field = (
                ui.textarea(placeholder="Type your message...")
                .props("autogrow outlined dense rows=1")
                .classes("flex-grow")
                # Shift+Enter falls through and inserts a newline
                .on("keydown.enter.exact.prevent", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "unelevated color=primary"
            )

    refresh_messages()


def main() -> None:
    ui.run(title="Chat Way", port=int(os.getenv("UI_PORT", "8080")), reload=False)


if __name__ == "__main__":
    main()
