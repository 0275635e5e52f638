def format_logins(logins: list[str], empty: str = "(none)") -> str:
    if not logins:
        return empty
    return "\n".join(logins)


def format_timestamp(value: str | None) -> str:
    # stored as "YYYY-MM-DD HH:MM:SS.fff"; milliseconds are noise on screen
    if not value:
        return "?"
    return value[:19]


def format_message(msg: dict) -> str:
    return (
        f"By: {msg['sender_login']}\n"
        f"On: {format_timestamp(msg['msg_timestamp'])}\n"
        f"MESSAGE\n"
        f"{msg['msg_text']}"
    )


def format_own_message(index: int, msg: dict) -> str:
    return (
        f"{index}. On: {format_timestamp(msg['msg_timestamp'])}\n"
        f"{index}. Message: {msg['msg_text']}"
    )


def format_chat_line(index: int, chat: dict) -> str:
    return f"{index}. {chat['chat_type'].capitalize()} chat started by {chat['init_sender']}"


def format_owned_chat(index: int, chat: dict) -> str:
    """One entry of the 'manageable chats' listing, members included."""
    lines = [f"{index}. Chat by: {chat['init_sender']}", "With:"]
    lines.extend(chat.get("members", []))
    lines.append("----------------------------")
    return "\n".join(lines)
