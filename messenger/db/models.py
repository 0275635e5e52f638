SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS user_list (
        list_id INTEGER PRIMARY KEY AUTOINCREMENT,
        list_type TEXT NOT NULL CHECK(list_type IN ('block', 'contact'))
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS usr (
        login TEXT PRIMARY KEY,
        phoneNum TEXT,
        password TEXT NOT NULL,
        block_list INTEGER NOT NULL REFERENCES user_list(list_id),
        contact_list INTEGER NOT NULL REFERENCES user_list(list_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_list_contains (
        list_id INTEGER NOT NULL REFERENCES user_list(list_id) ON DELETE CASCADE,
        list_member TEXT NOT NULL REFERENCES usr(login) ON DELETE CASCADE,
        PRIMARY KEY (list_id, list_member)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS chat (
        chat_id INTEGER PRIMARY KEY AUTOINCREMENT,
        chat_type TEXT NOT NULL CHECK(chat_type IN ('private', 'public')),
        init_sender TEXT NOT NULL REFERENCES usr(login)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS chat_list (
        chat_id INTEGER NOT NULL REFERENCES chat(chat_id),
        member TEXT NOT NULL REFERENCES usr(login) ON DELETE CASCADE,
        PRIMARY KEY (chat_id, member)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS message (
        msg_id INTEGER PRIMARY KEY AUTOINCREMENT,
        msg_text TEXT NOT NULL,
        msg_timestamp TIMESTAMP NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now')),
        sender_login TEXT NOT NULL REFERENCES usr(login) ON DELETE CASCADE,
        chat_id INTEGER NOT NULL REFERENCES chat(chat_id)
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_message_chat
    ON message(chat_id, msg_timestamp)
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_chat_list_member
    ON chat_list(member)
    """,
]
