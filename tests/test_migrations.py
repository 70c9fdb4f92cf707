"""Sanity checks on the row level security migrations shipped with the relay."""

import re
from pathlib import Path

MIGRATIONS = Path(__file__).resolve().parent.parent / "supabase" / "migrations"


def _sql():
    return "\n".join(p.read_text(encoding="utf-8") for p in sorted(MIGRATIONS.glob("*.sql"))).lower()


def _policy(sql, name):
    match = re.search(rf'create policy "{name}" on (\w+)\s+(.*?);', sql, re.S)
    assert match, f"policy {name} missing"
    return match.group(1), " ".join(match.group(2).split())


def test_rls_enabled_on_every_table():
    sql = _sql()
    for table in ("chats", "chat_members", "messages", "doctors"):
        assert f"alter table {table} enable row level security" in sql


def test_chat_policies():
    sql = _sql()
    table, body = _policy(sql, "chats_select_if_member")
    assert table == "chats" and "for select" in body and "cm.user_id = auth.uid()" in body
    table, body = _policy(sql, "chats_insert_allowed")
    assert table == "chats" and "with check (created_by = auth.uid())" in body


def test_membership_and_message_policies():
    sql = _sql()
    assert "user_id = auth.uid()" in _policy(sql, "members_select_if_member")[1]
    assert "with check (user_id = auth.uid())" in _policy(sql, "members_insert_for_self")[1]
    assert "cm.chat_id = messages.chat_id" in _policy(sql, "messages_select_if_member")[1]
    assert "with check (sender_id = auth.uid())" in _policy(sql, "messages_insert_sender_is_auth")[1]


def test_doctors_catalog_public_read_service_write():
    sql = _sql()
    assert "for select using (true)" in _policy(sql, "doctors_read_all")[1]
    body = _policy(sql, "doctors_service_write")[1]
    assert "for all" in body and body.count("auth.role() = 'service_role'") == 2
